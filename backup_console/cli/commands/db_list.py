"""
db:list - show the contents of a backup storage directory
"""

from typing import List, Optional

from backup_console.cli.console import Console
from backup_console.cli.core import Command, list_entries, storage_root
from backup_console.config import WizardSettings
from backup_console.engine import StorageRegistry
from backup_console.wizard import ParameterSet, ParameterSpec


class DbListCommand(Command):
    name = 'db:list'
    description = 'List contents of a backup storage destination.'
    options = [
        ('source', 'Source configuration name'),
        ('path', 'Directory path'),
    ]

    def __init__(self, console: Console, filesystems: StorageRegistry, settings: Optional[WizardSettings] = None):
        super().__init__(console, settings)
        self.filesystems = filesystems

    def parameters(self) -> List[ParameterSpec]:
        return [
            ParameterSpec(
                name='source',
                question='From which source do you want to list?',
                choices=self.filesystems.get_available_providers,
                choices_label='Available sources',
            ),
            ParameterSpec(
                name='path',
                question='From which path?',
                root=lambda values: storage_root(self.filesystems, values.get('source')),
            ),
        ]

    def summary(self, values: ParameterSet) -> str:
        c = self.console.comment
        root = storage_root(self.filesystems, values['source'])
        return f"Do you want to list files from {c(root + values['path'])} on {c(values['source'])}?"

    def fire(self, values: ParameterSet) -> int:
        self.show_contents(list_entries(self.filesystems, values['source'], values['path']))
        return 0
