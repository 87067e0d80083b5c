"""
db:restore - download a database dump and import it
"""

from typing import List, Optional

from backup_console.cli.console import Console
from backup_console.cli.core import Command, list_entries, storage_root
from backup_console.config import WizardSettings
from backup_console.engine import CompressorRegistry, DatabaseRegistry, RestoreProcedure, StorageRegistry
from backup_console.listing import file_names
from backup_console.logger import get_logger
from backup_console.wizard import ParameterSet, ParameterSpec

logger = get_logger(__name__)


class DbRestoreCommand(Command):
    """Restore a database backup"""

    name = 'db:restore'
    description = 'Restore a database backup.'
    options = [
        ('source', 'Source configuration name'),
        ('sourcePath', 'Source path from service'),
        ('database', 'Database configuration name'),
        ('compression', 'Compression type'),
    ]

    def __init__(
        self,
        console: Console,
        restore_procedure: RestoreProcedure,
        filesystems: StorageRegistry,
        databases: DatabaseRegistry,
        compressors: CompressorRegistry,
        settings: Optional[WizardSettings] = None
    ):
        super().__init__(console, settings)
        self.restore_procedure = restore_procedure
        self.filesystems = filesystems
        self.databases = databases
        self.compressors = compressors

    def parameters(self) -> List[ParameterSpec]:
        return [
            ParameterSpec(
                name='source',
                question='From which storage service do you want to choose?',
                choices=self.filesystems.get_available_providers,
                choices_label='Available storage services',
            ),
            ParameterSpec(
                name='sourcePath',
                question='From which path do you want to select?',
                ask=self.pick_dump,
            ),
            ParameterSpec(
                name='database',
                question='From which database connection you want to dump?',
                choices=self.databases.get_available_providers,
                choices_label='Available database connections',
            ),
            ParameterSpec(
                name='compression',
                question='Which compression type you want to use?',
                choices=self.compressors.get_available_providers,
                choices_label='Available compression types',
            ),
        ]

    def pick_dump(self, spec: ParameterSpec, values: ParameterSet) -> str:
        """
        Ask for a directory, then for one of the dumps stored in it.

        Directories are listed but cannot be picked. A directory without
        any dump asks for another directory.
        """
        source = values['source']
        root = storage_root(self.filesystems, source)

        while True:
            path = self.console.ask(f"{spec.question} {self.console.comment(root)}")
            self.console.line()

            entries = list_entries(self.filesystems, source, path)
            files = file_names(entries)
            if files:
                break

            self.console.info('No backups were found at this path.')
            self.console.line()

        self.console.info('Available database dumps:')
        self.show_contents(entries)

        while True:
            filename = self.console.ask_with_completion('Which database dump do you want to restore?', files)
            if not filename:
                continue
            if self.settings.strict_choices and filename not in files:
                self.console.error(f"'{filename}' is not one of: {', '.join(files)}")
                continue
            break

        if not path:
            return filename
        return f"{path.rstrip('/')}/{filename}"

    def summary(self, values: ParameterSet) -> str:
        c = self.console.comment
        root = storage_root(self.filesystems, values['source'])
        return (
            f"Do you want to restore the backup {c(root + values['sourcePath'])} "
            f"from {c(values['source'])} to database {c(values['database'])} "
            f"and decompress it from {c(values['compression'])}?"
        )

    def fire(self, values: ParameterSet) -> int:
        self.console.info('Downloading and importing backup...')
        logger.info(f"Restoring '{values['sourcePath']}' from '{values['source']}' into '{values['database']}'")

        self.restore_procedure.run(
            values['source'],
            values['sourcePath'],
            values['database'],
            values['compression'],
        )

        self.console.line()
        c = self.console.comment
        root = storage_root(self.filesystems, values['source'])
        self.console.info(
            f"Successfully restored {c(root + values['sourcePath'])} "
            f"from {c(values['source'])} to database {c(values['database'])}."
        )
        return 0
