"""
db:backup - dump a database and store it on a storage service
"""

from typing import List, Optional

from backup_console.cli.console import Console
from backup_console.cli.core import Command, storage_root
from backup_console.config import WizardSettings
from backup_console.engine import BackupProcedure, CompressorRegistry, DatabaseRegistry, StorageRegistry
from backup_console.logger import get_logger
from backup_console.wizard import ParameterSet, ParameterSpec

logger = get_logger(__name__)


class DbBackupCommand(Command):
    """Create database dump and save it on a service"""

    name = 'db:backup'
    description = 'Create database dump and save it on a service'
    options = [
        ('database', 'Database configuration name'),
        ('destination', 'Destination configuration name'),
        ('destinationPath', 'File destination path'),
        ('compression', 'Compression type'),
    ]

    def __init__(
        self,
        console: Console,
        backup_procedure: BackupProcedure,
        databases: DatabaseRegistry,
        filesystems: StorageRegistry,
        compressors: CompressorRegistry,
        settings: Optional[WizardSettings] = None
    ):
        super().__init__(console, settings)
        self.backup_procedure = backup_procedure
        self.databases = databases
        self.filesystems = filesystems
        self.compressors = compressors

    def parameters(self) -> List[ParameterSpec]:
        return [
            ParameterSpec(
                name='database',
                question='From which database connection you want to dump?',
                choices=self.databases.get_available_providers,
                choices_label='Available database connections',
            ),
            ParameterSpec(
                name='destination',
                question='To which storage service you want to save?',
                choices=self.filesystems.get_available_providers,
                choices_label='Available storage services',
            ),
            ParameterSpec(
                name='destinationPath',
                question='How do you want to name the backup?',
                root=lambda values: storage_root(self.filesystems, values.get('destination')),
            ),
            ParameterSpec(
                name='compression',
                question='Which compression type you want to use?',
                choices=self.compressors.get_available_providers,
                choices_label='Available compression types',
            ),
        ]

    def summary(self, values: ParameterSet) -> str:
        c = self.console.comment
        root = storage_root(self.filesystems, values['destination'])
        return (
            f"Do you want to create a backup of {c(values['database'])}, "
            f"store it on {c(values['destination'])} at {c(root + values['destinationPath'])} "
            f"and compress it to {c(values['compression'])}?"
        )

    def fire(self, values: ParameterSet) -> int:
        self.console.info('Dumping database and uploading...')
        logger.info(f"Backing up '{values['database']}' to '{values['destination']}'")

        self.backup_procedure.run(
            values['database'],
            values['destination'],
            values['destinationPath'],
            values['compression'],
        )

        self.console.line()
        c = self.console.comment
        root = storage_root(self.filesystems, values['destination'])
        self.console.info(
            f"Successfully dumped {c(values['database'])}, "
            f"compressed with {c(values['compression'])} "
            f"and store it to {c(values['destination'])} at {c(root + values['destinationPath'])}"
        )
        return 0
