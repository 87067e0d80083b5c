"""
Service provider wiring the backup engine into the container

Every binding is a factory: nothing from the engine is imported or built
until a command resolves it.
"""

from typing import Any, Dict, List, Optional

from backup_console.cli.commands import DbBackupCommand, DbListCommand, DbRestoreCommand
from backup_console.cli.console import Console
from backup_console.config import SUPPORTED_DRIVERS, AppConfig
from backup_console.container import Container
from backup_console.engine import load_component, load_components
from backup_console.logger import get_logger

logger = get_logger(__name__)


class BackupManagerServiceProvider:
    """Registers the engine registries, procedures and db:* commands"""

    def __init__(self, container: Container, config: AppConfig):
        self.container = container
        self.config = config

    def register(self) -> None:
        """Register every service in the container."""
        self.register_filesystem_provider()
        self.register_database_provider()
        self.register_compressor_provider()
        self.register_shell_processor()
        self.register_procedures()
        self.register_commands()

    def provides(self) -> List[str]:
        """Names of the engine services this provider registers."""
        return ['filesystems', 'databases', 'compressors', 'shell_processor']

    def _component(self, key: str) -> Any:
        return load_component(self.config.engine[key])

    def _components(self, key: str) -> List[Any]:
        return load_components(self.config.engine.get(key) or [])

    # ------------------------------------------------------------------
    # Engine registries
    # ------------------------------------------------------------------
    def register_filesystem_provider(self) -> None:
        def factory(container: Container):
            config_cls = self._component('config')
            provider = self._component('filesystem_provider')(config_cls(self.config.storage))
            for filesystem in self._components('filesystems'):
                provider.add(filesystem())
            return provider

        self.container.bind('filesystems', factory)

    def register_database_provider(self) -> None:
        def factory(container: Container):
            config_cls = self._component('config')
            mapped = self.database_config(self.config.database_connections)
            provider = self._component('database_provider')(config_cls(mapped))
            for database in self._components('databases'):
                provider.add(database())
            return provider

        self.container.bind('databases', factory)

    def register_compressor_provider(self) -> None:
        def factory(container: Container):
            provider = self._component('compressor_provider')()
            for compressor in self._components('compressors'):
                provider.add(compressor())
            return provider

        self.container.bind('compressors', factory)

    def register_shell_processor(self) -> None:
        self.container.bind('shell_processor', lambda c: self._component('shell_processor')())

    def register_procedures(self) -> None:
        def procedure(key: str):
            def factory(container: Container):
                return self._component(key)(
                    container.make('filesystems'),
                    container.make('databases'),
                    container.make('compressors'),
                    container.make('shell_processor'),
                )
            return factory

        self.container.bind('backup_procedure', procedure('backup_procedure'))
        self.container.bind('restore_procedure', procedure('restore_procedure'))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def register_commands(self) -> None:
        if not self.container.bound('console'):
            self.container.singleton('console', lambda c: Console())

        settings = self.config.wizard

        self.container.bind(f'command.{DbBackupCommand.name}', lambda c: DbBackupCommand(
            c.make('console'),
            c.make('backup_procedure'),
            c.make('databases'),
            c.make('filesystems'),
            c.make('compressors'),
            settings,
        ))
        self.container.bind(f'command.{DbRestoreCommand.name}', lambda c: DbRestoreCommand(
            c.make('console'),
            c.make('restore_procedure'),
            c.make('filesystems'),
            c.make('databases'),
            c.make('compressors'),
            settings,
        ))
        self.container.bind(f'command.{DbListCommand.name}', lambda c: DbListCommand(
            c.make('console'),
            c.make('filesystems'),
            settings,
        ))

    # ------------------------------------------------------------------
    # Host configuration mapping
    # ------------------------------------------------------------------
    @staticmethod
    def database_config(connections: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Optional[str]]]:
        """
        Translate host database connections into engine database config.

        Connections whose driver the engine cannot dump are left out.
        A missing port falls back to the driver's default.
        """
        mapped = {}
        for name, connection in connections.items():
            driver = connection.get('driver')
            if driver not in SUPPORTED_DRIVERS:
                logger.debug(f"Skipping connection '{name}' with unsupported driver '{driver}'")
                continue

            port = connection.get('port')
            mapped[name] = {
                'type': driver,
                'host': connection.get('host'),
                'port': str(port) if port is not None else SUPPORTED_DRIVERS[driver],
                'user': connection.get('username'),
                'pass': connection.get('password'),
                'database': connection.get('database'),
            }
        return mapped
