"""
backup-manager-console configuration

Defaults live here as module constants; the host configuration file and a
few environment variables override them.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from backup_console.exceptions import ConfigError
from backup_console.logger import get_logger

logger = get_logger(__name__)

VERSION = '1.0.0'

# Host configuration file
DEFAULT_CONFIG_PATH = Path.home() / '.config' / 'backup-manager' / 'config.yml'
CONFIG_PATH_ENV = 'BACKUP_MANAGER_CONFIG'

# Logging
LOG_LEVEL = os.environ.get('BACKUP_MANAGER_LOG_LEVEL')
LOG_FILE = os.environ.get('BACKUP_MANAGER_LOG_FILE')

# Database drivers the engine can dump, with their default ports
SUPPORTED_DRIVERS = {
    'mysql': '3306',
    'pgsql': '5432',
}

# Engine components, addressed as "module:attribute"
ENGINE_DEFAULTS: Dict[str, Any] = {
    'config': 'backup_manager.config:Config',
    'filesystem_provider': 'backup_manager.filesystems:FilesystemProvider',
    'filesystems': [
        'backup_manager.filesystems:Awss3Filesystem',
        'backup_manager.filesystems:DropboxFilesystem',
        'backup_manager.filesystems:FtpFilesystem',
        'backup_manager.filesystems:LocalFilesystem',
        'backup_manager.filesystems:RackspaceFilesystem',
        'backup_manager.filesystems:SftpFilesystem',
    ],
    'database_provider': 'backup_manager.databases:DatabaseProvider',
    'databases': [
        'backup_manager.databases:MysqlDatabase',
        'backup_manager.databases:PostgresqlDatabase',
    ],
    'compressor_provider': 'backup_manager.compressors:CompressorProvider',
    'compressors': [
        'backup_manager.compressors:GzipCompressor',
        'backup_manager.compressors:NullCompressor',
    ],
    'shell_processor': 'backup_manager.shell_processing:ShellProcessor',
    'backup_procedure': 'backup_manager.procedures:BackupProcedure',
    'restore_procedure': 'backup_manager.procedures:RestoreProcedure',
}

_TRUTHY = ('true', '1', 'yes', 'on')


@dataclass
class WizardSettings:
    """Knobs for the argument wizard."""

    max_retries: Optional[int] = None
    strict_choices: bool = False


@dataclass
class AppConfig:
    """Host configuration consumed by the service provider and commands."""

    storage: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    database_connections: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    engine: Dict[str, Any] = field(default_factory=lambda: dict(ENGINE_DEFAULTS))
    wizard: WizardSettings = field(default_factory=WizardSettings)
    source: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[Path] = None) -> 'AppConfig':
        """Build config from a parsed configuration mapping."""
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping, got {type(data).__name__}")

        storage = data.get('storage') or {}
        database = data.get('database') or {}
        connections = database.get('connections') or {}

        engine = dict(ENGINE_DEFAULTS)
        engine.update(data.get('engine') or {})

        wizard_data = data.get('wizard') or {}
        if not isinstance(wizard_data, dict):
            raise ConfigError("'wizard' must be a mapping of settings")
        wizard = WizardSettings(
            max_retries=_parse_retries(wizard_data.get('max_retries'), 'wizard.max_retries'),
            strict_choices=_parse_flag(wizard_data.get('strict_choices', False)),
        )

        for section, value in (('storage', storage), ('database.connections', connections)):
            if not isinstance(value, dict):
                raise ConfigError(f"'{section}' must be a mapping of names to options")

        return cls(
            storage=storage,
            database_connections=connections,
            engine=engine,
            wizard=wizard,
            source=source,
        )


def _parse_retries(value: Any, setting: str) -> Optional[int]:
    if value is None or value == '':
        return None
    # YAML reads "yes"/"true" as booleans, which int() would accept
    if isinstance(value, bool):
        raise ConfigError(f"{setting} must be an integer, got '{value}'")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{setting} must be an integer, got '{value}'") from None


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _parse_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path) as f:
            if path.suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load configuration {path}: {e}") from e

    return data or {}


def _apply_env_overrides(config: AppConfig) -> None:
    max_retries = os.environ.get('BACKUP_MANAGER_MAX_RETRIES')
    if max_retries:
        config.wizard.max_retries = _parse_retries(max_retries, 'BACKUP_MANAGER_MAX_RETRIES')

    strict = os.environ.get('BACKUP_MANAGER_STRICT_CHOICES')
    if strict:
        config.wizard.strict_choices = _parse_flag(strict)


def load_config(path: Optional[Path] = None) -> AppConfig:
    """
    Load the host configuration.

    Args:
        path: Explicit config file. Falls back to $BACKUP_MANAGER_CONFIG,
              then to ~/.config/backup-manager/config.yml.

    Returns:
        AppConfig instance

    Raises:
        ConfigError: If an explicitly requested file is missing or invalid
    """
    explicit = path is not None or CONFIG_PATH_ENV in os.environ
    if path is None:
        path = Path(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)).expanduser()

    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug(f"No config file at {path}, using empty configuration")
        config = AppConfig()
    else:
        logger.debug(f"Loading configuration from {path}")
        config = AppConfig.from_dict(_parse_file(path), source=path)

    _apply_env_overrides(config)
    return config
