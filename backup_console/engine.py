"""
Interfaces of the external backup engine

The engine (database dumps, storage adapters, compressors, shell
execution) is not part of this package. Its components are located by
dotted path ("package.module:Attribute") from the `engine` config section
and are expected to honour the protocols below. Commands are typed against
these protocols, not against engine classes.
"""

import importlib
from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

from backup_console.exceptions import EngineNotAvailable
from backup_console.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class DatabaseRegistry(Protocol):
    """Named database connections the engine can dump to and restore from."""

    def get_available_providers(self) -> List[str]:
        ...


@runtime_checkable
class Filesystem(Protocol):
    """A single storage destination."""

    def list_contents(self, path: str) -> List[Dict[str, Any]]:
        """
        List a directory.

        Each entry carries 'type' ('file' or 'dir'), 'basename',
        'extension', 'size' and 'timestamp' keys.
        """
        ...


@runtime_checkable
class StorageRegistry(Protocol):
    """Named storage destinations."""

    def get_available_providers(self) -> List[str]:
        ...

    def get_config(self, name: str, key: str) -> Optional[str]:
        ...

    def get(self, name: str) -> Filesystem:
        ...


@runtime_checkable
class CompressorRegistry(Protocol):
    def get_available_providers(self) -> List[str]:
        ...


@runtime_checkable
class BackupProcedure(Protocol):
    def run(self, database: str, destination: str, destination_path: str, compression: str) -> None:
        ...


@runtime_checkable
class RestoreProcedure(Protocol):
    def run(self, source: str, source_path: str, database: str, compression: str) -> None:
        ...


def load_component(path: str) -> Any:
    """
    Import an engine component from a "module:attribute" path.

    Raises:
        EngineNotAvailable: If the module or attribute cannot be found
    """
    module_name, sep, attribute = path.partition(':')
    if not sep or not module_name or not attribute:
        raise EngineNotAvailable(
            f"Invalid engine component '{path}'. Expected 'module:Attribute'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise EngineNotAvailable(
            f"Backup engine module '{module_name}' is not installed ({e}). "
            f"Install the engine or point the 'engine' config section at it."
        ) from e

    obj = module
    for part in attribute.split('.'):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise EngineNotAvailable(f"'{module_name}' has no attribute '{attribute}'") from None

    logger.debug(f"Loaded engine component: {path}")
    return obj


def load_components(paths: Sequence[str]) -> List[Any]:
    """Import several components, keeping their order."""
    return [load_component(path) for path in paths]
