"""
Dependency container

Maps service names to factory callables. Factories receive the container
so they can resolve their own dependencies.
"""

from typing import Any, Callable, Dict, List

from backup_console.exceptions import BindingNotFound
from backup_console.logger import get_logger

logger = get_logger(__name__)

Factory = Callable[['Container'], Any]


class Container:
    """Registry of service factories and shared instances"""

    def __init__(self):
        self._factories: Dict[str, Factory] = {}
        self._shared: Dict[str, bool] = {}
        self._instances: Dict[str, Any] = {}

    def bind(self, name: str, factory: Factory, shared: bool = False) -> None:
        """
        Register a factory under a name.

        Args:
            name: Service identifier (e.g., 'filesystems')
            factory: Callable taking the container, returning the service
            shared: Build once and reuse the instance on later resolves
        """
        self._factories[name] = factory
        self._shared[name] = shared
        self._instances.pop(name, None)
        logger.debug(f"Bound service: {name}{' (shared)' if shared else ''}")

    def singleton(self, name: str, factory: Factory) -> None:
        """Register a factory whose result is built once."""
        self.bind(name, factory, shared=True)

    def instance(self, name: str, obj: Any) -> None:
        """Register an already-built object."""
        self._factories.pop(name, None)
        self._shared[name] = True
        self._instances[name] = obj

    def bound(self, name: str) -> bool:
        """Check if a name is registered"""
        return name in self._instances or name in self._factories

    def make(self, name: str) -> Any:
        """
        Resolve a service by name.

        Raises:
            BindingNotFound: If nothing is registered under the name
        """
        if name in self._instances:
            return self._instances[name]

        factory = self._factories.get(name)
        if factory is None:
            raise BindingNotFound(name)

        logger.debug(f"Resolving service: {name}")
        obj = factory(self)

        if self._shared.get(name):
            self._instances[name] = obj

        return obj

    def bindings(self) -> List[str]:
        """All registered names, in registration order."""
        names = list(self._factories)
        names.extend(n for n in self._instances if n not in self._factories)
        return names
