"""
Dependency Injection Container.

Provides centralized service registration, lifecycle management,
and dependency resolution for the application.

Usage:
    from teamlog.core.container import get_container

    container = get_container()
    container.register("exporter", ReportExporter)
    exporter = container.get("exporter")
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

logger = logging.getLogger(__name__)

# Factory type: either a class or a callable that takes the container
Factory = Union[type, Callable[["ServiceContainer"], Any]]


class ServiceContainer:
    """
    Dependency injection container for managing service lifecycles.

    Features:
    - Lazy initialization (services created on first access)
    - Singleton by default (or transient per-request)
    - Dependency injection via factory functions
    - Easy testing via service overrides
    """

    def __init__(self):
        self._factories: Dict[str, Factory] = {}
        self._instances: Dict[str, Any] = {}
        self._singleton_flags: Dict[str, bool] = {}

    def register(
        self,
        name: str,
        factory: Factory,
        singleton: bool = True,
    ) -> None:
        """
        Register a service factory.

        Args:
            name: Service name/key
            factory: Class or callable that creates the service.
                     If callable, receives the container as argument.
            singleton: If True (default), cache the instance.
        """
        self._factories[name] = factory
        self._singleton_flags[name] = singleton
        # Clear any cached instance if overriding
        self._instances.pop(name, None)
        logger.debug(f"Registered service: {name} (singleton={singleton})")

    def register_instance(self, name: str, instance: Any) -> None:
        """Register a pre-existing instance."""
        self._factories.pop(name, None)
        self._instances[name] = instance
        self._singleton_flags[name] = True
        logger.debug(f"Registered instance: {name}")

    def get(self, name: str) -> Any:
        """
        Get a service by name.

        Raises:
            KeyError: If service is not registered
        """
        if name in self._instances and self._singleton_flags.get(name, True):
            return self._instances[name]

        if name not in self._factories:
            raise KeyError(f"Service '{name}' is not registered")

        factory = self._factories[name]
        if callable(factory) and not isinstance(factory, type):
            # Factory function, pass container
            instance = factory(self)
        else:
            instance = factory()

        if self._singleton_flags.get(name, True):
            self._instances[name] = instance
            logger.debug(f"Created singleton instance: {name}")
        else:
            logger.debug(f"Created transient instance: {name}")

        return instance

    def has(self, name: str) -> bool:
        """Check if a service is registered."""
        return name in self._factories or name in self._instances

    def clear(self) -> None:
        """Clear all registrations and instances."""
        self._factories.clear()
        self._instances.clear()
        self._singleton_flags.clear()
        logger.debug("Container cleared")


# Global container instance
_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the global service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Reset the global container (useful for testing)."""
    global _container
    if _container is not None:
        _container.clear()
    _container = ServiceContainer()
    logger.debug("Global container reset")
