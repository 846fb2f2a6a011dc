"""
Provider Factory - Registry and factory for input provider creation.

Providers register themselves with the registry and are created by name,
so the CLI and the explorer can pick one from configuration.
"""

from typing import Dict, List, Type
import logging

from .protocol import InputProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry for available input providers."""

    _providers: Dict[str, Type[InputProvider]] = {}

    @classmethod
    def register(cls, name: str, provider_class: Type[InputProvider]) -> None:
        """
        Register a provider implementation.

        Args:
            name: Provider name (e.g., "concrete", "random")
            provider_class: Class implementing InputProvider
        """
        key = name.lower()
        if key in cls._providers:
            logger.warning(
                f"Provider '{key}' already registered. Overwriting with {provider_class}"
            )

        cls._providers[key] = provider_class
        logger.debug(f"Registered provider: {key} -> {provider_class.__name__}")

    @classmethod
    def create(cls, name: str, **kwargs) -> InputProvider:
        """
        Create a provider instance by name.

        Raises:
            ValueError: If the name is not registered
        """
        key = name.lower()
        if key not in cls._providers:
            available = ", ".join(cls._providers.keys())
            raise ValueError(
                f"Unknown provider: {name}. "
                f"Available providers: {available}"
            )

        return cls._providers[key](**kwargs)

    @classmethod
    def list_providers(cls) -> List[str]:
        return list(cls._providers.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name.lower() in cls._providers

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister a provider (mainly for testing)."""
        key = name.lower()
        if key in cls._providers:
            del cls._providers[key]
            logger.debug(f"Unregistered provider: {key}")


def create_provider(name: str, **kwargs) -> InputProvider:
    """
    Convenience function to create a provider.

    Example:
        >>> provider = create_provider("concrete", assignment=b"99999999")
        >>> provider = create_provider("random", seed=7)
    """
    return ProviderRegistry.create(name, **kwargs)


def register_provider(name: str):
    """
    Decorator for registering provider classes.

    Example:
        @register_provider("concrete")
        class ConcreteInputProvider:
            ...
    """

    def decorator(cls):
        ProviderRegistry.register(name, cls)
        return cls

    return decorator
