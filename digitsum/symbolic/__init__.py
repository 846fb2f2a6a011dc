"""
Symbolic input providers.

Usage:
    from digitsum.symbolic import create_provider

    provider = create_provider("concrete", assignment=b"9A9")
    provider = create_provider("random", seed=7)
"""

from .protocol import InputProvider, ProviderExhausted
from .factory import ProviderRegistry, create_provider, register_provider
from .providers import ConcreteInputProvider, RandomInputProvider, SequenceInputProvider

__all__ = [
    "InputProvider",
    "ProviderExhausted",
    "ProviderRegistry",
    "create_provider",
    "register_provider",
    "ConcreteInputProvider",
    "RandomInputProvider",
    "SequenceInputProvider",
]
