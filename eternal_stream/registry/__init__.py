from eternal_stream.registry.core import (
    Registry,
    RegistryError,
    UnknownDomainError,
    WordPools,
    default_registry,
    default_words,
)

__all__ = [
    "Registry",
    "RegistryError",
    "UnknownDomainError",
    "WordPools",
    "default_registry",
    "default_words",
]
