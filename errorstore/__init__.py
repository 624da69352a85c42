"""Registry of application error codes and their API response metadata."""

from errorstore.domain.descriptor import ErrorDescriptor
from errorstore.errors import (
    DuplicateCodeError,
    DuplicateNameError,
    ErrorStoreError,
    RegistryError,
)
from errorstore.services.registry import ErrorRegistry, build_registry

__all__ = [
    "DuplicateCodeError",
    "DuplicateNameError",
    "ErrorDescriptor",
    "ErrorRegistry",
    "ErrorStoreError",
    "RegistryError",
    "build_registry",
]
