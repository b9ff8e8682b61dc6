"""
Domain exceptions package.
"""

# Base exceptions
from mutstd.domain.exceptions.base import CatalogError

# Decode exceptions
from mutstd.domain.exceptions.decode_exceptions import (
    DecodeError,
    FieldMissingError,
    MalformedDocumentError,
    TypeMismatchError,
    UnsupportedModifierError,
)

# Modifier exceptions
from mutstd.domain.exceptions.modifier_exceptions import (
    InvalidModifierComboError,
)

__all__ = [
    # Base
    "CatalogError",
    # Decode
    "DecodeError",
    "FieldMissingError",
    "TypeMismatchError",
    "UnsupportedModifierError",
    "MalformedDocumentError",
    # Modifier
    "InvalidModifierComboError",
]
