"""
Decoding exceptions.

Raised while converting raw catalog entries into Emoji records. Any of
these aborts the whole batch.
"""

from typing import Optional

from mutstd.domain.exceptions.base import CatalogError


class DecodeError(CatalogError):
    """Base exception for decode failures."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        index: Optional[int] = None,
    ):
        """
        Initialize DecodeError.

        Args:
            message: Error message
            code: Machine-readable error code
            index: Position of the failing entry in the batch, if known
        """
        super().__init__(message, code=code)
        self.index = index

    def at_index(self, index: int) -> "DecodeError":
        """Attach the failing entry's position and return self."""
        self.index = index
        self.message = f"Entry {index}: {self.message}"
        self.args = (self.message,)
        return self


class FieldMissingError(DecodeError):
    """Raised when a required field is absent."""

    def __init__(self, field: str):
        """
        Initialize FieldMissingError.

        Args:
            field: Name of the missing field
        """
        super().__init__(
            f"Missing required field '{field}'", code="FIELD_MISSING"
        )
        self.field = field


class TypeMismatchError(DecodeError):
    """Raised when a field has the wrong shape."""

    def __init__(self, field: str, expected: str):
        """
        Initialize TypeMismatchError.

        Args:
            field: Name of the offending field ('$' for the document)
            expected: Description of the expected type
        """
        super().__init__(
            f"Field '{field}' has wrong type, expected {expected}",
            code="TYPE_MISMATCH",
        )
        self.field = field
        self.expected = expected


class UnsupportedModifierError(DecodeError):
    """Raised when a color or morph code is not recognized."""

    def __init__(self, field: str, value: str):
        """
        Initialize UnsupportedModifierError.

        Args:
            field: Modifier field name ('color' or 'morph')
            value: Unrecognized code
        """
        super().__init__(
            f"Unsupported {field} modifier '{value}'",
            code="UNSUPPORTED_MODIFIER",
        )
        self.field = field
        self.value = value


class MalformedDocumentError(DecodeError):
    """Raised when the catalog document is not valid JSON."""

    def __init__(self, reason: str):
        super().__init__(
            f"Malformed catalog document: {reason}", code="MALFORMED_DOCUMENT"
        )
        self.reason = reason
