"""
Modifier validation exceptions.
"""

from mutstd.domain.exceptions.base import CatalogError


class InvalidModifierComboError(CatalogError):
    """Raised by explicit pairing checks when morph and color don't fit."""

    def __init__(self, short: str, morph, color):
        """
        Initialize InvalidModifierComboError.

        Args:
            short: Shortcode of the offending emoji
            morph: Morph modifier or None
            color: Color modifier or None
        """
        super().__init__(
            f"Invalid modifier combination for '{short}': "
            f"morph={morph}, color={color}",
            code="INVALID_MODIFIER_COMBO",
        )
        self.short = short
        self.morph = morph
        self.color = color
