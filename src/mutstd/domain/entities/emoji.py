"""
Emoji entity - one Mutant Standard catalog entry.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from mutstd.domain.value_objects.modifiers import (
    Color,
    ColorModifier,
    Morph,
    color_to_code,
    morph_to_code,
)

# Code value written back for entries without assigned codepoints.
NO_CODEPOINTS = "!"


@dataclass(frozen=True)
class Emoji:
    """
    Emoji entity.

    Attributes:
        short: Shortcode, unique within a catalog
        root: Shortcode of the unmodified base emoji
        desc: English description (alt text)
        cat: Category identifier
        code: Unicode codepoints, empty if none are assigned
        color: Color, DefaultColor.DEFAULT, or None when absent
        morph: Morph, or None when absent
    """

    short: str
    root: str
    desc: str
    cat: str
    code: Tuple[int, ...] = ()
    color: Optional[ColorModifier] = None
    morph: Optional[Morph] = None

    def __post_init__(self):
        """Freeze the codepoint sequence."""
        if not isinstance(self.code, tuple):
            object.__setattr__(self, "code", tuple(self.code))

    def is_modified(self) -> bool:
        """Check if this entry is a modifier variant of another emoji."""
        return self.short != self.root

    def has_codepoints(self) -> bool:
        """Check if this entry has assigned codepoints."""
        return bool(self.code)

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to the raw catalog entry shape."""
        result: Dict[str, Any] = {
            "short": self.short,
            "root": self.root,
            "desc": self.desc,
            "cat": self.cat,
            "code": list(self.code) if self.code else NO_CODEPOINTS,
        }

        if self.color is not None:
            result["color"] = (
                color_to_code(self.color)
                if isinstance(self.color, Color)
                else self.color.value
            )

        if self.morph is not None:
            result["morph"] = morph_to_code(self.morph)

        return result

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"Emoji(short={self.short!r}, root={self.root!r})"
