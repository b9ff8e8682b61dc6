"""
Domain value objects for mutstd.
"""
from mutstd.domain.value_objects.category import (
    CATEGORY_TITLES,
    get_category_title,
)
from mutstd.domain.value_objects.modifiers import (
    CODE_COLORS,
    CODE_MORPHS,
    COLOR_CODES,
    HUMAN_PALETTE,
    MORPH_CODES,
    MORPH_PALETTES,
    PAW_PALETTE,
    SHARED_PALETTE,
    Color,
    ColorModifier,
    DefaultColor,
    Morph,
    code_to_color,
    code_to_morph,
    color_to_code,
    is_valid_pairing,
    morph_to_code,
    palette_for,
)

__all__ = [
    "CATEGORY_TITLES",
    "get_category_title",
    "CODE_COLORS",
    "CODE_MORPHS",
    "COLOR_CODES",
    "HUMAN_PALETTE",
    "MORPH_CODES",
    "MORPH_PALETTES",
    "PAW_PALETTE",
    "SHARED_PALETTE",
    "Color",
    "ColorModifier",
    "DefaultColor",
    "Morph",
    "code_to_color",
    "code_to_morph",
    "color_to_code",
    "is_valid_pairing",
    "morph_to_code",
    "palette_for",
]
