"""
mutstd - Mutant Standard emoji catalog.

Decodes the Mutant Standard emoji metadata document into immutable records
and derives the lookup catalog and the category-grouped picker view.
"""

__version__ = "0.1.0"

from mutstd.application.use_cases import (
    DecodeEmojisUseCase,
    EmojiSet,
    LoadCatalogUseCase,
    LoadedCatalog,
    Picker,
    ValidatePairingsUseCase,
    build_catalog,
    build_picker,
    category_display_name,
    decode_emoji,
    decode_emojis,
    decode_json,
    description_by_short,
    ensure_valid_pairing,
    is_any_modifiable,
    is_in_private_use_area,
    lookup_by_short,
    variants_of,
)
from mutstd.domain.entities import Emoji
from mutstd.infrastructure.monitoring import configure_logging, setup_logging
from mutstd.domain.exceptions import (
    CatalogError,
    DecodeError,
    FieldMissingError,
    InvalidModifierComboError,
    MalformedDocumentError,
    TypeMismatchError,
    UnsupportedModifierError,
)
from mutstd.domain.value_objects import (
    Color,
    DefaultColor,
    Morph,
    code_to_color,
    code_to_morph,
    color_to_code,
    is_valid_pairing,
    morph_to_code,
)

__all__ = [
    "__version__",
    "DecodeEmojisUseCase",
    "EmojiSet",
    "LoadCatalogUseCase",
    "LoadedCatalog",
    "Picker",
    "ValidatePairingsUseCase",
    "build_catalog",
    "build_picker",
    "category_display_name",
    "decode_emoji",
    "decode_emojis",
    "decode_json",
    "description_by_short",
    "ensure_valid_pairing",
    "is_any_modifiable",
    "is_in_private_use_area",
    "lookup_by_short",
    "variants_of",
    "Emoji",
    "configure_logging",
    "setup_logging",
    "CatalogError",
    "DecodeError",
    "FieldMissingError",
    "InvalidModifierComboError",
    "MalformedDocumentError",
    "TypeMismatchError",
    "UnsupportedModifierError",
    "Color",
    "DefaultColor",
    "Morph",
    "code_to_color",
    "code_to_morph",
    "color_to_code",
    "is_valid_pairing",
    "morph_to_code",
]
