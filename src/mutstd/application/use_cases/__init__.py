"""
Application use cases for mutstd.
"""
from mutstd.application.use_cases.build_catalog import EmojiSet, build_catalog
from mutstd.application.use_cases.build_picker import (
    Picker,
    build_picker,
    is_any_modifiable,
)
from mutstd.application.use_cases.decode_emojis import (
    DecodeEmojisUseCase,
    decode_emoji,
    decode_emojis,
    decode_json,
)
from mutstd.application.use_cases.load_catalog import (
    LoadCatalogUseCase,
    LoadedCatalog,
)
from mutstd.application.use_cases.queries import (
    PUA_END,
    PUA_START,
    category_display_name,
    category_display_name_or_default,
    description_by_short,
    is_in_private_use_area,
    lookup_by_short,
    variants_of,
)
from mutstd.application.use_cases.validate_pairings import (
    ValidatePairingsUseCase,
    ensure_valid_pairing,
)

__all__ = [
    "EmojiSet",
    "build_catalog",
    "Picker",
    "build_picker",
    "is_any_modifiable",
    "DecodeEmojisUseCase",
    "decode_emoji",
    "decode_emojis",
    "decode_json",
    "LoadCatalogUseCase",
    "LoadedCatalog",
    "PUA_END",
    "PUA_START",
    "category_display_name",
    "category_display_name_or_default",
    "description_by_short",
    "is_in_private_use_area",
    "lookup_by_short",
    "variants_of",
    "ValidatePairingsUseCase",
    "ensure_valid_pairing",
]
