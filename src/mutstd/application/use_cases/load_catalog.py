"""
Use case for loading a catalog document into query-ready views.

Pipeline: JSON document -> decoded emojis -> EmojiSet -> Picker, with an
optional pairing check driven by configuration.
"""

import time
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from mutstd.application.use_cases.build_catalog import EmojiSet, build_catalog
from mutstd.application.use_cases.build_picker import Picker, build_picker
from mutstd.application.use_cases.decode_emojis import DecodeEmojisUseCase
from mutstd.application.use_cases.validate_pairings import (
    ValidatePairingsUseCase,
)
from mutstd.config.settings import Settings, get_settings
from mutstd.infrastructure.monitoring.logger import (
    get_logger,
    log_performance,
    set_load_id,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadedCatalog:
    """Catalog together with its picker view."""

    emoji_set: EmojiSet
    picker: Picker


class LoadCatalogUseCase:
    """
    Use case for turning a catalog document into EmojiSet and Picker.

    Decode errors propagate unchanged; nothing is built from a document
    containing a bad entry.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        decoder: Optional[DecodeEmojisUseCase] = None,
        validator: Optional[ValidatePairingsUseCase] = None,
    ):
        """
        Initialize LoadCatalogUseCase.

        Args:
            settings: Settings instance (defaults to global settings)
            decoder: Entry decoder
            validator: Pairing validator, used when enforce_pairing is set
        """
        self.settings = settings or get_settings()
        self.decoder = decoder or DecodeEmojisUseCase()
        self.validator = validator or ValidatePairingsUseCase()

    def execute(self, document: Union[str, bytes, List[Any]]) -> LoadedCatalog:
        """
        Load a catalog.

        Args:
            document: JSON text, or an already parsed JSON array

        Returns:
            LoadedCatalog

        Raises:
            DecodeError: If the document or an entry can't be decoded
            InvalidModifierComboError: If enforce_pairing is set and an
                entry has an invalid morph/color pairing
        """
        set_load_id()
        start_time = time.perf_counter()

        if isinstance(document, (str, bytes)):
            emojis = self.decoder.decode_json(document)
        else:
            emojis = self.decoder.execute(document)

        emoji_set = build_catalog(emojis)

        if self.settings.enforce_pairing:
            self.validator.execute(emoji_set)

        picker = build_picker(emoji_set)

        logger.info(
            "Catalog loaded",
            extra={
                "entries": len(emoji_set.order),
                "shortcodes": len(emoji_set),
                "roots": len(picker.deduplicated_data),
                "categories": len(picker.cat_order),
            },
        )
        log_performance(logger, "load_catalog", start_time)

        return LoadedCatalog(emoji_set=emoji_set, picker=picker)
