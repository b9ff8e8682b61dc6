"""
Use case for decoding raw catalog entries into Emoji records.

Decoding is all-or-nothing:
- Every entry is validated against the raw entry schema
- Modifier codes are resolved through the modifier tables
- The first failing entry aborts the whole batch

Morph/color pairings are NOT checked here, see ValidatePairingsUseCase.
"""

import json
from typing import Any, List, Optional, Sequence, Union

from pydantic import ValidationError

from mutstd.application.dto.raw_emoji import EXPECTED_TYPES, RawEmojiEntry
from mutstd.domain.entities.emoji import Emoji
from mutstd.domain.exceptions import (
    DecodeError,
    FieldMissingError,
    MalformedDocumentError,
    TypeMismatchError,
    UnsupportedModifierError,
)
from mutstd.domain.value_objects.modifiers import (
    ColorModifier,
    Morph,
    code_to_color,
    code_to_morph,
)
from mutstd.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class DecodeEmojisUseCase:
    """
    Use case for converting raw JSON entries into Emoji records.

    Maps schema violations onto the decode error hierarchy:
    - missing field -> FieldMissingError
    - wrong shape -> TypeMismatchError
    - unknown color/morph code -> UnsupportedModifierError
    """

    def decode_entry(self, raw: Any) -> Emoji:
        """
        Decode one raw entry.

        Args:
            raw: Parsed JSON object for one emoji

        Returns:
            Decoded Emoji

        Raises:
            FieldMissingError: If a required field is absent
            TypeMismatchError: If a field has the wrong shape
            UnsupportedModifierError: If a modifier code is unknown
        """
        if not isinstance(raw, dict):
            raise TypeMismatchError("entry", "object")

        try:
            entry = RawEmojiEntry.model_validate(raw)
        except ValidationError as e:
            raise self._translate(e) from e

        return Emoji(
            short=entry.short,
            root=entry.root,
            desc=entry.desc,
            cat=entry.cat,
            code=entry.codepoints(),
            color=self._decode_color(entry.color),
            morph=self._decode_morph(entry.morph),
        )

    def execute(self, raw_entries: Sequence[Any]) -> List[Emoji]:
        """
        Decode a list of raw entries atomically.

        Args:
            raw_entries: Parsed JSON array

        Returns:
            Decoded emojis in input order

        Raises:
            TypeMismatchError: If the document is not an array
            DecodeError: If any entry fails (carries the entry index)
        """
        if not isinstance(raw_entries, list):
            raise TypeMismatchError("$", "array")

        emojis: List[Emoji] = []
        for index, raw in enumerate(raw_entries):
            try:
                emojis.append(self.decode_entry(raw))
            except DecodeError as e:
                logger.debug(f"Rejecting catalog at entry {index}: {e}")
                e.at_index(index)
                raise

        logger.debug(f"Decoded {len(emojis)} catalog entries")
        return emojis

    def decode_json(self, document: Union[str, bytes]) -> List[Emoji]:
        """
        Parse and decode a JSON catalog document.

        Args:
            document: JSON text

        Returns:
            Decoded emojis in input order

        Raises:
            MalformedDocumentError: If the text is not valid JSON
            DecodeError: If decoding fails
        """
        try:
            raw_entries = json.loads(document)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedDocumentError(str(e)) from e

        return self.execute(raw_entries)

    def _decode_color(self, code: Optional[str]) -> Optional[ColorModifier]:
        if code is None:
            return None

        color = code_to_color(code)
        if color is None:
            raise UnsupportedModifierError("color", code)
        return color

    def _decode_morph(self, code: Optional[str]) -> Optional[Morph]:
        if code is None:
            return None

        morph = code_to_morph(code)
        if morph is None:
            raise UnsupportedModifierError("morph", code)
        return morph

    def _translate(self, error: ValidationError) -> DecodeError:
        """Convert the first schema error into a decode error."""
        first = error.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else "entry"

        if first["type"] == "missing":
            return FieldMissingError(field)

        return TypeMismatchError(field, EXPECTED_TYPES.get(field, "valid value"))


_default_decoder = DecodeEmojisUseCase()


def decode_emoji(raw: Any) -> Emoji:
    """Decode one raw entry with the default decoder."""
    return _default_decoder.decode_entry(raw)


def decode_emojis(raw_entries: Sequence[Any]) -> List[Emoji]:
    """Decode a parsed JSON array with the default decoder."""
    return _default_decoder.execute(raw_entries)


def decode_json(document: Union[str, bytes]) -> List[Emoji]:
    """Parse and decode a JSON catalog document with the default decoder."""
    return _default_decoder.decode_json(document)
