"""
Use case for checking morph/color pairings of catalog entries.

Never runs implicitly; callers decide when a catalog must be fully valid.
"""

from typing import List

from mutstd.application.use_cases.build_catalog import EmojiSet
from mutstd.domain.entities.emoji import Emoji
from mutstd.domain.exceptions import InvalidModifierComboError
from mutstd.domain.value_objects.modifiers import is_valid_pairing
from mutstd.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


def ensure_valid_pairing(emoji: Emoji) -> None:
    """
    Check one emoji's morph/color pairing.

    Raises:
        InvalidModifierComboError: If the pairing is not allowed
    """
    if not is_valid_pairing(emoji.morph, emoji.color):
        raise InvalidModifierComboError(emoji.short, emoji.morph, emoji.color)


class ValidatePairingsUseCase:
    """Use case for validating modifier pairings across a catalog."""

    def find_invalid(self, emoji_set: EmojiSet) -> List[Emoji]:
        """
        Collect entries with invalid pairings.

        Args:
            emoji_set: Catalog to check

        Returns:
            Offending emojis in catalog order
        """
        return [
            emoji
            for emoji in emoji_set
            if not is_valid_pairing(emoji.morph, emoji.color)
        ]

    def execute(self, emoji_set: EmojiSet) -> None:
        """
        Validate every entry of a catalog.

        Args:
            emoji_set: Catalog to check

        Raises:
            InvalidModifierComboError: For the first invalid entry
        """
        invalid = self.find_invalid(emoji_set)
        if invalid:
            logger.warning(
                f"{len(invalid)} catalog entries have invalid pairings",
                extra={"shorts": [emoji.short for emoji in invalid]},
            )
            ensure_valid_pairing(invalid[0])
