"""
Catalog builder - lookup-by-shortcode index preserving declaration order.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from mutstd.domain.entities.emoji import Emoji
from mutstd.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EmojiSet:
    """
    Immutable emoji catalog.

    Attributes:
        data: Shortcode -> Emoji (last write wins on duplicate shortcodes)
        order: Shortcodes in decode order, one per decoded entry
    """

    data: Mapping[str, Emoji] = field(
        default_factory=lambda: MappingProxyType({})
    )
    order: Tuple[str, ...] = ()

    def get(self, short: str) -> Optional[Emoji]:
        """Get emoji by shortcode."""
        return self.data.get(short)

    def __contains__(self, short: object) -> bool:
        return short in self.data

    def __len__(self) -> int:
        """Number of distinct shortcodes."""
        return len(self.data)

    def __iter__(self) -> Iterator[Emoji]:
        """Iterate resolvable emojis in decode order, once per shortcode."""
        seen: set[str] = set()
        for short in self.order:
            emoji = self.data.get(short)
            if emoji is not None and short not in seen:
                seen.add(short)
                yield emoji


def build_catalog(emojis: Iterable[Emoji]) -> EmojiSet:
    """
    Build a catalog from decoded emojis.

    Every input position is recorded in `order`, including duplicate
    shortcodes; the mapping keeps the last entry seen for a shortcode.

    Args:
        emojis: Decoded emojis in source order

    Returns:
        EmojiSet
    """
    data: dict[str, Emoji] = {}
    order: list[str] = []

    for emoji in emojis:
        data[emoji.short] = emoji
        order.append(emoji.short)

    if len(data) != len(order):
        logger.debug(
            f"Catalog has {len(order) - len(data)} duplicate shortcode(s), "
            "later entries replaced earlier ones"
        )

    return EmojiSet(data=MappingProxyType(data), order=tuple(order))
