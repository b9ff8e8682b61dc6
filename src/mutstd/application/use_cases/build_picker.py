"""
Picker builder - deduplicated, category-grouped view of a catalog.

Variants sharing a root collapse onto the first one seen in catalog order,
which is what a selection UI shows before the user picks modifiers.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Tuple

from mutstd.application.use_cases.build_catalog import EmojiSet
from mutstd.domain.entities.emoji import Emoji
from mutstd.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Picker:
    """
    Read-only picker view.

    Attributes:
        modifiable_shorts: Shortcodes of representatives with variants
        deduplicated_data: Root shortcode -> first-seen representative
        deduplicated_order: Category -> shortcodes of its representatives
        cat_order: Categories in first-seen order
        by_short: Representative shortcode -> representative
        modifiable: modifiable_shorts as a set
    """

    modifiable_shorts: Tuple[str, ...] = ()
    deduplicated_data: Mapping[str, Emoji] = field(
        default_factory=lambda: MappingProxyType({})
    )
    deduplicated_order: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    cat_order: Tuple[str, ...] = ()
    by_short: Mapping[str, Emoji] = field(init=False, repr=False, compare=False)
    modifiable: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Index representatives by their own shortcode."""
        # Buckets hold the representative's own shortcode, which differs
        # from its root when a variant was declared before its base.
        object.__setattr__(
            self,
            "by_short",
            MappingProxyType(
                {emoji.short: emoji for emoji in self.deduplicated_data.values()}
            ),
        )
        object.__setattr__(self, "modifiable", frozenset(self.modifiable_shorts))

    def category(self, cat: str) -> List[Emoji]:
        """
        Get representatives of a category in display order.

        Args:
            cat: Category identifier

        Returns:
            Representatives, empty list for unknown categories
        """
        return [
            self.by_short[short]
            for short in self.deduplicated_order.get(cat, ())
            if short in self.by_short
        ]

    def is_modifiable(self, short: str) -> bool:
        """Check if a representative shortcode offers variants."""
        return short in self.modifiable


def is_any_modifiable(emoji: Emoji) -> bool:
    """
    Check whether an emoji admits modifier variants.

    True when it carries a morph, an assigned color or an explicit default
    color.
    """
    return emoji.morph is not None or emoji.color is not None


def build_picker(emoji_set: EmojiSet) -> Picker:
    """
    Build the picker view of a catalog.

    Single pass over `emoji_set.order`; the first emoji seen for a root
    represents it. Shortcodes that don't resolve are skipped.

    Args:
        emoji_set: Source catalog

    Returns:
        Picker
    """
    modifiable_shorts: list[str] = []
    deduplicated_data: dict[str, Emoji] = {}
    deduplicated_order: dict[str, list[str]] = {}
    cat_order: list[str] = []

    for short in emoji_set.order:
        emoji = emoji_set.data.get(short)
        if emoji is None:
            logger.warning(f"Skipping unresolvable shortcode '{short}'")
            continue

        if emoji.root in deduplicated_data:
            continue

        deduplicated_data[emoji.root] = emoji

        if is_any_modifiable(emoji):
            modifiable_shorts.append(emoji.short)

        if emoji.cat not in deduplicated_order:
            cat_order.append(emoji.cat)
            deduplicated_order[emoji.cat] = []

        deduplicated_order[emoji.cat].append(emoji.short)

    logger.debug(
        f"Picker built: {len(deduplicated_data)} roots "
        f"in {len(cat_order)} categories"
    )

    return Picker(
        modifiable_shorts=tuple(modifiable_shorts),
        deduplicated_data=MappingProxyType(deduplicated_data),
        deduplicated_order=MappingProxyType(
            {cat: tuple(shorts) for cat, shorts in deduplicated_order.items()}
        ),
        cat_order=tuple(cat_order),
    )
