"""
Catalog query helpers used by rendering layers.
"""

from typing import List, Optional

from mutstd.application.use_cases.build_catalog import EmojiSet
from mutstd.domain.entities.emoji import Emoji
from mutstd.domain.value_objects.category import get_category_title

# Private Use Area block reserved for Mutant Standard (U+101600..U+1016FF)
PUA_START = 0x101600
PUA_END = 0x1016FF


def lookup_by_short(short: str, emoji_set: EmojiSet) -> Optional[Emoji]:
    """Get emoji by shortcode, None if absent."""
    return emoji_set.data.get(short)


def description_by_short(short: str, emoji_set: EmojiSet) -> Optional[str]:
    """Get the description of an emoji by shortcode, None if absent."""
    emoji = lookup_by_short(short, emoji_set)
    return emoji.desc if emoji is not None else None


def is_in_private_use_area(emoji: Emoji) -> bool:
    """
    Check if any codepoint lies in the dataset's Private Use Area block.

    Args:
        emoji: Emoji to check

    Returns:
        True if at least one codepoint is in U+101600..U+1016FF
    """
    return any(PUA_START <= codepoint <= PUA_END for codepoint in emoji.code)


def category_display_name(cat: str) -> Optional[str]:
    """Get English title for a category, None if unknown."""
    return get_category_title(cat)


def category_display_name_or_default(
    cat: str, default: Optional[str] = None
) -> str:
    """
    Get English title for a category with a fallback.

    Args:
        cat: Category identifier
        default: Fallback title (defaults to the identifier itself)

    Returns:
        Display title
    """
    title = get_category_title(cat)
    if title is not None:
        return title
    return default if default is not None else cat


def variants_of(root: str, emoji_set: EmojiSet) -> List[Emoji]:
    """
    Get every catalog entry sharing a root, in catalog order.

    Args:
        root: Root shortcode
        emoji_set: Catalog to search

    Returns:
        Matching emojis (the base emoji included)
    """
    return [emoji for emoji in emoji_set if emoji.root == root]
