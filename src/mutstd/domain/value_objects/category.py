"""
Category display names.

Static lookup from dataset category identifiers to English titles.
"""

from types import MappingProxyType
from typing import Mapping, Optional

CATEGORY_TITLES: Mapping[str, str] = MappingProxyType(
    {
        "expressions": "Expressions",
        "gestures_body": "Gestures & Body",
        "people": "People",
        "activities_clothing": "Activities & Clothing",
        "nature": "Nature",
        "food_drink": "Food & Drink",
        "travel_places": "Travel & Places",
        "objects": "Objects",
        "symbols": "Symbols",
        "flags": "Flags",
    }
)


def get_category_title(cat: str) -> Optional[str]:
    """
    Get display title for a category identifier.

    Args:
        cat: Category identifier (e.g., 'food_drink')

    Returns:
        English title, or None if the category is unknown
    """
    return CATEGORY_TITLES.get(cat)
