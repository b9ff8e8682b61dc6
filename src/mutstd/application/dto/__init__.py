"""
Data transfer objects for mutstd.
"""
from mutstd.application.dto.raw_emoji import EXPECTED_TYPES, RawEmojiEntry

__all__ = ["EXPECTED_TYPES", "RawEmojiEntry"]
