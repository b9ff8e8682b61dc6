"""
Domain entities for mutstd.
"""
from mutstd.domain.entities.emoji import Emoji

__all__ = ["Emoji"]
