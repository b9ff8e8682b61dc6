"""
Test fixtures and configuration.
"""

from typing import Any, Dict, Generator, List

import pytest

from mutstd.config.settings import Settings, override_settings, reset_settings


@pytest.fixture
def apple_entry() -> Dict[str, Any]:
    """Raw entry without modifiers."""
    return {
        "short": "a",
        "root": "a",
        "desc": "Apple",
        "cat": "food",
        "code": [127822],
    }


@pytest.fixture
def sample_entries() -> List[Dict[str, Any]]:
    """
    Small catalog document.

    Contains a modifiable hand with two variants, a plain face, a PUA-only
    entry and an entry without codepoints.
    """
    return [
        {
            "short": "grinning",
            "root": "grinning",
            "desc": "grinning face",
            "cat": "expressions",
            "code": [128512],
        },
        {
            "short": "wave_hmn_h1",
            "root": "wave",
            "desc": "waving hand, human, h1",
            "cat": "gestures_body",
            "code": [128075, 1054209],
            "color": "h1",
            "morph": "hmn",
        },
        {
            "short": "wave_paw_fe2",
            "root": "wave",
            "desc": "waving hand, paw, fe2",
            "cat": "gestures_body",
            "code": [128075, 1054210],
            "color": "fe2",
            "morph": "paw",
        },
        {
            "short": "dragon_face",
            "root": "dragon_face",
            "desc": "dragon face",
            "cat": "nature",
            "code": [1054300],
        },
        {
            "short": "mutant_logo",
            "root": "mutant_logo",
            "desc": "Mutant Standard logo",
            "cat": "symbols",
            "code": "!",
        },
    ]


@pytest.fixture
def test_settings() -> Generator[Settings, None, None]:
    """Settings installed as the global singleton for one test."""
    settings = Settings(ENV="test", log_level="debug", json_logs=False)
    override_settings(settings)
    yield settings
    reset_settings()
