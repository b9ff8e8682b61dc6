"""
Unit tests for the picker builder.

Usage:
    pytest tests/unit/application/use_cases/test_build_picker.py
"""

from types import MappingProxyType

from mutstd.application.use_cases.build_catalog import EmojiSet, build_catalog
from mutstd.application.use_cases.build_picker import (
    build_picker,
    is_any_modifiable,
)
from mutstd.domain.entities.emoji import Emoji
from mutstd.domain.value_objects.modifiers import Color, DefaultColor, Morph


def _emoji(short, root=None, cat="objects", color=None, morph=None) -> Emoji:
    return Emoji(
        short=short,
        root=root or short,
        desc=short,
        cat=cat,
        color=color,
        morph=morph,
    )


class TestIsAnyModifiable:
    """Unit tests for the modifiable capability check."""

    def test_plain_emoji_not_modifiable(self):
        """Test no modifiers means no variants."""
        assert is_any_modifiable(_emoji("a")) is False

    def test_color_makes_modifiable(self):
        """Test assigned or default color means variants."""
        assert is_any_modifiable(_emoji("a", color=Color.R1)) is True
        assert is_any_modifiable(_emoji("a", color=DefaultColor.DEFAULT)) is True

    def test_morph_makes_modifiable(self):
        """Test a morph alone means variants."""
        assert is_any_modifiable(_emoji("a", morph=Morph.HOOF)) is True


class TestBuildPicker:
    """Unit tests for build_picker."""

    # ================================================================
    # Deduplication
    # ================================================================

    def test_first_seen_root_wins(self):
        """Test only the first entry per root is kept."""
        first = _emoji("wave_hmn_h1", root="wave", color=Color.H1, morph=Morph.HUMAN)
        second = _emoji("wave_paw_fe1", root="wave", color=Color.FE1, morph=Morph.PAW)

        picker = build_picker(build_catalog([first, second]))

        assert picker.deduplicated_data == {"wave": first}
        assert picker.modifiable_shorts == ("wave_hmn_h1",)
        assert picker.deduplicated_order == {"objects": ("wave_hmn_h1",)}

    def test_variant_before_base(self):
        """Test a variant declared before its base represents the root."""
        variant = _emoji("cat_r1", root="cat", cat="nature", color=Color.R1)
        base = _emoji("cat", cat="nature")

        picker = build_picker(build_catalog([variant, base]))

        assert picker.deduplicated_data["cat"] is variant
        assert picker.category("nature") == [variant]

    # ================================================================
    # Ordering
    # ================================================================

    def test_category_order_first_seen(self):
        """Test categories and buckets keep first-seen order."""
        emojis = [
            _emoji("b1", cat="b"),
            _emoji("a1", cat="a"),
            _emoji("b2", cat="b"),
            _emoji("c1", cat="c"),
            _emoji("a2", cat="a"),
        ]

        picker = build_picker(build_catalog(emojis))

        assert picker.cat_order == ("b", "a", "c")
        assert picker.deduplicated_order["b"] == ("b1", "b2")
        assert picker.deduplicated_order["a"] == ("a1", "a2")
        assert picker.deduplicated_order["c"] == ("c1",)

    def test_modifiable_shorts_in_order(self):
        """Test modifiable shortcodes keep catalog order."""
        emojis = [
            _emoji("z", color=DefaultColor.DEFAULT),
            _emoji("plain"),
            _emoji("y", morph=Morph.CLAW, color=Color.G1),
        ]

        picker = build_picker(build_catalog(emojis))

        assert picker.modifiable_shorts == ("z", "y")
        assert picker.is_modifiable("y") is True
        assert picker.is_modifiable("plain") is False

    def test_category_helper(self):
        """Test category() resolves representatives in order."""
        emojis = [_emoji("a1", cat="a"), _emoji("a2", cat="a")]

        picker = build_picker(build_catalog(emojis))

        assert [emoji.short for emoji in picker.category("a")] == ["a1", "a2"]
        assert picker.category("missing") == []

    # ================================================================
    # Edge cases
    # ================================================================

    def test_empty_catalog(self):
        """Test empty catalog gives empty picker."""
        picker = build_picker(build_catalog([]))

        assert picker.cat_order == ()
        assert picker.modifiable_shorts == ()
        assert len(picker.deduplicated_data) == 0
        assert len(picker.deduplicated_order) == 0

    def test_unresolvable_shortcode_skipped(self):
        """Test order entries missing from data are skipped."""
        emoji = _emoji("a")
        emoji_set = EmojiSet(
            data=MappingProxyType({"a": emoji}), order=("ghost", "a")
        )

        picker = build_picker(emoji_set)

        assert picker.deduplicated_data == {"a": emoji}
        assert picker.cat_order == ("objects",)

    def test_duplicate_short_uses_surviving_record(self):
        """Test duplicate shortcodes resolve to the last decoded record."""
        first = _emoji("dup", cat="old")
        second = _emoji("dup", cat="new")

        picker = build_picker(build_catalog([first, second]))

        assert picker.deduplicated_data == {"dup": second}
        assert picker.cat_order == ("new",)
        assert picker.deduplicated_order == {"new": ("dup",)}

    # ================================================================
    # Precomputed indexes
    # ================================================================

    def test_indexes_built_once_at_construction(self):
        """Test by_short and modifiable are fixed when the picker is built."""
        variant = _emoji("cat_r1", root="cat", cat="nature", color=Color.R1)
        plain = _emoji("rock")

        picker = build_picker(build_catalog([variant, _emoji("cat"), plain]))

        assert dict(picker.by_short) == {"cat_r1": variant, "rock": plain}
        assert picker.modifiable == frozenset({"cat_r1"})
        assert picker.by_short is picker.by_short

    def test_indexes_are_read_only(self):
        """Test the shortcode index can't be modified."""
        picker = build_picker(build_catalog([_emoji("a")]))

        try:
            picker.by_short["b"] = _emoji("b")  # type: ignore[index]
            assert False, "Should have raised TypeError"
        except TypeError:
            pass

    def test_indexes_excluded_from_equality(self):
        """Test pickers with equal fields compare equal."""
        emojis = [_emoji("a", color=Color.R1), _emoji("b")]

        assert build_picker(build_catalog(emojis)) == build_picker(build_catalog(emojis))
