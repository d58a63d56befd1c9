"""Tests for gallery.effects.variants: variant building and validation."""

import pytest

from gallery.config import reset_config
from gallery.effects.variants import (
    active_variant,
    build_effect_variants,
    normalize_effect_variants,
    parse_effect_variants,
    same_look,
)
from gallery.exceptions import UnknownEffectError


@pytest.fixture(autouse=True)
def _lenient_config(monkeypatch):
    monkeypatch.delenv("GALLERY_STRICT_EFFECTS", raising=False)
    monkeypatch.delenv("GALLERY_MAX_EFFECTS_PER_ROUND", raising=False)
    reset_config()
    yield
    reset_config()


# ==================== build_effect_variants ====================

class TestBuildEffectVariants:
    def test_single_effect_single_round(self):
        assert build_effect_variants(["crossfade"]) == (("crossfade",),)

    def test_absent_base(self):
        assert build_effect_variants(None) == (("crossfade",),)

    def test_two_effects(self):
        assert build_effect_variants(["crossfade", "slide"]) == (
            ("crossfade", "slide"),
            ("slide", "crossfade"),
            ("slide", "crossfade"),
        )

    def test_non_positive_limit_keeps_one_key_per_round(self, monkeypatch):
        monkeypatch.setenv("GALLERY_MAX_EFFECTS_PER_ROUND", "0")
        reset_config()
        assert build_effect_variants("crossfade,slide") == (("crossfade",),)
        assert parse_effect_variants([["slide", "flip"], ["pulse"]]) == (("slide",),)

    def test_three_effects_base_rotated_reversed(self):
        assert build_effect_variants("crossfade,slide,flip") == (
            ("crossfade", "slide", "flip"),
            ("slide", "flip", "crossfade"),
            ("flip", "slide", "crossfade"),
        )

    def test_base_capped_at_max_per_round(self):
        sequence = build_effect_variants(["crossfade", "slide", "flip", "pulse"])
        assert all("pulse" not in combination for combination in sequence)
        assert len(sequence) == 3

    def test_keys_drawn_from_base(self):
        sequence = build_effect_variants(["glowLift", "bogus", "ripple"])
        for combination in sequence:
            assert combination
            assert set(combination) <= {"glowLift", "ripple"}

    def test_referentially_stable(self):
        assert build_effect_variants(["crossfade", "slide"]) is build_effect_variants("crossfade|slide")

    def test_round_limit_from_config(self, monkeypatch):
        monkeypatch.setenv("GALLERY_MAX_EFFECTS_PER_ROUND", "2")
        reset_config()
        assert build_effect_variants("crossfade,slide,flip") == (
            ("crossfade", "slide"),
            ("slide", "crossfade"),
        )


# ==================== parse_effect_variants ====================

class TestParseEffectVariants:
    def test_explicit_sequence_takes_precedence(self):
        base = ("crossfade",)
        assert parse_effect_variants([["crossfade", "slide"]], base) == (("crossfade", "slide"),)

    def test_flat_list_is_one_combination(self):
        assert parse_effect_variants(["crossfade", "slide"]) == (("crossfade", "slide"),)

    def test_delimited_string(self):
        assert parse_effect_variants("crossfade,slide; flip") == (("crossfade", "slide"), ("flip",))

    def test_json_nested_string(self):
        raw = '[["flip"], ["bogus"], ["pulse", "bogus"]]'
        assert parse_effect_variants(raw) == (("flip",), ("pulse",))

    def test_json_flat_string(self):
        assert parse_effect_variants('["flip", "pulse"]') == (("flip", "pulse"),)

    def test_mixed_rounds(self):
        assert parse_effect_variants(["flip|ripple", ["pulse"]]) == (("flip", "ripple"), ("pulse",))

    def test_combination_deduped_and_capped(self):
        raw = [["flip", "flip", "pulse", "ripple", "slide"]]
        assert parse_effect_variants(raw) == (("flip", "pulse", "ripple"),)

    def test_sequence_capped(self):
        raw = [["flip"], ["pulse"], ["ripple"], ["slide"]]
        assert parse_effect_variants(raw) == (("flip",), ("pulse",), ("ripple",))

    def test_not_padded(self):
        assert len(parse_effect_variants([["flip"]])) == 1

    def test_all_invalid_falls_back_to_built(self):
        base = ("crossfade", "slide")
        result = parse_effect_variants([["bogus"], []], base)
        assert result is build_effect_variants(base)

    @pytest.mark.parametrize("raw", [None, "", "   ", [], "[]", 42])
    def test_empty_input_falls_back(self, raw):
        assert parse_effect_variants(raw, ["pulse"]) == (("pulse",),)

    def test_identity_stable_for_equal_input(self):
        assert parse_effect_variants([["flip"], ["pulse"]]) is parse_effect_variants('[["flip"],["pulse"]]')

    def test_strict_raises(self):
        with pytest.raises(UnknownEffectError):
            parse_effect_variants([["flip", "wobble"]], strict=True)

    def test_alias(self):
        assert normalize_effect_variants is parse_effect_variants


# ==================== active_variant / same_look ====================

class TestActiveVariant:
    def test_cyclic_indexing(self):
        sequence = (("crossfade",), ("slide",), ("flip",))
        assert [active_variant(sequence, n) for n in range(5)] == [
            ("crossfade",), ("slide",), ("flip",), ("crossfade",), ("slide",),
        ]

    def test_huge_counter(self):
        sequence = (("crossfade",), ("slide",))
        assert active_variant(sequence, 10**30 + 1) == ("slide",)

    def test_negative_counter_rejected(self):
        with pytest.raises(ValueError):
            active_variant((("crossfade",),), -1)


def test_same_look_ignores_order():
    assert same_look(("crossfade", "slide"), ("slide", "crossfade"))
    assert not same_look(("crossfade",), ("crossfade", "slide"))
