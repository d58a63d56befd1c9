"""Tests for gallery.rounds: round editing and summaries."""

import pytest

from gallery.config import reset_config
from gallery.effects.variants import build_effect_variants
from gallery.rounds import (
    add_effect_to_round,
    clear_round,
    move_effect_within_round,
    remove_effect_from_round,
    summarize_rounds,
)
from i18n import get_locale, set_locale


@pytest.fixture(autouse=True)
def _english():
    reset_config()
    original = get_locale()
    set_locale("en_US")
    yield
    set_locale(original)


class TestAddEffect:
    def test_add(self):
        assert add_effect_to_round([["crossfade"]], 0, "slide") == (("crossfade", "slide"),)

    def test_duplicate_ignored(self):
        assert add_effect_to_round([["crossfade"]], 0, "crossfade") == (("crossfade",),)

    def test_unsupported_ignored(self):
        assert add_effect_to_round([["crossfade"]], 0, "wobble") == (("crossfade",),)

    def test_full_round_ignored(self):
        rounds = [["crossfade", "slide", "flip"]]
        assert add_effect_to_round(rounds, 0, "pulse") == (("crossfade", "slide", "flip"),)

    def test_append_new_round(self):
        assert add_effect_to_round([["crossfade"]], 1, "flip") == (("crossfade",), ("flip",))

    def test_out_of_range_is_noop(self):
        assert add_effect_to_round([["crossfade"]], 5, "flip") == (("crossfade",),)


class TestRemoveMoveClear:
    def test_remove(self):
        assert remove_effect_from_round([["crossfade", "slide"]], 0, 0) == (("slide",),)

    def test_move_forward(self):
        assert move_effect_within_round([["crossfade", "slide"]], 0, 0, 1) == (("slide", "crossfade"),)

    def test_move_out_of_range(self):
        assert move_effect_within_round([["crossfade", "slide"]], 0, 0, -1) == (("crossfade", "slide"),)

    def test_clear_drops_round(self):
        assert clear_round([["crossfade"], ["flip"]], 0) == (("flip",),)

    def test_clear_last_round_falls_back_to_base(self):
        assert clear_round([["crossfade"]], 0, base="slide") == (("slide",),)


class TestSummaries:
    def test_built_sequence_summary(self):
        lines = summarize_rounds(build_effect_variants(["crossfade", "slide"]))
        assert lines == [
            "Round 1: ✨ Crossfade + ➡️ Slide + Fade",
            "Round 2: ➡️ Slide + Fade + ✨ Crossfade",
            "Round 3: Same as previous round (➡️ Slide + Fade + ✨ Crossfade)",
        ]

    def test_empty_round(self):
        assert summarize_rounds([[]]) == ["Round 1: No animations configured"]

    def test_unknown_key_shown_raw(self):
        assert summarize_rounds([["mystery"]]) == ["Round 1: mystery"]

    def test_localized(self):
        set_locale("zh_CN")
        assert summarize_rounds([["flip"], ["flip"]]) == [
            "第 1 轮: 🃏 翻转揭示",
            "第 2 轮: 与上一轮相同 (🃏 翻转揭示)",
        ]
