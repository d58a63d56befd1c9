"""Tests for the Rich variant-sequence preview."""

import pytest
from rich.console import Console

from gallery.card import GalleryCard
from i18n import get_locale, set_locale
from ui.preview import build_sequence_table, print_preview


@pytest.fixture(autouse=True)
def _english():
    original = get_locale()
    set_locale("en_US")
    yield
    set_locale(original)


def _render(card, events=0) -> str:
    console = Console(record=True, width=200, color_system=None)
    print_preview(card, events=events, console=console)
    return console.export_text()


def test_table_has_row_per_round():
    card = GalleryCard("a.jpg", "b.jpg", effect="crossfade,slide,flip")
    assert build_sequence_table(card).row_count == 3


def test_preview_marks_active_round():
    card = GalleryCard("a.jpg", "b.jpg", effect="crossfade,slide")
    text = _render(card, events=1)
    assert "▶ 2" in text
    assert "Active after 1 event(s): round 2" in text
    assert card.hover_sequence == 1


def test_preview_lists_classes_and_summary():
    card = GalleryCard("a.jpg", "b.jpg", effect_variants=[["pulse"], ["pulse"]])
    text = _render(card)
    assert "gallery-card-pulse" in text
    assert "Round 2: Same as previous round" in text


def test_preview_shows_caption():
    card = GalleryCard("a.jpg", "b.jpg", effect="captionSlide", caption="Terrace")
    assert "Terrace" in _render(card)


def test_bracketed_user_text_printed_literally():
    card = GalleryCard(
        "a.jpg", "b.jpg", effect="captionSlide", caption="Chef [/b] special", alt="[Chef] table"
    )
    text = _render(card)
    assert "Chef [/b] special" in text
    assert "[Chef] table" in text


def test_bracketed_alt_used_as_caption_fallback():
    card = GalleryCard("a.jpg", "b.jpg", effect="contentReveal", alt="[bold]Terrace")
    assert "[bold]Terrace" in _render(card)
