"""画廊预览界面"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Grid
from textual.screen import Screen
from textual.widgets import Footer, Header, Log

from gallery.card import GalleryCard
from i18n import effect_label
from ui.textual_ui.widgets.gallery_card import GalleryCardWidget


class GalleryScreen(Screen):
    """画廊卡片预览界面

    每张卡片独立持有悬停序列；指针离开或失焦时推进，
    变化记录在下方日志中。
    """

    CSS = """
    #card-grid {
        grid-size: 3;
        grid-gutter: 1 2;
        height: auto;
        padding: 1 2;
    }
    #event-log {
        height: 8;
        border: round $secondary;
    }
    """

    def __init__(self, cards: list[GalleryCard], **kwargs):
        super().__init__(**kwargs)
        self._cards = cards

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Grid(
                *(GalleryCardWidget(card, id=f"card-{i}") for i, card in enumerate(self._cards)),
                id="card-grid",
            ),
            Log(id="event-log"),
        )
        yield Footer()

    def on_gallery_card_widget_variant_changed(self, event: GalleryCardWidget.VariantChanged) -> None:
        labels = " + ".join(effect_label(effect) for effect in event.variant)
        self.query_one("#event-log", Log).write_line(
            f"{event.card.alt}: #{event.card.hover_sequence} → {event.index + 1} {labels}"
        )
