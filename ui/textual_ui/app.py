"""Textual 画廊预览应用

启动后直接推入 GalleryScreen，展示传入的卡片。
"""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from gallery.card import GalleryCard
from i18n import t as _t
from ui.textual_ui.screens import GalleryScreen

# 未传入卡片时的示例配置
DEMO_CARDS: list[dict] = [
    {"effect": "crossfade", "alt": "Single effect"},
    {"effect": "crossfade,slide,glowLift", "alt": "Layered effects"},
    {
        "effect": "pulse",
        "effect_variants": [["pulse"], ["captionSlide", "pulse"], ["contentReveal"]],
        "alt": "Caption rounds",
        "caption": "Chef's table",
    },
]


def build_demo_cards() -> list[GalleryCard]:
    return [
        GalleryCard(
            default_image=f"demo/card-{i}.jpg",
            hover_image=f"demo/card-{i}-hover.jpg",
            **spec,
        )
        for i, spec in enumerate(DEMO_CARDS)
    ]


class GalleryApp(App):
    """画廊卡片 Textual 主应用"""

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", _t("ui.quit")),
    ]

    def __init__(self, cards: list[GalleryCard] | None = None):
        super().__init__()
        self.title = _t("ui.title")
        self._cards = cards if cards is not None else build_demo_cards()

    @property
    def cards(self) -> list[GalleryCard]:
        return self._cards

    def on_mount(self) -> None:
        self.push_screen(GalleryScreen(self._cards))
