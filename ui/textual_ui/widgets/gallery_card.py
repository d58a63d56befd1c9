# -*- coding: utf-8 -*-
"""
GalleryCardWidget: 双图画廊卡片组件

默认图 / 悬停图两层，当前轮次的效果以 gallery-card-<effect> 样式类挂在组件上，
指针离开或失去焦点时推进悬停序列并发布 VariantChanged Message。
"""

from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Static

from gallery.card import CLASS_PREFIX, GalleryCard
from gallery.effects.variants import EffectCombination
from i18n import effect_label


class GalleryCardWidget(Static, can_focus=True):
    """可视化画廊卡片 Widget"""

    DEFAULT_CSS = """
    GalleryCardWidget {
        width: 32;
        height: 7;
        border: round $primary;
        padding: 0 1;
    }
    GalleryCardWidget:hover {
        border: heavy $accent;
    }
    GalleryCardWidget:focus {
        border: heavy $success;
    }
    GalleryCardWidget.gallery-card-glowLift {
        background: $accent-darken-3;
    }
    GalleryCardWidget.gallery-card-neonFrame {
        border: double $warning;
    }
    GalleryCardWidget.gallery-card-gradientSweep {
        background: $primary-darken-2;
    }
    GalleryCardWidget.has-caption {
        text-style: italic;
    }
    """

    hover_sequence = reactive(0)
    hovered = reactive(False)

    class VariantChanged(Message):
        """当前轮次变化"""
        def __init__(self, card: GalleryCard, index: int, variant: EffectCombination) -> None:
            super().__init__()
            self.card = card
            self.index = index
            self.variant = variant

    def __init__(self, card: GalleryCard, **kwargs):
        """
        Args:
            card: gallery.card.GalleryCard 对象
        """
        super().__init__(**kwargs)
        self._card = card
        self._applied: list[str] = []

    @property
    def card(self) -> GalleryCard:
        return self._card

    def on_mount(self) -> None:
        self._apply_variant()

    def _apply_variant(self) -> None:
        """同步样式类与 tooltip"""
        for name in self._applied:
            self.remove_class(name)
        self._applied = self._card.effect_class_names
        for name in self._applied:
            self.add_class(name)
        self.set_class(self._card.needs_caption, "has-caption")
        self.tooltip = self._build_tooltip()

    def _build_tooltip(self) -> Text:
        lines = [effect_label(effect) for effect in self._card.active_variant]
        caption: Optional[str] = self._card.caption_content
        if caption:
            lines.append("━━━")
            lines.append(caption)
        return Text("\n".join(lines))

    def render(self) -> Text:
        """渲染卡面：悬停时显示悬停图（用户文本不按标记解析）"""
        c = self._card
        image = c.hover_image if self.hovered else c.default_image
        alt = c.hover_alt if self.hovered else c.alt
        rounds = len(c.variant_sequence)
        effects = " ".join(name[len(CLASS_PREFIX):] for name in c.effect_class_names)
        text = Text.assemble(
            (alt, "bold"), "\n",
            (image, "dim"), "\n",
            effects, "\n",
            f"{c.sequencer.active_index + 1}/{rounds}",
        )
        caption = c.caption_content
        if caption:
            text.append("\n")
            text.append(caption, style="italic")
        return text

    def _advanced(self) -> None:
        self.hover_sequence = self._card.hover_sequence
        self._apply_variant()
        self.post_message(
            self.VariantChanged(self._card, self._card.sequencer.active_index, self._card.active_variant)
        )

    def on_enter(self) -> None:
        self.hovered = True

    def on_leave(self) -> None:
        self.hovered = False
        if self._card.sequencer.is_mounted:
            self._card.on_mouse_leave()
            self._advanced()

    def on_blur(self) -> None:
        if self._card.sequencer.is_mounted:
            self._card.on_blur()
            self._advanced()

    def update_effects(self, **changes) -> None:
        """更新效果配置（effect / effect_variants，变化时序列归零）"""
        self._card.update(**changes)
        self.hover_sequence = self._card.hover_sequence
        self._apply_variant()
        self.refresh()

    def on_unmount(self) -> None:
        self._card.unmount()
