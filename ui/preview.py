# -*- coding: utf-8 -*-
"""
变体序列 Rich 预览

以表格列出卡片的每一轮效果、样式类与说明文字，
并模拟若干次边界事件后标注当前轮次。
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gallery.caption import resolve_caption
from gallery.card import GalleryCard, effect_class_names
from gallery.rounds import round_labels, summarize_rounds
from i18n import t as _t


def build_sequence_table(card: GalleryCard) -> Table:
    """每轮一行：效果显示名 / 样式类 / 说明"""
    table = Table(title=_t("ui.preview.title"), expand=True, border_style="cyan")
    table.add_column(_t("ui.preview.round"), justify="center", style="bold", no_wrap=True)
    table.add_column(_t("ui.preview.effects"), style="magenta")
    table.add_column(_t("ui.preview.classes"), style="green")
    table.add_column(_t("ui.preview.caption"), justify="right")

    active = card.sequencer.active_index
    for index, combination in enumerate(card.variant_sequence):
        caption = resolve_caption(combination, card.caption, card.alt)
        marker = "▶ " if index == active else "  "
        table.add_row(
            f"{marker}{index + 1}",
            round_labels(combination),
            " ".join(effect_class_names(combination)),
            Text(caption) if caption is not None else Text("-", style="dim"),
        )
    return table


def render_preview(card: GalleryCard, events: int = 0) -> Panel:
    """模拟 events 次指针离开事件后的预览面板"""
    for _ in range(events):
        card.on_mouse_leave()

    body = Table.grid(padding=(0, 1))
    body.add_row(build_sequence_table(card))
    for line in summarize_rounds(card.variant_sequence):
        body.add_row(Text(line, style="dim"))
    body.add_row(
        Text(
            _t("ui.preview.active", events=card.hover_sequence, index=card.sequencer.active_index + 1),
            style="bold yellow",
        )
    )
    return Panel(body, title=Text(card.alt), subtitle=Text(card.default_image), border_style="blue")


def print_preview(card: GalleryCard, events: int = 0, console: Console | None = None) -> None:
    (console or Console()).print(render_preview(card, events))
