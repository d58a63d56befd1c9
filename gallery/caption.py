"""说明文字解析

当前轮次包含依赖说明文字的效果时，展示层需要提供说明文字；
未显式提供说明时回退到卡片的 alt 文本。
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .effects.catalog import CAPTION_EFFECT_KEYS


def needs_caption(variant: Iterable[str]) -> bool:
    """当前组合与说明依赖集合有交集时返回 True"""
    return any(effect in CAPTION_EFFECT_KEYS for effect in variant)


def resolve_caption(
    variant: Iterable[str],
    caption: Optional[str] = None,
    alt: Optional[str] = None,
) -> Optional[str]:
    """返回需要展示的说明文字；不需要说明时返回 None"""
    if not needs_caption(variant):
        return None
    if caption is not None:
        return caption
    if alt is not None:
        return alt
    return ""
