# -*- coding: utf-8 -*-
"""
画廊卡片模型

组合解析器、变体构建/校验、序列器与说明解析，
向展示层输出当前轮次的样式类列表和说明文字。
"""

from __future__ import annotations

import logging
from typing import Optional

from i18n import t as _t

from .caption import needs_caption, resolve_caption
from .effects.parser import EffectSpec, parse_effects
from .effects.variants import (
    EffectCombination,
    VariantSequence,
    VariantsSpec,
    build_effect_variants,
    parse_effect_variants,
)
from .enums import BoundaryEvent
from .sequencer import CardSequencer

logger = logging.getLogger(__name__)

CLASS_PREFIX = "gallery-card-"

_UNSET = object()


def resolve_variant_sequence(
    base_effects: EffectCombination,
    effect_variants: VariantsSpec = None,
) -> VariantSequence:
    """显式序列优先，否则由基础效果推导"""
    if effect_variants is not None:
        return parse_effect_variants(effect_variants, base_effects)
    return build_effect_variants(base_effects)


def effect_class_names(variant: EffectCombination) -> list[str]:
    """组合 → 有序样式类列表"""
    return [f"{CLASS_PREFIX}{effect}" for effect in variant]


class GalleryCard:
    """双图画廊卡片

    Attributes:
        default_image: 默认图片引用（原样透传）
        hover_image: 悬停图片引用（原样透传）
        alt: 无障碍替代文本，亦作为说明文字的回退
        caption: 显式说明文字
    """

    def __init__(
        self,
        default_image: str,
        hover_image: str,
        effect: EffectSpec = "crossfade",
        alt: Optional[str] = None,
        caption: Optional[str] = None,
        effect_variants: VariantsSpec = None,
    ):
        self.default_image = default_image
        self.hover_image = hover_image
        self.alt = alt if alt is not None else _t("caption.default_alt")
        self.caption = caption
        self._effect = effect
        self._effect_variants = effect_variants
        self._base_effects = parse_effects(effect)
        self._sequencer = CardSequencer(
            resolve_variant_sequence(self._base_effects, effect_variants)
        )

    # ==================== 派生状态 ====================

    @property
    def effect(self) -> EffectSpec:
        return self._effect

    @property
    def effect_variants(self) -> VariantsSpec:
        return self._effect_variants

    @property
    def base_effects(self) -> EffectCombination:
        return self._base_effects

    @property
    def sequencer(self) -> CardSequencer:
        return self._sequencer

    @property
    def variant_sequence(self) -> VariantSequence:
        return self._sequencer.sequence

    @property
    def hover_sequence(self) -> int:
        return self._sequencer.hover_sequence

    @property
    def active_variant(self) -> EffectCombination:
        return self._sequencer.active_variant

    @property
    def effect_class_names(self) -> list[str]:
        return effect_class_names(self.active_variant)

    @property
    def class_name(self) -> str:
        return " ".join(self.effect_class_names)

    @property
    def needs_caption(self) -> bool:
        return needs_caption(self.active_variant)

    @property
    def caption_content(self) -> Optional[str]:
        return resolve_caption(self.active_variant, self.caption, self.alt)

    @property
    def hover_alt(self) -> str:
        return _t("caption.hover_alt", alt=self.alt)

    # ==================== 属性更新 ====================

    def update(self, effect: EffectSpec = _UNSET, effect_variants: VariantsSpec = _UNSET) -> bool:
        """更新效果描述或显式序列

        基础效果或变体序列发生变化时计数归零。

        Returns:
            是否发生了重置
        """
        if effect is not _UNSET:
            self._effect = effect
        if effect_variants is not _UNSET:
            self._effect_variants = effect_variants

        base_effects = parse_effects(self._effect)
        base_changed = base_effects != self._base_effects
        self._base_effects = base_effects

        sequence = resolve_variant_sequence(base_effects, self._effect_variants)
        reset = self._sequencer.set_sequence(sequence)
        if base_changed and not reset:
            self._sequencer.reset()
            reset = True
        if reset:
            logger.debug("Gallery card effects updated → %s", sequence)
        return reset

    # ==================== 交互事件 ====================

    def on_mouse_leave(self) -> int:
        return self._sequencer.advance(BoundaryEvent.MOUSE_LEAVE)

    def on_touch_end(self) -> int:
        return self._sequencer.advance(BoundaryEvent.TOUCH_END)

    def on_blur(self) -> int:
        return self._sequencer.advance(BoundaryEvent.BLUR)

    def unmount(self) -> None:
        self._sequencer.unmount()

    def to_dict(self) -> dict:
        """当前渲染指令的字典表示"""
        return {
            "default_image": self.default_image,
            "hover_image": self.hover_image,
            "alt": self.alt,
            "classes": self.effect_class_names,
            "caption": self.caption_content,
            "round": self._sequencer.active_index,
            "rounds": len(self.variant_sequence),
        }

    def __repr__(self) -> str:
        return (
            f"GalleryCard(effect={self._base_effects!r}, "
            f"round={self._sequencer.active_index + 1}/{len(self.variant_sequence)})"
        )
