# -*- coding: utf-8 -*-
"""
效果目录

封闭的效果标识集合，以及需要说明文字的子集。
进程启动时初始化一次，之后只读。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from i18n import effect_description, effect_label


@dataclass(frozen=True)
class EffectOption:
    """效果选项（标识 + 显示名 + 描述）"""

    value: str
    label: str
    description: str

    @property
    def localized_label(self) -> str:
        return effect_label(self.value)

    @property
    def localized_description(self) -> str:
        return effect_description(self.value) or self.description


EFFECT_OPTIONS: tuple[EffectOption, ...] = (
    EffectOption("crossfade", "✨ Crossfade", "Smooth dissolve between images"),
    EffectOption("slide", "➡️ Slide + Fade", "Directional slide with fade"),
    EffectOption("scaleFade", "🔍 Scale + Fade", "Zoom in while fading"),
    EffectOption("glowLift", "🌟 Glow Lift", "Lift card with soft glow"),
    EffectOption("tiltParallax", "🎚️ Tilt Parallax", "3D tilt toward cursor"),
    EffectOption("underlineSweep", "〰️ Underline Sweep", "Accent underline on hover"),
    EffectOption("pulse", "💓 Gentle Pulse", "Breathing scale pulse"),
    EffectOption("flip", "🃏 Flip Reveal", "Y-axis card flip"),
    EffectOption("gradientSweep", "🌈 Gradient Sweep", "Accent gradient wash"),
    EffectOption("ripple", "💧 Ripple Highlight", "Center-out ripple glow"),
    EffectOption("perspectiveTilt", "📐 Perspective Tilt", "Card tilts toward pointer"),
    EffectOption(
        "parallaxLayers", "🪄 Parallax Layers",
        "Foreground & background move at different speeds",
    ),
    EffectOption("captionSlide", "📝 Caption Slide-Up", "Details panel glides in from bottom"),
    EffectOption(
        "shadowShift", "🕶️ Shadow Shift",
        "Dramatic shadow pivots to mimic moving light",
    ),
    EffectOption("neonFrame", "💡 Neon Frame", "Glowing outline traces around the card"),
    EffectOption("contentReveal", "📬 Content Reveal", "Hidden text fades and slides into view"),
    EffectOption(
        "imageZoomOverlay", "🔍 Image Zoom + Overlay",
        "Background zoom with translucent overlay",
    ),
    EffectOption("borderRun", "🏃 Border Run", "Accent line races along the border"),
    EffectOption("backgroundSwap", "🖼️ Background Swap", "Alternate artwork crossfades in"),
    EffectOption("staggeredText", "📚 Staggered Text", "Card copy animates line by line"),
)

# 保持目录顺序的标识元组
SUPPORTED_EFFECT_KEYS: tuple[str, ...] = tuple(option.value for option in EFFECT_OPTIONS)

CAPTION_EFFECT_KEYS: frozenset[str] = frozenset(
    {"captionSlide", "contentReveal", "staggeredText"}
)

MAX_EFFECTS_PER_ROUND = 3
DEFAULT_EFFECT = "crossfade"

_SUPPORTED = frozenset(SUPPORTED_EFFECT_KEYS)
_OPTIONS_BY_KEY = {option.value: option for option in EFFECT_OPTIONS}


def is_supported(key: object) -> bool:
    """检查是否为目录内的效果标识"""
    return isinstance(key, str) and key in _SUPPORTED


def requires_caption(key: object) -> bool:
    """检查效果是否依赖说明文字"""
    return isinstance(key, str) and key in CAPTION_EFFECT_KEYS


def get_option(key: str) -> Optional[EffectOption]:
    """获取效果选项，未知标识返回 None"""
    return _OPTIONS_BY_KEY.get(key)
