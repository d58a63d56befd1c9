# -*- coding: utf-8 -*-
"""
画廊卡片效果引擎
包含效果目录、效果描述解析、变体序列构建与校验、悬停序列器和说明解析

数据单向流动:
    效果描述 → 基础效果 → 变体序列 → (每次交互) 当前轮次 → 说明需求
"""

from .caption import needs_caption, resolve_caption
from .card import GalleryCard, effect_class_names, resolve_variant_sequence
from .config import EngineConfig, get_config, reset_config
from .effects import (
    CAPTION_EFFECT_KEYS,
    EFFECT_OPTIONS,
    MAX_EFFECTS_PER_ROUND,
    SUPPORTED_EFFECT_KEYS,
    active_variant,
    build_effect_variants,
    is_supported,
    parse_effect_variants,
    parse_effects,
    requires_caption,
    serialize_effect_variants,
    serialize_effects,
)
from .enums import BoundaryEvent, SpecKind
from .exceptions import GalleryError, UnknownEffectError
from .sequencer import CardSequencer

__all__ = [
    # 效果目录
    'CAPTION_EFFECT_KEYS', 'EFFECT_OPTIONS', 'MAX_EFFECTS_PER_ROUND',
    'SUPPORTED_EFFECT_KEYS', 'is_supported', 'requires_caption',
    # 解析与构建
    'parse_effects', 'build_effect_variants', 'parse_effect_variants',
    'active_variant', 'serialize_effects', 'serialize_effect_variants',
    # 运行时
    'CardSequencer', 'BoundaryEvent', 'SpecKind',
    'GalleryCard', 'effect_class_names', 'resolve_variant_sequence',
    'needs_caption', 'resolve_caption',
    # 配置与异常
    'EngineConfig', 'get_config', 'reset_config',
    'GalleryError', 'UnknownEffectError',
]
