"""效果引擎模块

目录 → 解析 → 变体构建/校验 → 序列化，
均为纯函数，结果按规范化输入缓存。
"""

from .catalog import (
    CAPTION_EFFECT_KEYS,
    DEFAULT_EFFECT,
    EFFECT_OPTIONS,
    MAX_EFFECTS_PER_ROUND,
    SUPPORTED_EFFECT_KEYS,
    EffectOption,
    get_option,
    is_supported,
    requires_caption,
)
from .parser import classify_spec, clear_parse_cache, parse_effects, sanitize_effect_list
from .serialize import serialize_effect_variants, serialize_effects
from .variants import (
    active_variant,
    build_effect_variants,
    clear_variant_cache,
    normalize_effect_variants,
    parse_effect_variants,
    same_look,
)

__all__ = [
    'CAPTION_EFFECT_KEYS', 'DEFAULT_EFFECT', 'EFFECT_OPTIONS',
    'MAX_EFFECTS_PER_ROUND', 'SUPPORTED_EFFECT_KEYS', 'EffectOption',
    'get_option', 'is_supported', 'requires_caption',
    'classify_spec', 'parse_effects', 'sanitize_effect_list', 'clear_parse_cache',
    'build_effect_variants', 'parse_effect_variants', 'normalize_effect_variants',
    'active_variant', 'same_look', 'clear_variant_cache',
    'serialize_effects', 'serialize_effect_variants',
]
