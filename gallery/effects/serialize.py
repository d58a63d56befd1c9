"""效果与变体序列的 JSON 序列化（存储层使用）"""

from __future__ import annotations

import json

from .catalog import DEFAULT_EFFECT, is_supported
from .parser import EffectSpec
from .variants import VariantsSpec, normalize_effect_variants


def serialize_effects(value: object) -> str:
    """序列化效果列表为 JSON 数组字符串

    非列表输入视为单个效果；无效内容回退为 ``["crossfade"]``。
    """
    if not isinstance(value, (list, tuple)):
        single = value if is_supported(value) else DEFAULT_EFFECT
        return json.dumps([single])
    cleaned = [token for token in value if is_supported(token)]
    return json.dumps(cleaned if cleaned else [DEFAULT_EFFECT])


def serialize_effect_variants(
    variants: VariantsSpec,
    fallback_base: EffectSpec = None,
) -> str:
    """序列化规范化后的变体序列为 JSON 二维数组字符串"""
    normalized = normalize_effect_variants(variants, fallback_base)
    return json.dumps([list(combination) for combination in normalized])
