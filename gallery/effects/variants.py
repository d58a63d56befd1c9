# -*- coding: utf-8 -*-
"""
变体序列构建与校验

- build_effect_variants: 调用方未给出显式序列时，由基础效果推导出确定的轮次序列
- parse_effect_variants: 校验调用方给出的显式序列，全部无效时回退到推导序列

两者的结果都按规范化输入缓存，相同输入返回同一个序列对象。
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from functools import lru_cache
from typing import Optional, Union

from ..config import get_config
from .parser import (
    EffectSpec,
    _CACHE_SIZE,
    _decode_json_array,
    effect_tokens,
    filter_supported,
    sanitize_effect_list,
)

logger = logging.getLogger(__name__)

EffectCombination = tuple[str, ...]
VariantSequence = tuple[EffectCombination, ...]
VariantsSpec = Union[None, str, Sequence[str], Sequence[Sequence[str]]]

# 轮次分隔符（轮内仍使用 , 或 |）
ROUND_DELIMITER = re.compile(r";")


@lru_cache(maxsize=_CACHE_SIZE)
def _build_cached(base: EffectCombination, limit: int) -> VariantSequence:
    if len(base) < 2:
        return (base,)

    rotated = base[1:] + base[:1]
    reversed_base = tuple(reversed(base))
    return (base, rotated, reversed_base)[:limit]


def build_effect_variants(base_list: EffectSpec = None) -> VariantSequence:
    """由基础效果推导变体序列

    单个效果时只有一轮（不循环）；多个效果时依次为
    原顺序、首个效果移到末尾、整体倒序，最多 max_effects_per_round 轮。

    Args:
        base_list: 基础效果描述（任意 parse_effects 接受的形态）

    Returns:
        非空变体序列，所有效果都来自基础效果
    """
    base = sanitize_effect_list(base_list)
    return _build_cached(base, get_config().round_limit)


def _is_round(item: object) -> bool:
    return isinstance(item, (list, tuple))


def _split_rounds(raw: object) -> tuple[tuple[str, ...], ...]:
    """把显式序列拆成每轮的原始 token 元组"""
    if raw is None:
        return ()

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return ()
        decoded = _decode_json_array(text)
        if decoded is not None:
            return _split_rounds(decoded)
        return tuple(effect_tokens(part) for part in ROUND_DELIMITER.split(text))

    if isinstance(raw, (list, tuple)):
        if not raw:
            return ()
        if any(_is_round(item) for item in raw):
            # 完整序列：每个元素是一轮，字符串元素按分隔符解析
            return tuple(effect_tokens(item) for item in raw)
        # 扁平列表：视为单独一轮
        return (effect_tokens(raw),)

    logger.debug("Ignoring effect variants of unsupported type %s", type(raw).__name__)
    return ()


@lru_cache(maxsize=_CACHE_SIZE)
def _validate_rounds(
    rounds: tuple[tuple[str, ...], ...],
    limit: int,
    strict: bool,
) -> Optional[VariantSequence]:
    validated: list[EffectCombination] = []
    for tokens in rounds:
        combination = filter_supported(tokens, strict)
        if not combination:
            logger.debug("Dropped empty effect round %s", tokens)
            continue
        validated.append(combination[:limit])
        if len(validated) >= limit:
            break
    return tuple(validated) if validated else None


def parse_effect_variants(
    raw_variants: VariantsSpec = None,
    fallback_base: EffectSpec = None,
    *,
    strict: Optional[bool] = None,
) -> VariantSequence:
    """校验显式变体序列

    Args:
        raw_variants: JSON 字符串、``;`` 分隔轮次的字符串、
            扁平效果列表（一轮）或嵌套列表（完整序列）
        fallback_base: 基础效果，仅在显式序列校验后为空时用于推导
        strict: True 时遇到未知标识抛出异常；None 时取配置

    Returns:
        非空变体序列；显式内容优先，不会被基础效果覆盖或补齐

    Raises:
        UnknownEffectError: 严格模式下存在未知标识
    """
    if strict is None:
        strict = get_config().strict_effects
    limit = get_config().round_limit

    sequence = _validate_rounds(_split_rounds(raw_variants), limit, strict)
    if sequence is None:
        return build_effect_variants(fallback_base)
    return sequence


# 存储层使用的名称
normalize_effect_variants = parse_effect_variants


def active_variant(sequence: VariantSequence, counter: int) -> EffectCombination:
    """按循环下标取当前轮次：sequence[counter mod len]"""
    if counter < 0:
        raise ValueError(f"counter must be non-negative, got {counter}")
    return sequence[counter % len(sequence)]


def same_look(a: Sequence[str], b: Sequence[str]) -> bool:
    """两个组合的效果集合相同即视为同一外观（忽略顺序）"""
    return frozenset(a) == frozenset(b)


def clear_variant_cache() -> None:
    """清空变体缓存"""
    _build_cached.cache_clear()
    _validate_rounds.cache_clear()
