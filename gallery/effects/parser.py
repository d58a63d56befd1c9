# -*- coding: utf-8 -*-
"""
效果描述解析器

将调用方提供的效果描述（单个标识 / 有序列表 / 分隔符字符串 / JSON 数组字符串）
统一转换为去重、校验过的有序效果元组。

解析结果按规范化后的输入缓存，相同输入总是返回同一个元组对象，
序列器据此判断变体序列是否真的发生了变化。
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import Optional, Union

from ..config import get_config
from ..enums import SpecKind
from ..exceptions import UnknownEffectError
from .catalog import DEFAULT_EFFECT, is_supported

logger = logging.getLogger(__name__)

EffectSpec = Union[None, str, Sequence[str]]

# 组合内分隔符：逗号或竖线
KEY_DELIMITER = re.compile(r"[,|]")

_CACHE_SIZE = get_config().parse_cache_size


def classify_spec(spec: object) -> SpecKind:
    """判断效果描述的输入形态"""
    if spec is None:
        return SpecKind.EMPTY
    if isinstance(spec, str):
        text = spec.strip()
        if not text:
            return SpecKind.EMPTY
        if text.startswith("[") or KEY_DELIMITER.search(text):
            return SpecKind.DELIMITED
        return SpecKind.SINGLE
    if isinstance(spec, (list, tuple)):
        return SpecKind.LIST if spec else SpecKind.EMPTY
    return SpecKind.EMPTY


def _decode_json_array(text: str) -> Optional[list]:
    """尝试把字符串解析为 JSON 数组，失败返回 None"""
    if not text.startswith("["):
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    return parsed if isinstance(parsed, list) else None


def _token(item: object) -> str:
    """列表元素 → 字符串 token（非字符串元素保留其表示，必然不在目录中）"""
    return item.strip() if isinstance(item, str) else repr(item)


@lru_cache(maxsize=_CACHE_SIZE)
def _tokenize_string(text: str) -> tuple[str, ...]:
    decoded = _decode_json_array(text)
    if decoded:
        return tuple(token for token in map(_token, decoded) if token)
    return tuple(token for token in (part.strip() for part in KEY_DELIMITER.split(text)) if token)


def effect_tokens(spec: object) -> tuple[str, ...]:
    """把任意形态的效果描述拆成原始 token 元组（未校验）"""
    kind = classify_spec(spec)
    if kind is SpecKind.EMPTY:
        if spec is not None and not isinstance(spec, (str, list, tuple)):
            logger.debug("Ignoring effect spec of unsupported type %s", type(spec).__name__)
        return ()
    if kind is SpecKind.SINGLE:
        return (spec.strip(),)
    if kind is SpecKind.DELIMITED:
        return _tokenize_string(spec.strip())
    return tuple(token for token in map(_token, spec) if token)


def filter_supported(tokens: Iterable[str], strict: bool = False) -> tuple[str, ...]:
    """保留目录内的标识并按首次出现顺序去重

    Raises:
        UnknownEffectError: 严格模式下存在未知标识
    """
    kept: list[str] = []
    dropped: list[str] = []
    for token in tokens:
        if not is_supported(token):
            dropped.append(token)
        elif token not in kept:
            kept.append(token)

    if dropped:
        if strict:
            raise UnknownEffectError(dropped)
        logger.debug("Dropped unsupported effect keys: %s", dropped)
    return tuple(kept)


def _resolve_fallback(fallback: Optional[str]) -> str:
    """回退效果必须在目录内，否则使用配置或内置默认值"""
    if is_supported(fallback):
        return fallback
    configured = get_config().default_effect
    if is_supported(configured):
        return configured
    return DEFAULT_EFFECT


@lru_cache(maxsize=_CACHE_SIZE)
def _parse_tokens(tokens: tuple[str, ...], fallback: str, strict: bool) -> tuple[str, ...]:
    effects = filter_supported(tokens, strict)
    return effects if effects else (fallback,)


def parse_effects(
    spec: EffectSpec = None,
    fallback: Optional[str] = None,
    *,
    strict: Optional[bool] = None,
) -> tuple[str, ...]:
    """解析效果描述

    Args:
        spec: 单个标识、有序列表、``,``/``|`` 分隔字符串或 JSON 数组字符串
        fallback: 描述为空或全部无效时使用的效果（默认取配置）
        strict: True 时遇到未知标识抛出异常；None 时取配置

    Returns:
        非空、去重、保持首次出现顺序的效果元组

    Raises:
        UnknownEffectError: 严格模式下存在未知标识
    """
    if strict is None:
        strict = get_config().strict_effects
    return _parse_tokens(effect_tokens(spec), _resolve_fallback(fallback), strict)


def sanitize_effect_list(
    spec: EffectSpec = None,
    fallback_list: Optional[Sequence[str]] = None,
    *,
    strict: Optional[bool] = None,
) -> tuple[str, ...]:
    """解析并截断到每轮最大效果数"""
    fallback = fallback_list[0] if fallback_list else None
    limit = get_config().round_limit
    effects = parse_effects(spec, fallback, strict=strict)
    return effects if len(effects) <= limit else effects[:limit]


def clear_parse_cache() -> None:
    """清空解析缓存（用于测试或配置变更后）"""
    _tokenize_string.cache_clear()
    _parse_tokens.cache_clear()
