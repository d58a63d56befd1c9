"""轮次编辑与摘要

管理端按轮次编辑变体序列：向某轮添加/移除/移动效果、清空某轮，
每次编辑后重新规范化整个序列。summarize_rounds 生成逐轮的可读摘要。
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from i18n import effect_label
from i18n import t as _t

from .config import get_config
from .effects.catalog import is_supported
from .effects.parser import EffectSpec
from .effects.variants import VariantSequence, parse_effect_variants

logger = logging.getLogger(__name__)

Rounds = Sequence[Sequence[str]]


def _edit_round(
    rounds: Rounds,
    round_index: int,
    updater: Callable[[list[str]], list[str]],
    base: EffectSpec,
) -> VariantSequence:
    """对指定轮次应用 updater 并重新规范化"""
    edited = [list(combination) for combination in rounds]
    if round_index == len(edited) and round_index < get_config().round_limit:
        edited.append([])
    if 0 <= round_index < len(edited):
        edited[round_index] = updater(edited[round_index])
    else:
        logger.debug("Round index %d out of range (%d rounds)", round_index, len(edited))
    return parse_effect_variants(edited, base)


def add_effect_to_round(
    rounds: Rounds,
    round_index: int,
    effect: str,
    base: EffectSpec = None,
) -> VariantSequence:
    """向某轮追加效果；已存在、不受支持或该轮已满时不变

    round_index 等于当前轮数时新建一轮（不超过最大轮数）。
    """
    limit = get_config().round_limit

    def updater(combination: list[str]) -> list[str]:
        if not is_supported(effect) or effect in combination or len(combination) >= limit:
            return combination
        return combination + [effect]

    return _edit_round(rounds, round_index, updater, base)


def remove_effect_from_round(
    rounds: Rounds,
    round_index: int,
    effect_index: int,
    base: EffectSpec = None,
) -> VariantSequence:
    """移除某轮中指定位置的效果"""
    return _edit_round(
        rounds,
        round_index,
        lambda combination: [e for i, e in enumerate(combination) if i != effect_index],
        base,
    )


def move_effect_within_round(
    rounds: Rounds,
    round_index: int,
    effect_index: int,
    direction: int,
    base: EffectSpec = None,
) -> VariantSequence:
    """在轮内移动效果位置（direction 为 -1 / +1），越界时不变"""

    def updater(combination: list[str]) -> list[str]:
        target = effect_index + direction
        if not (0 <= effect_index < len(combination)) or not (0 <= target < len(combination)):
            return combination
        moved = list(combination)
        moved[effect_index], moved[target] = moved[target], moved[effect_index]
        return moved

    return _edit_round(rounds, round_index, updater, base)


def clear_round(rounds: Rounds, round_index: int, base: EffectSpec = None) -> VariantSequence:
    """清空某轮（空轮在规范化时被丢弃）"""
    return _edit_round(rounds, round_index, lambda combination: [], base)


def round_labels(combination: Sequence[str]) -> str:
    labels = " + ".join(effect_label(effect) for effect in combination)
    return labels or _t("round.empty")


def summarize_rounds(sequence: Rounds) -> list[str]:
    """逐轮摘要；与上一轮完全相同（顺序一致）时标注"""
    lines: list[str] = []
    previous: tuple[str, ...] | None = None
    for index, combination in enumerate(sequence, start=1):
        current = tuple(combination)
        labels = round_labels(current)
        if previous is not None and current == previous:
            lines.append(_t("round.same_as_previous", index=index, labels=labels))
        else:
            lines.append(_t("round.summary", index=index, labels=labels))
        previous = current
    return lines
