"""卡片悬停序列器 (Card Sequencer)

每张卡片一个实例，持有单调递增的交互计数 hover_sequence。
揭示边界事件（指针离开 / 触摸结束 / 失焦）各使计数 +1，
当前轮次始终为 sequence[hover_sequence mod len(sequence)]。
变体序列对象变化（身份比较）时计数归零。
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional, Union

from .effects.variants import EffectCombination, VariantSequence, active_variant
from .enums import BoundaryEvent
from .exceptions import InvalidBoundaryEventError, SequencerUnmountedError

logger = logging.getLogger(__name__)


class CardSequencer:
    """卡片悬停序列状态机

    使用方式::

        seq = CardSequencer(build_effect_variants(["crossfade", "slide"]))
        seq.advance(BoundaryEvent.MOUSE_LEAVE)
        seq.active_variant   # ("slide", "crossfade")
    """

    def __init__(
        self,
        sequence: VariantSequence,
        on_advance: Optional[Callable[[int], None]] = None,
    ) -> None:
        if not sequence:
            raise ValueError("variant sequence must contain at least one combination")
        self._sequence = sequence
        self._hover_sequence = 0
        self._mounted = True
        self._on_advance = on_advance

    @property
    def sequence(self) -> VariantSequence:
        return self._sequence

    @property
    def hover_sequence(self) -> int:
        """已处理的边界事件数"""
        return self._hover_sequence

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def active_index(self) -> int:
        return self._hover_sequence % len(self._sequence)

    @property
    def active_variant(self) -> EffectCombination:
        return active_variant(self._sequence, self._hover_sequence)

    def set_sequence(self, sequence: VariantSequence) -> bool:
        """替换变体序列

        仅在序列对象身份变化时重置计数；同一对象重复传入不重置。

        Returns:
            是否发生了重置
        """
        if sequence is self._sequence:
            return False
        if not sequence:
            raise ValueError("variant sequence must contain at least one combination")
        logger.debug(
            "Variant sequence changed (%d → %d rounds), resetting hover sequence from %d",
            len(self._sequence), len(sequence), self._hover_sequence,
        )
        self._sequence = sequence
        self._hover_sequence = 0
        return True

    def advance(self, event: Union[BoundaryEvent, str] = BoundaryEvent.MOUSE_LEAVE) -> int:
        """处理一个揭示边界事件，计数恰好 +1（无去抖）

        Args:
            event: BoundaryEvent 或其字符串值（如 ``"touch_end"``）

        Returns:
            新的计数值

        Raises:
            InvalidBoundaryEventError: 事件不是揭示边界事件
            SequencerUnmountedError: 卡片已卸载
        """
        if not self._mounted:
            raise SequencerUnmountedError()
        try:
            event = BoundaryEvent(event)
        except ValueError:
            raise InvalidBoundaryEventError(event) from None
        self._hover_sequence += 1
        logger.debug("Boundary event %s → hover sequence %d", event.value, self._hover_sequence)
        if self._on_advance is not None:
            self._on_advance(self._hover_sequence)
        return self._hover_sequence

    def reset(self) -> None:
        """显式重置计数（挂载时的初始状态）"""
        self._hover_sequence = 0

    def unmount(self) -> None:
        """卸载：丢弃状态，不做持久化"""
        self._mounted = False
        self._hover_sequence = 0
        self._on_advance = None
