"""画廊卡片异常模块
定义效果解析与卡片序列器的各类异常，提供明确的错误类型和信息
"""

from __future__ import annotations

from collections.abc import Iterable

from i18n import t as _t


class GalleryError(Exception):
    """画廊异常基类

    所有效果引擎相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str, details: dict | None = None):
        """初始化画廊异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 效果相关异常 ====================


class EffectError(GalleryError):
    """效果配置异常基类"""

    def __init__(self, message: str | None = None, details: dict | None = None):
        if message is None:
            message = _t("exc.effect_error")
        super().__init__(message, details)


class UnknownEffectError(EffectError):
    """未知效果异常

    严格模式下，效果描述中出现目录外的效果标识时抛出
    """

    def __init__(
        self,
        keys: Iterable[str] = (),
        message: str | None = None,
        source: object | None = None,
    ):
        keys = tuple(keys)
        if message is None:
            message = _t("exc.unknown_effect", keys=", ".join(keys))
        details: dict = {"keys": list(keys)}
        if source is not None:
            details["source"] = source
        super().__init__(message, details)
        self.keys = keys
        self.source = source


# ==================== 序列器相关异常 ====================


class SequencerError(GalleryError):
    """卡片序列器异常基类"""

    def __init__(self, message: str | None = None, details: dict | None = None):
        if message is None:
            message = _t("exc.sequencer_error")
        super().__init__(message, details)


class InvalidBoundaryEventError(SequencerError):
    """无效边界事件异常

    当 advance() 收到非揭示边界事件时抛出
    """

    def __init__(self, event: object = None, message: str | None = None):
        if message is None:
            message = _t("exc.invalid_boundary_event", event=event)
        super().__init__(message, {"event": repr(event)})
        self.event = event


class SequencerUnmountedError(SequencerError):
    """序列器已卸载异常"""

    def __init__(self, message: str | None = None):
        if message is None:
            message = _t("exc.sequencer_unmounted")
        super().__init__(message)


# ==================== 配置相关异常 ====================


class ConfigurationError(GalleryError):
    """配置异常

    当 EngineConfig.validate() 报告错误时抛出
    """

    def __init__(self, errors: list[str] | None = None, message: str | None = None):
        if message is None:
            message = _t("exc.configuration")
        errors = list(errors or [])
        super().__init__(message, {"errors": errors} if errors else None)
        self.errors = errors
