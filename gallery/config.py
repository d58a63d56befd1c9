"""效果引擎配置中心 (SSOT - 单一事实来源)

所有可配置的引擎参数应在此定义，支持从环境变量覆盖。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


@dataclass(frozen=True)
class EngineConfig:
    """引擎配置类 (不可变)

    所有配置项支持通过环境变量覆盖：
    - GALLERY_DEFAULT_EFFECT: 空描述时的回退效果
    - GALLERY_MAX_EFFECTS_PER_ROUND: 每轮最多叠加的效果数（亦为序列最大轮数）
    - GALLERY_STRICT_EFFECTS: 遇到未知效果时抛出异常而非丢弃
    - GALLERY_LOCALE: 显示语言
    - GALLERY_LOG_LEVEL: 日志级别
    - GALLERY_PARSE_CACHE_SIZE: 解析缓存容量
    """
    # ==================== 效果解析 ====================
    default_effect: str = field(
        default_factory=lambda: os.environ.get("GALLERY_DEFAULT_EFFECT", "crossfade")
    )
    max_effects_per_round: int = field(
        default_factory=lambda: _get_env_int("GALLERY_MAX_EFFECTS_PER_ROUND", 3)
    )
    strict_effects: bool = field(
        default_factory=lambda: _get_env_bool("GALLERY_STRICT_EFFECTS", False)
    )
    parse_cache_size: int = field(
        default_factory=lambda: _get_env_int("GALLERY_PARSE_CACHE_SIZE", 256)
    )

    # ==================== 显示与日志 ====================
    locale: str = field(
        default_factory=lambda: os.environ.get("GALLERY_LOCALE", "en_US")
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("GALLERY_LOG_LEVEL", "INFO")
    )

    @classmethod
    def from_env(cls) -> EngineConfig:
        """从环境变量创建配置实例"""
        return cls()

    def validate(self) -> list[str]:
        """校验配置，返回错误描述列表（空列表表示有效）"""
        from i18n import get_available_locales

        from .effects.catalog import SUPPORTED_EFFECT_KEYS

        errors: list[str] = []
        if self.default_effect not in SUPPORTED_EFFECT_KEYS:
            errors.append(f"default_effect '{self.default_effect}' is not a supported effect")
        if self.max_effects_per_round < 1:
            errors.append(f"max_effects_per_round must be >= 1, got {self.max_effects_per_round}")
        if self.parse_cache_size < 0:
            errors.append(f"parse_cache_size must be >= 0, got {self.parse_cache_size}")
        if self.locale not in get_available_locales():
            errors.append(f"locale '{self.locale}' is not available")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"log_level '{self.log_level}' is not a logging level")
        return errors

    @property
    def round_limit(self) -> int:
        """实际生效的每轮上限（至少为 1，保证组合非空）"""
        return max(1, self.max_effects_per_round)

    def get(self, key: str, default: object | None = None) -> object:
        """字典风格的访问方法"""
        return getattr(self, key, default)


# 全局配置单例
_config: EngineConfig | None = None


def get_config() -> EngineConfig:
    """获取全局配置实例（懒加载）"""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def reset_config() -> None:
    """重置配置（用于测试）"""
    global _config
    _config = None
