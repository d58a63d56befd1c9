"""轻量级 i18n 框架：零外部依赖。

用法::

    from i18n import t, set_locale

    set_locale("zh_CN")
    print(t("effect.crossfade.label"))

    # 便捷别名
    from i18n import _
    print(_("caption.default_alt"))  # → "Gallery image" (en_US) / "画廊图片" (zh_CN)

    # 领域助手
    from i18n import effect_label, effect_description
    print(effect_label("slide"))        # → "➡️ Slide + Fade" / "➡️ 滑动淡入"
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_DEFAULT_LOCALE = "en_US"

_locale: str = _DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """按需加载翻译表。"""
    if locale == "zh_CN":
        from .zh_CN import STRINGS
    elif locale == "en_US":
        from .en_US import STRINGS
    else:
        raise ValueError(f"Unsupported locale: {locale}")
    return STRINGS


def set_locale(locale: str) -> None:
    """设置当前语言。"""
    global _locale
    # 预加载以确保 locale 有效
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    _locale = locale


def get_locale() -> str:
    """获取当前语言。"""
    return _locale


def get_available_locales() -> list[str]:
    """返回所有可用的 locale 列表。"""
    return ["en_US", "zh_CN"]


def t(key: str, **kwargs: object) -> str:
    """翻译函数。

    查找当前 locale 对应的字符串，用 ``kwargs`` 做 format 替换。
    若 key 缺失则回退到 en_US，仍缺失则返回 ``[key]``。

    Args:
        key: 翻译键，如 ``"round.summary"``。
        **kwargs: 格式化参数，如 ``index=1``。
    """
    if _locale not in _tables:
        _tables[_locale] = _load_table(_locale)

    table = _tables[_locale]
    template = table.get(key)

    # 回退到默认语言
    if template is None and _locale != _DEFAULT_LOCALE:
        if _DEFAULT_LOCALE not in _tables:
            _tables[_DEFAULT_LOCALE] = _load_table(_DEFAULT_LOCALE)
        template = _tables[_DEFAULT_LOCALE].get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using %s", key, _locale, _DEFAULT_LOCALE)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


# ── 便捷别名 ──
_ = t


# ── 领域助手函数 ──


def _is_missing(key: str, result: str) -> bool:
    """检查 t() 返回值是否表示 key 缺失。"""
    return result == f"[{key}]"


def effect_label(effect_key: str) -> str:
    """获取效果的国际化显示名，未知效果原样返回。

    Args:
        effect_key: 效果标识符，如 ``"crossfade"``、``"glowLift"``。
    """
    key = f"effect.{effect_key}.label"
    result = t(key)
    return result if not _is_missing(key, result) else effect_key


def effect_description(effect_key: str) -> str:
    """获取效果的国际化描述，未知效果返回空串。"""
    key = f"effect.{effect_key}.description"
    result = t(key)
    return result if not _is_missing(key, result) else ""
