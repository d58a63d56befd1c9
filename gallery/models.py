"""画廊卡片记录 Pydantic 校验模型

外部存储返回的卡片行先经此模型校验结构与字段类型，
再构造 GalleryCard；效果内容本身由解析器宽松处理，
这里只拒绝类型错误（例如 effect 是数字）或缺失的图片地址。

设计原则:
  - 校验模型与内部 GalleryCard 分离 (校验层 vs 引擎层)
  - 校验失败抛出 pydantic.ValidationError，由调用方统一处理
  - 存储行通常带有额外列，使用 extra="ignore"
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .card import GalleryCard

EffectField = Union[str, list[str], None]
VariantsField = Union[str, list[str], list[list[str]], None]


class GalleryCardRecord(BaseModel):
    """画廊卡片存储行校验模型"""

    model_config = ConfigDict(extra="ignore")

    default_image_url: str = Field(min_length=1)
    hover_image_url: str = Field(min_length=1)
    effect: EffectField = "crossfade"
    effect_variants: VariantsField = None
    caption: Optional[str] = None
    alt: Optional[str] = None
    position: int = Field(default=0, ge=0)
    is_active: bool = True

    @field_validator("default_image_url", "hover_image_url")
    @classmethod
    def url_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("image url must not be blank")
        return v

    def to_card(self) -> GalleryCard:
        """构造运行时卡片模型"""
        return GalleryCard(
            default_image=self.default_image_url,
            hover_image=self.hover_image_url,
            effect=self.effect,
            alt=self.alt,
            caption=self.caption,
            effect_variants=self.effect_variants,
        )


def validate_card_record(raw_json: str) -> GalleryCardRecord:
    """校验原始 JSON 字符串，返回 GalleryCardRecord

    Raises:
        pydantic.ValidationError: 校验失败
    """
    return GalleryCardRecord.model_validate_json(raw_json)
