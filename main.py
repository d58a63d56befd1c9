# -*- coding: utf-8 -*-
"""
画廊卡片效果 - 命令行入口

使用方法:
    python main.py preview --effect "crossfade,slide" --events 2
    python main.py preview --variants '[["crossfade","slide"],["flip"]]'
    python main.py serialize --effect "crossfade|bogus" --variants "slide;flip"
    python main.py tui
"""

import argparse
import json
import logging
import sys

from logging_config import setup_logging

from gallery.card import GalleryCard
from gallery.config import get_config
from gallery.effects import parse_effects, serialize_effect_variants, serialize_effects
from gallery.exceptions import ConfigurationError, GalleryError
from i18n import set_locale

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="画廊卡片效果预览工具")
    parser.add_argument("--locale", default=None, help="显示语言 (en_US / zh_CN)")
    parser.add_argument("--strict", action="store_true", help="遇到未知效果时报错")
    sub = parser.add_subparsers(dest="command", required=True)

    preview = sub.add_parser("preview", help="打印变体序列")
    preview.add_argument("--effect", default="crossfade", help="效果描述")
    preview.add_argument("--variants", default=None, help="显式变体序列")
    preview.add_argument("--events", type=int, default=0, help="模拟的边界事件次数")
    preview.add_argument("--caption", default=None)
    preview.add_argument("--alt", default=None)
    preview.add_argument("--image", default="default.jpg")
    preview.add_argument("--hover-image", default="hover.jpg")

    serialize = sub.add_parser("serialize", help="输出存储用 JSON")
    serialize.add_argument("--effect", default="crossfade")
    serialize.add_argument("--variants", default=None)

    sub.add_parser("tui", help="启动 Textual 画廊预览")
    return parser


def _check_strict(args: argparse.Namespace) -> None:
    """--strict 时先以严格模式解析一遍，未知效果直接报错"""
    if not args.strict:
        return
    from gallery.effects import parse_effect_variants

    base = parse_effects(args.effect, strict=True)
    if args.variants is not None:
        parse_effect_variants(args.variants, base, strict=True)


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    errors = config.validate()
    if errors:
        raise ConfigurationError(errors)
    set_locale(args.locale or config.locale)

    _check_strict(args)

    if args.command == "preview":
        from ui.preview import print_preview

        card = GalleryCard(
            default_image=args.image,
            hover_image=args.hover_image,
            effect=args.effect,
            alt=args.alt,
            caption=args.caption,
            effect_variants=args.variants,
        )
        print_preview(card, events=max(args.events, 0))
    elif args.command == "serialize":
        base = parse_effects(args.effect)
        print(json.dumps({
            "effect": json.loads(serialize_effects(list(base))),
            "effect_variants": json.loads(serialize_effect_variants(args.variants, base)),
        }, ensure_ascii=False))
    elif args.command == "tui":
        from ui.textual_ui.app import GalleryApp

        GalleryApp().run()
    return 0


def main():
    """程序入口"""
    setup_logging(enable_console=False)

    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        sys.exit(0)
    except GalleryError as e:
        logger.error("Gallery error: %s", e)
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(2)
    except Exception:
        logger.exception("Unhandled exception")
        raise


if __name__ == "__main__":
    main()
