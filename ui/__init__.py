# -*- coding: utf-8 -*-
"""
UI模块
提供 Rich 预览与 Textual 画廊界面
"""

from .preview import build_sequence_table, print_preview, render_preview

__all__ = ['build_sequence_table', 'print_preview', 'render_preview']
