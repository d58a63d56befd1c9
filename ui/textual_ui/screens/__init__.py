"""TUI Screens 模块"""

from .gallery import GalleryScreen

__all__ = [
    "GalleryScreen",
]
