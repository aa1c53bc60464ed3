# -*- coding: utf-8 -*-
"""图片收集与解码。

职责：
- 列出目录下的直接子文件（不递归进入子目录）
- 按扩展名判断是否为支持的图片格式
- 解码图片，失败时抛 DecodeError
"""
from __future__ import annotations
import logging
import os
from typing import List
from PIL import Image

from .errors import DecodeError, InputPathError, UnsupportedFormatError

logger = logging.getLogger(__name__)

SUPPORTED_EXT = {'.jpg', '.jpeg', '.png', '.tiff', '.tif', '.bmp', '.gif'}


def has_supported_ext(path: str) -> bool:
    ext = os.path.splitext(os.fspath(path))[1].lower()
    return ext in SUPPORTED_EXT


def is_supported_image(path: str) -> bool:
    return os.path.isfile(path) and has_supported_ext(path)


def check_input_path(path: str) -> str:
    """Validates a top-level input path and returns it normalized.

    Raises InputPathError with a message describing what is wrong.
    """
    if path is None or not str(path).strip():
        raise InputPathError("Input path is empty")
    try:
        path = os.path.abspath(os.fspath(path))
    except (TypeError, ValueError) as exc:
        raise InputPathError(f"Invalid path format: {path!r}") from exc
    if not os.path.exists(path):
        raise InputPathError(f"File not found: {path}")
    if not (os.path.isfile(path) or os.path.isdir(path)):
        raise InputPathError(f"Not a regular file or directory: {path}")
    if not os.access(path, os.R_OK):
        kind = "directory" if os.path.isdir(path) else "file"
        raise InputPathError(f"Permission denied reading {kind}: {path}")
    return path


class ImageLoader:
    def collect(self, directory: str) -> List[str]:
        """Lists the regular files directly inside directory, in listing order.

        Subdirectories are not descended into.
        """
        try:
            with os.scandir(directory) as it:
                return [entry.path for entry in it if entry.is_file()]
        except OSError as exc:
            raise InputPathError(f"Cannot read directory {directory}: {exc}") from exc

    def load(self, path: str) -> Image.Image:
        """Opens and fully decodes an image."""
        try:
            with Image.open(path) as img:
                img.load()
                # 复制一份，关闭文件句柄
                decoded = img.copy()
        except Exception as exc:
            raise DecodeError(f"Failed to read image {os.path.basename(path)}: {exc}") from exc
        logger.debug("Loaded image: %s (%dx%d)", os.path.basename(path), decoded.width, decoded.height)
        return decoded


def require_supported(path: str) -> str:
    if not has_supported_ext(path):
        raise UnsupportedFormatError(f"Unsupported file format: {os.path.basename(path)}")
    return path
