# -*- coding: utf-8 -*-
"""导出水印图片。

- 输出目录：<输入目录名>_watermark（单文件时取其所在目录名）
- 命名规则：<原名>_watermarked<原扩展名>，无扩展名时使用 .jpg
- 输出格式：由原文件扩展名决定，未识别的一律 JPEG
"""
from __future__ import annotations
import logging
import os
from PIL import Image

from .errors import EncodeError

logger = logging.getLogger(__name__)

OUTPUT_DIR_SUFFIX = "_watermark"
OUTPUT_NAME_SUFFIX = "_watermarked"
DEFAULT_EXT = ".jpg"

_FORMAT_BY_EXT = {
    '.png': 'PNG',
    '.gif': 'GIF',
    '.bmp': 'BMP',
    '.tiff': 'TIFF',
    '.tif': 'TIFF',
}
DEFAULT_FORMAT = 'JPEG'


def output_dir_for(directory: str) -> str:
    directory = os.path.abspath(os.fspath(directory))
    return os.path.join(directory, os.path.basename(directory) + OUTPUT_DIR_SUFFIX)


def output_path_for(source: str, output_dir: str) -> str:
    base = os.path.basename(os.fspath(source))
    stem, ext = os.path.splitext(base)
    if not ext:
        ext = DEFAULT_EXT
    return os.path.join(output_dir, f"{stem}{OUTPUT_NAME_SUFFIX}{ext}")


def image_format_for(source: str) -> str:
    ext = os.path.splitext(os.fspath(source))[1].lower()
    return _FORMAT_BY_EXT.get(ext, DEFAULT_FORMAT)


def save_image(image: Image.Image, target: str, fmt: str) -> str:
    """Writes image to target in the given Pillow format, creating parent dirs."""
    try:
        parent = os.path.dirname(target)
        if parent:
            os.makedirs(parent, exist_ok=True)
        if fmt == 'JPEG':
            image.convert('RGB').save(target, format=fmt, quality=95)
        else:
            image.save(target, format=fmt)
    except Exception as exc:
        raise EncodeError(f"Failed to save {os.path.basename(target)} as {fmt}: {exc}") from exc
    logger.debug("Saved watermarked image: %s", target)
    return target
