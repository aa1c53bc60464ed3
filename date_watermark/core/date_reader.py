# -*- coding: utf-8 -*-
"""拍摄日期读取。

按顺序尝试，先得到结果者胜出：
1. Exif IFD 中的 DateTimeOriginal
2. Exif IFD 中的 DateTimeDigitized
3. 遍历所有 IFD，依次找 DateTimeOriginal / DateTimeDigitized / DateTime
4. 文件修改时间
5. 以上都失败时返回 "Unknown Date"

resolve() 从不抛异常，读取元数据失败只会降级到文件修改时间。
"""
from __future__ import annotations
import logging
import os
from datetime import date, datetime
from typing import Callable, Dict, Optional, Sequence
import piexif
from PIL import Image

from .errors import MetadataReadError

logger = logging.getLogger(__name__)

UNKNOWN_DATE = "Unknown Date"
DATE_FORMAT = "%Y-%m-%d"

# EXIF 时间通常是 "YYYY:MM:DD HH:MM:SS"，其余为常见变体
EXIF_DATE_FORMATS = (
    "%Y:%m:%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y:%m:%d %H:%M",
    "%Y:%m:%d",
    "%Y-%m-%d",
)

IFD_ORDER = ("0th", "Exif", "GPS", "Interop", "1st")
DATE_TAGS = (
    piexif.ExifIFD.DateTimeOriginal,
    piexif.ExifIFD.DateTimeDigitized,
    piexif.ImageIFD.DateTime,
)

ExifDict = Dict[str, Dict[int, object]]


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def parse_exif_datetime(value) -> Optional[date]:
    """Parses an EXIF date/time value, returning None for blank or malformed ones."""
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="ignore")
    s = str(value).strip().rstrip("\x00").strip()
    if not s:
        return None
    # 有些相机会在秒后追加小数或时区
    s = s[:19]
    for fmt in EXIF_DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


def read_exif(path: str) -> ExifDict:
    """Loads the EXIF IFDs of an image as a piexif dict.

    piexif reads JPEG/TIFF/WebP directly; for other containers the raw EXIF
    block Pillow finds (PNG eXIf chunk etc.) is handed to piexif instead.

    Raises MetadataReadError when the metadata cannot be read.
    """
    try:
        return piexif.load(path)
    except piexif.InvalidImageDataError:
        pass
    except Exception as exc:
        raise MetadataReadError(f"Cannot read EXIF from {path}: {exc}") from exc
    try:
        with Image.open(path) as img:
            raw = img.info.get("exif")
            if not raw:
                return {}
            return piexif.load(raw)
    except Exception as exc:
        raise MetadataReadError(f"Cannot read EXIF from {path}: {exc}") from exc


def exif_original(path: str, exif: ExifDict) -> Optional[date]:
    return parse_exif_datetime(exif.get("Exif", {}).get(piexif.ExifIFD.DateTimeOriginal))


def exif_digitized(path: str, exif: ExifDict) -> Optional[date]:
    return parse_exif_datetime(exif.get("Exif", {}).get(piexif.ExifIFD.DateTimeDigitized))


def any_exif_datetime(path: str, exif: ExifDict) -> Optional[date]:
    for ifd_name in IFD_ORDER:
        ifd = exif.get(ifd_name) or {}
        if not isinstance(ifd, dict):
            continue
        for tag in DATE_TAGS:
            found = parse_exif_datetime(ifd.get(tag))
            if found is not None:
                return found
    return None


def file_modified(path: str, exif: ExifDict) -> Optional[date]:
    try:
        ts = os.path.getmtime(path)
        # 本地时区的日历日期
        return datetime.fromtimestamp(ts).date()
    except (OSError, ValueError, OverflowError) as exc:
        logger.debug("No modification time for %s: %s", path, exc)
        return None


Step = Callable[[str, ExifDict], Optional[date]]

DEFAULT_STEPS: Sequence[Step] = (exif_original, exif_digitized, any_exif_datetime, file_modified)


class DateResolver:
    """Produces the date string printed on an image."""

    def __init__(self, steps: Sequence[Step] = DEFAULT_STEPS):
        self.steps = tuple(steps)

    def resolve(self, path: str) -> str:
        try:
            path = os.fspath(path)
        except TypeError:
            logger.warning("Invalid image file: %r", path)
            return UNKNOWN_DATE
        try:
            exif = read_exif(path)
        except MetadataReadError as exc:
            logger.debug("%s", exc)
            exif = {}
        for step in self.steps:
            found = step(path, exif)
            if found is not None:
                logger.debug("Using %s for %s: %s", getattr(step, "__name__", step), os.path.basename(path), found)
                return format_date(found)
        logger.warning("No date available for file: %s", os.path.basename(path))
        return UNKNOWN_DATE
