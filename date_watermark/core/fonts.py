# -*- coding: utf-8 -*-
"""字体加载：按字体族 + 字重 + 字号查找 TrueType 字体，并缓存到内存。

查找顺序：系统中的同名字体文件 → DejaVu → Pillow 内置默认字体。
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, List, Tuple, Union
from PIL import ImageFont

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class FontWeight(Enum):
    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"

    @classmethod
    def parse(cls, name: str) -> "FontWeight":
        key = (name or "").strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown font weight: {name!r}") from None


# Windows 风格的短文件名后缀（arialbd.ttf 等）
_SHORT_SUFFIX = {
    FontWeight.PLAIN: "",
    FontWeight.BOLD: "bd",
    FontWeight.ITALIC: "i",
    FontWeight.BOLD_ITALIC: "bi",
}

_STYLE_NAME = {
    FontWeight.PLAIN: "",
    FontWeight.BOLD: "Bold",
    FontWeight.ITALIC: "Italic",
    FontWeight.BOLD_ITALIC: "Bold Italic",
}

_DEJAVU = {
    FontWeight.PLAIN: "DejaVuSans.ttf",
    FontWeight.BOLD: "DejaVuSans-Bold.ttf",
    FontWeight.ITALIC: "DejaVuSans-Oblique.ttf",
    FontWeight.BOLD_ITALIC: "DejaVuSans-BoldOblique.ttf",
}

_font_cache: Dict[Tuple[str, FontWeight, int], Font] = {}


def font_candidates(family: str, weight: FontWeight) -> List[str]:
    """File names to try for a family/weight, most specific first."""
    family = family.strip()
    style = _STYLE_NAME[weight]
    names = []
    if style:
        names += [
            f"{family} {style}.ttf",
            f"{family}-{style.replace(' ', '')}.ttf",
            f"{family.lower()}{_SHORT_SUFFIX[weight]}.ttf",
        ]
    else:
        names += [f"{family}.ttf", f"{family.lower()}.ttf", f"{family}-Regular.ttf"]
    names += [_DEJAVU[weight], _DEJAVU[FontWeight.PLAIN]]
    # 去重且保持顺序
    seen = set()
    uniq: List[str] = []
    for n in names:
        if n not in seen:
            uniq.append(n)
            seen.add(n)
    return uniq


def load_font(family: str, weight: FontWeight, size: int) -> Font:
    key = (family, weight, int(size))
    if key in _font_cache:
        return _font_cache[key]
    font = None
    for name in font_candidates(family, weight):
        try:
            font = ImageFont.truetype(name, int(size))
            logger.debug("Using font file %s for %s/%s", name, family, weight.name)
            break
        except OSError:
            continue
    if font is None:
        logger.warning("No TrueType font found for %s (%s); using Pillow's default font",
                       family, weight.name)
        font = ImageFont.load_default(size=int(size))
    _font_cache[key] = font
    return font
