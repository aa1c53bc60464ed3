# -*- coding: utf-8 -*-
"""水印合成器：把日期文字绘制到图像副本上。

- 原图不做任何修改，返回新图
- 输出画布为不透明 RGB；透明度只用于水印文字本身的混合
"""
from __future__ import annotations
import logging
from typing import Optional, Tuple
from PIL import Image, ImageDraw

from .config import WatermarkConfig
from .errors import CompositeError
from .fonts import Font
from .placement import place

logger = logging.getLogger(__name__)


def measure_text(font: Font, text: str) -> Tuple[int, int, int]:
    """Returns (width, line height, ascent) of text in pixels."""
    width = int(round(font.getlength(text)))
    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        height = ascent + descent
    else:
        # 位图字体没有 metrics，退化为包围盒
        bbox = font.getbbox(text)
        ascent = height = bbox[3]
    return max(1, width), max(1, height), ascent


def compose_date_watermark(
    image: Optional[Image.Image],
    text: str,
    config: WatermarkConfig,
) -> Optional[Image.Image]:
    """在 image 的副本上绘制 text，返回新图。

    image 为 None 时返回 None；text 为空白时原样返回 image。
    绘制失败抛 CompositeError。
    """
    if image is None or not text or not text.strip():
        logger.debug("Nothing to draw, returning input unchanged")
        return image

    try:
        # convert 总是返回新对象
        canvas = image.convert("RGB")
        font = config.load_font()
        tw, th, ascent = measure_text(font, text)
        origin = place(canvas.width, canvas.height, tw, th, config.position, config.margin)

        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        draw.fontmode = "L"  # 抗锯齿
        # origin.y 是基线，Pillow 默认从上沿开始画
        draw.text((origin.x, origin.y - ascent), text, font=font, fill=config.rgba())
        out = Image.alpha_composite(canvas.convert("RGBA"), layer).convert("RGB")
    except Exception as exc:
        raise CompositeError(f"Failed to draw watermark {text!r}: {exc}") from exc

    logger.debug("Applied watermark %r at (%d, %d)", text, origin.x, origin.y)
    return out
