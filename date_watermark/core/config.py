# -*- coding: utf-8 -*-
"""水印配置。

- 不可变（frozen dataclass），创建时校验，非法值直接抛 ConfigurationError
- 修改配置请使用 replace()，会重新校验
- 派生值：带透明度的 RGBA 颜色、实际使用的字体
"""
from __future__ import annotations
import dataclasses
import re
from dataclasses import dataclass
from typing import List, Tuple
from PIL import ImageColor

from .errors import ConfigurationError
from .fonts import Font, FontWeight, load_font
from .placement import Position

RGB = Tuple[int, int, int]

MAX_RECOMMENDED_FONT_SIZE = 200
MAX_RECOMMENDED_MARGIN = 500

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def parse_color(value: str) -> RGB:
    """Parses '#RRGGBB' or 'RRGGBB' (leading '#' optional) into an RGB tuple.

    Only six hex digits are accepted; shorthand ('#fff') and alpha forms
    raise ValueError.
    """
    s = (value or "").strip()
    if not s.startswith("#"):
        s = "#" + s
    if not _HEX_COLOR.match(s):
        raise ValueError(f"Color must be six hex digits, got: {value!r}")
    rgb = ImageColor.getrgb(s)
    return (rgb[0], rgb[1], rgb[2])


@dataclass(frozen=True)
class WatermarkConfig:
    font_size: int = 24
    color: RGB = (255, 255, 255)
    position: Position = Position.BOTTOM_RIGHT
    opacity: float = 0.8
    font_family: str = "Arial"
    font_weight: FontWeight = FontWeight.BOLD
    margin: int = 20

    def __post_init__(self):
        errors = self._errors()
        if errors:
            raise ConfigurationError("; ".join(errors))

    def _errors(self) -> List[str]:
        errors = []
        if isinstance(self.font_size, bool) or not isinstance(self.font_size, int) or self.font_size <= 0:
            errors.append(f"Font size must be a positive integer, got: {self.font_size!r}")
        if self.color is None:
            errors.append("Color cannot be None")
        elif len(self.color) != 3 or any(not isinstance(c, int) or not 0 <= c <= 255 for c in self.color):
            errors.append(f"Color must be three 0-255 integers, got: {self.color!r}")
        if not isinstance(self.position, Position):
            errors.append(f"Position must be one of {[p.name for p in Position]}, got: {self.position!r}")
        if not isinstance(self.opacity, (int, float)) or not 0.0 <= self.opacity <= 1.0:
            errors.append(f"Opacity must be between 0.0 and 1.0, got: {self.opacity!r}")
        if not self.font_family or not self.font_family.strip():
            errors.append("Font family cannot be empty")
        if not isinstance(self.font_weight, FontWeight):
            errors.append(f"Font weight must be a FontWeight, got: {self.font_weight!r}")
        if isinstance(self.margin, bool) or not isinstance(self.margin, int) or self.margin < 0:
            errors.append(f"Margin must be a non-negative integer, got: {self.margin!r}")
        return errors

    def warnings(self) -> List[str]:
        """Valid but suspicious settings worth telling the user about."""
        out = []
        if self.font_size > MAX_RECOMMENDED_FONT_SIZE:
            out.append(f"Font size is very large: {self.font_size}")
        if self.margin > MAX_RECOMMENDED_MARGIN:
            out.append(f"Margin is very large: {self.margin}")
        return out

    def replace(self, **changes) -> "WatermarkConfig":
        return dataclasses.replace(self, **changes)

    def rgba(self) -> Tuple[int, int, int, int]:
        # 四舍五入（0.5 进位）
        alpha = int(255 * self.opacity + 0.5)
        return (self.color[0], self.color[1], self.color[2], alpha)

    def load_font(self) -> Font:
        return load_font(self.font_family, self.font_weight, self.font_size)
