# -*- coding: utf-8 -*-
"""水印定位：根据画布/文字尺寸、锚点与边距计算绘制原点。

原点 y 为文字基线。所有锚点的结果都会经过 clamp，保证文字不越出画布。
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional


class Position(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    CENTER = "center"

    @classmethod
    def parse(cls, name: str) -> "Position":
        """Looks up a position by name, ignoring case ("top-left" works too)."""
        key = (name or "").strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown position: {name!r}") from None


class DrawOrigin(NamedTuple):
    x: int
    y: int


def _half(v: int) -> int:
    # 向零取整，与整数除法一致
    return int(v / 2)


_Formula = Callable[[int, int, int, int, int], tuple]

_FORMULAS: Dict[Position, _Formula] = {
    Position.TOP_LEFT: lambda W, H, tw, th, m: (m, m + th),
    Position.TOP_RIGHT: lambda W, H, tw, th, m: (W - tw - m, m + th),
    Position.BOTTOM_LEFT: lambda W, H, tw, th, m: (m, H - m),
    Position.BOTTOM_RIGHT: lambda W, H, tw, th, m: (W - tw - m, H - m),
    Position.CENTER: lambda W, H, tw, th, m: (_half(W - tw), _half(H + th)),
}


def clamp(x: int, y: int, canvas_w: int, canvas_h: int, text_w: int, text_h: int) -> DrawOrigin:
    """Pulls an origin back inside the canvas.

    x ends up in [0, canvas_w - text_w] and y in [text_h, canvas_h]. When the
    text is wider than the canvas the x interval is empty and 0 wins.
    """
    x = max(0, min(x, canvas_w - text_w))
    y = max(text_h, min(y, canvas_h))
    return DrawOrigin(int(x), int(y))


def place(
    canvas_w: int,
    canvas_h: int,
    text_w: int,
    text_h: int,
    position: Optional[Position],
    margin: int,
) -> DrawOrigin:
    formula = _FORMULAS.get(position, _FORMULAS[Position.BOTTOM_RIGHT])  # 默认右下
    x, y = formula(canvas_w, canvas_h, text_w, text_h, margin)
    return clamp(x, y, canvas_w, canvas_h, text_w, text_h)
