# -*- coding: utf-8 -*-
import pytest

from date_watermark.core.placement import DrawOrigin, Position, clamp, place


@pytest.mark.parametrize("position, expected", [
    (Position.TOP_LEFT, (20, 40)),
    (Position.TOP_RIGHT, (880, 40)),
    (Position.BOTTOM_LEFT, (20, 780)),
    (Position.BOTTOM_RIGHT, (880, 780)),
    (Position.CENTER, (450, 410)),
])
def test_place_formulas(position, expected):
    assert place(1000, 800, 100, 20, position, 20) == expected


def test_unknown_position_uses_bottom_right():
    assert place(1000, 800, 100, 20, None, 20) == DrawOrigin(880, 780)


def test_text_wider_than_canvas_clamps_x_to_zero():
    origin = place(50, 50, 100, 20, Position.TOP_LEFT, 5)
    assert origin == DrawOrigin(0, 25)


def test_large_margin_keeps_text_inside():
    for position in Position:
        x, y = place(300, 200, 80, 30, position, 1000)
        assert 0 <= x <= 300 - 80
        assert 30 <= y <= 200


def test_clamp_collapses_empty_interval():
    assert clamp(-40, 500, 10, 10, 40, 30) == DrawOrigin(0, 30)


@pytest.mark.parametrize("name", ["bottom_right", "BOTTOM_RIGHT", "Bottom-Right", " bottom_right "])
def test_position_parse_is_case_insensitive(name):
    assert Position.parse(name) is Position.BOTTOM_RIGHT


def test_position_parse_rejects_unknown():
    with pytest.raises(ValueError):
        Position.parse("middle")
