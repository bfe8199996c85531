import pytest

from particle_ramps.core.color import (
    hex_to_rgb,
    lerp_hex,
    lerp_rgb,
    normalize_hex,
    rgb_to_hex,
)
from particle_ramps.core.types import RGB


@pytest.mark.parametrize("given, expected", [
    ("#FF6B00", "#ff6b00"),
    ("ff6b00", "#ff6b00"),
    ("#F60", "#ff6600"),
    (" #abcdef ", "#abcdef"),
])
def test_normalize_hex(given, expected):
    assert normalize_hex(given) == expected


@pytest.mark.parametrize("bad", ["#ff", "#ff6b0", "#xyzxyz", "#ff6b00ff", None, 0xff6b00])
def test_normalize_hex_rejects(bad):
    with pytest.raises(ValueError):
        normalize_hex(bad)


def test_hex_to_rgb():
    assert hex_to_rgb("#ff6b00") == RGB(255, 107, 0)


def test_rgb_to_hex_clamps():
    assert rgb_to_hex(RGB(300, -4, 16)) == "#ff0010"


def test_lerp_rgb_ties_round_down():
    assert lerp_rgb(RGB(0, 0, 0), RGB(255, 255, 255), 0.5) == RGB(127, 127, 127)
    assert lerp_rgb(RGB(0, 0, 0), RGB(1, 3, 5), 0.5) == RGB(0, 1, 2)


def test_lerp_rgb_ends_are_exact():
    c1, c2 = RGB(12, 200, 99), RGB(240, 3, 150)
    assert lerp_rgb(c1, c2, 0.0) == c1
    assert lerp_rgb(c1, c2, 1.0) == c2


def test_lerp_hex_channels_independent():
    assert lerp_hex("#ff0000", "#0000ff", 0.5) == "#7f007f"
