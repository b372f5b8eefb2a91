from __future__ import annotations

import numpy as np
import pytest

from raytracer.model import Color, Vector


def test_channels():
    c = Color(-0.5, 0.4, 1.7)
    assert (c.r, c.g, c.b) == (-0.5, 0.4, 1.7)


def test_named_colors():
    assert Color.black() == Color(0.0, 0.0, 0.0)
    assert Color.white() == Color(1.0, 1.0, 1.0)
    assert Color.red() == Color(1.0, 0.0, 0.0)
    assert Color.green() == Color(0.0, 1.0, 0.0)
    assert Color.blue() == Color(0.0, 0.0, 1.0)
    assert Color.black() == Color.black()


def test_adding_colors():
    assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)


def test_subtracting_colors():
    assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)


def test_scaling_color():
    assert Color(0.2, 0.3, 0.4) * 2.0 == Color(0.4, 0.6, 0.8)
    assert 2.0 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)


def test_multiplying_colors():
    assert Color(1.0, 0.2, 0.4) * Color(0.9, 1.0, 0.1) == Color(0.9, 0.2, 0.04)


def test_channels_are_not_clamped():
    assert Color.white() * 3.0 == Color(3.0, 3.0, 3.0)
    assert Color.black() - Color.white() == Color(-1.0, -1.0, -1.0)


def test_different_colors_are_not_equal():
    assert Color(0.1, 0.2, 0.3) != Color(0.1, 0.2, 0.31)


def test_color_is_not_equal_to_vector():
    assert Color(1.0, 2.0, 3.0) != Vector(1.0, 2.0, 3.0)


def test_mixing_color_with_other_types_is_rejected():
    with pytest.raises(TypeError):
        Color.white() + Vector(1.0, 1.0, 1.0)  # type: ignore[operator]
    with pytest.raises(TypeError):
        Color.white() * "bright"  # type: ignore[operator]


def test_colors_are_immutable():
    c = Color.white()
    with pytest.raises(AttributeError):
        c.r = 0.5  # type: ignore[misc]


def test_to_array():
    np.testing.assert_array_equal(Color(0.25, 0.5, 1.0).to_array(), [0.25, 0.5, 1.0])
