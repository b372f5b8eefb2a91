from __future__ import annotations

import logging

import numpy as np
import pytest

from raytracer.model import Canvas, CanvasRow, Color


def test_canvas_dimensions():
    canvas = Canvas(10, 20)
    assert canvas.width == 10
    assert canvas.height == 20
    assert len(canvas.pixels) == 200


def test_pixels_are_initialised_black():
    canvas = Canvas(10, 20)
    assert all(pixel == Color.black() for pixel in canvas.pixels)


def test_dimensions_are_read_only():
    canvas = Canvas(3, 3)
    with pytest.raises(AttributeError):
        canvas.width = 5  # type: ignore[misc]


def test_writing_through_row_view():
    canvas = Canvas(10, 20)
    red = Color(1.0, 0.0, 0.0)

    canvas.row(2)[3] = red

    assert canvas.row(2)[3] == red
    assert canvas.pixels[2 * 10 + 3] == red
    for index, pixel in enumerate(canvas.pixels):
        if index != 23:
            assert pixel == Color.black()


def test_write_pixel_uses_column_then_row():
    canvas = Canvas(10, 20)
    canvas.write_pixel(3, 2, Color.red())
    assert canvas.pixel_at(3, 2) == Color.red()
    assert canvas.row(2)[3] == Color.red()
    assert canvas.pixel_at(2, 3) == Color.black()


def test_row_view_shares_storage():
    canvas = Canvas(4, 2)
    row = canvas.row(1)
    row[0] = Color.white()
    assert canvas.pixel_at(0, 1) == Color.white()
    assert isinstance(row, CanvasRow)
    assert len(row) == 4
    assert list(row) == [Color.white(), Color.black(), Color.black(), Color.black()]


def test_rows_iterates_every_row():
    canvas = Canvas(3, 5)
    rows = list(canvas.rows())
    assert len(rows) == 5
    assert all(len(row) == 3 for row in rows)


@pytest.mark.parametrize("row", [20, 21, -1])
def test_row_out_of_range_fails(row: int):
    canvas = Canvas(10, 20)
    with pytest.raises(IndexError):
        canvas.row(row)


@pytest.mark.parametrize("column", [10, 11, -1])
def test_column_out_of_range_fails(column: int):
    canvas = Canvas(10, 20)
    with pytest.raises(IndexError):
        canvas.row(0)[column] = Color.white()
    with pytest.raises(IndexError):
        canvas.row(0)[column]


def test_writing_non_color_fails():
    canvas = Canvas(2, 2)
    with pytest.raises(TypeError):
        canvas.row(0)[0] = (1.0, 0.0, 0.0)  # type: ignore[assignment]


def test_non_integer_index_fails():
    canvas = Canvas(2, 2)
    with pytest.raises(TypeError):
        canvas.row(0.5)  # type: ignore[arg-type]


@pytest.mark.parametrize(("width", "height"), [(0, 0), (0, 5), (5, 0)])
def test_zero_dimension_canvas_is_valid_but_unindexable(width: int, height: int):
    canvas = Canvas(width, height)
    assert canvas.pixels == ()
    assert canvas.to_array().shape == (height, width, 3)
    with pytest.raises(IndexError):
        canvas.pixel_at(0, 0)


@pytest.mark.parametrize(("width", "height"), [(-1, 5), (5, -1)])
def test_negative_dimension_fails(width: int, height: int):
    with pytest.raises(ValueError):
        Canvas(width, height)


def test_to_array_is_row_major():
    canvas = Canvas(3, 2)
    canvas.write_pixel(2, 1, Color(0.1, 0.2, 0.3))
    data = canvas.to_array()
    assert data.shape == (2, 3, 3)
    np.testing.assert_array_equal(data[1, 2], [0.1, 0.2, 0.3])
    assert np.count_nonzero(data) == 3


def test_allocation_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="raytracer.model.canvas"):
        Canvas(7, 3)
    assert "Allocated 7x3 canvas." in caplog.text
