from __future__ import annotations

import math

import numpy as np
import pytest

from playmorph import compute_outline
from playmorph.modeling import BAR_WIDTH_FRACTION, GlyphControlPoints, OutlinePair, Point, ShapeInterpolator
from playmorph.validation import ValidationError
from tests.helpers import outline_array

BOXES = [(128.0, 128.0), (200.0, 50.0), (30.0, 300.0), (1.0, 1.0)]


def test_bar_width_fraction():
    assert BAR_WIDTH_FRACTION == pytest.approx(11.0 / 34.0)
    assert ShapeInterpolator.bar_width_fraction == BAR_WIDTH_FRACTION


def test_play_shape_square():
    out = compute_outline(128, 128, 0.0)
    assert out.left.points == (Point(0, 0), Point(64, 32), Point(64, 96), Point(0, 128))
    assert out.right.points == (Point(64, 32), Point(128, 64), Point(128, 64), Point(64, 96))


@pytest.mark.parametrize("width,height", BOXES)
def test_play_shape_is_split_triangle(width, height):
    out = compute_outline(width, height, 0.0)
    left_tl, left_tr, left_br, left_bl = out.left.points
    right_tl, right_tr, right_br, right_bl = out.right.points

    assert left_tl.isclose(Point(0.0, 0.0))
    assert left_bl.isclose(Point(0.0, height))
    tip = Point(width, height / 2.0)
    assert right_tr.isclose(tip)
    assert right_br.isclose(tip)
    # Both halves meet on the centreline.
    assert left_tr.isclose(right_tl)
    assert left_br.isclose(right_bl)
    assert left_tr.x == pytest.approx(width / 2.0)
    # The apex points lie on the triangle's upper and lower edges.
    assert left_tr.y == pytest.approx(height / 4.0)
    assert left_br.y == pytest.approx(3.0 * height / 4.0)


@pytest.mark.parametrize("width,height", BOXES)
def test_pause_shape_is_two_bars(width, height):
    out = compute_outline(width, height, 1.0)
    bar = width * 11.0 / 34.0
    margin = (width / 2.0 - bar) / 2.0

    left = out.left.vertices()
    right = out.right.vertices()
    assert np.allclose(left, [[margin, 0], [margin + bar, 0], [margin + bar, height], [margin, height]])
    shifted = margin + width / 2.0
    assert np.allclose(right, [[shifted, 0], [shifted + bar, 0], [shifted + bar, height], [shifted, height]])

    gap = right[0, 0] - left[1, 0]
    assert gap == pytest.approx(width / 2.0 - bar)
    # Centred: equal outer margins.
    assert left[0, 0] == pytest.approx(width - right[1, 0])


def test_pause_shape_reference_numbers():
    out = compute_outline(128, 128, 1.0)
    left_min_x, left_max_x, left_min_y, left_max_y = out.left.bounds
    right_min_x, right_max_x, _, _ = out.right.bounds
    assert left_max_x - left_min_x == pytest.approx(41.41, abs=0.01)
    assert left_min_x == pytest.approx((64 - 41.4118) / 2, abs=1e-3)
    assert left_max_x == pytest.approx(52.7059, abs=1e-3)
    assert right_min_x == pytest.approx(75.2941, abs=1e-3)
    assert right_max_x == pytest.approx(116.7059, abs=1e-3)
    assert (left_min_y, left_max_y) == (0.0, 128.0)


@pytest.mark.parametrize("width,height", BOXES)
@pytest.mark.parametrize("progress", [0.25, 0.6, -0.3, 1.3])
def test_vertices_are_affine_in_progress(width, height, progress):
    start = outline_array(compute_outline(width, height, 0.0))
    end = outline_array(compute_outline(width, height, 1.0))
    mid = outline_array(compute_outline(width, height, progress))
    assert np.allclose(mid, start + (end - start) * progress, atol=1e-9)


@pytest.mark.parametrize("width,height", BOXES)
@pytest.mark.parametrize("progress", [-0.3, 0.0, 0.4, 1.0, 1.3])
def test_halves_mirror_horizontally(width, height, progress):
    out = compute_outline(width, height, progress)
    left = out.left.vertices()
    right = out.right.vertices()
    # Right TL/TR/BR/BL x mirrors left TR/TL/BL/BR x about x = width / 2.
    mirrored_x = width - left[[1, 0, 3, 2], 0]
    assert np.allclose(right[:, 0], mirrored_x, atol=1e-9)


def test_pause_shape_fully_mirror_symmetric():
    out = compute_outline(90.0, 40.0, 1.0)
    mirrored = [p.mirrored(45.0) for p in out.left.points]
    expected = [mirrored[1], mirrored[0], mirrored[3], mirrored[2]]
    for got, want in zip(out.right.points, expected):
        assert got.isclose(want, atol=1e-9)


def test_outline_is_idempotent():
    interpolator = ShapeInterpolator()
    first = interpolator.compute_outline(73.0, 41.0, 0.37)
    second = interpolator.compute_outline(73.0, 41.0, 0.37)
    assert first == second
    assert np.array_equal(first.as_array(), second.as_array())


def test_interpolator_is_callable():
    interpolator = ShapeInterpolator()
    assert interpolator(64, 64, 0.5) == compute_outline(64, 64, 0.5)


@pytest.mark.parametrize("width,height", BOXES)
def test_overshoot_keeps_positive_winding(width, height):
    for progress in np.linspace(-0.3, 1.3, 33):
        out = compute_outline(width, height, float(progress))
        assert out.is_finite()
        assert out.left.signed_area() > 0.0
        assert out.right.signed_area() > 0.0


@pytest.mark.parametrize("width,height", BOXES)
def test_no_self_intersection_from_play_through_overshoot(width, height):
    for progress in np.linspace(0.0, 1.3, 27):
        out = compute_outline(width, height, float(progress))
        assert out.left.is_simple()
        assert out.right.is_simple()


def test_left_half_stays_simple_below_zero():
    for progress in np.linspace(-0.3, 0.0, 7):
        assert compute_outline(100.0, 100.0, float(progress)).left.is_simple()


def test_zero_width_is_degenerate_but_finite():
    out = compute_outline(0.0, 100.0, 0.5)
    assert out.is_finite()
    arr = out.as_array()
    assert np.allclose(arr[:, :, 0], 0.0)
    assert out.left.signed_area() == pytest.approx(0.0)
    assert out.right.signed_area() == pytest.approx(0.0)


def test_zero_width_matches_narrow_limit():
    zero = outline_array(compute_outline(0.0, 80.0, 0.3))
    narrow = outline_array(compute_outline(1e-9, 80.0, 0.3))
    assert np.allclose(zero, narrow, atol=1e-6)


def test_zero_height_collapses_to_baseline():
    out = compute_outline(50.0, 0.0, 0.7)
    assert np.allclose(out.as_array()[:, :, 1], 0.0)


def test_zero_box_collapses_to_origin():
    out = compute_outline(0.0, 0.0, 0.5)
    assert np.allclose(out.as_array(), 0.0)


@pytest.mark.parametrize(
    "width,height,progress",
    [
        (-1.0, 10.0, 0.5),
        (10.0, -1.0, 0.5),
        (math.inf, 10.0, 0.5),
        (10.0, math.nan, 0.5),
        (10.0, 10.0, math.nan),
        (10.0, 10.0, math.inf),
    ],
)
def test_invalid_inputs_raise(width, height, progress):
    with pytest.raises(ValidationError):
        compute_outline(width, height, progress)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        compute_outline(10.0, 10.0, "half")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "width, height, progress",
    [
        ("10", 10.0, 0.5),
        (10.0, b"10", 0.5),
        (10.0, 10.0, "0.5"),
    ],
)
def test_numeric_text_is_rejected(width, height, progress):
    with pytest.raises(ValidationError, match="not text"):
        compute_outline(width, height, progress)


def test_control_points_square():
    points = GlyphControlPoints.from_bounds(128.0, 128.0)
    assert points.pause_bar_width == pytest.approx(128.0 * 11.0 / 34.0)
    assert points.center_y == pytest.approx(-32.0)
    assert points.left.top_left.play == Point(0.0, 0.0)
    assert points.right.top_right.play == points.right.bottom_right.play


def test_outline_pair_iteration_and_array():
    out = compute_outline(10.0, 10.0, 0.5)
    halves = list(out)
    assert halves == [out.left, out.right]
    assert out.as_array().shape == (2, 4, 2)


def test_path_commands_close_each_half():
    out = compute_outline(128.0, 128.0, 0.0)
    commands = out.path_commands()
    assert len(commands) == 10
    assert commands[0] == ("move", 0.0, 0.0)
    assert commands[4] == ("close",)
    assert commands[5] == ("move", 64.0, 32.0)
    assert [c[0] for c in commands].count("line") == 6


def test_svg_path():
    out = compute_outline(128.0, 128.0, 0.0)
    path = out.to_svg_path(precision=1)
    assert path.startswith("M 0.0 0.0 L 64.0 32.0 L 64.0 96.0 L 0.0 128.0 Z M 64.0 32.0")
    assert path.count("Z") == 2


def test_outline_pair_is_frozen():
    out = compute_outline(10.0, 10.0, 0.0)
    assert isinstance(out, OutlinePair)
    with pytest.raises(AttributeError):
        out.left = out.right  # type: ignore[misc]
