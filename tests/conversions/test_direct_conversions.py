import math
import pytest

from chromaspace.conversions import (
    unit_rgb_to_xyz,
    xyz_to_unit_rgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
)
from chromaspace.conversions.constants import REFERENCE_WHITE
from samples import samples_rgb_xyz, samples_rgb_lab, samples_rgb_lch


def test_unit_rgb_to_xyz_samples():
    for rgb, xyz_expected in samples_rgb_xyz.items():
        xyz = unit_rgb_to_xyz(*rgb)
        for got, exp in zip(xyz, xyz_expected):
            assert abs(got - exp) < 1e-6


def test_white_is_reference_white():
    x, y, z = unit_rgb_to_xyz(1.0, 1.0, 1.0)
    assert (x, y, z) == pytest.approx(REFERENCE_WHITE, abs=1e-6)


def test_xyz_to_unit_rgb_reference_white():
    assert xyz_to_unit_rgb(*REFERENCE_WHITE) == pytest.approx((1.0, 1.0, 1.0), abs=1e-4)


def test_xyz_to_unit_rgb_not_clamped():
    # Pure Z sits outside the sRGB gamut
    r, g, b = xyz_to_unit_rgb(0.0, 0.0, 1.0)
    assert r < 0
    assert b > 1


def test_xyz_to_lab_samples():
    for rgb, lab_expected in samples_rgb_lab.items():
        lab = xyz_to_lab(*unit_rgb_to_xyz(*rgb))
        for got, exp in zip(lab, lab_expected):
            assert abs(got - exp) < 0.02


def test_xyz_to_lab_black_uses_linear_segment():
    l, a, b = xyz_to_lab(0.0, 0.0, 0.0)
    assert l == pytest.approx(0.0, abs=1e-4)
    assert a == pytest.approx(0.0)
    assert b == pytest.approx(0.0)


def test_lab_to_xyz_white():
    assert lab_to_xyz(100.0, 0.0, 0.0) == pytest.approx(REFERENCE_WHITE, abs=1e-6)


def test_lab_to_lch_samples():
    for rgb, lch_expected in samples_rgb_lch.items():
        lch = lab_to_lch(*xyz_to_lab(*unit_rgb_to_xyz(*rgb)))
        for got, exp in zip(lch, lch_expected):
            assert abs(got - exp) < 0.05


@pytest.mark.parametrize("a, b, expected_h", [
    (10.0, 0.0, 0.0),
    (0.0, 10.0, 90.0),
    (-10.0, 0.0, 180.0),
    (0.0, -10.0, 270.0),
    (10.0, -10.0, 315.0),
])
def test_lab_to_lch_hue_quadrants(a, b, expected_h):
    _, c, h = lab_to_lch(50.0, a, b)
    assert c == pytest.approx(math.hypot(a, b))
    assert h == pytest.approx(expected_h)


def test_lab_to_lch_neutral_has_zero_hue():
    assert lab_to_lch(50.0, 0.0, 0.0) == (50.0, 0.0, 0.0)


def test_lch_to_lab_polar():
    l, a, b = lch_to_lab(60.0, 20.0, 90.0)
    assert l == 60.0
    assert a == pytest.approx(0.0, abs=1e-12)
    assert b == pytest.approx(20.0)
