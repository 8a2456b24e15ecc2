import pytest

from chromaspace.colors import RGBColor, LABColor, LCHColor
from samples import samples_rgb_lab, samples_rgb_lch


def test_white_to_xyz_is_reference_white():
    xyz = RGBColor((1.0, 1.0, 1.0, 1.0)).to_xyz()
    assert xyz.value == pytest.approx((0.95047, 1.0, 1.08883, 1.0), abs=1e-6)


def test_white_to_lab():
    lab = RGBColor((1.0, 1.0, 1.0, 1.0)).to_lab()
    assert lab.value == pytest.approx((100.0, 0.0, 0.0, 1.0), abs=1e-4)


def test_black_to_lab():
    lab = RGBColor((0.0, 0.0, 0.0, 1.0)).to_lab()
    assert lab.value == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-4)


def test_class_conversion_rgb_to_lab():
    for rgb, lab_expected in samples_rgb_lab.items():
        lab = RGBColor(rgb).to_lab()
        assert isinstance(lab, LABColor)
        l, a, b = lab.components
        l_exp, a_exp, b_exp = lab_expected
        assert abs(l - l_exp) < 0.02
        assert abs(a - a_exp) < 0.02
        assert abs(b - b_exp) < 0.02


def test_class_conversion_rgb_to_lch():
    for rgb, lch_expected in samples_rgb_lch.items():
        lch = RGBColor(rgb).to_lch()
        assert isinstance(lch, LCHColor)
        for got, exp in zip(lch.components, lch_expected):
            assert abs(got - exp) < 0.05


def test_gray_is_neutral():
    lab = RGBColor((0.5, 0.5, 0.5)).to_lab()
    assert abs(lab.a) < 1e-4
    assert abs(lab.b) < 1e-4


def test_lightness_tracks_luminance():
    grays = [RGBColor((v / 10, v / 10, v / 10)) for v in range(11)]
    lightness = [g.to_lab().l for g in grays]
    assert lightness == sorted(lightness)
    assert len(set(lightness)) == len(lightness)


@pytest.mark.parametrize("a", [-128.0, -50.0, -1e-3, 0.0, 1e-3, 50.0, 128.0])
@pytest.mark.parametrize("b", [-128.0, -50.0, -1e-3, 0.0, 1e-3, 50.0, 128.0])
def test_lch_hue_range(a, b):
    lch = LABColor((50.0, a, b)).to_lch()
    assert 0.0 <= lch.h < 360.0
