import pytest

from beamdesign import InputValidationError, rectangular_section
from beamdesign.section import roark_torsional_constant


def test_rectangle_300x600():
    s = rectangular_section(300, 600)
    assert s.area == pytest.approx(0.18)
    assert s.moment_of_inertia == pytest.approx(0.0054)
    assert s.section_modulus == pytest.approx(0.018)
    assert s.polar_moment_of_inertia == pytest.approx(2 * 0.0054)
    assert s.torsional_constant == pytest.approx(3.708e-3, rel=1e-3)
    assert s.plastic_modulus == pytest.approx(0.027)
    assert s.moment_of_inertia_minor == pytest.approx(0.6 * 0.3**3 / 12)


def test_torsional_constant_is_orientation_independent():
    assert roark_torsional_constant(0.3, 0.6) == pytest.approx(roark_torsional_constant(0.6, 0.3))


def test_square_torsional_constant():
    # Roark gives ~0.1406·a⁴ for a square
    assert roark_torsional_constant(1.0, 1.0) == pytest.approx(0.1406, abs=1e-3)


@pytest.mark.parametrize("width, height", [(0, 300), (300, 0), (-10, 300), (float("nan"), 300)])
def test_invalid_dimensions(width, height):
    with pytest.raises(InputValidationError):
        rectangular_section(width, height)


def test_tiny_section_has_no_zero_properties():
    s = rectangular_section(1e-6, 1e-6)
    assert s.area > 0
    assert s.moment_of_inertia > 0
    assert s.section_modulus > 0
