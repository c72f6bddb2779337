import math

import pytest

from beamdesign import InputValidationError, rectangular_section, stress_check, stresses_at
from beamdesign.stress import StressState, StressStatus

SECTION = rectangular_section(300, 600)


def test_bending_and_shear_stresses():
    s = stresses_at(SECTION, 300, 600, moment=18_000, shear=180_000, torsion=0.0)
    assert s.normal == pytest.approx(1.0)
    assert s.shear == pytest.approx(1.5)
    assert s.torsional == 0.0
    assert s.von_mises == pytest.approx(math.sqrt(1.0 + 3 * 1.5**2))


def test_torsional_stress():
    s = stresses_at(SECTION, 300, 600, moment=0.0, shear=0.0, torsion=10_000)
    expected = 10_000 * 0.6 / (2 * SECTION.torsional_constant) / 1e6
    assert s.torsional == pytest.approx(expected)
    assert s.von_mises == pytest.approx(math.sqrt(3) * expected)


@pytest.mark.parametrize(
    "yield_strength, status",
    [(250, StressStatus.SAFE), (150, StressStatus.SAFE), (120, StressStatus.MARGINAL), (80, StressStatus.UNSAFE)],
)
def test_stress_check_thresholds(yield_strength, status):
    state = StressState(normal=100, shear=0, torsional=0, von_mises=100)
    check = stress_check(state, yield_strength)
    assert check.status is status
    assert check.safety_factor == pytest.approx(yield_strength / 100)


def test_unstressed_section_is_safe():
    check = stress_check(StressState(0, 0, 0, 0), 250)
    assert check.safety_factor == math.inf
    assert check.status is StressStatus.SAFE


def test_yield_strength_must_be_positive():
    with pytest.raises(InputValidationError):
        stress_check(StressState(1, 0, 0, 1), 0)
