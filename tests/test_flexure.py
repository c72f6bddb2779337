import pytest

from beamdesign import FlexuralDesignError, InputValidationError
from beamdesign.aci318.flexure import (
    beta1,
    effective_depth,
    flexural_design,
    required_steel_area,
    steel_limits,
)


@pytest.mark.parametrize("f_c, expected", [(20, 0.85), (28, 0.85), (35, 0.80), (42, 0.75), (70, 0.65), (90, 0.65)])
def test_beta1(f_c, expected):
    assert beta1(f_c) == pytest.approx(expected)


def test_effective_depth():
    assert effective_depth(600, 40, 10, 25) == pytest.approx(537.5)
    with pytest.raises(InputValidationError):
        effective_depth(50, 40, 10, 25)


def test_steel_limits():
    lim = steel_limits(28, 420, 300, 530)
    assert lim.rho_min == pytest.approx(1.4 / 420)
    assert lim.A_s_min == pytest.approx(1.4 / 420 * 300 * 530)
    assert lim.rho_max == pytest.approx(0.85 * 0.85 * 28 / 420 * 0.375)


def test_required_steel_satisfies_moment_equation():
    M_u, f_c, f_y, b, d = 150e6, 28, 420, 300, 530
    A_s = required_steel_area(M_u, f_c, f_y, b, d)
    a = A_s * f_y / (0.85 * f_c * b)
    assert 0.9 * A_s * f_y * (d - a / 2) == pytest.approx(M_u)
    assert A_s == pytest.approx(783, rel=1e-2)


def test_negative_discriminant_raises():
    with pytest.raises(FlexuralDesignError):
        required_steel_area(1e10, 28, 420, 300, 530)


def test_singly_reinforced():
    fl = flexural_design(150e6, 28, 420, 300, 530)
    assert not fl.is_doubly
    assert fl.A_s_prime == 0.0
    assert fl.A_s_req == pytest.approx(required_steel_area(150e6, 28, 420, 300, 530))


def test_minimum_steel_governs_small_moment():
    fl = flexural_design(10e6, 28, 420, 300, 530)
    assert fl.A_s_req == pytest.approx(fl.A_s_min)


def test_doubly_reinforced():
    M_u, f_c, f_y, b, d = 700e6, 28, 420, 300, 530
    fl = flexural_design(M_u, f_c, f_y, b, d, d_prime=60)
    assert fl.is_doubly
    assert fl.A_s_req > fl.A_s_max_singly
    assert fl.A_s_prime > 0

    a_max = 0.85 * 0.375 * d
    M_n1 = 0.85 * f_c * a_max * b * (d - a_max / 2)
    assert fl.M_u2 == pytest.approx(M_u - 0.9 * M_n1)
    assert fl.A_s_req == pytest.approx(fl.A_s_max_singly + fl.M_u2 / (0.9 * f_y * (d - 60)))
    # compression steel never carries more than f_y
    assert fl.f_s_prime <= f_y
    assert fl.A_s_prime == pytest.approx(fl.M_u2 / (0.9 * fl.f_s_prime * (d - 60)))


def test_negative_moment_rejected():
    with pytest.raises(InputValidationError):
        flexural_design(-1.0, 28, 420, 300, 530)
