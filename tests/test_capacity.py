import pytest

from beamdesign import InputValidationError
from beamdesign.aci318.capacity import (
    FailureMode,
    nominal_moment_capacity,
    strength_reduction_factor,
)


@pytest.mark.parametrize(
    "eps_t, phi, mode",
    [
        (0.010, 0.90, FailureMode.TENSION_CONTROLLED),
        (0.005, 0.90, FailureMode.TENSION_CONTROLLED),
        (0.0035, 0.775, FailureMode.TRANSITION),
        (0.002, 0.65, FailureMode.COMPRESSION_CONTROLLED),
        (-0.001, 0.65, FailureMode.COMPRESSION_CONTROLLED),
    ],
)
def test_strength_reduction_factor(eps_t, phi, mode):
    assert strength_reduction_factor(eps_t) == (pytest.approx(phi), mode)


def test_singly_reinforced_capacity():
    A_s, f_y, d = 1473.0, 420.0, 530.0
    cap = nominal_moment_capacity(300, d, 60, A_s, 0.0, 28, f_y)
    assert cap.c == pytest.approx(A_s * f_y / (0.85 * 28 * 0.85 * 300))
    assert cap.a == pytest.approx(0.85 * cap.c)
    assert cap.M_n == pytest.approx(A_s * f_y * (d - cap.a / 2))
    assert cap.failure_mode is FailureMode.TENSION_CONTROLLED
    assert cap.phi_M_n == pytest.approx(0.9 * cap.M_n)


def test_transition_region():
    cap = nominal_moment_capacity(300, 530, 60, 3612.5, 0.0, 28, 420)
    assert cap.failure_mode is FailureMode.TRANSITION
    assert 0.65 < cap.phi < 0.9


def test_over_reinforced_is_compression_controlled():
    cap = nominal_moment_capacity(300, 530, 60, 8000, 0.0, 28, 420)
    assert cap.failure_mode is FailureMode.COMPRESSION_CONTROLLED
    assert cap.phi == pytest.approx(0.65)


def test_compression_steel_adds_capacity():
    singly = nominal_moment_capacity(300, 530, 60, 3000, 0.0, 28, 420)
    doubly = nominal_moment_capacity(300, 530, 60, 3000, 1000, 28, 420)
    assert doubly.c < singly.c
    assert doubly.eps_t > singly.eps_t
    assert 0 < doubly.f_s_prime <= 420
    # force equilibrium of the section
    concrete = 0.85 * 28 * doubly.a * 300
    assert concrete + 1000 * doubly.f_s_prime == pytest.approx(3000 * 420, rel=1e-6)


def test_tension_steel_required():
    with pytest.raises(InputValidationError):
        nominal_moment_capacity(300, 530, 60, 0.0, 0.0, 28, 420)
