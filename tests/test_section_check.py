import math

import pytest

from beamdesign import InputValidationError, RCSection, SectionDemand, evaluate_section_capacity

SECTION = RCSection(
    b=300, h=600, f_c=28, f_y=420, cover=40,
    tension_bar_dia=25, tension_bar_count=3, stirrup_spacing=200,
)


def test_section_geometry():
    assert SECTION.d == pytest.approx(537.5)
    assert SECTION.tension_steel == pytest.approx(3 * math.pi * 25**2 / 4)
    assert SECTION.compression_steel == 0.0


def test_zero_demand():
    cap = evaluate_section_capacity(SECTION, SectionDemand())
    assert cap.combined_ratio == 0.0
    assert cap.utilization == 0.0
    assert cap.adequate
    assert cap.moment > 0 and cap.shear > 0 and cap.axial > 0 and cap.torsion > 0


def test_capacities():
    cap = evaluate_section_capacity(SECTION, SectionDemand())
    d = SECTION.d
    V_c = 0.17 * math.sqrt(28) * 300 * d
    V_s = 2 * math.pi * 25 * 420 * d / 200
    assert cap.shear == pytest.approx(0.75 * (V_c + V_s))
    A_st = SECTION.tension_steel
    assert cap.axial == pytest.approx(0.65 * (0.85 * 28 * (300 * 600 - A_st) + 420 * A_st))
    assert cap.torsion == pytest.approx(0.75 * 0.33 * math.sqrt(28) * (300 * 600) ** 2 / 1800)


def test_srss_combination():
    base = evaluate_section_capacity(SECTION, SectionDemand())
    demand = SectionDemand(shear=0.6 * base.shear, moment=0.6 * base.moment)
    cap = evaluate_section_capacity(SECTION, demand)
    assert cap.shear_ratio == pytest.approx(0.6)
    assert cap.bending_ratio == pytest.approx(0.6)
    assert cap.combined_ratio == pytest.approx(math.sqrt(0.72))
    assert cap.adequate


def test_overloaded_section_is_clamped():
    base = evaluate_section_capacity(SECTION, SectionDemand())
    cap = evaluate_section_capacity(SECTION, SectionDemand(moment=-2 * base.moment))
    assert cap.bending_ratio == pytest.approx(2.0)
    assert cap.utilization == 1.0
    assert not cap.adequate


def test_stirrup_contribution_is_capped():
    dense = RCSection(
        b=300, h=600, f_c=28, f_y=420, cover=40,
        tension_bar_dia=25, tension_bar_count=3, stirrup_dia=12, stirrup_spacing=5,
    )
    cap = evaluate_section_capacity(dense, SectionDemand())
    d = dense.d
    assert cap.shear == pytest.approx(0.75 * (0.17 + 0.66) * math.sqrt(28) * 300 * d)


def test_invalid_section():
    with pytest.raises(InputValidationError):
        RCSection(b=300, h=600, f_c=28, f_y=420, cover=40, tension_bar_dia=25, tension_bar_count=0)
