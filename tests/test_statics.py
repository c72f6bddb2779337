import logging

import pytest

from beamdesign import (
    DistributedLoad,
    MomentLoad,
    PartialLoadModel,
    PointLoad,
    RotationDirection,
    SupportType,
    TorsionLoad,
    UnstableSupportError,
    equilibrium_residuals,
    solve_reactions,
)

PIN, ROLLER, FIXED, FREE = SupportType.PIN, SupportType.ROLLER, SupportType.FIXED, SupportType.FREE


def test_simple_point_load(make_beam):
    beam = make_beam([PointLoad(position=3.0, magnitude=1000)])
    r = solve_reactions(beam)
    assert r.reaction_a == pytest.approx(700)
    assert r.reaction_b == pytest.approx(300)
    assert r.moment_a == 0.0
    assert r.moment_b == 0.0


def test_simple_full_udl(make_beam):
    beam = make_beam([DistributedLoad(position=0.0, magnitude=2000, length=10.0)])
    r = solve_reactions(beam)
    assert r.reaction_a == pytest.approx(10_000)
    assert r.reaction_b == pytest.approx(10_000)


def test_fixed_fixed_udl(make_beam):
    w, L = 1000.0, 6.0
    beam = make_beam(
        [DistributedLoad(position=0.0, magnitude=w, length=L)],
        length=L,
        start=(FIXED, 0.0),
        end=(FIXED, L),
    )
    r = solve_reactions(beam)
    assert r.reaction_a == pytest.approx(w * L / 2)
    assert r.reaction_b == pytest.approx(w * L / 2)
    assert r.moment_a == pytest.approx(-w * L**2 / 12)
    assert r.moment_b == pytest.approx(-w * L**2 / 12)


def test_fixed_fixed_eccentric_point_load(make_beam):
    P, L, a = 1000.0, 6.0, 2.0
    b = L - a
    beam = make_beam([PointLoad(position=a, magnitude=P)], length=L, start=(FIXED, 0.0), end=(FIXED, L))
    r = solve_reactions(beam)
    assert r.moment_a == pytest.approx(-P * a * b**2 / L**2)
    assert r.moment_b == pytest.approx(-P * a**2 * b / L**2)
    assert r.reaction_a + r.reaction_b == pytest.approx(P)


def test_propped_cantilever_udl(make_beam):
    w, L = 1000.0, 8.0
    beam = make_beam(
        [DistributedLoad(position=0.0, magnitude=w, length=L)],
        length=L,
        start=(FIXED, 0.0),
        end=(ROLLER, L),
    )
    r = solve_reactions(beam)
    assert r.reaction_b == pytest.approx(3 * w * L / 8)
    assert r.reaction_a == pytest.approx(5 * w * L / 8)
    assert r.moment_a == pytest.approx(-w * L**2 / 8)
    assert r.moment_b == 0.0


def test_cantilever_fixed_at_start(make_beam):
    P, L = 500.0, 4.0
    beam = make_beam([PointLoad(position=L, magnitude=P)], length=L, start=(FIXED, 0.0), end=(FREE, L))
    r = solve_reactions(beam)
    assert r.reaction_a == pytest.approx(P)
    assert r.reaction_b == 0.0
    assert r.moment_a == pytest.approx(-P * L)


def test_cantilever_fixed_at_end(make_beam):
    P, L = 500.0, 4.0
    beam = make_beam([PointLoad(position=0.0, magnitude=P)], length=L, start=(FREE, 0.0), end=(FIXED, L))
    r = solve_reactions(beam)
    assert r.reaction_a == 0.0
    assert r.reaction_b == pytest.approx(P)
    assert r.moment_b == pytest.approx(-P * L)


def test_cantilever_udl(make_beam):
    w, L = 1200.0, 3.0
    beam = make_beam(
        [DistributedLoad(position=0.0, magnitude=w, length=L)],
        length=L,
        start=(FIXED, 0.0),
        end=(FREE, L),
    )
    r = solve_reactions(beam)
    assert r.reaction_a == pytest.approx(w * L)
    assert r.moment_a == pytest.approx(-w * L**2 / 2)


def test_couple_on_simple_beam(make_beam):
    C, L = 600.0, 10.0
    beam = make_beam([MomentLoad(position=4.0, magnitude=C)], length=L)
    r = solve_reactions(beam)
    assert r.reaction_a == pytest.approx(-C / L)
    assert r.reaction_b == pytest.approx(C / L)


def test_couple_on_fixed_fixed_midspan(make_beam):
    C, L = 600.0, 10.0
    beam = make_beam(
        [MomentLoad(position=L / 2, magnitude=C)], length=L, start=(FIXED, 0.0), end=(FIXED, L)
    )
    r = solve_reactions(beam)
    assert r.reaction_a == pytest.approx(-1.5 * C / L)
    assert r.moment_a == pytest.approx(C / 4)
    assert r.moment_b == pytest.approx(-C / 4)


def test_torsion_has_no_vertical_reaction(make_beam):
    beam = make_beam([TorsionLoad(position=5.0, magnitude=1000)])
    assert solve_reactions(beam).as_tuple() == (0.0, 0.0, 0.0, 0.0)


def test_partial_udl_models_on_fixed_fixed(make_beam):
    w, L = 1000.0, 8.0
    beam = make_beam(
        [DistributedLoad(position=0.0, magnitude=w, length=L / 2)],
        length=L,
        start=(FIXED, 0.0),
        end=(FIXED, L),
    )
    exact = solve_reactions(beam)
    centroid = solve_reactions(beam, PartialLoadModel.CENTROID)
    assert exact.moment_a == pytest.approx(-11 * w * L**2 / 192)
    assert centroid.moment_a == pytest.approx(-9 * w * L**2 / 128)
    assert exact.reaction_a + exact.reaction_b == pytest.approx(w * L / 2)
    assert centroid.reaction_a + centroid.reaction_b == pytest.approx(w * L / 2)


def test_overhang_transfers_load(make_beam):
    P = 900.0
    beam = make_beam(
        [PointLoad(position=0.0, magnitude=P)],
        start=(PIN, 2.0),
        end=(ROLLER, 8.0),
    )
    r = solve_reactions(beam)
    assert r.reaction_a == pytest.approx(4 * P / 3)
    assert r.reaction_b == pytest.approx(-P / 3)


def test_unsupported_beam_returns_zero_and_warns(make_beam, caplog):
    beam = make_beam([PointLoad(position=5.0, magnitude=100)], start=(FREE, 0.0), end=(FREE, 10.0))
    with caplog.at_level(logging.WARNING, logger="beamdesign"):
        r = solve_reactions(beam)
    assert r.as_tuple() == (0.0, 0.0, 0.0, 0.0)
    assert "no supports" in caplog.text


@pytest.mark.parametrize("start, end", [(PIN, FREE), (FREE, ROLLER), (ROLLER, FREE)])
def test_mechanism_raises(make_beam, start, end):
    beam = make_beam([PointLoad(position=5.0, magnitude=100)], start=(start, 0.0), end=(end, 10.0))
    with pytest.raises(UnstableSupportError):
        solve_reactions(beam)


def test_reactions_are_deterministic(make_beam):
    beam = make_beam([PointLoad(position=3.3, magnitude=123), MomentLoad(position=7.0, magnitude=45)])
    assert solve_reactions(beam) == solve_reactions(beam)


MIXED_LOADS = [
    PointLoad(position=1.5, magnitude=2500),
    DistributedLoad(position=3.0, magnitude=800, length=4.0),
    MomentLoad(position=6.0, magnitude=1500, direction=RotationDirection.ANTICLOCKWISE),
    MomentLoad(position=9.0, magnitude=700),
    TorsionLoad(position=2.0, magnitude=300),
    PointLoad(position=10.0, magnitude=400),
]


@pytest.mark.parametrize(
    "start, end",
    [
        ((PIN, 0.0), (ROLLER, 10.0)),
        ((FIXED, 0.0), (FIXED, 10.0)),
        ((FIXED, 0.0), (ROLLER, 10.0)),
        ((PIN, 0.0), (FIXED, 10.0)),
        ((FIXED, 0.0), (FREE, 10.0)),
        ((FREE, 0.0), (FIXED, 10.0)),
        ((PIN, 2.0), (ROLLER, 8.0)),
        ((FIXED, 1.0), (FIXED, 7.5)),
    ],
)
@pytest.mark.parametrize("partial_model", list(PartialLoadModel))
def test_equilibrium(make_beam, start, end, partial_model):
    beam = make_beam(MIXED_LOADS, start=start, end=end)
    r = solve_reactions(beam, partial_model)
    sum_f, sum_m = equilibrium_residuals(beam, r)
    assert sum_f == pytest.approx(0.0, abs=1e-3)
    assert sum_m == pytest.approx(0.0, abs=1e-3)
