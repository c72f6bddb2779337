import pytest

from beamdesign import (
    Beam,
    BeamGeometry,
    MaterialProperties,
    Support,
    SupportType,
)

STEEL = MaterialProperties(elastic_modulus=200_000, shear_modulus=80_000, yield_strength=250)


def build_beam(
    loads=(),
    length=10.0,
    start=(SupportType.PIN, 0.0),
    end=None,
    height=400.0,
    width=200.0,
    material=STEEL,
):
    if end is None:
        end = (SupportType.ROLLER, length)
    return Beam(
        geometry=BeamGeometry(length=length, height=height, width=width),
        material=material,
        start_support=Support(*start),
        end_support=Support(*end),
        loads=tuple(loads),
    )


@pytest.fixture
def make_beam():
    return build_beam
