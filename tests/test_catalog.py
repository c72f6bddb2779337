import pytest

from beamdesign import bar_areas, get_bar, list_bars, stirrup_sizes
from beamdesign.catalog import load_catalog


def test_get_bar():
    bar = get_bar(25)
    assert bar.designation == "25M"
    assert bar.area == 491
    assert "main" in bar.roles


def test_unknown_bar():
    with pytest.raises(KeyError):
        get_bar(7)


def test_roles():
    assert stirrup_sizes() == [8, 10, 12]
    assert list(bar_areas()) == [10, 16, 20, 25, 28, 32]
    assert [b.diameter for b in list_bars("stirrup")] == [8, 10, 12]
    assert len(list_bars()) == 8


def test_load_alternative_catalog(tmp_path):
    path = tmp_path / "bars.csv"
    path.write_text(
        "Bar,dia[mm],A[mm2],mass[kg/m],role\n"
        "#4,13,129,0.994,main|stirrup\n"
        "#5,16,199,1.552,main\n",
        encoding="utf-8",
    )
    bars = load_catalog(path)
    assert sorted(bars) == [13, 16]
    assert bars[13].roles == frozenset({"main", "stirrup"})
    # the bundled catalog is untouched
    assert 13 not in bar_areas()
