import pytest

from uzemie.territorial_unit import TerritorialUnit, UnitType
from uzemie.unit_table import UnitTable


@pytest.fixture
def populated():
    table = UnitTable()
    first = TerritorialUnit("Alpha", "100", UnitType.OBEC, 2020, 1, 2)
    second = TerritorialUnit("Alpha", "200", UnitType.OBEC, 2020, 3, 4)
    region = TerritorialUnit("Zeta", "7", UnitType.REGION)
    for unit in (first, second, region):
        table.insert(unit)
    return table, first, second, region


def test_find_by_code(populated):
    table, first, second, _ = populated
    assert table.find("Alpha", UnitType.OBEC, "100") is first
    assert table.find("Alpha", UnitType.OBEC, "200") is second
    assert table.find("Alpha", UnitType.OBEC, "300") is None


def test_find_respects_type(populated):
    table, _, _, region = populated
    assert table.find("Alpha", UnitType.REGION, "100") is None
    assert table.find("Zeta", UnitType.REGION, "7") is region


def test_find_all_keeps_insertion_order(populated):
    table, first, second, _ = populated
    assert table.find_all("Alpha", UnitType.OBEC) == [first, second]
    assert table.find_all("Missing", UnitType.OBEC) is None


def test_table_sorted_by_name():
    table = UnitTable()
    for name in ("Gamma", "Alpha", "Beta"):
        table.insert(TerritorialUnit(name, name, UnitType.GEO))
    assert list(table.table(UnitType.GEO)) == ["Alpha", "Beta", "Gamma"]


def test_table_rejects_unknown_type():
    with pytest.raises(ValueError):
        UnitTable().table("OBEC")


def test_clear(populated):
    table = populated[0]
    table.clear()
    assert table.find_all("Alpha", UnitType.OBEC) is None
    assert table.table(UnitType.REGION) == {}


def test_format_content(populated):
    text = populated[0].format_content()
    assert "[Kľúč: Alpha] -> 2 jednotiek" in text
    assert "   - Názov: Alpha, Kód: 100, Typ: OBEC" in text
    positions = [text.index(f"=== {h} ===") for h in ("OBCE", "REGIONY", "REPUBLIKY", "GEO OBLASTI")]
    assert positions == sorted(positions)