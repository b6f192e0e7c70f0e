import pytest

from uzemie.territorial_unit import Gender, TerritorialUnit, UnitType


@pytest.fixture
def unit():
    return TerritorialUnit("Alpha", "A1", UnitType.OBEC, 2020, 10, 15)


def test_initial_record(unit):
    assert unit.population(2020, Gender.MALE) == 10
    assert unit.population(2020, Gender.FEMALE) == 15
    assert unit.population(2020) == unit.population(2020, Gender.MALE) + unit.population(
        2020, Gender.FEMALE
    )


def test_unknown_year_is_zero(unit):
    assert unit.population(1999) == 0
    assert unit.population(1999, Gender.FEMALE) == 0


def test_add_new_data_appends_and_first_match_wins(unit):
    unit.add_new_data(2021, 3, 4)
    unit.add_new_data(2020, 100, 100)
    assert unit.population(2021, Gender.MALE) == 3
    assert unit.population(2020, Gender.MALE) == 10
    assert [r.year for r in unit.records] == [2020, 2021, 2020]


def test_add_population_data_merges(unit):
    before_male = unit.population(2020, Gender.MALE)
    before_total = unit.population(2020)
    unit.add_population_data(2020, 5, 7)
    assert unit.population(2020, Gender.MALE) == before_male + 5
    assert unit.population(2020) == before_total + 5 + 7
    assert len(unit.records) == 1


def test_add_population_data_creates_year(unit):
    unit.add_population_data(2022, 1, 2)
    assert unit.population(2022, Gender.FEMALE) == 2
    assert len(unit.records) == 2


def test_records_are_copies(unit):
    unit.records[0].data.male = 999
    assert unit.population(2020, Gender.MALE) == 10


def test_format_year(unit):
    text = unit.format_year(2020)
    assert text.startswith("Alpha | R: 2020 | C: A1 | M: 10 | Ž: 15")
    assert text.endswith("| T: OBEC")
    assert unit.format_year(1999) is None


def test_format_all_years_skips_empty_record():
    unit = TerritorialUnit("Beta", "B2", UnitType.REGION)
    assert unit.format_all_years() == "Beta C: B2"
    unit.add_new_data(2020, 1, 2)
    lines = unit.format_all_years().splitlines()
    assert len(lines) == 2
    assert lines[1].startswith("Rok: 2020 | C: B2 | Ž: 2 | M: 1")


def test_properties(unit):
    assert (unit.name, unit.code, unit.unit_type) == ("Alpha", "A1", UnitType.OBEC)