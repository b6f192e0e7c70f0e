"""Territorial units and their population records by year."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import List, Optional


class UnitType(Enum):
    """Level of a territorial unit in the hierarchy."""

    GEO = auto()
    REPUBLIKA = auto()
    REGION = auto()
    OBEC = auto()


class Gender(Enum):
    """Which part of a population is asked for."""

    MALE = auto()
    FEMALE = auto()
    TOTAL = auto()


@dataclass
class PopulationData:
    """Counts of women, men and the whole population."""

    female: int = 0
    male: int = 0
    population: int = 0


@dataclass
class YearPopulationData:
    """Population counts belonging to one year."""

    year: int = 0
    data: PopulationData = field(default_factory=PopulationData)


class TerritorialUnit:
    """A named, coded territorial unit with population records per year."""

    def __init__(
        self,
        name: str,
        code: str,
        unit_type: UnitType,
        year: int = 0,
        male: int = 0,
        female: int = 0,
    ) -> None:
        self._name = name
        self._code = code
        self._unit_type = unit_type
        self._records: List[YearPopulationData] = []
        self.add_new_data(year, male, female)

    def __repr__(self) -> str:
        return f"TerritorialUnit({self._name!r}, {self._code!r}, {self._unit_type.name})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def code(self) -> str:
        return self._code

    @property
    def unit_type(self) -> UnitType:
        return self._unit_type

    @property
    def records(self) -> List[YearPopulationData]:
        """Copies of the stored records, in insertion order."""
        return [YearPopulationData(r.year, replace(r.data)) for r in self._records]

    def _find(self, year: int) -> Optional[YearPopulationData]:
        return next((r for r in self._records if r.year == year), None)

    def population(self, year: int, gender: Gender = Gender.TOTAL) -> int:
        """Return the count for ``year`` and ``gender``, or 0 if the year is unknown."""
        record = self._find(year)
        if record is None:
            return 0
        if gender is Gender.MALE:
            return record.data.male
        if gender is Gender.FEMALE:
            return record.data.female
        return record.data.population

    def add_new_data(self, year: int, male: int, female: int) -> None:
        """Append a record for ``year`` without looking for an existing one."""
        self._records.append(
            YearPopulationData(year, PopulationData(female, male, male + female))
        )

    def add_population_data(self, year: int, male: int, female: int) -> None:
        """Add counts to the record for ``year``, creating it if missing."""
        record = self._find(year)
        if record is None:
            self.add_new_data(year, male, female)
            return
        record.data.male += male
        record.data.female += female
        record.data.population += male + female

    def format_year(self, year: int) -> Optional[str]:
        """Describe the record for ``year`` on one line, or None if there is none."""
        record = self._find(year)
        if record is None:
            return None
        data = record.data
        return (
            f"{self._name} | R: {year} | C: {self._code} | M: {data.male}"
            f" | Ž: {data.female} | P: {data.population} | T: {self._unit_type.name}"
        )

    def format_all_years(self) -> str:
        """Describe every non-empty record, one per line, under a header line."""
        lines = [f"{self._name} C: {self._code}"]
        for record in self._records:
            data = record.data
            if record.year == 0 and data.female == 0 and data.male == 0 and data.population == 0:
                continue
            lines.append(
                f"Rok: {record.year} | C: {self._code} | Ž: {data.female}"
                f" | M: {data.male} | P: {data.population} | T: {self._unit_type.name}"
            )
        return "\n".join(lines)