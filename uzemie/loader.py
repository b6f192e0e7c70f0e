"""Loading of population and territory CSV files into tables and a hierarchy."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from uzemie.navigator import Hierarchy, HierarchyNode
from uzemie.territorial_unit import TerritorialUnit, UnitType
from uzemie.unit_table import UnitTable

_log = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _fields(line: str, count: int) -> Optional[List[str]]:
    """Return the first ``count`` ';'-separated fields, or None if there are too few."""
    parts = line.split(";")
    if len(parts) < count or (len(parts) == count and parts[-1] == ""):
        return None
    return parts[:count]


def _digit(char: str) -> int:
    return ord(char) - ord("0")


class Loader:
    """Owns the villages read from CSV files and the tables that index units."""

    def __init__(self) -> None:
        self._villages: List[TerritorialUnit] = []
        self._tables = UnitTable()

    def __len__(self) -> int:
        return len(self._villages)

    def load_csv(self, filename: str) -> None:
        """Read one year of village populations from ``filename``."""
        with open(filename, encoding="utf-8") as file:
            first = file.readline()
            try:
                year = _leading_int(first)
            except ValueError:
                raise ValueError("CSV doesn't have a valid year.") from None
            file.readline()
            for raw in file:
                fields = _fields(raw.rstrip("\n"), 4)
                if fields is None:
                    continue
                name, code, male_text, female_text = fields
                male = _leading_int(male_text)
                female = _leading_int(female_text)
                found = self.contains(name, UnitType.OBEC, code)
                if found is not None:
                    found.add_new_data(year, male, female)
                else:
                    village = TerritorialUnit(name, code, UnitType.OBEC, year, male, female)
                    self._villages.append(village)
                    self.insert(village)

    def load_csv_files(self, filenames: Iterable[str]) -> None:
        for filename in filenames:
            self.load_csv(filename)

    def _son(self, hierarchy: Hierarchy, node: HierarchyNode, index: int, code: str) -> HierarchyNode:
        son = hierarchy.access_son(node, index)
        if son is None:
            raise LookupError(f"no territory in the hierarchy for code {code}")
        return son

    def load_territories(
        self,
        hierarchy: Hierarchy,
        territories_path: str = "uzemie.csv",
        villages_path: str = "obce.csv",
    ) -> None:
        """Build the territory levels of ``hierarchy`` and attach loaded villages."""
        root = hierarchy.root
        with open(territories_path, encoding="utf-8") as file:
            for raw in file:
                fields = _fields(raw.rstrip("\n"), 2)
                if fields is None:
                    continue
                name, code = fields
                if len(code) < 3:
                    raise ValueError(f"territory code too short: {code!r}")
                code = code[3:len(code) - 1]
                if not 1 <= len(code) <= 3:
                    _log.warning("Skipping invalid code: %s.", code)
                    continue
                indices = [_digit(c) for c in code]
                indices = [i - 1 if i > 0 else i for i in indices]
                parent = root
                for index in indices[:-1]:
                    parent = self._son(hierarchy, parent, index, code)
                unit_type = (UnitType.GEO, UnitType.REPUBLIKA, UnitType.REGION)[len(code) - 1]
                unit = TerritorialUnit(name, code, unit_type)
                hierarchy.emplace_son(parent, indices[-1], unit)
                self.insert(unit)

        with open(villages_path, encoding="utf-8") as file:
            for raw in file:
                fields = _fields(raw.rstrip("\n"), 3)
                if fields is None:
                    continue
                name, parent_name, code = fields
                if len(code) < 2:
                    raise ValueError(f"village code too short: {code!r}")
                code = code[2:]
                if len(code) < 3:
                    _log.warning("Skipping invalid code: %s.", code)
                    continue
                region = root
                for char in code[:3]:
                    region = self._son(hierarchy, region, max(_digit(char) - 1, 0), code)
                village = self.contains(name, UnitType.OBEC, parent_name)
                if village is not None:
                    hierarchy.emplace_son(region, hierarchy.degree(region), village)
                else:
                    _log.error("VILLAGE WITH CODE %s doesn't exists.", code)

    def update_cumulative_data(self, hierarchy: Hierarchy) -> None:
        """Sum the populations of every node's sons into the node."""
        self.update_node_data(hierarchy.root)

    def update_node_data(self, node: Optional[HierarchyNode]) -> None:
        if node is None or node.data is None:
            return
        for son in node.sons:
            self.update_node_data(son)
        for son in node.sons:
            if son.data is None:
                continue
            for record in son.data.records:
                node.data.add_population_data(record.year, record.data.male, record.data.female)

    def contains(self, name: str, unit_type: UnitType, code: str) -> Optional[TerritorialUnit]:
        return self._tables.find(name, unit_type, code)

    def insert(self, unit: TerritorialUnit) -> None:
        self._tables.insert(unit)

    def villages(self) -> List[TerritorialUnit]:
        return list(self._villages)

    def tables(self) -> UnitTable:
        return self._tables

    def format_all_villages(self) -> str:
        return "\n".join(village.format_all_years() for village in self._villages)

    def clear(self) -> None:
        self._villages.clear()
        self._tables.clear()