"""Lookup tables of territorial units by type and name."""

from __future__ import annotations

from typing import Dict, List, Optional

from uzemie.territorial_unit import TerritorialUnit, UnitType

_SECTIONS = (
    ("OBCE", UnitType.OBEC),
    ("REGIONY", UnitType.REGION),
    ("REPUBLIKY", UnitType.REPUBLIKA),
    ("GEO OBLASTI", UnitType.GEO),
)


class UnitTable:
    """One table per unit type, mapping a name to every unit bearing it."""

    def __init__(self) -> None:
        self._tables: Dict[UnitType, Dict[str, List[TerritorialUnit]]] = {
            unit_type: {} for unit_type in UnitType
        }

    def insert(self, unit: TerritorialUnit) -> None:
        self._tables[unit.unit_type].setdefault(unit.name, []).append(unit)

    def find_all(self, name: str, unit_type: UnitType) -> Optional[List[TerritorialUnit]]:
        """Return all units of ``unit_type`` called ``name``, or None."""
        units = self._tables[unit_type].get(name)
        return list(units) if units is not None else None

    def find(self, name: str, unit_type: UnitType, code: str) -> Optional[TerritorialUnit]:
        """Return the unit with this name, type and code, or None."""
        return next(
            (u for u in self._tables[unit_type].get(name, ()) if u.code == code), None
        )

    def table(self, unit_type: UnitType) -> Dict[str, List[TerritorialUnit]]:
        """Return the table of ``unit_type`` ordered by name."""
        if not isinstance(unit_type, UnitType):
            raise ValueError("Neznámy typ územnej jednotky")
        return {name: list(units) for name, units in sorted(self._tables[unit_type].items())}

    def format_content(self) -> str:
        """Describe every table and the units in it."""
        lines: List[str] = []
        for heading, unit_type in _SECTIONS:
            lines.append(f"=== {heading} ===")
            for key, units in self.table(unit_type).items():
                lines.append(f"[Kľúč: {key}] -> {len(units)} jednotiek")
                for unit in units:
                    lines.append(
                        f"   - Názov: {unit.name}, Kód: {unit.code}, Typ: {unit.unit_type.name}"
                    )
                    lines.append(unit.format_all_years())
                    lines.append("")
            lines.append("")
        return "\n".join(lines)

    def clear(self) -> None:
        for table in self._tables.values():
            table.clear()