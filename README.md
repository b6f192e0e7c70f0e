# uzemie

A small library for territorial units and their population by year. The units
are municipalities (`OBEC`), regions (`REGION`), republics (`REPUBLIKA`) and
geographic areas (`GEO`).

The library reads population CSV files and indexes the units by type and name.
It arranges them in a hierarchy from the root down to the municipalities. It
then adds up each level's population from the levels below it, and a
navigator moves a cursor through that hierarchy.

The package also holds the data structures it is built on:

- implicit sequences, plain and cyclic, stored in an array;
- singly and doubly linked sequences;
- stacks;
- fixed-size arrays and compact matrices with chosen index bases;
- a quicksort.

It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Territorial units

```python
from uzemie.territorial_unit import Gender, TerritorialUnit, UnitType

unit = TerritorialUnit("Abrahám", "SK0215234567", UnitType.OBEC, 2020, 480, 510)
unit.add_new_data(2021, 470, 505)          # appends a record for the year
unit.add_population_data(2021, 10, 5)      # adds to the 2021 record
unit.population(2021)                      # 990 (Gender.TOTAL by default)
unit.population(2021, Gender.FEMALE)       # 510
unit.population(1999)                      # 0: no record for that year
print(unit.format_year(2020))
print(unit.format_all_years())
```

`records` returns copies of the stored `YearPopulationData` records in the
order they were added. `format_all_years` skips records in which the year and
every count are zero. A unit created without a year holds one such record.

## Loading population data

Each population CSV begins with a line that holds the year, then a header
line. Every line after that has the form `name;code;male;female`. Lines with
fewer fields are skipped.

```python
from uzemie.loader import Loader
from uzemie.territorial_unit import UnitType

loader = Loader()
loader.load_csv_files(["2020.csv", "2021.csv"])

village = loader.contains("Abrahám", UnitType.OBEC, "SK0215234567")
print(village.format_all_years())
print(len(loader))                  # number of distinct villages loaded
print(loader.format_all_villages())
```

When a village with the same name and code is loaded again, the new year is
appended to the existing unit. No new unit is created. Errors are raised as
follows:

- `load_csv` raises `ValueError` when the first line is not a year.
- A missing file raises the usual `OSError`.

## Building the hierarchy

```python
from uzemie.navigator import Hierarchy, HierarchyNavigator
from uzemie.territorial_unit import TerritorialUnit, UnitType

hierarchy = Hierarchy(TerritorialUnit("Slovensko", "SK", UnitType.GEO))
loader.load_territories(hierarchy, "uzemie.csv", "obce.csv")
loader.update_cumulative_data(hierarchy)
```

`load_territories` reads two files. The defaults are `uzemie.csv` and
`obce.csv`.

- **Territories** have lines of the form `name;code`. The first three
  characters and the last character of the code are dropped. The remaining
  one to three digits give the unit's level (`GEO`, `REPUBLIKA`, `REGION`) and
  its position under its parent. Codes of another length are logged as a
  warning and skipped.
- **Villages** have lines of the form `name;village_code;code`. The first two
  characters of `code` are dropped. Its next three digits locate the region.
  The village is looked up by its name and `village_code` among the villages
  already loaded with `load_csv`, and is appended under that region. A village
  that is not found is logged as an error.

A code that points to a territory that does not exist raises `LookupError`.

`update_cumulative_data` works from the leaves up. It adds every son's yearly
counts into its parent, so the root must hold a unit for the sums to be
recorded.

## Navigating

```python
navigator = HierarchyNavigator(hierarchy)
navigator.list_children()          # [(0, "Západné Slovensko"), ...]
navigator.move_to_child(0)         # returns the son; IndexError if out of range
print(navigator.current().data.name)
navigator.move_to_parent()         # False when already at the root
navigator.clear_hierarchy()        # drops the data of every node but villages
```

## Lookup tables

`UnitTable` keeps one table for each `UnitType`. Each table maps a name to
every unit that has that name.

```python
units = loader.tables()
same_name = units.find_all("Nová Ves", UnitType.OBEC)            # list or None
exact = units.find("Nová Ves", UnitType.OBEC, "SK0321500001")    # unit or None
by_name = units.table(UnitType.REGION)                            # sorted by name
print(units.format_content())
```

## Data structures

```python
from uzemie.array import Array, CompactMatrix, Dimension
from uzemie.implicit_sequence import ImplicitSequence
from uzemie.sorts import QuickSort
from uzemie.stack import ExplicitStack, ImplicitStack, StackEmptyError

seq = ImplicitSequence(10, False)
for value in (5, 3, 9, 1):
    seq.insert_last().data = value
QuickSort().sort(seq)                          # uses < by default
print(list(seq))                               # [1, 3, 5, 9]
QuickSort().sort(seq, lambda a, b: a > b)      # descending

stack = ImplicitStack()
stack.push(1)
stack.push(2)
print(stack.pop())                             # 2

years = Array(Dimension(2000, 25))
years.set(42, 2010)
print(years.access(2010))                      # 42

grid = CompactMatrix(Dimension(1, 3), Dimension(1, 3))
grid.set("x", 2, 3)
```

The structures behave as follows:

- **Sequences.** Sequences hand out `MemoryBlock` objects whose `data` you set.
  `calculate_index` returns `None` for a block that is not in the sequence.
  `access` returns `None` for an index out of range. The linked sequences in
  `uzemie.explicit_sequence` offer the same operations.
- **Stacks.** Reading from an empty stack raises `StackEmptyError`, a subclass
  of `IndexError`.
- **Arrays and matrices.**
  - An index outside the dimension raises `IndexError`.
  - `assign` between different dimensions raises `ValueError`.
  - `clear` raises `TypeError`, because their size is fixed.

## What the package does not do

It has no command-line program or interactive menu. Every `format_*` method
returns text for you to print. The `loader` module reports skipped lines
through `logging`. The package does not store anything: data lives in memory
for as long as the `Loader` and `Hierarchy` objects do.