import pytest

from typing import Any, List

from io import StringIO

from datetime import date

from dataclasses import dataclass

from pathlib import Path

from table_grid.geometry import Position, Section

from table_grid.style import Font

from table_grid.config import TableConfig

from table_grid.content import TextContent, DateContent

from table_grid.grid import Grid, StructureChange

from table_grid.loading import (
    DataFormat,
    load_delimited,
    load_file,
    load_from_objects,
    properties,
)


def cell_texts(grid: Grid) -> List[Any]:
    return sorted(
        (
            cell.position.column,
            cell.position.row,
            cell.content.text if isinstance(cell.content, TextContent) else None,
        )
        for cell in grid
    )


class TestLoadDelimited:
    def test_csv(self) -> None:
        grid = Grid()
        cells = load_delimited(grid, "A,B\n1,2\n")
        assert len(cells) == 4
        assert cell_texts(grid) == [(0, 0, "A"), (0, 1, "1"), (1, 0, "B"), (1, 1, "2")]
        assert grid.bounding_region() == Section(0, 0, 1, 1)

    def test_tsv_from_stream(self) -> None:
        grid = Grid()
        load_delimited(grid, StringIO("A\tB,C\n"), DataFormat.tsv)
        assert cell_texts(grid) == [(0, 0, "A"), (1, 0, "B,C")]

    def test_ragged_rows(self) -> None:
        grid = Grid()
        load_delimited(grid, "a,b,c\nd\n")
        assert len(grid) == 4
        assert grid[2, 1] is None

    def test_fields_trimmed_per_line(self) -> None:
        grid = Grid()
        load_delimited(grid, 'x,"  first line  \n  second  "\n')
        cell = grid[1, 0]
        assert cell is not None
        assert isinstance(cell.content, TextContent)
        assert cell.content.text == "first line\nsecond"

    def test_replaces_existing_cells(self) -> None:
        grid = Grid()
        grid.add_cells([grid.create_cell(Position(9, 9), "old")])
        changes: List[StructureChange] = []
        grid.subscribe(changes.append)

        load_delimited(grid, "new\n")

        assert cell_texts(grid) == [(0, 0, "new")]
        assert len(changes) == 1

    def test_uses_config_font(self) -> None:
        grid = Grid(TableConfig(font=Font(size=9)))
        load_delimited(grid, "a\n")
        cell = grid[0, 0]
        assert cell is not None
        assert isinstance(cell.content, TextContent)
        assert cell.content.font == Font(size=9)

    def test_empty(self) -> None:
        grid = Grid()
        assert load_delimited(grid, "") == []
        assert grid.bounding_region() is None


class TestLoadFile:
    @pytest.mark.parametrize(
        "filename, content",
        [
            ("data.csv", "A,B\n1,2\n"),
            ("data.tsv", "A\tB\n1\t2\n"),
            ("data.TAB", "A\tB\n1\t2\n"),
            ("data.txt", "A,B\n1,2\n"),
        ],
    )
    def test_format_from_suffix(self, tmp_path: Path, filename: str, content: str) -> None:
        path = tmp_path / filename
        path.write_text(content)
        grid = Grid()
        load_file(grid, path)
        assert cell_texts(grid) == [(0, 0, "A"), (0, 1, "1"), (1, 0, "B"), (1, 1, "2")]

    def test_explicit_format(self, tmp_path: Path) -> None:
        path = tmp_path / "data.csv"
        path.write_text("A\tB\n")
        grid = Grid()
        load_file(grid, str(path), DataFormat.tsv)
        assert len(grid) == 2


@dataclass
class Person:
    name: str
    age: int
    born: date


PEOPLE = [
    Person("Alice", 30, date(1993, 1, 5)),
    Person("Bob", 25, date(1998, 7, 1)),
]


class TestLoadFromObjects:
    def test_extraction_function(self) -> None:
        grid = Grid()
        cells = load_from_objects(grid, PEOPLE, lambda p: [p.name, p.age])
        assert len(cells) == 4
        assert cell_texts(grid) == [
            (0, 0, "Alice"),
            (0, 1, "Bob"),
            (1, 0, "30"),
            (1, 1, "25"),
        ]

    def test_start_at_and_existing_cells_kept(self) -> None:
        grid = Grid()
        load_delimited(grid, "Name,Age\n")
        changes: List[StructureChange] = []
        grid.subscribe(changes.append)

        load_from_objects(grid, PEOPLE, properties("name", "age"), Position(0, 1))

        assert len(changes) == 1
        assert cell_texts(grid) == [
            (0, 0, "Name"),
            (0, 1, "Alice"),
            (0, 2, "Bob"),
            (1, 0, "Age"),
            (1, 1, "30"),
            (1, 2, "25"),
        ]

    def test_values_converted(self) -> None:
        grid = Grid(TableConfig(culture="en-GB"))
        load_from_objects(grid, PEOPLE[:1], properties("born"))
        cell = grid[0, 0]
        assert cell is not None
        assert isinstance(cell.content, DateContent)
        assert cell.content.text == "05/01/1993"


class TestProperties:
    def test_separate_names(self) -> None:
        assert properties("name", "age")(PEOPLE[0]) == ["Alice", 30]

    def test_dot_separated(self) -> None:
        assert properties("name.age")(PEOPLE[0]) == ["Alice", 30]

    def test_single(self) -> None:
        assert properties("name")(PEOPLE[1]) == ["Bob"]
