"""Contains commonly used data structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from typing import Any


class DiBool(NamedTuple):
    """A tuple of four bools with directions."""

    top: bool = False
    right: bool = False
    bottom: bool = False
    left: bool = False

    @classmethod
    def from_value(cls, value: bool) -> DiBool:
        """Construct an instance from a single value."""
        return cls(top=value, right=value, bottom=value, left=value)


class CellCoord(NamedTuple):
    """The visual coordinates of a grid cell."""

    row: int
    col: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CellCoord:
        """Construct an instance from a ``{"row": ..., "col": ...}`` mapping."""
        return cls(int(data["row"]), int(data["col"]))

    def to_dict(self) -> dict[str, int]:
        """Return the coordinates in their configuration form."""
        return {"row": self.row, "col": self.col}


class CellRange(NamedTuple):
    """An inclusive rectangular range of cells."""

    from_: CellCoord
    to: CellCoord

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CellRange:
        """Construct a range from its configuration form."""
        return cls(
            CellCoord.from_dict(data["from"]), CellCoord.from_dict(data["to"])
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the range in its configuration form."""
        return {"from": self.from_.to_dict(), "to": self.to.to_dict()}

    @property
    def is_single_cell(self) -> bool:
        """Whether the range covers exactly one cell."""
        return self.from_ == self.to

    def rows(self) -> range:
        """The row indices covered by the range (empty if reversed)."""
        return range(self.from_.row, self.to.row + 1)

    def cols(self) -> range:
        """The column indices covered by the range (empty if reversed)."""
        return range(self.from_.col, self.to.col + 1)

    def cells(self) -> Iterator[CellCoord]:
        """Iterate over every cell in the range, row by row."""
        for row in self.rows():
            for col in self.cols():
                yield CellCoord(row, col)

    def boundaries(self, row: int, col: int) -> DiBool:
        """Which edges of the range a cell inside it lies on."""
        return DiBool(
            top=row == self.from_.row,
            right=col == self.to.col,
            bottom=row == self.to.row,
            left=col == self.from_.col,
        )


class SelectionRange(NamedTuple):
    """A rectangle of the user's selection, from the selection start to its end."""

    start: CellCoord
    end: CellCoord

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SelectionRange:
        """Construct a selection rectangle from a ``{"start", "end"}`` mapping."""
        return cls(
            CellCoord.from_dict(data["start"]), CellCoord.from_dict(data["end"])
        )

    def normalized(self) -> CellRange:
        """Return the selected rectangle from its top-left to bottom-right corner."""
        start, end = self
        return CellRange(
            CellCoord(min(start.row, end.row), min(start.col, end.col)),
            CellCoord(max(start.row, end.row), max(start.col, end.col)),
        )
