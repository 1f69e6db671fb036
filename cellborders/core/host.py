"""Define the interfaces through which the engine talks to its host grid."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, NamedTuple

from prompt_toolkit.utils import Event

from cellborders.core.data_structures import CellCoord, CellRange, SelectionRange

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import Any, Protocol

    from cellborders.core.edges import CellBorder

    class CellMetaStore(Protocol):
        """Protocol for the grid's per-cell metadata store."""

        def get(self, row: int, col: int, key: str) -> Any: ...

        def set(self, row: int, col: int, key: str, value: Any) -> None: ...

        def remove(self, row: int, col: int, key: str) -> None: ...

    class HighlightList(Protocol):
        """Protocol for the grid's list of active cell decorations."""

        def add(self, highlight: BorderHighlight) -> None: ...

        def remove(self, highlight: BorderHighlight) -> None: ...

        def __iter__(self) -> Iterator[BorderHighlight]: ...

    class GridHost(Protocol):
        """Protocol for the grid which hosts the custom borders plugin."""

        meta: CellMetaStore
        highlights: HighlightList
        on_render: Event[Any]

        def selected_ranges(self) -> list[SelectionRange]: ...

        def is_selected_by_corner(self) -> bool: ...


BORDERS_KEY = "borders"


class BorderHighlight(NamedTuple):
    """A cell decoration which tells the renderer to draw a cell's borders."""

    class_name: str
    cell_range: CellRange
    border: CellBorder

    @classmethod
    def from_border(cls, border: CellBorder) -> BorderHighlight:
        """Create a highlight covering the cell of a border record."""
        coord = CellCoord(border.row, border.col)
        return cls(border.class_name, CellRange(coord, coord), border)


class MemoryCellMetaStore:
    """A per-cell metadata store held in memory."""

    def __init__(self) -> None:
        """Create a new empty store."""
        self._data: dict[CellCoord, dict[str, Any]] = defaultdict(dict)

    def get(self, row: int, col: int, key: str) -> Any:
        """Return a cell's metadata value, or ``None`` if unset."""
        if (cell := self._data.get(CellCoord(row, col))) is not None:
            return cell.get(key)
        return None

    def set(self, row: int, col: int, key: str, value: Any) -> None:
        """Set a cell's metadata value."""
        self._data[CellCoord(row, col)][key] = value

    def remove(self, row: int, col: int, key: str) -> None:
        """Remove a cell's metadata value if present."""
        coord = CellCoord(row, col)
        if (cell := self._data.get(coord)) is not None:
            cell.pop(key, None)
            if not cell:
                del self._data[coord]

    def cells(self, key: str) -> dict[CellCoord, Any]:
        """Return every cell with a value for the given key."""
        return {
            coord: meta[key] for coord, meta in self._data.items() if key in meta
        }


class MemoryHighlightList:
    """A list of cell decorations held in memory."""

    def __init__(self) -> None:
        """Create a new empty list."""
        self._items: list[BorderHighlight] = []

    def add(self, highlight: BorderHighlight) -> None:
        """Add a decoration."""
        self._items.append(highlight)

    def remove(self, highlight: BorderHighlight) -> None:
        """Remove a decoration if present."""
        for i, item in enumerate(self._items):
            if item.class_name == highlight.class_name:
                del self._items[i]
                break

    def __iter__(self) -> Iterator[BorderHighlight]:
        """Iterate over a snapshot of the decorations."""
        return iter(list(self._items))

    def __len__(self) -> int:
        """Return the number of decorations."""
        return len(self._items)


class MemoryGridHost:
    """A grid host held entirely in memory."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        """Create a new in-memory grid.

        Args:
            rows: The number of rows in the grid
            cols: The number of columns in the grid

        """
        self.rows = rows
        self.cols = cols
        self.meta = MemoryCellMetaStore()
        self.highlights = MemoryHighlightList()
        self.on_render: Event[MemoryGridHost] = Event(self)
        self.selection: list[SelectionRange] = []
        self.selected_by_corner = False

    def select(self, *ranges: SelectionRange | Sequence[tuple[int, int]]) -> None:
        """Replace the current selection.

        Args:
            ranges: Selection rectangles, either as :py:class:`SelectionRange` or as
                pairs of ``(row, col)`` tuples

        """
        self.selection = [
            x
            if isinstance(x, SelectionRange)
            else SelectionRange(CellCoord(*x[0]), CellCoord(*x[1]))
            for x in ranges
        ]

    def selected_ranges(self) -> list[SelectionRange]:
        """Return the current selection."""
        return list(self.selection)

    def is_selected_by_corner(self) -> bool:
        """Whether the whole grid was selected by clicking the corner header."""
        return self.selected_by_corner
