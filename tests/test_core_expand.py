"""Tests for border range expansion."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cellborders.core.data_structures import CellCoord, CellRange
from cellborders.core.edges import CellBorder, EdgeStyle, Hidden
from cellborders.core.expand import expand_range

if TYPE_CHECKING:
    from typing import Any


def _expand(spec: dict[str, Any]) -> dict[tuple[int, int], CellBorder]:
    records: dict[tuple[int, int], CellBorder] = {}

    def get_record(row: int, col: int) -> CellBorder:
        return records.setdefault((row, col), CellBorder(row, col))

    return {(r.row, r.col): r for r in expand_range(spec, get_record)}


def _range(r1: int, c1: int, r2: int, c2: int) -> dict[str, Any]:
    return {"from": {"row": r1, "col": c1}, "to": {"row": r2, "col": c2}}


def test_single_cell_range() -> None:
    """A one-cell range receives all four edges."""
    result = _expand(
        {"range": _range(0, 0, 0, 0), "top": {}, "right": {"width": 2}, "left": {}}
    )
    assert list(result) == [(0, 0)]
    border = result[(0, 0)]
    assert border.top is Hidden
    assert border.right == EdgeStyle(width=2)
    assert border.bottom is Hidden
    assert border.left is Hidden


def test_single_row_range() -> None:
    """Every cell of a one-row range lies on its top and bottom edges."""
    style = {"width": 1, "color": "red"}
    result = _expand({"range": _range(0, 0, 0, 2), "top": style, "bottom": style})
    assert list(result) == [(0, 0), (0, 1), (0, 2)]
    for border in result.values():
        assert border.top == EdgeStyle(color="red")
        assert border.bottom == EdgeStyle(color="red")
    assert result[(0, 0)].left is Hidden


def test_perimeter_only() -> None:
    """Interior cells of a range are not touched."""
    style = {"width": 1}
    result = _expand(
        {
            "range": _range(1, 1, 3, 4),
            "top": style,
            "right": style,
            "bottom": style,
            "left": style,
        }
    )
    assert len(result) == 10
    assert (2, 2) not in result
    assert (2, 3) not in result


def test_corner_receives_two_edges() -> None:
    """Corner cells receive the edges of both sides they lie on."""
    style = {"color": "blue"}
    result = _expand(
        {
            "range": _range(0, 0, 2, 2),
            "top": style,
            "right": style,
            "bottom": style,
            "left": style,
        }
    )
    corner = result[(0, 2)]
    assert corner.top == EdgeStyle(color="blue")
    assert corner.right == EdgeStyle(color="blue")
    assert corner.bottom is Hidden
    assert corner.left is Hidden

    middle = result[(1, 0)]
    assert middle.left == EdgeStyle(color="blue")
    assert middle.top is Hidden


def test_missing_edges_leave_record_untouched() -> None:
    """Edges absent from the entry keep their existing value."""
    existing = CellBorder(0, 0, left=EdgeStyle(width=3))
    records = list(
        expand_range(
            {"range": CellRange(CellCoord(0, 0), CellCoord(0, 0)), "top": {}},
            lambda row, col: existing,
        )
    )
    assert records == [existing]
    assert existing.left == EdgeStyle(width=3)
    assert existing.top is Hidden


def test_reversed_range_is_empty() -> None:
    """Ranges whose end precedes their start produce no records."""
    assert _expand({"range": _range(2, 2, 0, 0), "top": {}}) == {}
