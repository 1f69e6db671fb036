"""Expand rectangular border ranges into per-cell border records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cellborders.core.data_structures import CellRange
from cellborders.core.edges import resolve_edge
from cellborders.core.enums import Edge

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping
    from typing import Any

    from cellborders.core.edges import CellBorder

log = logging.getLogger(__name__)


def expand_range(
    spec: Mapping[str, Any], get_record: Callable[[int, int], CellBorder]
) -> Iterator[CellBorder]:
    """Apply a range border entry to the cells on the range's boundary.

    Only cells lying on at least one edge of the range are touched. Each such cell
    receives the supplied edge values for every side of the range it lies on, so a
    corner cell receives two edges and a single-cell range receives all four.

    Args:
        spec: A mapping with a ``range`` (``{"from": {...}, "to": {...}}``) and any of
            ``top``, ``right``, ``bottom`` and ``left``
        get_record: A callable returning the record to update for a cell

    Yields:
        Each border record which was touched

    """
    cell_range = (
        spec["range"]
        if isinstance(spec["range"], CellRange)
        else CellRange.from_dict(spec["range"])
    )
    edges = {
        edge: value
        for edge in Edge
        if (value := resolve_edge(spec.get(edge.value))) is not None
    }
    log.debug("Expanding border range %s", cell_range)

    for row in cell_range.rows():
        for col in cell_range.cols():
            on_edge = cell_range.boundaries(row, col)
            if not any(on_edge):
                continue
            record = get_record(row, col)
            for edge, value in edges.items():
                if getattr(on_edge, edge.value):
                    record.set_edge(edge, value)
            yield record
