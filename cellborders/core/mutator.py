"""Selection-driven border mutations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import TYPE_CHECKING

from cellborders.core.data_structures import SelectionRange
from cellborders.core.edges import (
    DEFAULT_EDGE_STYLE,
    CellBorder,
    Hidden,
    create_class_name,
)
from cellborders.core.enums import Edge, Placement
from cellborders.core.host import BORDERS_KEY, BorderHighlight

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cellborders.core.host import GridHost
    from cellborders.core.registry import BorderRegistry

log = logging.getLogger(__name__)


class BorderMutator:
    """Keep the border registry, cell metadata and decorations in step."""

    def __init__(self, host: GridHost, registry: BorderRegistry) -> None:
        """Create a new mutator.

        Args:
            host: The grid whose metadata store, decorations and render event are used
            registry: The registry of decorated cells

        """
        self.host = host
        self.registry = registry

    def render(self) -> None:
        """Ask the host to repaint."""
        self.host.on_render.fire()

    def get_record(self, row: int, col: int) -> CellBorder:
        """Return a cell's border record, creating an empty one if it has none.

        The registered record is used when there is one, so the registry and the
        metadata store hold the same record even if the store does not keep the
        objects it is given.
        """
        if (record := self.registry.get(create_class_name(row, col))) is not None:
            return record
        meta = self.host.meta.get(row, col, BORDERS_KEY)
        if isinstance(meta, CellBorder):
            return meta
        record = CellBorder(row, col)
        if isinstance(meta, Mapping):
            # Edges missing from stored metadata stay hidden
            record.update(meta)
        return record

    def commit(self, record: CellBorder) -> None:
        """Store a record in the metadata store, registry and decoration list."""
        self.host.meta.set(record.row, record.col, BORDERS_KEY, record)
        self._remove_highlight(record.class_name)
        self.registry.insert(record)
        self.host.highlights.add(BorderHighlight.from_border(record))

    def _remove_highlight(self, class_name: str) -> None:
        for highlight in self.host.highlights:
            if highlight.class_name == class_name:
                self.host.highlights.remove(highlight)
                break

    def remove_highlights(self) -> None:
        """Remove the decorations of every registered record."""
        for class_name in self.registry.class_names():
            self._remove_highlight(class_name)

    def set_edge(
        self,
        row: int,
        col: int,
        edge: Edge | str,
        hide: bool,
        render: bool = True,
    ) -> None:
        """Show or hide one edge of a cell.

        Args:
            row: The visual row index
            col: The visual column index
            edge: The edge to change
            hide: If :py:const:`True` the edge is hidden, otherwise it is given the
                default edge style
            render: Whether to ask the host to repaint afterwards

        """
        try:
            edge = Edge(edge)
        except ValueError:
            log.debug("Ignoring unknown edge %r", edge)
            return
        record = self.get_record(row, col)
        record.set_edge(edge, Hidden if hide else DEFAULT_EDGE_STYLE)
        self.commit(record)
        if render:
            self.render()

    def clear_cell(self, row: int, col: int, render: bool = True) -> None:
        """Remove all border decorations from a cell."""
        class_name = create_class_name(row, col)
        self.registry.remove(class_name)
        self._remove_highlight(class_name)
        self.host.meta.remove(row, col, BORDERS_KEY)
        if render:
            self.render()

    def apply_to_selection(
        self,
        selection: Iterable[SelectionRange],
        placement: Placement | str,
        hide: bool = False,
    ) -> None:
        """Add or remove borders on each rectangle of a selection.

        Clearing borders (``"noBorders"``) clears every cell of a rectangle, whereas a
        directional placement only changes the cells along the matching side of the
        rectangle. The host is asked to repaint once all rectangles are done.

        Args:
            selection: The selected rectangles
            placement: One of ``"top"``, ``"right"``, ``"bottom"``, ``"left"`` or
                ``"noBorders"``
            hide: Whether to hide rather than show the edges

        """
        try:
            placement = Placement(placement)
        except ValueError:
            log.debug("Ignoring unknown border placement %r", placement)
            return

        set_edge = partial(self.set_edge, hide=hide, render=False)
        for selected in selection:
            if not isinstance(selected, SelectionRange):
                selected = SelectionRange.from_dict(selected)
            cell_range = selected.normalized()
            start, end = cell_range

            if cell_range.is_single_cell:
                if placement is Placement.NO_BORDERS:
                    self.clear_cell(start.row, start.col, render=False)
                else:
                    set_edge(start.row, start.col, placement.value)

            elif placement is Placement.NO_BORDERS:
                for col in cell_range.cols():
                    for row in cell_range.rows():
                        self.clear_cell(row, col, render=False)

            elif placement is Placement.TOP:
                for col in cell_range.cols():
                    set_edge(start.row, col, Edge.TOP)

            elif placement is Placement.RIGHT:
                for row in cell_range.rows():
                    set_edge(row, end.col, Edge.RIGHT)

            elif placement is Placement.BOTTOM:
                for col in cell_range.cols():
                    set_edge(end.row, col, Edge.BOTTOM)

            elif placement is Placement.LEFT:
                for row in cell_range.rows():
                    set_edge(row, start.col, Edge.LEFT)

        self.render()

    def selection_has_border(
        self, selection: Iterable[SelectionRange], edge: Edge | str | None = None
    ) -> bool:
        """Determine if any selected cell has a border.

        Args:
            selection: The selected rectangles
            edge: If given, only a visible border on this edge counts

        Returns:
            :py:const:`True` if at least one selected cell has a matching border

        """
        if edge is not None:
            try:
                edge = Edge(edge)
            except ValueError:
                return False
        for selected in selection:
            for row, col in selected.normalized().cells():
                if (
                    create_class_name(row, col) not in self.registry
                    and self.host.meta.get(row, col, BORDERS_KEY) is None
                ):
                    continue
                if edge is None or self.get_record(row, col).has_visible_edge(edge):
                    return True
        return False
