"""Defines enums."""

from __future__ import annotations

from enum import Enum


class Edge(str, Enum):
    """One of the four sides of a cell."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Placement(str, Enum):
    """Where a border operation applies to a selection."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    NO_BORDERS = "noBorders"

    @property
    def edge(self) -> Edge | None:
        """The cell edge this placement sets, if any."""
        if self is Placement.NO_BORDERS:
            return None
        return Edge(self.value)
