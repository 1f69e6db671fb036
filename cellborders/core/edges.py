"""Define edge styles and per-cell border records."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, NamedTuple

from cellborders.core.enums import Edge

if TYPE_CHECKING:
    from typing import Any, Union

    AnyEdge = Union["EdgeStyle", "HiddenEdge"]

log = logging.getLogger(__name__)


class EdgeStyle(NamedTuple):
    """The style of a visible cell edge."""

    width: int = 1
    color: str = "#000"
    corner_visible: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the edge in its configuration form."""
        return {
            "width": self.width,
            "color": self.color,
            "cornerVisible": self.corner_visible,
        }


class HiddenEdge:
    """An edge which is explicitly present but not drawn.

    There is only ever one instance of this class, :py:data:`Hidden`.
    """

    _instance: HiddenEdge | None = None

    def __new__(cls) -> HiddenEdge:
        """Return the shared instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def to_dict(self) -> dict[str, Any]:
        """Return the edge in its configuration form."""
        return {"hide": True}

    def __repr__(self) -> str:
        """Represent the hidden edge as a string."""
        return "Hidden"


Hidden = HiddenEdge()

DEFAULT_EDGE_STYLE = EdgeStyle()

_STYLE_KEYS = {
    "width": "width",
    "color": "color",
    "cornerVisible": "corner_visible",
    "corner_visible": "corner_visible",
}


def resolve_edge(value: Any) -> AnyEdge | None:
    """Convert a requested edge value into a concrete edge.

    Args:
        value: The raw edge value. ``None`` means no change was requested, an empty
            string or mapping hides the edge, and a (partial) style mapping is merged
            onto the default edge style.

    Returns:
        An :py:class:`EdgeStyle`, :py:data:`Hidden`, or ``None`` if the existing
        edge should be left untouched

    """
    if value is None:
        return None
    if isinstance(value, (EdgeStyle, HiddenEdge)):
        return value
    if isinstance(value, str):
        if not value:
            return Hidden
    elif isinstance(value, Mapping):
        if not value or value.get("hide") is True:
            return Hidden
        # Merge against the defaults, never against a previous style
        return DEFAULT_EDGE_STYLE._replace(
            **{_STYLE_KEYS[k]: v for k, v in value.items() if k in _STYLE_KEYS}
        )
    log.warning("Ignoring unrecognised edge value %r", value)
    return None


def create_class_name(row: int, col: int) -> str:
    """Derive the identity key of the border record for a cell."""
    return f"border_row{row}col{col}"


class CellBorder:
    """The border decorations of a single cell."""

    def __init__(
        self,
        row: int,
        col: int,
        top: AnyEdge = Hidden,
        right: AnyEdge = Hidden,
        bottom: AnyEdge = Hidden,
        left: AnyEdge = Hidden,
    ) -> None:
        """Create a new border record.

        Args:
            row: The visual row index of the cell
            col: The visual column index of the cell
            top: The top edge
            right: The right edge
            bottom: The bottom edge
            left: The left edge

        """
        self._row = row
        self._col = col
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left

    @property
    def row(self) -> int:
        """The cell's row index."""
        return self._row

    @property
    def col(self) -> int:
        """The cell's column index."""
        return self._col

    @property
    def class_name(self) -> str:
        """The record's identity key."""
        return create_class_name(self._row, self._col)

    def get_edge(self, edge: Edge) -> AnyEdge:
        """Return the value of one of the record's edges."""
        return getattr(self, Edge(edge).value)

    def set_edge(self, edge: Edge, value: AnyEdge) -> None:
        """Set one of the record's edges."""
        setattr(self, Edge(edge).value, value)

    def update(self, spec: Mapping[str, Any]) -> None:
        """Resolve each edge supplied in ``spec`` onto this record."""
        for edge in Edge:
            if (value := resolve_edge(spec.get(edge.value))) is not None:
                self.set_edge(edge, value)

    def has_visible_edge(self, edge: Edge | None = None) -> bool:
        """Whether the given edge, or any edge if none is given, is drawn."""
        edges = Edge if edge is None else (edge,)
        return any(isinstance(self.get_edge(e), EdgeStyle) for e in edges)

    def to_dict(self) -> dict[str, Any]:
        """Return the record in its single-cell configuration form."""
        return {
            "row": self._row,
            "col": self._col,
            "className": self.class_name,
            **{edge.value: self.get_edge(edge).to_dict() for edge in Edge},
        }

    def __repr__(self) -> str:
        """Represent the border record as a string."""
        return (
            f"{self.__class__.__name__}({self._row}, {self._col}, top={self.top!r}, "
            f"right={self.right!r}, bottom={self.bottom!r}, left={self.left!r})"
        )
