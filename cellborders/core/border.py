"""Define the line styles used to draw cell borders as text."""

from __future__ import annotations

from functools import lru_cache, total_ordering
from typing import TYPE_CHECKING, NamedTuple

from cellborders.core.edges import EdgeStyle

if TYPE_CHECKING:
    from cellborders.core.edges import AnyEdge


@total_ordering
class LineStyle:
    """A style of line which can be used to draw grids."""

    def __init__(self, name: str, rank: int, chars: str) -> None:
        """Create a new :class:`LineStyle`.

        Args:
            name: The name of the line style
            rank: Where two lines of differing styles meet, the higher ranked style
                is used to draw the join
            chars: The sixteen characters joining this style's lines, indexed by
                :py:attr:`GridChar.mask`

        """
        self.name = name
        self.rank = rank
        self.chars = chars

    @property
    def visible(self) -> bool:
        """Whether lines of this style are drawn."""
        return self.rank > 0

    def __lt__(self, other: LineStyle) -> bool:
        """Allow :class:`LineStyle`s to be sorted according to their rank."""
        if self.__class__ is other.__class__:
            return self.rank < other.rank
        return NotImplemented

    def __repr__(self) -> str:
        """Represent :class:`LineStyle` instances as a string."""
        return f"LineStyle({self.name})"


# Line Styles

NoLine = LineStyle("None", 0, " " * 16)
ThinLine = LineStyle("Thin", 1, " ╵╶└╷│┌├╴┘─┴┐┤┬┼")
ThickLine = LineStyle("Thick", 2, " ╹╺┗╻┃┏┣╸┛━┻┓┫┳╋")
DoubleLine = LineStyle("Double", 3, " ║═╚║║╔╠═╝═╩╗╣╦╬")


class GridChar(NamedTuple):
    """Representation of a grid node character.

    The four compass points represent the line style joining from the given direction.
    """

    north: LineStyle
    east: LineStyle
    south: LineStyle
    west: LineStyle

    @property
    def mask(self) -> int:
        """A bit for each direction from which a visible line joins."""
        return sum(1 << i for i, line in enumerate(self) if line.visible)


@lru_cache
def get_grid_char(key: GridChar) -> str:
    """Return the character drawing a grid node.

    Lines of mixed styles are joined using the highest ranked style.
    """
    return max(key).chars[key.mask]


def edge_line_style(edge: AnyEdge | None) -> LineStyle:
    """Return the line style used to draw a cell edge."""
    if not isinstance(edge, EdgeStyle):
        return NoLine
    if edge.width >= 3:
        return DoubleLine
    if edge.width == 2:
        return ThickLine
    return ThinLine
