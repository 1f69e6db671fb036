"""Draw a grid with custom borders in the terminal."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from prompt_toolkit.formatted_text.base import FormattedText
from prompt_toolkit.shortcuts.utils import print_formatted_text
from prompt_toolkit.styles.style import parse_color

from cellborders.core.border import GridChar, NoLine, edge_line_style, get_grid_char
from cellborders.core.edges import EdgeStyle
from cellborders.core.enums import Edge
from cellborders.core.host import MemoryGridHost
from cellborders.core.plugin import CustomBorders

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

    from prompt_toolkit.formatted_text.base import StyleAndTextTuples

    from cellborders.core.border import LineStyle
    from cellborders.core.config import Config
    from cellborders.core.edges import CellBorder

    Segment = tuple[LineStyle, str]

log = logging.getLogger(__name__)

CORNER_CHAR = "■"

_NO_SEGMENT: Segment = (NoLine, "")


def edge_style_str(edge: EdgeStyle) -> str:
    """Convert an edge's colour to a prompt-toolkit style string."""
    try:
        parse_color(edge.color)
    except ValueError:
        log.debug("Cannot display border color %r", edge.color)
        return ""
    return f"fg:{edge.color}"


def _merge(
    segments: dict[tuple[int, int], Segment], key: tuple[int, int], edge: Any
) -> None:
    """Draw an edge onto a grid segment, keeping the highest ranked line."""
    line = edge_line_style(edge)
    if line is NoLine:
        return
    if line > segments.get(key, _NO_SEGMENT)[0]:
        segments[key] = (line, edge_style_str(edge))


def render_grid(
    borders: Iterable[CellBorder], rows: int = 0, cols: int = 0, cell_width: int = 3
) -> StyleAndTextTuples:
    """Draw the borders of a grid as formatted text.

    Args:
        borders: The border records of the grid's cells
        rows: The number of rows to draw; if zero, enough to show every border
        cols: The number of columns to draw; if zero, enough to show every border
        cell_width: The number of characters between the vertical lines

    Returns:
        The grid as a list of style and text tuples

    """
    borders = list(borders)
    rows = rows or max((b.row + 1 for b in borders), default=0)
    cols = cols or max((b.col + 1 for b in borders), default=0)

    # Horizontal segments keyed by (grid line, column), vertical by (row, grid line)
    horizontal: dict[tuple[int, int], Segment] = {}
    vertical: dict[tuple[int, int], Segment] = {}
    corners: set[tuple[int, int]] = set()
    for border in borders:
        row, col = border.row, border.col
        if not (0 <= row < rows and 0 <= col < cols):
            continue
        _merge(horizontal, (row, col), border.top)
        _merge(horizontal, (row + 1, col), border.bottom)
        _merge(vertical, (row, col), border.left)
        _merge(vertical, (row, col + 1), border.right)
        if any(
            isinstance(edge := border.get_edge(e), EdgeStyle) and edge.corner_visible
            for e in Edge
        ):
            corners.add((row + 1, col + 1))

    output: StyleAndTextTuples = []
    for line in range(rows + 1):
        for node in range(cols + 1):
            north = vertical.get((line - 1, node), _NO_SEGMENT)
            east = horizontal.get((line, node), _NO_SEGMENT)
            south = vertical.get((line, node), _NO_SEGMENT)
            west = horizontal.get((line, node - 1), _NO_SEGMENT)
            style = next((s for ls, s in (north, east, south, west) if ls.visible), "")
            if (line, node) in corners:
                output.append((style, CORNER_CHAR))
            else:
                char = get_grid_char(GridChar(north[0], east[0], south[0], west[0]))
                output.append((style, char))
            if node < cols:
                ls, style = east
                char = get_grid_char(GridChar(NoLine, ls, NoLine, ls))
                output.append((style, char * cell_width))
        output.append(("", "\n"))

        if line < rows:
            for node in range(cols + 1):
                ls, style = vertical.get((line, node), _NO_SEGMENT)
                output.append((style, get_grid_char(GridChar(ls, NoLine, ls, NoLine))))
                if node < cols:
                    output.append(("", " " * cell_width))
            output.append(("", "\n"))

    return output


def load_borders(config: Config) -> Any:
    """Load the border configuration from a file or from the settings."""
    if (path := config.borders_file) is not None:
        log.info("Loading borders from `%s`", path)
        with open(path) as f:
            try:
                return json.load(f)
            except json.decoder.JSONDecodeError:
                log.error("Could not parse the border file: %s", path)
                return []
    return config.custom_borders


def launch(args: list[str] | None = None) -> None:
    """Draw the configured borders on the standard output."""
    from cellborders.core import _settings  # noqa: F401
    from cellborders.core.config import Config
    from cellborders.core.plugins import load_plugin, register_default_plugins

    config = Config(_help="Preview custom cell borders.")
    config.load(args)

    register_default_plugins()
    host = MemoryGridHost(config.rows, config.cols)
    plugin: CustomBorders = load_plugin("customBorders", host)
    plugin.update(load_borders(config))

    print_formatted_text(
        FormattedText(
            render_grid(plugin.borders, host.rows, host.cols, config.cell_width)
        ),
        end="",
    )
