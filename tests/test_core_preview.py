"""Tests for drawing bordered grids as text."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import Mock

from prompt_toolkit.formatted_text.utils import fragment_list_to_text

from cellborders.core.edges import DEFAULT_EDGE_STYLE, CellBorder, EdgeStyle
from cellborders.core.preview import edge_style_str, load_borders, render_grid

if TYPE_CHECKING:
    from pathlib import Path


def test_edge_style_str() -> None:
    """Edge colours become foreground styles when they can be displayed."""
    assert edge_style_str(EdgeStyle(color="red")) == "fg:red"
    assert edge_style_str(EdgeStyle(color="#ff0000")) == "fg:#ff0000"
    assert edge_style_str(EdgeStyle(color="rgb(1, 2, 3)")) == ""


def test_render_boxed_cell() -> None:
    """A cell with four edges is drawn as a box."""
    border = CellBorder(
        0,
        0,
        top=DEFAULT_EDGE_STYLE,
        right=DEFAULT_EDGE_STYLE,
        bottom=DEFAULT_EDGE_STYLE,
        left=DEFAULT_EDGE_STYLE,
    )
    text = fragment_list_to_text(render_grid([border]))
    assert text == "┌───┐\n│   │\n└───┘\n"


def test_render_cell_width() -> None:
    """Cells are drawn at the requested width."""
    border = CellBorder(0, 0, top=DEFAULT_EDGE_STYLE)
    text = fragment_list_to_text(render_grid([border], cell_width=5))
    assert text.splitlines()[0] == "╶─────╴"


def test_render_shared_edges() -> None:
    """Adjoining cells share the heaviest of their touching edges."""
    borders = [
        CellBorder(0, 0, right=EdgeStyle(width=1)),
        CellBorder(0, 1, left=EdgeStyle(width=2)),
    ]
    text = fragment_list_to_text(render_grid(borders))
    assert text.splitlines()[1] == "    ┃    "


def test_render_empty_grid() -> None:
    """Grids without borders are blank."""
    text = fragment_list_to_text(render_grid([], rows=2, cols=2))
    lines = text.splitlines()
    assert len(lines) == 5
    assert all(line == " " * 9 for line in lines)


def test_render_skips_cells_outside_grid() -> None:
    """Borders of cells beyond the drawn grid are not drawn."""
    border = CellBorder(5, 5, top=DEFAULT_EDGE_STYLE)
    text = fragment_list_to_text(render_grid([border], rows=1, cols=1))
    assert not text.strip()


def test_render_corner() -> None:
    """Visible corners are marked at the cell's bottom-right."""
    border = CellBorder(0, 0, bottom=EdgeStyle(corner_visible=True))
    text = fragment_list_to_text(render_grid([border]))
    assert text.splitlines()[-1] == "╶───■"


def test_render_colors() -> None:
    """Edges are drawn in their colours."""
    border = CellBorder(0, 0, left=EdgeStyle(color="red"))
    fragments = render_grid([border])
    assert ("fg:red", "│") in fragments

    border = CellBorder(0, 0, left=EdgeStyle(color="not-a-colour"))
    fragments = render_grid([border])
    assert all(style == "" for style, *_ in fragments)


def test_load_borders_from_file(tmp_path: Path) -> None:
    """Borders are loaded from a file in preference to the settings."""
    path = tmp_path / "borders.json"
    path.write_text(json.dumps([{"row": 0, "col": 0, "top": {}}]))
    config = Mock(borders_file=path, custom_borders=[])
    assert load_borders(config) == [{"row": 0, "col": 0, "top": {}}]

    path.write_text("not json")
    assert load_borders(config) == []

    config = Mock(borders_file=None, custom_borders=[{"row": 1, "col": 1}])
    assert load_borders(config) == [{"row": 1, "col": 1}]
