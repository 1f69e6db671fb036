"""Tests for the custom borders plugin."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from cellborders.core.commands import commands, get_cmd
from cellborders.core.data_structures import CellCoord, SelectionRange
from cellborders.core.edges import DEFAULT_EDGE_STYLE, CellBorder, EdgeStyle, Hidden
from cellborders.core.enums import Placement
from cellborders.core.host import BORDERS_KEY, MemoryGridHost
from cellborders.core.plugin import CustomBorders

EXAMPLE_BORDERS = [
    {
        "range": {"from": {"row": 1, "col": 1}, "to": {"row": 3, "col": 4}},
        "left": {},
        "right": {},
        "top": {},
        "bottom": {},
    },
    {
        "row": 2,
        "col": 2,
        "left": {"width": 2, "color": "red"},
        "right": {"width": 1, "color": "green"},
        "top": "",
        "bottom": "",
    },
]


@pytest.fixture
def host() -> MemoryGridHost:
    """In-memory grid fixture."""
    return MemoryGridHost(6, 6)


@pytest.fixture
def plugin(host: MemoryGridHost) -> CustomBorders:
    """Custom borders plugin fixture."""
    return CustomBorders(host)


def test_is_enabled() -> None:
    """Any list, even an empty one, enables the plugin."""
    host = MemoryGridHost()
    assert CustomBorders(host, []).is_enabled()
    assert CustomBorders(host, [{"row": 0, "col": 0}]).is_enabled()
    assert CustomBorders(host, True).is_enabled()
    assert not CustomBorders(host, False).is_enabled()
    assert not CustomBorders(host).is_enabled()


def test_update_creates_borders(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """Configured borders are applied to the grid."""
    plugin.update(EXAMPLE_BORDERS)
    assert plugin.enabled
    assert len(plugin.borders) == 11
    assert len(host.highlights) == 11

    border = host.meta.get(2, 2, BORDERS_KEY)
    assert border.left == EdgeStyle(width=2, color="red")
    assert border.right == EdgeStyle(width=1, color="green")
    assert border.top is Hidden
    assert border.bottom is Hidden

    assert host.meta.get(2, 3, BORDERS_KEY) is None


def test_update_renders(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """The grid is asked to render after an update."""
    handler = Mock()
    host.on_render += handler
    plugin.update([{"row": 0, "col": 0, "top": {}}])
    handler.assert_called_with(host)


def test_update_adds_to_previous_borders(
    host: MemoryGridHost, plugin: CustomBorders
) -> None:
    """A new border list adds to the borders which already exist."""
    plugin.update([{"row": 0, "col": 0, "top": {"width": 2}}])
    plugin.update([{"row": 1, "col": 1, "left": {"width": 2}}])
    assert [x.class_name for x in plugin.borders] == [
        "border_row0col0",
        "border_row1col1",
    ]
    assert host.meta.get(0, 0, BORDERS_KEY).top == EdgeStyle(width=2)
    assert sorted(x.class_name for x in host.highlights) == [
        "border_row0col0",
        "border_row1col1",
    ]


def test_update_keeps_interactive_edits(
    host: MemoryGridHost, plugin: CustomBorders
) -> None:
    """Edges set from the menu survive an update, which can change them."""
    plugin.update([])
    plugin.set_edge(2, 2, "bottom")
    plugin.set_edge(3, 3, "top")
    plugin.update([{"row": 2, "col": 2, "top": {"width": 2}}])

    border = host.meta.get(2, 2, BORDERS_KEY)
    assert border.top == EdgeStyle(width=2)
    assert border.bottom == DEFAULT_EDGE_STYLE
    assert host.meta.get(3, 3, BORDERS_KEY).top == DEFAULT_EDGE_STYLE
    assert sorted(x.class_name for x in plugin.borders) == [
        "border_row2col2",
        "border_row3col3",
    ]
    assert len(host.highlights) == 2


def test_update_renders_once(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """Each update asks the grid to render only once."""
    handler = Mock()
    host.on_render += handler
    plugin.update(EXAMPLE_BORDERS)
    assert handler.call_count == 1

    handler.reset_mock()
    plugin.update([])
    assert handler.call_count == 1

    handler.reset_mock()
    plugin.destroy()
    assert handler.call_count == 1


def test_update_empty_list_forgets(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """An empty border list clears and forgets every border."""
    plugin.update(EXAMPLE_BORDERS)
    plugin.update([])
    assert plugin.enabled
    assert plugin.borders == []
    assert len(host.highlights) == 0
    assert host.meta.get(1, 1, BORDERS_KEY) is None

    # Nothing is left to replay
    plugin.update(True)
    assert plugin.borders == []


def test_disable_and_replay(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """Disabling hides borders, and a truthy value replays them."""
    plugin.update(EXAMPLE_BORDERS)
    plugin.update(False)
    assert not plugin.enabled
    assert len(host.highlights) == 0
    assert len(plugin.borders) == 11

    plugin.update(True)
    assert plugin.enabled
    assert len(host.highlights) == 11
    border = host.meta.get(2, 2, BORDERS_KEY)
    assert border.left == EdgeStyle(width=2, color="red")


def test_update_without_value_reapplies(plugin: CustomBorders) -> None:
    """Updating without a value re-applies the current settings."""
    plugin.custom_borders = [{"row": 0, "col": 0, "top": {}}]
    plugin.update()
    assert [x.class_name for x in plugin.borders] == ["border_row0col0"]


def test_set_edge_and_clear_cell(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """Single edges can be set and cells cleared."""
    plugin.update([])
    plugin.set_edge(3, 3, "bottom")
    border = host.meta.get(3, 3, BORDERS_KEY)
    assert isinstance(border, CellBorder)
    assert border.bottom == DEFAULT_EDGE_STYLE
    plugin.clear_cell(3, 3)
    assert host.meta.get(3, 3, BORDERS_KEY) is None
    assert plugin.borders == []


def test_commands(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """Menu commands toggle borders on the current selection."""
    plugin.update([])
    host.select(((0, 0), (1, 2)))
    top = plugin.commands[Placement.TOP]
    none = plugin.commands[Placement.NO_BORDERS]

    assert top.name == "borders-top"
    assert top.menu_title == "Top"
    assert none.name == "borders-none"
    assert none.menu_title == "Remove border(s)"

    assert top.filter()
    assert not top.toggled()
    assert not none.filter()

    assert top.run()
    assert len(plugin.borders) == 3
    assert top.toggled()
    assert none.filter()

    # Running again removes the border
    assert top.run()
    assert not top.toggled()
    assert all(x.top is Hidden for x in plugin.borders)

    plugin.commands[Placement.LEFT].run()
    assert none.run()
    assert plugin.borders == []


def test_commands_unavailable(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """Menu commands are not available when disabled or selected by corner."""
    host.select(SelectionRange(CellCoord(0, 0), CellCoord(0, 0)))
    command = plugin.commands[Placement.RIGHT]
    assert not command.filter()
    assert not command.run()

    plugin.update([])
    assert command.filter()
    host.selected_by_corner = True
    assert not command.filter()
    host.selected_by_corner = False
    assert command.run()
    assert len(plugin.borders) == 1


def test_register_commands(plugin: CustomBorders) -> None:
    """The plugin's commands can be added to the command registry."""
    plugin.register_commands()
    try:
        assert get_cmd("borders-left") is plugin.commands[Placement.LEFT]
        assert get_cmd("borders-none") is plugin.commands[Placement.NO_BORDERS]
    finally:
        for command in plugin.commands.values():
            commands.pop(command.name, None)


def test_destroy(host: MemoryGridHost, plugin: CustomBorders) -> None:
    """Destroying the plugin removes every border."""
    plugin.update(EXAMPLE_BORDERS)
    plugin.destroy()
    assert not plugin.enabled
    assert plugin.borders == []
    assert len(host.highlights) == 0
