"""Allow custom borders to be applied to the cells of a grid.

To initialize a grid with predefined custom borders, provide cell coordinates and
border styles in the form of a list:

.. code-block:: python

   custom_borders = [
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

"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from prompt_toolkit.filters import Condition

from cellborders.core.commands import Command, commands
from cellborders.core.enums import Placement
from cellborders.core.mutator import BorderMutator
from cellborders.core.normalize import BorderSpecNormalizer
from cellborders.core.registry import BorderRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from typing import Any

    from cellborders.core.data_structures import SelectionRange
    from cellborders.core.edges import CellBorder
    from cellborders.core.host import GridHost

log = logging.getLogger(__name__)

_MENU_TITLES = {
    Placement.TOP: "Top",
    Placement.RIGHT: "Right",
    Placement.BOTTOM: "Bottom",
    Placement.LEFT: "Left",
    Placement.NO_BORDERS: "Remove border(s)",
}


class CustomBorders:
    """Apply custom borders from settings and from user selections."""

    def __init__(self, host: GridHost, custom_borders: Any = None) -> None:
        """Create a new custom borders plugin instance for a grid.

        Args:
            host: The grid to decorate
            custom_borders: The initial border configuration

        """
        self.host = host
        self.custom_borders = custom_borders
        self.enabled = False
        self.registry = BorderRegistry()
        self.mutator = BorderMutator(host, self.registry)
        self.normalizer = BorderSpecNormalizer(self.mutator)

        self.menu_available = Condition(
            lambda: self.enabled and not self.host.is_selected_by_corner()
        )
        self.commands = {
            placement: self._create_command(placement) for placement in Placement
        }

    def is_enabled(self) -> bool:
        """Check if custom borders are turned on in the settings."""
        return isinstance(self.custom_borders, list) or bool(self.custom_borders)

    def enable(self) -> None:
        """Enable the plugin."""
        if self.enabled:
            return
        self.enabled = True
        log.debug("Custom borders enabled")

    def disable(self) -> None:
        """Disable the plugin, removing all border decorations from the grid.

        The registry and cell metadata are kept so the borders can be replayed.
        """
        self.mutator.remove_highlights()
        if self.enabled:
            self.enabled = False
            log.debug("Custom borders disabled")

    def update(self, custom_borders: Any = None) -> None:
        """Update the plugin to use the latest border settings.

        Args:
            custom_borders: A list of border configuration entries, which are added
                to the existing borders. An empty list forgets all existing borders,
                while any other truthy value re-applies the last known borders. Other
                falsy values disable the plugin. If not given, the current settings
                are re-applied.

        """
        if custom_borders is not None:
            self.custom_borders = custom_borders
        self.disable()
        if self.is_enabled():
            self.enable()
            self.change_border_settings()
        self.mutator.render()

    def change_border_settings(self) -> None:
        """Apply the current border settings to the grid."""
        custom_borders = self.custom_borders
        if isinstance(custom_borders, list):
            if custom_borders:
                # Existing borders stay, and entries for their cells update them
                self.replay()
            else:
                self.clear_borders()
            self.create_custom_borders(custom_borders)
        elif custom_borders:
            self.replay()

    def create_custom_borders(
        self, custom_borders: Sequence[Mapping[str, Any]]
    ) -> None:
        """Create borders from a list of configuration entries."""
        self.normalizer.apply(custom_borders)
        log.debug("%d cells have custom borders", len(self.registry))

    def replay(self) -> None:
        """Re-apply the last known borders."""
        for record in self.registry:
            self.mutator.commit(record)

    def clear_borders(self) -> None:
        """Remove and forget every border."""
        for record in self.registry:
            self.mutator.clear_cell(record.row, record.col, render=False)

    @property
    def borders(self) -> list[CellBorder]:
        """The records of the cells which currently have borders."""
        return list(self.registry)

    def set_edge(self, row: int, col: int, edge: str, hide: bool = False) -> None:
        """Show or hide one edge of a cell."""
        self.mutator.set_edge(row, col, edge, hide)

    def clear_cell(self, row: int, col: int) -> None:
        """Remove every border from a cell."""
        self.mutator.clear_cell(row, col)

    def apply_to_selection(
        self,
        selection: Sequence[SelectionRange],
        placement: Placement | str,
        hide: bool = False,
    ) -> None:
        """Add or remove borders on each rectangle of a selection."""
        self.mutator.apply_to_selection(selection, placement, hide)

    def _toggle_placement(self, placement: Placement) -> None:
        """Toggle a border placement on the current selection."""
        selection = self.host.selected_ranges()
        if placement is Placement.NO_BORDERS:
            hide = True
        else:
            hide = self.mutator.selection_has_border(selection, placement.edge)
        self.apply_to_selection(selection, placement, hide)

    def _create_command(self, placement: Placement) -> Command:
        """Create the menu command for a border placement."""
        title = _MENU_TITLES[placement]
        if placement is Placement.NO_BORDERS:
            name = "borders-none"
            toggled = None
            cmd_filter = self.menu_available & Condition(
                lambda: self.mutator.selection_has_border(self.host.selected_ranges())
            )
            description = "Remove all borders from the selected cells."
        else:
            name = f"borders-{placement.value}"
            toggled = Condition(
                partial(
                    lambda edge: self.mutator.selection_has_border(
                        self.host.selected_ranges(), edge
                    ),
                    placement.edge,
                )
            )
            cmd_filter = self.menu_available
            description = f"Toggle the {placement.value} border of the selected cells."
        return Command(
            partial(self._toggle_placement, placement),
            name=name,
            title=f"Border: {title}",
            menu_title=title,
            description=description,
            filter=cmd_filter,
            toggled=toggled,
        )

    def register_commands(self) -> None:
        """Add the border menu commands to the command registry."""
        for command in self.commands.values():
            commands[command.name] = command

    def destroy(self) -> None:
        """Remove all borders and release the grid."""
        self.clear_borders()
        self.enabled = False
        self.mutator.render()
