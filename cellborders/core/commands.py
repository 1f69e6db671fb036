"""Define menu commands and the registry they are looked up from."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from prompt_toolkit.filters import to_filter

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from prompt_toolkit.filters import Filter, FilterOrBool

    CommandHandler = Callable[[], Any]

log = logging.getLogger(__name__)


class Command:
    """An action a menu can offer on the current selection."""

    def __init__(
        self,
        handler: CommandHandler,
        *,
        name: str,
        title: str,
        menu_title: str | None = None,
        description: str = "",
        filter: FilterOrBool = True,
        toggled: Filter | None = None,
    ) -> None:
        """Create a new command.

        Args:
            handler: The callable run by the command
            name: The name the command is registered under
            title: The title of the command for display
            menu_title: A shorter title for menus
            description: A sentence explaining what the command does
            filter: When the command is available
            toggled: For commands which switch something on and off, whether it is
                currently on

        """
        self.handler = handler
        self.name = name
        self.title = title
        self.menu_title = menu_title or title
        self.description = description
        self.filter = to_filter(filter)
        self.toggled = toggled

    def run(self) -> bool:
        """Run the handler if the command is available.

        Returns:
            :py:const:`True` if the handler was run

        """
        if not self.filter():
            log.debug("Command `%s` is not available", self.name)
            return False
        log.debug("Running command `%s`", self.name)
        self.handler()
        return True

    def __repr__(self) -> str:
        """Represent the command as a string."""
        return f"<Command {self.name}>"


commands: dict[str, Command] = {}


def get_cmd(name: str) -> Command:
    """Get a registered command by name.

    Raises:
        KeyError: Raised if the named command is not registered

    """
    try:
        return commands[name]
    except KeyError as e:
        raise KeyError(f"Unknown command: {name}") from e
