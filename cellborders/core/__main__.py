"""Main entry point into cellborders.core."""

from __future__ import annotations

from functools import cache
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from importlib.metadata import EntryPoint


@cache
def available_apps() -> dict[str, EntryPoint]:
    """Return a list of loadable cellborders apps."""
    points = entry_points(group="cellborders.apps")
    return {x.name: x for x in points}


def main(name: str = "preview") -> None:
    """Load and launches the application."""
    apps = available_apps()
    if entry := apps.get(name):
        return entry.load().launch()
    else:
        raise ModuleNotFoundError(f"Cellborders app `{name}` not installed")


if __name__ == "__main__":
    main()
