"""Defines core settings."""

import json
from pathlib import Path

from cellborders.core.config import add_setting
from cellborders.core.normalize import BORDER_ENTRY_SCHEMA

# cellborders.core.log

add_setting(
    name="log_file",
    default="",
    type_=str,
    help_="File path for logs",
    description="""
        When set to a file path, the log output will be written to the given path
        instead of the standard error.
    """,
)

add_setting(
    name="log_level",
    default="warning",
    type_=str,
    choices=["debug", "info", "warning", "error", "critical"],
    help_="Set the log level",
)

# cellborders.core.plugin

add_setting(
    name="custom_borders",
    default=[],
    type_=json.loads,
    schema={"type": ["array", "boolean"], "items": BORDER_ENTRY_SCHEMA},
    help_="Custom cell borders",
    description="""
        A JSON list of border entries. Each entry is either a single cell, given by
        its ``row`` and ``col``, or a ``range`` with ``from`` and ``to`` cells, along
        with any of ``top``, ``right``, ``bottom`` and ``left`` edge styles.

        An edge style is an object with optional ``width``, ``color`` and
        ``cornerVisible`` keys; an empty string or empty object hides the edge.
    """,
)

# cellborders.core.preview

add_setting(
    name="borders_file",
    flags=["borders_file"],
    nargs="?",
    type_=Path,
    schema={"type": ["string", "null"]},
    help_="JSON file containing custom borders",
    description="""
        When given, border entries are read from this file instead of the
        ``custom_borders`` setting.
    """,
)

add_setting(
    name="rows",
    default=0,
    schema={"minimum": 0},
    help_="Number of rows to draw (enough for every border if zero)",
)

add_setting(
    name="cols",
    default=0,
    schema={"minimum": 0},
    help_="Number of columns to draw (enough for every border if zero)",
)

add_setting(
    name="cell_width",
    default=3,
    schema={"minimum": 1},
    help_="Number of characters between the vertical borders of each cell",
)
