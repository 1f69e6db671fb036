"""Turn border configuration entries into committed border records."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

import fastjsonschema

from cellborders.core.data_structures import CellRange
from cellborders.core.expand import expand_range

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

    from cellborders.core.mutator import BorderMutator

log = logging.getLogger(__name__)

_COORD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "row": {"type": "integer"},
        "col": {"type": "integer"},
    },
    "required": ["row", "col"],
}

EDGE_SCHEMA: dict[str, Any] = {
    "description": "An edge style, or an empty value to hide the edge",
    "anyOf": [
        {"type": "null"},
        {"type": "string"},
        {
            "type": "object",
            "properties": {
                "width": {"type": "integer", "minimum": 1},
                "color": {"type": "string"},
                "cornerVisible": {"type": "boolean"},
                "hide": {"type": "boolean"},
            },
        },
    ],
}

BORDER_ENTRY_SCHEMA: dict[str, Any] = {
    "description": "A single cell or a range of cells with per-edge border styles",
    "type": "object",
    "properties": {
        "row": {"type": "integer"},
        "col": {"type": "integer"},
        "range": {
            "type": "object",
            "properties": {"from": _COORD_SCHEMA, "to": _COORD_SCHEMA},
            "required": ["from", "to"],
        },
        "top": EDGE_SCHEMA,
        "right": EDGE_SCHEMA,
        "bottom": EDGE_SCHEMA,
        "left": EDGE_SCHEMA,
    },
    "anyOf": [{"required": ["range"]}, {"required": ["row", "col"]}],
}

_validate_entry = fastjsonschema.compile(BORDER_ENTRY_SCHEMA)


class BorderSpecNormalizer:
    """Apply border configuration entries through a :py:class:`BorderMutator`."""

    def __init__(self, mutator: BorderMutator) -> None:
        """Create a new normalizer which commits records using ``mutator``."""
        self.mutator = mutator

    def apply(self, entries: Iterable[Mapping[str, Any]]) -> None:
        """Apply a list of configuration entries in order."""
        for index, entry in enumerate(entries):
            self.apply_entry(entry, index=index)

    def apply_entry(self, entry: Mapping[str, Any], index: int | None = None) -> None:
        """Apply a single configuration entry.

        Entries which do not match the border entry schema are logged and skipped.

        Args:
            entry: A range spec (with a ``range`` key) or a single-cell spec (with
                ``row`` and ``col`` keys)
            index: The position of the entry in its configuration list, for logging

        """
        data = dict(entry) if isinstance(entry, Mapping) else entry
        if isinstance(data, dict) and isinstance(data.get("range"), CellRange):
            data["range"] = data["range"].to_dict()
        try:
            _validate_entry(data)
        except fastjsonschema.JsonSchemaValueException as error:
            log.warning(
                "Skipping invalid border entry%s: %r\n%s",
                "" if index is None else f" #{index}",
                entry,
                error.message.replace("data.", ""),
            )
            return

        if "range" in data:
            for record in expand_range(data, self.mutator.get_record):
                self.mutator.commit(record)
        else:
            record = self.mutator.get_record(data["row"], data["col"])
            record.update(data)
            self.mutator.commit(record)
