"""Contain a registry of the cells which currently have border decorations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cellborders.core.edges import CellBorder

log = logging.getLogger(__name__)


class BorderRegistry:
    """An ordered collection of border records, unique by class name."""

    def __init__(self) -> None:
        """Create a new empty registry."""
        self._records: dict[str, CellBorder] = {}

    def insert(self, record: CellBorder) -> None:
        """Add a record to the registry.

        If a record with the same class name is already present, the existing record
        is kept and the new one is discarded.

        Args:
            record: The border record to add

        """
        existing = self._records.setdefault(record.class_name, record)
        if existing is not record:
            log.debug("Keeping existing record for `%s`", record.class_name)

    def remove(self, class_name: str) -> None:
        """Remove the record with the given class name if there is one."""
        self._records.pop(class_name, None)

    def clear(self) -> None:
        """Remove all records."""
        self._records.clear()

    def get(self, class_name: str) -> CellBorder | None:
        """Return the record with the given class name if there is one."""
        return self._records.get(class_name)

    def class_names(self) -> list[str]:
        """List the class names of the registered records in order."""
        return list(self._records)

    def __contains__(self, class_name: object) -> bool:
        """Determine if a record with the given class name is registered."""
        return class_name in self._records

    def __iter__(self) -> Iterator[CellBorder]:
        """Iterate over a snapshot of the registered records."""
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        """Return the number of registered records."""
        return len(self._records)

    def __repr__(self) -> str:
        """Represent the registry as a string."""
        return f"{self.__class__.__name__}({self.class_names()!r})"
