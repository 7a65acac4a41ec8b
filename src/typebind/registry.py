"""Type-indexed storage for registered values."""

import logging
import threading
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Iterator, Mapping

__all__ = ["Registry"]

logger = logging.getLogger(__name__)


class Registry:
    """Registry of values indexed by their exact runtime type.

    Only one value is held per type: registering a second value of the same type
    replaces the first. A single lock guards both registration and reads, so a
    reader holding :meth:`entries` sees a consistent set of values.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: dict[type, Any] = {}

    def add(self, *values: Any) -> "Registry":
        """Register values by type.

        Args:
            values: The values to register. ``None`` values are ignored.

        Returns:
            This registry, so that calls can be chained.
        """
        with self._lock:
            for value in values:
                if value is None:
                    logger.debug("Ignoring None value")
                    continue

                value_type = type(value)
                if value_type in self._entries:
                    logger.debug("Replacing registered value of type %s", value_type.__qualname__)
                else:
                    logger.debug("Registered value of type %s", value_type.__qualname__)
                self._entries[value_type] = value

        return self

    @contextmanager
    def entries(self) -> Iterator[Mapping[type, Any]]:
        """Hold the registry lock and yield a read-only view of the entries.

        Registration blocks until the ``with`` block exits, so callers must not
        register values (or run arbitrary user code) while holding the view.
        """
        with self._lock:
            yield MappingProxyType(self._entries)
