"""Identifier providers for exported resources and nodes."""

from __future__ import annotations

import abc
import itertools
import threading
import uuid


class IdentifierProvider(abc.ABC):
    """Produces a fresh unique string on every call."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return an identifier not returned before by this provider."""


class UUIDProvider(IdentifierProvider):
    """Random RFC 4122 UUIDs; a new set on every export."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SequentialProvider(IdentifierProvider):
    """Deterministic, UUID-shaped identifiers counted from *start*.

    Useful for reproducible output and tests.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            value = next(self._counter)
        return str(uuid.UUID(int=value))
