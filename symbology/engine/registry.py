"""Dispatch tables: every drawing rule is a standalone function registered via decorator.

Usage:
    fill_styles = DispatchTable("fill style")

    @fill_styles.register("esriSFSNull")
    def null_fill(surface, colour, stroke):
        return "transparent"

Looking up a key that was never registered raises ``UnsupportedTypeError``;
callers catch it, log it and degrade to an empty icon.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from symbology.exceptions import UnsupportedTypeError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


class DispatchTable(Generic[F]):
    """Registry of functions keyed by a wire-format type or style string."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: dict[str, F] = {}

    def add(self, key: str, fn: F) -> None:
        if key in self._entries:
            raise ValueError(f"Duplicate {self.kind} key: {key}")
        self._entries[key] = fn
        logger.debug("Registered %s %s", self.kind, key)

    def register(self, *keys: str) -> Callable[[F], F]:
        """Decorator registering ``fn`` under one or more keys."""

        def decorator(fn: F) -> F:
            for key in keys:
                self.add(key, fn)
            return fn

        return decorator

    def get(self, key: str | None) -> F:
        if key is None or key not in self._entries:
            raise UnsupportedTypeError(self.kind, key)
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def keys(self) -> Iterable[str]:
        return sorted(self._entries)

    @property
    def count(self) -> int:
        return len(self._entries)
