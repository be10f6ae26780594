from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator

from ..core.exceptions import NotFoundError
from .service import ResourceHandler


class HandlerRegistry:
    """Static mapping from resource name to its handler."""

    def __init__(self, handlers: Iterable[ResourceHandler]):
        by_name: dict[str, ResourceHandler] = {}
        for h in handlers:
            if h.name in by_name:
                raise ValueError(f"Duplicate resource name: {h.name}")
            by_name[h.name] = h
        self._handlers = MappingProxyType(by_name)

    def get(self, name: str) -> ResourceHandler:
        handler = self._handlers.get(name)
        if handler is None:
            raise NotFoundError(f"Unknown resource: {name}")
        return handler

    def names(self) -> list[str]:
        return list(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[ResourceHandler]:
        return iter(self._handlers.values())
