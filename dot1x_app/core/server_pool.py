"""Ordered RADIUS, RadSec and TACACS+ server pools.

Position in a list is priority: the entry at index 1 is the primary
server. Indices are 1-based and kept contiguous, so removing an entry
renumbers everything after it and the form field identifiers follow.
"""

import logging
import threading
from typing import Any, Iterator

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from dot1x_app.core.exceptions import ProtectedEntryError, ServerNotFoundError
from dot1x_app.schemas.servers import (
    SERVER_TYPES,
    RadiusServer,
    RadSecServer,
    ServerEntry,
    ServerKind,
    TacacsServer,
)

logger = logging.getLogger(__name__)

# Kinds whose primary entry may not be removed while it is the only one
PROTECTED_KINDS = (ServerKind.RADIUS, ServerKind.RADSEC)


class ConfiguredServers:
    """Restartable view over the configured entries of one pool list.

    Iterating twice yields the same entries; the view reads the live list,
    so later pool mutations are visible.
    """

    def __init__(self, entries: list[ServerEntry]):
        self._entries = entries

    def __iter__(self) -> Iterator[ServerEntry]:
        return (entry for entry in self._entries if entry.is_configured)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def first(self) -> ServerEntry | None:
        return next(iter(self), None)


class ServerPool(BaseModel):
    """Per-session server lists."""

    radius: list[RadiusServer] = Field(default_factory=list, description="RADIUS servers in priority order")
    radsec: list[RadSecServer] = Field(default_factory=list, description="RadSec servers in priority order")
    tacacs: list[TacacsServer] = Field(default_factory=list, description="TACACS+ servers in priority order")

    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    @model_validator(mode="after")
    def renumber_all(self) -> "ServerPool":
        """Indices supplied by a caller are replaced by list positions."""
        for kind in ServerKind:
            self._renumber(kind)
        return self

    @classmethod
    def with_primary(cls) -> "ServerPool":
        """New pool holding one empty primary RADIUS entry, as a fresh form does."""
        return cls(radius=[RadiusServer()])

    def entries(self, kind: ServerKind | str) -> list[ServerEntry]:
        return getattr(self, ServerKind(kind).value)

    def _renumber(self, kind: ServerKind) -> None:
        for position, entry in enumerate(self.entries(kind), start=1):
            entry.index = position

    def _position(self, kind: ServerKind, index: int) -> int:
        entries = self.entries(kind)
        if index < 1 or index > len(entries):
            raise ServerNotFoundError(kind.value, index)
        return index - 1

    def add_server(self, kind: ServerKind | str, /, **fields) -> int:
        """Append an entry with default values and return its index."""
        kind = ServerKind(kind)
        with self._lock:
            entries = self.entries(kind)
            entry = SERVER_TYPES[kind].model_validate({**fields, "index": len(entries) + 1})
            entries.append(entry)
            logger.debug(f"Added {kind.value} server {entry.index}")
            return entry.index

    def get_server(self, kind: ServerKind | str, index: int) -> ServerEntry:
        kind = ServerKind(kind)
        with self._lock:
            return self.entries(kind)[self._position(kind, index)]

    def update_server(self, kind: ServerKind | str, index: int, /, **fields) -> ServerEntry:
        """Replace the given fields of an entry, validating the result.

        The entry keeps its position; an ``index`` among ``fields`` is ignored.
        """
        kind = ServerKind(kind)
        with self._lock:
            entries = self.entries(kind)
            position = self._position(kind, index)
            current = entries[position]
            updated = type(current).model_validate({
                **current.model_dump(),
                **fields,
                "index": current.index,
            })
            entries[position] = updated
            logger.debug(f"Updated {kind.value} server {index}: {sorted(fields)}")
            return updated

    def remove_server(self, kind: ServerKind | str, index: int) -> ServerEntry:
        """Remove an entry and renumber the entries after it.

        Raises:
            ServerNotFoundError: No entry at ``index``
            ProtectedEntryError: ``index`` is the sole RADIUS or RadSec entry
        """
        kind = ServerKind(kind)
        with self._lock:
            entries = self.entries(kind)
            position = self._position(kind, index)
            if kind in PROTECTED_KINDS and index == 1 and len(entries) == 1:
                raise ProtectedEntryError(kind.value)
            removed = entries.pop(position)
            self._renumber(kind)
            logger.debug(f"Removed {kind.value} server {index}, {len(entries)} remaining")
            return removed

    def list_configured(self, kind: ServerKind | str) -> ConfiguredServers:
        return ConfiguredServers(self.entries(kind))

    def has_auth_servers(self) -> bool:
        """True when at least one RADIUS or RadSec server is configured."""
        return bool(self.list_configured(ServerKind.RADIUS)) or bool(
            self.list_configured(ServerKind.RADSEC)
        )
