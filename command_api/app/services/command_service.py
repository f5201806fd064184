"""
Service layer for Command records.

``CommandService`` implements list, get, create, update and delete on
top of a :class:`CommandStore`.  Every operation returns a
:class:`CommandResult`: either a success carrying an optional value or
a failure tagged with a :class:`CommandError`.  The API layer maps
these onto HTTP status codes; the service itself knows nothing about
HTTP.

Two failures exist.  ``NOT_FOUND`` means no command has the given id.
``MISMATCH`` means an update's path id and body id disagree; it is
detected before the store is touched.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from command_api.app.schemas.command import CommandCreate, CommandRead, CommandUpdate
from command_api.app.services.command_store import CommandStore

T = TypeVar("T")


class CommandError(str, enum.Enum):
    """Client error kinds reported by :class:`CommandService`."""

    NOT_FOUND = "not_found"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class CommandResult(Generic[T]):
    """Outcome of a service operation."""

    value: Optional[T] = None
    error: Optional[CommandError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "CommandResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CommandError) -> "CommandResult[T]":
        return cls(error=error)


class CommandService:
    """CRUD operations over a command store."""

    def __init__(self, store: CommandStore) -> None:
        self.store = store
        self.logger = logging.getLogger(__name__)

    def list_commands(self) -> CommandResult[List[CommandRead]]:
        """Return every command, possibly an empty list."""
        return CommandResult.success(self.store.list())

    def get_command(self, command_id: int) -> CommandResult[CommandRead]:
        command = self.store.find(command_id)
        if command is None:
            return CommandResult.failure(CommandError.NOT_FOUND)
        return CommandResult.success(command)

    def create_command(self, data: CommandCreate) -> CommandResult[CommandRead]:
        """Store a new command and return it with its assigned id."""
        with self.store.transaction():
            command_id = self.store.add(data)
            command = self.store.find(command_id)
        self.logger.info("Created command %s", command_id)
        return CommandResult.success(command)

    def update_command(self, command_id: int, data: CommandUpdate) -> CommandResult[None]:
        """Replace all mutable fields of an existing command.

        The id in ``data`` must equal ``command_id``; otherwise the
        request is rejected with ``MISMATCH`` and the store is left
        alone.  A missing command yields ``NOT_FOUND``.
        """
        if data.id != command_id:
            self.logger.warning(
                "Rejected update of command %s: body id is %s", command_id, data.id
            )
            return CommandResult.failure(CommandError.MISMATCH)

        with self.store.transaction():
            if not self.store.replace(command_id, data):
                self.logger.warning("Cannot update command %s: not found", command_id)
                return CommandResult.failure(CommandError.NOT_FOUND)
        self.logger.info("Updated command %s", command_id)
        return CommandResult.success()

    def delete_command(self, command_id: int) -> CommandResult[CommandRead]:
        """Delete a command and return the record that was removed."""
        with self.store.transaction():
            command = self.store.find(command_id)
            if command is None:
                self.logger.warning("Cannot delete command %s: not found", command_id)
                return CommandResult.failure(CommandError.NOT_FOUND)
            self.store.remove(command_id)
        self.logger.info("Deleted command %s", command_id)
        return CommandResult.success(command)
