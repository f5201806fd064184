"""
Pydantic schemas for Command records.

A command pairs a platform, a description of what it does ("how to")
and the command line itself.  Python attribute names are snake_case;
the JSON representation uses the camelCase names ``howTo`` and
``commandLine``.  Input payloads accept either spelling.
"""

from pydantic import BaseModel, ConfigDict, Field


class CommandBase(BaseModel):
    """Fields shared by every Command payload."""

    model_config = ConfigDict(populate_by_name=True)

    how_to: str = Field(..., alias="howTo", description="What the command does")
    platform: str = Field(..., description="Platform the command runs on")
    command_line: str = Field(..., alias="commandLine", description="The command line itself")


class CommandCreate(CommandBase):
    """Schema for creating a new command.

    An ``id`` supplied by the client is ignored; the store assigns one.
    """


class CommandUpdate(CommandBase):
    """Schema for replacing an existing command.

    The ``id`` must match the id in the request path.  All other fields
    overwrite the stored values.
    """

    id: int


class CommandRead(CommandBase):
    """Schema for reading a command."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, from_attributes=True)

    id: int
