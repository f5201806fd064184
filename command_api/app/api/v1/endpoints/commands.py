"""
Command endpoints for API v1.

These routes expose the CRUD API for command records.  Handlers call
:class:`CommandService` and translate its error kinds into HTTP
responses: ``NOT_FOUND`` becomes 404 and ``MISMATCH`` becomes 400.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from command_api.app.schemas.command import CommandCreate, CommandRead, CommandUpdate
from command_api.app.services.command_service import (
    CommandError,
    CommandResult,
    CommandService,
)

router = APIRouter()

_ERROR_RESPONSES = {
    CommandError.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Command not found"),
    CommandError.MISMATCH: (
        status.HTTP_400_BAD_REQUEST,
        "Command id in path does not match id in body",
    ),
}


def get_command_service(request: Request) -> CommandService:
    """Return the service attached to the application by ``create_app``."""
    return request.app.state.command_service


def _raise_for_error(result: CommandResult) -> None:
    if result.error is not None:
        status_code, detail = _ERROR_RESPONSES[result.error]
        raise HTTPException(status_code=status_code, detail=detail)


@router.get("", response_model=List[CommandRead])
def list_commands(
    service: CommandService = Depends(get_command_service),
) -> List[CommandRead]:
    """Return all commands in insertion order."""
    return service.list_commands().value


@router.get("/{command_id}", response_model=CommandRead)
def get_command(
    command_id: int,
    service: CommandService = Depends(get_command_service),
) -> CommandRead:
    """Retrieve a single command by ID.

    Returns HTTP 404 if the command is not found.
    """
    result = service.get_command(command_id)
    _raise_for_error(result)
    return result.value


@router.post("", response_model=CommandRead, status_code=status.HTTP_201_CREATED)
def create_command(
    command_in: CommandCreate,
    request: Request,
    response: Response,
    service: CommandService = Depends(get_command_service),
) -> CommandRead:
    """Create a new command.

    The response carries a ``Location`` header pointing at the new
    resource.
    """
    command = service.create_command(command_in).value
    response.headers["Location"] = str(request.url_for("get_command", command_id=command.id))
    return command


@router.put("/{command_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_command(
    command_id: int,
    command_in: CommandUpdate,
    service: CommandService = Depends(get_command_service),
) -> Response:
    """Replace an existing command.

    Returns 400 if the body id differs from ``command_id`` and 404 if
    the command does not exist.
    """
    _raise_for_error(service.update_command(command_id, command_in))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{command_id}", response_model=CommandRead)
def delete_command(
    command_id: int,
    service: CommandService = Depends(get_command_service),
) -> CommandRead:
    """Delete a command and return the removed record."""
    result = service.delete_command(command_id)
    _raise_for_error(result)
    return result.value
