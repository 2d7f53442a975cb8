"""Room lifecycle endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ..core.errors import ConflictError, NotFoundError, ValidationError
from ..schemas import rooms as schemas
from ..services.rooms import RoomRegistry, get_registry

logger = logging.getLogger(__name__)

router = APIRouter()

CLIENT_ERRORS = (ValidationError, NotFoundError, ConflictError)


def _join_url(request: Request, room_id: str) -> str:
    return f"{request.url.scheme}://{request.url.netloc}/room/{room_id}"


def _failure(error: str, exc: Exception | None = None) -> JSONResponse:
    content: dict[str, str] = {"error": error}
    if exc is not None:
        content["details"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.CreateRoomResponse)
async def create_room(
    payload: schemas.CreateRoomRequest,
    request: Request,
    registry: RoomRegistry = Depends(get_registry),
):
    """Create a room and return the host's access token."""

    try:
        room = await registry.create_room(payload.room_name or "", payload.host_name or "")
    except CLIENT_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001 - endpoint-specific failure body
        logger.exception("Error creating room: %s", exc)
        return _failure("Failed to create room", exc)

    return schemas.CreateRoomResponse(
        room=schemas.CreatedRoom(
            id=room.id,
            name=room.name,
            host=room.host,
            created_at=room.created_at,
            access_token=room.access_token,
            join_url=_join_url(request, room.id),
        )
    )


@router.get("", response_model=schemas.RoomListResponse)
async def list_rooms(registry: RoomRegistry = Depends(get_registry)):
    """List all rooms with participant counts."""

    try:
        summaries = await registry.list_rooms()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error listing rooms: %s", exc)
        return _failure("Failed to list rooms")

    return schemas.RoomListResponse(
        rooms=[
            schemas.RoomListItem(
                id=summary.id,
                name=summary.name,
                host=summary.host,
                created_at=summary.created_at,
                participant_count=summary.participant_count,
            )
            for summary in summaries
        ]
    )


@router.get("/{room_id}", response_model=schemas.RoomDetailResponse)
async def get_room(room_id: str, request: Request, registry: RoomRegistry = Depends(get_registry)):
    """Return room details including the roster."""

    try:
        room = await registry.get_room(room_id)
    except CLIENT_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error getting room: %s", exc)
        return _failure("Failed to get room information")

    return schemas.RoomDetailResponse(
        room=schemas.RoomDetail(
            id=room.id,
            name=room.name,
            host=room.host,
            created_at=room.created_at,
            participants=room.participants,
            join_url=_join_url(request, room.id),
        )
    )


@router.post("/{room_id}/join", response_model=schemas.JoinRoomResponse)
async def join_room(
    room_id: str,
    payload: schemas.JoinRoomRequest,
    registry: RoomRegistry = Depends(get_registry),
):
    """Issue a participant token and add them to the roster."""

    try:
        access_token, room = await registry.join_room(room_id, payload.participant_name or "")
    except CLIENT_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error joining room: %s", exc)
        return _failure("Failed to join room", exc)

    return schemas.JoinRoomResponse(
        access_token=access_token,
        room=schemas.RoomRoster(
            id=room.id,
            name=room.name,
            host=room.host,
            participants=room.participants,
        ),
    )


@router.delete("/{room_id}", response_model=schemas.DeleteRoomResponse)
async def delete_room(room_id: str, registry: RoomRegistry = Depends(get_registry)):
    """Remove a room unconditionally."""

    try:
        await registry.delete_room(room_id)
    except CLIENT_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error deleting room: %s", exc)
        return _failure("Failed to delete room")

    return schemas.DeleteRoomResponse()
