"""Data contracts for room endpoints.

Field names are snake_case in Python and camelCase on the wire."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


def isoformat(value: datetime) -> str:
    """Render a UTC timestamp with millisecond precision and a ``Z`` suffix."""

    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateRoomRequest(CamelModel):
    room_name: str | None = Field(default=None, description="Room name, also used as its id")
    host_name: str | None = Field(default=None, description="Name of the participant creating the room")


class JoinRoomRequest(CamelModel):
    participant_name: str | None = Field(default=None, description="Name of the joining participant")


class TimestampedRoom(CamelModel):
    id: str
    name: str
    host: str
    created_at: datetime

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return isoformat(value)


class CreatedRoom(TimestampedRoom):
    access_token: str
    join_url: str


class RoomDetail(TimestampedRoom):
    participants: list[str]
    join_url: str


class RoomRoster(CamelModel):
    id: str
    name: str
    host: str
    participants: list[str]


class RoomListItem(TimestampedRoom):
    participant_count: int


class CreateRoomResponse(CamelModel):
    success: bool = True
    room: CreatedRoom


class RoomDetailResponse(CamelModel):
    success: bool = True
    room: RoomDetail


class JoinRoomResponse(CamelModel):
    success: bool = True
    access_token: str
    room: RoomRoster


class RoomListResponse(CamelModel):
    success: bool = True
    rooms: list[RoomListItem]


class DeleteRoomResponse(CamelModel):
    success: bool = True
    message: str = "Room deleted successfully"


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
