"""In-memory room registry."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict

from ..core.errors import ConflictError, NotFoundError, ValidationError
from .credentials import CredentialIssuer, get_issuer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Room:
    """A conferencing room and its advisory roster."""

    id: str
    name: str
    host: str
    created_at: datetime
    participants: list[str] = field(default_factory=list)
    access_token: str = ""


@dataclass(slots=True)
class RoomSummary:
    id: str
    name: str
    host: str
    created_at: datetime
    participant_count: int


def _snapshot(room: Room) -> Room:
    return replace(room, participants=list(room.participants))


class RoomRegistry:
    """Own every room and serialize mutations behind a single lock.

    Membership here is bookkeeping only: each join re-issues a token and the media
    server is the one that enforces access.
    """

    def __init__(self, issuer: CredentialIssuer) -> None:
        self._issuer = issuer
        self._rooms: Dict[str, Room] = {}
        self._lock = asyncio.Lock()

    @property
    def issuer(self) -> CredentialIssuer:
        return self._issuer

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms

    async def create_room(self, room_id: str, host_name: str) -> Room:
        """Create ``room_id`` hosted by ``host_name`` and issue the host's token."""

        if not room_id or not host_name:
            raise ValidationError("Room name and host name are required")

        async with self._lock:
            if room_id in self._rooms:
                raise ConflictError("Room already exists")

            access_token = self._issuer.issue(room_id, host_name)
            room = Room(
                id=room_id,
                name=room_id,
                host=host_name,
                created_at=datetime.now(timezone.utc),
                participants=[host_name],
                access_token=access_token,
            )
            self._rooms[room_id] = room

        logger.info("Room %s created by %s", room_id, host_name)
        return _snapshot(room)

    async def get_room(self, room_id: str) -> Room:
        async with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                raise NotFoundError("Room not found")
            return _snapshot(room)

    async def join_room(self, room_id: str, participant_name: str) -> tuple[str, Room]:
        """Issue a fresh token for ``participant_name`` and record them on the roster.

        Repeat joins by the same name get a new token but never a second roster entry.
        """

        if not participant_name:
            raise ValidationError("Participant name is required")

        async with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                raise NotFoundError("Room not found")

            access_token = self._issuer.issue(room_id, participant_name)
            if participant_name not in room.participants:
                room.participants.append(participant_name)
                logger.info("Participant %s joined room %s", participant_name, room_id)
            return access_token, _snapshot(room)

    async def list_rooms(self) -> list[RoomSummary]:
        """Return every room in creation order with roster sizes."""

        async with self._lock:
            return [
                RoomSummary(
                    id=room.id,
                    name=room.name,
                    host=room.host,
                    created_at=room.created_at,
                    participant_count=len(room.participants),
                )
                for room in self._rooms.values()
            ]

    async def delete_room(self, room_id: str) -> None:
        async with self._lock:
            if self._rooms.pop(room_id, None) is None:
                raise NotFoundError("Room not found")

        logger.info("Room %s deleted", room_id)


@lru_cache
def get_registry() -> RoomRegistry:
    """FastAPI dependency returning the process-wide registry."""

    return RoomRegistry(get_issuer())
