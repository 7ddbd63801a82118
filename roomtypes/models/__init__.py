"""Data models for room types and room snapshots."""

from roomtypes.models.room import ROOM_FIELDS, RoomSnapshot, RoomUser
from roomtypes.models.room_type import RoomRoute, RoomTypeConfig, RoomTypeOrder, TemplateKind

__all__ = [
    "ROOM_FIELDS",
    "RoomRoute",
    "RoomSnapshot",
    "RoomTypeConfig",
    "RoomTypeOrder",
    "RoomUser",
    "TemplateKind",
]
