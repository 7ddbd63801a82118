"""Room type registry, access policy and routing."""

from roomtypes.rooms.policy import POST_READONLY_PERMISSION, RoomPolicyResolver
from roomtypes.rooms.registry import (
    RoomTypeRegistry,
    RoomTypeSections,
    register_room_type,
    room_types,
)
from roomtypes.rooms.routing import RouteDispatcher, RouteTarget
from roomtypes.rooms.service import RoomTypes

__all__ = [
    "POST_READONLY_PERMISSION",
    "RoomPolicyResolver",
    "RoomTypeRegistry",
    "RoomTypeSections",
    "RoomTypes",
    "RouteDispatcher",
    "RouteTarget",
    "register_room_type",
    "room_types",
]
