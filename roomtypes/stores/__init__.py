"""Collaborator interfaces and reference implementations."""

from roomtypes.stores.base import PermissionEngine, RoomStore, Router, SubscriptionStore
from roomtypes.stores.json_store import JsonRoomStore
from roomtypes.stores.memory import (
    InMemoryRoomStore,
    InMemorySubscriptionStore,
    Navigation,
    RecordingRouter,
    StaticPermissionEngine,
)

__all__ = [
    "InMemoryRoomStore",
    "InMemorySubscriptionStore",
    "JsonRoomStore",
    "Navigation",
    "PermissionEngine",
    "RecordingRouter",
    "RoomStore",
    "Router",
    "StaticPermissionEngine",
    "SubscriptionStore",
]
