"""In-memory collaborator implementations.

Used for tests, for the CLI and as a reference for adapting the core to
a real backend.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from loguru import logger

from roomtypes.models.room import RoomSnapshot
from roomtypes.stores.base import PermissionEngine, RoomStore, Router, SubscriptionStore


class InMemoryRoomStore(RoomStore):
    """Room store backed by a dict of room documents."""

    def __init__(self, rooms: Optional[Iterable[Mapping[str, Any]]] = None):
        self._rooms: Dict[str, Dict[str, Any]] = {}
        for room in rooms or []:
            self.add_room(room)

    def add_room(self, room: Mapping[str, Any]) -> None:
        """Add or replace a room document (keyed by ``_id`` or ``id``)."""
        room_id = room.get("_id", room.get("id"))
        if not room_id:
            raise ValueError("Room document needs an '_id' or 'id'")
        self._rooms[str(room_id)] = dict(room)

    def remove_room(self, room_id: str) -> bool:
        return self._rooms.pop(room_id, None) is not None

    def find_room(self, room_id: str, fields: Iterable[str]) -> Optional[RoomSnapshot]:
        data = self._rooms.get(room_id)
        if data is None:
            return None
        return RoomSnapshot.from_dict(data, fields)

    def __len__(self) -> int:
        return len(self._rooms)


class InMemorySubscriptionStore(SubscriptionStore):
    """Subscription store holding the current user's room ids."""

    def __init__(self, room_ids: Optional[Iterable[str]] = None):
        self._counts: Dict[str, int] = {}
        for room_id in room_ids or []:
            self.subscribe(room_id)

    def subscribe(self, room_id: str) -> None:
        self._counts[room_id] = self._counts.get(room_id, 0) + 1

    def unsubscribe(self, room_id: str) -> None:
        remaining = self._counts.get(room_id, 0) - 1
        if remaining > 0:
            self._counts[room_id] = remaining
        else:
            self._counts.pop(room_id, None)

    def count_subscriptions(self, room_id: str) -> int:
        return self._counts.get(room_id, 0)


class StaticPermissionEngine(PermissionEngine):
    """Permission engine with fixed grants.

    A global grant applies to every scope; a scoped grant only to the
    room it names.
    """

    def __init__(
        self,
        global_grants: Optional[Iterable[str]] = None,
        scoped_grants: Optional[Iterable[Tuple[str, str]]] = None,
    ):
        self._global: Set[str] = set(global_grants or [])
        self._scoped: Set[Tuple[str, str]] = set(scoped_grants or [])

    def grant(self, permission: str, scope: Optional[str] = None) -> None:
        if scope is None:
            self._global.add(permission)
        else:
            self._scoped.add((permission, scope))

    def revoke(self, permission: str, scope: Optional[str] = None) -> None:
        if scope is None:
            self._global.discard(permission)
        else:
            self._scoped.discard((permission, scope))

    def has_permission(self, permission: str, scope: Optional[str] = None) -> bool:
        if permission in self._global:
            return True
        return scope is not None and (permission, scope) in self._scoped


@dataclass
class Navigation:
    """A navigation the recording router received."""

    route_name: Optional[str]
    route_params: Dict[str, Any]
    query_params: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


class RecordingRouter(Router):
    """Router that records navigations instead of performing them."""

    def __init__(self):
        self.history: List[Navigation] = []

    def navigate(
        self,
        route_name: Optional[str],
        route_params: Mapping[str, Any],
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        navigation = Navigation(
            route_name=route_name,
            route_params=dict(route_params),
            query_params=dict(query_params or {}),
        )
        self.history.append(navigation)
        logger.debug(f"Navigate -> {route_name} {navigation.route_params}")

    @property
    def last(self) -> Optional[Navigation]:
        return self.history[-1] if self.history else None
