"""Collaborator interfaces consumed by the registry and policy resolver.

The room type core owns no persisted state. Rooms, subscriptions,
permissions and navigation all live behind these interfaces so the core
can run against a database, an in-memory fixture or a client cache alike.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from roomtypes.models.room import RoomSnapshot


class RoomStore(ABC):
    """Read access to persisted rooms."""

    @abstractmethod
    def find_room(self, room_id: str, fields: Iterable[str]) -> Optional[RoomSnapshot]:
        """
        Load a room projected onto the given fields.

        Args:
            room_id: Room identifier
            fields: Field names to project (at least t, ro, archived, muted, unmuted)

        Returns:
            RoomSnapshot or None if the room does not exist
        """
        pass


class SubscriptionStore(ABC):
    """Read access to the current user's subscriptions."""

    @abstractmethod
    def count_subscriptions(self, room_id: str) -> int:
        """Count subscription records referencing a room."""
        pass


class PermissionEngine(ABC):
    """Evaluates permission names for the current user."""

    @abstractmethod
    def has_permission(self, permission: str, scope: Optional[str] = None) -> bool:
        """
        Check a permission.

        Args:
            permission: Permission name, e.g. 'post-readonly'
            scope: Optional room id the permission is scoped to

        Returns:
            True if the current user holds the permission
        """
        pass


class Router(ABC):
    """Application router that performs navigation."""

    @abstractmethod
    def navigate(
        self,
        route_name: Optional[str],
        route_params: Mapping[str, Any],
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Navigate to a named route.

        The route name may be None; validating it is the caller's job.
        """
        pass
