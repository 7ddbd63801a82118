"""Access-policy resolver for rooms.

Decides whether a user may read or write in a room by asking the room's
type configuration first and falling back to the generic room rules.
Every decision loads a fresh room snapshot; nothing is cached.

Read-only precedence, highest first:

1. The room type's own ``read_only`` hook
2. Anonymous callers get the room ``ro`` flag (only a literal True counts)
3. User is muted -> read-only
4. Room is read-only and the user is unmuted -> writable
5. Room is read-only and the user holds ``post-readonly`` -> writable
6. Room is read-only -> read-only, otherwise writable
"""

from typing import Optional

from loguru import logger

from roomtypes.models.room import RoomSnapshot, RoomUser
from roomtypes.models.room_type import RoomTypeConfig, TemplateKind
from roomtypes.rooms.registry import RoomTypeRegistry
from roomtypes.stores.base import PermissionEngine, RoomStore, SubscriptionStore

POST_READONLY_PERMISSION = "post-readonly"

_TYPE_FIELDS = ("t",)
_READ_ONLY_FIELDS = ("t", "ro")
_MUTE_FIELDS = ("muted", "unmuted")


class RoomPolicyResolver:
    """Resolves read/write decisions for rooms.

    Unknown rooms and unknown type tags never raise: decisions fail
    closed with ``None``, ``False`` or an empty string.
    """

    def __init__(
        self,
        registry: RoomTypeRegistry,
        rooms: RoomStore,
        subscriptions: SubscriptionStore,
        permissions: PermissionEngine,
        read_only_permission: str = POST_READONLY_PERMISSION,
    ):
        self.registry = registry
        self.rooms = rooms
        self.subscriptions = subscriptions
        self.permissions = permissions
        self.read_only_permission = read_only_permission

    def _typed_room(self, room_id: str) -> Optional[RoomSnapshot]:
        room = self.rooms.find_room(room_id, _TYPE_FIELDS)
        if room is None or not room.t:
            return None
        return room

    def _config_for(self, room_id: str) -> Optional[RoomTypeConfig]:
        room = self._typed_room(room_id)
        if room is None:
            return None
        return self.registry.get_config(room.t)

    def get_room_type(self, room_id: str) -> Optional[str]:
        """Get the type tag of a room, or None if the room is unknown."""
        room = self._typed_room(room_id)
        return room.t if room else None

    def resolve_read_only(self, room_id: str, user: Optional[RoomUser] = None) -> Optional[bool]:
        """
        Decide whether a room is read-only for a user.

        Args:
            room_id: Room identifier
            user: Acting user, or None for anonymous/system callers

        Returns:
            True if read-only, False if writable, None only when the room
            or its type tag is unknown. A missing or non-boolean ro flag
            reads as writable.
        """
        fields = _READ_ONLY_FIELDS + _MUTE_FIELDS if user else _READ_ONLY_FIELDS
        room = self.rooms.find_room(room_id, fields)
        if room is None or not room.t:
            logger.debug(f"Read-only check for unknown room: {room_id}")
            return None

        config = self.registry.get_config(room.t)
        if config is not None and config.read_only is not None:
            return config.read_only(room_id, user)

        # Anonymous callers skip the mute chain; only a literal True flag counts
        if not user:
            return room.ro is True

        if room.is_muted(user.username):
            return True

        if room.ro is True:
            if room.is_unmuted(user.username):
                return False
            if self.permissions.has_permission(self.read_only_permission, room.id or room_id):
                return False
            return True

        return False

    def can_send_message(self, room_id: str) -> bool:
        """Default send policy: the current user is subscribed to the room."""
        return self.subscriptions.count_subscriptions(room_id) > 0

    def verify_can_send_message(self, room_id: str) -> bool:
        """
        Decide whether the current user may send to a room.

        Send eligibility belongs to the room type. Kinds without their own
        predicate use the subscription-based default.
        """
        room = self._typed_room(room_id)
        if room is None:
            return False

        config = self.registry.get_config(room.t)
        if config is None:
            logger.debug(f"Room {room_id} has unregistered type '{room.t}'")
            return False
        if config.can_send_message is None:
            return self.can_send_message(room_id)
        return bool(config.can_send_message(room_id))

    def verify_show_join_link(self, room_id: str) -> Optional[bool]:
        """
        Decide whether to show a join link for a room.

        Returns:
            False for unknown rooms, None when the type has no opinion,
            otherwise the type's decision
        """
        room = self._typed_room(room_id)
        if room is None:
            return False

        config = self.registry.get_config(room.t)
        if config is None or config.show_join_link is None:
            return None
        return config.show_join_link(room_id)

    def resolve_archived(self, room_id: str) -> bool:
        """Return True only if the room's archived flag is literally True."""
        room = self.rooms.find_room(room_id, ("archived",))
        return room is not None and room.archived is True

    def get_templates(self, room_id: str, kind: TemplateKind) -> str:
        """Get the fallback template a room's type declares, or an empty string."""
        config = self._config_for(room_id)
        if config is None:
            return ""
        return config.template(kind) or ""

    def get_not_subscribed_tpl(self, room_id: str) -> str:
        return self.get_templates(room_id, TemplateKind.NOT_SUBSCRIBED)

    def get_read_only_tpl(self, room_id: str) -> str:
        return self.get_templates(room_id, TemplateKind.READ_ONLY)
