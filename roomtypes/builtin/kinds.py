"""Built-in room kinds.

Four kinds ship with the registry:

- ``c``: public channel
- ``p``: private group
- ``d``: direct message
- ``l``: livechat

``c`` and ``d`` are the reference kinds bounding the standard section;
plugins order themselves before or after them.
"""

from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from roomtypes.models.room_type import RoomRoute, RoomTypeConfig
from roomtypes.rooms.registry import RoomTypeRegistry


def _display_name(room: Mapping[str, Any]) -> Optional[str]:
    return room.get("fname") or room.get("name")


def _name_link(sub: Mapping[str, Any]) -> Dict[str, str]:
    return {"name": sub["name"]} if sub.get("name") else {}


def _rid_link(sub: Mapping[str, Any]) -> Dict[str, str]:
    rid = sub.get("rid") or sub.get("_id")
    return {"rid": rid} if rid else {}


def _livechat_link(sub: Mapping[str, Any]) -> Dict[str, str]:
    rid = sub.get("rid") or sub.get("_id")
    return {"id": rid} if rid else {}


PUBLIC_CHANNEL = RoomTypeConfig(
    identifier="c",
    order=30,
    label="Public channel",
    room_name=_display_name,
    get_icon=lambda room: "hashtag",
    creation_template="createChannel",
    show_join_link=lambda room_id: True,
    route=RoomRoute(name="channel", link=_name_link, path="/channel/:name"),
)

PRIVATE_GROUP = RoomTypeConfig(
    identifier="p",
    order=40,
    label="Private group",
    room_name=_display_name,
    get_icon=lambda room: "hashtag-lock",
    creation_template="createPrivateGroup",
    route=RoomRoute(name="group", link=_name_link, path="/group/:name"),
)

DIRECT_MESSAGE = RoomTypeConfig(
    identifier="d",
    order=50,
    label="Direct message",
    room_name=_display_name,
    secondary_room_name=lambda room: room.get("name"),
    get_icon=lambda room: "at",
    creation_template="createDirectMessage",
    route=RoomRoute(name="direct", link=_rid_link, path="/direct/:rid"),
)

LIVECHAT = RoomTypeConfig(
    identifier="l",
    order=5,
    label="Livechat",
    room_name=_display_name,
    get_icon=lambda room: "livechat",
    not_subscribed_tpl="livechatNotSubscribed",
    read_only_tpl="livechatReadOnly",
    route=RoomRoute(name="live", link=_livechat_link, path="/live/:id"),
)

BUILTIN_ROOM_TYPES = (LIVECHAT, PUBLIC_CHANNEL, PRIVATE_GROUP, DIRECT_MESSAGE)


def register_builtin_types(registry: RoomTypeRegistry) -> List[RoomTypeConfig]:
    """Register the built-in kinds on a registry.

    Returns:
        The stored configurations
    """
    registered = [registry.register(config) for config in BUILTIN_ROOM_TYPES]
    logger.debug(f"Registered {len(registered)} built-in room types")
    return registered
