"""Built-in room kinds."""

from roomtypes.builtin.kinds import (
    BUILTIN_ROOM_TYPES,
    DIRECT_MESSAGE,
    LIVECHAT,
    PRIVATE_GROUP,
    PUBLIC_CHANNEL,
    register_builtin_types,
)

__all__ = [
    "BUILTIN_ROOM_TYPES",
    "DIRECT_MESSAGE",
    "LIVECHAT",
    "PRIVATE_GROUP",
    "PUBLIC_CHANNEL",
    "register_builtin_types",
]
