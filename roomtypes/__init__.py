"""roomtypes - room type registry with a layered access-policy resolver.

Room kinds register a RoomTypeConfig describing how they are displayed,
routed and policed. The policy resolver answers read/write questions by
asking the room's kind first and falling back to generic room rules.
"""

__version__ = "0.1.0"
__logo__ = "#"

from roomtypes.errors import (
    InvalidConfig,
    MissingReferenceType,
    RegistrySealedError,
    RoomTypeError,
)
from roomtypes.models import RoomRoute, RoomSnapshot, RoomTypeConfig, RoomUser, TemplateKind
from roomtypes.rooms import (
    RoomPolicyResolver,
    RoomTypeRegistry,
    RoomTypeSections,
    RoomTypes,
    RouteDispatcher,
    RouteTarget,
    register_room_type,
    room_types,
)

__all__ = [
    "__version__",
    "InvalidConfig",
    "MissingReferenceType",
    "RegistrySealedError",
    "RoomPolicyResolver",
    "RoomRoute",
    "RoomSnapshot",
    "RoomTypeConfig",
    "RoomTypeError",
    "RoomTypeRegistry",
    "RoomTypeSections",
    "RoomTypes",
    "RoomUser",
    "RouteDispatcher",
    "RouteTarget",
    "TemplateKind",
    "register_room_type",
    "room_types",
]
