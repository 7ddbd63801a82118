"""Room snapshot and acting user models.

A RoomSnapshot is a read-only projection of a persisted room document.
The policy resolver never writes these fields; it asks the room store
for the handful it needs per decision.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

# Fields a room store must be able to project
ROOM_FIELDS = frozenset({"t", "ro", "archived", "muted", "unmuted", "name", "fname"})


def _usernames(value: Any) -> FrozenSet[str]:
    """Normalize a mute/unmute list; anything that is not a list counts as empty."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return frozenset(str(v) for v in value)
    return frozenset()


@dataclass(frozen=True)
class RoomUser:
    """The user a policy decision is made for."""

    username: str
    id: Optional[str] = None


@dataclass(frozen=True)
class RoomSnapshot:
    """Point-in-time view of a room.

    Fields left out of a projection keep their defaults, so callers must
    only read the fields they asked for.
    """

    id: str
    t: Optional[str] = None  # Type tag: 'c', 'p', 'd', ...
    ro: bool = False  # Room-level read-only flag
    archived: bool = False
    muted: FrozenSet[str] = field(default_factory=frozenset)
    unmuted: FrozenSet[str] = field(default_factory=frozenset)
    name: Optional[str] = None
    fname: Optional[str] = None

    def is_muted(self, username: str) -> bool:
        return username in self.muted

    def is_unmuted(self, username: str) -> bool:
        return username in self.unmuted

    def to_dict(self) -> Dict[str, Any]:
        """Convert snapshot to a plain dictionary for serialization."""
        return {
            "_id": self.id,
            "t": self.t,
            "ro": self.ro,
            "archived": self.archived,
            "muted": sorted(self.muted),
            "unmuted": sorted(self.unmuted),
            "name": self.name,
            "fname": self.fname,
        }

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        fields: Optional[Iterable[str]] = None,
    ) -> "RoomSnapshot":
        """Create a snapshot from a room document.

        Args:
            data: Room document; the id is read from ``_id`` or ``id``
            fields: Optional projection; other fields are left at defaults

        Returns:
            RoomSnapshot instance
        """
        wanted = ROOM_FIELDS if fields is None else frozenset(fields)

        def pick(key: str, default: Any = None) -> Any:
            return data.get(key, default) if key in wanted else default

        return cls(
            id=str(data.get("_id", data.get("id", ""))),
            t=pick("t") or None,
            # ro/archived are kept raw so that only a literal True counts
            ro=pick("ro", False),
            archived=pick("archived", False),
            muted=_usernames(pick("muted")),
            unmuted=_usernames(pick("unmuted")),
            name=pick("name"),
            fname=pick("fname"),
        )
