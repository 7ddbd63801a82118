"""Room type configuration model.

A RoomTypeConfig describes one room kind: how it is named and displayed,
where it routes to, and which policy hooks override the generic rules.
Every behavior is an optional field; the registry and the policy resolver
decide what happens when a hook is absent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

if TYPE_CHECKING:
    from roomtypes.models.room import RoomUser


class TemplateKind(Enum):
    """Fallback screens a room type can name."""

    NOT_SUBSCRIBED = "not_subscribed"  # shown to users who are not members
    READ_ONLY = "read_only"  # shown instead of the composer


@dataclass(frozen=True)
class RoomRoute:
    """Route descriptor for a room type.

    Attributes:
        name: Route name handed to the router
        link: Builds route params from subscription data
        path: Path template with ``:param`` segments, e.g. ``/channel/:name``
    """

    name: str
    link: Optional[Callable[[Mapping[str, Any]], Dict[str, str]]] = None
    path: Optional[str] = None


@dataclass(frozen=True)
class RoomTypeConfig:
    """Immutable descriptor for one room kind.

    Example:
        config = RoomTypeConfig(
            identifier="c",
            order=30,
            route=RoomRoute(name="channel", path="/channel/:name"),
            get_icon=lambda room: "hashtag",
        )
    """

    identifier: str
    order: Optional[int] = None
    label: str = ""

    # Evaluated on every enumeration, never cached
    condition: Optional[Callable[[], bool]] = None

    # Presentation
    room_name: Optional[Callable[[Mapping[str, Any]], Optional[str]]] = None
    secondary_room_name: Optional[Callable[[Mapping[str, Any]], Optional[str]]] = None
    get_icon: Optional[Callable[[Mapping[str, Any]], Optional[str]]] = None
    get_user_status: Optional[Callable[[str], Optional[str]]] = None
    get_user_status_text: Optional[Callable[[str], Optional[str]]] = None
    not_subscribed_tpl: Optional[str] = None
    read_only_tpl: Optional[str] = None
    creation_template: Optional[str] = None

    # Policy hooks
    can_send_message: Optional[Callable[[str], bool]] = None
    show_join_link: Optional[Callable[[str], bool]] = None
    read_only: Optional[Callable[[str, Optional["RoomUser"]], bool]] = None

    # Routing and lookup
    route: Optional[RoomRoute] = None
    find_room: Optional[Callable[[str], Any]] = None

    def is_enabled(self) -> bool:
        """Return True if the kind has no condition or its condition holds now."""
        return self.condition is None or bool(self.condition())

    def template(self, kind: TemplateKind) -> Optional[str]:
        """Get the template name this kind declares for a fallback screen."""
        if kind is TemplateKind.NOT_SUBSCRIBED:
            return self.not_subscribed_tpl
        return self.read_only_tpl


@dataclass
class RoomTypeOrder:
    """Position of a room kind in the registry's order list."""

    identifier: str
    order: int
