"""Room type registry.

Maps a room's type tag to its RoomTypeConfig and keeps the order list
that drives enumeration and section classification. Room kinds are
registered during bootstrap; once the registry is sealed it is read-only.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger

from roomtypes.errors import InvalidConfig, MissingReferenceType, RegistrySealedError
from roomtypes.models.room_type import RoomTypeConfig, RoomTypeOrder

# Built-in kinds bounding the "standard" section
DEFAULT_SECTION_START = "c"
DEFAULT_SECTION_END = "d"


@dataclass(frozen=True)
class RoomTypeSections:
    """Room kinds partitioned around the two reference kinds."""

    before: List[RoomTypeConfig]
    standard: List[RoomTypeConfig]
    after: List[RoomTypeConfig]


class RoomTypeRegistry:
    """Registry of room kinds.

    Example:
        registry = RoomTypeRegistry()
        registry.register(RoomTypeConfig(identifier="c", order=30))
        registry.register(RoomTypeConfig(identifier="d", order=50))
        registry.seal()

        [config.identifier for config in registry.get_types()]  # ['c', 'd']
    """

    def __init__(self):
        self._types: Dict[str, RoomTypeConfig] = {}
        self._order: List[RoomTypeOrder] = []
        self._sealed = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, config: RoomTypeConfig) -> RoomTypeConfig:
        """Register a room kind, replacing any kind with the same identifier.

        Args:
            config: Room type configuration

        Returns:
            The stored configuration (with an assigned order if it had none)

        Raises:
            InvalidConfig: If config is not a RoomTypeConfig or has no identifier
            RegistrySealedError: If the registry has been sealed
        """
        if not isinstance(config, RoomTypeConfig):
            raise InvalidConfig(
                f"Room type configuration must be a RoomTypeConfig, got {type(config).__name__}"
            )
        if not isinstance(config.identifier, str) or not config.identifier.strip():
            raise InvalidConfig("Room type identifier must be a non-empty string")
        if self._sealed:
            raise RegistrySealedError(
                f"Cannot register room type '{config.identifier}': registry is sealed"
            )

        existing = self._types.get(config.identifier)
        entry = self._find_order_entry(config.identifier)

        if config.order is None:
            order = entry.order if entry else len(self._order) * 10
            config = replace(config, order=order)

        if existing is not None and existing != config:
            logger.warning(f"Room type '{config.identifier}' already registered, overwriting")

        if entry is None:
            self._order.append(RoomTypeOrder(identifier=config.identifier, order=config.order))
        else:
            entry.order = config.order

        self._types[config.identifier] = config
        logger.debug(f"Registered room type: {config.identifier} (order {config.order})")
        return config

    def seal(self) -> None:
        """Freeze the registry; later registrations raise RegistrySealedError."""
        if not self._sealed:
            self._sealed = True
            logger.debug(f"Room type registry sealed with {len(self._types)} types")

    @property
    def sealed(self) -> bool:
        return self._sealed

    def reset(self) -> None:
        """Drop every registration and unseal. Useful for testing."""
        self._types.clear()
        self._order.clear()
        self._sealed = False
        logger.debug("Cleared all registered room types")

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def get_types(self) -> List[RoomTypeConfig]:
        """Get enabled room kinds sorted by order.

        Conditions are evaluated on every call, so a feature flag flipping
        changes the result without re-registration.
        """
        # sorted() is stable: equal orders keep insertion order
        ordered = sorted(self._order, key=lambda entry: entry.order)
        return [
            self._types[entry.identifier]
            for entry in ordered
            if self._types[entry.identifier].is_enabled()
        ]

    def get_identifiers(self, exclude: Union[str, Iterable[str], None] = None) -> List[str]:
        """Get identifiers in registry order, minus the excluded ones.

        Args:
            exclude: A single identifier or an iterable of identifiers

        Returns:
            List of identifiers
        """
        if exclude is None:
            excluded = set()
        elif isinstance(exclude, str):
            excluded = {exclude}
        else:
            excluded = set(exclude)
        return [entry.identifier for entry in self._order if entry.identifier not in excluded]

    def get_config(self, identifier: Optional[str]) -> Optional[RoomTypeConfig]:
        """Get the configuration for a room kind, or None if unknown."""
        if identifier is None:
            return None
        return self._types.get(identifier)

    def configs(self) -> List[RoomTypeConfig]:
        """Get every registered configuration in registry order, ignoring conditions."""
        return [self._types[entry.identifier] for entry in self._order]

    # ------------------------------------------------------------------
    # Section classification
    # ------------------------------------------------------------------

    def classify_by_section(
        self,
        start: str = DEFAULT_SECTION_START,
        end: str = DEFAULT_SECTION_END,
    ) -> RoomTypeSections:
        """Partition room kinds around two reference kinds.

        Kinds ordered before ``start`` or after ``end`` are only listed when
        they declare a creation template. Every kind between the two
        references (inclusive) is standard.

        Raises:
            MissingReferenceType: If either reference kind is not registered
        """
        low = self._reference_order(start)
        high = self._reference_order(end)

        ordered = sorted(self._order, key=lambda entry: entry.order)
        before: List[RoomTypeConfig] = []
        standard: List[RoomTypeConfig] = []
        after: List[RoomTypeConfig] = []

        for entry in ordered:
            config = self._types[entry.identifier]
            if entry.order < low:
                if config.creation_template:
                    before.append(config)
            elif entry.order > high:
                if config.creation_template:
                    after.append(config)
            else:
                standard.append(config)

        return RoomTypeSections(before=before, standard=standard, after=after)

    def room_types_before_standard(self, start: str = DEFAULT_SECTION_START) -> List[RoomTypeConfig]:
        """Creatable kinds ordered before the first reference kind."""
        low = self._reference_order(start)
        return [
            self._types[entry.identifier]
            for entry in sorted(self._order, key=lambda entry: entry.order)
            if entry.order < low and self._types[entry.identifier].creation_template
        ]

    def room_types_after_standard(self, end: str = DEFAULT_SECTION_END) -> List[RoomTypeConfig]:
        """Creatable kinds ordered after the second reference kind."""
        high = self._reference_order(end)
        return [
            self._types[entry.identifier]
            for entry in sorted(self._order, key=lambda entry: entry.order)
            if entry.order > high and self._types[entry.identifier].creation_template
        ]

    # ------------------------------------------------------------------
    # Presentation lookups
    # ------------------------------------------------------------------

    def get_icon(self, room_data: Optional[Mapping[str, Any]]) -> Optional[str]:
        """Get the icon for a room document; empty string if its type is unknown."""
        if not room_data or not room_data.get("t"):
            return ""
        config = self._types.get(room_data["t"])
        if config is None:
            return ""
        return config.get_icon(room_data) if config.get_icon else None

    def get_room_name(self, room_type: str, room_data: Mapping[str, Any]) -> Optional[str]:
        config = self._types.get(room_type)
        if config is None or config.room_name is None:
            return None
        return config.room_name(room_data)

    def get_secondary_room_name(self, room_type: str, room_data: Mapping[str, Any]) -> Optional[str]:
        config = self._types.get(room_type)
        if config is None or config.secondary_room_name is None:
            return None
        return config.secondary_room_name(room_data)

    def get_user_status(self, room_type: str, room_id: str) -> Optional[str]:
        config = self._types.get(room_type)
        if config is None or config.get_user_status is None:
            return None
        return config.get_user_status(room_id)

    def get_user_status_text(self, room_type: str, room_id: str) -> Optional[str]:
        config = self._types.get(room_type)
        if config is None or config.get_user_status_text is None:
            return None
        return config.get_user_status_text(room_id)

    def find_room(self, room_type: str, identifier: str) -> Any:
        """Resolve a room using the kind's own lookup strategy."""
        config = self._types.get(room_type)
        if config is None or config.find_room is None:
            return None
        return config.find_room(identifier)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find_order_entry(self, identifier: str) -> Optional[RoomTypeOrder]:
        return next((entry for entry in self._order if entry.identifier == identifier), None)

    def _reference_order(self, identifier: str) -> int:
        entry = self._find_order_entry(identifier)
        if entry is None:
            raise MissingReferenceType(identifier)
        return entry.order

    def __len__(self) -> int:
        """Return number of registered room types."""
        return len(self._types)

    def __contains__(self, identifier: object) -> bool:
        """Check if a room type is registered."""
        return identifier in self._types


# Global registry instance for convenience
room_types = RoomTypeRegistry()


def register_room_type(identifier: str, **fields: Any) -> RoomTypeConfig:
    """Register a room kind on the global registry.

    Usage:
        from roomtypes.rooms.registry import register_room_type

        register_room_type(
            "discussion",
            order=25,
            creation_template="createDiscussion",
            get_icon=lambda room: "discussion",
        )

    Args:
        identifier: Room type tag
        **fields: Any other RoomTypeConfig field

    Returns:
        The stored configuration
    """
    return room_types.register(RoomTypeConfig(identifier=identifier, **fields))


__all__ = [
    "DEFAULT_SECTION_END",
    "DEFAULT_SECTION_START",
    "RoomTypeRegistry",
    "RoomTypeSections",
    "register_room_type",
    "room_types",
]
