"""Room types service.

RoomTypes bundles the registry, the policy resolver and the route
dispatcher behind one object, wired to the application's stores. UI and
other modules talk to this object only.
"""

from typing import Any, Iterable, List, Mapping, Optional, Union

from loguru import logger

from roomtypes.builtin.kinds import register_builtin_types
from roomtypes.config.schema import Config
from roomtypes.models.room import RoomUser
from roomtypes.models.room_type import RoomTypeConfig, TemplateKind
from roomtypes.rooms.policy import RoomPolicyResolver
from roomtypes.rooms.registry import RoomTypeRegistry, RoomTypeSections
from roomtypes.rooms.routing import RouteDispatcher, RouteTarget
from roomtypes.stores.base import PermissionEngine, RoomStore, Router, SubscriptionStore


class RoomTypes:
    """Registry, policy and routing for room kinds.

    Example:
        room_types = RoomTypes(
            rooms=InMemoryRoomStore([{"_id": "GENERAL", "t": "c", "ro": True}]),
            subscriptions=InMemorySubscriptionStore(["GENERAL"]),
            permissions=StaticPermissionEngine(),
            router=RecordingRouter(),
        )
        room_types.bootstrap()
        room_types.resolve_read_only("GENERAL", RoomUser("alice"))  # True
    """

    def __init__(
        self,
        rooms: RoomStore,
        subscriptions: SubscriptionStore,
        permissions: PermissionEngine,
        router: Router,
        registry: Optional[RoomTypeRegistry] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or Config()
        self.registry = registry if registry is not None else RoomTypeRegistry()
        self.policy = RoomPolicyResolver(
            self.registry,
            rooms,
            subscriptions,
            permissions,
            read_only_permission=self.config.policy.read_only_permission,
        )
        self.dispatcher = RouteDispatcher(self.registry, router)

    def bootstrap(self, extra_types: Optional[Iterable[RoomTypeConfig]] = None) -> None:
        """
        Finish the registration phase.

        Registers the built-in kinds (unless disabled) and any extra kinds,
        checks that both reference kinds exist, then seals the registry.

        Raises:
            MissingReferenceType: If a reference kind is not registered
        """
        settings = self.config.registry
        if settings.register_builtin:
            register_builtin_types(self.registry)
        for config in extra_types or []:
            self.registry.register(config)

        # Surface a missing reference kind at startup, not on first render
        self.registry.classify_by_section(settings.section_start, settings.section_end)

        if settings.seal_on_bootstrap:
            self.registry.seal()
        logger.info(f"Room types ready: {', '.join(self.registry.get_identifiers())}")

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register(self, config: RoomTypeConfig) -> RoomTypeConfig:
        return self.registry.register(config)

    def get_types(self) -> List[RoomTypeConfig]:
        return self.registry.get_types()

    def get_identifiers(self, exclude: Union[str, Iterable[str], None] = None) -> List[str]:
        return self.registry.get_identifiers(exclude)

    def get_config(self, identifier: Optional[str]) -> Optional[RoomTypeConfig]:
        return self.registry.get_config(identifier)

    def classify_by_section(self) -> RoomTypeSections:
        """Partition kinds around the configured reference kinds."""
        settings = self.config.registry
        return self.registry.classify_by_section(settings.section_start, settings.section_end)

    def room_types_before_standard(self) -> List[RoomTypeConfig]:
        return self.registry.room_types_before_standard(self.config.registry.section_start)

    def room_types_after_standard(self) -> List[RoomTypeConfig]:
        return self.registry.room_types_after_standard(self.config.registry.section_end)

    def get_icon(self, room_data: Optional[Mapping[str, Any]]) -> Optional[str]:
        return self.registry.get_icon(room_data)

    def get_room_name(self, room_type: str, room_data: Mapping[str, Any]) -> Optional[str]:
        return self.registry.get_room_name(room_type, room_data)

    def get_secondary_room_name(self, room_type: str, room_data: Mapping[str, Any]) -> Optional[str]:
        return self.registry.get_secondary_room_name(room_type, room_data)

    def get_user_status(self, room_type: str, room_id: str) -> Optional[str]:
        return self.registry.get_user_status(room_type, room_id)

    def get_user_status_text(self, room_type: str, room_id: str) -> Optional[str]:
        return self.registry.get_user_status_text(room_type, room_id)

    def find_room(self, room_type: str, identifier: str) -> Any:
        return self.registry.find_room(room_type, identifier)

    # ------------------------------------------------------------------
    # Policy
    # ------------------------------------------------------------------

    def get_room_type(self, room_id: str) -> Optional[str]:
        return self.policy.get_room_type(room_id)

    def resolve_read_only(self, room_id: str, user: Optional[RoomUser] = None) -> Optional[bool]:
        return self.policy.resolve_read_only(room_id, user)

    def can_send_message(self, room_id: str) -> bool:
        return self.policy.can_send_message(room_id)

    def verify_can_send_message(self, room_id: str) -> bool:
        return self.policy.verify_can_send_message(room_id)

    def verify_show_join_link(self, room_id: str) -> Optional[bool]:
        return self.policy.verify_show_join_link(room_id)

    def resolve_archived(self, room_id: str) -> bool:
        return self.policy.resolve_archived(room_id)

    def get_templates(self, room_id: str, kind: TemplateKind) -> str:
        return self.policy.get_templates(room_id, kind)

    def get_not_subscribed_tpl(self, room_id: str) -> str:
        return self.policy.get_not_subscribed_tpl(room_id)

    def get_read_only_tpl(self, room_id: str) -> str:
        return self.policy.get_read_only_tpl(room_id)

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def resolve_route(
        self,
        type_tag: str,
        sub_data: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[RouteTarget]:
        return self.dispatcher.resolve_route(type_tag, sub_data, query_params)

    def is_valid_route_name(self, name: Optional[str]) -> bool:
        return self.dispatcher.is_valid_route_name(name)

    def get_route_link(self, type_tag: str, sub_data: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        return self.dispatcher.get_route_link(type_tag, sub_data)
