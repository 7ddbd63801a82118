"""Route dispatcher for room kinds.

Turns a (type tag, subscription data) pair into a route target using the
kind's route descriptor. Navigation itself is left to the Router.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from roomtypes.rooms.registry import RoomTypeRegistry
from roomtypes.stores.base import Router

_PATH_PARAM = re.compile(r":(\w+)")


@dataclass(frozen=True)
class RouteTarget:
    """Resolved navigation target."""

    name: Optional[str]
    params: Dict[str, Any] = field(default_factory=dict)
    query_params: Dict[str, Any] = field(default_factory=dict)


class RouteDispatcher:
    """Resolves route parameters for room kinds and hands them to a router."""

    def __init__(self, registry: RoomTypeRegistry, router: Router):
        self.registry = registry
        self.router = router

    def build_route(
        self,
        type_tag: str,
        sub_data: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[RouteTarget]:
        """
        Resolve the route target for a room kind without navigating.

        Args:
            type_tag: Room type tag
            sub_data: Subscription data, passed to the route's link builder
            query_params: Query parameters forwarded untouched

        Returns:
            RouteTarget, or None if the type tag is not registered
        """
        config = self.registry.get_config(type_tag)
        if config is None:
            return None

        route = config.route
        if route is not None and route.link is not None:
            params = dict(route.link(sub_data or {}) or {})
        elif sub_data and sub_data.get("name"):
            params = {"name": sub_data["name"]}
        else:
            params = {}

        return RouteTarget(
            name=route.name if route else None,
            params=params,
            query_params=dict(query_params or {}),
        )

    def resolve_route(
        self,
        type_tag: str,
        sub_data: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[RouteTarget]:
        """Resolve the route for a room kind and navigate to it.

        Unregistered type tags are a no-op.
        """
        target = self.build_route(type_tag, sub_data, query_params)
        if target is None:
            logger.debug(f"No route for unregistered room type '{type_tag}'")
            return None

        self.router.navigate(target.name, target.params, target.query_params)
        return target

    def is_valid_route_name(self, name: Optional[str]) -> bool:
        """Check that a route name belongs to a registered room kind."""
        if not name:
            return False
        return any(
            config.route is not None and config.route.name == name
            for config in self.registry.configs()
        )

    def get_route_link(
        self,
        type_tag: str,
        sub_data: Optional[Mapping[str, Any]] = None,
    ) -> Optional[str]:
        """
        Build the path for a room kind's route.

        Returns:
            Path with ``:param`` segments filled in, or None if the kind
            has no route path or a parameter is missing
        """
        config = self.registry.get_config(type_tag)
        if config is None or config.route is None or not config.route.path:
            return None

        target = self.build_route(type_tag, sub_data)
        params = target.params if target else {}
        missing = [p for p in _PATH_PARAM.findall(config.route.path) if p not in params]
        if missing:
            logger.debug(f"Route '{config.route.name}' missing params: {missing}")
            return None

        return _PATH_PARAM.sub(lambda m: str(params[m.group(1)]), config.route.path)
