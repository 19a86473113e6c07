"""Redirect defaults for history routes."""

from __future__ import annotations

from typing import Any

from dimcontent.core.errors import RouteGoneError, RoutingError
from dimcontent.routing.generator import RouteGenerator
from dimcontent.routing.model import HISTORY_RESOURCE_KEY, Route
from dimcontent.routing.repository import RouteRepository

REDIRECT_CONTROLLER = "redirect"


class RouteHistoryDefaultsProvider:
    """Resolves a history route to a permanent redirect onto its current route."""

    resource_key = HISTORY_RESOURCE_KEY

    def __init__(self, route_repository: RouteRepository, route_generator: RouteGenerator) -> None:
        self._route_repository = route_repository
        self._route_generator = route_generator

    def get_defaults(self, route: Route) -> dict[str, Any]:
        if not route.is_history:
            raise RoutingError(
                f'Route must be of type "{HISTORY_RESOURCE_KEY}", but "{route.resource_key}" given.'
            )

        resource_key, _, resource_id = route.resource_id.partition("::")
        if not resource_key or not resource_id:
            raise RoutingError(
                'The given history route "resource_id" has to contain resource key and '
                f'resource id separated by "::", but "{route.resource_id}" given.'
            )

        target_route = self._route_repository.find_one_by(
            resource_key=resource_key,
            resource_id=resource_id,
            locale=route.locale,
        )
        if target_route is None:
            raise RouteGoneError(
                f'The target route with resource key "{resource_key}" and resource id '
                f'"{resource_id}" no longer exists.'
            ).with_context(resource_key=resource_key, resource_id=resource_id, locale=route.locale)

        url = self._route_generator.generate(target_route.slug, target_route.locale, target_route.site)

        return {
            "controller": REDIRECT_CONTROLLER,
            "path": url,
            "permanent": True,
            "target": target_route,
        }


__all__ = ["RouteHistoryDefaultsProvider"]
