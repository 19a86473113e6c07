"""Routes, slug cleanup, unique resource locators and url generation."""

from dimcontent.routing.generator import (
    LocalePrefixSiteRouteGenerator,
    RequestContext,
    RouteGenerator,
    SiteRouteGenerator,
)
from dimcontent.routing.history import RouteHistoryDefaultsProvider
from dimcontent.routing.model import HISTORY_RESOURCE_KEY, Route
from dimcontent.routing.path_cleanup import PathCleanup, slugify
from dimcontent.routing.repository import RouteRepository
from dimcontent.routing.resource_locator import ResourceLocatorGenerator, ResourceLocatorRequest
from dimcontent.routing.updater import RouteChangedUpdater

__all__ = [
    "HISTORY_RESOURCE_KEY",
    "LocalePrefixSiteRouteGenerator",
    "PathCleanup",
    "RequestContext",
    "ResourceLocatorGenerator",
    "ResourceLocatorRequest",
    "Route",
    "RouteChangedUpdater",
    "RouteGenerator",
    "RouteHistoryDefaultsProvider",
    "RouteRepository",
    "SiteRouteGenerator",
    "slugify",
]
