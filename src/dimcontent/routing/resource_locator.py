"""Unique resource locator (url slug) generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from dimcontent.core.logging import get_logger
from dimcontent.routing.path_cleanup import PathCleanup
from dimcontent.routing.repository import RouteRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResourceLocatorRequest:
    """Input of :meth:`ResourceLocatorGenerator.generate`.

    ``parts`` maps field names to the texts joined into the last slug
    segment, e.g. ``{"title": "Hello World"}``.
    """

    parts: dict[str, str]
    locale: str
    resource_key: str
    site: str | None = None
    resource_id: str | None = None
    parent_resource_id: str | None = None
    parent_resource_key: str | None = None
    route_schema: str | None = field(default=None, repr=False)


class ResourceLocatorGenerator:
    def __init__(self, route_repository: RouteRepository, path_cleanup: PathCleanup) -> None:
        self._route_repository = route_repository
        self._path_cleanup = path_cleanup

    def generate(self, request: ResourceLocatorRequest) -> str:
        parent_path = "/"
        if request.parent_resource_id:
            parent_route = self._route_repository.find_one_by(
                resource_key=request.parent_resource_key,
                resource_id=request.parent_resource_id,
                locale=request.locale,
            )
            parent_path = (parent_route.slug if parent_route else None) or "/"

        parts = [self._path_cleanup.cleanup(part, request.locale) for part in request.parts.values()]
        path = parent_path.rstrip("/") + "/" + "-".join(parts)

        return self._create_unique(path, request)

    def _create_unique(self, path: str, request: ResourceLocatorRequest) -> str:
        original_path = path
        filters: dict = {"locale": request.locale, "site": request.site}
        if request.resource_id:
            filters["exclude_resource"] = (request.resource_key, request.resource_id)

        suffix = 0
        while self._route_repository.exist_by(slug=path, **filters):
            suffix += 1
            path = f"{original_path}-{suffix}"

        if suffix:
            logger.debug("resource_locator_suffixed", path=path, attempts=suffix)
        return path


__all__ = ["ResourceLocatorGenerator", "ResourceLocatorRequest"]
