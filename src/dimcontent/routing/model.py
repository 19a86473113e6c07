"""
Route entity: maps a slug in a locale (and optionally a site) to a resource.

Manifesto:
    A resource that is not flushed yet may not know its final id. Such a
    route is created with a *temporary* resource id (``temp::<token>``) and
    a callable producing the real id; the repository swaps the two after
    the flush. When a slug changes, the old slug is kept as a *history*
    route (resource key ``route_history``) that redirects to the new one.

Tags:
    routing, route, history, sqlalchemy, dimcontent
"""

from __future__ import annotations

import secrets
from collections.abc import Callable

from sqlalchemy import ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dimcontent.core.orm.base import DimContentBase

HISTORY_RESOURCE_KEY = "route_history"
TEMPORARY_RESOURCE_IDENTIFIER = "temp"


class Route(DimContentBase):
    __tablename__ = "routes"
    __table_args__ = (
        Index("ix_routes_lookup", "locale", "slug", "site"),
        Index("ix_routes_resource", "resource_key", "resource_id", "locale"),
    )

    HISTORY_RESOURCE_KEY = HISTORY_RESOURCE_KEY

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    site: Mapped[str | None] = mapped_column(nullable=True, active_history=True)
    locale: Mapped[str]
    slug: Mapped[str] = mapped_column(active_history=True)
    resource_key: Mapped[str]
    resource_id: Mapped[str]
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("routes.id", ondelete="SET NULL"), nullable=True
    )

    parent_route: Mapped[Route | None] = relationship(
        remote_side="Route.id", lazy="joined", join_depth=1
    )

    # Not mapped; only set on routes created with a temporary id.
    _resource_id_factory = None

    def __init__(
        self,
        resource_key: str,
        resource_id: str,
        locale: str,
        slug: str,
        site: str | None = None,
        parent_route: Route | None = None,
    ) -> None:
        super().__init__(
            resource_key=resource_key,
            resource_id=resource_id,
            locale=locale,
            slug=slug,
            site=site,
            parent_route=parent_route,
        )

    @classmethod
    def create_with_temp_id(
        cls,
        resource_key: str,
        resource_id_factory: Callable[[], str],
        locale: str,
        slug: str,
        site: str | None = None,
        parent_route: Route | None = None,
    ) -> Route:
        """Create a route whose resource id is only known after a flush.

        Example of a factory: ``lambda: str(entity.id)``.
        """
        temp_id = f"{TEMPORARY_RESOURCE_IDENTIFIER}::{secrets.token_urlsafe(16)}"
        route = cls(resource_key, temp_id, locale, slug, site, parent_route)
        route._resource_id_factory = resource_id_factory
        return route

    @property
    def is_history(self) -> bool:
        return self.resource_key == HISTORY_RESOURCE_KEY

    def has_temporary_id(self) -> bool:
        return self.resource_id.startswith(f"{TEMPORARY_RESOURCE_IDENTIFIER}::")

    def generate_real_resource_id(self) -> str:
        if self._resource_id_factory is None:
            raise ValueError("Only routes created with a temporary id can generate a real id")
        return str(self._resource_id_factory())

    def __repr__(self) -> str:
        return (
            f"Route(resource_key={self.resource_key!r}, resource_id={self.resource_id!r}, "
            f"locale={self.locale!r}, slug={self.slug!r}, site={self.site!r})"
        )


def history_resource_id(resource_key: str, resource_id: str) -> str:
    return f"{resource_key}::{resource_id}"


__all__ = [
    "HISTORY_RESOURCE_KEY",
    "Route",
    "history_resource_id",
]
