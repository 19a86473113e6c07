"""
Keeps the route tree consistent when a slug changes.

Manifesto:
    Children inherit their parent's slug as a prefix (``/news`` owns
    ``/news/article``). Renaming a parent therefore has to rewrite every
    descendant and leave a *history* route behind for each old slug, so
    that old links keep redirecting. Doing this row by row through the ORM
    would load whole subtrees; instead the changes are collected before the
    flush and applied afterwards with a few set-based statements.

Architecture:
    ::

        RouteRepository.flush()
            ├── updater.collect(session)   slug changes + temp-id routes
            ├── session.flush()
            └── updater.apply(session)
                  ├── temp ids  -> real ids            (UPDATE)
                  ├── history route for old slug       (INSERT)
                  ├── child/grandchild slugs rewritten  (SELECT + UPDATE)
                  └── history routes for descendants   (INSERT)

Tags:
    routing, history, sqlalchemy, tree, dimcontent
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import String, and_, func, insert, literal, or_, select, update
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session

from dimcontent.core.logging import get_logger
from dimcontent.routing.model import HISTORY_RESOURCE_KEY, Route, history_resource_id

logger = get_logger(__name__)


@dataclass
class _RouteChange:
    route: Route
    old_slug: str
    old_site: str | None


class RouteChangedUpdater:
    """Collects route changes before a flush and applies them after it."""

    def __init__(self) -> None:
        self._route_changes: dict[int, _RouteChange] = {}
        self._routes_with_temp_ids: list[Route] = []

    def collect(self, session: Session) -> None:
        for obj in session.new:
            if isinstance(obj, Route) and obj.has_temporary_id():
                self._routes_with_temp_ids.append(obj)

        for obj in session.dirty:
            if not isinstance(obj, Route) or obj.id is None:
                continue

            state = sa_inspect(obj)
            slug_history = state.attrs.slug.history
            site_history = state.attrs.site.history

            old_slug = slug_history.deleted[0] if slug_history.deleted else obj.slug
            old_site = site_history.deleted[0] if site_history.deleted else obj.site
            if old_slug == obj.slug:
                continue

            # Keep the first old slug when a route changes twice before a flush
            if obj.id not in self._route_changes:
                self._route_changes[obj.id] = _RouteChange(obj, old_slug, old_site)

    def apply(self, session: Session) -> None:
        if not self._route_changes and not self._routes_with_temp_ids:
            return

        routes = Route.__table__

        for route in self._routes_with_temp_ids:
            temp_id = route.resource_id
            real_id = route.generate_real_resource_id()
            session.execute(
                update(routes).where(routes.c.resource_id == temp_id).values(resource_id=real_id)
            )
            logger.debug("route_temp_id_replaced", temp_id=temp_id, resource_id=real_id)
        self._routes_with_temp_ids = []

        for change in self._route_changes.values():
            self._apply_route_change(session, change)
        self._route_changes = {}

        session.expire_all()

    def _apply_route_change(self, session: Session, change: _RouteChange) -> None:
        routes = Route.__table__
        route = change.route
        old_slug = change.old_slug
        new_slug = route.slug
        locale = route.locale
        site = route.site
        old_slug_prefix = f"{old_slug}/%"

        parent = routes.alias("parent")
        child = routes.alias("child")
        site_clause = parent.c.site == site if site is not None else parent.c.site.is_(None)

        # Direct children hang below the already updated slug, grandchildren
        # below a parent that still carries the old prefix
        descendants = session.execute(
            select(
                parent.c.id.label("parent_id"),
                child.c.site,
                child.c.slug,
                child.c.resource_key,
                child.c.resource_id,
            )
            .select_from(parent.join(child, child.c.parent_id == parent.c.id))
            .where(
                site_clause,
                parent.c.locale == locale,
                child.c.locale == locale,
                or_(parent.c.slug == new_slug, parent.c.slug.like(old_slug_prefix)),
                child.c.slug.like(old_slug_prefix),
            )
        ).all()

        parent_ids = list(dict.fromkeys(row.parent_id for row in descendants if row.parent_id))

        self._insert_history_route(
            session,
            resource_id=history_resource_id(route.resource_key, route.resource_id),
            locale=locale,
            slug=old_slug,
            site=change.old_site,
        )

        if parent_ids:
            session.execute(
                update(routes)
                .where(
                    and_(
                        routes.c.parent_id.in_(parent_ids),
                        routes.c.locale == locale,
                        routes.c.slug.like(old_slug_prefix),
                    )
                )
                .values(
                    slug=literal(new_slug, String)
                    + func.substr(routes.c.slug, len(old_slug) + 1, type_=String)
                )
            )

        for row in descendants:
            self._insert_history_route(
                session,
                resource_id=history_resource_id(row.resource_key, row.resource_id),
                locale=locale,
                slug=row.slug,
                site=row.site,
            )

        logger.debug(
            "route_slug_changed",
            old_slug=old_slug,
            new_slug=new_slug,
            locale=locale,
            descendants=len(descendants),
        )

    @staticmethod
    def _insert_history_route(
        session: Session, *, resource_id: str, locale: str, slug: str, site: str | None
    ) -> None:
        # History routes never get a parent, they are never updated
        session.execute(
            insert(Route.__table__).values(
                resource_key=HISTORY_RESOURCE_KEY,
                resource_id=resource_id,
                locale=locale,
                slug=slug,
                site=site,
                parent_id=None,
            )
        )

    def reset(self) -> None:
        self._route_changes = {}
        self._routes_with_temp_ids = []


__all__ = ["RouteChangedUpdater"]
