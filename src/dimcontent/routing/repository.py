"""
SQLAlchemy-backed route repository.

Filters are keyword arguments; a filter that is not passed is not applied.
``site`` is special: passing ``site=None`` explicitly matches routes
without a site, ``site_or_null`` matches the site *or* no site.

Examples:
    >>> repository = RouteRepository(session)
    >>> repository.add(Route("pages", "1", "en", "/hello"))
    >>> repository.flush()
    >>> repository.exist_by(locale="en", site=None, slug="/hello")
    True

Tags:
    routing, repository, sqlalchemy, dimcontent
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import Select, and_, not_, select
from sqlalchemy.orm import Session

from dimcontent.routing.model import Route
from dimcontent.routing.updater import RouteChangedUpdater

_UNSET: Any = object()


class RouteRepository:
    def __init__(self, session: Session, updater: RouteChangedUpdater | None = None) -> None:
        self._session = session
        self._updater = updater or RouteChangedUpdater()

    @property
    def session(self) -> Session:
        return self._session

    def add(self, route: Route) -> None:
        self._session.add(route)

    def remove(self, route: Route) -> None:
        self._session.delete(route)

    # Queries never autoflush: pending slug changes must go through flush()
    # so the updater sees their old values.

    def find_one_by(self, **filters: Any) -> Route | None:
        with self._session.no_autoflush:
            return self._session.scalars(self._build_query(**filters)).unique().one_or_none()

    def find_first_by(self, sort_by: Mapping[str, str] | None = None, **filters: Any) -> Route | None:
        query = self._build_query(sort_by=sort_by, **filters).limit(1)
        with self._session.no_autoflush:
            return self._session.scalars(query).unique().first()

    def exist_by(self, **filters: Any) -> bool:
        query = self._build_query(**filters).with_only_columns(Route.id).limit(1)
        with self._session.no_autoflush:
            return self._session.execute(query).first() is not None

    def find_by(self, sort_by: Mapping[str, str] | None = None, **filters: Any) -> list[Route]:
        query = self._build_query(sort_by=sort_by, **filters)
        with self._session.no_autoflush:
            return list(self._session.scalars(query).unique())

    def flush(self) -> None:
        """Flush pending routes, then rewrite descendants and temporary ids."""
        self._updater.collect(self._session)
        self._session.flush()
        self._updater.apply(self._session)

    def commit(self) -> None:
        self.flush()
        self._session.commit()

    def rollback(self) -> None:
        self._updater.reset()
        self._session.rollback()

    def _build_query(
        self,
        *,
        site: str | None = _UNSET,
        site_or_null: str | None = _UNSET,
        locale: str | None = None,
        locales: Iterable[str] | None = None,
        slug: str | None = None,
        resource_key: str | None = None,
        resource_id: str | None = None,
        exclude_resource: tuple[str, str] | None = None,
        sort_by: Mapping[str, str] | None = None,
    ) -> Select:
        query = select(Route)

        if site is not _UNSET:
            query = query.where(Route.site.is_(None) if site is None else Route.site == site)

        if site_or_null is not _UNSET:
            query = query.where(
                Route.site.is_(None)
                if site_or_null is None
                else (Route.site == site_or_null) | Route.site.is_(None)
            )

        if locale is not None:
            query = query.where(Route.locale == locale)
        if locales is not None:
            query = query.where(Route.locale.in_(list(locales)))
        if slug is not None:
            query = query.where(Route.slug == slug)
        if resource_key is not None:
            query = query.where(Route.resource_key == resource_key)
        if resource_id is not None:
            query = query.where(Route.resource_id == str(resource_id))

        if exclude_resource is not None:
            exclude_key, exclude_id = exclude_resource
            query = query.where(
                not_(and_(Route.resource_key == exclude_key, Route.resource_id == str(exclude_id)))
            )

        for field_name, order in (sort_by or {}).items():
            column = getattr(Route, field_name)
            query = query.order_by(column.desc() if order.lower() == "desc" else column.asc())

        return query


__all__ = ["RouteRepository"]
