"""Writes the ``url`` field of a template into the localized route."""

from __future__ import annotations

from typing import Any

from dimcontent.core.errors import DataMappingError, MetadataError
from dimcontent.domain.models import STAGE_DRAFT, DimensionContent, Routable, Templated, Webspaced
from dimcontent.metadata.loader import FormMetadataLoader
from dimcontent.metadata.model import FieldMetadata, FormMetadata
from dimcontent.routing.model import Route
from dimcontent.routing.repository import RouteRepository

ROUTE_FIELD_TYPE = "route"
ROUTE_FIELD_NAME = "url"


class RoutableDataMapper:
    def __init__(
        self, route_repository: RouteRepository, form_metadata_loader: FormMetadataLoader
    ) -> None:
        self._route_repository = route_repository
        self._form_metadata_loader = form_metadata_loader

    def map(
        self,
        unlocalized: DimensionContent,
        localized: DimensionContent,
        data: dict[str, Any],
    ) -> None:
        if not isinstance(localized, Routable):
            return
        if not isinstance(localized, Templated):
            raise DataMappingError("A routable dimension content needs to be templated as well.")
        if localized.template_key is None:
            raise DataMappingError("The localized dimension content has no template.")

        form = self._get_form(localized)
        if form is None:
            return

        field = self._get_route_field(form)
        if field is None:
            return

        locale = localized.locale
        if not locale:
            raise DataMappingError("Expected a localized dimension content with a locale.")

        if field.name != ROUTE_FIELD_NAME:
            raise MetadataError(
                f'Expected a field with the name "{ROUTE_FIELD_NAME}" but "{field.name}" given.'
            ).with_context(template_key=localized.template_key)

        if field.name not in data:
            return

        slug = data[field.name]
        if not isinstance(slug, str):
            raise DataMappingError(
                f'Expected field "{field.name}" to be a string but "{type(slug).__name__}" given.'
            )

        route = localized.route
        if route is None and localized.stage != STAGE_DRAFT:
            # Live variants reuse the route created by their draft
            route = self._route_repository.find_one_by(
                locale=locale,
                resource_key=localized.resource_key,
                resource_id=str(localized.resource_id),
            )
            if route is None:
                raise DataMappingError(
                    f'Expected that the draft dimension of "{localized.resource_key}" with id '
                    f'"{localized.resource_id}" and locale "{locale}" already created the route.'
                ).with_context(
                    resource_key=localized.resource_key,
                    resource_id=localized.resource_id,
                    locale=locale,
                )
            localized.route = route
            return

        if route is not None:
            route.slug = slug
            return

        resource = localized.resource
        route = Route.create_with_temp_id(
            localized.resource_key,
            lambda: str(resource.id),
            locale,
            slug,
            site=unlocalized.main_webspace if isinstance(unlocalized, Webspaced) else None,
        )
        localized.route = route
        self._route_repository.add(route)

    def _get_form(self, localized: Templated) -> FormMetadata | None:
        typed_metadata = self._form_metadata_loader.get_metadata(localized.template_type)
        if typed_metadata is None:
            return None
        return typed_metadata.get_form(localized.template_key)

    @staticmethod
    def _get_route_field(form: FormMetadata) -> FieldMetadata | None:
        for field in form.flat_fields().values():
            if field.type == ROUTE_FIELD_TYPE:
                return field
        return None


__all__ = ["RoutableDataMapper"]
