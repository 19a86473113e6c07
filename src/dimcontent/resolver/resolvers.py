"""
Resolvers: one content view per concern of a dimension content.

    ┌────────────────────┬──────────────────────────────────────────────┐
    │ key                │ resolver                                     │
    ├────────────────────┼──────────────────────────────────────────────┤
    │ dimension_content  │ DimensionContentResolver (``object.`` paths) │
    │ template           │ TemplateResolver  (template fields)          │
    │ excerpt            │ ExcerptResolver   (``content_excerpt`` form) │
    │ seo                │ SeoResolver       (``content_seo`` form)     │
    │ settings           │ SettingsResolver  (locales, urls, author...) │
    └────────────────────┴──────────────────────────────────────────────┘

``properties`` maps output keys to source paths, e.g.
``{"title": "title", "excerpt_title": "excerpt.title", "id": "object.id"}``.
Each resolver only picks the properties it owns. ``None`` resolves
everything.

Tags:
    resolver, templates, excerpt, seo, settings, dimcontent
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dimcontent.core.errors import MetadataError, TemplateNotFoundError
from dimcontent.domain.models import (
    Authored,
    DimensionContent,
    Excerptable,
    Routable,
    Seoable,
    Shadowable,
    Templated,
    User,
    Webspaced,
)
from dimcontent.metadata.loader import FormMetadataLoader
from dimcontent.metadata.model import ItemMetadata
from dimcontent.resolver.values import ContentView, Reference
from dimcontent.routing.generator import SITE_PARAMETER, RouteGenerator
from dimcontent.routing.repository import RouteRepository

if TYPE_CHECKING:
    from dimcontent.properties.metadata_resolver import MetadataResolver

_MISSING = object()


def _read_path(obj: Any, path: str) -> Any:
    value = obj
    for segment in path.split("."):
        if isinstance(value, Mapping):
            value = value.get(segment, _MISSING)
        else:
            value = getattr(value, segment, _MISSING)
        if value is _MISSING:
            return _MISSING
    return value


def _filter_by_properties(
    items: Mapping[str, ItemMetadata],
    data: Mapping[str, Any],
    properties: Mapping[str, str],
) -> tuple[dict[str, ItemMetadata], dict[str, Any]]:
    filtered_items: dict[str, ItemMetadata] = {}
    filtered_data: dict[str, Any] = {}
    for key, source in properties.items():
        if source in items:
            filtered_items[key] = items[source]
        if source in data:
            filtered_data[key] = data[source]
    return filtered_items, filtered_data


class DimensionContentResolver:
    PREFIX = "object."
    DEFAULT_PROPERTIES = {"id": "object.id"}

    def resolve(
        self, dimension_content: DimensionContent, properties: Mapping[str, str] | None = None
    ) -> ContentView | None:
        if properties is not None and not properties:
            return None

        merged = {**self.DEFAULT_PROPERTIES, **(properties or {})}
        data: dict[str, Any] = {}
        for key, source in merged.items():
            if not isinstance(source, str) or not source.startswith(self.PREFIX):
                continue
            path = source[len(self.PREFIX) :]
            # The dimension content itself has no id, it is the resource's
            value = _read_path(dimension_content, "resource_id" if path == "id" else path)
            if value is not _MISSING:
                data[key] = value

        return ContentView.create(data, {})


class TemplateResolver:
    def __init__(
        self, form_metadata_loader: FormMetadataLoader, metadata_resolver: MetadataResolver
    ) -> None:
        self._form_metadata_loader = form_metadata_loader
        self._metadata_resolver = metadata_resolver

    def resolve(
        self, dimension_content: DimensionContent, properties: Mapping[str, str] | None = None
    ) -> ContentView | None:
        if not isinstance(dimension_content, Templated):
            return None

        locale = dimension_content.locale or ""
        template_key = dimension_content.template_key
        typed_metadata = self._form_metadata_loader.get_metadata(
            dimension_content.template_type, locale
        )
        forms = typed_metadata.forms if typed_metadata is not None else {}
        form = forms.get(template_key) if template_key else None
        if form is None:
            raise TemplateNotFoundError(str(template_key), sorted(forms)).with_context(
                resource_key=dimension_content.resource_key,
                resource_id=dimension_content.resource_id,
                locale=locale,
            )

        items: Mapping[str, ItemMetadata] = form.items
        data: Mapping[str, Any] = dimension_content.template_data
        if properties is not None:
            items, data = _filter_by_properties(items, data, properties)

        return ContentView.create(self._metadata_resolver.resolve_items(items, data, locale), {})


class _PrefixedFormResolver:
    """Resolves a standalone form whose fields share a prefix (``excerpt_``, ``seo_``)."""

    capability: type
    form_key: str
    field_prefix: str
    property_prefix: str
    excluded_types: tuple[str, ...] = ()

    def __init__(
        self, form_metadata_loader: FormMetadataLoader, metadata_resolver: MetadataResolver
    ) -> None:
        self._form_metadata_loader = form_metadata_loader
        self._metadata_resolver = metadata_resolver

    def resolve(
        self, dimension_content: DimensionContent, properties: Mapping[str, str] | None = None
    ) -> ContentView | None:
        if not isinstance(dimension_content, self.capability):
            return None

        locale = dimension_content.locale or ""
        form = self._form_metadata_loader.get_form(self.form_key, locale)
        if form is None:
            raise MetadataError(f'Form "{self.form_key}" not found.').with_context(
                form_key=self.form_key
            )

        items: Mapping[str, ItemMetadata] = {
            name: item for name, item in form.items.items() if item.type not in self.excluded_types
        }
        data: Mapping[str, Any] = self.get_data(dimension_content)
        if properties is not None:
            properties = self._own_properties(properties)
            items, data = _filter_by_properties(items, data, properties)

        resolved = self._metadata_resolver.resolve_items(items, data, locale)
        return ContentView.create(self._normalize_keys(resolved, properties), {})

    def get_data(self, dimension_content: Any) -> dict[str, Any]:
        raise NotImplementedError

    def _own_properties(self, properties: Mapping[str, str]) -> dict[str, str]:
        return {
            key: self.field_prefix + str(source)[len(self.property_prefix) :]
            for key, source in properties.items()
            if str(source).startswith(self.property_prefix)
        }

    def _normalize_keys(
        self, resolved: dict[str, Any], properties: Mapping[str, str] | None
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, item in resolved.items():
            if properties is not None and key in properties:
                result[key] = item
            elif key.startswith(self.field_prefix):
                result[key[len(self.field_prefix) :]] = item
            else:
                result[key] = item
        return result


class ExcerptResolver(_PrefixedFormResolver):
    capability = Excerptable
    form_key = "content_excerpt"
    field_prefix = "excerpt_"
    property_prefix = "excerpt."

    def get_data(self, dimension_content: Excerptable) -> dict[str, Any]:
        return {
            "excerpt_title": dimension_content.excerpt_title,
            "excerpt_more": dimension_content.excerpt_more,
            "excerpt_description": dimension_content.excerpt_description,
            "excerpt_categories": [c.id for c in dimension_content.excerpt_categories],
            "excerpt_tags": [t.name for t in dimension_content.excerpt_tags],
            "excerpt_icon": dimension_content.excerpt_icon,
            "excerpt_image": dimension_content.excerpt_image,
        }


class SeoResolver(_PrefixedFormResolver):
    capability = Seoable
    form_key = "content_seo"
    field_prefix = "seo_"
    property_prefix = "seo."
    excluded_types = ("search_result",)

    def get_data(self, dimension_content: Seoable) -> dict[str, Any]:
        return {
            "seo_title": dimension_content.seo_title,
            "seo_description": dimension_content.seo_description,
            "seo_keywords": dimension_content.seo_keywords,
            "seo_canonical_url": dimension_content.seo_canonical_url,
            "seo_no_index": dimension_content.seo_no_index,
            "seo_no_follow": dimension_content.seo_no_follow,
            "seo_hide_in_sitemap": dimension_content.seo_hide_in_sitemap,
        }


class SettingsResolver:
    """Locales, localized urls, webspace, template, author and shadow settings."""

    def __init__(
        self,
        route_generator: RouteGenerator | None = None,
        route_repository: RouteRepository | None = None,
    ) -> None:
        self._route_generator = route_generator
        self._route_repository = route_repository

    def resolve(
        self, dimension_content: DimensionContent, properties: Mapping[str, str] | None = None
    ) -> ContentView | None:
        result: dict[str, Any] = {
            "available_locales": dimension_content.available_locales or [],
        }

        if isinstance(dimension_content, Routable) and isinstance(dimension_content, Templated):
            result.update(self._localizations(dimension_content))

        if isinstance(dimension_content, Webspaced):
            result["main_webspace"] = dimension_content.main_webspace

        if isinstance(dimension_content, Templated):
            result["template"] = dimension_content.template_key

        if isinstance(dimension_content, Authored):
            author_id = dimension_content.author.id if dimension_content.author else None
            result["author"] = ContentView.create_with_references(
                author_id,
                {},
                [Reference(author_id, User.RESOURCE_KEY)] if author_id else [],
            )
            result["authored"] = dimension_content.authored
            result["last_modified"] = dimension_content.last_modified

        if isinstance(dimension_content, Shadowable):
            result["shadow_base_locale"] = dimension_content.shadow_locale

        return ContentView.create_with_references(result, {}, [])

    def _localizations(self, dimension_content: DimensionContent) -> dict[str, Any]:
        available_locales = dimension_content.available_locales
        if available_locales is None or self._route_repository is None or self._route_generator is None:
            return {}

        routes = self._route_repository.find_by(
            locales=available_locales,
            resource_key=dimension_content.resource_key,
            resource_id=str(dimension_content.resource_id),
        )

        request_context = self._route_generator.request_context
        localizations: dict[str, dict[str, Any]] = {}
        for route in routes:
            if request_context.get_parameter(SITE_PARAMETER) is None:
                request_context.set_parameter(SITE_PARAMETER, route.site)

            url = self._route_generator.generate(route.slug, route.locale, route.site)
            localizations[route.locale] = {
                "locale": route.locale,
                "url": url,
                "alternate": url != "",
            }

        return {"localizations": dict(sorted(localizations.items()))}


__all__ = [
    "DimensionContentResolver",
    "ExcerptResolver",
    "SeoResolver",
    "SettingsResolver",
    "TemplateResolver",
]
