"""Smart content property: builds the filters a smart content provider runs later."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from dimcontent.core.errors import InvalidOptionError
from dimcontent.metadata.model import FieldMetadata
from dimcontent.properties.visitors import SEGMENT_PARAMETER
from dimcontent.resolver.values import ContentView
from dimcontent.resources.smart import SMART_CONTENT_KEY
from dimcontent.routing.generator import RequestContext

_OPERATORS = ("AND", "OR")


@runtime_checkable
class SmartContentFiltersVisitor(Protocol):
    def visit(
        self, data: Mapping[str, Any], filters: dict[str, Any], parameters: Mapping[str, Any]
    ) -> dict[str, Any]:
        ...


class SegmentSmartContentFiltersVisitor:
    """Adds the segment of the current request to the filters."""

    def __init__(self, request_context: RequestContext) -> None:
        self._request_context = request_context

    def visit(
        self, data: Mapping[str, Any], filters: dict[str, Any], parameters: Mapping[str, Any]
    ) -> dict[str, Any]:
        segment = self._request_context.get_parameter(SEGMENT_PARAMETER)
        if segment is not None:
            filters["segment_key"] = segment
        return filters


def _split(value: str) -> list[str]:
    return [part for part in value.split(",") if part]


class SmartContentPropertyResolver:
    type = SMART_CONTENT_KEY

    def __init__(
        self,
        request_context: RequestContext,
        filters_visitors: Iterable[SmartContentFiltersVisitor] = (),
    ) -> None:
        self._request_context = request_context
        self._filters_visitors = list(filters_visitors)

    def resolve(
        self,
        data: Any,
        locale: str,
        params: Mapping[str, Any] | None = None,
        metadata: FieldMetadata | None = None,
    ) -> ContentView:
        params = dict(params or {})
        if isinstance(data, list) and not data:
            data = {}
        if not isinstance(data, dict):
            return ContentView.create([], params)

        parameters: dict[str, Any] = {
            "provider": "pages",
            "locale": locale,
            "page_parameter": "p",
            "tags_parameter": "tags",
            "types_parameter": "types",
            "categories_parameter": "categories",
            "website_tags_operator": "OR",
            "website_categories_operator": "OR",
            "exclude_duplicates": False,
            **(params.get("properties") or {}),
        }
        self._validate_parameters(parameters)

        request = self._request_context
        filters: dict[str, Any] = {
            "categories": data.get("categories") or [],
            "category_operator": str(data.get("category_operator") or "OR").upper(),
            "website_categories": _split(request.get_query(parameters["categories_parameter"])),
            "website_category_operator": str(parameters["website_categories_operator"]).upper(),
            "tags": data.get("tags") or [],
            "tag_operator": str(data.get("tag_operator") or "OR").upper(),
            "website_tags": _split(request.get_query(parameters["tags_parameter"])),
            "website_tag_operator": str(parameters["website_tags_operator"]).upper(),
            "types": data.get("types") or [],
            "types_operator": "OR",
            "locale": parameters["locale"],
            "data_source": data.get("data_source"),
            "limit": data.get("limit_result"),
            "page": self._page(request.get_query(parameters["page_parameter"], "1")),
            "max_per_page": parameters.get("max_per_page"),
            "include_sub_folders": data.get("include_sub_folders") or False,
            "exclude_duplicates": parameters["exclude_duplicates"] in (True, "true"),
        }
        sort_by = data.get("sort_by")
        sort_bys = {sort_by: data.get("sort_method") or "ASC"} if sort_by else None

        for visitor in self._filters_visitors:
            filters = visitor.visit(data, filters, parameters)

        return ContentView.create_smart_resolvable(
            {
                "value": data,
                "filters": filters,
                "sort_bys": sort_bys,
                "parameters": parameters,
            },
            SMART_CONTENT_KEY,
            view={},
        )

    @staticmethod
    def _page(value: str) -> int:
        try:
            return int(value)
        except ValueError:
            return 1

    @staticmethod
    def _validate_parameters(parameters: Mapping[str, Any]) -> None:
        provider = parameters.get("provider")
        if not provider:
            raise InvalidOptionError('The "provider" parameter is required.')
        if not isinstance(provider, str):
            raise InvalidOptionError('The "provider" parameter must be a string.')

        for operator in ("website_tags_operator", "website_categories_operator"):
            value = parameters.get(operator)
            if value and str(value).upper() not in _OPERATORS:
                raise InvalidOptionError(f'The "{operator}" option must be either "AND" or "OR".')


__all__ = [
    "SegmentSmartContentFiltersVisitor",
    "SmartContentFiltersVisitor",
    "SmartContentPropertyResolver",
]
