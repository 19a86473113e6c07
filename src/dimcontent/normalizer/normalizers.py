"""Capability normalizers; each one only touches objects with its capability."""

from __future__ import annotations

from typing import Any

from dimcontent.domain.models import (
    WORKFLOW_PLACE_PUBLISHED,
    Auditable,
    Authored,
    DimensionContent,
    Excerptable,
    Routable,
    Templated,
    Workflowed,
)
from dimcontent.normalizer.base import normalize_value


class DimensionContentNormalizer:
    """Replaces the owning resource by its id."""

    def ignored_attributes(self, obj: object) -> list[str]:
        if not isinstance(obj, DimensionContent):
            return []
        return ["resource", "merged"]

    def enhance(self, obj: object, data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, DimensionContent):
            return data
        data["id"] = obj.resource_id
        return data


class AuditableNormalizer:
    def ignored_attributes(self, obj: object) -> list[str]:
        if not isinstance(obj, Auditable):
            return []
        return ["changer", "creator"]

    def enhance(self, obj: object, data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, Auditable):
            return data
        data["changer"] = obj.changer.id if obj.changer else None
        data["creator"] = obj.creator.id if obj.creator else None
        return data


class AuthorNormalizer:
    def ignored_attributes(self, obj: object) -> list[str]:
        if not isinstance(obj, Authored):
            return []
        return ["author"]

    def enhance(self, obj: object, data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, Authored):
            return data
        data["author"] = obj.author.id if obj.author else None
        return data


class TemplateNormalizer:
    """Flattens template data into the root; root attributes win on conflicts."""

    def ignored_attributes(self, obj: object) -> list[str]:
        if not isinstance(obj, Templated):
            return []
        return ["template_data", "template_key"]

    def enhance(self, obj: object, data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, Templated):
            return data
        data = {**normalize_value(obj.template_data), **data}
        data["template"] = obj.template_key
        return data


class ExcerptNormalizer:
    def ignored_attributes(self, obj: object) -> list[str]:
        if not isinstance(obj, Excerptable):
            return []
        return ["excerpt_categories", "excerpt_tags"]

    def enhance(self, obj: object, data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, Excerptable):
            return data
        data["excerpt_categories"] = [category.id for category in obj.excerpt_categories]
        data["excerpt_tags"] = [tag.name for tag in obj.excerpt_tags]
        return data


class RoutableNormalizer:
    def ignored_attributes(self, obj: object) -> list[str]:
        if not isinstance(obj, Routable):
            return []
        return ["route"]

    def enhance(self, obj: object, data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, Routable):
            return data
        if obj.route is not None:
            data["url"] = obj.route.slug
        return data


class WorkflowNormalizer:
    def ignored_attributes(self, obj: object) -> list[str]:
        if not isinstance(obj, Workflowed):
            return []
        return ["workflow_published"]

    def enhance(self, obj: object, data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, Workflowed):
            return data
        data["published"] = normalize_value(obj.workflow_published)
        data["published_state"] = obj.workflow_place == WORKFLOW_PLACE_PUBLISHED
        return data


def default_normalizers() -> list:
    """The default registration list, in application order."""
    return [
        DimensionContentNormalizer(),
        AuditableNormalizer(),
        AuthorNormalizer(),
        TemplateNormalizer(),
        ExcerptNormalizer(),
        RoutableNormalizer(),
        WorkflowNormalizer(),
    ]


__all__ = [
    "AuditableNormalizer",
    "AuthorNormalizer",
    "DimensionContentNormalizer",
    "ExcerptNormalizer",
    "RoutableNormalizer",
    "TemplateNormalizer",
    "WorkflowNormalizer",
    "default_normalizers",
]
