"""Capability mergers.

Each merger is a no-op unless both target and source carry its
capability. "Set" values on the source overwrite the target; unset values
(``None``, empty collections, ``False`` flags) leave the target untouched so
an unlocalized value survives an empty localized one.
"""

from __future__ import annotations

from dimcontent.domain.models import (
    Auditable,
    Authored,
    DimensionContent,
    Excerptable,
    NavigationContextual,
    Routable,
    Seoable,
    Shadowable,
    Templated,
    Webspaced,
    Workflowed,
)


def _copy_if_set(target: object, source: object, *attributes: str) -> None:
    for attribute in attributes:
        value = getattr(source, attribute)
        if value:
            setattr(target, attribute, value)


class DimensionContentMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, DimensionContent) or not isinstance(source, DimensionContent):
            return

        if source.available_locales:
            target.available_locales = list(source.available_locales)
        if source.ghost_locale:
            target.ghost_locale = source.ghost_locale


class AuditableMerger:
    """Copies audit fields; timestamps always, users only when set."""

    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Auditable) or not isinstance(source, Auditable):
            return

        target.changed = source.changed
        target.created = source.created

        if source.creator:
            target.creator = source.creator
        if source.changer:
            target.changer = source.changer


class TemplateMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Templated) or not isinstance(source, Templated):
            return

        if source.template_key:
            target.template_key = source.template_key

        target.template_data = {**target.template_data, **source.template_data}


class ExcerptMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Excerptable) or not isinstance(source, Excerptable):
            return

        _copy_if_set(
            target,
            source,
            "excerpt_title",
            "excerpt_more",
            "excerpt_description",
            "excerpt_icon",
            "excerpt_image",
        )
        if source.excerpt_categories:
            target.excerpt_categories = list(source.excerpt_categories)
        if source.excerpt_tags:
            target.excerpt_tags = list(source.excerpt_tags)


class SeoMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Seoable) or not isinstance(source, Seoable):
            return

        _copy_if_set(
            target,
            source,
            "seo_title",
            "seo_description",
            "seo_keywords",
            "seo_canonical_url",
            "seo_no_index",
            "seo_no_follow",
            "seo_hide_in_sitemap",
        )


class RoutableMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Routable) or not isinstance(source, Routable):
            return

        if source.route is not None:
            target.route = source.route


class NavigationContextMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, NavigationContextual) or not isinstance(
            source, NavigationContextual
        ):
            return

        if source.navigation_contexts:
            target.navigation_contexts = list(source.navigation_contexts)


class AuthorMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Authored) or not isinstance(source, Authored):
            return

        _copy_if_set(target, source, "author", "authored", "last_modified")


class ShadowMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Shadowable) or not isinstance(source, Shadowable):
            return

        _copy_if_set(target, source, "shadow_locale")
        if source.shadow_locales:
            target.shadow_locales = dict(source.shadow_locales)


class WebspaceMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Webspaced) or not isinstance(source, Webspaced):
            return

        _copy_if_set(target, source, "main_webspace")
        if source.additional_webspaces:
            target.additional_webspaces = list(source.additional_webspaces)


class WorkflowMerger:
    def merge(self, target: object, source: object) -> None:
        if not isinstance(target, Workflowed) or not isinstance(source, Workflowed):
            return

        _copy_if_set(target, source, "workflow_place", "workflow_published")


def default_mergers() -> list:
    """The default registration list, in application order."""
    return [
        DimensionContentMerger(),
        AuditableMerger(),
        TemplateMerger(),
        ExcerptMerger(),
        SeoMerger(),
        RoutableMerger(),
        NavigationContextMerger(),
        AuthorMerger(),
        ShadowMerger(),
        WebspaceMerger(),
        WorkflowMerger(),
    ]


__all__ = [
    "DimensionContentMerger",
    "AuditableMerger",
    "TemplateMerger",
    "ExcerptMerger",
    "SeoMerger",
    "RoutableMerger",
    "NavigationContextMerger",
    "AuthorMerger",
    "ShadowMerger",
    "WebspaceMerger",
    "WorkflowMerger",
    "default_mergers",
]
