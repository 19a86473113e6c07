"""
Flattens content views into plain content and view mappings.

Resolvers return one :class:`ContentView` per concern (``template``,
``excerpt``, ...). Their content may nest more content views (a block
field holds one per block). :class:`ContentViewResolver` unwraps them
into two parallel trees, ``content`` and ``view``, and collects every
resolvable it meets in a priority queue, keyed by the depth it was
found at.

Examples:
    >>> resolver = ContentViewResolver(ResolvableResourceQueueProcessor(), {})
    >>> result = resolver.resolve_content_view(ContentView.create("Hello", {"max": 5}), "title", 0)
    >>> result.content, result.view
    ({'title': 'Hello'}, {'title': {'max': 5}})

Tags:
    resolver, content-view, flattening, dimcontent
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from dimcontent.domain.models import DimensionContent
from dimcontent.resolver.queue import ResolvableQueue, ResolvableResourceQueueProcessor, add_resolvable
from dimcontent.resolver.values import ContentView, is_resolvable


@runtime_checkable
class Resolver(Protocol):
    """Builds the content view of one concern of a dimension content."""

    def resolve(
        self, dimension_content: DimensionContent, properties: Mapping[str, str] | None = None
    ) -> ContentView | None:
        ...


@dataclass
class ResolvedContentViews:
    content: dict[Any, Any] = field(default_factory=dict)
    view: dict[Any, Any] = field(default_factory=dict)
    resolvable_resources: ResolvableQueue = field(default_factory=dict)
    depth: int = 0


class ContentViewResolver:
    def __init__(
        self,
        queue_processor: ResolvableResourceQueueProcessor,
        content_resolvers: Mapping[str, Resolver],
    ) -> None:
        self._queue_processor = queue_processor
        self._content_resolvers = dict(content_resolvers)

    def get_content_views(
        self, dimension_content: DimensionContent, properties: Mapping[str, str] | None = None
    ) -> dict[str, ContentView]:
        """Run every resolver in order; resolvers returning ``None`` are skipped."""
        content_views: dict[str, ContentView] = {}
        for key, content_resolver in self._content_resolvers.items():
            content_view = content_resolver.resolve(dimension_content, properties)
            if isinstance(content_view, ContentView):
                content_views[key] = content_view
        return content_views

    def resolve_content_views(
        self, content_views: Mapping[Any, ContentView], depth: int
    ) -> ResolvedContentViews:
        result = ResolvedContentViews(depth=depth)
        for name, content_view in content_views.items():
            resolved = self.resolve_content_view(content_view, name, depth)
            result.content.update(resolved.content)
            result.view.update(resolved.view)
            result.resolvable_resources = self._queue_processor.merge_resolvable_resources(
                resolved.resolvable_resources, result.resolvable_resources
            )
        return result

    def resolve_content_view(
        self, content_view: ContentView, name: Any, depth: int
    ) -> ResolvedContentViews:
        content = content_view.content
        view = content_view.view
        result = ResolvedContentViews(depth=depth)

        if isinstance(content, (dict, list)):
            entries = content.items() if isinstance(content, dict) else list(enumerate(content))
            if all(isinstance(entry, ContentView) for _, entry in entries):
                nested = self.resolve_content_views(dict(entries), depth + 1)
                result.content[name] = self._shape(content, nested.content)
                result.view[name] = self._shape(content, nested.view)
                result.resolvable_resources = nested.resolvable_resources
                return result

            return self._resolve_mixed(content, view, name, depth)

        if is_resolvable(content):
            add_resolvable(result.resolvable_resources, content, depth)

        result.content[name] = content
        result.view[name] = view
        return result

    def _resolve_mixed(
        self, content: dict | list, view: Any, name: Any, depth: int
    ) -> ResolvedContentViews:
        result = ResolvedContentViews(depth=depth)
        is_list = isinstance(content, list)
        entries = enumerate(content) if is_list else content.items()
        resolved_content: dict | list = [] if is_list else {}
        resolved_view: dict[Any, Any] | None = None

        for key, entry in entries:
            if isinstance(entry, ContentView):
                nested = self.resolve_content_view(entry, key, depth + 1)
                self._put(resolved_content, key, nested.content[key])
                resolved_view = {**(resolved_view or {}), **nested.view}
                result.resolvable_resources = self._queue_processor.merge_resolvable_resources(
                    nested.resolvable_resources, result.resolvable_resources
                )
                continue

            if is_resolvable(entry):
                add_resolvable(result.resolvable_resources, entry, depth)

            self._put(resolved_content, key, entry)
            if isinstance(view, Mapping) and key in view:
                resolved_view = {**(resolved_view or {}), key: view[key]}

        result.content[name] = resolved_content
        # Without per entry views the root view applies
        result.view[name] = resolved_view if resolved_view is not None else view
        return result

    @staticmethod
    def _put(target: dict | list, key: Any, value: Any) -> None:
        if isinstance(target, list):
            target.append(value)
        else:
            target[key] = value

    @staticmethod
    def _shape(original: dict | list, resolved: dict[Any, Any]) -> dict | list:
        if isinstance(original, list):
            return list(resolved.values())
        return resolved


__all__ = ["ContentViewResolver", "ResolvedContentViews", "Resolver"]
