"""
Content resolver: a dimension content in, the complete response data out.

Manifesto:
    Rendering a page means loading everything it references: selected
    pages, snippets, smart content results, and whatever *those*
    reference. Loading one reference at a time would be slow and
    recursion without a bound never terminates. The resolver loads in
    batches, by priority, up to ``max_depth`` levels of nesting.

Architecture:
    ::

        resolve(dimension_content, properties)
          │
          ├─ 1. ContentViewResolver   resolvers → content/view + queue (depth 0)
          │
          ├─ 2. while queue:
          │       extract highest priority  (drop depth > max_depth)
          │       ResolvableResourceLoader  load per loader key
          │       ├─ ContentRichEntity → aggregate (same locale, stage)
          │       │                      resolve at depth + 1 → normalize
          │       ├─ ContentView       → flatten, enqueue its resolvables
          │       └─ anything else     → kept as loaded
          │
          ├─ 3. ResolvableResourceReplacer  placeholders → loaded values
          │
          └─ 4. ContentViewDataNormalizer   template/settings/extension split,
                                            nested views, property mapping

Examples:
    >>> container = ContentContainer(settings)
    >>> data = container.content_resolver.resolve(page_dimension_content)
    >>> data["content"]["title"]
    'Home'

Tags:
    resolver, pipeline, priority-queue, nested-content, dimcontent
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dimcontent.aggregator import ContentAggregator
from dimcontent.core.errors import ContentError
from dimcontent.core.logging import get_logger
from dimcontent.domain.models import ContentRichEntity, DimensionContent
from dimcontent.resolver.data_normalizer import ContentViewDataNormalizer
from dimcontent.resolver.loader import ResolvableResourceLoader
from dimcontent.resolver.queue import ResolvableQueue, ResolvableResourceQueueProcessor
from dimcontent.resolver.replacer import ResolvableResourceReplacer
from dimcontent.resolver.values import ContentView
from dimcontent.resolver.view_resolver import ContentViewResolver, ResolvedContentViews

logger = get_logger(__name__)


class ContentResolver:
    def __init__(
        self,
        content_view_resolver: ContentViewResolver,
        resolvable_resource_loader: ResolvableResourceLoader,
        queue_processor: ResolvableResourceQueueProcessor,
        replacer: ResolvableResourceReplacer,
        data_normalizer: ContentViewDataNormalizer,
        content_aggregator: ContentAggregator,
        max_depth: int,
    ) -> None:
        self._content_view_resolver = content_view_resolver
        self._loader = resolvable_resource_loader
        self._queue_processor = queue_processor
        self._replacer = replacer
        self._data_normalizer = data_normalizer
        self._content_aggregator = content_aggregator
        self.max_depth = max_depth

    def resolve(
        self,
        dimension_content: DimensionContent,
        properties: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        locale = dimension_content.locale
        if not isinstance(locale, str):
            raise ContentError("Only localized dimension contents can be resolved.").with_context(
                resource_key=dimension_content.resource_key,
                resource_id=dimension_content.resource_id,
            )
        stage = dimension_content.stage

        queue: ResolvableQueue = {}
        resolved_resources: dict[str, dict[Any, dict[str, Any]]] = {}

        resolved, queue = self._resolve_internal(dimension_content, 0, queue, properties)

        batches = 0
        while queue:
            resources_to_load, loader_id_depths = self._queue_processor.extract_highest_priority_resources(
                queue, self.max_depth
            )
            loaded_resources = self._loader.load_resources(resources_to_load, locale)
            batches += 1

            for loader_key, resources in loaded_resources.items():
                for resource_id, by_metadata in resources.items():
                    depth = loader_id_depths[loader_key][resource_id]
                    for metadata_identifier, resource in by_metadata.items():
                        resolvable = resources_to_load[loader_key][resource_id][metadata_identifier]
                        value, queue = self._resolve_loaded(
                            resource, resolvable.metadata, depth, locale, stage, queue
                        )
                        resolved_resources.setdefault(loader_key, {}).setdefault(resource_id, {})[
                            metadata_identifier
                        ] = value

        # The initial resolution ran at depth 0
        content = self._replacer.replace_resolvable_resources_with_resolved_values(
            resolved.content, resolved_resources, 1, self.max_depth
        )

        data = self._data_normalizer.normalize_content_view_data(
            content, resolved.view, dimension_content.resource
        )
        self._data_normalizer.replace_nested_content_views(data, ("content",))

        if properties:
            self._data_normalizer.recursively_map_properties(data, properties)

        logger.debug(
            "dimension_content_resolved",
            resource_key=dimension_content.resource_key,
            resource_id=dimension_content.resource_id,
            locale=locale,
            stage=stage,
            batches=batches,
        )
        return data

    def _resolve_loaded(
        self,
        resource: Any,
        metadata: Mapping[str, Any] | None,
        depth: int,
        locale: str,
        stage: str,
        queue: ResolvableQueue,
    ) -> tuple[Any, ResolvableQueue]:
        if isinstance(resource, ContentRichEntity):
            child = self._content_aggregator.aggregate(resource, {"locale": locale, "stage": stage})
            properties = (metadata or {}).get("properties")
            resolved, queue = self._resolve_internal(child, depth + 1, queue, properties)

            value = self._data_normalizer.normalize_content_view_data(
                resolved.content, resolved.view, resource
            )
            if properties:
                self._data_normalizer.recursively_map_properties(value, properties, is_root=False)
            return value, queue

        if isinstance(resource, ContentView):
            resolved = self._content_view_resolver.resolve_content_view(resource, "0", depth)
            view = resolved.view["0"]
            # Per item views share one structure, the first one stands for all
            if isinstance(view, list) and view:
                view = view[0]
            queue = self._queue_processor.merge_resolvable_resources(
                resolved.resolvable_resources, queue
            )
            return {"content": resolved.content["0"], "view": view}, queue

        return resource, queue

    def _resolve_internal(
        self,
        dimension_content: DimensionContent,
        depth: int,
        queue: ResolvableQueue,
        properties: Mapping[str, str] | None = None,
    ) -> tuple[ResolvedContentViews, ResolvableQueue]:
        content_views = self._content_view_resolver.get_content_views(dimension_content, properties)
        resolved = self._content_view_resolver.resolve_content_views(content_views, depth)
        queue = self._queue_processor.merge_resolvable_resources(resolved.resolvable_resources, queue)
        return resolved, queue


__all__ = ["ContentResolver"]
