"""Priority queue of resolvables waiting to be loaded.

Shape: ``{priority: {loader_key: {depth: {id: {metadata_id: resolvable}}}}}``,
kept sorted by priority, highest first.
"""

from __future__ import annotations

from typing import Any

from dimcontent.resolver.values import Resolvable

ResolvableQueue = dict[int, dict[str, dict[int, dict[Any, dict[str, Resolvable]]]]]
ResourcesToLoad = dict[str, dict[Any, dict[str, Resolvable]]]
LoaderIdDepths = dict[str, dict[Any, int]]


def add_resolvable(queue: ResolvableQueue, resolvable: Resolvable, depth: int) -> None:
    """Register ``resolvable`` in ``queue`` at ``depth``, in place."""
    (
        queue.setdefault(resolvable.priority, {})
        .setdefault(resolvable.resource_loader_key, {})
        .setdefault(depth, {})
        .setdefault(resolvable.id, {})
    )[resolvable.metadata_identifier] = resolvable


class ResolvableResourceQueueProcessor:
    def merge_resolvable_resources(
        self, resolvable_resources: ResolvableQueue, existing: ResolvableQueue
    ) -> ResolvableQueue:
        """Merge ``resolvable_resources`` into ``existing`` and sort by priority, highest first."""
        for priority, by_loader in resolvable_resources.items():
            for loader_key, by_depth in by_loader.items():
                for depth, by_id in by_depth.items():
                    for resource_id, by_metadata in by_id.items():
                        (
                            existing.setdefault(priority, {})
                            .setdefault(loader_key, {})
                            .setdefault(depth, {})
                            .setdefault(resource_id, {})
                        ).update(by_metadata)

        return dict(sorted(existing.items(), key=lambda item: item[0], reverse=True))

    def extract_highest_priority_resources(
        self, queue: ResolvableQueue, max_depth: int
    ) -> tuple[ResourcesToLoad, LoaderIdDepths]:
        """Pop the highest priority from ``queue``.

        Returns the resolvables to load per loader key and id, and the depth
        each id was requested at. Entries deeper than ``max_depth`` are dropped.
        """
        if not queue:
            return {}, {}

        resources_by_loader = queue.pop(max(queue))

        resources_to_load: ResourcesToLoad = {}
        loader_id_depths: LoaderIdDepths = {}
        for loader_key, by_depth in resources_by_loader.items():
            for depth, by_id in by_depth.items():
                if depth > max_depth:
                    continue
                for resource_id, by_metadata in by_id.items():
                    resources_to_load.setdefault(loader_key, {})[resource_id] = by_metadata
                    loader_id_depths.setdefault(loader_key, {})[resource_id] = depth

        return resources_to_load, loader_id_depths


__all__ = [
    "LoaderIdDepths",
    "ResolvableQueue",
    "ResolvableResourceQueueProcessor",
    "ResourcesToLoad",
    "add_resolvable",
]
