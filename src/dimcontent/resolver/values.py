"""
Value objects exchanged between property resolvers and the content resolver.

A property resolver never loads anything itself. It returns a
:class:`ContentView` whose content may contain placeholders:

- :class:`ResolvableResource`: "load id X with loader Y, then run my callback"
- :class:`SmartResolvable`: "run smart resolver Y over this filter data"

The content resolver collects the placeholders, loads them in batches by
priority and replaces them in place.

Architecture:
    ::

        ContentView(content, view, references)
        ├── content: scalar | list | dict | ResolvableResource | SmartResolvable
        │            | ContentView (nested, e.g. one per block)
        ├── view:    metadata for the frontend (ids, block settings, ...)
        └── references: [Reference(resource_id, resource_key, path)]

Examples:
    >>> view = ContentView.create_resolvables_with_references(
    ...     ["1", "2"], "pages", "pages", {"ids": ["1", "2"]}
    ... )
    >>> [ref.resource_id for ref in view.get_all_references_recursively("pages")]
    ['1', '2']

Tags:
    resolver, value-objects, resolvable, dimcontent
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from dimcontent.core.hashing import compute_json_hash

SMART_RESOLVABLE_PRIORITY = 2048


def _identity(resource: Any) -> Any:
    return resource


@dataclass(frozen=True)
class Reference:
    """A resource a content view points at, with the dotted path it was found at."""

    resource_id: int | str
    resource_key: str
    path: str = ""


@dataclass(eq=False, kw_only=True)
class ResolvableResource:
    id: int | str
    resource_loader_key: str
    priority: int = 0
    callback: Callable[[Any], Any] = _identity
    metadata: dict[str, Any] | None = None
    resource_key: str | None = None

    @property
    def metadata_identifier(self) -> str:
        """Tells apart resolvables of the same id that load with different metadata."""
        return compute_json_hash(self.metadata)

    def execute_callback(self, resource: Any) -> Any:
        return self.callback(resource)


@dataclass(eq=False, kw_only=True)
class SmartResolvable:
    data: dict[str, Any]
    resource_loader_key: str
    priority: int = SMART_RESOLVABLE_PRIORITY
    callback: Callable[[Any], Any] = _identity
    metadata: dict[str, Any] | None = None

    @property
    def id(self) -> str:
        # Every smart resolvable is unique, its identity is its id
        return str(id(self))

    @property
    def metadata_identifier(self) -> str:
        return compute_json_hash(self.metadata)

    def execute_callback(self, resource: Any) -> Any:
        return self.callback(resource)


Resolvable = ResolvableResource | SmartResolvable


@dataclass(eq=False)
class ContentView:
    content: Any
    view: Any = field(default_factory=dict)
    references: list[Reference] = field(default_factory=list)

    @classmethod
    def create(cls, content: Any, view: Any) -> ContentView:
        return cls(content, view)

    @classmethod
    def create_with_references(
        cls, content: Any, view: Any, references: Iterable[Reference]
    ) -> ContentView:
        return cls(content, view, list(references))

    @classmethod
    def create_smart_resolvable(
        cls,
        data: dict[str, Any],
        resource_loader_key: str,
        view: Any = None,
        priority: int = SMART_RESOLVABLE_PRIORITY,
    ) -> ContentView:
        resolvable = SmartResolvable(
            data=data, resource_loader_key=resource_loader_key, priority=priority
        )
        return cls(resolvable, view if view is not None else {})

    @classmethod
    def create_resolvable(
        cls,
        resource_id: int | str,
        resource_loader_key: str,
        view: Any,
        priority: int = 0,
        callback: Callable[[Any], Any] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> ContentView:
        resolvable = ResolvableResource(
            id=resource_id,
            resource_loader_key=resource_loader_key,
            priority=priority,
            callback=callback or _identity,
            metadata=metadata,
        )
        return cls(resolvable, view)

    @classmethod
    def create_resolvable_with_references(
        cls,
        resource_id: int | str,
        resource_loader_key: str,
        resource_key: str,
        view: Any,
        priority: int = 0,
        callback: Callable[[Any], Any] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> ContentView:
        content_view = cls.create_resolvable(
            resource_id, resource_loader_key, view, priority, callback, metadata
        )
        content_view.content.resource_key = resource_key
        content_view.references = [Reference(resource_id, resource_key)]
        return content_view

    @classmethod
    def create_resolvables(
        cls,
        ids: Iterable[int | str],
        resource_loader_key: str,
        view: Any,
        priority: int = 0,
        metadata: dict[str, Any] | None = None,
    ) -> ContentView:
        resolvables = [
            ResolvableResource(
                id=resource_id,
                resource_loader_key=resource_loader_key,
                priority=priority,
                metadata=metadata,
            )
            for resource_id in ids
        ]
        return cls(resolvables, view)

    @classmethod
    def create_resolvables_with_references(
        cls,
        ids: Iterable[int | str],
        resource_loader_key: str,
        resource_key: str,
        view: Any,
        priority: int = 0,
        metadata: dict[str, Any] | None = None,
    ) -> ContentView:
        ids = list(ids)
        content_view = cls.create_resolvables(ids, resource_loader_key, view, priority, metadata)
        for resolvable in content_view.content:
            resolvable.resource_key = resource_key
        content_view.references = [Reference(resource_id, resource_key) for resource_id in ids]
        return content_view

    def get_all_references_recursively(self, base_path: str = "") -> Iterator[Reference]:
        """Yield the references of this view and every nested view with their paths."""
        for reference in self.references:
            yield Reference(reference.resource_id, reference.resource_key, base_path)

        for key, value in _iter_items(self.content):
            path = f"{base_path}.{key}".lstrip(".")
            if isinstance(value, ContentView):
                yield from value.get_all_references_recursively(path)
                continue
            for sub_key, sub_value in _iter_items(value):
                if isinstance(sub_value, ContentView):
                    yield from sub_value.get_all_references_recursively(f"{path}.{sub_key}".lstrip("."))


def _iter_items(value: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(value, dict):
        return value.items()
    if isinstance(value, (list, tuple)):
        return enumerate(value)
    return ()


def is_resolvable(value: Any) -> bool:
    return isinstance(value, (ResolvableResource, SmartResolvable))


__all__ = [
    "SMART_RESOLVABLE_PRIORITY",
    "ContentView",
    "Reference",
    "Resolvable",
    "ResolvableResource",
    "SmartResolvable",
    "is_resolvable",
]
