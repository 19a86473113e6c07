"""Selection properties: ids of other resources, loaded later by the content resolver."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dimcontent.metadata.model import FieldMetadata
from dimcontent.resolver.values import ContentView

SELECTION_PRIORITY = 150


class SelectionPropertyResolver:
    """Resolves a list of ids, e.g. a ``page_selection`` field.

    The ``resource_loader`` option overrides the loader key.
    """

    def __init__(
        self,
        type: str,
        resource_loader_key: str,
        resource_key: str | None = None,
        priority: int = SELECTION_PRIORITY,
    ) -> None:
        self.type = type
        self.resource_loader_key = resource_loader_key
        self.resource_key = resource_key
        self.priority = priority

    def resolve(
        self,
        data: Any,
        locale: str,
        params: Mapping[str, Any] | None = None,
        metadata: FieldMetadata | None = None,
    ) -> ContentView:
        params = dict(params or {})
        if not isinstance(data, list) or not data:
            return ContentView.create([], {"ids": [], **params})

        loader_key = params.get("resource_loader", self.resource_loader_key)
        view = {"ids": data, **params}
        if self.resource_key:
            return ContentView.create_resolvables_with_references(
                data, loader_key, self.resource_key, view, priority=self.priority
            )
        return ContentView.create_resolvables(data, loader_key, view, priority=self.priority)


class SingleSelectionPropertyResolver:
    """Resolves one id, e.g. a ``single_page_selection`` field.

    The ``properties`` option limits which properties of the selected
    content are resolved.
    """

    def __init__(
        self,
        type: str,
        resource_loader_key: str,
        resource_key: str | None = None,
        priority: int = SELECTION_PRIORITY,
    ) -> None:
        self.type = type
        self.resource_loader_key = resource_loader_key
        self.resource_key = resource_key
        self.priority = priority

    def resolve(
        self,
        data: Any,
        locale: str,
        params: Mapping[str, Any] | None = None,
        metadata: FieldMetadata | None = None,
    ) -> ContentView:
        params = dict(params or {})
        if not isinstance(data, (str, int)) or isinstance(data, bool):
            return ContentView.create(None, {"id": None, **params})

        loader_key = params.get("resource_loader", self.resource_loader_key)
        view = {"id": data, **params}
        resolvable_metadata = {"properties": params.get("properties")}
        if self.resource_key:
            return ContentView.create_resolvable_with_references(
                data,
                loader_key,
                self.resource_key,
                view,
                priority=self.priority,
                metadata=resolvable_metadata,
            )
        return ContentView.create_resolvable(
            data, loader_key, view, priority=self.priority, metadata=resolvable_metadata
        )


__all__ = ["SELECTION_PRIORITY", "SelectionPropertyResolver", "SingleSelectionPropertyResolver"]
