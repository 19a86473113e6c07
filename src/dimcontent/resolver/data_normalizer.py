"""
Shapes resolved content views into the final response structure.

    {
        "resource":  <content-rich entity>,
        "content":   <template fields>,
        "view":      <template field views>,
        "extension": {"excerpt": {...}, "seo": {...}, ...},
        **settings   (available_locales, localizations, template, ...)
    }

Paths are tuples of keys, e.g. ``("content", "blocks", 0)``.

Tags:
    resolver, normalizer, response, dimcontent
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dimcontent.domain.models import ContentRichEntity

TEMPLATE_KEY = "template"
SETTINGS_KEY = "settings"

Path = tuple[Any, ...]

_MISSING = object()


def get_path(data: Any, path: Path) -> Any:
    """Return the value at ``path`` or ``None`` when any segment is missing."""
    value = data
    for key in path:
        if isinstance(value, dict):
            value = value.get(key, _MISSING)
        elif isinstance(value, list) and isinstance(key, int) and -len(value) <= key < len(value):
            value = value[key]
        else:
            return None
        if value is _MISSING:
            return None
    return value


def set_path(data: dict[Any, Any], path: Path, value: Any) -> None:
    """Set ``value`` at ``path``, creating missing mappings on the way."""
    target: Any = data
    for key in path[:-1]:
        nested = get_path(target, (key,))
        if not isinstance(nested, (dict, list)):
            nested = {}
            _assign(target, key, nested)
        target = nested
    _assign(target, path[-1], value)


def _assign(target: Any, key: Any, value: Any) -> None:
    if isinstance(target, list) and isinstance(key, int):
        if key < len(target):
            target[key] = value
        else:
            target.append(value)
    else:
        target[key] = value


class ContentViewDataNormalizer:
    def normalize_content_view_data(
        self,
        content: dict[str, Any],
        view: dict[str, Any],
        resource: ContentRichEntity,
    ) -> dict[str, Any]:
        content = dict(content)
        view = dict(view)

        template_data = content.pop(TEMPLATE_KEY, None) or {}
        template_view = view.pop(TEMPLATE_KEY, None) or {}
        settings_data = content.pop(SETTINGS_KEY, None) or {}
        view.pop(SETTINGS_KEY, None)

        return {
            "resource": resource,
            "content": template_data,
            "view": template_view,
            "extension": content,
            **settings_data,
        }

    def replace_nested_content_views(self, data: dict[str, Any], path: Path = ("content",)) -> None:
        """Replace nested ``{"content": ..., "view": ...}`` nodes by their content, in place.

        The nested view moves to the matching path below the root ``view``,
        unless a view is already set there.
        """
        iterable = get_path(data, path)
        if not isinstance(iterable, (dict, list)):
            return

        path_values: dict[Path, Any] = {}
        entries = iterable.items() if isinstance(iterable, dict) else enumerate(iterable)
        for key, entry in list(entries):
            if not isinstance(entry, (dict, list)):
                continue
            if entry:
                self.replace_nested_content_views(data, path + (key,))

            if key == "view":
                value = get_path(data, path + (key,))
                view_path = ("view",) + path[1:]
                # Only the first content level maps onto the root view
                if "content" in view_path[1:]:
                    view_path = view_path[: view_path.index("content", 1)]
                if get_path(data, view_path) in (None, [], {}):
                    path_values[view_path] = value
            elif key == "content":
                path_values[path] = get_path(data, path + (key,))

        for target_path, value in path_values.items():
            set_path(data, target_path, value)

    def recursively_map_properties(
        self,
        data: dict[str, Any],
        properties: Mapping[str, Any],
        path: Path = (),
        is_root: bool = True,
    ) -> None:
        """Move every key named in ``properties`` to the root, in place.

        Dotted keys become nested paths. Non root resolutions map below
        ``content``. Views are never walked into.
        """
        iterable = data if not path else get_path(data, path)
        if not isinstance(iterable, dict):
            return

        for key, value in list(iterable.items()):
            if path and properties.get(key):
                parent = get_path(data, path)
                if not isinstance(parent, dict):
                    continue
                parent.pop(key, None)
                if not isinstance(key, str):
                    continue
                root = () if is_root else ("content",)
                set_path(data, root + tuple(key.split(".")), value)

            if isinstance(value, dict) and key != "view" and isinstance(key, str):
                self.recursively_map_properties(data, properties, path + (key,), is_root)


__all__ = ["ContentViewDataNormalizer", "get_path", "set_path"]
