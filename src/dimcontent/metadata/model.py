"""
Form metadata: the structure of templates, excerpt and seo forms.

A *form* is an ordered mapping of *items*. An item is either a field
(``FieldMetadata``) or a section grouping more items
(``SectionMetadata``). Block fields carry one form per block type.

Architecture:
    ::

        TypedFormMetadata (per template type, e.g. "page")
        └── forms: {"default": FormMetadata, "homepage": FormMetadata}
            └── items: {"title": FieldMetadata, "highlight": SectionMetadata}
                                                 └── items: {...}

Tags:
    metadata, forms, templates, dimcontent
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(kw_only=True)
class TagMetadata:
    name: str
    priority: int | None = None
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(kw_only=True)
class OptionMetadata:
    TYPE_STRING = "string"
    TYPE_COLLECTION = "collection"

    name: str | int
    value: Any = None
    type: str = TYPE_STRING


@dataclass(kw_only=True)
class ItemMetadata:
    name: str
    type: str
    title: str | dict[str, str] | None = None
    tags: list[TagMetadata] = field(default_factory=list)

    def get_tag(self, name: str) -> TagMetadata | None:
        for tag in self.tags:
            if tag.name == name:
                return tag
        return None

    def has_tag(self, name: str) -> bool:
        return self.get_tag(name) is not None


@dataclass(kw_only=True)
class FieldMetadata(ItemMetadata):
    type: str = "text_line"
    multilingual: bool = True
    options: list[OptionMetadata] = field(default_factory=list)
    types: dict[str, FormMetadata] = field(default_factory=dict)
    default_type: str | None = None
    min_occurs: int | None = None
    max_occurs: int | None = None

    def get_option(self, name: str | int) -> OptionMetadata | None:
        for option in self.options:
            if option.name == name:
                return option
        return None

    def get_type(self, name: str) -> FormMetadata | None:
        return self.types.get(name)


@dataclass(kw_only=True)
class SectionMetadata(ItemMetadata):
    type: str = "section"
    items: dict[str, ItemMetadata] = field(default_factory=dict)


@dataclass(kw_only=True)
class FormMetadata:
    key: str
    title: str | dict[str, str] | None = None
    items: dict[str, ItemMetadata] = field(default_factory=dict)
    tags: list[TagMetadata] = field(default_factory=list)

    def flat_fields(self) -> dict[str, FieldMetadata]:
        """All fields of the form, with sections flattened away."""
        return _flatten(self.items)

    def get_title(self, locale: str | None = None) -> str | None:
        if isinstance(self.title, dict):
            return self.title.get(locale) if locale else next(iter(self.title.values()), None)
        return self.title


@dataclass(kw_only=True)
class TypedFormMetadata:
    forms: dict[str, FormMetadata] = field(default_factory=dict)
    default_type: str | None = None

    def get_form(self, key: str) -> FormMetadata | None:
        return self.forms.get(key)


def _flatten(items: dict[str, ItemMetadata]) -> dict[str, FieldMetadata]:
    fields: dict[str, FieldMetadata] = {}
    for name, item in items.items():
        if isinstance(item, SectionMetadata):
            fields.update(_flatten(item.items))
        elif isinstance(item, FieldMetadata):
            fields[name] = item
    return fields


__all__ = [
    "FieldMetadata",
    "FormMetadata",
    "ItemMetadata",
    "OptionMetadata",
    "SectionMetadata",
    "TagMetadata",
    "TypedFormMetadata",
]
