"""Ordered pipeline mapping incoming data onto dimension contents."""

from dimcontent.datamapper.base import ContentDataMapper, DataMapper
from dimcontent.datamapper.mappers import (
    ExcerptDataMapper,
    InMemoryTagFactory,
    NavigationContextDataMapper,
    SeoDataMapper,
)
from dimcontent.datamapper.routable import RoutableDataMapper
from dimcontent.datamapper.template import TemplateDataMapper

__all__ = [
    "ContentDataMapper",
    "DataMapper",
    "ExcerptDataMapper",
    "InMemoryTagFactory",
    "NavigationContextDataMapper",
    "RoutableDataMapper",
    "SeoDataMapper",
    "TemplateDataMapper",
]
