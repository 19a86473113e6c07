"""Content resolution: content views, resolvables, loading, replacing and normalizing."""

from dimcontent.resolver.values import (
    ContentView,
    Reference,
    ResolvableResource,
    SmartResolvable,
)
from dimcontent.resolver.queue import ResolvableResourceQueueProcessor
from dimcontent.resolver.data_normalizer import ContentViewDataNormalizer
from dimcontent.resolver.loader import ResolvableResourceLoader
from dimcontent.resolver.replacer import ResolvableResourceReplacer
from dimcontent.resolver.view_resolver import ContentViewResolver, Resolver
from dimcontent.resolver.resolvers import (
    DimensionContentResolver,
    ExcerptResolver,
    SeoResolver,
    SettingsResolver,
    TemplateResolver,
)
from dimcontent.resolver.content_resolver import ContentResolver

__all__ = [
    "ContentResolver",
    "ContentView",
    "ContentViewDataNormalizer",
    "ContentViewResolver",
    "DimensionContentResolver",
    "ExcerptResolver",
    "Reference",
    "ResolvableResource",
    "ResolvableResourceLoader",
    "ResolvableResourceQueueProcessor",
    "ResolvableResourceReplacer",
    "Resolver",
    "SeoResolver",
    "SettingsResolver",
    "SmartResolvable",
    "TemplateResolver",
]
