"""Resource loaders and smart resolvers used by the content resolver."""

from dimcontent.resources.base import ContentResourceLoader, ResourceLoader, ResourceLoaderProvider
from dimcontent.resources.cached import CachedResourceLoader
from dimcontent.resources.smart import (
    SMART_CONTENT_KEY,
    SmartContentProvider,
    SmartContentSmartResolver,
    SmartResolver,
    SmartResolverProvider,
)

__all__ = [
    "SMART_CONTENT_KEY",
    "CachedResourceLoader",
    "ContentResourceLoader",
    "ResourceLoader",
    "ResourceLoaderProvider",
    "SmartContentProvider",
    "SmartContentSmartResolver",
    "SmartResolver",
    "SmartResolverProvider",
]
