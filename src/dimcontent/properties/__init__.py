"""Property resolvers, block visitors and the metadata resolver."""

from dimcontent.properties.base import (
    DefaultPropertyResolver,
    PropertyResolver,
    PropertyResolverProvider,
)
from dimcontent.properties.block import BlockPropertyResolver
from dimcontent.properties.metadata_resolver import MetadataResolver
from dimcontent.properties.selection import (
    SelectionPropertyResolver,
    SingleSelectionPropertyResolver,
)
from dimcontent.properties.smart_content import (
    SegmentSmartContentFiltersVisitor,
    SmartContentFiltersVisitor,
    SmartContentPropertyResolver,
)
from dimcontent.properties.visitors import (
    BlockVisitor,
    BlockVisitorChain,
    HiddenBlockVisitor,
    SegmentBlockVisitor,
    TargetGroupBlockVisitor,
)

__all__ = [
    "BlockPropertyResolver",
    "BlockVisitor",
    "BlockVisitorChain",
    "DefaultPropertyResolver",
    "HiddenBlockVisitor",
    "MetadataResolver",
    "PropertyResolver",
    "PropertyResolverProvider",
    "SegmentBlockVisitor",
    "SegmentSmartContentFiltersVisitor",
    "SelectionPropertyResolver",
    "SingleSelectionPropertyResolver",
    "SmartContentFiltersVisitor",
    "SmartContentPropertyResolver",
    "TargetGroupBlockVisitor",
]
