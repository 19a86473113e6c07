"""Property resolver fixtures wired like the container does it."""

import pytest

from dimcontent.metadata import FormMetadataLoader
from dimcontent.properties import (
    BlockPropertyResolver,
    BlockVisitorChain,
    DefaultPropertyResolver,
    HiddenBlockVisitor,
    MetadataResolver,
    PropertyResolverProvider,
    SelectionPropertyResolver,
    SingleSelectionPropertyResolver,
)


@pytest.fixture
def block_resolver(form_metadata_loader: FormMetadataLoader) -> BlockPropertyResolver:
    return BlockPropertyResolver(form_metadata_loader, BlockVisitorChain([HiddenBlockVisitor()]))


@pytest.fixture
def metadata_resolver(block_resolver: BlockPropertyResolver) -> MetadataResolver:
    provider = PropertyResolverProvider(
        [
            DefaultPropertyResolver(),
            block_resolver,
            SelectionPropertyResolver("page_selection", "pages", "pages"),
            SingleSelectionPropertyResolver("single_snippet_selection", "snippets", "snippets"),
        ]
    )
    resolver = MetadataResolver(provider)
    block_resolver.set_metadata_resolver(resolver)
    return resolver
