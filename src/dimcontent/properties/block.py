"""
Block property resolver.

A block field holds a list of blocks, each with a ``type`` naming one of
the field's block forms. Every block passes the visitor chain, then its
fields are resolved with the form of its type, recursively through the
metadata resolver.

Unknown block types are logged and fall back to the field's default
type; with ``debug=True`` they raise :class:`InvalidBlockTypeError`.

A form tagged ``global_block`` is replaced by the globally registered
block form named in the tag's ``global_block`` attribute (template type
``block``).

Tags:
    blocks, properties, resolver, dimcontent
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dimcontent.core.errors import InvalidBlockTypeError, ResolutionError
from dimcontent.core.logging import get_logger
from dimcontent.metadata.loader import FormMetadataLoader
from dimcontent.metadata.model import FieldMetadata, FormMetadata
from dimcontent.properties.visitors import BlockVisitorChain
from dimcontent.resolver.values import ContentView

if TYPE_CHECKING:
    from dimcontent.properties.metadata_resolver import MetadataResolver

logger = get_logger(__name__)

GLOBAL_BLOCK_TEMPLATE_TYPE = "block"
GLOBAL_BLOCK_TAG = "global_block"


class BlockPropertyResolver:
    type = "block"

    def __init__(
        self,
        form_metadata_loader: FormMetadataLoader,
        block_visitor_chain: BlockVisitorChain | None = None,
        debug: bool = False,
    ) -> None:
        self._form_metadata_loader = form_metadata_loader
        self._block_visitor_chain = block_visitor_chain or BlockVisitorChain()
        self._debug = debug
        self._metadata_resolver: MetadataResolver | None = None

    def set_metadata_resolver(self, metadata_resolver: MetadataResolver) -> None:
        # Set after construction, the metadata resolver needs this resolver too
        self._metadata_resolver = metadata_resolver

    def resolve(
        self,
        data: Any,
        locale: str,
        params: Mapping[str, Any] | None = None,
        metadata: FieldMetadata | None = None,
    ) -> ContentView:
        params = dict(params or {})
        if not isinstance(data, list):
            return ContentView.create([], params)
        if metadata is None:
            raise ResolutionError("Metadata must be set to resolve blocks.")
        if self._metadata_resolver is None:
            raise ResolutionError("No metadata resolver set on the block property resolver.")

        global_blocks = self._form_metadata_loader.get_metadata(GLOBAL_BLOCK_TEMPLATE_TYPE, locale)
        global_forms = global_blocks.forms if global_blocks is not None else {}

        content_views: list[ContentView] = []
        for block in data:
            if not isinstance(block, dict) or not isinstance(block.get("type"), str):
                continue
            if self._block_visitor_chain.visit(block) is None:
                continue

            block_type, form = self._get_form(block["type"], metadata)
            if form is None:
                continue

            global_block_type = self._get_global_block_type(form)
            if global_block_type and global_block_type in global_forms:
                form = global_forms[global_block_type]

            content_views.append(
                ContentView.create(
                    {
                        "type": block_type,
                        **self._metadata_resolver.resolve_items(form.items, block, locale),
                    },
                    dict(params),
                )
            )

        if metadata.min_occurs == 1 and metadata.max_occurs == 1 and content_views:
            return content_views[0]

        return ContentView.create(content_views, params)

    def _get_form(self, block_type: str, metadata: FieldMetadata) -> tuple[str, FormMetadata | None]:
        form = metadata.get_type(block_type)
        if form is not None:
            return block_type, form

        message = (
            f'Metadata type "{block_type}" in "{metadata.name}" not found, '
            f'available types are: "{", ".join(metadata.types)}"'
        )
        logger.error("block_type_not_found", block_type=block_type, field=metadata.name)
        if self._debug:
            raise InvalidBlockTypeError(message).with_context(
                block_type=block_type, field=metadata.name
            )

        default_type = metadata.default_type
        if default_type is None:
            return block_type, None
        return default_type, metadata.get_type(default_type)

    @staticmethod
    def _get_global_block_type(form: FormMetadata) -> str | None:
        for tag in form.tags:
            if tag.name == GLOBAL_BLOCK_TAG:
                return tag.attributes.get(GLOBAL_BLOCK_TAG)
        return None


__all__ = ["GLOBAL_BLOCK_TAG", "BlockPropertyResolver"]
