"""Form metadata model and YAML loader."""

from dimcontent.metadata.loader import FormMetadataLoader
from dimcontent.metadata.model import (
    FieldMetadata,
    FormMetadata,
    ItemMetadata,
    OptionMetadata,
    SectionMetadata,
    TagMetadata,
    TypedFormMetadata,
)
from dimcontent.metadata.yaml_spec import FormSpec

__all__ = [
    "FieldMetadata",
    "FormMetadata",
    "FormMetadataLoader",
    "FormSpec",
    "ItemMetadata",
    "OptionMetadata",
    "SectionMetadata",
    "TagMetadata",
    "TypedFormMetadata",
]
