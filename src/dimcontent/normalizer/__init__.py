"""Ordered normalization pipeline for dimension contents."""

from dimcontent.normalizer.base import ContentNormalizer, Normalizer, normalize_value
from dimcontent.normalizer.normalizers import (
    AuditableNormalizer,
    AuthorNormalizer,
    DimensionContentNormalizer,
    ExcerptNormalizer,
    RoutableNormalizer,
    TemplateNormalizer,
    WorkflowNormalizer,
    default_normalizers,
)

__all__ = [
    "AuditableNormalizer",
    "AuthorNormalizer",
    "ContentNormalizer",
    "DimensionContentNormalizer",
    "ExcerptNormalizer",
    "Normalizer",
    "RoutableNormalizer",
    "TemplateNormalizer",
    "WorkflowNormalizer",
    "default_normalizers",
    "normalize_value",
]
