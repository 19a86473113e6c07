"""Ordered merge pipeline for dimension contents."""

from dimcontent.merger.base import ContentMerger, Merger
from dimcontent.merger.mergers import (
    AuditableMerger,
    AuthorMerger,
    DimensionContentMerger,
    ExcerptMerger,
    NavigationContextMerger,
    RoutableMerger,
    SeoMerger,
    ShadowMerger,
    TemplateMerger,
    WebspaceMerger,
    WorkflowMerger,
    default_mergers,
)

__all__ = [
    "ContentMerger",
    "Merger",
    "AuditableMerger",
    "AuthorMerger",
    "DimensionContentMerger",
    "ExcerptMerger",
    "NavigationContextMerger",
    "RoutableMerger",
    "SeoMerger",
    "ShadowMerger",
    "TemplateMerger",
    "WebspaceMerger",
    "WorkflowMerger",
    "default_mergers",
]
