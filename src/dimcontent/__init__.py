"""
dimcontent - dimension content resolution and routing.

Content-rich entities (pages, snippets) keep one dimension content per
``(locale, stage)``. dimcontent merges them, normalizes them, resolves
their template fields (blocks, selections, smart content) in batches and
generates unique, history-keeping routes.

- dimcontent.domain: entities, capabilities, repositories
- dimcontent.merger / aggregator / normalizer / datamapper: dimension pipelines
- dimcontent.properties / resolver / resources: content resolution
- dimcontent.routing: slugs, resource locators, routes, url generation
- dimcontent.container: default wiring from settings
"""

__version__ = "0.1.0"

from dimcontent.container import ContentContainer  # noqa: E402
from dimcontent.core.errors import DimContentError  # noqa: E402
from dimcontent.core.settings import DimContentSettings, get_settings  # noqa: E402

__all__ = [
    "ContentContainer",
    "DimContentError",
    "DimContentSettings",
    "get_settings",
    "__version__",
]
