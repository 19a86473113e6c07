"""
Data mapper contract and the ordered mapping pipeline.

Data mappers write incoming (form) data onto a pair of dimension contents:
the unlocalized variant receives values shared across languages, the
localized variant the translated ones.

Tags:
    datamapper, pipeline, dimension-content, dimcontent
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from dimcontent.core.logging import get_logger
from dimcontent.domain.models import DimensionContent

logger = get_logger(__name__)


@runtime_checkable
class DataMapper(Protocol):
    def map(
        self,
        unlocalized: DimensionContent,
        localized: DimensionContent,
        data: dict[str, Any],
    ) -> None:
        ...


class ContentDataMapper:
    def __init__(self, data_mappers: Iterable[DataMapper]) -> None:
        self._data_mappers = list(data_mappers)

    def map(
        self,
        unlocalized: DimensionContent,
        localized: DimensionContent,
        data: dict[str, Any],
    ) -> None:
        for data_mapper in self._data_mappers:
            data_mapper.map(unlocalized, localized, data)
        logger.debug(
            "dimension_content_mapped",
            resource_key=localized.resource_key,
            resource_id=localized.resource_id,
            locale=localized.locale,
            stage=localized.stage,
            keys=sorted(data),
        )


__all__ = ["ContentDataMapper", "DataMapper"]
