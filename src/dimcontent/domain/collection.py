"""Selection of the dimension contents matching a set of dimension attributes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dimcontent.domain.models import STAGE_DRAFT, DimensionContent


class DimensionContentCollection:
    """Dimension contents of one entity that match ``dimension_attributes``.

    ``dimension_attributes`` must contain ``stage`` and may contain
    ``locale``. The collection keeps the unlocalized variant of the stage and,
    when a locale is requested, the localized variant of that locale. The
    unlocalized variant always comes first so merging in iteration order
    lets localized values win.
    """

    def __init__(
        self,
        dimension_contents: Iterable[DimensionContent],
        dimension_attributes: dict[str, Any],
        dimension_content_class: type[DimensionContent],
    ) -> None:
        self._attributes = {"locale": None, "stage": STAGE_DRAFT, **dimension_attributes}
        self._class = dimension_content_class
        stage = self._attributes["stage"]
        locale = self._attributes["locale"]

        self._unlocalized: DimensionContent | None = None
        self._localized: DimensionContent | None = None
        for dimension_content in dimension_contents:
            if dimension_content.stage != stage:
                continue
            if dimension_content.locale is None:
                self._unlocalized = dimension_content
            elif locale is not None and dimension_content.locale == locale:
                self._localized = dimension_content

    @property
    def dimension_attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    @property
    def dimension_content_class(self) -> type[DimensionContent]:
        return self._class

    def get_unlocalized_dimension_content(self) -> DimensionContent | None:
        return self._unlocalized

    def get_localized_dimension_content(self) -> DimensionContent | None:
        return self._localized

    def __iter__(self) -> Iterator[DimensionContent]:
        for dimension_content in (self._unlocalized, self._localized):
            if dimension_content is not None:
                yield dimension_content

    def __len__(self) -> int:
        return sum(1 for _ in self)
