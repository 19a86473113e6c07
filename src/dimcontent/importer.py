"""Imports content-rich entities from YAML through the data mapper pipeline.

Example YAML::

    pages:
      - id: "1"
        main_webspace: website
        stages: [draft, live]
        locales:
          en:
            template: default
            title: Home
            url: /home
            excerpt_title: Welcome
    snippets:
      - id: "s1"
        locales:
          en:
            template: default
            title: Contact

Every locale's data is mapped onto the unlocalized and the localized
dimension content of each listed stage, in order. Routes are flushed
after every stage so live variants find the route of their draft.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from dimcontent.core.errors import ContentError
from dimcontent.core.logging import get_logger
from dimcontent.datamapper import ContentDataMapper
from dimcontent.domain import (
    STAGE_DRAFT,
    ContentRichEntity,
    InMemoryContentRepository,
    Page,
    Snippet,
    Webspaced,
)
from dimcontent.domain.models import STAGES
from dimcontent.routing import RouteRepository

logger = get_logger(__name__)

ENTITY_CLASSES: dict[str, type[ContentRichEntity]] = {
    Page.resource_key: Page,
    Snippet.resource_key: Snippet,
}


class EntitySpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    main_webspace: str | None = None
    stages: list[str] = Field(default_factory=lambda: [STAGE_DRAFT])
    locales: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("stages")
    @classmethod
    def _validate_stages(cls, value: list[str]) -> list[str]:
        for stage in value:
            if stage not in STAGES:
                raise ValueError(f"stage must be one of {', '.join(STAGES)}, got {stage!r}")
        return value


class ContentFileSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pages: list[EntitySpec] = Field(default_factory=list)
    snippets: list[EntitySpec] = Field(default_factory=list)

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> ContentFileSpec:
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {e}") from e
        return cls.model_validate(data or {})


class ContentImporter:
    def __init__(
        self,
        content_data_mapper: ContentDataMapper,
        repositories: Mapping[str, InMemoryContentRepository],
        route_repository: RouteRepository,
    ) -> None:
        self._content_data_mapper = content_data_mapper
        self._repositories = repositories
        self._route_repository = route_repository

    def import_file(self, path: str | Path) -> list[ContentRichEntity]:
        try:
            spec = ContentFileSpec.from_yaml_file(path)
        except ValueError as exc:
            raise ContentError(f"Invalid content file {path}: {exc}", cause=exc).with_context(
                path=str(path)
            ) from exc
        return self.import_spec(spec)

    def import_spec(self, spec: ContentFileSpec) -> list[ContentRichEntity]:
        entities = [
            self.import_entity(resource_key, entity_spec)
            for resource_key, entity_specs in (
                (Page.resource_key, spec.pages),
                (Snippet.resource_key, spec.snippets),
            )
            for entity_spec in entity_specs
        ]
        logger.info("contents_imported", count=len(entities))
        return entities

    def import_entity(self, resource_key: str, spec: EntitySpec) -> ContentRichEntity:
        entity_class = ENTITY_CLASSES[resource_key]
        entity = entity_class(id=spec.id) if spec.id else entity_class()

        for stage in spec.stages:
            unlocalized = entity.get_or_create_dimension_content(None, stage)
            if spec.main_webspace and isinstance(unlocalized, Webspaced):
                unlocalized.main_webspace = spec.main_webspace

            for locale, data in spec.locales.items():
                localized = entity.get_or_create_dimension_content(locale, stage)
                self._content_data_mapper.map(unlocalized, localized, dict(data))
                unlocalized.add_available_locale(locale)
                if unlocalized.ghost_locale is None:
                    unlocalized.ghost_locale = locale

            self._route_repository.flush()

        repository = self._repositories.get(resource_key)
        if repository is None:
            raise ContentError(f'No repository for "{resource_key}"').with_context(
                resource_key=resource_key
            )
        repository.add(entity)
        return entity


__all__ = ["ContentFileSpec", "ContentImporter", "EntitySpec"]
