"""
Form metadata registry, optionally filled from a directory of YAML files.

Directory layout::

    templates_dir/
    ├── page/                 template type "page"
    │   ├── default.yaml      form key "default"
    │   └── homepage.yaml
    ├── snippet/
    │   └── default.yaml
    └── forms/                standalone forms (excerpt, seo, ...)
        ├── content_excerpt.yaml
        └── content_seo.yaml

Forms can also be added in code with :meth:`FormMetadataLoader.add_form`.

Tags:
    metadata, yaml, registry, templates, dimcontent
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from dimcontent.core.errors import MetadataError
from dimcontent.core.logging import get_logger
from dimcontent.metadata.model import FormMetadata, TypedFormMetadata
from dimcontent.metadata.yaml_spec import FormSpec

logger = get_logger(__name__)

STANDALONE_FORMS_DIR = "forms"
_YAML_SUFFIXES = (".yaml", ".yml")


class FormMetadataLoader:
    def __init__(
        self,
        templates_dir: Path | str | None = None,
        default_types: Mapping[str, str] | None = None,
    ) -> None:
        self._templates_dir = Path(templates_dir) if templates_dir else None
        self._default_types = dict(default_types or {})
        self._typed_forms: dict[str, dict[str, FormMetadata]] = {}
        self._standalone_forms: dict[str, FormMetadata] = {}
        self._loaded = self._templates_dir is None

    def add_form(self, form: FormMetadata, template_type: str | None = None) -> None:
        """Register a form for a template type, or as standalone form when no type is given."""
        if template_type is None:
            self._standalone_forms[form.key] = form
        else:
            self._typed_forms.setdefault(template_type, {})[form.key] = form

    def get_metadata(self, template_type: str, locale: str | None = None) -> TypedFormMetadata | None:
        self._ensure_loaded()
        forms = self._typed_forms.get(template_type)
        if forms is None:
            return None
        return TypedFormMetadata(forms=dict(forms), default_type=self._default_type(template_type, forms))

    def get_form(self, key: str, locale: str | None = None) -> FormMetadata | None:
        self._ensure_loaded()
        return self._standalone_forms.get(key)

    def template_types(self) -> list[str]:
        self._ensure_loaded()
        return sorted(self._typed_forms)

    def load(self) -> None:
        """(Re)load every YAML file below the templates directory."""
        self._loaded = True
        if self._templates_dir is None:
            return
        if not self._templates_dir.is_dir():
            logger.warning("templates_dir_missing", path=str(self._templates_dir))
            return

        count = 0
        for type_dir in sorted(p for p in self._templates_dir.iterdir() if p.is_dir()):
            template_type = None if type_dir.name == STANDALONE_FORMS_DIR else type_dir.name
            for path in sorted(type_dir.iterdir()):
                if path.suffix not in _YAML_SUFFIXES:
                    continue
                self.add_form(self._load_file(path), template_type)
                count += 1

        logger.debug("form_metadata_loaded", path=str(self._templates_dir), forms=count)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def _default_type(self, template_type: str, forms: dict[str, FormMetadata]) -> str | None:
        if template_type in self._default_types:
            return self._default_types[template_type]
        if "default" in forms:
            return "default"
        return next(iter(sorted(forms)), None)

    @staticmethod
    def _load_file(path: Path) -> FormMetadata:
        try:
            return FormSpec.from_yaml_file(path).to_form(path.stem)
        except ValueError as exc:
            raise MetadataError(f"Invalid form metadata in {path}: {exc}", cause=exc).with_context(
                path=str(path)
            ) from exc


__all__ = ["FormMetadataLoader", "STANDALONE_FORMS_DIR"]
