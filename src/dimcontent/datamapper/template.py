"""Maps template data, split by each field's ``multilingual`` flag."""

from __future__ import annotations

from typing import Any

from dimcontent.core.errors import MetadataError, TemplateNotFoundError
from dimcontent.domain.models import DimensionContent, Templated
from dimcontent.metadata.loader import FormMetadataLoader
from dimcontent.metadata.model import FormMetadata


class TemplateDataMapper:
    def __init__(self, form_metadata_loader: FormMetadataLoader) -> None:
        self._form_metadata_loader = form_metadata_loader

    def map(
        self,
        unlocalized: DimensionContent,
        localized: DimensionContent,
        data: dict[str, Any],
    ) -> None:
        if not isinstance(localized, Templated) or not isinstance(unlocalized, Templated):
            return

        template_type = localized.template_type
        typed_metadata = self._form_metadata_loader.get_metadata(template_type, localized.locale)
        if typed_metadata is None:
            raise MetadataError(
                f'Could not find form metadata of type "{template_type}".'
            ).with_context(template_type=template_type)

        template = data.get("template") or typed_metadata.default_type
        form = typed_metadata.get_form(template) if template else None
        if form is None:
            raise TemplateNotFoundError(str(template), sorted(typed_metadata.forms))

        unlocalized_data, localized_data, has_any_value = self._split_template_data(
            data, dict(unlocalized.template_data), localized.template_data, form
        )

        # Nothing given, nothing to do
        if "template" not in data and not has_any_value:
            return

        unlocalized.template_data = unlocalized_data
        localized.template_key = template
        localized.template_data = localized_data

    @staticmethod
    def _split_template_data(
        data: dict[str, Any],
        unlocalized_data: dict[str, Any],
        existing_localized_data: dict[str, Any],
        form: FormMetadata,
    ) -> tuple[dict[str, Any], dict[str, Any], bool]:
        # Existing localized values only act as defaults; fields the template
        # no longer has are dropped
        has_any_value = False
        localized_data: dict[str, Any] = {}
        for name, field in form.flat_fields().items():
            defaults = existing_localized_data if field.multilingual else unlocalized_data
            value = defaults.get(name)
            # Keys not given stay untouched, e.g. urls of shadow pages
            if name in data:
                has_any_value = True
                value = data[name]

            if field.multilingual:
                localized_data[name] = value
            else:
                unlocalized_data[name] = value

        return unlocalized_data, localized_data, has_any_value


__all__ = ["TemplateDataMapper"]
