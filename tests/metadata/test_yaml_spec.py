"""Tests for the form YAML spec models."""

import pytest

from dimcontent.metadata import FieldMetadata, FormSpec, OptionMetadata, SectionMetadata


class TestFormSpec:
    def test_options_mapping_shorthand(self):
        spec = FormSpec.from_yaml(
            """
key: default
properties:
  pages:
    type: page_selection
    options:
      limit: 5
      properties:
        title: title
        excerpt_title: excerptTitle
"""
        )
        form = spec.to_form()
        field = form.items["pages"]
        assert isinstance(field, FieldMetadata)
        assert field.get_option("limit").value == 5

        properties = field.get_option("properties")
        assert properties.type == OptionMetadata.TYPE_COLLECTION
        assert [(o.name, o.value) for o in properties.value] == [
            ("title", "title"),
            ("excerpt_title", "excerptTitle"),
        ]

    def test_options_list(self):
        form = FormSpec.from_yaml(
            """
properties:
  snippet:
    type: single_snippet_selection
    options:
      - name: types
        type: collection
        value:
          - {name: 0, value: default}
"""
        ).to_form("fallback")
        assert form.key == "fallback"
        option = form.items["snippet"].get_option("types")
        assert option.value[0].value == "default"

    def test_sections_and_tags(self):
        form = FormSpec.from_yaml(
            """
tags:
  - name: page_tree
properties:
  highlight:
    type: section
    properties:
      title:
        type: text_line
        tags:
          - {name: headline, priority: 10}
"""
        ).to_form("default")
        section = form.items["highlight"]
        assert isinstance(section, SectionMetadata)
        assert section.items["title"].get_tag("headline").priority == 10
        assert form.tags[0].name == "page_tree"
        assert section.items["title"].has_tag("headline")
        assert not section.items["title"].has_tag("other")

    def test_empty_yaml(self):
        assert FormSpec.from_yaml("").properties == {}

    def test_invalid_yaml(self):
        with pytest.raises(ValueError, match="Invalid YAML"):
            FormSpec.from_yaml("properties: [unclosed")

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError):
            FormSpec.from_yaml("properties:\n  title:\n    typo: 1\n")

    def test_form_needs_key(self):
        with pytest.raises(ValueError, match="needs a key"):
            FormSpec.from_yaml("properties: {}").to_form()

    def test_max_occurs_must_be_positive(self):
        with pytest.raises(ValueError):
            FormSpec.from_yaml("properties:\n  blocks:\n    type: block\n    max_occurs: 0\n")
