"""Tests for SmartContentPropertyResolver."""

import pytest

from dimcontent.core.errors import InvalidOptionError
from dimcontent.properties import SegmentSmartContentFiltersVisitor, SmartContentPropertyResolver
from dimcontent.properties.visitors import SEGMENT_PARAMETER
from dimcontent.resolver.values import SMART_RESOLVABLE_PRIORITY, SmartResolvable
from dimcontent.routing import RequestContext


class TestSmartContentPropertyResolver:
    def test_builds_filters(self):
        context = RequestContext(query={"p": "2", "tags": "a,b", "categories": ""})
        resolver = SmartContentPropertyResolver(context)
        data = {
            "categories": [1],
            "category_operator": "and",
            "tags": ["x"],
            "data_source": "home",
            "limit_result": 10,
            "sort_by": "title",
            "include_sub_folders": True,
        }
        view = resolver.resolve(data, "en", {"properties": {"max_per_page": 5}})

        resolvable = view.content
        assert isinstance(resolvable, SmartResolvable)
        assert resolvable.priority == SMART_RESOLVABLE_PRIORITY
        assert resolvable.resource_loader_key == "smart_content"
        assert view.view == {}

        filters = resolvable.data["filters"]
        assert filters["categories"] == [1]
        assert filters["category_operator"] == "AND"
        assert filters["website_tags"] == ["a", "b"]
        assert filters["website_categories"] == []
        assert filters["page"] == 2
        assert filters["max_per_page"] == 5
        assert filters["limit"] == 10
        assert filters["locale"] == "en"
        assert filters["include_sub_folders"] is True
        assert filters["exclude_duplicates"] is False
        assert resolvable.data["sort_bys"] == {"title": "ASC"}
        assert resolvable.data["parameters"]["provider"] == "pages"
        assert resolvable.data["value"] is data

    def test_invalid_page_query(self):
        view = SmartContentPropertyResolver(RequestContext(query={"p": "abc"})).resolve({}, "en")
        assert view.content.data["filters"]["page"] == 1

    def test_empty_list_is_empty_filter(self):
        view = SmartContentPropertyResolver(RequestContext()).resolve([], "en")
        assert isinstance(view.content, SmartResolvable)
        assert view.content.data["sort_bys"] is None

    def test_non_dict_data(self):
        view = SmartContentPropertyResolver(RequestContext()).resolve("x", "en", {"a": 1})
        assert view.content == []
        assert view.view == {"a": 1}

    def test_segment_visitor(self):
        context = RequestContext(parameters={SEGMENT_PARAMETER: "winter"})
        resolver = SmartContentPropertyResolver(context, [SegmentSmartContentFiltersVisitor(context)])
        view = resolver.resolve({}, "en")
        assert view.content.data["filters"]["segment_key"] == "winter"

    @pytest.mark.parametrize(
        "properties",
        [{"provider": ""}, {"provider": 5}, {"website_tags_operator": "XOR"}],
    )
    def test_invalid_parameters(self, properties):
        resolver = SmartContentPropertyResolver(RequestContext())
        with pytest.raises(InvalidOptionError):
            resolver.resolve({}, "en", {"properties": properties})
