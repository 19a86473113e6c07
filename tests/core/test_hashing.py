"""Tests for dimcontent.core.hashing module."""

from dimcontent.core.hashing import compute_json_hash


class TestComputeJsonHash:
    def test_empty_values_hash_to_empty_string(self):
        assert compute_json_hash(None) == ""
        assert compute_json_hash({}) == ""
        assert compute_json_hash([]) == ""

    def test_key_order_does_not_matter(self):
        a = compute_json_hash({"properties": {"title": "title", "url": "url"}, "x": 1})
        b = compute_json_hash({"x": 1, "properties": {"url": "url", "title": "title"}})
        assert a == b

    def test_different_values_differ(self):
        assert compute_json_hash({"a": 1}) != compute_json_hash({"a": 2})

    def test_length(self):
        assert len(compute_json_hash({"a": 1})) == 32
        assert len(compute_json_hash({"a": 1}, length=8)) == 8

    def test_non_json_values_fall_back_to_str(self):
        class Thing:
            def __str__(self) -> str:
                return "thing"

        assert compute_json_hash({"a": Thing()}) == compute_json_hash({"a": "thing"})
