"""Unit tests for the structured document builder."""

import json
import logging

import pytest

from search_wire.errors import RenderFailure
from search_wire.xcontent import DocumentBuilder, DocumentObject, dumps, param_as_bool


@pytest.mark.unit
class TestDuplicateKeys:
    """Objects keep every entry, including repeated keys, in insertion order."""

    def test_repeated_keys_survive_in_tree_and_json(self):
        builder = DocumentBuilder()
        builder.start_object()
        builder.field("must", 1)
        builder.field("should", 2)
        builder.field("must", 3)
        builder.end_object()

        root = builder.build()

        assert root.keys() == ["must", "should", "must"]
        assert root.get_all("must") == [1, 3]
        assert root.get("must") == 1
        assert root.has_duplicate_keys() is True
        assert builder.to_json() == b'{"must":1,"should":2,"must":3}'

    def test_json_parses_back_with_pairs(self):
        builder = DocumentBuilder().start_object().field("a", "x").field("a", "y").end_object()

        pairs = json.loads(builder.to_json(), object_pairs_hook=list)

        assert pairs == [("a", "x"), ("a", "y")]

    def test_to_dict_groups_and_warns(self, caplog):
        root = DocumentObject([("must", 1), ("should", 2), ("must", 3)])

        with caplog.at_level(logging.WARNING, logger="search_wire.xcontent.builder"):
            result = root.to_dict()

        assert result == {"must": [1, 3], "should": 2}
        assert "not preserved" in caplog.text

    def test_to_dict_without_duplicates_is_silent(self, caplog):
        nested = DocumentObject([("inner", [DocumentObject([("x", 1)])])])
        root = DocumentObject([("outer", nested)])

        with caplog.at_level(logging.WARNING, logger="search_wire.xcontent.builder"):
            result = root.to_dict()

        assert result == {"outer": {"inner": [{"x": 1}]}}
        assert caplog.text == ""


@pytest.mark.unit
class TestNesting:
    def test_pending_field_is_consumed_by_next_container(self):
        builder = DocumentBuilder()
        builder.start_object()
        builder.field("bool")
        builder.start_object()
        builder.end_object()
        builder.start_array("tokens")
        builder.value("a")
        builder.start_object().field("b", None).end_object()
        builder.end_array()
        builder.end_object()

        assert builder.to_json() == b'{"bool":{},"tokens":["a",{"b":null}]}'
        assert builder.depth == 0

    def test_mapping_and_sequence_values_are_coerced(self):
        builder = DocumentBuilder().start_object().field("range", {"from": 1, "to": (2, 3)}).end_object()

        root = builder.build()

        assert isinstance(root.get("range"), DocumentObject)
        assert builder.to_json() == b'{"range":{"from":1,"to":[2,3]}}'

    def test_scalar_root(self):
        assert DocumentBuilder().value("x").to_json() == b'"x"'


@pytest.mark.unit
class TestMisuse:
    """Structural mistakes surface as RenderFailure."""

    def test_field_outside_object(self):
        with pytest.raises(RenderFailure, match="inside an object"):
            DocumentBuilder().field("a", 1)

    def test_field_inside_array(self):
        builder = DocumentBuilder().start_array()
        with pytest.raises(RenderFailure, match="inside an object"):
            builder.field("a", 1)

    def test_unmatched_end_object(self):
        with pytest.raises(RenderFailure, match="end_object"):
            DocumentBuilder().end_object()

    def test_unmatched_end_array(self):
        builder = DocumentBuilder().start_object()
        with pytest.raises(RenderFailure, match="end_array"):
            builder.end_array()

    def test_field_without_value_blocks_end_object(self):
        builder = DocumentBuilder().start_object().field("must")
        with pytest.raises(RenderFailure, match="'must' was never given a value"):
            builder.end_object()

    def test_two_pending_fields(self):
        builder = DocumentBuilder().start_object().field("must")
        with pytest.raises(RenderFailure, match="never given a value"):
            builder.field("should")

    def test_value_without_field_name_inside_object(self):
        builder = DocumentBuilder().start_object()
        with pytest.raises(RenderFailure, match="need a field name"):
            builder.value(1)

    def test_second_root(self):
        builder = DocumentBuilder().start_object().end_object()
        with pytest.raises(RenderFailure, match="already has a root"):
            builder.start_object()

    def test_unclosed_and_empty_documents(self):
        with pytest.raises(RenderFailure, match="1 unclosed"):
            DocumentBuilder().start_object().build()
        with pytest.raises(RenderFailure, match="empty"):
            DocumentBuilder().build()

    def test_unencodable_value(self):
        builder = DocumentBuilder().start_object().field("x", object()).end_object()
        with pytest.raises(RenderFailure, match="cannot encode object"):
            builder.to_json()


@pytest.mark.unit
class TestJsonOutput:
    def test_pretty_output_indents_two_spaces(self):
        root = DocumentObject([("a", 1), ("b", [1, 2]), ("c", DocumentObject())])

        assert dumps(root, pretty=True) == b'{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ],\n  "c": {}\n}'

    def test_empty_containers(self):
        assert dumps(DocumentObject()) == b"{}"
        assert dumps([]) == b"[]"

    def test_unicode_is_written_as_utf8(self):
        assert dumps(DocumentObject([("text", "héllo")])) == '{"text":"héllo"}'.encode()

    def test_document_objects_compare_by_pairs(self):
        assert DocumentObject([("a", 1)]) == DocumentObject([("a", 1)])
        assert DocumentObject([("a", 1)]) != DocumentObject([("a", 2)])
        assert len(DocumentObject([("a", 1), ("a", 1)])) == 2


@pytest.mark.unit
@pytest.mark.parametrize(
    ("params", "expected"),
    [({}, False), ({"pretty": "true"}, True), ({"pretty": "FALSE"}, False), ({"pretty": "1"}, True)],
)
def test_param_as_bool(params, expected):
    assert param_as_bool(params, "pretty") is expected
