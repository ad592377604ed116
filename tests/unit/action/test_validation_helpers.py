"""Unit tests for validation collection helpers."""

import pytest

from search_wire.action import AnalyzeRequest, add_validation_error, ensure_valid, merge_validation
from search_wire.errors import ActionRequestValidationError, MissingField


@pytest.mark.unit
class TestAddValidationError:
    def test_creates_collection_on_first_error(self):
        errors = add_validation_error("index is missing", None)

        assert isinstance(errors, ActionRequestValidationError)
        assert errors.messages() == ["index is missing"]

    def test_appends_to_existing_collection(self):
        errors = add_validation_error("a", None)

        same = add_validation_error(MissingField("text"), errors)

        assert same is errors
        assert str(errors) == "Validation Failed: 1: a;2: text is missing;"


@pytest.mark.unit
class TestMergeValidation:
    def test_all_empty_is_none(self):
        assert merge_validation(None, ActionRequestValidationError(), None) is None

    def test_keeps_order_across_results(self):
        first = ActionRequestValidationError(["a", "b"])
        second = ActionRequestValidationError([MissingField("text")])

        merged = merge_validation(first, None, second)

        assert merged.messages() == ["a", "b", "text is missing"]
        assert merged is not first


@pytest.mark.unit
class TestEnsureValid:
    def test_passes_for_valid_request(self):
        ensure_valid(AnalyzeRequest("fox"))

    def test_raises_collected_errors(self):
        with pytest.raises(ActionRequestValidationError, match="text is missing") as excinfo:
            ensure_valid(AnalyzeRequest())
        assert excinfo.value.errors == (MissingField("text"),)


@pytest.mark.unit
def test_missing_field_equality_and_repr():
    assert MissingField("text") == MissingField("text")
    assert MissingField("text") != MissingField("index")
    assert hash(MissingField("text")) == hash(MissingField("text"))
    assert repr(MissingField("text")) == "MissingField('text')"
