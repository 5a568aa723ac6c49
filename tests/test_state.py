"""Tests for state access implementations."""

from types import SimpleNamespace

import pytest

from exprforge import (
    AttributeAccess,
    ChainedAccess,
    EvaluationError,
    MappingAccess,
    PropertyNotFoundError,
    default_access,
)


class Record(dict):
    status = "attribute"


class TestMappingAccess:
    def test_property(self):
        assert MappingAccess().get_property({"a": 1}, "a") == 1

    def test_missing_key(self):
        with pytest.raises(PropertyNotFoundError) as exc_info:
            MappingAccess().get_property({"a": 1}, "b")
        assert str(exc_info.value) == "'b' does not exist"

    def test_non_mapping(self):
        with pytest.raises(PropertyNotFoundError):
            MappingAccess().get_property(SimpleNamespace(a=1), "a")

    def test_index_by_key(self):
        assert MappingAccess().get_index({"EUR": 2}, "EUR") == 2

    def test_unhashable_index(self):
        with pytest.raises(PropertyNotFoundError):
            MappingAccess().get_index({"a": 1}, ["a"])


class TestAttributeAccess:
    def test_property(self):
        assert AttributeAccess().get_property(SimpleNamespace(a=1), "a") == 1

    def test_private_attribute_hidden(self):
        with pytest.raises(PropertyNotFoundError):
            AttributeAccess().get_property(SimpleNamespace(_a=1), "_a")

    def test_methods_are_not_properties(self):
        with pytest.raises(PropertyNotFoundError):
            AttributeAccess().get_property("text", "upper")

    def test_sequence_index(self):
        assert AttributeAccess().get_index([1, 2], 1) == 2
        assert AttributeAccess().get_index("abc", 0) == "a"

    def test_index_out_of_range(self):
        with pytest.raises(EvaluationError, match="out of range"):
            AttributeAccess().get_index([1, 2], 2)

    def test_negative_index_out_of_range(self):
        with pytest.raises(EvaluationError, match="out of range"):
            AttributeAccess().get_index([1, 2], -1)

    def test_boolean_index_rejected(self):
        with pytest.raises(EvaluationError, match="integer"):
            AttributeAccess().get_index([1, 2], True)

    def test_index_on_non_sequence(self):
        with pytest.raises(PropertyNotFoundError):
            AttributeAccess().get_index(SimpleNamespace(), 0)


class TestChainedAccess:
    def test_mapping_lookup_comes_first(self):
        record = Record(status="key")
        assert default_access.get_property(record, "status") == "key"

    def test_falls_back_to_attributes(self):
        assert default_access.get_property(Record(), "status") == "attribute"

    def test_all_fail(self):
        with pytest.raises(PropertyNotFoundError) as exc_info:
            default_access.get_property({}, "missing")
        assert exc_info.value.name == "missing"

    def test_custom_order(self):
        access = ChainedAccess(AttributeAccess(), MappingAccess())
        assert access.get_property(Record(status="key"), "status") == "attribute"
