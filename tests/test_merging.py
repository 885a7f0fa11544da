"""Tests for deep merge."""

import copy

from locale_table.merging import merge_documents, merge_into, merge_value


def test_union_at_objects_right_bias_at_leaves():
    base = {"a": 1, "b": {"x": 1}}
    merged = merge_value(base, {"b": {"y": 2}, "c": 3})
    assert merged == {"a": 1, "b": {"x": 1, "y": 2}, "c": 3}


def test_merge_is_idempotent_with_itself():
    doc = {"a": {"b": "x", "c": [1, 2]}, "d": None}
    merged = merge_value(copy.deepcopy(doc), doc)
    assert merged == doc


def test_scalar_conflict_takes_incoming():
    assert merge_value({"welcome": "Hi"}, {"welcome": "Hello"}) == {"welcome": "Hello"}


def test_arrays_are_replaced_not_merged():
    assert merge_value({"a": [1, 2, 3]}, {"a": [9]}) == {"a": [9]}


def test_object_replaced_by_scalar_and_back():
    assert merge_value({"a": {"b": "x"}}, {"a": "flat"}) == {"a": "flat"}
    assert merge_value({"a": "flat"}, {"a": {"b": "x"}}) == {"a": {"b": "x"}}


def test_base_updated_in_place():
    base = {"a": {"b": 1}}
    merge_value(base, {"a": {"c": 2}})
    assert base == {"a": {"b": 1, "c": 2}}


def test_incoming_is_copied():
    incoming = {"a": {"b": "x"}}
    merged = merge_value({}, incoming)
    merged["a"]["b"] = "changed"
    assert incoming == {"a": {"b": "x"}}


def test_merge_into_creates_and_accumulates():
    documents = {}
    fragment = {"a": "A"}
    merge_into(documents, "en", fragment)
    merge_into(documents, "en", {"b": "B"})
    assert documents == {"en": {"a": "A", "b": "B"}}
    assert fragment == {"a": "A"}


def test_merge_documents_keeps_other_locales():
    documents = {"en": {"a": "A"}, "de": {"a": "Ä"}}
    merge_documents(documents, {"en": {"a": "AA"}, "fr": {"a": "À"}})
    assert documents == {"en": {"a": "AA"}, "de": {"a": "Ä"}, "fr": {"a": "À"}}
