"""Tests for the constructor back-reference table."""

import re
import types

import pytest

from typetags.core.backref import TYPE_TAGS_BACKREF, BackReferenceTable, descriptor_key
from typetags.core.tags import TYPE_TAGS, UNDEFINED, TypeName


class TestDescriptorKey:
    def test_classes_use_qualified_name(self):
        assert descriptor_key(int) == "builtins.int"
        assert descriptor_key(re.Pattern) == "re.Pattern"

    def test_sentinels(self):
        assert descriptor_key(None) == "None"
        assert descriptor_key(UNDEFINED) == "UNDEFINED"

    def test_non_descriptors(self):
        assert descriptor_key(5) is None
        assert descriptor_key("int") is None
        assert descriptor_key([]) is None


class TestBackReferenceTable:
    def test_pairs_in_table_order(self):
        assert len(TYPE_TAGS_BACKREF) == 10
        assert [tag for _, tag in TYPE_TAGS_BACKREF] == list(TYPE_TAGS.values())
        assert TYPE_TAGS_BACKREF[0] == (UNDEFINED, TYPE_TAGS[TypeName.UNDEFINED])
        assert TYPE_TAGS_BACKREF[-1] == (None, TYPE_TAGS[TypeName.NULL])

    @pytest.mark.parametrize(
        "constructor, name",
        [
            (UNDEFINED, TypeName.UNDEFINED),
            (types.FunctionType, TypeName.FUNCTION),
            (bool, TypeName.BOOLEAN),
            (dict, TypeName.OBJECT),
            (re.Pattern, TypeName.REGEXP),
            (str, TypeName.STRING),
            (int, TypeName.NUMBER),
            (list, TypeName.ARRAY),
            (Exception, TypeName.ERROR),
            (None, TypeName.NULL),
        ],
    )
    def test_matching_type_for_known_constructors(self, constructor, name):
        assert TYPE_TAGS_BACKREF.lookup(constructor) == TYPE_TAGS[name]
        assert TYPE_TAGS_BACKREF.matching_type(constructor) == TYPE_TAGS[name]

    def test_unknown_constructor_falls_back_to_own_tag(self):
        assert TYPE_TAGS_BACKREF.lookup(float) is None
        assert TYPE_TAGS_BACKREF.matching_type(float) == "[object type]"

    def test_unknown_values_never_raise(self):
        assert TYPE_TAGS_BACKREF.lookup([1, 2]) is None
        assert TYPE_TAGS_BACKREF.matching_type([1, 2]) == "[object list]"
        assert TYPE_TAGS_BACKREF.matching_type({"a": 1}) == "[object dict]"

    def test_contains_pairs(self):
        assert (int, TYPE_TAGS[TypeName.NUMBER]) in TYPE_TAGS_BACKREF

    def test_first_entry_wins(self):
        table = BackReferenceTable([(int, "[object first]"), (int, "[object second]")])
        assert table.matching_type(int) == "[object first]"
        assert len(table) == 2

    def test_rejects_non_descriptor_entries(self):
        with pytest.raises(TypeError):
            BackReferenceTable([(5, "[object int]")])
