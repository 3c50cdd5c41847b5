"""Tests for canonical tags and the type-tag table."""

import copy
import pickle
import re
import types

import pytest

from typetags.core.tags import (
    CATEGORY_CONSTRUCTORS,
    TYPE_TAGS,
    UNDEFINED,
    TypeName,
    UndefinedType,
    default_instance,
    tag_of,
)


class TestTagOf:
    def test_numeric_literal_matches_default_number(self):
        assert tag_of(5) == tag_of(int())
        assert tag_of(-12345678901234567890) == tag_of(int())

    def test_tag_format(self):
        assert tag_of(5) == "[object int]"
        assert tag_of("x") == "[object str]"
        assert tag_of(None) == "[object NoneType]"
        assert tag_of(UNDEFINED) == "[object typetags.core.tags.UndefinedType]"

    def test_exact_type_only(self):
        """Subclasses report their own class name."""

        class Flag(int):
            pass

        assert tag_of(True) == "[object bool]"
        assert tag_of(Flag(1)) == f"[object {Flag.__module__}.{Flag.__qualname__}]"
        assert tag_of(Flag(1)) != tag_of(1)
        assert tag_of(ValueError()) == "[object ValueError]"

    def test_constructors_are_types(self):
        assert tag_of(int) == "[object type]"
        assert tag_of(types.FunctionType) == "[object type]"


class TestTypeTagTable:
    def test_has_all_ten_keys_in_order(self):
        assert tuple(TYPE_TAGS) == TypeName.ALL
        assert len(TYPE_TAGS) == 10

    def test_values_match_default_instances(self, default_instances):
        for name, instance in default_instances.items():
            assert TYPE_TAGS[name] == tag_of(instance)

    def test_expected_tags(self):
        assert TYPE_TAGS[TypeName.FUNCTION] == "[object function]"
        assert TYPE_TAGS[TypeName.OBJECT] == "[object dict]"
        assert TYPE_TAGS[TypeName.REGEXP] == "[object re.Pattern]"
        assert TYPE_TAGS[TypeName.ERROR] == "[object Exception]"
        assert TYPE_TAGS[TypeName.NULL] == "[object NoneType]"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            TYPE_TAGS["NUMBER"] = "[object float]"

    def test_absent_key_has_no_entry(self):
        assert TYPE_TAGS.get("COMPLEX") is None

    def test_constructors_build_default_instances(self):
        for name in (TypeName.BOOLEAN, TypeName.OBJECT, TypeName.STRING, TypeName.NUMBER, TypeName.ARRAY):
            assert tag_of(CATEGORY_CONSTRUCTORS[name]()) == TYPE_TAGS[name]
        assert isinstance(re.compile(""), CATEGORY_CONSTRUCTORS[TypeName.REGEXP])

    def test_default_instance_rejects_unknown_key(self):
        with pytest.raises(KeyError):
            default_instance("COMPLEX")

    def test_default_function_is_fresh(self):
        assert default_instance(TypeName.FUNCTION) is not default_instance(TypeName.FUNCTION)


class TestUndefined:
    def test_singleton(self):
        assert UndefinedType() is UNDEFINED
        assert copy.copy(UNDEFINED) is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_falsy_and_repr(self):
        assert not UNDEFINED
        assert repr(UNDEFINED) == "undefined"

    def test_distinct_from_none(self):
        assert UNDEFINED is not None
        assert tag_of(UNDEFINED) != tag_of(None)
