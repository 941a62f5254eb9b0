import itertools

import pytest

from rowschema.core import FieldKind, SchemaDescriptor

INT = FieldKind.INT
STRING = FieldKind.STRING


def test_equality_ignores_names() -> None:
    named = SchemaDescriptor.from_kinds([INT, STRING], ["a", "b"])
    anonymous = SchemaDescriptor.from_kinds([INT, STRING], [None, None])
    assert named == anonymous
    assert hash(named) == hash(anonymous)


def test_equality_is_order_sensitive() -> None:
    a = SchemaDescriptor.from_kinds([INT, STRING], ["a", "b"])
    b = SchemaDescriptor.from_kinds([STRING, INT], ["a", "b"])
    assert a != b


def test_equality_requires_same_field_count() -> None:
    assert SchemaDescriptor.anonymous([INT]) != SchemaDescriptor.anonymous([INT, INT])


def test_equality_with_other_types() -> None:
    desc = SchemaDescriptor.anonymous([INT])
    assert desc != "INT()"
    assert desc != [INT]
    assert (desc == None) is False  # noqa: E711


_SHAPES = [
    [INT],
    [STRING],
    [INT, STRING],
    [STRING, INT],
    [INT, INT],
    [STRING, STRING, INT],
]
_NAMES = [None, "x", "y"]


def _variants() -> list[SchemaDescriptor]:
    out = []
    for kinds in _SHAPES:
        for name in _NAMES:
            out.append(SchemaDescriptor.from_kinds(kinds, [name] * len(kinds)))
    return out


def test_equal_descriptors_hash_identically() -> None:
    for x, y in itertools.product(_variants(), repeat=2):
        if x == y:
            assert hash(x) == hash(y)


def test_equality_is_reflexive_symmetric_transitive() -> None:
    variants = _variants()
    for x in variants:
        assert x == x
    for x, y in itertools.product(variants, repeat=2):
        assert (x == y) == (y == x)
    for x, y, z in itertools.product(variants[:9], repeat=3):
        if x == y and y == z:
            assert x == z


def test_descriptors_work_as_dict_keys_and_set_members() -> None:
    a = SchemaDescriptor.from_kinds([INT, STRING], ["id", "name"])
    b = SchemaDescriptor.from_kinds([INT, STRING], ["pk", "label"])
    c = SchemaDescriptor.from_kinds([STRING, INT], ["name", "id"])
    assert len({a, b, c}) == 2
    cache = {a: "people"}
    assert cache[b] == "people"
    with pytest.raises(KeyError):
        cache[c]
