from random import Random

import graphql
import pytest

from graphql_query_generator import get_random_enum, is_enum_type
from graphql_query_generator._generator import kinds, primitives

COLOR = graphql.GraphQLEnumType("Color", {"RED": 0, "GREEN": 1, "BLUE": 2})
BOOK = graphql.GraphQLObjectType("Book", {"title": graphql.GraphQLField(graphql.GraphQLString)})
NODE = graphql.GraphQLInterfaceType("Node", {"id": graphql.GraphQLField(graphql.GraphQLID)})


@pytest.mark.parametrize(
    "type_, expected",
    (
        (COLOR, True),
        (graphql.GraphQLNonNull(COLOR), True),
        (graphql.GraphQLList(COLOR), True),
        (graphql.GraphQLString, False),
        (BOOK, False),
    ),
)
def test_is_enum_type(type_, expected):
    assert is_enum_type(type_) is expected


def test_get_random_enum():
    random = Random(0)
    values = {get_random_enum(COLOR, random) for _ in range(100)}
    assert values == {"RED", "GREEN", "BLUE"}


def test_get_random_enum_seeded():
    assert [get_random_enum(COLOR, Random(1)) for _ in range(3)] == [get_random_enum(COLOR, Random(1))] * 3


def test_get_random_enum_non_enum():
    assert get_random_enum(graphql.GraphQLString) is None


def test_get_random_enum_default_random():
    assert get_random_enum(graphql.GraphQLNonNull(COLOR)) in ("RED", "GREEN", "BLUE")


@pytest.mark.parametrize(
    "type_name, expected_type",
    (
        ("Int", int),
        ("Float", float),
        ("String", str),
        ("ID", str),
        ("Boolean", bool),
    ),
)
def test_scalars(type_name, expected_type):
    random = Random(42)
    for _ in range(50):
        value = primitives.scalar(type_name, random)
        assert isinstance(value, expected_type)
        if type_name == "Int":
            assert primitives.MIN_INT <= value <= primitives.MAX_INT


def test_unsupported_scalar():
    with pytest.raises(primitives.UnsupportedScalar, match="Scalar 'Date' is not supported"):
        primitives.scalar("Date", Random())


@pytest.mark.parametrize(
    "type_, kind",
    (
        (graphql.GraphQLString, kinds.TypeKind.SCALAR),
        (graphql.GraphQLNonNull(graphql.GraphQLList(COLOR)), kinds.TypeKind.ENUM),
        (BOOK, kinds.TypeKind.OBJECT),
        (NODE, kinds.TypeKind.INTERFACE),
        (graphql.GraphQLUnionType("Media", [BOOK]), kinds.TypeKind.UNION),
        (graphql.GraphQLInputObjectType("Filter", {}), kinds.TypeKind.INPUT_OBJECT),
    ),
)
def test_kinds(type_, kind):
    assert kinds.kind_of(type_) is kind
    assert kinds.is_leaf(type_) is kind.is_leaf
    assert kinds.is_composite(type_) is kind.is_composite


def test_unknown_kind():
    class NewType(graphql.GraphQLNamedType):
        pass

    with pytest.raises(TypeError, match="Type NewType is not supported."):
        kinds.kind_of(NewType("Test"))


@pytest.mark.parametrize(
    "type_, expected",
    (
        (graphql.GraphQLString, "String"),
        (graphql.GraphQLNonNull(graphql.GraphQLString), "NonNullString"),
        (graphql.GraphQLList(graphql.GraphQLNonNull(graphql.GraphQLInt)), "ListNonNullInt"),
    ),
)
def test_make_type_name(type_, expected):
    assert kinds.make_type_name(type_) == expected
