import pytest
from graphql import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLID,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLString,
    is_list_type,
    is_non_null_type,
)

from gqlargs.exceptions import GQLBuilderException, UnknownTypeError
from gqlargs.type_map import TypeMap, resolve_type


@pytest.fixture()
def type_map():
    return TypeMap([GraphQLEnumType("Direction", {"ASC": 1, "DESC": 2})])


class TestTypeMap:
    def test_specified_scalars_are_registered(self, type_map):
        assert "Int" in type_map
        assert "Direction" in type_map
        assert type_map.get("String") is GraphQLString
        assert len(type_map) == 6

    def test_specified_scalars_are_graphql_types(self):
        type_map = TypeMap()

        assert type_map.get("Boolean") is GraphQLBoolean
        assert type_map.get("ID") is GraphQLID
        assert {gql_type.name for gql_type in type_map} == {
            "Int",
            "Float",
            "String",
            "Boolean",
            "ID",
        }

    def test_without_specified_scalars(self):
        type_map = TypeMap(include_specified_scalars=False)

        assert len(type_map) == 0
        with pytest.raises(UnknownTypeError):
            type_map.get("Int")

    def test_duplicate_name_fails(self, type_map):
        with pytest.raises(ValueError, match="'Direction' has already been registered"):
            type_map.add(GraphQLEnumType("Direction", {"UP": 1}))

    def test_add_returns_type(self, type_map):
        enum_type = GraphQLEnumType("Other", {"A": 1})

        assert type_map.add(enum_type) is enum_type
        assert list(type_map)[-1] is enum_type


class TestResolve:
    def test_named(self, type_map):
        assert type_map.resolve("Int") is GraphQLInt
        assert type_map.resolve("Direction").name == "Direction"

    def test_wrapped(self, type_map):
        gql_type = type_map.resolve("[Direction!]!")

        assert is_non_null_type(gql_type)
        assert is_list_type(gql_type.of_type)
        assert is_non_null_type(gql_type.of_type.of_type)
        assert gql_type.of_type.of_type.of_type is type_map.get("Direction")

    def test_type_object_is_returned_as_is(self, type_map):
        gql_type = GraphQLList(GraphQLNonNull(GraphQLInt))

        assert type_map.resolve(gql_type) is gql_type

    @pytest.mark.parametrize("ref", ["[Int", "Int!!", ""])
    def test_malformed_reference(self, type_map, ref):
        with pytest.raises(GQLBuilderException, match="Malformed type reference"):
            type_map.resolve(ref)

    def test_unknown_name(self, type_map):
        with pytest.raises(UnknownTypeError, match="'Missing' has not been registered"):
            type_map.resolve("[Missing]")


class TestResolveType:
    def test_without_type_map(self):
        assert resolve_type(GraphQLInt, None) is GraphQLInt
        with pytest.raises(UnknownTypeError, match="without type map"):
            resolve_type("Int", None)

    def test_with_type_map(self, type_map):
        assert resolve_type("String", type_map) is GraphQLString
