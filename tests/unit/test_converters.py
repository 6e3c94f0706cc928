import pytest
from graphql import (
    DEFAULT_DEPRECATION_REASON,
    GraphQLField,
    GraphQLInt,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
    Undefined,
)

from gqlargs.compiler import compile_arguments
from gqlargs.converters import to_graphql_argument, to_graphql_arguments
from gqlargs.exceptions import GQLBuilderException
from gqlargs.model import Argument, Deprecation
from gqlargs.type_map import TypeMap


class TestToGraphQLArgument:
    def test_plain(self):
        gql_arg = to_graphql_argument(Argument(name="foo", type=GraphQLString))

        assert gql_arg.type is GraphQLString
        assert gql_arg.default_value is Undefined
        assert gql_arg.description is None
        assert gql_arg.deprecation_reason is None

    def test_all_attributes(self):
        argument = Argument(
            name="foo",
            type="Int!",
            default_value=3,
            description="Foo",
            deprecation=Deprecation(reason="use bar"),
        )

        gql_arg = to_graphql_argument(argument, TypeMap())

        assert isinstance(gql_arg.type, GraphQLNonNull)
        assert gql_arg.type.of_type is GraphQLInt
        assert gql_arg.default_value == 3
        assert gql_arg.description == "Foo"
        assert gql_arg.deprecation_reason == "use bar"

    def test_deprecation_without_reason(self):
        gql_arg = to_graphql_argument(
            Argument(name="foo", type=GraphQLString, deprecation=Deprecation())
        )

        assert gql_arg.deprecation_reason == DEFAULT_DEPRECATION_REASON

    def test_empty_deprecation_reason_is_kept(self):
        gql_arg = to_graphql_argument(
            Argument(name="foo", type=GraphQLString, deprecation=Deprecation(reason=""))
        )

        assert gql_arg.deprecation_reason == ""

    def test_output_type_is_rejected(self):
        object_type = GraphQLObjectType("User", {"id": GraphQLField(GraphQLInt)})

        with pytest.raises(GQLBuilderException, match="'user' must be input type"):
            to_graphql_argument(Argument(name="user", type=object_type))


def test_to_graphql_arguments():
    args = compile_arguments([("b", {"type": "Int"}), ("a", {"type": "String"})])

    gql_args = to_graphql_arguments(args, TypeMap())

    assert list(gql_args) == ["b", "a"]
    assert gql_args["b"].type is GraphQLInt
    assert gql_args["a"].type is GraphQLString
