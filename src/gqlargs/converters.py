from collections.abc import Mapping

from graphql import DEFAULT_DEPRECATION_REASON, GraphQLArgument, is_input_type

from gqlargs.exceptions import GQLBuilderException
from gqlargs.model import Argument
from gqlargs.type_map import TypeMap, resolve_type


def to_graphql_argument(argument: Argument, type_map: TypeMap | None = None) -> GraphQLArgument:
    gql_type = resolve_type(argument.type, type_map)
    if not is_input_type(gql_type):
        raise GQLBuilderException(
            f"Type of argument '{argument.name}' must be input type, got {gql_type!r}"
        )

    deprecation_reason = None
    if argument.deprecation is not None:
        deprecation_reason = argument.deprecation.reason
        if deprecation_reason is None:
            deprecation_reason = DEFAULT_DEPRECATION_REASON

    return GraphQLArgument(
        gql_type,  # type: ignore[arg-type]
        default_value=argument.default_value,
        description=argument.description,
        deprecation_reason=deprecation_reason,
    )


def to_graphql_arguments(
    arguments: Mapping[str, Argument], type_map: TypeMap | None = None
) -> dict[str, GraphQLArgument]:
    return {name: to_graphql_argument(argument, type_map) for name, argument in arguments.items()}
