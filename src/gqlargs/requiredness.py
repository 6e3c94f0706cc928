from functools import singledispatch

from graphql import GraphQLList, GraphQLNamedType, GraphQLNonNull

from gqlargs.exceptions import MissingCapabilityError
from gqlargs.model import Argument
from gqlargs.type_map import TypeMap, resolve_type


def is_required(argument: Argument, type_map: TypeMap | None = None) -> bool:
    """
    Whether caller must supply value for the argument.

    Deprecated argument is never required. Otherwise the argument is required when its
    type is. Textual type references are resolved using ``type_map``.
    """
    if argument.deprecation is not None:
        return False

    gql_type = resolve_type(argument.type, type_map)
    try:
        return is_type_required(gql_type)
    except MissingCapabilityError as e:
        raise MissingCapabilityError(f"{e} (argument '{argument.name}')") from e


@singledispatch
def is_type_required(gql_type: object) -> bool:
    """
    Whether type mandates a value. Additional type variants can be supported using
    ``is_type_required.register``.
    """
    raise MissingCapabilityError(
        f"Type {gql_type!r} of kind '{type(gql_type).__name__}' does not define requiredness"
    )


@is_type_required.register
def _(gql_type: GraphQLNonNull) -> bool:
    return True


@is_type_required.register
def _(gql_type: GraphQLList) -> bool:
    return False


@is_type_required.register
def _(gql_type: GraphQLNamedType) -> bool:
    return False
