from collections.abc import Iterable, Iterator
from typing import TypeVar

import graphql
from graphql.error import GraphQLSyntaxError
from graphql.language import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode, parse_type

from gqlargs.exceptions import GQLBuilderException, UnknownTypeError
from gqlargs.types import TypeRef

TGraphQLNamedType = TypeVar("TGraphQLNamedType", bound=graphql.GraphQLNamedType)


class TypeMap:
    __slots__ = ("_map",)

    def __init__(
        self,
        types: Iterable[graphql.GraphQLNamedType] = (),
        *,
        include_specified_scalars: bool = True,
    ) -> None:
        self._map: dict[str, graphql.GraphQLNamedType] = {}
        if include_specified_scalars:
            for scalar in graphql.specified_scalar_types.values():
                self.add(scalar)
        for gql_type in types:
            self.add(gql_type)

    def __contains__(self, name: object) -> bool:
        return name in self._map

    def __iter__(self) -> Iterator[graphql.GraphQLNamedType]:
        return iter(self._map.values())

    def __len__(self) -> int:
        return len(self._map)

    def add(self, gql_type: TGraphQLNamedType) -> TGraphQLNamedType:
        name = gql_type.name
        if name in self._map:
            raise ValueError(f"Name '{name}' has already been registered.")
        self._map[name] = gql_type
        return gql_type

    def get(self, name: str) -> graphql.GraphQLNamedType:
        try:
            return self._map[name]
        except KeyError:
            raise UnknownTypeError(f"Type '{name}' has not been registered.") from None

    def resolve(self, ref: TypeRef) -> graphql.GraphQLType:
        """
        Return type for reference. Textual references use SDL notation, e.g. ``[Int!]!``.
        """
        if not isinstance(ref, str):
            return ref

        try:
            node = parse_type(ref)
        except GraphQLSyntaxError as e:
            raise GQLBuilderException(f"Malformed type reference '{ref}': {e.message}") from e
        return self._from_ast(node)

    def _from_ast(self, node: TypeNode) -> graphql.GraphQLType:
        if isinstance(node, NonNullTypeNode):
            return graphql.GraphQLNonNull(self._from_ast(node.type))  # type: ignore[arg-type]
        if isinstance(node, ListTypeNode):
            return graphql.GraphQLList(self._from_ast(node.type))
        assert isinstance(node, NamedTypeNode)
        return self.get(node.name.value)


def resolve_type(ref: TypeRef, type_map: TypeMap | None) -> graphql.GraphQLType:
    if isinstance(ref, str) and type_map is None:
        raise UnknownTypeError(f"Cannot resolve type '{ref}' without type map.")
    return type_map.resolve(ref) if type_map is not None else ref
