from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import singledispatch

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLType,
    GraphQLUnionType,
)

from gqlargs.exceptions import MissingCapabilityError
from gqlargs.model import Argument
from gqlargs.type_map import TypeMap, resolve_type


class Traversal:
    """
    Context passed to :func:`children`. Holds type map used for textual type references.
    """

    __slots__ = ("_type_map",)

    def __init__(self, type_map: TypeMap | None = None):
        self._type_map = type_map

    @property
    def type_map(self) -> TypeMap | None:
        return self._type_map

    def resolve(self, ref: str) -> GraphQLType:
        return resolve_type(ref, self._type_map)


@singledispatch
def children(node: object, traversal: Traversal) -> Sequence[object]:
    raise MissingCapabilityError(
        f"Node {node!r} of kind '{type(node).__name__}' is not traversable"
    )


@children.register
def _(node: Argument, traversal: Traversal) -> Sequence[object]:
    return [node.type]


@children.register(GraphQLArgument)
@children.register(GraphQLInputField)
def _(node: GraphQLArgument | GraphQLInputField, traversal: Traversal) -> Sequence[object]:
    return [node.type]


@children.register(GraphQLList)
@children.register(GraphQLNonNull)
def _(node: GraphQLList | GraphQLNonNull, traversal: Traversal) -> Sequence[object]:
    return [node.of_type]


@children.register(GraphQLObjectType)
@children.register(GraphQLInterfaceType)
def _(node: GraphQLObjectType | GraphQLInterfaceType, traversal: Traversal) -> Sequence[object]:
    result: list[object] = list(node.interfaces)
    for field in node.fields.values():
        result.extend(field.args.values())
        result.append(field.type)
    return result


@children.register
def _(node: GraphQLInputObjectType, traversal: Traversal) -> Sequence[object]:
    return list(node.fields.values())


@children.register
def _(node: GraphQLUnionType, traversal: Traversal) -> Sequence[object]:
    return list(node.types)


@children.register(GraphQLScalarType)
@children.register(GraphQLEnumType)
def _(node: GraphQLScalarType | GraphQLEnumType, traversal: Traversal) -> Sequence[object]:
    return []


@children.register
def _(node: str, traversal: Traversal) -> Sequence[object]:
    return [traversal.resolve(node)]


def walk(root: object, traversal: Traversal | None = None) -> Iterator[object]:
    """
    Depth first walk yielding every node reachable from ``root`` exactly once.
    """
    if traversal is None:
        traversal = Traversal()

    seen: dict[int, object] = {}
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        # keep reference so id is not reused while walking
        seen[id(node)] = node
        yield node
        stack.extend(reversed(children(node, traversal)))


def reachable_types(root: object, traversal: Traversal | None = None) -> list[GraphQLNamedType]:
    return [node for node in walk(root, traversal) if isinstance(node, GraphQLNamedType)]
