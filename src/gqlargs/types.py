from collections.abc import Iterable, Mapping
from typing import Any

from graphql import GraphQLType

TypeRef = GraphQLType | str

Attributes = Mapping[str, Any]

Declarations = Iterable[tuple[Any, Attributes]] | Mapping[Any, Attributes]
