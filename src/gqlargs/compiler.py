from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import fields
from types import MappingProxyType
from typing import Any

from graphql.pyutils import snake_to_camel

from gqlargs.deprecation import DeprecationNormalizer, from_attributes
from gqlargs.exceptions import GQLBuilderException
from gqlargs.model import Argument
from gqlargs.types import Attributes, Declarations

logger = logging.getLogger(__name__)

_ARGUMENT_FIELDS = frozenset(f.name for f in fields(Argument)) - {"name"}


def snake_to_camel_case(value: str) -> str:
    return snake_to_camel(value, upper=False)


def canonical_name(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, enum.Enum):
        return key.name
    return str(key)


class ArgumentCompiler:
    """
    Builds name keyed table of :class:`Argument` from ordered declarations.

    Declarations are processed in the given order. When the same name is declared more
    than once the last declaration wins, unless compiler is created with ``strict=True``
    in which case :class:`GQLBuilderException` is raised.
    """

    def __init__(
        self,
        name_converter: Callable[[str], str] | None = None,
        deprecation_normalizer: DeprecationNormalizer = from_attributes,
        *,
        strict: bool = False,
    ):
        self._name_converter = name_converter
        self._deprecation_normalizer = deprecation_normalizer
        self._strict = strict

    def compile(self, declarations: Declarations) -> Mapping[str, Argument]:
        if isinstance(declarations, Mapping):
            declarations = declarations.items()

        args: dict[str, Argument] = {}
        for key, attributes in declarations:
            argument = self.compile_one(key, attributes)
            if argument.name in args:
                if self._strict:
                    raise GQLBuilderException(
                        f"Argument '{argument.name}' has already been declared"
                    )
                logger.warning(
                    "Argument '%s' declared more than once, last declaration is used",
                    argument.name,
                )
            args[argument.name] = argument

        logger.debug("Compiled %d argument(s): %s", len(args), ", ".join(args))
        return MappingProxyType(args)

    def compile_one(self, key: Any, attributes: Attributes) -> Argument:
        name = canonical_name(key)
        if self._name_converter is not None:
            name = self._name_converter(name)

        data = self._deprecation_normalizer(attributes)
        unknown = data.keys() - _ARGUMENT_FIELDS
        if unknown:
            raise GQLBuilderException(
                f"Unknown attribute(s) {', '.join(sorted(unknown))} for argument '{name}'"
            )
        if "type" not in data:
            reference = data.get("reference")
            origin = f" (declared at {reference})" if reference is not None else ""
            raise GQLBuilderException(f"Argument '{name}' is missing type{origin}")

        return Argument(name=name, **data)


def compile_arguments(declarations: Declarations, **options: Any) -> Mapping[str, Argument]:
    return ArgumentCompiler(**options).compile(declarations)
