from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from graphql import Undefined

from gqlargs.exceptions import GQLBuilderException
from gqlargs.types import TypeRef


@dataclass(frozen=True, slots=True)
class Deprecation:
    reason: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Reference:
    """
    Where an argument was declared. Only used for diagnostics.
    """

    module: str | None = None
    location: str | None = None
    identifier: str | None = None

    def __str__(self) -> str:
        text = ":".join(part for part in (self.module, self.location) if part)
        if self.identifier:
            text = f"{text} ({self.identifier})" if text else self.identifier
        return text or "<unknown>"


@dataclass(frozen=True, slots=True, kw_only=True)
class Argument:
    """
    Metadata of a single field argument.

    Instances are produced by :class:`gqlargs.compiler.ArgumentCompiler` and are never
    modified afterwards. Whether an argument is required is not stored, use
    :func:`gqlargs.requiredness.is_required`.
    """

    name: str
    type: TypeRef
    default_value: Any = Undefined
    deprecation: Deprecation | None = None
    description: str | None = None
    reference: Reference | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise GQLBuilderException(
                f"Argument name must be non-empty string, got {self.name!r}{self._origin()}"
            )
        if self.type is None or self.type is Undefined or (
            isinstance(self.type, str) and not self.type.strip()
        ):
            raise GQLBuilderException(f"Argument '{self.name}' is missing type{self._origin()}")

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation is not None

    def _origin(self) -> str:
        return f" (declared at {self.reference})" if self.reference is not None else ""
