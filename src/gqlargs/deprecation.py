from collections.abc import Callable
from typing import Any

from gqlargs.exceptions import GQLBuilderException
from gqlargs.model import Deprecation
from gqlargs.types import Attributes

DeprecationNormalizer = Callable[[Attributes], dict[str, Any]]

_MARKER = "deprecate"
_RECORD = "deprecation"


def deprecate(reason: str | None = None) -> Deprecation:
    return Deprecation(reason=reason)


def from_attributes(attributes: Attributes) -> dict[str, Any]:
    """
    Replace raw ``deprecate`` marker with normalized ``deprecation`` record.

    ``deprecate=True`` marks entry as deprecated without reason, a string is used as the
    reason and ``False`` or ``None`` leave entry untouched. Already normalized
    ``deprecation`` entry is passed through.
    """
    result = dict(attributes)
    if _MARKER not in result:
        deprecation = result.get(_RECORD)
        if deprecation is not None and not isinstance(deprecation, Deprecation):
            raise GQLBuilderException(
                f"Expected '{_RECORD}' to be Deprecation record, got {deprecation!r}"
            )
        result[_RECORD] = deprecation
        return result

    if _RECORD in result:
        raise GQLBuilderException(f"Only one of '{_MARKER}' and '{_RECORD}' may be given")

    marker = result.pop(_MARKER)
    match marker:
        case None | False:
            result[_RECORD] = None
        case True:
            result[_RECORD] = Deprecation()
        case str(reason):
            result[_RECORD] = Deprecation(reason=reason)
        case Deprecation():
            result[_RECORD] = marker
        case _:
            raise GQLBuilderException(f"Unsupported deprecation marker {marker!r}")
    return result
