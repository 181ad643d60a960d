"""Argument checks performed before calling the automation service.

Failures raise ``ValidationError`` so they render the same way as remote
errors at the reporting site.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from make_mcp.errors import ValidationError

_TYPE_NAMES: dict[type, str] = {
    bool: "a boolean",
    int: "an integer",
    float: "a number",
    str: "a string",
    list: "an array",
    dict: "an object",
}


def _describe(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        if set(expected) == {int, float}:
            return "a number"
        return " or ".join(_describe(kind) for kind in expected)
    return _TYPE_NAMES.get(expected, expected.__name__)


def _matches(value: Any, expected: type | tuple[type, ...]) -> bool:
    kinds = expected if isinstance(expected, tuple) else (expected,)
    # bool is an int subclass, but true/false is never a valid id or count.
    if isinstance(value, bool) and bool not in kinds:
        return False
    return isinstance(value, kinds)


def require_argument(
    arguments: Mapping[str, Any] | None,
    name: str,
    *,
    expected: type | tuple[type, ...] | None = None,
) -> Any:
    """Return ``arguments[name]``, raising ValidationError if it is unusable.

    Args:
        arguments: Tool-call arguments (may be None).
        name: Argument to fetch.
        expected: Optional type (or tuple of types) the value must have.

    Raises:
        ValidationError: ``"<name> is required"`` when missing, None or an
            empty string; ``"<name> must be <type>"`` on a type mismatch.
    """
    value = arguments.get(name) if arguments else None
    if value is None or value == "":
        raise ValidationError(f"{name} is required", name)
    if expected is not None and not _matches(value, expected):
        raise ValidationError(f"{name} must be {_describe(expected)}", name)
    return value
