"""Error taxonomy shared by the remapper, the normalizer and tool results.

Every error renders through ``render()``, and ``str(error)`` is that rendering,
so a reporting site never has to inspect which kind it holds.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of normalized errors."""

    LOCAL_VALIDATION = "LocalValidation"
    REMOTE = "Remote"


class MakeMCPError(Exception):
    """Base class for all make-mcp errors.

    Only subclasses that implement ``render()`` can be instantiated. Attributes
    listed in ``_fields`` are read-only once ``__init__`` returns.
    """

    _fields: tuple[str, ...] = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> MakeMCPError:
        # BaseException.__new__ skips the ABC abstract-method check.
        if cls.render is MakeMCPError.render:
            raise TypeError(f"{cls.__name__} is abstract; raise one of its concrete subclasses")
        return super().__new__(cls, *args, **kwargs)

    def _seal(self) -> None:
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._fields and getattr(self, "_sealed", False):
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class NormalizedError(MakeMCPError):
    """A failure reported to the end caller: either remote or local validation."""

    kind: ErrorKind
    _fields = ("message", "sub_errors", "field")

    def __init__(
        self,
        message: str,
        sub_errors: Iterable[str] = (),
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.sub_errors: tuple[str, ...] = tuple(sub_errors)
        self.field = field


class MakeError(NormalizedError):
    """The remote automation service rejected or failed a request.

    Renders as ``MakeError: <message>`` followed by one ``\\n - <sub-error>``
    line per sub-error, in order.
    """

    kind = ErrorKind.REMOTE
    _fields = NormalizedError._fields + ("status_code", "code", "detail")

    def __init__(
        self,
        message: str,
        sub_errors: Iterable[str] = (),
        *,
        status_code: int | None = None,
        code: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message, sub_errors)
        self.status_code = status_code
        self.code = code
        self.detail = detail
        self._seal()

    def render(self) -> str:
        return "".join([f"MakeError: {self.message}", *(f"\n - {sub}" for sub in self.sub_errors)])

    def __repr__(self) -> str:
        return (
            f"MakeError(message={self.message!r}, sub_errors={list(self.sub_errors)!r}, "
            f"status_code={self.status_code!r})"
        )


class ValidationError(NormalizedError):
    """Caller-supplied input failed a precondition checked before any remote call."""

    kind = ErrorKind.LOCAL_VALIDATION

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, field=field)
        self._seal()

    def render(self) -> str:
        if not self.field:
            return f"ValidationError: {self.message}"
        return f"ValidationError: {self.message} (field: {self.field})"

    def __repr__(self) -> str:
        return f"ValidationError(message={self.message!r}, field={self.field!r})"


class MappingError(MakeMCPError, ValueError):
    """A parameter tree could not be converted to a JSON Schema.

    Args:
        message: What is wrong with the node.
        path: Dotted location of the offending node ("" for the root).
    """

    _fields = ("message", "path")

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self._seal()

    def render(self) -> str:
        if not self.path:
            return f"MappingError: {self.message}"
        return f"MappingError: {self.message} (at: {self.path})"
