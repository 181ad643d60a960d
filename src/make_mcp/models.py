"""Pydantic models for the scenario parameter-interface vocabulary.

A scenario interface is a list of ``ParameterSpec`` nodes. Composite nodes
carry a nested ``spec`` whose shape depends on the node's declared ``type``:

- ``array``: an ``ElementSpec`` holding the single element-type node.
- ``collection``: a ``FieldSpecs`` holding the ordered, named fields.

The variant is chosen from ``type`` while parsing, never from the shape of
the nested value.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from make_mcp.errors import MappingError


class ParameterType(str, Enum):
    """Closed set of parameter types understood by the automation service."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    JSON = "json"
    COLLECTION = "collection"
    ARRAY = "array"
    SELECT = "select"


class ParameterOption(BaseModel):
    """One choice of a ``select`` parameter."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    value: str
    label: str | None = None


class ElementSpec(BaseModel):
    """Element type of an ``array`` parameter."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["element"] = "element"
    node: ParameterSpec


class FieldSpecs(BaseModel):
    """Ordered fields of a ``collection`` parameter."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fields"] = "fields"
    fields: tuple[ParameterSpec, ...] = ()


NestedSpec = Annotated[ElementSpec | FieldSpecs, Field(discriminator="kind")]


class ParameterSpec(BaseModel):
    """A single field of a scenario interface.

    ``default`` may legitimately be ``None``; use ``has_default`` to tell an
    explicit null apart from an absent key.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = None
    type: ParameterType
    label: str | None = None
    help: str | None = None
    required: bool = False
    default: Any = None
    multiline: bool | None = None
    options: tuple[ParameterOption, ...] | None = None
    spec: NestedSpec | None = None

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    @model_validator(mode="before")
    @classmethod
    def _select_spec_variant(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        nested = data.get("spec")
        if nested is None or isinstance(nested, (ElementSpec, FieldSpecs)):
            return data

        data = dict(data)
        declared = data.get("type")
        if declared == ParameterType.ARRAY:
            if isinstance(nested, (list, tuple)) and not nested:
                data.pop("spec")
                return data
            if isinstance(nested, (list, tuple)):
                # Shorthand for an array of collections: the list is the
                # field set of the element.
                nested = {"type": ParameterType.COLLECTION.value, "spec": list(nested)}
            data["spec"] = {"kind": "element", "node": nested}
        elif declared == ParameterType.COLLECTION:
            if not isinstance(nested, (list, tuple)):
                raise ValueError("collection spec must be a list of fields")
            data["spec"] = {"kind": "fields", "fields": list(nested)}
        else:
            data.pop("spec")
        return data


ParameterSpec.model_rebuild()
ElementSpec.model_rebuild()
FieldSpecs.model_rebuild()


def _location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def parse_parameter_spec(data: Mapping[str, Any]) -> ParameterSpec:
    """Parse a wire-format parameter node into a ``ParameterSpec``.

    Raises:
        MappingError: If the node uses an unknown ``type`` or is malformed.
            Only the first problem is reported.
    """
    try:
        return ParameterSpec.model_validate(data)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        if error["type"] == "enum":
            message = f"Unsupported parameter type {error['input']!r}"
        else:
            message = error["msg"]
        raise MappingError(message, path=_location(error["loc"])) from exc


class Scheduling(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str


class Scenario(BaseModel):
    """The subset of a scenario listing needed to advertise it as a tool."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    description: str | None = None
    scheduling: Scheduling
