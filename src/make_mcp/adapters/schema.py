"""SchemaRemapper: scenario parameter interfaces → JSON Schema (MCP inputSchema)."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from make_mcp.constants import DEFAULT_MAX_DEPTH, WRAPPER_NAME
from make_mcp.errors import MappingError
from make_mcp.models import ElementSpec, FieldSpecs, ParameterSpec, ParameterType, parse_parameter_spec

logger = logging.getLogger(__name__)

_Handler = Callable[[ParameterSpec, int, str], dict[str, Any]]


def _join(path: str, segment: str) -> str:
    return f"{path}.{segment}" if path else segment


class SchemaRemapper:
    """Converts a ParameterSpec tree into a JSON Schema fragment.

    Key transformations:
    - text, json, date → string; number → number; boolean → boolean
    - select → string with ``enum`` taken from the option values
    - array → array with ``items`` remapped from the element spec
    - collection → object with ``properties`` and ``required`` in input order
    - ``help`` → ``description``; ``default`` deep-copied whenever it is present

    The remapper holds no state between calls; the same input always yields
    an equal schema.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self._max_depth = max_depth
        self._handlers: dict[ParameterType, _Handler] = {
            ParameterType.TEXT: self._remap_string,
            ParameterType.JSON: self._remap_string,
            ParameterType.DATE: self._remap_string,
            ParameterType.NUMBER: self._remap_number,
            ParameterType.BOOLEAN: self._remap_boolean,
            ParameterType.SELECT: self._remap_select,
            ParameterType.ARRAY: self._remap_array,
            ParameterType.COLLECTION: self._remap_collection,
        }

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def remap(self, root: ParameterSpec | Mapping[str, Any]) -> dict[str, Any]:
        """Convert a parameter tree to a JSON Schema.

        The root's own name, help, default and required flag are discarded;
        conventionally it is a ``collection`` wrapping the top-level fields.

        Args:
            root: A ParameterSpec, or its wire-format mapping.

        Returns:
            JSON Schema dict.

        Raises:
            MappingError: On an unknown type, a structurally inconsistent node
                or a tree deeper than ``max_depth``.
        """
        spec = self._coerce(root)
        schema = self._remap_node(spec, depth=1, path="", is_root=True)
        logger.debug("Remapped %s parameter tree to %s schema", spec.type.value, schema["type"])
        return schema

    def remap_inputs(self, inputs: Iterable[ParameterSpec | Mapping[str, Any]]) -> dict[str, Any]:
        """Convert a scenario's top-level inputs to an object schema.

        Args:
            inputs: Interface input nodes, in declaration order.

        Returns:
            JSON Schema dict of type ``object``.
        """
        return self.remap({"name": WRAPPER_NAME, "type": ParameterType.COLLECTION.value, "spec": list(inputs)})

    def _coerce(self, root: ParameterSpec | Mapping[str, Any]) -> ParameterSpec:
        if isinstance(root, ParameterSpec):
            return root
        if isinstance(root, Mapping):
            return parse_parameter_spec(root)
        raise MappingError(f"Expected a parameter spec mapping, got {type(root).__name__}")

    def _remap_node(self, spec: ParameterSpec, depth: int, path: str, is_root: bool = False) -> dict[str, Any]:
        if depth > self._max_depth:
            raise MappingError(f"Parameter tree exceeds maximum depth of {self._max_depth}", path=path)

        handler = self._handlers.get(spec.type)
        if handler is None:
            raise MappingError(f"Unsupported parameter type {spec.type.value!r}", path=path)
        schema = handler(spec, depth, path)

        if is_root:
            return schema
        if spec.help:
            schema["description"] = spec.help
        if spec.has_default:
            schema["default"] = copy.deepcopy(spec.default)
        return schema

    def _remap_string(self, spec: ParameterSpec, depth: int, path: str) -> dict[str, Any]:
        return {"type": "string"}

    def _remap_number(self, spec: ParameterSpec, depth: int, path: str) -> dict[str, Any]:
        return {"type": "number"}

    def _remap_boolean(self, spec: ParameterSpec, depth: int, path: str) -> dict[str, Any]:
        return {"type": "boolean"}

    def _remap_select(self, spec: ParameterSpec, depth: int, path: str) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": "string"}
        if spec.options:
            schema["enum"] = [option.value for option in spec.options]
        return schema

    def _remap_array(self, spec: ParameterSpec, depth: int, path: str) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": "array"}
        if spec.spec is None:
            return schema
        if not isinstance(spec.spec, ElementSpec):
            raise MappingError("array parameter needs a single element spec", path=path)
        schema["items"] = self._remap_node(spec.spec.node, depth + 1, _join(path, "items"))
        return schema

    def _remap_collection(self, spec: ParameterSpec, depth: int, path: str) -> dict[str, Any]:
        if spec.spec is not None and not isinstance(spec.spec, FieldSpecs):
            raise MappingError("collection parameter needs a list of fields", path=path)
        fields = spec.spec.fields if spec.spec is not None else ()

        properties: dict[str, Any] = {}
        required: list[str] = []
        for index, child in enumerate(fields):
            if not child.name:
                raise MappingError(f"collection field at index {index} has no name", path=path)
            if child.name in properties:
                raise MappingError(f"duplicate field name {child.name!r}", path=path)
            properties[child.name] = self._remap_node(child, depth + 1, _join(path, child.name))
            if child.required:
                required.append(child.name)

        return {"type": "object", "properties": properties, "required": required}


_default_remapper = SchemaRemapper()


def remap(root: ParameterSpec | Mapping[str, Any]) -> dict[str, Any]:
    """Convert a parameter tree to a JSON Schema using the default depth limit."""
    return _default_remapper.remap(root)


def remap_inputs(inputs: Iterable[ParameterSpec | Mapping[str, Any]]) -> dict[str, Any]:
    """Convert a scenario's top-level inputs to an object schema."""
    return _default_remapper.remap_inputs(inputs)
