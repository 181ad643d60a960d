"""Shared test fixtures for make-mcp tests."""

from __future__ import annotations

from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Scenario interface covering every parameter type, as returned by
# GET /scenarios/{id}/interface.
# ---------------------------------------------------------------------------


@pytest.fixture
def interface_inputs() -> list[dict[str, Any]]:
    """One input of each type, including nested arrays and collections."""
    return [
        {"name": "text", "type": "text", "label": "Text"},
        {
            "name": "number",
            "type": "number",
            "label": "Number",
            "required": True,
            "default": 15,
            "help": "required + default",
        },
        {"name": "boolean", "type": "boolean", "label": "Boolean"},
        {"name": "date", "type": "date", "label": "Date", "help": "description"},
        {"name": "json", "type": "json", "label": "JSON", "help": "description"},
        {
            "name": "select",
            "type": "select",
            "label": "Select",
            "options": [{"value": "option 1"}, {"value": "option 2"}],
        },
        {
            "name": "primitive_array",
            "type": "array",
            "label": "Primitive array",
            "help": "description",
            "spec": {"name": "value", "type": "text"},
        },
        {
            "name": "array_of_arrays",
            "type": "array",
            "label": "Array of arrays",
            "help": "description",
            "spec": {"name": "value", "type": "array", "spec": {"name": "value", "type": "text"}},
        },
        {
            "name": "collection",
            "type": "collection",
            "label": "Collection",
            "help": "description",
            "spec": [{"name": "text", "type": "text", "label": "Text"}],
        },
        {
            "name": "array_of_collections",
            "type": "array",
            "label": "Array of collections",
            "help": "description",
            "spec": {
                "type": "collection",
                "spec": [{"name": "number", "type": "number", "label": "Number"}],
            },
        },
    ]


@pytest.fixture
def interface_schema() -> dict[str, Any]:
    """The JSON Schema expected for ``interface_inputs``."""
    return {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "number": {"type": "number", "default": 15, "description": "required + default"},
            "boolean": {"type": "boolean"},
            "date": {"type": "string", "description": "description"},
            "json": {"type": "string", "description": "description"},
            "select": {"type": "string", "enum": ["option 1", "option 2"]},
            "primitive_array": {
                "type": "array",
                "description": "description",
                "items": {"type": "string"},
            },
            "array_of_arrays": {
                "type": "array",
                "description": "description",
                "items": {"type": "array", "items": {"type": "string"}},
            },
            "collection": {
                "type": "object",
                "description": "description",
                "properties": {"text": {"type": "string"}},
                "required": [],
            },
            "array_of_collections": {
                "type": "array",
                "description": "description",
                "items": {
                    "type": "object",
                    "properties": {"number": {"type": "number"}},
                    "required": [],
                },
            },
        },
        "required": ["number"],
    }


@pytest.fixture
def run_error_body() -> dict[str, Any]:
    """Body of a 400 response to POST /scenarios/{id}/run with a missing input."""
    return {
        "detail": "Validation failed for 1 parameter(s).",
        "message": "Validation failed for 1 parameter(s).",
        "code": "IM005",
        "suberrors": [
            {
                "detail": "Missing value of required parameter 'number'.",
                "message": "Missing value of required parameter 'number'.",
                "code": "IM005",
            }
        ],
    }


@pytest.fixture
def scenarios_listing() -> list[dict[str, Any]]:
    """Entries of GET /scenarios?teamId=..."""
    return [
        {
            "id": 1,
            "name": "Add to inventory",
            "description": "Adds an item",
            "scheduling": {"type": "on-demand"},
            "teamId": 1,
        },
        {"id": 2, "name": "Nightly sync", "scheduling": {"type": "indefinitely", "interval": 900}},
        {"id": 3, "name": "Lookup", "description": "", "scheduling": {"type": "on-demand"}},
    ]
