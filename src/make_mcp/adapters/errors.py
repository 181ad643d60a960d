"""ErrorNormalizer / ErrorMapper: remote failures → MakeError → MCP error results."""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp import types as mcp_types

from make_mcp.constants import INTERNAL_ERROR_MESSAGE
from make_mcp.errors import MakeError, MakeMCPError

logger = logging.getLogger(__name__)


class ErrorNormalizer:
    """Turns a failed HTTP response from the automation service into a MakeError.

    The service answers failures with JSON of the form::

        {
            "detail": "...",
            "message": "Validation failed for 1 parameter(s).",
            "code": "IM005",
            "suberrors": [{"message": "Missing value of required parameter 'number'."}]
        }

    Anything that cannot be read this way degrades to the raw body text.
    """

    def normalize_remote_failure(
        self,
        status: int,
        content_type: str | None,
        body: bytes | str | None,
    ) -> MakeError:
        """Build a MakeError from a failed response. Never raises.

        Args:
            status: HTTP status code (normally >= 400).
            content_type: Value of the Content-Type header, if any.
            body: Raw response body.

        Returns:
            MakeError with message and sub-errors extracted from the body.
        """
        text = self._decode(body)
        payload = self._parse(text) if "json" in (content_type or "").lower() else None

        if payload is None:
            logger.debug("Unstructured error body for HTTP %d (content-type=%r)", status, content_type)
            return MakeError(text if text.strip() else f"HTTP {status}", status_code=status)

        message = _first_text(payload, "message", "detail") or text
        return MakeError(
            message,
            self._sub_errors(payload),
            status_code=status,
            code=_first_text(payload, "code"),
            detail=_first_text(payload, "detail"),
        )

    def _decode(self, body: bytes | str | None) -> str:
        if body is None:
            return ""
        if isinstance(body, (bytes, bytearray)):
            return bytes(body).decode("utf-8", errors="replace")
        return str(body)

    def _parse(self, text: str) -> dict[str, Any] | None:
        try:
            payload = json.loads(text)
        except (ValueError, RecursionError):
            return None
        return payload if isinstance(payload, dict) else None

    def _sub_errors(self, payload: dict[str, Any]) -> list[str]:
        """Collect sub-error strings; entries are strings or objects with a message."""
        entries = payload.get("suberrors")
        if entries is None:
            entries = payload.get("subErrors")
        if not isinstance(entries, list):
            return []

        sub_errors = []
        for entry in entries:
            if isinstance(entry, str):
                sub_errors.append(entry)
            elif isinstance(entry, dict):
                text = _first_text(entry, "message", "detail")
                if text:
                    sub_errors.append(text)
        return sub_errors


def _first_text(payload: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return None


class ErrorMapper:
    """Maps exceptions raised while handling a tool call to MCP error results."""

    def to_text(self, error: BaseException) -> str:
        """Render a make-mcp error in full; sanitize anything else."""
        if isinstance(error, MakeMCPError):
            return error.render()
        logger.error("Unexpected error during tool call: %s", error, exc_info=error)
        return INTERNAL_ERROR_MESSAGE

    def to_call_tool_result(self, error: BaseException) -> mcp_types.CallToolResult:
        """Convert an exception to a ``CallToolResult`` with ``isError=True``."""
        return mcp_types.CallToolResult(
            content=[mcp_types.TextContent(type="text", text=self.to_text(error))],
            isError=True,
        )


_default_normalizer = ErrorNormalizer()


def normalize_remote_failure(
    status: int,
    content_type: str | None,
    body: bytes | str | None,
) -> MakeError:
    """Build a MakeError from a failed response using the default normalizer."""
    return _default_normalizer.normalize_remote_failure(status, content_type, body)
