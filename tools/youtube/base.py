"""Shared ADK tool plumbing and the text response envelope."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from google.adk.tools import BaseTool, _automatic_function_calling_util as tool_utils
from pydantic import BaseModel

from tools.captions.errors import ErrorKind


def text_response(payload: Any) -> Dict[str, Any]:
    """Wrap a JSON-serializable payload in the text content envelope."""
    return {
        "content": [
            {
                "type": "text",
                "text": json.dumps(payload, indent=2, ensure_ascii=False),
            }
        ]
    }


def error_response(message: str, kind: Optional[ErrorKind] = None, **extra: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = dict(extra)
    payload["error"] = message
    if kind is not None:
        payload["errorKind"] = kind.value
    return text_response(payload)


class YouTubeTool(BaseTool):
    """Base class wiring a pydantic input schema into the ADK declaration."""

    NAME: str = ""
    DESCRIPTION: str = ""
    INPUT_MODEL: type[BaseModel]

    def __init__(self) -> None:
        super().__init__(
            name=self.NAME,
            description=self.DESCRIPTION,
        )

    @property
    def args_schema(self) -> type[BaseModel]:
        return self.INPUT_MODEL

    def _get_declaration(self):
        declaration = tool_utils.build_function_declaration(
            func=self.args_schema,
            variant=self._api_variant,
        )
        declaration.name = self.NAME
        return declaration


__all__ = ["YouTubeTool", "error_response", "text_response"]
