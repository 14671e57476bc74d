"""Help Scout MCP — Shared HTTP client utilities."""
import base64
import json
from enum import Enum
from typing import Any, Dict, Optional

import httpx

from .exceptions import HelpScoutError


def basic_auth_header(api_key: str) -> str:
    """Return the Basic-auth header value (the password is a placeholder)."""
    return f"Basic {base64.b64encode(f'{api_key}:X'.encode()).decode()}"


def _query_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Drop unset query parameters and stringify the rest.

    ``None`` and ``""`` are omitted entirely rather than sent as
    empty-valued parameters.
    """
    if not params:
        return {}
    return {
        key: _query_value(value)
        for key, value in params.items()
        if value is not None and value != ""
    }


def compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return *data* without the keys whose value is ``None``."""
    return {k: v.value if isinstance(v, Enum) else v for k, v in data.items() if v is not None}


def parse_body(response: httpx.Response) -> Any:
    """Decode a successful response, treating an absent body as ``{}``."""
    if response.status_code == 204 or response.headers.get("content-length") == "0":
        return {}
    if not response.text:
        return {}
    return response.json()


# ---------------------------------------------------------------------------
# Result envelopes
# ---------------------------------------------------------------------------

def ok(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def ok_message(message: str) -> Dict[str, Any]:
    return {"success": True, "message": message}


def not_configured(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def handle_error(e: Exception, action: str = "request") -> Dict[str, Any]:
    """Standardised error response builder."""
    if isinstance(e, HelpScoutError):
        out: Dict[str, Any] = {"success": False, "error": f"Failed to {action}: {e}"}
        status_code = getattr(e, "status_code", None)
        if status_code is not None:
            out["status_code"] = status_code
            try:
                out["details"] = json.loads(e.body)
            except (TypeError, ValueError):
                out["details"] = e.body
        return out
    return {"success": False, "error": f"Unexpected error during {action}: {e}"}
