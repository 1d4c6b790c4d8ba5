"""
API key authentication for protected gateway routes.

Keys are accepted from the X-API-Key header or the apiKey query parameter.
A key is valid when it carries the `regima_` prefix and is longer than
20 characters. The /v1, /agents, /data and /tools routers depend on
`require_api_key`.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Header, Query, Request

API_KEY_PREFIX = "regima_"
API_KEY_MIN_LENGTH = 21


class AuthenticationError(Exception):
    """Authentication failed; rendered as a JSON error by the app."""

    def __init__(self, status_code: int, error: str, message: str):
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.error, "message": self.message}


def validate_api_key(api_key: Optional[str]) -> bool:
    if not api_key:
        return False
    return api_key.startswith(API_KEY_PREFIX) and len(api_key) >= API_KEY_MIN_LENGTH


def require_api_key(
    request: Request,
    x_api_key: Optional[str] = Header(default=None, alias="X-API-Key"),
    api_key_param: Optional[str] = Query(default=None, alias="apiKey"),
) -> Dict[str, Any]:
    """Router dependency: resolve the caller or raise AuthenticationError."""
    api_key = x_api_key or api_key_param
    if not api_key:
        raise AuthenticationError(
            401,
            "Authentication required",
            "API key must be provided in X-API-Key header or apiKey query parameter",
        )
    if not validate_api_key(api_key):
        raise AuthenticationError(403, "Invalid API key", "The provided API key is not valid")
    user = {"apiKey": api_key, "role": "user"}
    request.state.user = user
    return user
