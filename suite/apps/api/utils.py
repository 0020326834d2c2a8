from typing import Any, Optional

import httpx
from rest_framework import status


def is_success(response: httpx.Response) -> bool:
    return status.is_success(response.status_code)


def extract_error_message(response: httpx.Response, fallback: Optional[str] = None) -> str:
    """
    Pull a readable message out of an error response.

    Understands plain-text bodies, ``{"detail": ...}``, ``{"message": ...}``
    and ``{"error": {"message": ...}}`` payloads as well as lists of strings.
    """
    fallback = fallback or f"Request failed with status {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        text = response.text.strip()
        return text or fallback
    return _extract_message(payload, fallback)


def describe(response: httpx.Response) -> str:
    """One-line summary used in assertion messages."""
    request = response.request
    summary = f"{request.method} {request.url.path} -> {response.status_code}"
    if is_success(response):
        return summary
    return f"{summary}: {extract_error_message(response)}"


def _extract_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, str) and payload.strip():
        return payload.strip()
    if isinstance(payload, dict):
        for key in ("detail", "message"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        error = payload.get("error")
        if isinstance(error, dict):
            return _extract_message(error, fallback)
        if isinstance(error, str) and error.strip():
            return error.strip()
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback
