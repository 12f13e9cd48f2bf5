"""Exception hierarchy for lotr-sdk."""

from __future__ import annotations

from typing import Any


class LotrSDKError(Exception):
    """Root exception for the entire SDK."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(LotrSDKError):
    """Caller input was rejected before anything was sent."""


# ── Transport Exceptions ─────────────────────────────────────────────


class ClientError(LotrSDKError):
    """Base class for all errors raised while talking to the API."""


class APIRequestError(ClientError):
    """The request could not be completed (connection failure, timeout)."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"request {url} failed: {reason}")


class APIStatusError(ClientError):
    """The API answered with a non-success status code."""

    def __init__(self, url: str, status_code: int, message: str | None = None) -> None:
        self.url = url
        self.status_code = status_code
        self.message = message

        msg = f"request {url} returned HTTP {status_code}"
        if message:
            msg += f": {message}"
        super().__init__(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "API_STATUS_ERROR",
            "url": self.url,
            "status_code": self.status_code,
            "message": self.message,
        }


class APIResponseError(ClientError):
    """The response body is not a valid document envelope."""
