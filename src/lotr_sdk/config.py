"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_URL = "https://the-one-api.dev/v2"
DEFAULT_USER_AGENT = "lotr-sdk/0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for ``OneRingClient``.

    Attributes:
        token: API access token, sent as ``Authorization: Bearer <token>``.
        api_url: Base URL every endpoint path is appended to.
        timeout: Per-request timeout in seconds.
        user_agent: Value of the ``User-Agent`` header.
    """

    token: str
    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        # normalise so endpoint paths can always start with "/"
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"ClientConfig(token='***', api_url={self.api_url!r}, "
            f"timeout={self.timeout!r}, user_agent={self.user_agent!r})"
        )
