"""
Exception types raised by the Help Scout API clients.

These let tool handlers tell apart a failed token exchange from a
failed API request.  Network-level failures are not wrapped; they
surface as the underlying ``httpx`` exceptions.
"""


class HelpScoutError(Exception):
    """Base exception for all Help Scout client errors."""


class ApiError(HelpScoutError):
    """Raised when a Docs or Inbox API request returns a non-2xx status."""

    def __init__(self, status_code: int, body: str, api: str = "Docs") -> None:
        self.status_code = status_code
        self.body = body
        self.api = api
        super().__init__(f"Help Scout {api} API error {status_code}: {body}")


class OAuthError(HelpScoutError):
    """Raised when the client-credentials token exchange fails."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Help Scout OAuth error {status_code}: {body}")
