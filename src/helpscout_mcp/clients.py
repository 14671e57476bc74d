"""Help Scout MCP — API client construction from configuration."""
import logging
from dataclasses import dataclass
from typing import Optional

from .config import (
    HELPSCOUT_API_KEY,
    HELPSCOUT_APP_ID,
    HELPSCOUT_APP_SECRET,
    HELPSCOUT_TIMEOUT,
)
from .docs_client import DocsClient
from .inbox_client import InboxClient

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HelpScoutClients:
    """The live API clients; either is ``None`` when its credentials are missing."""

    docs: Optional[DocsClient] = None
    inbox: Optional[InboxClient] = None

    @property
    def enabled_apis(self) -> list[str]:
        apis = []
        if self.docs is not None:
            apis.append("Docs API")
        if self.inbox is not None:
            apis.append("Inbox API")
        return apis


def build_clients(
    api_key: Optional[str] = HELPSCOUT_API_KEY,
    app_id: Optional[str] = HELPSCOUT_APP_ID,
    app_secret: Optional[str] = HELPSCOUT_APP_SECRET,
    timeout: Optional[float] = HELPSCOUT_TIMEOUT,
) -> HelpScoutClients:
    """Create one client per API whose credentials are present."""
    docs = DocsClient(api_key, timeout=timeout) if api_key else None
    inbox = InboxClient(app_id, app_secret, timeout=timeout) if app_id and app_secret else None
    if bool(app_id) != bool(app_secret):
        log.warning("Only one of HELPSCOUT_APP_ID / HELPSCOUT_APP_SECRET is set; Inbox tools disabled")
    return HelpScoutClients(docs=docs, inbox=inbox)
