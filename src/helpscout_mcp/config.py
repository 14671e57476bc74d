"""Help Scout MCP — Configuration and constants."""
import os
import logging
from enum import Enum

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(level=logging.INFO)

# ---------------------------------------------------------------------------
# API credentials
# ---------------------------------------------------------------------------
HELPSCOUT_API_KEY = os.getenv("HELPSCOUT_API_KEY")
HELPSCOUT_APP_ID = os.getenv("HELPSCOUT_APP_ID")
HELPSCOUT_APP_SECRET = os.getenv("HELPSCOUT_APP_SECRET")

# Seconds; applies to every request and to the token exchange
HELPSCOUT_TIMEOUT = float(os.getenv("HELPSCOUT_TIMEOUT", 30))

DOCS_NOT_CONFIGURED = "HELPSCOUT_API_KEY not configured"
INBOX_NOT_CONFIGURED = "HELPSCOUT_APP_ID and HELPSCOUT_APP_SECRET not configured"

# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
DOCS_BASE_URL = "https://docsapi.helpscout.net/v1"
INBOX_BASE_URL = "https://api.helpscout.net/v2"
INBOX_TOKEN_URL = "https://api.helpscout.net/v2/oauth2/token"

# Subtracted from the server-declared token lifetime
TOKEN_EXPIRY_MARGIN = 60

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ParentType(str, Enum):
    COLLECTION = "collection"
    CATEGORY = "category"

class Visibility(str, Enum):
    ALL = "all"
    PUBLIC = "public"
    PRIVATE = "private"

class ArticleStatus(str, Enum):
    ALL = "all"
    PUBLISHED = "published"
    NOT_PUBLISHED = "notpublished"

class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

class ConversationStatus(str, Enum):
    ACTIVE = "active"
    ALL = "all"
    CLOSED = "closed"
    OPEN = "open"
    PENDING = "pending"
    SPAM = "spam"

class ConversationType(str, Enum):
    EMAIL = "email"
    PHONE = "phone"
    CHAT = "chat"

class ThreadType(str, Enum):
    CUSTOMER = "customer"
    NOTE = "note"
    REPLY = "reply"

class PatchOp(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"

# All available scopes for --scope flag
AVAILABLE_SCOPES = [
    "sites",
    "collections",
    "categories",
    "articles",
    "redirects",
    "conversations",
    "customers",
    "team",
]
