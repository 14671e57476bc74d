"""Help Scout MCP — Structured tool arguments.

Nested payloads that tools accept.  Fields are snake_case in Python and
camelCase on the wire; call :func:`dump` to produce the request body.
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .config import ThreadType


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def dump(model: Optional[BaseModel]) -> Optional[Dict[str, Any]]:
    """Serialise *model* by alias, dropping unset fields."""
    if model is None:
        return None
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_all(models: Optional[List[BaseModel]]) -> Optional[List[Dict[str, Any]]]:
    if models is None:
        return None
    return [dump(m) for m in models]


class CategoryOrder(_Payload):
    id: str
    order: int


class CustomerRef(_Payload):
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ThreadCustomer(_Payload):
    email: str


class ConversationThread(_Payload):
    type: ThreadType
    text: str
    customer: Optional[ThreadCustomer] = None


class EmailEntry(_Payload):
    value: str
    type: Optional[Literal["home", "work", "other"]] = None


class PhoneEntry(_Payload):
    value: str
    type: Optional[Literal["home", "work", "mobile", "fax", "pager", "other"]] = None
