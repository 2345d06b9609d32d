"""Request schema for the dismiss-notice endpoint."""

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from notices.constants import (
    DEFAULT_DISMISSIBLE_TTL,
    NOTICE_DISMISS_ACTION,
    NOTICE_KEY_MAX_LENGTH,
)
from notices.enums import DismissScope
from notices.schemas.base_schema_model import BaseSchemaModel

TRUTHY_FLAGS = frozenset({"1", "true", "yes", "on"})


class DismissNoticeRequest(BaseSchemaModel):
    """Fields posted by the client trigger, minus the security token.

    Parsing is lenient because the values come from DOM attributes: a
    malformed field degrades to its default instead of failing the request.
    A foreign ``action`` or an id longer than a storage key still fails
    validation. The token is deliberately absent; it is verified before
    this model is built.

    Attributes:
        action: Must be ``dismiss-notice`` when present.
        id: Storage key of the notice (the container element's id).
        meta: ``user`` or ``transient``; anything else means ``transient``.
        time: Shared dismissal lifetime in seconds.
        is_required: Client-reported required flag.
    """

    model_config = ConfigDict(
        use_enum_values=False,
        json_schema_extra={
            "example": {
                "action": NOTICE_DISMISS_ACTION,
                "id": "notice-update-v2",
                "meta": "transient",
                "time": DEFAULT_DISMISSIBLE_TTL,
                "is_required": 0,
                "token": "<security token>",
            }
        },
    )

    action: str = NOTICE_DISMISS_ACTION
    id: str = Field(default="", max_length=NOTICE_KEY_MAX_LENGTH)
    meta: DismissScope = DismissScope.TRANSIENT
    time: int = DEFAULT_DISMISSIBLE_TTL
    is_required: bool = False

    @field_validator("action")
    @classmethod
    def validate_action(cls, value: str) -> str:
        if value != NOTICE_DISMISS_ACTION:
            raise ValueError(f"action must be {NOTICE_DISMISS_ACTION!r}")
        return value

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("meta", mode="before")
    @classmethod
    def coerce_meta(cls, value: Any) -> DismissScope:
        try:
            return DismissScope.parse(value)
        except ValueError:
            return DismissScope.TRANSIENT

    @field_validator("time", mode="before")
    @classmethod
    def coerce_time(cls, value: Any) -> int:
        try:
            seconds = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_DISMISSIBLE_TTL
        return seconds if seconds > 0 else DEFAULT_DISMISSIBLE_TTL

    @field_validator("is_required", mode="before")
    @classmethod
    def coerce_is_required(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in TRUTHY_FLAGS
