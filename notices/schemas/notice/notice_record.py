"""Notice configuration schemas and default merging."""

from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, field_validator

from notices.constants import (
    DEFAULT_DISMISSIBLE_TTL,
    DEFAULT_NOTICE_CSS_CLASS,
    MAX_NOTICE_BUTTONS,
    NOTICE_KEY_MAX_LENGTH,
)
from notices.enums import DismissScope, NoticeType
from notices.keys import notice_storage_key, sanitize_key
from notices.schemas.base_schema_model import BaseSchemaModel
from notices.schemas.notice.notice_button import NoticeButton


class NoticeDefaults(BaseSchemaModel):
    """Default presentation and dismissal settings for notices.

    Every field has a documented default so ``NoticeDefaults()`` is a valid
    baseline. Hosting applications may build their own instance and pass it
    to the renderer or the registry.

    Attributes:
        type: Severity, rendered as the ``notice-<type>`` CSS class.
        css_class: Extra class on the container element.
        dismissible: Render a dismiss control and the TTL attribute.
        dismissible_scope: ``user`` (durable, per user) or ``transient``
            (shared by everyone, expires after ``dismissible_ttl``).
        dismissible_ttl: Seconds a shared dismissal lasts. Default one week.
        required: The notice cannot really be dismissed; dismiss requests
            are acknowledged but never persisted.
        show_if: Caller-evaluated display condition.
        buttons: Up to two action links.
    """

    model_config = ConfigDict(use_enum_values=False)

    type: NoticeType = Field(default=NoticeType.INFO)
    css_class: str = Field(
        default=DEFAULT_NOTICE_CSS_CLASS,
        validation_alias=AliasChoices("css_class", "cssClass", "class"),
    )
    dismissible: bool = False
    dismissible_scope: DismissScope = Field(
        default=DismissScope.USER,
        validation_alias=AliasChoices(
            "dismissible_scope", "dismissibleScope", "dismissible-meta"
        ),
    )
    dismissible_ttl: int = Field(
        default=DEFAULT_DISMISSIBLE_TTL,
        ge=1,
        validation_alias=AliasChoices(
            "dismissible_ttl", "dismissibleTtl", "dismissibleTTL", "dismissible-time"
        ),
    )
    required: bool = Field(
        default=False,
        validation_alias=AliasChoices("required", "is_required", "isRequired"),
    )
    show_if: bool = Field(
        default=True, validation_alias=AliasChoices("show_if", "showIf")
    )
    buttons: list[NoticeButton] = Field(
        default_factory=list, max_length=MAX_NOTICE_BUTTONS
    )

    @field_validator("dismissible_scope", mode="before")
    @classmethod
    def parse_scope(cls, value: Any) -> DismissScope:
        return DismissScope.parse(value)

    @field_validator("dismissible_ttl", mode="before")
    @classmethod
    def ttl_to_seconds(cls, value: Any) -> Any:
        if isinstance(value, timedelta):
            return int(value.total_seconds())
        return value

    @field_validator("css_class")
    @classmethod
    def normalize_css_class(cls, value: str) -> str:
        return " ".join(value.split())


class NoticeRecord(NoticeDefaults):
    """A single notice to render.

    Attributes:
        id: Logical notice identity. Together with ``dismissible_scope`` it
            selects the dismissed flag; keeping the pair unique is up to
            the caller.
        message: Restricted HTML, sanitized before it is embedded.
    """

    id: str = Field(..., min_length=1)
    message: str = ""

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        if not sanitize_key(value):
            raise ValueError("id must contain at least one of [a-z0-9_-]")
        if len(notice_storage_key(value)) > NOTICE_KEY_MAX_LENGTH:
            raise ValueError(
                f"storage key must be at most {NOTICE_KEY_MAX_LENGTH} characters"
            )
        return value


def merge_notice(
    record: NoticeRecord | Mapping[str, Any],
    defaults: NoticeDefaults | None = None,
) -> NoticeRecord:
    """Layer a notice over defaults; fields set on the record win.

    Args:
        record: The notice, either validated or as a raw mapping.
        defaults: Baseline settings. ``NoticeDefaults()`` when omitted.

    Returns:
        A new validated NoticeRecord.

    Raises:
        pydantic.ValidationError: If the merged notice is invalid.
    """
    if not isinstance(record, NoticeRecord):
        record = NoticeRecord.model_validate(record)
    if defaults is None:
        defaults = NoticeDefaults()

    return NoticeRecord.model_validate(
        {**defaults.model_dump(), **record.model_dump(exclude_unset=True)}
    )
