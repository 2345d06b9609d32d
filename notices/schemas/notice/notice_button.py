"""Schema for a notice action link."""

from pydantic import Field

from notices.schemas.base_schema_model import BaseSchemaModel


class NoticeButton(BaseSchemaModel):
    """An action link rendered below the notice message.

    Attributes:
        url: Link target. Unsafe schemes are dropped at render time.
        label: Link text, escaped at render time.
    """

    url: str = Field(..., min_length=1, description="Link target")
    label: str = Field(..., min_length=1, max_length=200, description="Link text")
