"""Response schema for the active notices endpoint."""

from pydantic import Field

from notices.schemas.base_schema_model import BaseSchemaModel


class ActiveNoticesResponse(BaseSchemaModel):
    """Rendered markup for every notice the caller should currently see.

    Attributes:
        count: Number of notice banners in ``html``.
        html: Banner markup followed by the dismiss script.
    """

    count: int = Field(..., ge=0)
    html: str
