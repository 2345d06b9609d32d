"""Response schema for the dismiss-notice endpoint."""

from notices.schemas.base_schema_model import BaseSchemaModel


class DismissNoticeResponse(BaseSchemaModel):
    """Bare success signal; failures carry no detail."""

    success: bool
