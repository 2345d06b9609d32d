"""Logging utilities for the notice panel service."""

from notices.logging.config import setup_logging
from notices.logging.context import clear_request_id, get_request_id, set_request_id

__all__ = [
    "clear_request_id",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
