"""Middleware components for the notice panel service."""

from notices.middleware.process_time import ProcessTimeMiddleware
from notices.middleware.request_id import RequestIDMiddleware
from notices.middleware.security_context import SecurityContextMiddleware

__all__ = [
    "ProcessTimeMiddleware",
    "RequestIDMiddleware",
    "SecurityContextMiddleware",
]
