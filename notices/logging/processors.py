"""Custom structlog processors for request context and service metadata."""

import os

from colorama import Fore, Style, just_fix_windows_console
from structlog.typing import EventDict, WrappedLogger

from notices.logging.context import get_request_id

SERVICE_NAME_DEFAULT = "notice-panel"

LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

# Shown in the console prefix or too noisy for a terminal
CONSOLE_EXCLUDED_FIELDS = frozenset(
    {
        "level",
        "timestamp",
        "request_id",
        "logger",
        "event",
        "service_name",
        "environment",
    }
)

just_fix_windows_console()


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach the current request ID, when one is set, to the event."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service metadata to all log events.

    Includes:
    - service_name: SERVICE_NAME env var, defaults to ``notice-panel``
    - environment: ENVIRONMENT env var, defaults to ``development``
    """
    event_dict["service_name"] = os.getenv("SERVICE_NAME", SERVICE_NAME_DEFAULT)
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render an event as a single colored console line.

    Format: [LEVEL] timestamp | request_id | logger_name | message key=value...
    """
    level = str(event_dict.get("level", "info")).upper()
    level_color = LEVEL_COLORS.get(level, Fore.WHITE)

    line = (
        f"{level_color}[{level:<8}]{Style.RESET_ALL} "
        f"{event_dict.get('timestamp', '')} | "
        f"{Fore.MAGENTA}{event_dict.get('request_id', '-')}{Style.RESET_ALL} | "
        f"{Fore.BLUE}{event_dict.get('logger', 'root')}{Style.RESET_ALL} | "
        f"{event_dict.get('event', '')}"
    )

    extra = {k: v for k, v in event_dict.items() if k not in CONSOLE_EXCLUDED_FIELDS}
    if extra:
        pairs = " ".join(f"{k}={v}" for k, v in extra.items())
        line += f" {Fore.YELLOW}{pairs}{Style.RESET_ALL}"

    return line
