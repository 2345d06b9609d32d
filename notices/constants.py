"""Constants used throughout the notice panel application."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Performance Thresholds
SLOW_REQUEST_THRESHOLD = 1.0  # seconds

# Notices
NOTICE_KEY_PREFIX = "notice-"
NOTICE_DISMISS_ACTION = "dismiss-notice"
DEFAULT_DISMISSIBLE_TTL = 7 * 24 * 60 * 60  # one week, in seconds
DEFAULT_NOTICE_CSS_CLASS = "notice-panel-active-notice"
MAX_NOTICE_BUTTONS = 2
NOTICE_KEY_MAX_LENGTH = 191  # dismissed_notices.notice_key column width
