"""Storage key helpers shared by the renderer and the dismissal endpoint."""

import re

from notices.constants import NOTICE_KEY_PREFIX

_DISALLOWED_KEY_CHARS = re.compile(r"[^a-z0-9_\-]")


def sanitize_key(value: object) -> str:
    """Lowercase a value and strip everything but ``[a-z0-9_-]``.

    >>> sanitize_key(" Update V2! ")
    'updatev2'
    """
    if value is None:
        return ""
    return _DISALLOWED_KEY_CHARS.sub("", str(value).lower())


def notice_storage_key(notice_id: str) -> str:
    """Build the key a notice's dismissed flag is stored under.

    The key is also the rendered container's ``id`` attribute, which the
    client posts back verbatim when the notice is dismissed.
    """
    return f"{NOTICE_KEY_PREFIX}{sanitize_key(notice_id)}"
