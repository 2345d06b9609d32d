"""HTML allow-list sanitizing for notice content."""

from urllib.parse import urlsplit

from django.conf import settings

import nh3


def sanitize_message(html: str) -> str:
    """Strip every tag and attribute not in the configured allow-list.

    Args:
        html: Untrusted notice message.

    Returns:
        Markup that is safe to embed without further escaping.
    """
    if not html:
        return ""
    return nh3.clean(
        html,
        tags=set(settings.NOTICE_ALLOWED_TAGS),
        attributes={
            tag: set(attrs) for tag, attrs in settings.NOTICE_ALLOWED_ATTRIBUTES.items()
        },
        url_schemes=set(settings.NOTICE_ALLOWED_URL_SCHEMES),
    )


def safe_url(url: str) -> str:
    """Return ``url`` if its scheme is allowed, otherwise an empty string.

    Relative URLs (no scheme) are allowed. The result still needs HTML
    attribute escaping, which the template engine performs.
    """
    url = (url or "").strip()
    if not url:
        return ""
    # Browsers ignore control characters and whitespace inside the scheme
    compact = "".join(ch for ch in url if ch.isprintable() and not ch.isspace())
    scheme = urlsplit(compact).scheme.lower()
    if scheme and scheme not in settings.NOTICE_ALLOWED_URL_SCHEMES:
        return ""
    return url
