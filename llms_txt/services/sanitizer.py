"""Input normalisation for admin-submitted options.

Every helper here is permissive: malformed input is turned into an empty or
neutral value instead of raising, so a settings submission can never fail.
"""

import re
from typing import Any
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Comment
from pydantic import EmailStr, TypeAdapter, ValidationError

ALLOWED_SCHEMES = {"http", "https"}

# Tags whose entire subtree is dropped rather than flattened to text
_REMOVE_TAGS = {"script", "style", "noscript", "template"}

# Leading (optionally signed) integer, e.g. "  -12abc" -> "-12"
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

_FALSY_STRINGS = {"", "0", "false", "off", "no"}

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def sanitize_text(value: Any) -> str:
    """Strip markup from *value* and return trimmed plain text.

    Line breaks are kept (normalised to ``\\n``) so multi-line descriptions
    survive a round-trip through the settings form.  HTML entities are always
    decoded.  Anything that is not a string (uploads, lists, numbers) becomes
    ``""``.
    """
    if not isinstance(value, str):
        return ""
    text = value
    if "<" in text or "&" in text:
        soup = BeautifulSoup(text, "lxml")
        for tag in soup.find_all(_REMOVE_TAGS):
            tag.decompose()
        for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
            comment.extract()
        text = soup.get_text()
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.strip()


def sanitize_email(value: Any) -> str:
    """Return the normalised address, or ``""`` when *value* is not a valid email."""
    if not isinstance(value, str) or not value.strip():
        return ""
    try:
        return _EMAIL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return ""


def sanitize_url(value: Any) -> str:
    """Return *value* when it is an absolute http(s) URL, otherwise ``""``."""
    if not isinstance(value, str):
        return ""
    url = value.strip()
    if not url or any(ch.isspace() for ch in url):
        return ""
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return ""
    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not hostname:
        return ""
    return url


def absint(value: Any) -> int:
    """Coerce *value* to a non-negative integer (non-numeric input becomes 0)."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return abs(int(value))
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        return abs(int(match.group(1))) if match else 0
    return 0


def to_bool(value: Any) -> bool:
    """Checkbox semantics: any present, non-empty value is on."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_STRINGS
    return bool(value)
