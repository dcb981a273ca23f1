"""Input validation and sanitisation helpers.

These are advisory: the generators accept any string, and callers decide
whether a failed check is worth a warning or a hard stop.
"""
from __future__ import annotations

import re
from urllib.parse import urlparse

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_HEX_COLOR_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
_YOUTUBE_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{11}$")
_YOUTUBE_SHORT_RE = re.compile(r"youtu\.be/([a-zA-Z0-9_-]{11})")
_YOUTUBE_WATCH_RE = re.compile(r"[?&]v=([a-zA-Z0-9_-]{11})")

NAMED_COLORS = frozenset(
    {
        "red", "green", "blue", "yellow", "orange", "purple", "pink",
        "cyan", "magenta", "white", "black", "gray", "grey", "silver",
        "gold", "navy", "teal", "maroon", "olive", "lime", "aqua",
        "fuchsia", "coral", "salmon", "brown",
    }
)

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".svg")


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_url(url: str | None) -> bool:
    """Absolute http(s) URL with a host."""
    if _blank(url):
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def is_valid_email(email: str | None) -> bool:
    if _blank(email):
        return False
    return bool(_EMAIL_RE.match(email))


def is_valid_hex_color(color: str | None) -> bool:
    if _blank(color):
        return False
    return bool(_HEX_COLOR_RE.match(color))


def is_valid_named_color(color: str | None) -> bool:
    if _blank(color):
        return False
    return color.lower() in NAMED_COLORS


def is_valid_color(color: str | None) -> bool:
    return is_valid_hex_color(color) or is_valid_named_color(color)


def is_valid_image_url(url: str | None) -> bool:
    """Valid URL that mentions an image extension (query strings allowed)."""
    if not is_valid_url(url):
        return False
    lowered = url.lower()
    return any(ext in lowered for ext in IMAGE_EXTENSIONS)


def is_valid_youtube_input(value: str | None) -> bool:
    if _blank(value):
        return False
    if "youtube.com" in value or "youtu.be" in value:
        return is_valid_url(value)
    return bool(_YOUTUBE_ID_RE.match(value))


def extract_youtube_id(value: str | None) -> str | None:
    """Strict id extraction: bare id, youtu.be/ID or ``v=ID``; else ``None``."""
    if _blank(value):
        return None
    if _YOUTUBE_ID_RE.match(value):
        return value
    match = _YOUTUBE_SHORT_RE.search(value) or _YOUTUBE_WATCH_RE.search(value)
    return match.group(1) if match else None


def is_valid_size(size: str | int | None, minimum: int = 1, maximum: int = 7) -> bool:
    try:
        value = int(str(size).strip())
    except (TypeError, ValueError):
        return False
    return minimum <= value <= maximum


def sanitize_input(text: str | None) -> str | None:
    """Drop NUL characters and normalise line endings to ``\\n``."""
    if not text:
        return text
    text = text.replace("\0", "")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_color(color: str | None) -> str | None:
    """``#abc`` -> ``#ABC``; names lower-cased; surrounding space trimmed."""
    if _blank(color):
        return color
    color = color.strip()
    if color.startswith("#"):
        return color.upper()
    return color.lower()
