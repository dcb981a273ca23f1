"""Named formatting operations over plain-text requests.

Bridges loosely-typed input (CLI arguments, ``key=value`` parameters) and the
typed generator methods:

- ``bold``        → ``{"text": "hi"}``               → ``[b]hi[/b]``
- ``color``       → ``{"text": "hi", color: "red"}`` → ``[color=red]hi[/color]``
- ``list``        → one item per input line
- ``table``       → one row per line, cells split on ``sep`` (default ``|``)
- ``batch-urls``  → one link per input line

Platform-only operations (``generator.extras``) are reachable by name too;
the request text becomes their first argument and params become keywords.
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace

from bbgen.generators import get_generator, uses_bbcode
from bbgen.generators.protocol import MarkupGenerator
from bbgen.platforms import HeaderLevel, ListType, Platform, TextAlignment
from bbgen.validation import (
    is_valid_color,
    is_valid_email,
    is_valid_image_url,
    is_valid_size,
    is_valid_url,
    is_valid_youtube_input,
    normalize_color,
    sanitize_input,
)

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on", "y"}
_FALSE = {"0", "false", "no", "off", "n", ""}

# Extras that take no positional argument at all.
_NO_ARG_EXTRAS = frozenset({"mention_here", "mention_all_channel", "mention_everyone"})


class OperationError(ValueError):
    """Base class for request errors raised by ``render``."""


class UnknownOperationError(OperationError):
    def __init__(self, operation: str, platform: Platform):
        self.operation = operation
        self.platform = platform
        super().__init__(f"Unknown operation '{operation}' for platform {platform.value}")


class InvalidParameterError(OperationError):
    pass


@dataclass(frozen=True)
class FormatRequest:
    """Input text plus optional named string parameters."""
    text: str = ""
    params: Mapping[str, str] = field(default_factory=dict)

    def param(self, *names: str) -> str | None:
        """First non-blank value among ``names``."""
        for name in names:
            value = self.params.get(name)
            if value is not None and str(value).strip():
                return str(value)
        return None

    def flag(self, *names: str, default: bool = False) -> bool:
        raw = self.param(*names)
        if raw is None:
            return default
        return _parse_bool(raw, names[0])

    def lines(self) -> list[str]:
        return [line.strip() for line in self.text.split("\n") if line.strip()]


Adapter = Callable[[MarkupGenerator, FormatRequest], str]


@dataclass(frozen=True)
class Operation:
    name: str
    adapter: Adapter
    description: str
    needs_text: bool = True


# ---------------------------------------------------------------------------
# Parameter coercion
# ---------------------------------------------------------------------------


def _parse_bool(raw: str, name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidParameterError(f"'{name}' must be true or false, got '{raw}'")


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw.strip().rstrip("%"))
    except ValueError:
        raise InvalidParameterError(f"'{name}' must be an integer, got '{raw}'") from None


def _parse_list_type(raw: str | None) -> ListType:
    if raw is None:
        return ListType.BULLET
    try:
        return ListType(raw.strip().lower())
    except ValueError:
        choices = ", ".join(t.value for t in ListType)
        raise InvalidParameterError(f"Unknown list type '{raw}' (expected {choices})") from None


def _parse_alignment(raw: str | None) -> TextAlignment:
    if raw is None:
        raise InvalidParameterError("align requires an 'alignment' parameter")
    try:
        return TextAlignment(raw.strip().lower())
    except ValueError:
        choices = ", ".join(a.value for a in TextAlignment)
        raise InvalidParameterError(f"Unknown alignment '{raw}' (expected {choices})") from None


def _parse_level(raw: str | None) -> HeaderLevel:
    if raw is None:
        return HeaderLevel.H1
    value = raw.strip().lower().lstrip("h")
    try:
        return HeaderLevel(_parse_int(value, "level"))
    except ValueError:
        raise InvalidParameterError(f"Header level must be between 1 and 6, got '{raw}'") from None


def _required(request: FormatRequest, *names: str) -> str:
    value = request.param(*names)
    if value is None:
        raise InvalidParameterError(f"Missing required parameter '{names[0]}'")
    return value


def _checked_color(request: FormatRequest) -> str:
    color = normalize_color(_required(request, "color"))
    if not is_valid_color(color):
        logger.warning("Color %r is not a known name or hex code; passing it through", color)
    return color


def _checked_size(generator: MarkupGenerator, request: FormatRequest) -> str:
    size = _required(request, "size").strip()
    if uses_bbcode(generator.platform) and not is_valid_size(size):
        logger.warning("Size %r is outside the usual BBCode range 1-7", size)
    return size


def _warn_unless(valid: bool, kind: str, value: str) -> None:
    if not valid:
        logger.warning("%s does not look valid: %r", kind, value)


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------


def _color(gen: MarkupGenerator, req: FormatRequest) -> str:
    return gen.color(req.text, _checked_color(req))


def _size(gen: MarkupGenerator, req: FormatRequest) -> str:
    return gen.size(req.text, _checked_size(gen, req))


def _font(gen: MarkupGenerator, req: FormatRequest) -> str:
    return gen.font(req.text, _required(req, "font"))


def _url(gen: MarkupGenerator, req: FormatRequest) -> str:
    url = req.text.strip()
    _warn_unless(is_valid_url(url), "URL", url)
    return gen.url(url, req.param("display", "text"))


def _email(gen: MarkupGenerator, req: FormatRequest) -> str:
    email = req.text.strip()
    _warn_unless(is_valid_email(email), "Email address", email)
    return gen.email(email, req.param("display", "text"))


def _image(gen: MarkupGenerator, req: FormatRequest) -> str:
    url = req.text.strip()
    _warn_unless(is_valid_image_url(url), "Image URL", url)
    return gen.image(url, req.param("caption"))


def _youtube(gen: MarkupGenerator, req: FormatRequest) -> str:
    value = req.text.strip()
    _warn_unless(is_valid_youtube_input(value), "YouTube id or URL", value)
    return gen.youtube(value)


def _list(gen: MarkupGenerator, req: FormatRequest) -> str:
    return gen.list(req.lines(), _parse_list_type(req.param("type", "list_type")))


def _table(gen: MarkupGenerator, req: FormatRequest) -> str:
    sep = req.params.get("sep") or "|"
    rows = [[cell.strip() for cell in line.split(sep)] for line in req.lines()]
    if not rows:
        return ""
    return gen.table(rows, has_header=req.flag("header", default=True))


def _progress(gen: MarkupGenerator, req: FormatRequest) -> str:
    raw = req.param("percent") or req.text.strip() or None
    if raw is None:
        raise InvalidParameterError("progress requires a 'percent' parameter")
    return gen.progress_bar(_parse_int(raw, "percent"), req.params.get("label"))


def _format(gen: MarkupGenerator, req: FormatRequest) -> str:
    color = req.param("color")
    return gen.format_text(
        req.text,
        bold=req.flag("bold"),
        italic=req.flag("italic"),
        underline=req.flag("underline"),
        strikethrough=req.flag("strikethrough", "strike"),
        color=normalize_color(color) if color else None,
        size=req.param("size"),
    )


def _batch_urls(gen: MarkupGenerator, req: FormatRequest) -> str:
    return "\n".join(gen.url(line) for line in req.lines())


def _batch_images(gen: MarkupGenerator, req: FormatRequest) -> str:
    return "\n\n".join(gen.image(line) for line in req.lines())


def _simple(method: str) -> Adapter:
    def adapter(gen: MarkupGenerator, req: FormatRequest) -> str:
        return getattr(gen, method)(req.text)

    return adapter


def _with_optional(method: str, *names: str) -> Adapter:
    def adapter(gen: MarkupGenerator, req: FormatRequest) -> str:
        return getattr(gen, method)(req.text, req.param(*names))

    return adapter


_OPERATION_LIST = [
    Operation("bold", _simple("bold"), "Bold text"),
    Operation("italic", _simple("italic"), "Italic text"),
    Operation("underline", _simple("underline"), "Underlined text"),
    Operation("strikethrough", _simple("strikethrough"), "Struck-through text"),
    Operation("color", _color, "Coloured text (color=NAME|#HEX)"),
    Operation("size", _size, "Resized text (size=N)"),
    Operation("font", _font, "Font family (font=NAME)"),
    Operation("url", _url, "Hyperlink; text is the URL (display=...)"),
    Operation("email", _email, "Mail link; text is the address (display=...)"),
    Operation("mention", _simple("mention"), "User mention"),
    Operation("image", _image, "Image embed; text is the URL (caption=...)"),
    Operation("video", _simple("video"), "Video embed"),
    Operation("audio", _simple("audio"), "Audio embed"),
    Operation("youtube", _youtube, "YouTube embed from an id or URL"),
    Operation("quote", _with_optional("quote", "author"), "Quote block (author=...)"),
    Operation("code", _with_optional("code", "language", "lang"), "Code block (language=...)"),
    Operation("spoiler", _with_optional("spoiler", "title"), "Spoiler (title=...)"),
    Operation("list", _list, "One item per line (type=bullet|numbered|lettered)"),
    Operation("table", _table, "Rows per line, cells split on sep (sep=|, header=true)", needs_text=False),
    Operation(
        "align",
        lambda gen, req: gen.align(req.text, _parse_alignment(req.param("alignment", "align"))),
        "Aligned text (alignment=left|center|right|justify)",
    ),
    Operation(
        "header",
        lambda gen, req: gen.header(req.text, _parse_level(req.param("level"))),
        "Heading (level=1..6)",
    ),
    Operation("hr", lambda gen, req: gen.horizontal_rule(), "Horizontal rule", needs_text=False),
    Operation("progress", _progress, "Progress bar (percent=0..100, label=...)", needs_text=False),
    Operation("marquee", _simple("marquee"), "Scrolling text"),
    Operation("hide", _with_optional("hide", "button"), "Hidden section (button=...)"),
    Operation("format", _format, "Combined styles (bold, italic, underline, strike, color, size)"),
    Operation("batch-urls", _batch_urls, "One link per line"),
    Operation("batch-images", _batch_images, "One image per line"),
]

OPERATIONS: dict[str, Operation] = {op.name: op for op in _OPERATION_LIST}

_ALIASES = {
    "strike": "strikethrough",
    "horizontal-rule": "hr",
    "progress-bar": "progress",
    "heading": "header",
    "format-text": "format",
}


def _normalize_name(operation: str) -> str:
    name = operation.strip().lower().replace("_", "-")
    return _ALIASES.get(name, name)


def _known_keywords(method: Callable[..., str], params: Mapping[str, str]) -> bool:
    """True when every key in ``params`` names a parameter of ``method``."""
    parameters = inspect.signature(method).parameters.values()
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in parameters):
        return True
    return set(params) <= {p.name for p in parameters}


def _call_extra(generator: MarkupGenerator, name: str, request: FormatRequest) -> str:
    method = getattr(generator, name)
    params = dict(request.params)

    if name in _NO_ARG_EXTRAS:
        args: list[object] = []
    elif name == "tabs":
        sep = params.pop("sep", None) or "|"
        if not request.lines():
            return ""
        pairs = []
        for line in request.lines():
            title, _, content = line.partition(sep)
            pairs.append((title.strip(), content.strip()))
        args = [pairs]
    elif request.text:
        args = [request.text]
    else:
        args = []

    try:
        inspect.signature(method).bind(*args, **params)
    except TypeError as exc:
        if not args and not request.text and _known_keywords(method, params):
            # Empty input: same no-op as the common operations.
            return ""
        raise InvalidParameterError(f"Bad parameters for '{name}': {exc}") from None

    try:
        return method(*args, **params)
    except ValueError as exc:
        raise InvalidParameterError(f"Bad parameters for '{name}': {exc}") from exc


def render(
    platform: Platform | str | None,
    operation: str,
    request: FormatRequest | None = None,
) -> str:
    """Run ``operation`` against the generator for ``platform``.

    Operations that need text return an empty string for empty input.

    Raises:
        UnknownOperationError: ``operation`` is neither common nor an extra of
            this platform.
        InvalidParameterError: a parameter is missing or cannot be coerced.
    """
    generator = get_generator(platform)
    request = request or FormatRequest()
    request = replace(request, text=sanitize_input(request.text) or "")
    name = _normalize_name(operation)

    op = OPERATIONS.get(name)
    if op is not None:
        if op.needs_text and not request.text:
            return ""
        logger.debug("Rendering %s for %s", name, generator.platform.value)
        return op.adapter(generator, request)

    extra = name.replace("-", "_")
    if extra in generator.extras:
        logger.debug("Rendering extra %s for %s", extra, generator.platform.value)
        return _call_extra(generator, extra, request)

    raise UnknownOperationError(operation, generator.platform)


def available_operations(platform: Platform | str | None) -> list[str]:
    """Common operation names followed by the platform's extras."""
    generator = get_generator(platform)
    return list(OPERATIONS) + [extra.replace("_", "-") for extra in generator.extras]
