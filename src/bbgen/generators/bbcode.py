"""Default BBCode templates.

Every forum generator subclasses ``BBCodeGenerator`` and overrides only the
tags its software spells differently.
"""
from __future__ import annotations

from collections.abc import Sequence

from bbgen.generators.text import clamp_percent, extract_youtube_id, is_blank, normalize_cells
from bbgen.platforms import HeaderLevel, ListType, Platform, TextAlignment

# H1 is the biggest BBCode size (7), H6 the smallest (2).
_HEADER_SIZES: dict[HeaderLevel, str] = {
    HeaderLevel.H1: "7",
    HeaderLevel.H2: "6",
    HeaderLevel.H3: "5",
    HeaderLevel.H4: "4",
    HeaderLevel.H5: "3",
    HeaderLevel.H6: "2",
}

_LIST_TAGS: dict[ListType, str] = {
    ListType.BULLET: "[list]",
    ListType.NUMBERED: "[list=1]",
    ListType.LETTERED: "[list=a]",
}


class BBCodeGenerator:
    """Standard ``[tag]content[/tag]`` output."""

    platform: Platform = Platform.CLASSIC_BBCODE
    extras: tuple[str, ...] = ()

    # -- text ---------------------------------------------------------------

    def bold(self, text: str) -> str:
        return f"[b]{text}[/b]"

    def italic(self, text: str) -> str:
        return f"[i]{text}[/i]"

    def underline(self, text: str) -> str:
        return f"[u]{text}[/u]"

    def strikethrough(self, text: str) -> str:
        return f"[s]{text}[/s]"

    def color(self, text: str, color: str) -> str:
        return f"[color={color}]{text}[/color]"

    def size(self, text: str, size: str) -> str:
        return f"[size={size}]{text}[/size]"

    def font(self, text: str, font_name: str) -> str:
        return f"[font={font_name}]{text}[/font]"

    # -- links and media ----------------------------------------------------

    def url(self, url: str, text: str | None = None) -> str:
        link_text = url if is_blank(text) else text
        return f"[url={url}]{link_text}[/url]"

    def email(self, email: str, display_text: str | None = None) -> str:
        text = email if is_blank(display_text) else display_text
        return f"[email={email}]{text}[/email]"

    def mention(self, username: str) -> str:
        return f"@{username.lstrip('@')}"

    def image(self, url: str, caption: str | None = None) -> str:
        result = f"[img]{url}[/img]"
        if not is_blank(caption):
            result += f"\n[i]{caption}[/i]"
        return result

    def video(self, url: str) -> str:
        return f"[video]{url}[/video]"

    def audio(self, url: str) -> str:
        return f"[audio]{url}[/audio]"

    def youtube(self, video_id_or_url: str) -> str:
        return f"[youtube]{extract_youtube_id(video_id_or_url)}[/youtube]"

    # -- structure ----------------------------------------------------------

    def quote(self, text: str, author: str | None = None) -> str:
        if not is_blank(author):
            return f"[quote={author}]{text}[/quote]"
        return f"[quote]{text}[/quote]"

    def code(self, code: str, language: str | None = None) -> str:
        if not is_blank(language):
            return f"[code={language}]\n{code}\n[/code]"
        return f"[code]\n{code}\n[/code]"

    def spoiler(self, text: str, title: str | None = None) -> str:
        if not is_blank(title):
            return f"[spoiler={title}]{text}[/spoiler]"
        return f"[spoiler]{text}[/spoiler]"

    def list(self, items: Sequence[str], list_type: ListType = ListType.BULLET) -> str:
        body = "\n".join(f"[*]{item}" for item in items)
        return f"{_LIST_TAGS.get(list_type, '[list]')}\n{body}\n[/list]"

    def table(self, cells: Sequence[Sequence[str | None]], has_header: bool = True) -> str:
        lines = ["[table]"]
        for r, row in enumerate(normalize_cells(cells)):
            tag = "th" if has_header and r == 0 else "td"
            lines.append("[tr]")
            lines.extend(f"[{tag}]{cell}[/{tag}]" for cell in row)
            lines.append("[/tr]")
        lines.append("[/table]")
        return "\n".join(lines)

    def align(self, text: str, alignment: TextAlignment) -> str:
        tag = TextAlignment(alignment).value
        return f"[{tag}]{text}[/{tag}]"

    def header(self, text: str, level: HeaderLevel) -> str:
        return self.bold(self.size(text, _HEADER_SIZES.get(level, "5")))

    def horizontal_rule(self) -> str:
        return "[hr]"

    # -- special ------------------------------------------------------------

    def progress_bar(self, percent: int, label: str | None = None) -> str:
        pct = clamp_percent(percent)
        return f"[progress={pct}]{label if label is not None else f'{pct}%'}[/progress]"

    def marquee(self, text: str) -> str:
        return f"[marquee]{text}[/marquee]"

    def hide(self, text: str, button_text: str | None = None) -> str:
        if not is_blank(button_text):
            return f"[hide={button_text}]{text}[/hide]"
        return f"[hide]{text}[/hide]"

    def format_text(
        self,
        text: str,
        bold: bool = False,
        italic: bool = False,
        underline: bool = False,
        strikethrough: bool = False,
        color: str | None = None,
        size: str | None = None,
    ) -> str:
        """Stack several styles; innermost first so bold wraps italic, etc."""
        result = text
        if strikethrough:
            result = self.strikethrough(result)
        if underline:
            result = self.underline(result)
        if italic:
            result = self.italic(result)
        if bold:
            result = self.bold(result)
        if not is_blank(size):
            result = self.size(result, size)
        if not is_blank(color):
            result = self.color(result, color)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(platform={self.platform.value!r})"
