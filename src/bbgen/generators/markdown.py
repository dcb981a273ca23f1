"""Markdown-family generators: Discourse, Discord and Slack mrkdwn.

Chat clients cannot render colour, size, font or alignment; those operations
return the text untouched instead of emitting markup the client would show
literally.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from bbgen.generators.text import (
    block_bar,
    clamp_percent,
    extract_youtube_id,
    is_blank,
    markdown_list,
    monospace_table,
    normalize_cells,
    youtube_watch_url,
)
from bbgen.platforms import HeaderLevel, ListType, Platform, TextAlignment

_CHAT_RULE = "\n─────────────────\n"


def _as_datetime(when: datetime | str | int) -> datetime:
    """Unix seconds (int or all-digit string), ISO-8601 text or a datetime."""
    if isinstance(when, str) and when.strip().isdigit():
        when = int(when.strip())
    if isinstance(when, int):
        return datetime.fromtimestamp(when, tz=timezone.utc)
    if isinstance(when, str):
        return datetime.fromisoformat(when.strip())
    return when


def _unix(when: datetime | str | int) -> int:
    return int(_as_datetime(when).timestamp())


class MarkdownGenerator:
    """Templates common to every Markdown dialect we target."""

    platform: Platform = Platform.DISCOURSE
    extras: tuple[str, ...] = ()
    bullet = "-"
    quote_prefix = "> "

    def bold(self, text: str) -> str:
        return f"**{text}**"

    def italic(self, text: str) -> str:
        return f"*{text}*"

    def underline(self, text: str) -> str:
        return text

    def strikethrough(self, text: str) -> str:
        return f"~~{text}~~"

    def color(self, text: str, color: str) -> str:
        return text

    def size(self, text: str, size: str) -> str:
        return text

    def font(self, text: str, font_name: str) -> str:
        return text

    def url(self, url: str, text: str | None = None) -> str:
        link_text = url if is_blank(text) else text
        return f"[{link_text}]({url})"

    def email(self, email: str, display_text: str | None = None) -> str:
        text = email if is_blank(display_text) else display_text
        return f"[{text}](mailto:{email})"

    def mention(self, username: str) -> str:
        return f"@{username.lstrip('@')}"

    def image(self, url: str, caption: str | None = None) -> str:
        if is_blank(caption):
            return url
        return f"{url}\n*{caption}*"

    def video(self, url: str) -> str:
        return url

    def audio(self, url: str) -> str:
        return url

    def youtube(self, video_id_or_url: str) -> str:
        return youtube_watch_url(video_id_or_url)

    def _quote_lines(self, text: str) -> str:
        return "\n".join(f"{self.quote_prefix}{line}" for line in text.split("\n"))

    def quote(self, text: str, author: str | None = None) -> str:
        quoted = self._quote_lines(text)
        if not is_blank(author):
            return f"{self.bold(author + ':')}\n{quoted}"
        return quoted

    def code(self, code: str, language: str | None = None) -> str:
        if "\n" not in code:
            return f"`{code}`"
        return f"```{language or ''}\n{code}\n```"

    def spoiler(self, text: str, title: str | None = None) -> str:
        result = f"||{text}||"
        if not is_blank(title):
            result = f"{self.bold(title + ':')} {result}"
        return result

    def list(self, items: Sequence[str], list_type: ListType = ListType.BULLET) -> str:
        return markdown_list(items, ListType(list_type), self.bullet)

    def table(self, cells: Sequence[Sequence[str | None]], has_header: bool = True) -> str:
        return monospace_table(cells, has_header=has_header)

    def align(self, text: str, alignment: TextAlignment) -> str:
        return text

    def header(self, text: str, level: HeaderLevel) -> str:
        return f"{'#' * int(level)} {text}"

    def horizontal_rule(self) -> str:
        return _CHAT_RULE

    def progress_bar(self, percent: int, label: str | None = None) -> str:
        pct = clamp_percent(percent)
        return f"{block_bar(pct)} {label if label is not None else f'{pct}%'}"

    def marquee(self, text: str) -> str:
        return text

    def hide(self, text: str, button_text: str | None = None) -> str:
        return self.spoiler(text, button_text)

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
        result = text
        if strikethrough:
            result = self.strikethrough(result)
        if underline:
            result = self.underline(result)
        if italic:
            result = self.italic(result)
        if bold:
            result = self.bold(result)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(platform={self.platform.value!r})"


class DiscourseGenerator(MarkdownGenerator):
    """CommonMark with inline HTML for what Markdown lacks."""

    platform = Platform.DISCOURSE

    def underline(self, text: str) -> str:
        return f"<u>{text}</u>"

    def color(self, text: str, color: str) -> str:
        return f'<span style="color:{color}">{text}</span>'

    def size(self, text: str, size: str) -> str:
        return f'<span style="font-size:{size}px">{text}</span>'

    def font(self, text: str, font_name: str) -> str:
        return f'<span style="font-family:{font_name}">{text}</span>'

    def image(self, url: str, caption: str | None = None) -> str:
        result = f"![image]({url})"
        if not is_blank(caption):
            result += f"\n*{caption}*"
        return result

    def audio(self, url: str) -> str:
        return f'<audio controls src="{url}"></audio>'

    def youtube(self, video_id_or_url: str) -> str:
        # Discourse onebox expands the canonical watch URL.
        return youtube_watch_url(extract_youtube_id(video_id_or_url))

    def quote(self, text: str, author: str | None = None) -> str:
        if not is_blank(author):
            return f'[quote="{author}"]\n{text}\n[/quote]'
        return self._quote_lines(text)

    def code(self, code: str, language: str | None = None) -> str:
        return f"```{language or ''}\n{code}\n```"

    def spoiler(self, text: str, title: str | None = None) -> str:
        summary = "Click to reveal" if is_blank(title) else title
        return f"<details>\n<summary>{summary}</summary>\n\n{text}\n\n</details>"

    def table(self, cells: Sequence[Sequence[str | None]], has_header: bool = True) -> str:
        # Pipe tables always need a header row, so row 0 is used regardless.
        grid = normalize_cells(cells)
        if not grid:
            return ""
        lines = ["|" + "".join(f" {cell} |" for cell in grid[0])]
        lines.append("|" + " --- |" * len(grid[0]))
        lines.extend("|" + "".join(f" {cell} |" for cell in row) for row in grid[1:])
        return "\n".join(lines)

    def align(self, text: str, alignment: TextAlignment) -> str:
        return f'<div style="text-align:{TextAlignment(alignment).value}">{text}</div>'

    def horizontal_rule(self) -> str:
        return "\n---\n"

    def progress_bar(self, percent: int, label: str | None = None) -> str:
        pct = clamp_percent(percent)
        return f"[|{'=' * (pct // 5)}|] {label if label is not None else f'{pct}%'}"

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
        result = super().format_text(text, bold, italic, underline, strikethrough)
        if not is_blank(size):
            result = self.size(result, size)
        if not is_blank(color):
            result = self.color(result, color)
        return result


class DiscordGenerator(MarkdownGenerator):
    platform = Platform.DISCORD
    extras = ("mention_by_id", "mention_role", "mention_channel", "timestamp", "custom_emoji")

    def underline(self, text: str) -> str:
        return f"__{text}__"

    def url(self, url: str, text: str | None = None) -> str:
        # <url> suppresses the link preview embed.
        if is_blank(text) or text == url:
            return f"<{url}>"
        return f"[{text}]({url})"

    def header(self, text: str, level: HeaderLevel) -> str:
        # Only three heading sizes render in messages; smaller ones become bold.
        if int(level) <= 3:
            return super().header(text, level)
        return self.bold(text)

    def mention_by_id(self, user_id: str) -> str:
        return f"<@{user_id}>"

    def mention_role(self, role_id: str) -> str:
        return f"<@&{role_id}>"

    def mention_channel(self, channel_id: str) -> str:
        return f"<#{channel_id}>"

    def timestamp(self, when: datetime | str | int, style: str = "f") -> str:
        return f"<t:{_unix(when)}:{style}>"

    def custom_emoji(self, name: str, emoji_id: str, animated: bool | str = False) -> str:
        if isinstance(animated, str):
            animated = animated.strip().lower() in {"1", "true", "yes"}
        prefix = "a" if animated else ""
        return f"<{prefix}:{name}:{emoji_id}>"


class SlackGenerator(MarkdownGenerator):
    """Slack mrkdwn: single-character emphasis, ``<url|text>`` links."""

    platform = Platform.SLACK
    extras = (
        "mention_by_id",
        "mention_channel",
        "mention_user_group",
        "mention_here",
        "mention_all_channel",
        "mention_everyone",
        "date",
        "emoji",
    )
    bullet = "•"
    quote_prefix = ">"

    def bold(self, text: str) -> str:
        return f"*{text}*"

    def italic(self, text: str) -> str:
        return f"_{text}_"

    def strikethrough(self, text: str) -> str:
        return f"~{text}~"

    def url(self, url: str, text: str | None = None) -> str:
        if is_blank(text):
            return f"<{url}>"
        return f"<{url}|{text}>"

    def email(self, email: str, display_text: str | None = None) -> str:
        text = email if is_blank(display_text) else display_text
        return f"<mailto:{email}|{text}>"

    def image(self, url: str, caption: str | None = None) -> str:
        if is_blank(caption):
            return url
        return f"{caption}\n{url}"

    def code(self, code: str, language: str | None = None) -> str:
        # mrkdwn fences take no language tag.
        if "\n" not in code:
            return f"`{code}`"
        return f"```\n{code}\n```"

    def spoiler(self, text: str, title: str | None = None) -> str:
        label = "Spoiler" if is_blank(title) else title
        return f"[{label}]: {text}"

    def table(self, cells: Sequence[Sequence[str | None]], has_header: bool = True) -> str:
        return monospace_table(cells, has_header=has_header, bordered=True)

    def header(self, text: str, level: HeaderLevel) -> str:
        return self.bold(text)

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
        return super().format_text(text, bold=bold, italic=italic, strikethrough=strikethrough)

    def mention_by_id(self, user_id: str) -> str:
        return f"<@{user_id}>"

    def mention_channel(self, channel_id: str) -> str:
        return f"<#{channel_id}>"

    def mention_user_group(self, group_id: str) -> str:
        return f"<!subteam^{group_id}>"

    def mention_here(self) -> str:
        return "<!here>"

    def mention_all_channel(self) -> str:
        return "<!channel>"

    def mention_everyone(self) -> str:
        return "<!everyone>"

    def date(self, when: datetime | str | int, token: str = "{date_pretty}") -> str:
        when = _as_datetime(when)
        return f"<!date^{_unix(when)}^{token}|{when:%Y-%m-%d}>"

    def emoji(self, name: str) -> str:
        return f":{name.strip(':')}:"
