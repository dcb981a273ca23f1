"""The format-operation contract every platform generator satisfies."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from bbgen.platforms import HeaderLevel, ListType, Platform, TextAlignment


@runtime_checkable
class MarkupGenerator(Protocol):
    """Maps semantic formatting operations to one platform's markup.

    Implementations are stateless; every method is a pure string transform.
    Optional string arguments are treated as absent when blank.
    """

    platform: Platform
    extras: tuple[str, ...]

    # Text formatting
    def bold(self, text: str) -> str: ...
    def italic(self, text: str) -> str: ...
    def underline(self, text: str) -> str: ...
    def strikethrough(self, text: str) -> str: ...
    def color(self, text: str, color: str) -> str: ...
    def size(self, text: str, size: str) -> str: ...
    def font(self, text: str, font_name: str) -> str: ...

    # Links and media
    def url(self, url: str, text: str | None = None) -> str: ...
    def email(self, email: str, display_text: str | None = None) -> str: ...
    def mention(self, username: str) -> str: ...
    def image(self, url: str, caption: str | None = None) -> str: ...
    def video(self, url: str) -> str: ...
    def audio(self, url: str) -> str: ...
    def youtube(self, video_id_or_url: str) -> str: ...

    # Structure
    def quote(self, text: str, author: str | None = None) -> str: ...
    def code(self, code: str, language: str | None = None) -> str: ...
    def spoiler(self, text: str, title: str | None = None) -> str: ...
    def list(self, items: Sequence[str], list_type: ListType = ListType.BULLET) -> str: ...
    def table(self, cells: Sequence[Sequence[str | None]], has_header: bool = True) -> str: ...
    def align(self, text: str, alignment: TextAlignment) -> str: ...
    def header(self, text: str, level: HeaderLevel) -> str: ...
    def horizontal_rule(self) -> str: ...

    # Special
    def progress_bar(self, percent: int, label: str | None = None) -> str: ...
    def marquee(self, text: str) -> str: ...
    def hide(self, text: str, button_text: str | None = None) -> str: ...

    def format_text(
        self,
        text: str,
        bold: bool = False,
        italic: bool = False,
        underline: bool = False,
        strikethrough: bool = False,
        color: str | None = None,
        size: str | None = None,
    ) -> str: ...
