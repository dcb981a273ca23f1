"""BBCode dialects of the supported forum packages."""
from __future__ import annotations

from collections.abc import Iterable

from bbgen.generators.bbcode import BBCodeGenerator
from bbgen.generators.text import extract_youtube_id, is_blank
from bbgen.platforms import HeaderLevel, Platform, TextAlignment


def _display(value: str, text: str | None) -> str:
    return value if is_blank(text) else text


class PhpBBGenerator(BBCodeGenerator):
    platform = Platform.PHPBB
    extras = ("attachment", "quote_with_post_id")

    def video(self, url: str) -> str:
        # phpBB has no video tag; the flash tag is the closest embed.
        return f"[flash=560,340]{url}[/flash]"

    def attachment(self, index: int | str = 0) -> str:
        return f"[attachment={index}]"

    def quote_with_post_id(self, text: str, author: str, post_id: int | str) -> str:
        return f'[quote="{author}" post_id="{post_id}"]{text}[/quote]'


class VBulletinGenerator(BBCodeGenerator):
    platform = Platform.VBULLETIN
    extras = ("highlight", "indent", "thread", "post", "noparse")

    def highlight(self, text: str) -> str:
        return f"[highlight]{text}[/highlight]"

    def indent(self, text: str) -> str:
        return f"[indent]{text}[/indent]"

    def thread(self, thread_id: str, text: str | None = None) -> str:
        return f"[thread={thread_id}]{_display(thread_id, text)}[/thread]"

    def post(self, post_id: str, text: str | None = None) -> str:
        return f"[post={post_id}]{_display(post_id, text)}[/post]"

    def noparse(self, text: str) -> str:
        return f"[noparse]{text}[/noparse]"


class MyBBGenerator(BBCodeGenerator):
    platform = Platform.MYBB
    extras = ("php",)

    _VIDEO_HOSTS = (
        ("youtube.com", "youtube"),
        ("youtu.be", "youtube"),
        ("vimeo.com", "vimeo"),
        ("dailymotion.com", "dailymotion"),
    )

    def video(self, url: str) -> str:
        return f"[video={self._video_type(url)}]{url}[/video]"

    def align(self, text: str, alignment: TextAlignment) -> str:
        return f"[align={TextAlignment(alignment).value}]{text}[/align]"

    def php(self, code: str) -> str:
        return f"[php]{code}[/php]"

    @classmethod
    def _video_type(cls, url: str) -> str:
        for host, kind in cls._VIDEO_HOSTS:
            if host in url:
                return kind
        return "youtube"


class ClassicBBCodeGenerator(BBCodeGenerator):
    platform = Platform.CLASSIC_BBCODE
    extras = ("pre", "nfo")

    def pre(self, text: str) -> str:
        return f"[pre]{text}[/pre]"

    def nfo(self, text: str) -> str:
        return f"[nfo]{text}[/nfo]"


class SMFGenerator(BBCodeGenerator):
    platform = Platform.SMF
    extras = ("superscript", "subscript", "teletype", "glow", "shadow", "ftp")

    def marquee(self, text: str) -> str:
        return f"[move]{text}[/move]"

    def mention(self, username: str) -> str:
        name = username.lstrip("@")
        return f"[member={name}]{name}[/member]"

    def superscript(self, text: str) -> str:
        return f"[sup]{text}[/sup]"

    def subscript(self, text: str) -> str:
        return f"[sub]{text}[/sub]"

    def teletype(self, text: str) -> str:
        return f"[tt]{text}[/tt]"

    def glow(self, text: str, color: str) -> str:
        return f"[glow={color}]{text}[/glow]"

    def shadow(self, text: str, color: str) -> str:
        return f"[shadow={color}]{text}[/shadow]"

    def ftp(self, url: str, text: str | None = None) -> str:
        return f"[ftp={url}]{_display(url, text)}[/ftp]"


class IPBGenerator(BBCodeGenerator):
    platform = Platform.IPB
    extras = ("snapback", "topic", "post_ref", "background")

    def mention(self, username: str) -> str:
        name = username.lstrip("@")
        return f"[member='{name}']{name}[/member]"

    def video(self, url: str) -> str:
        return f"[media]{url}[/media]"

    def snapback(self, post_id: str) -> str:
        return f"[snapback]{post_id}[/snapback]"

    def topic(self, topic_id: str, text: str | None = None) -> str:
        return f"[topic={topic_id}]{_display(topic_id, text)}[/topic]"

    def post_ref(self, post_id: str, text: str | None = None) -> str:
        return f"[post={post_id}]{_display(post_id, text)}[/post]"

    def background(self, text: str, color: str) -> str:
        return f"[background={color}]{text}[/background]"


class XenForoGenerator(BBCodeGenerator):
    """XenForo 2 BBCode; most of its tags are written upper-case."""

    platform = Platform.XENFORO
    extras = ("inline_spoiler", "media", "attach", "plain", "indent", "tabs")

    def mention(self, username: str) -> str:
        name = username.lstrip("@")
        return f"[USER={name}]@{name}[/USER]"

    def video(self, url: str) -> str:
        return self.media(url)

    def header(self, text: str, level: HeaderLevel) -> str:
        return f"[HEADING={int(level)}]{text}[/HEADING]"

    def inline_spoiler(self, text: str) -> str:
        return f"[ispoiler]{text}[/ispoiler]"

    def media(self, url: str, site: str = "youtube") -> str:
        if site.lower() == "youtube":
            return f"[MEDIA=youtube]{extract_youtube_id(url)}[/MEDIA]"
        return f"[MEDIA={site}]{url}[/MEDIA]"

    def attach(self, attachment_id: int | str, kind: str = "full") -> str:
        return f"[ATTACH={kind}]{attachment_id}[/ATTACH]"

    def plain(self, text: str) -> str:
        return f"[PLAIN]{text}[/PLAIN]"

    def indent(self, text: str) -> str:
        return f"[INDENT]{text}[/INDENT]"

    def tabs(self, tabs: Iterable[tuple[str, str]]) -> str:
        lines = ["[TABS]"]
        lines.extend(f"[TAB={title}]{content}[/TAB]" for title, content in tabs)
        lines.append("[/TABS]")
        return "\n".join(lines)
