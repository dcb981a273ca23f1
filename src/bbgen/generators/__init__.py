"""Platform generator registry.

``get_generator`` is the single dispatch point: give it a ``Platform`` or a
user-typed name and it returns the shared, stateless generator for it.
Unknown platforms get the phpBB generator.
"""
from __future__ import annotations

import logging

from bbgen.generators.bbcode import BBCodeGenerator
from bbgen.generators.forums import (
    ClassicBBCodeGenerator,
    IPBGenerator,
    MyBBGenerator,
    PhpBBGenerator,
    SMFGenerator,
    VBulletinGenerator,
    XenForoGenerator,
)
from bbgen.generators.markdown import (
    DiscordGenerator,
    DiscourseGenerator,
    MarkdownGenerator,
    SlackGenerator,
)
from bbgen.generators.protocol import MarkupGenerator
from bbgen.platforms import (
    DEFAULT_PLATFORM,
    PLATFORMS,
    FormatType,
    Platform,
    find_platform,
    get_platform_info,
)

logger = logging.getLogger(__name__)

_GENERATORS: dict[Platform, MarkupGenerator] = {
    Platform.PHPBB: PhpBBGenerator(),
    Platform.VBULLETIN: VBulletinGenerator(),
    Platform.MYBB: MyBBGenerator(),
    Platform.CLASSIC_BBCODE: ClassicBBCodeGenerator(),
    Platform.SMF: SMFGenerator(),
    Platform.IPB: IPBGenerator(),
    Platform.XENFORO: XenForoGenerator(),
    Platform.DISCOURSE: DiscourseGenerator(),
    Platform.DISCORD: DiscordGenerator(),
    Platform.SLACK: SlackGenerator(),
}


def get_generator(platform: Platform | str | None) -> MarkupGenerator:
    """Return the generator for ``platform``; phpBB when it is unknown."""
    resolved = find_platform(platform)
    generator = _GENERATORS.get(resolved)
    if generator is None:
        logger.debug("No generator registered for %r, using %s", platform, DEFAULT_PLATFORM.value)
        return _GENERATORS[DEFAULT_PLATFORM]
    return generator


def all_generators() -> list[MarkupGenerator]:
    return [_GENERATORS[info.platform] for info in PLATFORMS]


def uses_bbcode(platform: Platform | str) -> bool:
    return get_platform_info(find_platform(platform)).format == FormatType.BBCODE


def uses_markdown(platform: Platform | str) -> bool:
    """True for Markdown and Slack mrkdwn platforms."""
    return get_platform_info(find_platform(platform)).format in {
        FormatType.MARKDOWN,
        FormatType.SLACK_MARKDOWN,
    }


__all__ = [
    "BBCodeGenerator",
    "ClassicBBCodeGenerator",
    "DiscordGenerator",
    "DiscourseGenerator",
    "IPBGenerator",
    "MarkdownGenerator",
    "MarkupGenerator",
    "MyBBGenerator",
    "PhpBBGenerator",
    "SMFGenerator",
    "SlackGenerator",
    "VBulletinGenerator",
    "XenForoGenerator",
    "all_generators",
    "get_generator",
    "uses_bbcode",
    "uses_markdown",
]
