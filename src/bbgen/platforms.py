"""Supported platforms and the parameter enums shared by every generator.

Display names are what users type (``--platform "IPB/Invision"``); lookups are
forgiving and fall back to phpBB rather than failing.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, IntEnum

logger = logging.getLogger(__name__)


class Platform(str, Enum):
    """Target forum or chat platform."""
    PHPBB = "phpbb"
    VBULLETIN = "vbulletin"
    MYBB = "mybb"
    CLASSIC_BBCODE = "classic_bbcode"
    SMF = "smf"
    IPB = "ipb"
    XENFORO = "xenforo"
    DISCOURSE = "discourse"
    DISCORD = "discord"
    SLACK = "slack"


class PlatformCategory(str, Enum):
    LEGACY = "legacy"
    MODERN = "modern"
    CHAT = "chat"


class FormatType(str, Enum):
    BBCODE = "bbcode"
    MARKDOWN = "markdown"
    SLACK_MARKDOWN = "slack_markdown"


class ListType(str, Enum):
    BULLET = "bullet"
    NUMBERED = "numbered"
    LETTERED = "lettered"


class TextAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class HeaderLevel(IntEnum):
    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6


@dataclass(frozen=True)
class PlatformInfo:
    """Display metadata for one platform."""
    platform: Platform
    name: str
    description: str
    category: PlatformCategory
    format: FormatType


PLATFORMS: tuple[PlatformInfo, ...] = (
    PlatformInfo(Platform.PHPBB, "phpBB", "Classic forum software", PlatformCategory.LEGACY, FormatType.BBCODE),
    PlatformInfo(Platform.VBULLETIN, "vBulletin", "Popular commercial forum", PlatformCategory.LEGACY, FormatType.BBCODE),
    PlatformInfo(Platform.MYBB, "MyBB", "Free and open source forum", PlatformCategory.LEGACY, FormatType.BBCODE),
    PlatformInfo(Platform.CLASSIC_BBCODE, "Classic BBCode", "Traditional forum standard", PlatformCategory.LEGACY, FormatType.BBCODE),
    PlatformInfo(Platform.SMF, "SMF", "Simple Machines Forum", PlatformCategory.LEGACY, FormatType.BBCODE),
    PlatformInfo(Platform.IPB, "IPB/Invision", "Invision Power Board", PlatformCategory.LEGACY, FormatType.BBCODE),
    PlatformInfo(Platform.XENFORO, "XenForo", "Modern forum software", PlatformCategory.MODERN, FormatType.BBCODE),
    PlatformInfo(Platform.DISCOURSE, "Discourse", "Modern discussion platform", PlatformCategory.MODERN, FormatType.MARKDOWN),
    PlatformInfo(Platform.DISCORD, "Discord", "Gaming & community chat", PlatformCategory.CHAT, FormatType.MARKDOWN),
    PlatformInfo(Platform.SLACK, "Slack", "Workplace messaging", PlatformCategory.CHAT, FormatType.SLACK_MARKDOWN),
)

DEFAULT_PLATFORM = Platform.PHPBB

_BY_PLATFORM: dict[Platform, PlatformInfo] = {info.platform: info for info in PLATFORMS}


def _squash(name: str) -> str:
    """Lower-case and drop separators so "IPB/Invision" ~ "ipbinvision"."""
    return re.sub(r"[\s/_\-]+", "", name).lower()


_ALIASES: dict[str, Platform] = {}
for _info in PLATFORMS:
    _ALIASES[_squash(_info.name)] = _info.platform
    _ALIASES[_squash(_info.platform.value)] = _info.platform
_ALIASES["ipb"] = Platform.IPB
_ALIASES["invision"] = Platform.IPB


def get_platform_info(platform: Platform) -> PlatformInfo:
    """Return metadata for ``platform`` (phpBB when it is not registered)."""
    return _BY_PLATFORM.get(platform, _BY_PLATFORM[DEFAULT_PLATFORM])


def find_platform(name: str | Platform | None) -> Platform:
    """Resolve a display name, enum value or alias to a ``Platform``.

    Unknown or blank names resolve to phpBB; nothing is raised.
    """
    if isinstance(name, Platform):
        return name
    if not name or not str(name).strip():
        return DEFAULT_PLATFORM
    platform = _ALIASES.get(_squash(str(name)))
    if platform is None:
        logger.debug("Unknown platform %r, falling back to %s", name, DEFAULT_PLATFORM.value)
        return DEFAULT_PLATFORM
    return platform


def platform_names() -> list[str]:
    return [info.name for info in PLATFORMS]
