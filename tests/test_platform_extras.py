from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bbgen.generators import (
    ClassicBBCodeGenerator,
    DiscordGenerator,
    IPBGenerator,
    MyBBGenerator,
    PhpBBGenerator,
    SlackGenerator,
    SMFGenerator,
    VBulletinGenerator,
    XenForoGenerator,
    all_generators,
)

NEW_YEAR = datetime(2024, 1, 1, tzinfo=timezone.utc)
NEW_YEAR_UNIX = 1704067200


def test_phpbb_extras():
    gen = PhpBBGenerator()
    assert gen.attachment() == "[attachment=0]"
    assert gen.attachment(2) == "[attachment=2]"
    assert gen.quote_with_post_id("Hi", "Ann", 42) == '[quote="Ann" post_id="42"]Hi[/quote]'


def test_vbulletin_extras():
    gen = VBulletinGenerator()
    assert gen.highlight("t") == "[highlight]t[/highlight]"
    assert gen.indent("t") == "[indent]t[/indent]"
    assert gen.thread("42") == "[thread=42]42[/thread]"
    assert gen.thread("42", "Notes") == "[thread=42]Notes[/thread]"
    assert gen.post("7", "Reply") == "[post=7]Reply[/post]"
    assert gen.noparse("[b]x[/b]") == "[noparse][b]x[/b][/noparse]"


def test_mybb_and_classic_extras():
    assert MyBBGenerator().php("<?php echo 1;") == "[php]<?php echo 1;[/php]"
    classic = ClassicBBCodeGenerator()
    assert classic.pre("  x") == "[pre]  x[/pre]"
    assert classic.nfo("art") == "[nfo]art[/nfo]"


def test_smf_extras():
    gen = SMFGenerator()
    assert gen.superscript("2") == "[sup]2[/sup]"
    assert gen.subscript("2") == "[sub]2[/sub]"
    assert gen.teletype("t") == "[tt]t[/tt]"
    assert gen.glow("t", "red") == "[glow=red]t[/glow]"
    assert gen.shadow("t", "blue") == "[shadow=blue]t[/shadow]"
    assert gen.ftp("ftp://x.org/f") == "[ftp=ftp://x.org/f]ftp://x.org/f[/ftp]"


def test_ipb_extras():
    gen = IPBGenerator()
    assert gen.snapback("9") == "[snapback]9[/snapback]"
    assert gen.topic("5", "Rules") == "[topic=5]Rules[/topic]"
    assert gen.post_ref("6") == "[post=6]6[/post]"
    assert gen.background("t", "yellow") == "[background=yellow]t[/background]"


def test_xenforo_extras():
    gen = XenForoGenerator()
    assert gen.inline_spoiler("t") == "[ispoiler]t[/ispoiler]"
    assert gen.media("https://vimeo.com/1", "vimeo") == "[MEDIA=vimeo]https://vimeo.com/1[/MEDIA]"
    assert gen.attach(12) == "[ATTACH=full]12[/ATTACH]"
    assert gen.attach(12, "thumb") == "[ATTACH=thumb]12[/ATTACH]"
    assert gen.plain("[b]x[/b]") == "[PLAIN][b]x[/b][/PLAIN]"
    assert gen.indent("t") == "[INDENT]t[/INDENT]"
    assert gen.tabs([("One", "First"), ("Two", "Second")]) == (
        "[TABS]\n[TAB=One]First[/TAB]\n[TAB=Two]Second[/TAB]\n[/TABS]"
    )


def test_discord_extras():
    gen = DiscordGenerator()
    assert gen.mention_by_id("123") == "<@123>"
    assert gen.mention_role("456") == "<@&456>"
    assert gen.mention_channel("789") == "<#789>"
    assert gen.timestamp(NEW_YEAR) == f"<t:{NEW_YEAR_UNIX}:f>"
    assert gen.timestamp(NEW_YEAR_UNIX, "R") == f"<t:{NEW_YEAR_UNIX}:R>"
    assert gen.timestamp("2024-01-01T00:00:00+00:00") == f"<t:{NEW_YEAR_UNIX}:f>"
    assert gen.timestamp(str(NEW_YEAR_UNIX)) == f"<t:{NEW_YEAR_UNIX}:f>"
    assert gen.custom_emoji("party", "111") == "<:party:111>"
    assert gen.custom_emoji("party", "111", animated=True) == "<a:party:111>"
    assert gen.custom_emoji("party", "111", animated="yes") == "<a:party:111>"


def test_slack_extras():
    gen = SlackGenerator()
    assert gen.mention_by_id("U1") == "<@U1>"
    assert gen.mention_channel("C1") == "<#C1>"
    assert gen.mention_user_group("S1") == "<!subteam^S1>"
    assert gen.mention_here() == "<!here>"
    assert gen.mention_all_channel() == "<!channel>"
    assert gen.mention_everyone() == "<!everyone>"
    assert gen.date(NEW_YEAR) == f"<!date^{NEW_YEAR_UNIX}^{{date_pretty}}|2024-01-01>"
    assert gen.date(NEW_YEAR_UNIX) == f"<!date^{NEW_YEAR_UNIX}^{{date_pretty}}|2024-01-01>"
    assert gen.date("2024-01-01T00:00:00+00:00", "{date_short}") == (
        f"<!date^{NEW_YEAR_UNIX}^{{date_short}}|2024-01-01>"
    )
    assert gen.emoji(":tada:") == ":tada:"
    assert gen.emoji("tada") == ":tada:"


@pytest.mark.parametrize("generator", all_generators(), ids=repr)
def test_declared_extras_exist(generator):
    for name in generator.extras:
        assert callable(getattr(generator, name)), name


def test_markdown_generators_have_no_forum_extras():
    assert not hasattr(DiscordGenerator(), "thread")
    assert not hasattr(SlackGenerator(), "highlight")
