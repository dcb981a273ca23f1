"""bbgen - plain text to forum BBCode and chat Markdown.

File guide
----------
platforms.py             Platform enum, display metadata, parameter enums
generators/protocol.py   MarkupGenerator contract (one method per operation)
generators/bbcode.py     Default BBCode templates (base class)
generators/forums.py     phpBB, vBulletin, MyBB, Classic, SMF, IPB, XenForo
generators/markdown.py   Discourse, Discord, Slack mrkdwn
generators/text.py       YouTube ids, list markers, monospace tables, bars
operations.py            Named operations over text + key=value params
validation.py            URL / email / colour / YouTube / size checks
settings.py              Configuration (bbgen.yaml, .env, BBGEN_*)
cli.py                   Typer CLI (``bbgen``)

Public API
----------
- ``get_generator`` - generator for a platform (phpBB fallback)
- ``render``        - run a named operation on a ``FormatRequest``
"""

from bbgen.generators import get_generator
from bbgen.operations import FormatRequest, render
from bbgen.platforms import Platform

__all__ = ["FormatRequest", "Platform", "get_generator", "render"]
