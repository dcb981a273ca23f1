"""bbgen CLI - turn plain text into forum BBCode or chat Markdown.

Commands:
- platforms   list supported platforms
- operations  list the operations a platform supports
- apply       render one operation (text from the argument or stdin)
- check       validate a URL, email, colour, image URL, YouTube id or size
- config      show the resolved configuration

Designed for:
- Shell pipelines (``pbpaste | bbgen apply quote -p discord -o author=Ann``)
- Scripting (use --json for machine-readable output)
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from bbgen.operations import FormatRequest, OperationError, available_operations, render
from bbgen.platforms import PLATFORMS, find_platform, get_platform_info
from bbgen.settings import Settings, SettingsError, load_settings
from bbgen.validation import (
    extract_youtube_id,
    is_valid_color,
    is_valid_email,
    is_valid_image_url,
    is_valid_size,
    is_valid_url,
    is_valid_youtube_input,
)

app = typer.Typer(help="bbgen CLI - Format text as BBCode or chat Markdown")

logger = logging.getLogger(__name__)

_CHECKS = {
    "url": is_valid_url,
    "email": is_valid_email,
    "color": is_valid_color,
    "image": is_valid_image_url,
    "youtube": is_valid_youtube_input,
    "size": is_valid_size,
}


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to bbgen.yaml / BBGEN_LOG_LEVEL.",
    ),
) -> None:
    """Load settings once and configure logging for every command."""
    try:
        settings = load_settings()
    except SettingsError as e:
        typer.echo(f"❌ Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    level = str(log_level or settings.advanced.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.obj = settings


def _settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return load_settings()


def _parse_options(options: Optional[list[str]]) -> dict[str, str]:
    """Turn repeated ``-o key=value`` flags into a dict."""
    params: dict[str, str] = {}
    for option in options or []:
        key, sep, value = option.partition("=")
        if not sep or not key.strip():
            typer.echo(f"❌ Options must look like key=value, got '{option}'", err=True)
            raise typer.Exit(code=1)
        params[key.strip().lower().replace("-", "_")] = value
    return params


def _read_text(text: Optional[str]) -> str:
    if text is not None and text != "-":
        return text
    if text is None and sys.stdin.isatty():
        return ""
    return sys.stdin.read().rstrip("\n")


def _apply_defaults(operation: str, params: dict[str, str], settings: Settings) -> None:
    defaults = settings.defaults
    if operation == "color" and "color" not in params and defaults.color:
        params["color"] = defaults.color
    if operation == "size" and "size" not in params and defaults.font_size:
        params["size"] = defaults.font_size
    if operation == "list" and "type" not in params and "list_type" not in params:
        params["type"] = defaults.list_type
    if operation == "table":
        params.setdefault("sep", defaults.table_separator)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


@app.command()
def platforms(
    json_out: bool = typer.Option(
        False,
        "--json",
        help="Output JSON for scripting.",
    ),
) -> None:
    """List supported platforms.

    Examples:
        bbgen platforms
        bbgen platforms --json
    """
    if json_out:
        payload = [
            {
                "name": info.name,
                "id": info.platform.value,
                "category": info.category.value,
                "format": info.format.value,
                "description": info.description,
            }
            for info in PLATFORMS
        ]
        typer.echo(json.dumps(payload))
        return

    table = Table(title="Platforms")
    table.add_column("Name")
    table.add_column("Id")
    table.add_column("Category")
    table.add_column("Format")
    for info in PLATFORMS:
        table.add_row(info.name, info.platform.value, info.category.value, info.format.value)
    Console().print(table)


@app.command()
def operations(
    ctx: typer.Context,
    platform: Optional[str] = typer.Option(
        None,
        "--platform",
        "-p",
        help="Platform name (default: bbgen.yaml / BBGEN_PLATFORM).",
    ),
    json_out: bool = typer.Option(
        False,
        "--json",
        help="Output JSON for scripting.",
    ),
) -> None:
    """List the operations available for a platform.

    Examples:
        bbgen operations -p xenforo
    """
    resolved = find_platform(platform or _settings(ctx).defaults.platform)
    names = available_operations(resolved)

    if json_out:
        typer.echo(json.dumps({"platform": resolved.value, "operations": names}))
        return

    typer.echo(f"*{get_platform_info(resolved).name} operations*")
    for name in names:
        typer.echo(f"  • {name}")


# ---------------------------------------------------------------------------
# Core: Apply
# ---------------------------------------------------------------------------


@app.command()
def apply(
    ctx: typer.Context,
    operation: str = typer.Argument(..., help="Operation name, e.g. bold, quote, list, table."),
    text: Optional[str] = typer.Argument(
        None,
        help="Input text. Omit or pass '-' to read stdin.",
    ),
    platform: Optional[str] = typer.Option(
        None,
        "--platform",
        "-p",
        help="Platform name (default: bbgen.yaml / BBGEN_PLATFORM).",
    ),
    option: Optional[list[str]] = typer.Option(
        None,
        "--option",
        "-o",
        help='Operation parameter as "key=value" (repeatable). Example: -o author=Ann',
    ),
    json_out: bool = typer.Option(
        False,
        "--json",
        help="Output JSON for scripting.",
    ),
) -> None:
    """Render one formatting operation.

    Examples:
        bbgen apply bold "Hello"
        bbgen apply quote "Nice post" -p discord -o author=Ann
        bbgen apply color "Warning" -o color=red
        printf 'one\\ntwo' | bbgen apply list -p slack -o type=numbered
        bbgen apply progress -o percent=40 -p discord
        bbgen apply thread 1234 -p vbulletin -o text="Release notes"
    """
    settings = _settings(ctx)
    resolved = find_platform(platform or settings.defaults.platform)
    params = _parse_options(option)
    _apply_defaults(operation.strip().lower(), params, settings)
    logger.debug("apply %s on %s with params %s", operation, resolved.value, params)

    try:
        output = render(resolved, operation, FormatRequest(text=_read_text(text), params=params))
    except OperationError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)

    if json_out:
        typer.echo(
            json.dumps(
                {
                    "platform": resolved.value,
                    "operation": operation,
                    "output": output,
                }
            )
        )
        return

    typer.echo(output)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@app.command()
def check(
    kind: str = typer.Argument(..., help="One of: url, email, color, image, youtube, size."),
    value: str = typer.Argument(..., help="Value to validate."),
) -> None:
    """Validate a value. Exit code 0 when valid, 1 otherwise.

    Examples:
        bbgen check url https://example.com
        bbgen check youtube "https://youtu.be/dQw4w9WgXcQ"
    """
    validator = _CHECKS.get(kind.strip().lower())
    if validator is None:
        typer.echo(f"❌ Unknown check '{kind}'. Choose from: {', '.join(_CHECKS)}", err=True)
        raise typer.Exit(code=2)

    valid = validator(value)
    if kind.strip().lower() == "youtube" and valid:
        video_id = extract_youtube_id(value)
        if video_id:
            typer.echo(f"id: {video_id}")

    if valid:
        typer.echo(f"✓ valid {kind}")
        return
    typer.echo(f"✗ invalid {kind}: {value}", err=True)
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


@app.command()
def config(
    ctx: typer.Context,
    json_out: bool = typer.Option(
        False,
        "--json",
        help="Output JSON for scripting.",
    ),
) -> None:
    """Show the loaded configuration.

    Useful for debugging which bbgen.yaml is active.
    """
    settings = _settings(ctx)
    platform = get_platform_info(find_platform(settings.defaults.platform))

    payload = {
        "project_root": str(settings.project_root),
        "config_path": str(settings.config_path) if settings.config_path else None,
        "platform": platform.name,
        "font_size": settings.defaults.font_size,
        "color": settings.defaults.color,
        "list_type": settings.defaults.list_type,
        "table_separator": settings.defaults.table_separator,
        "log_level": settings.advanced.log_level,
    }

    if json_out:
        typer.echo(json.dumps(payload))
        return

    typer.echo("*bbgen Configuration*")
    typer.echo("")
    typer.echo(f"Platform: {payload['platform']}")
    typer.echo(f"Log level: {payload['log_level']}")
    typer.echo("")
    typer.echo("Defaults:")
    typer.echo(f"  • Font size: {payload['font_size']}")
    typer.echo(f"  • Color: {payload['color'] or '(none)'}")
    typer.echo(f"  • List type: {payload['list_type']}")
    typer.echo(f"  • Table separator: {payload['table_separator']}")
    typer.echo("")
    typer.echo("Paths:")
    typer.echo(f"  • Project root: {payload['project_root']}")
    typer.echo(f"  • Config file: {payload['config_path'] or '(none, using defaults)'}")


if __name__ == "__main__":
    app()
