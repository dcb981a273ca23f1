"""Small string helpers shared by the platform generators."""
from __future__ import annotations

from collections.abc import Sequence

from bbgen.platforms import ListType

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={}"

_FILLED = "█"
_EMPTY = "░"


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def extract_youtube_id(value: str) -> str:
    """Pull the video id out of a youtu.be or ``v=`` URL.

    Anything that is neither is assumed to already be an id and is returned
    unchanged. See ``bbgen.validation.extract_youtube_id`` for the strict form.
    """
    if is_blank(value):
        return value

    if "youtu.be/" in value:
        start = value.index("youtu.be/") + len("youtu.be/")
        end = value.find("?", start)
        return value[start:end] if end > 0 else value[start:]

    if "v=" in value:
        start = value.index("v=") + 2
        end = value.find("&", start)
        return value[start:end] if end > 0 else value[start:]

    return value


def youtube_watch_url(value: str) -> str:
    """Keep YouTube URLs as-is, expand a bare id into a watch URL."""
    if "youtube.com" in value or "youtu.be" in value:
        return value
    return YOUTUBE_WATCH_URL.format(value)


def _letters(index: int) -> str:
    # 1 -> a, 26 -> z, 27 -> aa
    out = ""
    while index > 0:
        index, rem = divmod(index - 1, 26)
        out = chr(ord("a") + rem) + out
    return out


def list_marker(list_type: ListType, index: int) -> str | None:
    """Marker for the 1-based ``index``-th item; ``None`` for bullet lists."""
    if list_type == ListType.NUMBERED:
        return f"{index}."
    if list_type == ListType.LETTERED:
        return f"{_letters(index)}."
    return None


def markdown_list(items: Sequence[str], list_type: ListType, bullet: str) -> str:
    lines = []
    for index, item in enumerate(items, start=1):
        marker = list_marker(list_type, index) or bullet
        lines.append(f"{marker} {item}")
    return "\n".join(lines)


def normalize_cells(cells: Sequence[Sequence[str | None]]) -> list[list[str]]:
    """Square up a ragged grid; missing and ``None`` cells become empty strings."""
    width = max((len(row) for row in cells), default=0)
    grid: list[list[str]] = []
    for row in cells:
        padded = [cell if cell is not None else "" for cell in row]
        padded.extend([""] * (width - len(padded)))
        grid.append(padded)
    return grid


def monospace_table(
    cells: Sequence[Sequence[str | None]],
    has_header: bool = True,
    bordered: bool = False,
) -> str:
    """Render a grid as padded plain text inside a code fence.

    Used by chat platforms that have no table syntax.
    """
    grid = normalize_cells(cells)
    widths = [max(len(row[c]) for row in grid) for c in range(len(grid[0]))] if grid else []

    lines = ["```"]
    for r, row in enumerate(grid):
        if bordered:
            lines.append("| " + "".join(cell.ljust(widths[c]) + " | " for c, cell in enumerate(row)))
            if has_header and r == 0:
                lines.append("|-" + "".join("-" * w + "-|-" for w in widths))
        else:
            lines.append("".join(cell.ljust(widths[c] + 2) for c, cell in enumerate(row)))
            if has_header and r == 0:
                lines.append("".join("-" * w + "  " for w in widths))
    lines.append("```")
    return "\n".join(lines).rstrip()


def clamp_percent(percent: int) -> int:
    return max(0, min(100, percent))


def block_bar(percent: int, cells: int = 10) -> str:
    """``[███░░░░░░░]`` style bar; one cell per 10%."""
    filled = clamp_percent(percent) * cells // 100
    return f"[{_FILLED * filled}{_EMPTY * (cells - filled)}]"
