from __future__ import annotations

import pytest

from bbgen.generators.text import (
    block_bar,
    clamp_percent,
    extract_youtube_id,
    list_marker,
    markdown_list,
    normalize_cells,
    youtube_watch_url,
)
from bbgen.platforms import ListType


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ?t=42", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=120", "dQw4w9WgXcQ"),
        ("not a video", "not a video"),
        ("", ""),
    ],
)
def test_extract_youtube_id_is_lenient(value: str, expected: str):
    assert extract_youtube_id(value) == expected


def test_youtube_watch_url_keeps_urls():
    assert youtube_watch_url("abc") == "https://www.youtube.com/watch?v=abc"
    assert youtube_watch_url("https://youtu.be/abc") == "https://youtu.be/abc"


@pytest.mark.parametrize(
    ("list_type", "index", "expected"),
    [
        (ListType.BULLET, 1, None),
        (ListType.NUMBERED, 12, "12."),
        (ListType.LETTERED, 1, "a."),
        (ListType.LETTERED, 26, "z."),
        (ListType.LETTERED, 27, "aa."),
        (ListType.LETTERED, 28, "ab."),
    ],
)
def test_list_marker(list_type: ListType, index: int, expected: str | None):
    assert list_marker(list_type, index) == expected


def test_markdown_list_uses_bullet_for_unordered():
    assert markdown_list(["x", "y"], ListType.BULLET, "*") == "* x\n* y"
    assert markdown_list([], ListType.NUMBERED, "-") == ""


def test_normalize_cells_pads_rows():
    assert normalize_cells([["a", None, "c"], ["d"]]) == [["a", "", "c"], ["d", "", ""]]
    assert normalize_cells([]) == []


def test_block_bar_clamps():
    assert clamp_percent(-1) == 0
    assert clamp_percent(101) == 100
    assert block_bar(-20) == "[░░░░░░░░░░]"
    assert block_bar(250) == "[██████████]"
    assert block_bar(59) == "[█████░░░░░]"
