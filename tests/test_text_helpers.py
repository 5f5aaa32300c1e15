"""Tests for the shared coercion, trimming, padding and escaping helpers."""
from __future__ import annotations

import re

from common.text import (
    PadSide,
    center,
    coerce_int,
    escape_html,
    escape_regexp,
    format_text,
    join,
    lpad,
    lrpad,
    ltrim,
    make_string,
    pad,
    repeat_text,
    rpad,
    rtrim,
    strip,
    to_positive,
    trim,
    unescape_html,
)


def test_make_string() -> None:
    assert make_string(None) == ""
    assert make_string("abc") == "abc"
    assert make_string(12) == "12"


def test_numeric_coercion_never_raises() -> None:
    assert coerce_int("5") == 5
    assert coerce_int(3.9) == 3
    assert coerce_int(-3.9) == -3
    assert coerce_int("abc") == 0
    assert coerce_int(None) == 0
    assert coerce_int(float("nan")) == 0
    assert coerce_int(float("inf"), 7) == 7
    assert to_positive(-4) == 0
    assert to_positive("12") == 12


def test_repeat_text() -> None:
    assert repeat_text("foo", 3) == "foofoofoo"
    assert repeat_text("foo", 3, "*") == "foo*foo*foo"
    assert repeat_text("foo", -1) == ""
    assert repeat_text(None, 3) == ""


def test_format_text() -> None:
    assert format_text("%s has %d items", ["Ann", 3]) == "Ann has 3 items"
    assert format_text("%.2f", [1.005]) == "1.00"
    assert format_text("plain") == "plain"


def test_escape_regexp() -> None:
    assert escape_regexp("a.b*c") == r"a\.b\*c"
    assert re.fullmatch(escape_regexp("(1+1)"), "(1+1)")


def test_trim_family() -> None:
    assert trim("  foo  ") == "foo"
    assert trim("_-foo-_", "_-") == "foo"
    assert trim("xxfooxx", re.compile("x")) == "foo"
    assert ltrim("__foo__", "_") == "foo__"
    assert rtrim("__foo__", "_") == "__foo"
    assert strip(None) == ""


def test_pad_family() -> None:
    assert pad("1", 8) == "       1"
    assert pad("1", 8, "0") == "00000001"
    assert pad("1", 8, "0", PadSide.RIGHT) == "10000000"
    assert pad("1", 8, "0", "both") == "00001000"
    assert lpad("1", 3, "0") == "001"
    assert rpad("1", 3, "0") == "100"
    assert lrpad("foo", 7, "-") == "--foo--"
    assert center("foo", 6, "-+") == "--foo-"
    assert pad("foo", 2) == "foo"


def test_html_escaping() -> None:
    assert escape_html("<div>Blah & \"blah\" & 'blah'</div>") == (
        "&lt;div&gt;Blah &amp; &quot;blah&quot; &amp; &#39;blah&#39;&lt;/div&gt;"
    )
    assert unescape_html("&lt;div&gt;&#39;&#x41;&apos;&unknown;") == "<div>'A'&unknown;"
    assert unescape_html("&#99999999;") == "&#99999999;"


def test_join() -> None:
    assert join("-", "foo", "bar") == "foo-bar"
    assert join(None, "a", 1, None) == "a1"
    assert join(", ") == ""
