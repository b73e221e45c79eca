#!/usr/bin/env python3
"""
Tests for the .resx codec.

Tests verify:
1. Only string resources are read
2. Duplicate names keep the last value
3. Written files carry the four resheader entries
4. Validation helpers
"""

import pytest

from xliffkit import (
    ConversionError,
    FormatError,
    NotFoundError,
    ResxEntry,
    get_resource_count,
    is_valid_resx,
    parse_resx,
    read_resx,
)
from xliffkit.resx import RESHEADERS, build_resx

from tests.fixtures import RESX_CONTENT


def test_parse_string_resources():
    assert parse_resx(RESX_CONTENT) == [
        ResxEntry("Greeting", "Hello"),
        ResxEntry("Typed", "Typed text"),
        ResxEntry("Empty", ""),
    ]


def test_skipped_resources_are_logged(caplog):
    with caplog.at_level("INFO", logger="xliffkit.resx"):
        parse_resx(RESX_CONTENT)
    assert "Skipped 2 non-string resource(s)" in caplog.text


def test_duplicate_names_keep_last_value():
    content = """<root>
  <data name="a"><value>first</value></data>
  <data name="b"><value>other</value></data>
  <data name="a"><value>second</value></data>
</root>"""
    assert parse_resx(content) == [ResxEntry("a", "second"), ResxEntry("b", "other")]


def test_read_resx_file(tmp_path):
    path = tmp_path / "Strings.resx"
    path.write_text(RESX_CONTENT, encoding="utf-8")
    assert [e.key for e in read_resx(path)] == ["Greeting", "Typed", "Empty"]


def test_read_missing_file(tmp_path):
    with pytest.raises(NotFoundError):
        read_resx(tmp_path / "missing.resx")
    with pytest.raises(FormatError):
        read_resx("")


def test_invalid_content_raises():
    with pytest.raises(ConversionError):
        parse_resx("<root><data>")
    with pytest.raises(ConversionError):
        parse_resx("<resources/>")


def test_build_resx_headers_and_entries():
    text = build_resx([ResxEntry("Greeting", "Bonjour & bienvenue")])

    assert text.startswith('<?xml version="1.0" encoding="utf-8"?>\n<root>')
    for name, value in RESHEADERS:
        assert f'<resheader name="{name}">' in text
        assert f'<value>{value}</value>' in text
    assert '<data name="Greeting" xml:space="preserve">' in text
    assert '<value>Bonjour &amp; bienvenue</value>' in text


def test_build_then_parse_keeps_whitespace():
    entries = [ResxEntry("a", "  padded  "), ResxEntry("b", "line 1\nline 2"), ResxEntry("c", "")]
    assert parse_resx(build_resx(entries)) == entries


def test_is_valid_resx(tmp_path):
    valid = tmp_path / "valid.resx"
    valid.write_text(RESX_CONTENT, encoding="utf-8")
    no_data = tmp_path / "empty.resx"
    no_data.write_text(build_resx([]), encoding="utf-8")
    broken = tmp_path / "broken.resx"
    broken.write_text("<root>", encoding="utf-8")

    assert is_valid_resx(valid)
    assert not is_valid_resx(no_data)
    assert not is_valid_resx(broken)
    assert not is_valid_resx(tmp_path / "missing.resx")


def test_get_resource_count(tmp_path):
    path = tmp_path / "Strings.resx"
    path.write_text(RESX_CONTENT, encoding="utf-8")
    assert get_resource_count(path) == 3
    assert get_resource_count(tmp_path / "missing.resx") == 0


def test_mimetype_without_type_is_kept():
    """Only a declared non-string type excludes an entry."""
    content = """<root>
  <data name="Blob" mimetype="application/x-microsoft.net.object.binary.base64">
    <value>AAEAAAD</value>
  </data>
</root>"""
    assert parse_resx(content) == [ResxEntry("Blob", "AAEAAAD")]


def test_build_rejects_control_characters():
    with pytest.raises(FormatError, match="U\\+0001"):
        build_resx([ResxEntry("a", "a\x01b")])
