#!/usr/bin/env python3
"""
Tests for .resx to XLIFF import.

Tests verify:
1. One untranslated unit per string resource, in file order
2. File metadata for both generations
3. Argument validation order
4. Import followed by export falls back to source values
"""

import asyncio

import pytest

from xliffkit import (
    ApprovalState,
    ConversionError,
    FormatError,
    NotFoundError,
    ResxEntry,
    TranslationState,
    XliffVersion,
    build_xliff12,
    collect_entries,
    convert_to_xliff,
    convert_to_xliff12,
    convert_to_xliff20,
    convert_to_xliff_async,
    dumps,
    loads,
    xliff12,
    xliff20,
)

from tests.fixtures import RESX_CONTENT


@pytest.fixture
def resx_file(tmp_path):
    path = tmp_path / "Strings.resx"
    path.write_text(RESX_CONTENT, encoding="utf-8")
    return path


def test_convert_to_xliff12(resx_file):
    document = convert_to_xliff12(resx_file, "en-US", "fr-FR")

    xliff_file = document.files[0]
    assert xliff_file.original == "Strings.resx"
    assert xliff_file.source_language == "en-US"
    assert xliff_file.target_language == "fr-FR"
    assert xliff_file.datatype == "resx"
    assert xliff_file.header.tool == xliff12.Tool()

    units = xliff_file.body.units
    assert [u.id for u in units] == ["Greeting", "Typed", "Empty"]
    greeting = units[0]
    assert greeting.resource_name == "Greeting"
    assert greeting.source == "Hello"
    assert greeting.target is None
    assert greeting.state is TranslationState.NEW


def test_convert_to_xliff20(resx_file):
    document = convert_to_xliff20(resx_file, "en-US")

    assert document.source_language == "en-US"
    assert document.target_language is None
    xliff_file = document.files[0]
    assert xliff_file.id == "Strings"
    assert xliff_file.original == "Strings.resx"

    unit = xliff_file.units[0]
    assert unit.id == "Greeting"
    assert unit.name == "Greeting"
    assert unit.approved is ApprovalState.UNAPPROVED
    assert unit.segments == [xliff20.Segment(id="1", source="Hello")]


def test_convert_to_xliff_dispatches(resx_file):
    assert isinstance(convert_to_xliff(resx_file, "en", XliffVersion.V1_2), xliff12.Document)
    assert isinstance(convert_to_xliff(resx_file, "en", XliffVersion.V2_0), xliff20.Document)


def test_convert_to_xliff_async(resx_file):
    document = asyncio.run(convert_to_xliff_async(resx_file, "en", XliffVersion.V2_0, "de"))
    assert document.target_language == "de"


def test_imported_document_survives_save_and_load(resx_file):
    for version in XliffVersion:
        document = convert_to_xliff(resx_file, "en-US", version, "fr-FR")
        text = dumps(document)
        assert "state=" not in text
        assert loads(text) == (version, document)


def test_import_then_export_uses_source_values(resx_file):
    """Untranslated units fall back to their source text."""
    document = convert_to_xliff20(resx_file, "en-US", "fr-FR")
    assert collect_entries(document) == [
        ResxEntry("Greeting", "Hello"),
        ResxEntry("Typed", "Typed text"),
        ResxEntry("Empty", ""),
    ]
    assert collect_entries(document, include_untranslated=False) == []


def test_build_xliff12_from_entries():
    document = build_xliff12([ResxEntry("Greeting", "Hello")], "en-US", "fr-FR")
    unit = document.files[0].body.units[0]
    assert (unit.id, unit.resource_name, unit.source, unit.target) == ("Greeting", "Greeting", "Hello", None)
    assert document.files[0].original == ""


def test_empty_resx_gives_empty_file(tmp_path):
    path = tmp_path / "Empty.resx"
    path.write_text("<root/>", encoding="utf-8")
    document = convert_to_xliff12(path, "en")
    assert len(document.files) == 1
    assert document.files[0].body.units == []


def test_argument_errors(tmp_path, resx_file):
    with pytest.raises(FormatError):
        convert_to_xliff12("", "en")
    with pytest.raises(FormatError):
        convert_to_xliff20(resx_file, "")
    # Missing source language is reported before the missing file
    with pytest.raises(FormatError):
        convert_to_xliff12(tmp_path / "missing.resx", "")
    with pytest.raises(NotFoundError):
        convert_to_xliff20(tmp_path / "missing.resx", "en")


def test_malformed_resx_raises(tmp_path):
    path = tmp_path / "broken.resx"
    path.write_text("<root><data name='a'>", encoding="utf-8")
    with pytest.raises(ConversionError):
        convert_to_xliff12(path, "en")


def test_unsupported_version_raises(resx_file):
    with pytest.raises(FormatError, match="Unsupported XLIFF version"):
        convert_to_xliff(resx_file, "en", "3.0")
