#!/usr/bin/env python3
"""
Tests for loading and saving XLIFF documents.

Tests verify:
1. Version-detecting load returns the matching document type
2. Per-version loaders reject the other generation
3. Save creates directories and writes UTF-8 with an XML declaration
4. Pretty and compact output
5. Type mismatches between document and version
"""

import asyncio

import pytest

from xliffkit import (
    FormatError,
    NotFoundError,
    TypeMismatchError,
    XliffVersion,
    dumps,
    load,
    load_async,
    load_xliff12,
    load_xliff20,
    loads,
    loads_xliff12,
    loads_xliff20,
    save,
    save_async,
    save_xliff12,
    save_xliff20,
    save_xliff20_async,
    xliff12,
    xliff20,
)

from tests.fixtures import XLIFF12_CONTENT, XLIFF20_CONTENT


@pytest.fixture
def xliff12_file(tmp_path):
    path = tmp_path / "strings.xlf"
    path.write_text(XLIFF12_CONTENT, encoding="utf-8")
    return path


@pytest.fixture
def xliff20_file(tmp_path):
    path = tmp_path / "strings20.xlf"
    path.write_text(XLIFF20_CONTENT, encoding="utf-8")
    return path


def test_load_detects_version(xliff12_file, xliff20_file):
    version, document = load(xliff12_file)
    assert version is XliffVersion.V1_2
    assert isinstance(document, xliff12.Document)

    version, document = load(xliff20_file)
    assert version is XliffVersion.V2_0
    assert isinstance(document, xliff20.Document)


def test_loads_detects_version():
    version, document = loads(XLIFF20_CONTENT)
    assert version is XliffVersion.V2_0
    assert document == loads_xliff20(XLIFF20_CONTENT)


def test_per_version_loaders(xliff12_file, xliff20_file):
    assert load_xliff12(xliff12_file) == loads_xliff12(XLIFF12_CONTENT)
    assert load_xliff20(xliff20_file) == loads_xliff20(XLIFF20_CONTENT)


def test_wrong_generation_raises(xliff12_file, xliff20_file):
    with pytest.raises(FormatError):
        load_xliff20(xliff12_file)
    with pytest.raises(FormatError):
        load_xliff12(xliff20_file)
    with pytest.raises(FormatError):
        loads_xliff12(XLIFF20_CONTENT)


def test_wrong_namespace_raises():
    content = XLIFF12_CONTENT.replace("urn:oasis:names:tc:xliff:document:1.2", "urn:example")
    with pytest.raises(FormatError):
        loads_xliff12(content)


def test_load_missing_file(tmp_path):
    with pytest.raises(NotFoundError):
        load(tmp_path / "missing.xlf")
    with pytest.raises(NotFoundError):
        load_xliff12(tmp_path / "missing.xlf")


def test_load_empty_path():
    with pytest.raises(FormatError):
        load_xliff20("")


def test_malformed_xml_raises():
    with pytest.raises(FormatError):
        loads_xliff12('<xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2"><file>')


def test_load_async(xliff20_file):
    version, document = asyncio.run(load_async(xliff20_file))
    assert version is XliffVersion.V2_0
    assert document.target_language == "de-DE"


def test_save_creates_directories(tmp_path):
    document = loads_xliff12(XLIFF12_CONTENT)
    path = save(document, tmp_path / "out" / "nested" / "a.xlf")

    assert path.is_file()
    text = path.read_text(encoding="utf-8")
    assert text.startswith('<?xml version="1.0" encoding="utf-8"?>')
    assert load(path) == (XliffVersion.V1_2, document)


def test_save_per_version(tmp_path):
    document = loads_xliff20(XLIFF20_CONTENT)
    path = save_xliff20(document, tmp_path / "a.xlf")
    assert load_xliff20(path) == document

    with pytest.raises(TypeMismatchError):
        save_xliff12(document, tmp_path / "b.xlf")
    assert not (tmp_path / "b.xlf").exists()


def test_save_async(tmp_path):
    document = loads_xliff20(XLIFF20_CONTENT)
    path = asyncio.run(save_async(document, tmp_path / "a.xlf"))
    assert load_xliff20(path) == document

    path = asyncio.run(save_xliff20_async(document, tmp_path / "b.xlf", False))
    assert "\n" not in path.read_text(encoding="utf-8")


def test_pretty_and_compact_output():
    document = loads_xliff12(XLIFF12_CONTENT)

    pretty = dumps(document)
    assert '\n  <file ' in pretty
    assert pretty.endswith('</xliff>\n')

    compact = dumps(document, pretty=False)
    assert '\n' not in compact
    assert compact.startswith('<?xml version="1.0" encoding="utf-8"?><xliff ')


def test_root_declares_namespace_and_version():
    text = dumps(loads_xliff20(XLIFF20_CONTENT), pretty=False)
    assert '<xliff version="2.0" xmlns="urn:oasis:names:tc:xliff:document:2.0" srcLang="en-US" trgLang="de-DE">' in text


def test_non_ascii_is_written_as_utf8(tmp_path):
    document = loads_xliff20(XLIFF20_CONTENT)
    path = save(document, tmp_path / "a.xlf")
    assert "Öffnen" in path.read_bytes().decode("utf-8")


def test_dumps_version_mismatch():
    with pytest.raises(TypeMismatchError):
        dumps(loads_xliff12(XLIFF12_CONTENT), XliffVersion.V2_0)
    assert dumps(loads_xliff12(XLIFF12_CONTENT), XliffVersion.V1_2)


def test_save_non_document_raises(tmp_path):
    with pytest.raises(TypeMismatchError):
        save({"files": []}, tmp_path / "a.xlf")


def test_save_empty_path_raises():
    with pytest.raises(FormatError):
        save(xliff12.Document(), "")


def test_empty_documents_round_trip():
    assert loads_xliff12(dumps(xliff12.Document())) == xliff12.Document()
    assert loads_xliff20(dumps(xliff20.Document(source_language="en"))) == xliff20.Document(source_language="en")


@pytest.mark.parametrize("text", ["a\x01b", "bell\x07", "a\ud800b"])
def test_illegal_characters_are_rejected_on_save(tmp_path, text):
    """Nothing is written when text cannot be represented in XML."""
    document = xliff12.Document(files=[xliff12.File(
        body=xliff12.Body(units=[xliff12.TransUnit(id="a", source="s", target=text)]),
    )])
    with pytest.raises(FormatError, match="<target>"):
        save(document, tmp_path / "a.xlf")
    assert not (tmp_path / "a.xlf").exists()


def test_illegal_characters_in_attributes_are_rejected():
    document = xliff20.Document(source_language="en", files=[xliff20.File(id="f\x0b", units=[
        xliff20.Unit(id="u", segments=[xliff20.Segment(id="1", source="s")]),
    ])])
    with pytest.raises(FormatError, match="<file>"):
        dumps(document)


def test_tab_and_newlines_are_allowed():
    document = xliff12.Document(files=[xliff12.File(
        body=xliff12.Body(units=[xliff12.TransUnit(id="a", source="a\tb\r\nc")]),
    )])
    assert loads_xliff12(dumps(document, pretty=False)).files[0].body.units[0].source == "a\tb\nc"
