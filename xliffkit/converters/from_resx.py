#!/usr/bin/env python3
"""
Convert .resx resource files to XLIFF documents.

Every string resource becomes one untranslated unit (state NEW, no
target) whose id and resource name are the resource key.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

from ..enums import TranslationState, XliffVersion
from ..errors import FormatError, NotFoundError
from ..models import XliffDocument, xliff12, xliff20
from ..resx import ResxEntry, read_resx

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _check_arguments(resx_path: PathLike, source_language: str) -> Path:
    """Validate arguments before touching the file system."""
    if not resx_path:
        raise FormatError("Resx path is required")
    if not source_language:
        raise FormatError("Source language is required", str(resx_path))
    path = Path(resx_path)
    if not path.is_file():
        raise NotFoundError("Resx file not found", str(path))
    return path


def build_xliff12(
    entries: list[ResxEntry],
    source_language: str,
    target_language: Optional[str] = None,
    original: str = "",
) -> xliff12.Document:
    """
    Build an XLIFF 1.2 document from resource entries.

    Args:
        entries: Resources in output order
        source_language: Source language code (e.g., "en-US")
        target_language: Optional target language code
        original: Name of the originating resource file

    Returns:
        Document with a single file holding one trans-unit per entry
    """
    if not source_language:
        raise FormatError("Source language is required")

    xliff_file = xliff12.File(
        original=original,
        source_language=source_language,
        target_language=target_language,
        datatype="resx",
        header=xliff12.Header(tool=xliff12.Tool()),
    )
    for entry in entries:
        xliff_file.body.units.append(xliff12.TransUnit(
            id=entry.key,
            resource_name=entry.key,
            source=entry.value,
            target=None,
            state=TranslationState.NEW,
        ))
    return xliff12.Document(files=[xliff_file])


def build_xliff20(
    entries: list[ResxEntry],
    source_language: str,
    target_language: Optional[str] = None,
    original: Optional[str] = None,
    file_id: str = "",
) -> xliff20.Document:
    """
    Build an XLIFF 2.0 document from resource entries.

    Each entry becomes a unit with exactly one segment (id "1").
    """
    if not source_language:
        raise FormatError("Source language is required")

    xliff_file = xliff20.File(
        id=file_id,
        original=original,
        header=xliff20.Header(tool=xliff20.Tool()),
    )
    for entry in entries:
        xliff_file.units.append(xliff20.Unit(
            id=entry.key,
            name=entry.key,
            segments=[xliff20.Segment(
                id="1",
                source=entry.value,
                target=None,
                state=TranslationState.NEW,
            )],
        ))
    return xliff20.Document(
        source_language=source_language,
        target_language=target_language,
        files=[xliff_file],
    )


def convert_to_xliff12(
    resx_path: PathLike,
    source_language: str,
    target_language: Optional[str] = None,
) -> xliff12.Document:
    """
    Convert a .resx file to an XLIFF 1.2 document.

    Raises:
        FormatError: Path or source language missing
        NotFoundError: File does not exist
        ConversionError: File is not a parseable .resx envelope
    """
    path = _check_arguments(resx_path, source_language)
    entries = read_resx(path)
    logger.debug("Converting %d resource(s) from %s to XLIFF 1.2", len(entries), path)
    return build_xliff12(entries, source_language, target_language, original=path.name)


def convert_to_xliff20(
    resx_path: PathLike,
    source_language: str,
    target_language: Optional[str] = None,
) -> xliff20.Document:
    """Convert a .resx file to an XLIFF 2.0 document."""
    path = _check_arguments(resx_path, source_language)
    entries = read_resx(path)
    logger.debug("Converting %d resource(s) from %s to XLIFF 2.0", len(entries), path)
    return build_xliff20(
        entries, source_language, target_language,
        original=path.name, file_id=path.stem,
    )


def convert_to_xliff(
    resx_path: PathLike,
    source_language: str,
    version: XliffVersion,
    target_language: Optional[str] = None,
) -> XliffDocument:
    """Convert a .resx file to the requested XLIFF version."""
    if version is XliffVersion.V1_2:
        return convert_to_xliff12(resx_path, source_language, target_language)
    if version is XliffVersion.V2_0:
        return convert_to_xliff20(resx_path, source_language, target_language)
    raise FormatError(f"Unsupported XLIFF version: {version}", str(resx_path))


async def convert_to_xliff_async(
    resx_path: PathLike,
    source_language: str,
    version: XliffVersion,
    target_language: Optional[str] = None,
) -> XliffDocument:
    """Run convert_to_xliff() in a worker thread."""
    return await asyncio.to_thread(
        convert_to_xliff, resx_path, source_language, version, target_language
    )
