#!/usr/bin/env python3
"""
XLIFF version detection.

Reads only up to the document element so callers can dispatch to the right
handler before attempting a full structural parse.
"""

import asyncio
import logging
from pathlib import Path
from typing import Iterable, Union
from xml.etree import ElementTree as ET

from .enums import XliffVersion
from .errors import FormatError, NotFoundError
from .format_handlers import local_name

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _read_root(chunks: Iterable[Union[str, bytes]], source: str) -> ET.Element:
    """Feed chunks to a pull parser until the first start tag appears."""
    parser = ET.XMLPullParser(events=('start',))
    try:
        for chunk in chunks:
            parser.feed(chunk)
            for _event, elem in parser.read_events():
                return elem
        parser.close()
    except ET.ParseError as e:
        raise FormatError(f"Invalid XML: {e}", source) from e
    raise FormatError("No document element found", source)


def _version_of(root: ET.Element, source: str) -> XliffVersion:
    if local_name(root.tag) != 'xliff':
        raise FormatError(
            f"Invalid XLIFF: root element is '{local_name(root.tag)}', expected 'xliff'",
            source,
        )
    version = root.get('version')
    try:
        detected = XliffVersion.from_string(version)
    except ValueError:
        raise FormatError(f"Unsupported XLIFF version: '{version}'", source) from None
    logger.debug("Detected XLIFF %s in %s", detected.value, source)
    return detected


def _file_chunks(path: Path):
    with open(path, 'rb') as f:
        while True:
            chunk = f.read(CHUNK_SIZE)
            if not chunk:
                break
            yield chunk


def detect_version(path: Union[str, Path]) -> XliffVersion:
    """
    Detect the XLIFF version of a file.

    Args:
        path: Path to the XLIFF file

    Returns:
        Detected XliffVersion

    Raises:
        NotFoundError: File does not exist
        FormatError: Not XML, root is not <xliff>, or version is not 1.2/2.0
    """
    if not path:
        raise FormatError("XLIFF path is required")
    path = Path(path)
    if not path.is_file():
        raise NotFoundError("XLIFF file not found", str(path))
    return _version_of(_read_root(_file_chunks(path), str(path)), str(path))


def detect_version_from_string(content: str) -> XliffVersion:
    """
    Detect the XLIFF version of in-memory XML.

    Raises:
        FormatError: Empty content, not XML, root is not <xliff>, or
            version is not 1.2/2.0
    """
    if not content:
        raise FormatError("XLIFF content is empty")
    chunks = (content[i:i + CHUNK_SIZE] for i in range(0, len(content), CHUNK_SIZE))
    return _version_of(_read_root(chunks, "<string>"), "<string>")


async def detect_version_async(path: Union[str, Path]) -> XliffVersion:
    """Run detect_version in a worker thread."""
    return await asyncio.to_thread(detect_version, path)
