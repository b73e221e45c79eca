#!/usr/bin/env python3
"""
Load XLIFF documents from files or strings.

load() / loads() detect the version first and return ``(version, document)``;
the per-version functions parse directly and fail with FormatError when the
input belongs to the other generation.
"""

import asyncio
import logging
from pathlib import Path
from typing import Union

from .detector import detect_version, detect_version_from_string
from .enums import XliffVersion
from .errors import FormatError, NotFoundError
from .format_handlers import HandlerRegistry
from .models import XliffDocument, xliff12, xliff20

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _existing_path(path: PathLike) -> Path:
    if not path:
        raise FormatError("XLIFF path is required")
    path = Path(path)
    if not path.is_file():
        raise NotFoundError("XLIFF file not found", str(path))
    return path


def _load_file(path: PathLike, version: XliffVersion):
    path = _existing_path(path)
    document = HandlerRegistry.get_handler(version).parse_file(path)
    logger.debug("Loaded XLIFF %s from %s", version.value, path)
    return document


def load(path: PathLike) -> tuple[XliffVersion, XliffDocument]:
    """
    Load an XLIFF file, detecting its version.

    Args:
        path: Path to an XLIFF 1.2 or 2.0 file

    Returns:
        Tuple of (detected version, document tree)

    Raises:
        NotFoundError: File does not exist
        FormatError: Unsupported version or malformed document
    """
    version = detect_version(path)
    return version, _load_file(path, version)


def loads(content: str) -> tuple[XliffVersion, XliffDocument]:
    """Load XLIFF from a string, detecting its version."""
    version = detect_version_from_string(content)
    return version, HandlerRegistry.get_handler(version).parse(content)


def load_xliff12(path: PathLike) -> xliff12.Document:
    """Load an XLIFF 1.2 file."""
    return _load_file(path, XliffVersion.V1_2)


def loads_xliff12(content: str) -> xliff12.Document:
    """Load an XLIFF 1.2 document from a string."""
    return HandlerRegistry.get_handler(XliffVersion.V1_2).parse(content)


def load_xliff20(path: PathLike) -> xliff20.Document:
    """Load an XLIFF 2.0 file."""
    return _load_file(path, XliffVersion.V2_0)


def loads_xliff20(content: str) -> xliff20.Document:
    """Load an XLIFF 2.0 document from a string."""
    return HandlerRegistry.get_handler(XliffVersion.V2_0).parse(content)


async def load_async(path: PathLike) -> tuple[XliffVersion, XliffDocument]:
    """Run load() in a worker thread."""
    return await asyncio.to_thread(load, path)


async def load_xliff12_async(path: PathLike) -> xliff12.Document:
    return await asyncio.to_thread(load_xliff12, path)


async def load_xliff20_async(path: PathLike) -> xliff20.Document:
    return await asyncio.to_thread(load_xliff20, path)
