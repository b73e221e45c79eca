#!/usr/bin/env python3
"""
Save XLIFF documents to files or strings.

The whole document is serialized in memory before anything is written, so
a failing save never leaves a half-written file behind.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Union

from .enums import XliffVersion
from .errors import FormatError, TypeMismatchError
from .format_handlers import HandlerRegistry
from .models import xliff12, xliff20

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def write_text_file(path: PathLike, content: str) -> Path:
    """Write UTF-8 text, creating missing parent directories."""
    if not path:
        raise FormatError("Output path is required")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def dumps(document: Any, version: Optional[XliffVersion] = None, pretty: bool = True) -> str:
    """
    Serialize a document of either generation to XLIFF text.

    Args:
        document: xliff12.Document or xliff20.Document
        version: Expected version; must match the document when given
        pretty: Indent output with two spaces

    Returns:
        XML text

    Raises:
        TypeMismatchError: Not a document, or version does not match
    """
    handler = HandlerRegistry.get_handler_for_document(document)
    if version is not None and version is not handler.version:
        raise TypeMismatchError(
            f"Document type {type(document).__module__}.{type(document).__name__} "
            f"does not match XLIFF {version.value}"
        )
    return handler.serialize(document, pretty=pretty)


def dumps_xliff12(document: xliff12.Document, pretty: bool = True) -> str:
    """Serialize an XLIFF 1.2 document to text."""
    return HandlerRegistry.get_handler(XliffVersion.V1_2).serialize(document, pretty=pretty)


def dumps_xliff20(document: xliff20.Document, pretty: bool = True) -> str:
    """Serialize an XLIFF 2.0 document to text."""
    return HandlerRegistry.get_handler(XliffVersion.V2_0).serialize(document, pretty=pretty)


def save(document: Any, path: PathLike, pretty: bool = True) -> Path:
    """
    Save a document of either generation.

    Raises:
        TypeMismatchError: Value is neither document type
    """
    if not path:
        raise FormatError("Output path is required")
    content = dumps(document, pretty=pretty)
    written = write_text_file(path, content)
    logger.debug("Saved %s to %s", type(document).__module__, written)
    return written


def save_xliff12(document: xliff12.Document, path: PathLike, pretty: bool = True) -> Path:
    """Save an XLIFF 1.2 document."""
    if not path:
        raise FormatError("Output path is required")
    return write_text_file(path, dumps_xliff12(document, pretty=pretty))


def save_xliff20(document: xliff20.Document, path: PathLike, pretty: bool = True) -> Path:
    """Save an XLIFF 2.0 document."""
    if not path:
        raise FormatError("Output path is required")
    return write_text_file(path, dumps_xliff20(document, pretty=pretty))


async def save_async(document: Any, path: PathLike, pretty: bool = True) -> Path:
    """Run save() in a worker thread."""
    return await asyncio.to_thread(save, document, path, pretty)


async def save_xliff12_async(document: xliff12.Document, path: PathLike, pretty: bool = True) -> Path:
    return await asyncio.to_thread(save_xliff12, document, path, pretty)


async def save_xliff20_async(document: xliff20.Document, path: PathLike, pretty: bool = True) -> Path:
    return await asyncio.to_thread(save_xliff20, document, path, pretty)
