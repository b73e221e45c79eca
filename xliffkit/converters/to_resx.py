#!/usr/bin/env python3
"""
Convert XLIFF documents to .resx resource files.

Units are flattened depth-first: a container's own units come first, then
each of its groups in order, recursively. XLIFF 1.2 yields one resource per
trans-unit; XLIFF 2.0 yields one resource per segment, with the segment id
appended to the key when a unit has several segments.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..errors import ConversionError, FormatError, TypeMismatchError
from ..loader import load
from ..models import xliff12, xliff20
from ..resx import ResxEntry, build_resx
from ..saver import write_text_file

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _add_entry(
    entries: list[ResxEntry],
    key: str,
    source: Optional[str],
    target: Optional[str],
    use_target_as_value: bool,
    include_untranslated: bool,
) -> None:
    if source is None:
        raise ConversionError(f"Translation unit '{key}' has no source text")

    has_target = bool(target)
    if not has_target and not include_untranslated:
        return

    value = target if use_target_as_value and has_target else source
    entries.append(ResxEntry(key, value))


# XLIFF 1.2

def _collect_xliff12_units(
    entries: list[ResxEntry],
    units: list[xliff12.TransUnit],
    groups: list[xliff12.Group],
    use_target_as_value: bool,
    include_untranslated: bool,
) -> None:
    for unit in units:
        key = unit.resource_name if unit.resource_name is not None else unit.id
        _add_entry(entries, key, unit.source, unit.target, use_target_as_value, include_untranslated)

    for group in groups:
        _collect_xliff12_units(entries, group.units, group.groups, use_target_as_value, include_untranslated)


def collect_xliff12_entries(
    document: xliff12.Document,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> list[ResxEntry]:
    """
    Flatten an XLIFF 1.2 document into resource entries.

    Args:
        document: XLIFF 1.2 document
        use_target_as_value: Use the target text when present, else the source
        include_untranslated: Keep units whose target is missing or empty

    Returns:
        Entries keyed by resname (falling back to id), in document order
    """
    if not isinstance(document, xliff12.Document):
        raise TypeMismatchError(f"Expected an XLIFF 1.2 document, got {type(document).__name__}")

    entries: list[ResxEntry] = []
    for xliff_file in document.files:
        _collect_xliff12_units(
            entries, xliff_file.body.units, xliff_file.body.groups,
            use_target_as_value, include_untranslated,
        )
    return entries


# XLIFF 2.0

def _collect_xliff20_unit(
    entries: list[ResxEntry],
    unit: xliff20.Unit,
    use_target_as_value: bool,
    include_untranslated: bool,
) -> None:
    base_key = unit.name if unit.name is not None else unit.id
    multi = len(unit.segments) > 1
    for segment in unit.segments:
        key = f"{base_key}_{segment.id}" if multi else base_key
        _add_entry(entries, key, segment.source, segment.target, use_target_as_value, include_untranslated)


def _collect_xliff20_units(
    entries: list[ResxEntry],
    units: list[xliff20.Unit],
    groups: list[xliff20.Group],
    use_target_as_value: bool,
    include_untranslated: bool,
) -> None:
    for unit in units:
        _collect_xliff20_unit(entries, unit, use_target_as_value, include_untranslated)

    for group in groups:
        _collect_xliff20_units(entries, group.units, group.groups, use_target_as_value, include_untranslated)


def collect_xliff20_entries(
    document: xliff20.Document,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> list[ResxEntry]:
    """
    Flatten an XLIFF 2.0 document into resource entries.

    Each segment becomes one entry. Keys are the unit name (falling back to
    id); units with more than one segment get ``_{segment_id}`` appended.
    """
    if not isinstance(document, xliff20.Document):
        raise TypeMismatchError(f"Expected an XLIFF 2.0 document, got {type(document).__name__}")

    entries: list[ResxEntry] = []
    for xliff_file in document.files:
        _collect_xliff20_units(
            entries, xliff_file.units, xliff_file.groups,
            use_target_as_value, include_untranslated,
        )
    return entries


def collect_entries(
    document: Any,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> list[ResxEntry]:
    """
    Flatten a document of either generation into resource entries.

    Raises:
        TypeMismatchError: Value is neither document type
        ConversionError: A unit or segment has no source text
    """
    if isinstance(document, xliff12.Document):
        return collect_xliff12_entries(document, use_target_as_value, include_untranslated)
    if isinstance(document, xliff20.Document):
        return collect_xliff20_entries(document, use_target_as_value, include_untranslated)
    raise TypeMismatchError(f"Unsupported document type: {type(document).__name__}")


def to_resx_string(
    document: Any,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
    pretty: bool = True,
) -> str:
    """Convert a document of either generation to .resx text."""
    entries = collect_entries(document, use_target_as_value, include_untranslated)
    return build_resx(entries, pretty=pretty)


def _write(entries: list[ResxEntry], output_path: PathLike) -> Path:
    written = write_text_file(output_path, build_resx(entries))
    logger.debug("Wrote %d resource(s) to %s", len(entries), written)
    return written


def convert_from_xliff12(
    document: xliff12.Document,
    output_path: PathLike,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> Path:
    """Write an XLIFF 1.2 document as a .resx file."""
    if not output_path:
        raise FormatError("Output path is required")
    return _write(collect_xliff12_entries(document, use_target_as_value, include_untranslated), output_path)


def convert_from_xliff20(
    document: xliff20.Document,
    output_path: PathLike,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> Path:
    """Write an XLIFF 2.0 document as a .resx file."""
    if not output_path:
        raise FormatError("Output path is required")
    return _write(collect_xliff20_entries(document, use_target_as_value, include_untranslated), output_path)


def convert_from_xliff(
    document: Any,
    output_path: PathLike,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> Path:
    """
    Write a document of either generation as a .resx file.

    Args:
        document: xliff12.Document or xliff20.Document
        output_path: Destination; parent directories are created
        use_target_as_value: Prefer target text over source text
        include_untranslated: Keep entries without a target

    Returns:
        Path written

    Raises:
        TypeMismatchError: Value is neither document type
    """
    if not output_path:
        raise FormatError("Output path is required")
    return _write(collect_entries(document, use_target_as_value, include_untranslated), output_path)


def convert_file(
    xliff_path: PathLike,
    output_path: PathLike,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> Path:
    """Load an XLIFF file of either version and write it as .resx."""
    if not output_path:
        raise FormatError("Output path is required")
    _version, document = load(xliff_path)
    return convert_from_xliff(document, output_path, use_target_as_value, include_untranslated)


async def convert_from_xliff_async(
    document: Any,
    output_path: PathLike,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> Path:
    """Run convert_from_xliff() in a worker thread."""
    return await asyncio.to_thread(
        convert_from_xliff, document, output_path, use_target_as_value, include_untranslated
    )


async def convert_file_async(
    xliff_path: PathLike,
    output_path: PathLike,
    use_target_as_value: bool = True,
    include_untranslated: bool = True,
) -> Path:
    return await asyncio.to_thread(
        convert_file, xliff_path, output_path, use_target_as_value, include_untranslated
    )
