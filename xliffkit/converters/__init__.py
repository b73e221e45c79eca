#!/usr/bin/env python3
"""
Converters between XLIFF documents and .resx resource files.
"""

from .from_resx import (
    build_xliff12,
    build_xliff20,
    convert_to_xliff,
    convert_to_xliff12,
    convert_to_xliff20,
    convert_to_xliff_async,
)
from .to_resx import (
    collect_entries,
    collect_xliff12_entries,
    collect_xliff20_entries,
    convert_file,
    convert_file_async,
    convert_from_xliff,
    convert_from_xliff12,
    convert_from_xliff20,
    convert_from_xliff_async,
    to_resx_string,
)

__all__ = [
    'build_xliff12',
    'build_xliff20',
    'convert_to_xliff',
    'convert_to_xliff12',
    'convert_to_xliff20',
    'convert_to_xliff_async',
    'collect_entries',
    'collect_xliff12_entries',
    'collect_xliff20_entries',
    'convert_file',
    'convert_file_async',
    'convert_from_xliff',
    'convert_from_xliff12',
    'convert_from_xliff20',
    'convert_from_xliff_async',
    'to_resx_string',
]
