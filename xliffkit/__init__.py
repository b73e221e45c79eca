"""
xliffkit - XLIFF 1.2 / 2.0 document model with .resx conversion

Loads, saves and converts XLIFF localization files of both schema
generations, and converts them to and from .NET .resx resource files.

Quick start:
    from xliffkit import load, save, convert_to_xliff20, to_resx_string

    version, document = load("Strings.fr.xlf")
    resx_text = to_resx_string(document, include_untranslated=False)

    document = convert_to_xliff20("Strings.resx", "en-US", "fr-FR")
    save(document, "Strings.fr.xlf")
"""

__version__ = "1.0.0"

from .enums import ApprovalState, TranslationState, XliffVersion
from .errors import ConversionError, FormatError, NotFoundError, TypeMismatchError, XliffError
from .models import XliffDocument, xliff12, xliff20
from .detector import detect_version, detect_version_async, detect_version_from_string
from .loader import (
    load,
    load_async,
    load_xliff12,
    load_xliff12_async,
    load_xliff20,
    load_xliff20_async,
    loads,
    loads_xliff12,
    loads_xliff20,
)
from .saver import (
    dumps,
    dumps_xliff12,
    dumps_xliff20,
    save,
    save_async,
    save_xliff12,
    save_xliff12_async,
    save_xliff20,
    save_xliff20_async,
)
from .resx import ResxEntry, get_resource_count, is_valid_resx, parse_resx, read_resx
from .converters import (
    build_xliff12,
    build_xliff20,
    collect_entries,
    convert_file,
    convert_file_async,
    convert_from_xliff,
    convert_from_xliff12,
    convert_from_xliff20,
    convert_from_xliff_async,
    convert_to_xliff,
    convert_to_xliff12,
    convert_to_xliff20,
    convert_to_xliff_async,
    to_resx_string,
)

__all__ = [
    "ApprovalState",
    "TranslationState",
    "XliffVersion",
    "XliffError",
    "NotFoundError",
    "FormatError",
    "TypeMismatchError",
    "ConversionError",
    "XliffDocument",
    "xliff12",
    "xliff20",
    "detect_version",
    "detect_version_async",
    "detect_version_from_string",
    "load",
    "load_async",
    "load_xliff12",
    "load_xliff12_async",
    "load_xliff20",
    "load_xliff20_async",
    "loads",
    "loads_xliff12",
    "loads_xliff20",
    "dumps",
    "dumps_xliff12",
    "dumps_xliff20",
    "save",
    "save_async",
    "save_xliff12",
    "save_xliff12_async",
    "save_xliff20",
    "save_xliff20_async",
    "ResxEntry",
    "get_resource_count",
    "is_valid_resx",
    "parse_resx",
    "read_resx",
    "build_xliff12",
    "build_xliff20",
    "collect_entries",
    "convert_file",
    "convert_file_async",
    "convert_from_xliff",
    "convert_from_xliff12",
    "convert_from_xliff20",
    "convert_from_xliff_async",
    "convert_to_xliff",
    "convert_to_xliff12",
    "convert_to_xliff20",
    "convert_to_xliff_async",
    "to_resx_string",
]
