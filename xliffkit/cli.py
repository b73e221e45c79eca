#!/usr/bin/env python3
"""
xliffkit - XLIFF 1.2 / 2.0 and .resx conversion CLI

Commands:
    detect    - Print the XLIFF version of a file
    info      - Count files, units and segments in an XLIFF file
    to-resx   - Convert an XLIFF file to .resx
    from-resx - Convert a .resx file to XLIFF 1.2 or 2.0
    reformat  - Load and re-save an XLIFF file (normalize / compact)
    formats   - List supported XLIFF versions

Every command prints a JSON object to stdout. Errors are printed as JSON
to stderr with exit status 1.

Example:
    xliffkit from-resx --input Strings.resx --output Strings.fr.xlf --source-lang en-US --target-lang fr-FR
    # translate Strings.fr.xlf
    xliffkit to-resx --input Strings.fr.xlf --output Strings.fr.resx
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .config import Settings, load_settings
from .converters import convert_file, convert_to_xliff
from .detector import detect_version
from .errors import XliffError
from .format_handlers import HandlerRegistry
from .loader import load
from .models import xliff12
from .saver import save

logger = logging.getLogger(__name__)


def _count(document) -> dict:
    """File/unit/segment statistics for a document of either generation."""
    units = list(document.iter_units())
    if isinstance(document, xliff12.Document):
        segments = len(units)
        translated = sum(1 for u in units if u.target)
    else:
        all_segments = [s for u in units for s in u.segments]
        segments = len(all_segments)
        translated = sum(1 for s in all_segments if s.target)
    return {
        "files": len(document.files),
        "units": len(units),
        "segments": segments,
        "translated": translated,
    }


def cmd_detect(args, settings: Settings) -> dict:
    """Detect XLIFF version."""
    version = detect_version(args.input)
    return {
        "status": "ok",
        "input": args.input,
        "version": version.value,
    }


def cmd_info(args, settings: Settings) -> dict:
    """Summarize an XLIFF file."""
    version, document = load(args.input)
    stats = _count(document)
    return {
        "status": "ok",
        "input": args.input,
        "version": version.value,
        "stats": stats,
        "summary": f"{stats['units']} units, {stats['translated']}/{stats['segments']} segments translated",
    }


def cmd_to_resx(args, settings: Settings) -> dict:
    """Convert XLIFF to .resx."""
    settings = settings.merged(
        use_target_as_value=args.use_target,
        include_untranslated=args.include_untranslated,
    )
    output = convert_file(
        args.input,
        args.output,
        use_target_as_value=settings.use_target_as_value,
        include_untranslated=settings.include_untranslated,
    )
    return {
        "status": "ok",
        "output_file": str(output),
        "options": {
            "use_target_as_value": settings.use_target_as_value,
            "include_untranslated": settings.include_untranslated,
        },
    }


def cmd_from_resx(args, settings: Settings) -> dict:
    """Convert .resx to XLIFF."""
    settings = settings.merged(
        source_language=args.source_lang,
        target_language=args.target_lang,
        xliff_version=args.xliff_version,
        pretty=args.pretty,
    )
    document = convert_to_xliff(
        args.input,
        settings.source_language,
        settings.version,
        settings.target_language,
    )
    output = save(document, args.output, pretty=settings.pretty)
    stats = _count(document)
    return {
        "status": "ok",
        "output_file": str(output),
        "version": settings.version.value,
        "stats": stats,
        "summary": f"{stats['units']} resources written to {output.name}",
    }


def cmd_reformat(args, settings: Settings) -> dict:
    """Load and save an XLIFF file."""
    settings = settings.merged(pretty=args.pretty)
    version, document = load(args.input)
    output = save(document, args.output or args.input, pretty=settings.pretty)
    return {
        "status": "ok",
        "output_file": str(output),
        "version": version.value,
        "pretty": settings.pretty,
    }


def cmd_formats(args, settings: Settings) -> dict:
    """List supported XLIFF versions."""
    formats = HandlerRegistry.list_handlers()
    return {
        "status": "ok",
        "formats": formats,
        "summary": f"{len(formats)} versions supported: {', '.join(f['version'] for f in formats)}",
    }


COMMANDS = {
    "detect": cmd_detect,
    "info": cmd_info,
    "to-resx": cmd_to_resx,
    "from-resx": cmd_from_resx,
    "reformat": cmd_reformat,
    "formats": cmd_formats,
}


def _add_pretty_flags(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--pretty", dest="pretty", action="store_const", const=True,
                       help="Indent output (default)")
    group.add_argument("--compact", dest="pretty", action="store_const", const=False,
                       help="Write output without indentation")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xliffkit",
        description="xliffkit - XLIFF 1.2 / 2.0 and .resx conversion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Detect the XLIFF version
  xliffkit detect --input Strings.xlf

  # Create an XLIFF 2.0 file for translators
  xliffkit from-resx --input Strings.resx --output Strings.fr.xlf --source-lang en-US --target-lang fr-FR --xliff-version 2.0

  # Export only translated entries back to .resx
  xliffkit to-resx --input Strings.fr.xlf --output Strings.fr.resx --skip-untranslated

Settings file (.xliffkit.yaml):
  source_language: en-US
  xliff_version: "2.0"
  include_untranslated: false
        """,
    )
    parser.add_argument("--config", help="Settings file (default: ./.xliffkit.yaml if present)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    detect_parser = subparsers.add_parser("detect", help="Print the XLIFF version of a file")
    detect_parser.add_argument("--input", "-i", required=True, help="XLIFF file")

    info_parser = subparsers.add_parser("info", help="Summarize an XLIFF file")
    info_parser.add_argument("--input", "-i", required=True, help="XLIFF file")

    to_resx_parser = subparsers.add_parser("to-resx", help="Convert XLIFF to .resx")
    to_resx_parser.add_argument("--input", "-i", required=True, help="XLIFF file (1.2 or 2.0)")
    to_resx_parser.add_argument("--output", "-o", required=True, help="Output .resx file")
    to_resx_parser.add_argument("--source-values", dest="use_target", action="store_const", const=False,
                                help="Use source text as resource values")
    to_resx_parser.add_argument("--skip-untranslated", dest="include_untranslated", action="store_const",
                                const=False, help="Drop entries without target text")

    from_resx_parser = subparsers.add_parser("from-resx", help="Convert .resx to XLIFF")
    from_resx_parser.add_argument("--input", "-i", required=True, help=".resx file")
    from_resx_parser.add_argument("--output", "-o", required=True, help="Output XLIFF file")
    from_resx_parser.add_argument("--source-lang", "-s", help="Source language code (e.g., en-US)")
    from_resx_parser.add_argument("--target-lang", "-t", help="Target language code (e.g., fr-FR)")
    from_resx_parser.add_argument("--xliff-version", choices=["1.2", "2.0"], help="XLIFF version to write")
    _add_pretty_flags(from_resx_parser)

    reformat_parser = subparsers.add_parser("reformat", help="Load and re-save an XLIFF file")
    reformat_parser.add_argument("--input", "-i", required=True, help="XLIFF file")
    reformat_parser.add_argument("--output", "-o", help="Output file (default: overwrite input)")
    _add_pretty_flags(reformat_parser)

    subparsers.add_parser("formats", help="List supported XLIFF versions")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        settings = load_settings(args.config)
        logging.basicConfig(
            level="DEBUG" if args.verbose else settings.log_level.upper(),
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        result = COMMANDS[args.command](args, settings)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except (XliffError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
