# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for xmpextract

Reads each file, extracts its XMP block and prints the flattened
record as text, JSON or CSV.

Copyright 2025 DNAi inc.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from xmpextract import __version__
from xmpextract.config import ExtractionConfig
from xmpextract.exceptions import XMPExtractError
from xmpextract.xmp_parser import extract_xmp


def _format_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


def select_entries(record: Dict[str, Any], raw: bool = False) -> Dict[str, Any]:
    """Return either the raw sub-mapping or the friendly keys of a record."""
    if raw:
        return dict(record['raw'])
    return {key: value for key, value in record.items() if key != 'raw'}


def _csv_cell(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def format_output(entries: Dict[str, Any], format_type: str = "text") -> str:
    """
    Render record entries for printing.
    
    Entries are sorted by key. Lists are joined with ", " in the text and
    CSV renderings and kept as arrays in JSON.
    
    Args:
        entries: Friendly or raw entries of one record
        format_type: 'text', 'json' or 'csv'
        
    Returns:
        Rendered entries, empty for text output of an empty record
    """
    if format_type == "json":
        return json.dumps(entries, indent=2, ensure_ascii=False)
    
    items = sorted(entries.items())
    if format_type == "csv":
        rows = [f"{_csv_cell(key)},{_csv_cell(_format_value(value))}" for key, value in items]
        return "\n".join(["Tag,Value"] + rows)
    return "\n".join(f"{key}: {_format_value(value)}" for key, value in items)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmpextract",
        description="xmpextract - Print the embedded XMP metadata of files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Friendly keys
  xmpextract image.jpg
  
  # Raw tag names as JSON
  xmpextract --raw --format json image.jpg
""",
    )
    parser.add_argument('files', nargs='+', help='File(s) to read')
    parser.add_argument('-f', '--format', choices=['text', 'json', 'csv'], default='text',
                        help='Output format (default: text)')
    parser.add_argument('--raw', action='store_true', help='Print raw tag names instead of friendly keys')
    parser.add_argument('--legacy-start-offset', action='store_true',
                        help='Ignore an XMP block that starts at the first byte of the file')
    parser.add_argument('--timeout', type=float, help='Give up on a file after this many seconds')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.
    
    Args:
        argv: Arguments without the program name, sys.argv[1:] when None
        
    Returns:
        Process exit code: 0 on success, 1 if any file failed
    """
    args = build_parser().parse_args(argv)
    
    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("xmpextract")
    
    try:
        config = ExtractionConfig(legacy_start_offset=args.legacy_start_offset, timeout=args.timeout)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    
    exit_code = 0
    results = []
    for file_name in args.files:
        path = Path(file_name)
        try:
            record = asyncio.run(extract_xmp(path.read_bytes(), config))
        except (OSError, XMPExtractError) as e:
            logger.debug("Extraction failed for {}: {}", path, e)
            print(f"Error: {path}: {e}", file=sys.stderr)
            exit_code = 1
            continue
        results.append((path, select_entries(record, args.raw)))
    
    if args.format == "json":
        payload = [{"SourceFile": str(path), **entries} for path, entries in results]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for path, entries in results:
            if len(args.files) > 1:
                print(f"======== {path}")
            output = format_output(entries, args.format)
            if output:
                print(output)
    
    return exit_code
