#!/usr/bin/env python
"""
Command Line Interface for the Business Card Parser.

Parses the text of one business card from a file and prints the
contact information found on it.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cardparser import ContactInfo, BusinessCardParser, DocumentLoadError, create_parser
from config import Config

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="cardparser",
        description="Extract name, phone number and email address from business card text",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("input", help="Path to a text file holding one business card")
    parser.add_argument(
        "-o", "--output",
        help="Path to write the results to (created if missing)",
        required=False
    )
    parser.add_argument(
        "-p", "--parser",
        help="Registered parser implementation to use",
        default=Config.PARSER_TYPE
    )
    parser.add_argument(
        "-f", "--format",
        help="Output format",
        default="text",
        choices=["text", "json"]
    )
    return parser.parse_args(argv)


def load_document(path: str) -> str:
    """Read a business card document.

    Raises:
        DocumentLoadError: If the file cannot be read
    """
    logger.info(f"Parsing business card text from file: {path}")
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(path, str(e)) from e


def format_result(contact: ContactInfo, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(contact.to_dict(), indent=2)
    return str(contact)


def write_results(results: str, output_path: str) -> bool:
    """Write results to disk, creating the file if it does not exist.

    Returns:
        True if the file was written
    """
    try:
        Path(output_path).write_text(results + "\n", encoding="utf-8")
    except OSError as e:
        logger.error(f"Unable to write to file {output_path}: {e}")
        return False

    logger.info(f"Results written to {output_path}")
    return True


def run(args: argparse.Namespace, parser: Optional[BusinessCardParser] = None) -> int:
    """Parse the input file and report the results.

    Returns:
        Process exit code
    """
    try:
        document = load_document(args.input)
    except DocumentLoadError as e:
        logger.error(str(e))
        return 1

    if parser is None:
        parser = create_parser(args.parser, **Config.parser_options())

    contact = parser.get_contact_info(document)
    results = format_result(contact, args.format)
    logger.info(f"Contact info:\n{contact}")
    print(results)

    if args.output:
        write_results(results, args.output)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    Config.configure_logging()
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
