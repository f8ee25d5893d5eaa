#!/usr/bin/env python3
"""
SLK581 Encoder - Main Entrypoint

Encodes a single record given on the command line into its SLK581 key and
prints the key on stdout.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .encoder import encode
from .errors import SLK581Error


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    format_str = '%(asctime)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='slk581',
        description="SLK581 Encoder - Statistical Linkage Key for one record",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --family-name Doe --given-name John --dob 2000-12-19 --sex m
  %(prog)s --dob 2000-12-19
        """
    )

    parser.add_argument('--family-name', help='Family name (default: unknown)')
    parser.add_argument('--given-name', help='Given name (default: unknown)')
    parser.add_argument('--dob', help='Date of birth in YYYY-MM-DD format')
    parser.add_argument('--sex', help='m, male, f, female, t or trans (default: unknown)')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entrypoint for the SLK581 encoder."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    try:
        key = encode(args.family_name, args.given_name, args.dob, args.sex)
    except SLK581Error as e:
        logging.error(f"Encoding failed: {e}")
        return 1

    print(key)
    return 0


if __name__ == "__main__":
    sys.exit(main())
