#!/usr/bin/env python3
"""
warodai2yomi - Warodai to Yomichan converter CLI.

Usage:
    warodai2yomi SOURCE_DIR [options]

Example:
    warodai2yomi warodai-source/ -o build/warodai --zip build/warodai.zip
"""

import argparse
import logging
import sys
from pathlib import Path

from warodai import __version__
from warodai.config import ConfigError, load_config
from warodai.convert import convert_directory
from warodai.term_bank import package_dictionary


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='warodai2yomi',
        description='Convert Warodai entry files into a Yomichan dictionary',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Term banks and index.json into ./output
  warodai2yomi warodai-source/

  # Custom output directory and a ready-to-import zip
  warodai2yomi warodai-source/ -o build/warodai --zip build/warodai.zip

  # Dictionary metadata from a YAML file
  warodai2yomi warodai-source/ --config warodai.yaml
        """
    )

    parser.add_argument(
        'source',
        type=Path,
        help='Directory with Warodai entry files'
    )
    parser.add_argument(
        '-o', '--output',
        type=Path,
        default=Path('output'),
        help='Output directory for term banks and index.json (default: output)'
    )
    parser.add_argument(
        '-c', '--config',
        type=Path,
        help='YAML file with dictionary metadata and conversion settings'
    )
    parser.add_argument(
        '--batch-size',
        type=int,
        help='Terms per term bank file (default: 10000)'
    )
    parser.add_argument(
        '--revision',
        help='Dictionary revision (default: today, YYYY-MM-DD)'
    )
    parser.add_argument(
        '--title',
        help='Dictionary title (default: Warodai)'
    )
    parser.add_argument(
        '--zip',
        type=Path,
        metavar='PATH',
        help='Also package the dictionary into this zip archive'
    )
    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable the live progress display'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def main(argv=None) -> int:
    """Entry point for warodai2yomi CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.batch_size is not None and args.batch_size < 1:
        parser.error("--batch-size must be >= 1")

    if not args.source.is_dir():
        logger.error(f"Source directory not found: {args.source}")
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    config = config.with_overrides(
        batch_size=args.batch_size,
        revision=args.revision,
        title=args.title,
    )

    try:
        stats = convert_directory(
            args.source,
            args.output,
            config,
            show_progress=not args.no_progress
        )

        if args.zip:
            package_dictionary(args.output, args.zip)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    if stats.files == 0:
        logger.warning(f"No '{config.source_suffix}' entry files found under {args.source}")

    logger.info("✓ Conversion complete")
    return 0


if __name__ == '__main__':
    sys.exit(main())
