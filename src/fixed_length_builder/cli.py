"""
Command-Line Interface for the fixed-length file builder.

Usage:
    fixed-length-build --schema schema.json --records records.json
    fixed-length-build --schema schema.json --records records.json -o out.txt
    fixed-length-build -c build.json --glue '\\r\\n' --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from fixed_length_builder import __version__
from fixed_length_builder.builder import FixedLengthFileBuilder
from fixed_length_builder.config import Config, create_default_config, load_records, load_schema
from fixed_length_builder.exceptions import BuilderError
from fixed_length_builder.logging_config import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fixed-length-build",
        description="Build a fixed-length text file from JSON records and a JSON schema.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-s", "--schema",
        type=Path,
        help="Schema file (JSON object of field key -> rule)",
        metavar="FILE",
    )

    parser.add_argument(
        "-r", "--records",
        type=Path,
        help="Records file (JSON array of objects)",
        metavar="FILE",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: stdout)",
        metavar="FILE",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (JSON)",
        metavar="FILE",
    )

    parser.add_argument(
        "--glue",
        help="Line separator, backslash escapes allowed (default: \\n)",
    )

    parser.add_argument(
        "--encoding",
        help="Output file encoding (default: latin-1)",
    )

    parser.add_argument(
        "--total-length",
        type=int,
        help="Expected length of every line",
        metavar="N",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def args_to_config(args: argparse.Namespace) -> Config:
    """
    Convert parsed arguments to Config.

    Values from a configuration file are used first; options given on
    the command line override them.
    """
    if args.config:
        config = Config.load_from_file(args.config)
    else:
        config = create_default_config()

    if args.schema is not None:
        config.schema_file = args.schema
    if args.records is not None:
        config.records_file = args.records
    if args.output is not None:
        config.output_file = args.output
    if args.glue is not None:
        config.glue = args.glue.encode("latin-1", "backslashreplace").decode("unicode_escape")
    if args.encoding is not None:
        config.encoding = args.encoding
    if args.total_length is not None:
        config.total_length = args.total_length
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.verbose:
        config.verbose = True
        if args.log_level is None:
            config.log_level = "INFO"

    return config


def run_build(config: Config) -> int:
    """
    Build the file described by config.

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    logger = setup_logging(level=config.log_level, verbose=config.verbose)

    try:
        schema = load_schema(config.schema_file)
        records = load_records(config.records_file)

        builder = FixedLengthFileBuilder(
            records,
            schema,
            glue=config.glue,
            total_length=config.total_length,
        )
        builder.build()
    except BuilderError as e:
        return _report_error(config, logger, "Build failed", e)

    try:
        if config.output_file:
            builder.save(config.output_file, encoding=config.encoding)
        else:
            content = builder.get_content()
            sys.stdout.write(content)
            if content:
                sys.stdout.write(config.glue)
    except (OSError, UnicodeError) as e:
        return _report_error(config, logger, "Cannot write output", e)

    return 0


def _report_error(config: Config, logger: logging.Logger, context: str, error: Exception) -> int:
    """Report a failure once: full traceback when verbose, one line otherwise."""
    if config.verbose:
        logger.exception("%s: %s", context, error)
    else:
        print(f"Error: {error}", file=sys.stderr)
    return 1


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parsed = parse_args(args)
    try:
        config = args_to_config(parsed)
    except BuilderError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    return run_build(config)


if __name__ == "__main__":
    sys.exit(main())
