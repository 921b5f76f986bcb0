"""Command-line interface for generating proto3 schemas from Python classes."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from proto_schema_generator.errors import GenerationError
from proto_schema_generator.run import run

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Setup for the parser.

    Returns:
        argparse.ArgumentParser: The parser after setup.
    """
    parser = argparse.ArgumentParser(description="Generate a proto3 schema for a Python class.")

    parser.add_argument(
        "target",
        type=str,
        help="import path of the class, e.g. 'package.module:ClassName' or 'package.module.ClassName'.",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="",
        help="file or directory to write the schema to; the schema is written to the console if omitted.",
    )

    parser.add_argument(
        "-I",
        "--import-path",
        dest="import_paths",
        type=str,
        nargs="+",
        default=[],
        help="additional directories to search when importing the class.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbose",
        default=False,
        action="store_true",
        help="log every emitted type and classified field.",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the schema generator.

    Args:
        argv (Sequence[str] | None, optional): Run arguments. Defaults to None.

    Returns:
        int: Error code.
    """
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        run(args)

    except GenerationError as e:
        logger.error(str(e))
        return 1

    return 0
