"""Top-level module for schema generation."""

from __future__ import annotations

import argparse
import importlib
import logging
import os.path
import sys

from proto_schema_generator.errors import ConfigurationError
from proto_schema_generator.writer import generate

logger = logging.getLogger(__name__)

PROTO_SUFFIX = ".proto"


def resolve_type(target: str) -> type:
    """Resolve a class from its import path.

    Both `package.module:ClassName` and `package.module.ClassName` are accepted. Nested
    classes are addressed after the colon, e.g. `package.module:Outer.Inner`.

    Args:
        target (str): The import path of the class.

    Raises:
        ConfigurationError: If the class cannot be imported.

    Returns:
        type: The class.
    """
    module_name, separator, attribute_path = target.partition(":")
    if not separator:
        module_name, _, attribute_path = target.rpartition(".")

    if not module_name or not attribute_path:
        raise ConfigurationError(f"'{target}' is not an import path like 'package.module:ClassName'.")

    try:
        resolved = importlib.import_module(module_name)

    except ImportError as e:
        raise ConfigurationError(
            f"Could not load module '{module_name}'. Make sure it is on the import path."
        ) from e

    for attribute in attribute_path.split("."):
        try:
            resolved = getattr(resolved, attribute)

        except AttributeError as e:
            raise ConfigurationError(f"Could not find '{attribute_path}' in module '{module_name}'.") from e

    if not isinstance(resolved, type):
        raise ConfigurationError(f"'{target}' does not refer to a class.")

    return resolved


def write_output(document: str, output_path: str):
    """Write the schema document to a file.

    If the file cannot be written, the document is printed to the console instead.

    Args:
        document (str): The schema document.
        output_path (str): The path of the output file.
    """
    try:
        output_directory = os.path.dirname(output_path)
        if output_directory:
            os.makedirs(output_directory, exist_ok=True)

        with open(output_path, "w", encoding="utf8") as f:
            f.write(document)

    except OSError as e:
        logger.error(f"Could not write to '{output_path}' ({e}). The schema follows on the console.")
        sys.stdout.write(document)

    else:
        logger.info("Wrote schema to '%s'.", output_path)


def run(args: argparse.Namespace):
    """Run the schema generator.

    Args:
        args (argparse.Namespace): The arguments that were passed when calling the schema generator.
    """
    for import_path in reversed(args.import_paths):
        sys.path.insert(0, os.path.abspath(import_path))

    root_type = resolve_type(args.target)
    document = generate(root_type)

    if args.output:
        output_path = args.output
        if os.path.isdir(output_path):
            output_path = os.path.join(output_path, f"{root_type.__name__}{PROTO_SUFFIX}")

        write_output(document, output_path)

    else:
        sys.stdout.write(document)
