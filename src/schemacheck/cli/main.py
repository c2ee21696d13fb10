"""
CLI to validate a JSON document against a Python-declared schema.
"""

import argparse
import importlib
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

import structlog

from schemacheck import (
    SchemaCheckError,
    error_per_message,
    error_per_property,
    structlog_logger,
    validate,
)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_parser():
    parser = argparse.ArgumentParser(
        prog="schemacheck",
        description="Validate a JSON document against a schema declared in Python",
    )

    parser.add_argument(
        "input_path",
        type=Path,
        help="Path to the JSON document to validate",
    )
    parser.add_argument(
        "schema",
        help="Schema to use, as an import reference (e.g., myapp.schemas:user_schema)",
    )
    parser.add_argument(
        "-r",
        "--rules",
        help="Object rules to apply, as an import reference",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["raw", "message", "property"],
        default="raw",
        help="Error output format (default: raw)",
    )
    parser.add_argument(
        "--ignore-additional",
        action="store_true",
        help="Do not report properties missing from the schema",
    )
    parser.add_argument(
        "--additional-message",
        help="Message reported for properties missing from the schema",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print JSON output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every evaluation step to stderr",
    )

    return parser


def load_reference(reference: str):
    """Resolve 'package.module:attribute' to the referenced object."""
    module_name, _, attribute = reference.partition(":")
    if not module_name or not attribute:
        raise ValueError(
            f"Invalid reference: {reference}. Expected 'module:attribute'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module '{module_name}': {e}") from e

    target = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(
                f"Module '{module_name}' has no attribute '{attribute}'"
            ) from e

    return target


def configure_logging(trace: bool) -> None:
    """Send structlog output to stderr so stdout only carries the result."""
    level = logging.DEBUG if trace else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_options(args) -> dict:
    options = {"additional_props": {"ignore": args.ignore_additional}}
    if args.additional_message:
        options["additional_props"]["message"] = args.additional_message

    if args.trace:
        options["logger"] = structlog_logger("schemacheck.trace")

    return options


def format_errors(errors: dict, output_format: str):
    if output_format == "message":
        formatted = error_per_message(errors)
    elif output_format == "property":
        formatted = error_per_property(errors)
    else:
        return errors

    return {
        key: [asdict(entry) for entry in entries]
        for key, entries in formatted.items()
    }


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.trace)

    if not args.input_path.exists():
        print(f"Error: File not found: {args.input_path}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    try:
        document = json.loads(args.input_path.read_text())
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input_path}: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    try:
        schema = load_reference(args.schema)
        rules = load_reference(args.rules) if args.rules else None
        result = validate(schema, rules, options=build_options(args))(document)
    except (ValueError, SchemaCheckError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    indent = 2 if args.pretty else None
    output = json.dumps(
        {
            "is_valid": result.is_valid,
            "errors": format_errors(result.errors, args.format),
        },
        indent=indent,
        default=str,
    )

    if args.output:
        args.output.write_text(output)
    else:
        print(output)

    sys.exit(EXIT_VALID if result.is_valid else EXIT_INVALID)


if __name__ == "__main__":
    main()
