"""Command-line interface implementation for the IaC validation tooling."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..config import Settings, SettingsLoader
from ..errors import IaCValidationError
from ..models import Severity
from ..service import ReportValidationService, SarifConversionService, ValidationOutcome

DEFAULT_OUTPUT_FILE = Path("output.json")

SUCCESS_MESSAGE = "Validation Succeeded!"
FAILURE_MESSAGE = "Validation Failed! Severity exceeding violation threshold."


def render_table(outcome: ValidationOutcome) -> str:
    """Render per-severity counts and thresholds as a text table."""

    headers = ("Severity", "Violations", "Threshold", "Breached")
    rows = [headers]
    for severity in Severity:
        threshold = outcome.thresholds.get(severity)
        rows.append(
            (
                severity.value,
                str(outcome.counts.get(severity, 0)),
                "-" if threshold is None else str(threshold),
                "yes" if outcome.breach_flags.get(severity) else "no",
            )
        )

    widths = [max(len(row[idx]) for row in rows) for idx in range(len(headers))]

    def format_row(values: tuple[str, str, str, str]) -> str:
        return "  ".join(value.ljust(width) for value, width in zip(values, widths, strict=True))

    lines = [format_row(headers)]
    lines.append("  ".join("=" * width for width in widths))
    for row in rows[1:]:
        lines.append(format_row(row))
    lines.append("")
    lines.append(f"Operator: {outcome.operator.value}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="iac-validation", description="SCC IaC validation report tooling"
    )
    subparsers = parser.add_subparsers(dest="command")

    validate_parser = subparsers.add_parser(
        "validate", help="Check an IaC validation report against a failure expression."
    )
    _add_common_arguments(validate_parser)
    validate_parser.add_argument(
        "--failure-expression",
        "--failure_expression",
        dest="failure_expression",
        default=None,
        help=(
            "Comma separated severity thresholds and operator, for example "
            "'critical:1,high:2,operator:or'. Defaults to the configured expression."
        ),
    )
    validate_parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format for the validation summary.",
    )

    convert_parser = subparsers.add_parser(
        "convert", help="Convert an IaC validation report into SARIF."
    )
    _add_common_arguments(convert_parser)
    convert_parser.add_argument(
        "--output-file",
        "--outputFilePath",
        dest="output_file",
        type=Path,
        default=DEFAULT_OUTPUT_FILE,
        help="Path of the SARIF file to write.",
    )

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input-file",
        "--inputFilePath",
        dest="input_file",
        type=Path,
        required=True,
        help="Path to the IaC validation report JSON file.",
    )
    parser.add_argument(
        "--config",
        dest="config",
        action="append",
        default=None,
        type=Path,
        help="Settings manifest (YAML) overriding the packaged defaults.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_settings(args: argparse.Namespace) -> Settings:
    return SettingsLoader().load(args.config)


def _handle_validate(args: argparse.Namespace) -> int:
    try:
        settings = _load_settings(args)
        expression = (
            args.failure_expression
            if args.failure_expression is not None
            else settings.failure_expression
        )
        outcome = ReportValidationService().validate(args.input_file.resolve(), expression)
    except IaCValidationError as exc:
        print(f"Error: {exc}")
        return 1

    if args.format == "json":
        print(json.dumps(outcome.to_dict(), indent=2))
    else:
        print(render_table(outcome))
        print(FAILURE_MESSAGE if outcome.breached else SUCCESS_MESSAGE)

    return 1 if outcome.breached else 0


def _handle_convert(args: argparse.Namespace) -> int:
    try:
        settings = _load_settings(args)
        service = SarifConversionService(driver=settings.sarif.driver())
        report = service.convert(args.input_file.resolve(), args.output_file.resolve())
    except IaCValidationError as exc:
        print(f"Error: {exc}")
        return 1

    print(
        f"Wrote {len(report.results)} results for {len(report.rules)} rules "
        f"to {args.output_file}"
    )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(getattr(args, "verbose", False))

    if args.command == "validate":
        return _handle_validate(args)
    if args.command == "convert":
        return _handle_convert(args)

    parser.print_help()
    return 0


def validate_main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the standalone report validator."""

    return main(["validate", *_argv(argv)])


def convert_main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the standalone SARIF converter."""

    return main(["convert", *_argv(argv)])


def _argv(argv: Sequence[str] | None) -> list[str]:
    if argv is None:
        return sys.argv[1:]
    return list(argv)


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


def run_validate() -> None:  # pragma: no cover - console script wrapper
    raise SystemExit(validate_main())


def run_convert() -> None:  # pragma: no cover - console script wrapper
    raise SystemExit(convert_main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
