"""Command-line interface package for the IaC validation tooling."""

from .app import (
    DEFAULT_OUTPUT_FILE,
    FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    build_parser,
    convert_main,
    main,
    render_table,
    run,
    validate_main,
)

__all__ = [
    "DEFAULT_OUTPUT_FILE",
    "FAILURE_MESSAGE",
    "SUCCESS_MESSAGE",
    "build_parser",
    "convert_main",
    "main",
    "render_table",
    "run",
    "validate_main",
]
