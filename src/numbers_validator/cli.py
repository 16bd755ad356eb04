"""CLI entrypoint for running a check document through NumbersValidator."""

from __future__ import annotations

import argparse
import json
import logging
import os

from .config import OUTPUT_FORMATS, ConfigError, Settings, load_settings
from .documents import load_document, run_document
from .errors import DocumentError
from .logging_utils import configure_logging
from .report import aggregate
from .summary import render_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CHECK_ERRORS = 10

WARN_ONLY_ENV_VAR = "NUMBERS_VALIDATOR_WARN_ONLY"


def _warn_only_from_env() -> bool:
    return os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "y"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input",
        required=True,
        help="Path or http(s) URL of the check document (JSON or YAML)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON settings file",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (overrides the settings file)",
    )
    parser.add_argument(
        "--warn-only",
        action="store_true",
        help="Exit 0 even when some checks rejected their input",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        configure_logging(Settings().log_level_number)
        logger.error("%s", exc)
        return EXIT_FAILURE

    configure_logging(settings.log_level_number)

    try:
        document = load_document(args.input)
    except DocumentError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    report = aggregate(run_document(document))

    output_format = args.output_format or settings.output_format
    if output_format == "markdown":
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))

    if report["hasErrors"]:
        logger.warning("%d check(s) rejected their input", report["totals"]["errors"])
        if args.warn_only or not settings.fail_on_error or _warn_only_from_env():
            return EXIT_OK
        return EXIT_CHECK_ERRORS

    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
