"""Load, validate and run check documents.

A check document lists operations to run against raw (deserialized) input
values::

    {"checks": [{"operation": "isNumberEven", "input": 4}]}

Documents are JSON, or YAML when the source ends in ``.yaml``/``.yml``, and
may be read from disk or fetched over HTTP(S).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import requests
import yaml
from jsonschema import Draft202012Validator
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

from .core import NumbersValidator
from .errors import DocumentError
from .models import CheckResult
from .operations import run_check

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "check-document.schema.json"

USER_AGENT = "numbers-validator/0.1.0"

_YAML_SUFFIXES = (".yaml", ".yml")


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str) -> Response:
    return requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=30)


def fetch_document_text(url: str) -> str:
    """Return the raw text of a remote check document."""

    try:
        response = _http_get(url)
    except requests.RequestException as exc:
        raise DocumentError(f"Failed to fetch check document: {exc}") from exc

    if response.status_code != 200:
        raise DocumentError(
            f"Unexpected status code {response.status_code} fetching check document"
        )

    return response.text


def _decode(text: str, source: str) -> Any:
    if source.lower().split("?", 1)[0].endswith(_YAML_SUFFIXES):
        try:
            document = yaml.safe_load(text)
        except (yaml.YAMLError, ValueError) as exc:
            raise DocumentError(f"Invalid YAML in {source}: {exc}") from exc
        # YAML can yield dates, sets and bytes, which reports cannot carry.
        try:
            json.dumps(document)
        except (TypeError, ValueError) as exc:
            raise DocumentError(f"Unsupported value in {source}: {exc}") from exc
        return document
    try:
        return json.loads(text)
    except ValueError as exc:
        raise DocumentError(f"Invalid JSON in {source}: {exc}") from exc


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def load_schema(path: Path = SCHEMA_PATH) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def validate_document(document: Any, schema: dict[str, Any] | None = None) -> None:
    """Raise DocumentError listing every schema violation in ``document``."""
    validator = Draft202012Validator(schema or load_schema())
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise DocumentError("Check document failed validation:\n" + _format_errors(errors))


def load_document(source: str | Path) -> dict[str, Any]:
    """Read, decode and validate a check document from a path or URL."""
    source = str(source)
    if _is_url(source):
        logger.debug("Fetching check document from %s", source)
        text = fetch_document_text(source)
    else:
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentError(f"Failed to read check document: {exc}") from exc

    document = _decode(text, source)
    validate_document(document)
    return document


def run_document(
    document: dict[str, Any],
    validator: NumbersValidator | None = None,
) -> list[CheckResult]:
    """Run every check in ``document`` in order."""
    validator = validator or NumbersValidator()
    results = [
        run_check(check["operation"], check["input"], validator=validator)
        for check in document.get("checks", [])
    ]
    logger.debug("Ran %d checks", len(results))
    return results
