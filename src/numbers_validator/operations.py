"""Registry of validator operations addressable by ID.

Check documents name operations by their public IDs (``isNumberEven`` etc.).
The registry maps those IDs to the bound ``NumbersValidator`` methods so the
batch runner stays operation-agnostic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeAlias
from collections.abc import Callable

from .core import NumbersValidator
from .errors import InvalidTypeError, UnknownOperationError
from .models import CheckResult

logger = logging.getLogger(__name__)

# Takes the validator instance and the raw input value.
OperationFunction: TypeAlias = Callable[[NumbersValidator, Any], Any]


@dataclass(slots=True, frozen=True)
class OperationHandler:
    """Handler binding an operation ID to the validator method that implements it."""

    operation_id: str
    call: OperationFunction


OPERATION_HANDLERS: dict[str, OperationHandler] = {
    "isNumberEven": OperationHandler(
        operation_id="isNumberEven",
        call=NumbersValidator.is_number_even,
    ),
    "isInteger": OperationHandler(
        operation_id="isInteger",
        call=NumbersValidator.is_integer,
    ),
    "isAllNumbers": OperationHandler(
        operation_id="isAllNumbers",
        call=NumbersValidator.is_all_numbers,
    ),
    "getEvenNumbersFromArray": OperationHandler(
        operation_id="getEvenNumbersFromArray",
        call=NumbersValidator.get_even_numbers_from_array,
    ),
}


def get_operation(operation_id: str) -> OperationHandler:
    """Return the handler for the given operation ID, or raise UnknownOperationError."""
    handler = OPERATION_HANDLERS.get(operation_id)
    if handler is None:
        known = ", ".join(get_known_operation_ids())
        raise UnknownOperationError(
            f"Unknown operation '{operation_id}'. Known operations: {known}"
        )
    return handler


def get_known_operation_ids() -> list[str]:
    """Return a sorted list of all registered operation IDs."""
    return sorted(OPERATION_HANDLERS.keys())


def run_check(
    operation_id: str,
    value: Any,
    validator: NumbersValidator | None = None,
) -> CheckResult:
    """Run one operation and capture its outcome.

    ``InvalidTypeError`` is recorded on the result; any other exception
    (including ``UnknownOperationError``) propagates.
    """
    handler = get_operation(operation_id)
    validator = validator or NumbersValidator()
    try:
        output = handler.call(validator, value)
    except InvalidTypeError as exc:
        logger.info("%s rejected input: %s", operation_id, exc)
        return CheckResult.failure(operation_id, value, str(exc))
    return CheckResult.success(operation_id, value, output)
