"""Core numeric validation and filtering.

This module MUST NOT perform I/O so it can be used directly as a library as
well as behind the check-document CLI.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import InvalidTypeError

logger = logging.getLogger(__name__)


def is_numeric(value: Any) -> bool:
    """Return True for native numbers (int, float); bool and numeric strings are excluded."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    """Return True for ordered sequences (list, tuple)."""
    return isinstance(value, (list, tuple))


def _describe(value: Any) -> str:
    # str() of an int past the interpreter's digit limit raises ValueError.
    try:
        return str(value)
    except ValueError:
        return object.__repr__(value)


class NumbersValidator:
    """Stateless numeric predicates and filters.

    Every method checks its argument first and raises ``InvalidTypeError``
    before any computation takes place.
    """

    def is_number_even(self, n: Any) -> bool:
        if not is_numeric(n):
            shown = _describe(n)
            logger.debug("is_number_even rejected %s", shown)
            raise InvalidTypeError(
                f'[{shown}] is not of type "Number" it is of type "{type(n).__name__}"'
            )
        return n % 2 == 0

    def get_even_numbers_from_array(self, arr: Any) -> list[int | float]:
        """Return the even elements of ``arr`` in their original order.

        Not-an-array and not-all-numbers are reported with the same message.
        """
        if not is_array(arr) or not all(is_numeric(item) for item in arr):
            shown = _describe(arr)
            logger.debug("get_even_numbers_from_array rejected %s", shown)
            raise InvalidTypeError(f'[{shown}] is not an array of "Numbers"')
        return [item for item in arr if self.is_number_even(item)]

    def is_all_numbers(self, arr: Any) -> bool:
        if not is_array(arr):
            shown = _describe(arr)
            logger.debug("is_all_numbers rejected %s", shown)
            raise InvalidTypeError(f"[{shown}] is not an array")
        return all(is_numeric(item) for item in arr)

    def is_integer(self, n: Any) -> bool:
        if not is_numeric(n):
            shown = _describe(n)
            logger.debug("is_integer rejected %s", shown)
            raise InvalidTypeError(f"[{shown}] is not a number")
        if isinstance(n, int):
            return True
        return n.is_integer()
