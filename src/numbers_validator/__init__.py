"""numbers-validator core package.

Strict numeric predicates and filters (``NumbersValidator``), plus a batch
runner for check documents that is callable from the CLI.
"""

from .core import NumbersValidator
from .errors import InvalidTypeError

__all__ = [
    "InvalidTypeError",
    "NumbersValidator",
]
