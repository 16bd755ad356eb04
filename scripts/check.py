#!/usr/bin/env python3
"""Local entrypoint to run a check document without installing the console script.

Usage:
  python scripts/check.py --input checks.json [--config settings.json] [--format markdown] [--warn-only]

This calls the same main() as the ``numbers-validator`` command.
"""

from __future__ import annotations

from numbers_validator.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
