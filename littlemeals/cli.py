"""Validate a meal record payload from the command line.

Usage:
    littlemeals-validate payload.json
    littlemeals-validate --json - < payload.json

Payload format:
    {"meal": {"foodName": ..., "mealType": ..., "date": ..., "childResponses": [...]},
     "children": [{"id": "1", "name": "Sam"}]}

Exit codes:
    0 record is valid
    1 record is invalid (errors printed)
    2 payload could not be read or modelled
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional, Sequence

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError as ModelError

from littlemeals.config import get_validation_limits
from littlemeals.domain.meal_logging import validate_meal_record
from littlemeals.logging_config import configure_logging

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_BAD_PAYLOAD = 2


def _load_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as handle:
        return json.load(handle)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="littlemeals-validate",
        description="Validate a meal record against the family's children.",
    )
    parser.add_argument("payload", help="JSON payload file ('-' reads stdin)")
    parser.add_argument("--json", dest="as_json", action="store_true", help="print the result as JSON")
    parser.add_argument("--log-level", dest="log_level", default=None, help="override LITTLEMEALS_LOG_LEVEL")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # .env in the working directory; variables already set take precedence
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging(args.log_level)

    try:
        payload = _load_payload(args.payload)
    except (OSError, json.JSONDecodeError) as e:
        print(f"error: cannot read payload: {e}", file=sys.stderr)
        return EXIT_BAD_PAYLOAD

    if not isinstance(payload, dict) or not isinstance(payload.get("children", []), list):
        print("error: payload must be an object with 'meal' and a 'children' list", file=sys.stderr)
        return EXIT_BAD_PAYLOAD

    try:
        result = validate_meal_record(
            payload.get("meal") or {},
            payload.get("children", []),
            limits=get_validation_limits(),
        )
    except ModelError as e:
        print(f"error: malformed payload: {e}", file=sys.stderr)
        return EXIT_BAD_PAYLOAD

    if args.as_json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.is_valid:
        print("OK")
    else:
        for error in result.errors:
            print(error)

    return EXIT_VALID if result.is_valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
