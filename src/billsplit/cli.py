from __future__ import annotations

import argparse
import json
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from billsplit.config import get_settings
from billsplit.logging import configure_logging, get_logger
from billsplit.schemas import BillRequest, BillResponse
from billsplit.services.split import split_bill
from billsplit.services.summary import format_summary

EXIT_INVALID_INPUT = 2


def _percentage(value: str) -> Decimal:
    try:
        result = Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from exc
    if not result.is_finite() or result < 0:
        raise argparse.ArgumentTypeError("tip percentage must be a non-negative number")
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="billsplit",
        description="Split a restaurant bill into per-person amounts.",
    )
    parser.add_argument("path", nargs="?", default="-", help="bill JSON file, '-' for stdin")
    parser.add_argument("--tip", type=_percentage, default=None, help="tip percentage, overrides the bill")
    parser.add_argument("--format", choices=("json", "text"), default="json", dest="output_format")
    return parser


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    log = get_logger(__name__)

    args = build_parser().parse_args(argv)
    log.debug("cli.start", path=args.path, output_format=args.output_format)

    try:
        request = BillRequest.model_validate(json.loads(_read_source(args.path)))
        if args.tip is not None:
            request = request.model_copy(update={"tip_percentage": args.tip})
        output = split_bill(
            request.to_bill_input(settings.default_tip_percentage),
            date_template=settings.date_template,
        )
    except (OSError, json.JSONDecodeError, ValidationError, ValueError, ArithmeticError) as exc:
        log.error("bill.invalid", path=args.path, error=str(exc))
        print(f"billsplit: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.output_format == "text":
        print(format_summary(output))
    else:
        print(json.dumps(BillResponse.from_output(output).to_json_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
