"""Command-line entrypoint: load car records, then browse them from a menu."""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from decimal import Decimal
from enum import IntEnum
from pathlib import Path
from typing import Callable, Sequence

from loguru import logger

from car_inventory.application.use_cases import LoadInventoryContext, LoadInventoryUseCase
from car_inventory.config import SETTINGS, Settings
from car_inventory.domain.errors import InventoryLoadError
from car_inventory.domain.models import InventoryRecord
from car_inventory.domain.services import RecordValidator
from car_inventory.infrastructure.parsing.utils import parse_decimal
from car_inventory.infrastructure.repositories.text_repositories import TextFileRejectionLog, TextRecordSource
from car_inventory.logging_config import configure_logging
from car_inventory.presentation.reports import render_inventory_table, render_rejection_log

MENU = "\n".join(
    [
        "",
        "Menu Options: ",
        "1. Show inventory",
        "2. Show invalid records",
        "3. Exit",
    ]
)
PROMPT = "Enter your choice (1-3): "


class MenuOption(IntEnum):
    PRINT_INVENTORY = 1
    PRINT_INVALID_RECORDS = 2
    QUIT = 3


def _price(value: str) -> Decimal:
    price = parse_decimal(value)
    if price is None:
        raise argparse.ArgumentTypeError(f"not a decimal price: {value!r}")
    return price


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate car inventory records and browse the results")
    parser.add_argument("--input", type=Path, help=f"Records file (default: {SETTINGS.input_path})")
    parser.add_argument("--reject-log", type=Path, help=f"Rejection log file (default: {SETTINGS.reject_log_path})")
    parser.add_argument("--max-records", type=_positive_int, help=f"Accepted record cap (default: {SETTINGS.max_records})")
    parser.add_argument("--price-floor", type=_price, help=f"Price must exceed this (default: {SETTINGS.price_floor})")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Diagnostic log level (default: {SETTINGS.log_level})",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace, base: Settings = SETTINGS) -> Settings:
    overrides = {
        "input_path": args.input,
        "reject_log_path": args.reject_log,
        "max_records": args.max_records,
        "price_floor": args.price_floor,
        "log_level": args.log_level,
    }
    return replace(base, **{key: value for key, value in overrides.items() if value is not None})


def load_inventory(
    settings: Settings,
    rejection_log: TextFileRejectionLog,
    write: Callable[[str], None] = print,
) -> Sequence[InventoryRecord]:
    context = LoadInventoryContext(
        source=TextRecordSource(settings.input_path),
        rejection_log=rejection_log,
        validator=RecordValidator(settings.rules()),
        max_records=settings.max_records,
    )
    try:
        result = LoadInventoryUseCase(context).execute()
    except InventoryLoadError as exc:
        logger.error("Load aborted: {}", exc)
        write(str(exc))
        return ()

    if result.capacity_reached:
        write("Warning: Storage full some records skipped")
    write(f"Processed {result.summary.accepted} valid records")
    return result.accepted


def run_menu(
    records: Sequence[InventoryRecord],
    rejection_log: TextFileRejectionLog,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] = print,
) -> None:
    read = read or input
    while True:
        write(MENU)
        try:
            raw = read(PROMPT)
        except EOFError:
            write("Goodbye!")
            return

        try:
            choice = int(raw.strip())
        except ValueError:
            write("Invalid input. Please enter 1, 2, or 3")
            continue

        if choice == MenuOption.PRINT_INVENTORY:
            write(render_inventory_table(records))
        elif choice == MenuOption.PRINT_INVALID_RECORDS:
            write(render_rejection_log(rejection_log.read_lines()))
        elif choice == MenuOption.QUIT:
            write("Goodbye!")
            return
        else:
            write("Invalid choice, Try again.")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = build_settings(args)
    configure_logging(settings.log_level)

    rejection_log = TextFileRejectionLog(settings.reject_log_path)
    records = load_inventory(settings, rejection_log)
    run_menu(records, rejection_log)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
