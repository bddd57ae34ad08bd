#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TWAP From File - Command Line Entry Point
==========================================

Usage:
    python -m twap_from_file orders.txt
    python -m twap_from_file orders.txt --precision 10
    python -m twap_from_file orders.txt --trace-csv out/trace.csv

Prints the running TWAP after each event, one value per line. Nothing is
printed for events after which the average is still undefined (the first
event, or while no order has ever been live for a positive time).

Environment Variables:
    TWAP_LOG_LEVEL - Logging level (DEBUG, INFO, WARNING, ERROR)

Exit Codes:
    0 - Success
    1 - Missing file argument, or input file can't be read
    2 - Configuration error
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from twap_from_file.config import (
    ConfigurationError,
    LOG_LEVEL_ENV_VAR,
    LOG_LEVELS,
    load_settings,
)
from twap_from_file.core import OrderEvent, TwapEngine
from twap_from_file.data import EventFileSource, EventSourceError, TraceRecorder
from twap_from_file.utils.formatting import format_price
from twap_from_file.utils.logger import get_logger, setup_logging

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2

logger = get_logger("cli")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='twap_from_file',
        description='Time-weighted average of the best order price from an event file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Event file lines:
  <time> I <order_id> <price>     insert an order
  <time> E <order_id>             erase an order

Examples:
  python -m twap_from_file orders.txt
  python -m twap_from_file orders.txt --log-level DEBUG
        """
    )

    parser.add_argument(
        'file',
        nargs='?',
        help='Order event file'
    )

    parser.add_argument(
        '--config-dir',
        default='config',
        help='Directory holding settings.yaml (default: config)'
    )

    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default=None,
        help=f'Logging level (default: from settings or {LOG_LEVEL_ENV_VAR})'
    )

    parser.add_argument(
        '--precision',
        type=int,
        default=None,
        help='Significant digits of printed averages (default: 6)'
    )

    parser.add_argument(
        '--trace-csv',
        default=None,
        metavar='PATH',
        help='Also write a per-event trace to this CSV file'
    )

    return parser.parse_args(argv)


def run_events(
    events: Iterable[OrderEvent],
    precision: int,
    out: TextIO,
    trace_csv: Optional[str] = None
) -> TwapEngine:
    """
    Stream averages for `events` to `out` in a single pass.

    With `trace_csv`, the per-event trace is recorded in the same loop, so
    one-shot inputs (pipes, FIFOs, stdin) work.
    """
    engine = TwapEngine()
    recorder = TraceRecorder() if trace_csv else None

    for event in events:
        average = engine.process(event)
        if recorder is not None:
            recorder.record(event, engine.book.max_price(), average)
        if average is not None:
            out.write(format_price(average, precision) + "\n")

    logger.info(f"Engine stats: {engine.stats.to_dict()}")

    if recorder is not None:
        recorder.write_csv(trace_csv)

    return engine


def run(file_name: str, precision: int, out: TextIO, trace_csv: Optional[str] = None) -> TwapEngine:
    """Stream averages for `file_name` to `out`. Returns the finished engine."""
    return run_events(EventFileSource(file_name), precision, out, trace_csv=trace_csv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)

    if not args.file:
        print("ERROR: Please specify file name as argument.", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        settings = load_settings(
            args.config_dir,
            log_level=args.log_level,
            precision=args.precision,
        )
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(
        level=settings.log_level,
        log_to_file=settings.log_to_file,
        log_dir=settings.log_dir,
    )

    try:
        run(args.file, settings.precision, sys.stdout, trace_csv=args.trace_csv)
    except EventSourceError as e:
        logger.debug("Input error", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
