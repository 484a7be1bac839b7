#!/usr/bin/env python3
"""
main.py
=======
Entry point for the interactive traffic-queue simulator.

Usage::

    python main.py --capacity 5 --seed 42
    python main.py --clock wall --report session.txt
"""

import argparse
import logging
import sys
import time

import config
from logging_setup import setup_logging
from console.clock import TickClock, WallClock
from console.generator import VehicleGenerator
from console.menu import MenuDriver, prompt_capacity
from console.reporter import Reporter
from queue_engine.engine import QueueEngine


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Traffic queue simulator")
    parser.add_argument("--capacity", type=int, default=None,
                        help="queue capacity (prompted for when omitted)")
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED,
                        help="seed for the demo vehicle generator")
    parser.add_argument("--clock", choices=("tick", "wall"), default=config.DEFAULT_CLOCK,
                        help="arrival stamps as integer ticks or wall-clock seconds")
    parser.add_argument("--report", default=config.REPORT_PATH,
                        help="report file written on request and on exit")
    parser.add_argument("--log-level", default="INFO",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def _format_wall(stamp) -> str:
    return time.strftime("%H:%M:%S", time.localtime(stamp))


def main(argv=None) -> int:
    args = _parse_args(argv)
    setup_logging(getattr(logging, args.log_level), console=False)
    log = logging.getLogger("main")

    if args.clock == "wall":
        clock = WallClock()
        reporter = Reporter(time_unit="seconds")
        format_stamp = _format_wall
    else:
        clock = TickClock()
        reporter = Reporter(time_unit="ticks")
        format_stamp = str

    try:
        capacity = args.capacity
        if capacity is None:
            capacity = prompt_capacity(input, print)
        elif capacity <= 0:
            print("Capacity must be positive.", file=sys.stderr)
            return 2

        log.info("Starting simulator capacity=%d clock=%s seed=%s",
                 capacity, args.clock, args.seed)

        with QueueEngine(capacity, clock=clock) as engine:
            driver = MenuDriver(
                engine,
                VehicleGenerator(seed=args.seed),
                clock,
                reporter=reporter,
                report_path=args.report,
                format_stamp=format_stamp,
            )
            driver.run()
    except (KeyboardInterrupt, EOFError):
        print()
        log.info("Shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
