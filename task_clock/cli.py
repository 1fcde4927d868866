#!/usr/bin/env python3
"""
Task Clock
Track work on a big ASCII clock, then save the day's tasks as a markdown log.

Usage: task-clock [--project NAME] [--log-dir DIR]

Controls while tracking:
- p: Pause / resume
- q: End the current task
"""

import sys
import argparse

import colorama

from task_clock.clock import ClockRenderer
from task_clock.console import console
from task_clock.logwriter import LogWriter
from task_clock.orchestrator import SessionOrchestrator
from task_clock.timer import SessionTimer

DEFAULT_PROJECT = "League"


def positive_float(value):
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="Terminal task clock with a daily markdown work log")
    parser.add_argument("--project", default=DEFAULT_PROJECT,
                        help=f"Name of the project (default: {DEFAULT_PROJECT})")
    parser.add_argument("--log-dir", type=str,
                        help="Directory for the markdown log (default: $TASK_CLOCK_LOG_DIR or ~/Desktop/rohan/league-rohan)")
    parser.add_argument("--tick", type=positive_float, default=1.0,
                        help="Clock refresh interval in seconds (default: 1.0)")
    parser.add_argument("--no-color", action="store_true", help="Plain status line without colors")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    colorama.just_fix_windows_console()

    timer = SessionTimer(
        ClockRenderer(use_colors=not args.no_color),
        tick_interval=args.tick,
    )
    orchestrator = SessionOrchestrator(
        project=args.project,
        timer=timer,
        writer=LogWriter(log_dir=args.log_dir),
    )

    try:
        orchestrator.run()
    except KeyboardInterrupt:
        console.print("\nStopped by user")
        if orchestrator.entries and orchestrator.save_unfinished() is None:
            console.print(f"[red]{len(orchestrator.entries)} entries were not saved[/red]")
        sys.exit(130)


if __name__ == "__main__":
    main()
