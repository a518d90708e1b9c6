#!/usr/bin/env python
"""Run a command-line stopwatch: wait for a target time per lap and print each lap."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import time

from tqdm import tqdm

from stopwatch.core.duration import PrintMode
from stopwatch.core.timer import Timer, timer_has_elapsed


def wait_for(watch: Timer, seconds: float, poll_interval: float, desc: str, progress: bool = True) -> None:
    """Block until ``watch`` has run for more than ``seconds``."""
    with tqdm(total=seconds, unit="s", desc=desc, disable=not progress,
              bar_format="{l_bar}{bar}| {n:.2f}/{total:.2f}s") as pbar:
        while not timer_has_elapsed(watch, seconds):
            time.sleep(poll_interval)
            pbar.n = min(watch.elapsed_total().count(), seconds)
            pbar.refresh()
        pbar.n = seconds
        pbar.refresh()


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Stopwatch: time laps of a fixed length")
    parser.add_argument("--seconds", type=float, default=1.0, help="Target length of each lap in seconds")
    parser.add_argument("--laps", type=int, default=1, help="Number of laps")
    parser.add_argument(
        "--mode", default=PrintMode.HUMAN.value,
        choices=[m.value for m in PrintMode],
        help="How lap durations are printed",
    )
    parser.add_argument("--format", default="", help="Format string for the chosen mode (e.g. %%.3f)")
    parser.add_argument("--poll-interval", type=float, default=0.01, help="Polling interval in seconds")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    args = parser.parse_args(argv)

    if args.laps < 1:
        parser.error("--laps must be at least 1")

    watch = Timer(PrintMode.parse(args.mode), args.format)
    print(f"Timing {args.laps} lap(s) of {args.seconds}s ({args.mode} mode)")
    laps = []
    for i in range(1, args.laps + 1):
        wait_for(watch, args.seconds, args.poll_interval, desc=f"Lap {i}", progress=not args.no_progress)
        lap = watch.stop()
        laps.append(lap)
        print(f"  Lap {i}: {lap}")

    return laps


if __name__ == "__main__":
    main()
