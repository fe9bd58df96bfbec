"""Print the first battery's information repeatedly."""

from __future__ import annotations

import argparse
import sys
import time

from .battery import Manager
from .errors import BatteryError


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="batteryinfo", description="Show the first battery's information, refreshed periodically."
    )
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between refreshes")
    parser.add_argument("--count", type=int, default=None, help="number of readings; endless by default")
    parser.add_argument("--sysfs-root", default=None, help="read batteries from this sysfs power-supply directory")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.sysfs_root is not None:
            from .linux import SysFsManager

            manager = Manager(SysFsManager(args.sysfs_root))
        else:
            manager = Manager()
        batteries = manager.batteries()
    except BatteryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        battery = next(batteries)
    except StopIteration:
        print("Unable to find any batteries", file=sys.stderr)
        return 1
    except BatteryError as exc:
        print("Unable to access battery information", file=sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    readings = 0
    try:
        while args.count is None or readings < args.count:
            if readings:
                time.sleep(args.interval)
                manager.refresh(battery)
            print(repr(battery), flush=True)
            readings += 1
    except BatteryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())