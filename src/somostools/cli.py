"""
Print generalized Somos sequences computed in double precision.

Usage:
    somos-scan [--iterations N] [--s-min S] [--s-max S] [--processes P]
               [--plot PATH] [--verbose]

With no arguments this scans Somos-1 .. Somos-30 with a 65536-entry buffer.
Each order prints a "Somos-<s>" header followed by one line per term:

    <dividend> / <divisor> = <term>

with every value written as the exact decimal expansion of the double.
A run stops on inf/NaN or when a fraction repeats the previous one.
Unrecognised arguments are ignored.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from somostools.scan.driver import (
    DEFAULT_ITERATIONS,
    DEFAULT_S_MAX,
    DEFAULT_S_MIN,
    ScanOptions,
    write_scan,
)
from somostools.viz.growth import plot_growth


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="somos-scan",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        # prefixes such as "--s" or "--i" are unrecognised, not abbreviations
        allow_abbrev=False,
    )
    ap.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS,
                    help="buffer length per order (default: %(default)s)")
    ap.add_argument("--s-min", type=int, default=DEFAULT_S_MIN)
    ap.add_argument("--s-max", type=int, default=DEFAULT_S_MAX)
    ap.add_argument("--processes", type=int, default=1,
                    help="compute orders in parallel; output order is unchanged")
    ap.add_argument("--plot", type=str, default=None, metavar="PATH",
                    help="save a log10|a_n| growth plot to PATH after the scan")
    ap.add_argument("--verbose", action="store_true",
                    help="per-order summary on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args, _ignored = ap.parse_known_args(argv)

    opts = ScanOptions(
        iterations=args.iterations,
        s_min=args.s_min,
        s_max=args.s_max,
        processes=args.processes,
        verbose=args.verbose,
    )
    try:
        opts.validate()
    except ValueError as e:
        ap.error(str(e))

    runs = write_scan(opts, out=sys.stdout)

    if args.plot:
        plot_growth(runs, save_path=args.plot)
        if args.verbose:
            print(f"Saved growth plot to {args.plot}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
