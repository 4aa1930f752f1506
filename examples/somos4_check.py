"""
Cross-check the general Somos-s evaluator against the classic Somos-4 form,
and report how long each order stays integer-valued in double precision.

Usage:
    python somos4_check.py [--iterations N] [--s-max S]
"""
from __future__ import annotations

import argparse
import math

from somostools.numeric.exact import format_exact, is_non_finite
from somostools.recurrence.somos import new_buffer, somos4_step, somos_step
from somostools.scan.driver import SomosRun, run_somos


def compare_somos4(iterations: int) -> int:
    """Return the number of indices where both evaluators agree bit-for-bit."""
    a = new_buffer(4, iterations)
    b = new_buffer(4, iterations)
    agreed = 0
    for n in range(4, iterations):
        fa = somos_step(4, n, a)
        fb = somos4_step(n, b)
        if fa != fb or a[n] != b[n]:
            print(f"  mismatch at n={n}: {fa} vs {fb}")
            break
        agreed += 1
        if is_non_finite(a[n]):
            break
    return agreed


def integer_prefix(run: SomosRun) -> int:
    """Number of computed terms before the first non-integral one."""
    for k, st in enumerate(run.steps):
        if is_non_finite(st.value) or st.value != math.floor(st.value):
            return k
    return len(run.steps)


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description=__doc__,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--iterations", type=int, default=200)
    ap.add_argument("--s-max", type=int, default=12)
    args = ap.parse_args()

    agreed = compare_somos4(args.iterations)
    print(f"Somos-4: general and classic forms agree on {agreed} indices")

    print("\nInteger-valued prefix per order:")
    for s in range(4, args.s_max + 1):
        run = run_somos(s, args.iterations)
        k = integer_prefix(run)
        first_bad = run.steps[k].value if k < len(run.steps) else None
        tail = f"first non-integer {format_exact(first_bad)}" if first_bad is not None else "all integral"
        print(f"  s={s:2d}: {k} integral terms, {run.stopped_reason}; {tail}")
