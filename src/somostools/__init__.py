"""
somostools: generalized Somos sequences in double precision, with exact
decimal output of every dividend, divisor and term.
"""

from .recurrence.somos import new_buffer, somos_step, somos4_step
from .numeric.exact import format_exact, is_non_finite, parse_exact
from .scan.driver import (
    DEFAULT_ITERATIONS,
    DEFAULT_S_MIN,
    DEFAULT_S_MAX,
    ScanOptions,
    SomosRun,
    SomosStep,
    format_run,
    iter_somos_steps,
    run_somos,
    scan,
    write_scan,
)
from .viz.growth import plot_growth

__all__ = [
    # Recurrence
    "new_buffer",
    "somos_step",
    "somos4_step",
    # Numeric
    "format_exact",
    "is_non_finite",
    "parse_exact",
    # Scan
    "DEFAULT_ITERATIONS",
    "DEFAULT_S_MIN",
    "DEFAULT_S_MAX",
    "ScanOptions",
    "SomosRun",
    "SomosStep",
    "format_run",
    "iter_somos_steps",
    "run_somos",
    "scan",
    "write_scan",
    # Viz
    "plot_growth",
]
