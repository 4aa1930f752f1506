from .driver import (
    DEFAULT_ITERATIONS,
    DEFAULT_S_MAX,
    DEFAULT_S_MIN,
    ScanOptions,
    SomosRun,
    SomosStep,
    format_run,
    format_step,
    iter_somos_steps,
    run_somos,
    scan,
    write_scan,
)

__all__ = [
    "DEFAULT_ITERATIONS",
    "DEFAULT_S_MIN",
    "DEFAULT_S_MAX",
    "ScanOptions",
    "SomosRun",
    "SomosStep",
    "format_run",
    "format_step",
    "iter_somos_steps",
    "run_somos",
    "scan",
    "write_scan",
]
