from __future__ import annotations

import sys
from dataclasses import dataclass
from multiprocessing import Pool
from typing import IO, Iterator, List, Optional, Sequence, Tuple

from somostools.numeric.exact import format_exact, is_non_finite
from somostools.recurrence.somos import SEED_VALUE, new_buffer, somos_step


DEFAULT_ITERATIONS = 65536
DEFAULT_S_MIN = 1
DEFAULT_S_MAX = 30


@dataclass
class ScanOptions:
    iterations: int = DEFAULT_ITERATIONS
    s_min: int = DEFAULT_S_MIN
    s_max: int = DEFAULT_S_MAX
    processes: int = 1
    verbose: bool = False

    def validate(self) -> None:
        if self.s_min < 1:
            raise ValueError("s_min must be >= 1.")
        if self.s_max < self.s_min:
            raise ValueError("s_max must be >= s_min.")
        if self.iterations <= self.s_max:
            raise ValueError("iterations must exceed s_max.")
        if self.processes < 1:
            raise ValueError("processes must be positive.")


@dataclass(frozen=True)
class SomosStep:
    n: int
    dividend: float
    divisor: float
    value: float

    @property
    def fraction(self) -> Tuple[float, float]:
        return (self.dividend, self.divisor)


@dataclass(frozen=True)
class SomosRun:
    """
    Outcome of one Somos-s run.

    terms:          a[0..N] where a[0..s-1] are the seeds and N is the last computed index.
    steps:          one SomosStep per computed index s..N, including the one that stopped the run.
    stopped_reason: "breakdown" | "cycle" | "exhausted"
    """

    s: int
    terms: Tuple[float, ...]
    steps: Tuple[SomosStep, ...]
    stopped_reason: str

    @property
    def last_index(self) -> int:
        return len(self.terms) - 1


def iter_somos_steps(s: int, iterations: int = DEFAULT_ITERATIONS) -> Iterator[SomosStep]:
    """
    Yield the steps of Somos-s for n = s .. iterations-1.

    The step that yields inf/NaN, or whose fraction repeats the previous
    fraction exactly, is yielded and then iteration stops.
    """
    buf = new_buffer(s, iterations)
    last: Optional[Tuple[float, float]] = None
    for n in range(s, iterations):
        dividend, divisor = somos_step(s, n, buf)
        value = float(buf[n])
        yield SomosStep(n=n, dividend=dividend, divisor=divisor, value=value)

        if is_non_finite(value):
            return
        fraction = (dividend, divisor)
        if last is not None and fraction == last:
            return
        last = fraction


def _stopped_reason(steps: Sequence[SomosStep]) -> str:
    if steps and is_non_finite(steps[-1].value):
        return "breakdown"
    if len(steps) >= 2 and steps[-1].fraction == steps[-2].fraction:
        return "cycle"
    return "exhausted"


def run_somos(s: int, iterations: int = DEFAULT_ITERATIONS) -> SomosRun:
    """
    Run Somos-s to completion and classify why it stopped.
    """
    steps = tuple(iter_somos_steps(s, iterations))
    terms = (SEED_VALUE,) * s + tuple(st.value for st in steps)
    return SomosRun(s=s, terms=terms, steps=steps, stopped_reason=_stopped_reason(steps))


def _worker(job: Tuple[int, int]) -> SomosRun:
    s, iterations = job
    return run_somos(s, iterations)


def scan(opts: Optional[ScanOptions] = None) -> Iterator[SomosRun]:
    """
    Yield one SomosRun per s in [s_min, s_max], in ascending s.

    With processes > 1 the runs are computed in a process pool; imap keeps
    results in submission order so the output order does not change.
    """
    opts = opts or ScanOptions()
    opts.validate()
    jobs = [(s, opts.iterations) for s in range(opts.s_min, opts.s_max + 1)]

    if opts.processes == 1:
        for job in jobs:
            run = _worker(job)
            _report(run, opts)
            yield run
        return

    with Pool(processes=opts.processes) as pool:
        for run in pool.imap(_worker, jobs, chunksize=1):
            _report(run, opts)
            yield run


def _report(run: SomosRun, opts: ScanOptions) -> None:
    if opts.verbose:
        print(
            f"[s={run.s}] {run.stopped_reason} at n={run.last_index} ({len(run.steps)} steps)",
            file=sys.stderr,
        )


def format_step(step: SomosStep) -> str:
    return f"\t{format_exact(step.dividend)} / {format_exact(step.divisor)} = {format_exact(step.value)}"


def format_run(run: SomosRun) -> List[str]:
    """
    Output lines for one run: the "Somos-<s>" header, then one line per step.
    """
    lines = [f"Somos-{run.s}"]
    lines.extend(format_step(st) for st in run.steps)
    return lines


def write_scan(opts: Optional[ScanOptions] = None, out: Optional[IO[str]] = None) -> List[SomosRun]:
    """
    Print every run of the scan to out (stdout by default), run by run.

    Returns the runs.
    """
    out = out if out is not None else sys.stdout
    runs: List[SomosRun] = []
    for run in scan(opts):
        for line in format_run(run):
            print(line, file=out)
        runs.append(run)
    return runs
