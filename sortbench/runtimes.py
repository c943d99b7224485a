"""Input generation, timing and reporting for the sorting benchmark."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from .sorting import Algorithm

RAND_MAX = 2147483647

_LABEL_CELL = "+-------------------+"
_RUN_CELL = "-------------+"


class InputKind(Enum):
    """How the benchmark arrays are filled."""

    RANDOM = "RANDOM"
    SEQUENCED = "SEQUENCED"


@dataclass
class RunResult:
    """The timings, in seconds of CPU time, of one algorithm over all runs."""

    algorithm: Algorithm
    times: list[float] = field(default_factory=list)

    def average(self) -> float:
        """Mean time over the runs."""
        if not self.times:
            raise ValueError("no runs recorded")
        return sum(self.times) / len(self.times)


def generate_randoms(n: int, max_range: int, seed: int) -> list[int]:
    """Return ``n`` pseudo-random integers in ``[1, max_range]`` from ``seed``."""
    if max_range > RAND_MAX:
        raise ValueError(
            f"Max range input is larger than the max for Random Integers ({RAND_MAX})"
        )
    if max_range < 1:
        raise ValueError("max range must be at least 1")
    rng = random.Random(seed)
    return [rng.randint(0, RAND_MAX) % max_range + 1 for _ in range(n)]


def generate_sequence(n: int, start: int) -> list[int]:
    """Return ``n`` consecutive integers starting from ``start``."""
    return list(range(start, start + n))


def format_array(values: Iterable[int]) -> str:
    """Render an array as it appears in an array log file."""
    return "".join(f"{value}, " for value in values) + "\n\n"


def time_algorithm(
    algorithm: Algorithm,
    make_array: Callable[[], list[int]],
    runs: int,
    array_log: TextIO | None = None,
) -> RunResult:
    """Sort a fresh array ``runs`` times and record the CPU time of each sort.

    When ``array_log`` is given, each array is written to it before and after
    sorting.
    """
    if runs <= 0:
        raise ValueError("number of runs must be positive")
    result = RunResult(algorithm)
    for run in range(1, runs + 1):
        values = make_array()
        if array_log is not None:
            array_log.write(f"Run {run} Array:\n")
            array_log.write(format_array(values))
        start = time.process_time()
        algorithm.sort(values)
        end = time.process_time()
        if array_log is not None:
            array_log.write("Sorted Array:\n")
            array_log.write(format_array(values))
        result.times.append(end - start)
    return result


def _border(runs: int) -> str:
    return _LABEL_CELL + _RUN_CELL * runs + "\n"


def _table_header(kind: InputKind, n: int, runs: int) -> str:
    columns = "".join(f"    Run {run}    |" for run in range(1, runs + 1))
    return (
        f"\tResult of the Experiment for {kind.value} input: N={n}\n"
        + _border(runs)
        + f"| Sorting Algorithm |{columns} Avg. Time for N = {n}\n"
        + _border(runs)
    )


def _table_row(result: RunResult, runs: int) -> str:
    cells = "".join(f"{seconds:10.6f}s | " for seconds in result.times)
    return (
        f"| {result.algorithm.label:<17} | {cells}{result.average():.6f}s\n"
        + _border(runs)
    )


def _csv_header(kind: InputKind, n: int, runs: int) -> str:
    columns = "".join(f"Run {run}," for run in range(1, runs + 1))
    return (
        f"Result of the Experiment for {kind.value} input: N={n}\n"
        f"Sorting Algorithm,{columns}Avg. Time for N = {n}\n"
    )


def _csv_row(result: RunResult) -> str:
    cells = "".join(f"{seconds:.6f}," for seconds in result.times)
    return f"{result.algorithm.label},{cells}{result.average():.6f}\n"


def render_table(
    kind: InputKind, n: int, results: Sequence[RunResult], runs: int
) -> str:
    """Render the terminal table for a finished experiment."""
    return _table_header(kind, n, runs) + "".join(
        _table_row(result, runs) for result in results
    )


def render_csv(kind: InputKind, n: int, results: Sequence[RunResult], runs: int) -> str:
    """Render the comma-separated report for a finished experiment."""
    return _csv_header(kind, n, runs) + "".join(_csv_row(result) for result in results)


def run_experiment(
    kind: InputKind,
    n: int,
    make_array: Callable[[], list[int]],
    algorithms: Iterable[Algorithm],
    runs: int,
    out: TextIO,
    csv_out: TextIO | None = None,
    array_prefix: str | None = None,
) -> list[RunResult]:
    """Time each algorithm, writing the table to ``out`` as results arrive.

    The CSV report goes to ``csv_out`` if given; with ``array_prefix`` every
    array is logged to ``<prefix>_<algorithm>.txt``.
    """
    if runs <= 0:
        raise ValueError("number of runs must be positive")
    out.write(_table_header(kind, n, runs))
    if csv_out is not None:
        csv_out.write(_csv_header(kind, n, runs))

    results = []
    for algorithm in algorithms:
        if array_prefix is not None:
            path = f"{array_prefix}_{algorithm.slug}.txt"
            with open(path, "w", encoding="utf-8") as array_log:
                array_log.write(f"{algorithm.label}, N={n}\n")
                result = time_algorithm(algorithm, make_array, runs, array_log)
        else:
            result = time_algorithm(algorithm, make_array, runs)
        out.write(_table_row(result, runs))
        if csv_out is not None:
            csv_out.write(_csv_row(result))
        results.append(result)
    return results