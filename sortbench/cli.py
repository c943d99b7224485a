"""Command line for the sorting benchmark."""

from __future__ import annotations

import itertools
import re
import sys
import time
from collections.abc import Callable, Sequence
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path

from .runtimes import RAND_MAX, InputKind, generate_randoms, generate_sequence, run_experiment
from .sorting import Algorithm

INT_MAX = 2147483647
DEFAULT_RUNS = 5

_ULONG_MODULUS = 2**64
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_QUOTELESS = re.compile(r"([^']+)")
_WORD = re.compile(r"\s*(\S+)")


class UsageError(Exception):
    """A bad command line.

    Without a message, the full usage text is what should be shown.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "invalid usage")
        self.message = message


@dataclass
class Options:
    """Settings for one benchmark run, as given on the command line."""

    kind: InputKind
    n: int
    seq_start: int = 1
    max_range: int = RAND_MAX
    runs: int = DEFAULT_RUNS
    csv_path: str | None = None
    array_prefix: str | None = None
    algorithms: tuple[Algorithm, ...] = field(default_factory=lambda: tuple(Algorithm))


def usage(prog: str) -> str:
    """Return the usage text for the program called ``prog``."""
    return "\n".join(
        [
            f"Usage: {prog} (-r | -s=<X>) [-m=<MAX_RANGE>] [-o='file-name'] "
            f"[-p='file-name2'] [-i=<NUM_OF_RUNS>] [-f=<s|i|b|m|h|q>]<N>",
            "Gives the avg. execution time for Selection, Bubble, Insertion, Merge, "
            "Heap, and Quick sort on array specified by user.",
            f"Examples: {prog} -r -m=32768 -p='tests' 100",
            f"          {prog} -s=20 -o='test.csv' -i=3 -f=hq 1000",
            "",
            "<N> = Number of integers to be sorted, must be positive.",
            "<X> = The number the sequence starts from, must be positive.",
            "<MAX_RANGE> = Specified max_range for array values, can be any positive "
            "number from 1 to INT_MAX.",
            "'file-name' = Output file destination, must contain no whitespace and can "
            "include an extension (e.g. test.csv).",
            "<NUM_OF_RUNS> = The number of runs the program will calculate the average "
            "runtime for, default is 5.",
            "",
            "(OPTIONS)",
            "\t-r Assigns random values to array from the range [0, <MAX_RANGE>], by "
            "default MAX_RANGE=INT_MAX.",
            "\t-s Assigns the array with asequence of values starting from <X>.",
            "\t-m Sets the limit for the array values.",
            "\t-o Outputs the result into a desired file type, .csv recommended for "
            "convenient table formatting.",
            "\t-p Output array values before and after sorting, file-name should not "
            "include extensions for this.",
            "\t-i Set the number of runs to calculate average for.",
            "\t-f Filter out the given sorting algorithms, s for selection, i for "
            "insertion and so on (can input multiple e.g. -f=ibh).",
        ]
    ) + "\n"


def _value(arg: str, pattern: re.Pattern[str]) -> str:
    """Return what follows ``-x=`` in ``arg``, or raise a usage error."""
    rest = arg[2:]
    if not rest.startswith("="):
        raise UsageError()
    match = pattern.match(rest, 1)
    if match is None:
        raise UsageError()
    return match.group(1)


def _scan_unsigned(text: str) -> int | None:
    """Read an unsigned long the way a C scanf would, wrapping negatives."""
    match = _INTEGER.match(text)
    if match is None:
        return None
    return int(match.group(1)) % _ULONG_MODULUS


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    rest = list(argv)
    kind: InputKind | None = None
    seq_start = 1
    max_range = RAND_MAX
    runs = DEFAULT_RUNS
    csv_path: str | None = None
    array_prefix: str | None = None
    excluded: set[Algorithm] = set()
    conflict = "Cannot have both random and sequenced values."

    while rest and rest[0].startswith("-"):
        arg = rest.pop(0)
        match arg[1:2]:
            case "r":
                if kind is InputKind.SEQUENCED:
                    raise UsageError(conflict)
                kind = InputKind.RANDOM
            case "s":
                if kind is InputKind.RANDOM:
                    raise UsageError(conflict)
                kind = InputKind.SEQUENCED
                seq_start = int(_value(arg, _INTEGER))
            case "m":
                max_range = int(_value(arg, _INTEGER)) % _ULONG_MODULUS
            case "o":
                csv_path = _value(arg, _QUOTELESS)
            case "p":
                array_prefix = _value(arg, _QUOTELESS)
            case "i":
                runs = int(_value(arg, _INTEGER))
                if runs <= 0:
                    raise UsageError()
            case "f":
                for letter in _value(arg, _WORD):
                    try:
                        excluded.add(Algorithm.from_letter(letter))
                    except ValueError:
                        raise UsageError() from None
            case _:
                raise UsageError()

    if not rest or kind is None:
        raise UsageError()

    n = _scan_unsigned(rest[0]) or 0
    if n > INT_MAX:
        raise UsageError(f"N must be positive and less than INT_MAX({INT_MAX}).")
    if kind is InputKind.SEQUENCED and n + seq_start > INT_MAX:
        raise UsageError(
            f"Input cannot have N({n}) + X({seq_start}) > INT+MAX ({INT_MAX})."
        )

    return Options(
        kind=kind,
        n=n,
        seq_start=seq_start,
        max_range=max_range,
        runs=runs,
        csv_path=csv_path,
        array_prefix=array_prefix,
        algorithms=tuple(a for a in Algorithm if a not in excluded),
    )


def _array_maker(options: Options, seed: int) -> Callable[[], list[int]]:
    if options.kind is InputKind.RANDOM:
        seeds = itertools.count(seed)
        return lambda: generate_randoms(options.n, options.max_range, next(seeds))
    return lambda: generate_sequence(options.n, options.seq_start)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from the command line and return the exit status."""
    if argv is None:
        prog = Path(sys.argv[0]).name or "sortbench"
        args = sys.argv[1:]
    else:
        prog = "sortbench"
        args = list(argv)

    try:
        options = parse_args(args)
    except UsageError as error:
        sys.stderr.write(f"{error.message}\n" if error.message else usage(prog))
        return 1

    make_array = _array_maker(options, int(time.time()))
    try:
        with ExitStack() as stack:
            csv_out = None
            if options.csv_path is not None:
                csv_out = stack.enter_context(
                    open(options.csv_path, "w", encoding="utf-8")
                )
            run_experiment(
                options.kind,
                options.n,
                make_array,
                options.algorithms,
                options.runs,
                sys.stdout,
                csv_out,
                options.array_prefix,
            )
    except (ValueError, OSError) as error:
        sys.stdout.flush()
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())