# sortbench

`sortbench` measures how long six classic sorting algorithms take on the same
kind of input: selection, bubble, insertion, heap, merge and quick sort. Each
algorithm is run several times. Every run gets a freshly generated array. The
CPU time of each run and the average are printed as a table. They can also be
written to a CSV file.

## Installation

```
pip install .
```

## Command line

```
sortbench (-r | -s=<X>) [-m=<MAX_RANGE>] [-o='file-name'] [-p='prefix'] [-i=<NUM_OF_RUNS>] [-f=<letters>] <N>
```

- `<N>` is the number of integers to sort. It must not exceed 2147483647.
- `-r` fills each array with random values in the range `[1, MAX_RANGE]`. Every
  run uses a new seed, counted up from the current time.
- `-s=<X>` fills each array with the sequence `X, X+1, ...`. `N + X` must not
  exceed 2147483647.
- `-m=<MAX_RANGE>` sets the largest random value. The default and the upper
  limit are both 2147483647.
- `-o='file-name'` also writes the results as CSV to the named file.
- `-p='prefix'` writes each array before and after sorting to
  `prefix_<algorithm>.txt`. The algorithm part is one of `selection`, `bubble`,
  `insertion`, `heap`, `merge` or `quick`.
- `-i=<NUM_OF_RUNS>` sets the number of runs per algorithm. It must be positive
  and defaults to 5.
- `-f=<letters>` leaves algorithms out: `s` selection, `i` insertion,
  `b` bubble, `m` merge, `h` heap, `q` quick.

Only one of `-r` and `-s` may be given. On a bad command line the usage text,
or a specific error message, goes to standard error and the exit status is 1.

Examples:

```
sortbench -r -m=32768 -p='tests' 100
sortbench -s=20 -o='test.csv' -i=3 -f=hq 1000
```

## Library use

`sortbench.sorting` provides the sorts. Each one works in place on a mutable
sequence and returns `None`, as `list.sort` does:

```python
from sortbench.sorting import Algorithm, merge_sort

values = [5, 3, 1, 4]
merge_sort(values)
print(values)                            # [1, 3, 4, 5]

Algorithm.from_letter("q").sort(values)  # same thing with quick sort
```

`sortbench.runtimes` provides the benchmark pieces:

- `generate_randoms(n, max_range, seed)` returns random input.
- `generate_sequence(n, start)` returns sequenced input.
- `time_algorithm` times one algorithm over several runs and returns a
  `RunResult`.
- `render_table` and `render_csv` format a list of results.
- `run_experiment` times several algorithms and writes the table to a text
  stream as each result arrives. It can also write CSV output and array logs.

```python
import sys
from sortbench.runtimes import InputKind, generate_sequence, run_experiment
from sortbench.sorting import Algorithm

run_experiment(
    InputKind.SEQUENCED,
    1000,
    lambda: generate_sequence(1000, 1),
    [Algorithm.HEAP, Algorithm.MERGE],
    3,
    sys.stdout,
)
```

`sortbench.cli` holds the command line: `parse_args`, `usage` and `main`.