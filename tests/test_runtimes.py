import io
import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.runtimes import (
    InputKind,
    RunResult,
    format_array,
    generate_randoms,
    generate_sequence,
    render_csv,
    render_table,
    run_experiment,
    time_algorithm,
)
from sortbench.sorting import Algorithm


@given(
    n=st.integers(min_value=0, max_value=200),
    max_range=st.integers(min_value=1, max_value=2147483647),
    seed=st.integers(min_value=0, max_value=2**32),
)
def test_randoms_within_range(n, max_range, seed):
    values = generate_randoms(n, max_range, seed)
    assert len(values) == n
    assert all(1 <= v <= max_range for v in values)


def test_randoms_repeat_with_seed():
    first = generate_randoms(50, 1000, 42)
    second = generate_randoms(50, 1000, 42)
    assert len(first) == 50
    assert all(1 <= v <= 1000 for v in first)
    assert first == second


def test_randoms_reject_range_over_limit():
    with pytest.raises(ValueError):
        generate_randoms(10, 2147483648, 1)


def test_randoms_reject_zero_range():
    with pytest.raises(ValueError):
        generate_randoms(10, 0, 1)


@given(n=st.integers(min_value=0, max_value=300), start=st.integers(-1000, 1000))
def test_sequence_is_consecutive(n, start):
    values = generate_sequence(n, start)
    assert len(values) == n
    if values:
        assert values[0] == start
    assert all(b - a == 1 for a, b in zip(values, values[1:]))


def test_format_array():
    assert format_array([1, 2, 3]) == "1, 2, 3, \n\n"
    assert format_array([]) == "\n\n"


def test_average():
    result = RunResult(Algorithm.HEAP, [0.5, 1.5])
    assert result.average() == pytest.approx(1.0)


def test_average_without_runs_raises():
    with pytest.raises(ValueError):
        RunResult(Algorithm.HEAP).average()


def test_time_algorithm_records_each_run_and_logs():
    log = io.StringIO()
    result = time_algorithm(
        Algorithm.QUICK, lambda: generate_sequence(5, 1)[::-1], 3, log
    )
    assert result.algorithm is Algorithm.QUICK
    assert len(result.times) == 3
    assert all(t >= 0 for t in result.times)
    text = log.getvalue()
    assert text.count("Sorted Array:\n") == 3
    assert "Run 3 Array:\n" + format_array([5, 4, 3, 2, 1]) in text
    assert "Sorted Array:\n" + format_array([1, 2, 3, 4, 5]) in text


def test_time_algorithm_rejects_nonpositive_runs():
    with pytest.raises(ValueError):
        time_algorithm(Algorithm.MERGE, lambda: [], 0)


def test_render_table_layout():
    results = [RunResult(Algorithm.SELECTION, [0.5, 1.5])]
    table = render_table(InputKind.RANDOM, 10, results, 2)
    lines = table.splitlines()
    border = "+-------------------+" + "-------------+" * 2
    assert lines[0] == "\tResult of the Experiment for RANDOM input: N=10"
    assert lines[1] == border
    assert lines[2] == "| Sorting Algorithm |    Run 1    |    Run 2    | Avg. Time for N = 10"
    assert lines[3] == border
    assert lines[4] == "| Selection Sort    |   0.500000s |   1.500000s | 1.000000s"
    assert lines[5] == border
    assert len(lines) == 6


def test_render_csv_layout():
    results = [
        RunResult(Algorithm.BUBBLE, [0.5, 1.5]),
        RunResult(Algorithm.MERGE, [1.0, 1.0]),
    ]
    lines = render_csv(InputKind.SEQUENCED, 10, results, 2).splitlines()
    assert lines[0] == "Result of the Experiment for SEQUENCED input: N=10"
    assert lines[1] == "Sorting Algorithm,Run 1,Run 2,Avg. Time for N = 10"
    assert lines[2] == "Bubble Sort,0.500000,1.500000,1.000000"
    assert lines[3].startswith("Merge Sort,")
    assert len(lines) == 4


def test_run_experiment_writes_reports_and_logs(tmp_path):
    seeds = itertools.count(7)
    out = io.StringIO()
    csv_out = io.StringIO()
    prefix = str(tmp_path / "arrays")
    algorithms = [Algorithm.SELECTION, Algorithm.HEAP]
    results = run_experiment(
        InputKind.RANDOM,
        4,
        lambda: generate_randoms(4, 100, next(seeds)),
        algorithms,
        2,
        out,
        csv_out,
        prefix,
    )
    assert [r.algorithm for r in results] == algorithms
    assert out.getvalue() == render_table(InputKind.RANDOM, 4, results, 2)
    assert csv_out.getvalue() == render_csv(InputKind.RANDOM, 4, results, 2)

    selection_log = (tmp_path / "arrays_selection.txt").read_text(encoding="utf-8")
    assert selection_log.startswith("Selection Sort, N=4\nRun 1 Array:\n")
    assert selection_log.count("Sorted Array:\n") == 2
    heap_log = (tmp_path / "arrays_heap.txt").read_text(encoding="utf-8")
    assert heap_log.startswith("Heap Sort, N=4\n")
    assert not (tmp_path / "arrays_quick.txt").exists()


def test_run_experiment_without_optional_outputs():
    out = io.StringIO()
    results = run_experiment(
        InputKind.SEQUENCED,
        3,
        lambda: generate_sequence(3, 1),
        list(Algorithm),
        1,
        out,
    )
    assert len(results) == 6
    assert out.getvalue().startswith(
        "\tResult of the Experiment for SEQUENCED input: N=3\n"
    )
    assert "| Quick Sort        | " in out.getvalue()


def test_run_experiment_rejects_nonpositive_runs():
    with pytest.raises(ValueError):
        run_experiment(
            InputKind.RANDOM, 1, lambda: [1], [Algorithm.QUICK], 0, io.StringIO()
        )