import pytest

import smooth
import smooth_bench


def run(capsys, *argv):
    smooth.main(list(argv))
    return capsys.readouterr().out.splitlines()


def test_pratt_is_the_default(capsys):
    assert run(capsys, "-n", "5", "--plain") == ["1", "2", "3", "4", "6"]


def test_indexed_output_is_right_aligned(capsys):
    out = run(capsys, "-k", "5", "-n", "10")
    assert out[0] == " 1: 1"
    assert out[4] == " 5: 5"
    assert out[-1] == "10: 12"


def test_explicit_primes(capsys):
    out = run(capsys, "--primes", "2", "5", "-n", "10", "--plain")
    assert out == ["1", "2", "4", "5", "8", "10", "16", "20", "25", "32"]


def test_all_prints_every_term_below_the_limit(capsys):
    out = run(capsys, "--primes", "2", "--all", "--plain")
    assert len(out) == 64
    assert out[-1] == str(2**63)


def test_all_pratt(capsys):
    out = run(capsys, "--pratt", "--all")
    assert len(out) == 1344
    assert out[-1] == "1344: 17991041643939889152"


def test_all_with_bound_below_two(capsys):
    assert run(capsys, "-k", "1", "--all", "--plain") == ["1"]


def test_stats(capsys):
    out = run(capsys, "-k", "3", "-n", "4", "--plain", "--stats")
    assert out[:4] == ["1", "2", "3", "4"]
    assert "--- stats ---" in out
    assert "generators : [2, 3]" in out
    assert "count      : 4" in out
    assert "last       : 4" in out


def test_zero_count_prints_nothing(capsys):
    assert run(capsys, "-n", "0") == []


def test_overflow_exits_with_message():
    with pytest.raises(SystemExit) as excinfo:
        smooth.main(["-n", "1345"])
    assert str(excinfo.value.code).startswith("error:")


def test_unreachable_limit_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        smooth.main(["--primes", "1", "--all"])
    assert excinfo.value.code == 2


def test_negative_count_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        smooth.main(["-n", "-3"])
    assert excinfo.value.code == 2


def test_count_or_all_required():
    with pytest.raises(SystemExit):
        smooth.main(["--pratt"])


def test_bench_rows():
    rows = list(smooth_bench.bench_3_smooth([1, 10], 0.0, 0.0, include_smooth=True))
    assert [(name, n) for name, n, _, _ in rows] == [
        ("pratt", 1), ("with_primes", 1), ("smooth", 1),
        ("pratt", 10), ("with_primes", 10), ("smooth", 10),
    ]
    assert all(median >= 0 for _, _, median, _ in rows)


def test_time_case_takes_at_least_one_sample():
    calls = []
    samples = smooth_bench.time_case(lambda: calls.append(1), 0.0, 0.0)
    assert len(samples) >= 1
    assert len(calls) >= len(samples)


def test_bench_main(capsys):
    smooth_bench.main(["--sizes", "5", "--warm-up", "0", "--measurement", "0.001"])
    out = capsys.readouterr().out
    assert "Group: 3-smooth" in out
    assert "pratt" in out
    assert "with_primes" in out
