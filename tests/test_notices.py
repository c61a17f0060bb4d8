import pytest

from hyperbench.notices import (
    FastExecutionTime,
    NonZeroExitCode,
    OutlierWarningOptions,
    OutliersDetected,
    SlowInitialRun,
)


def test_non_zero_exit_code_message():
    assert str(NonZeroExitCode()) == "Ignoring non-zero exit code."


def test_fast_execution_time_mentions_limit_in_ms():
    text = str(FastExecutionTime(0.005))
    assert text.startswith("Command took less than 5 ms to complete.")
    assert "`-N`/`--shell=none`" in text


def test_slow_initial_run_includes_formatted_time():
    text = str(SlowInitialRun(1.3, OutlierWarningOptions(False, False)))
    assert "(1.300 s)" in text
    assert text.startswith("The first benchmarking run for this command")


@pytest.mark.parametrize(
    "warmup, prepare, fragment",
    [
        (True, True, "You are already using both the '--warmup' option"),
        (True, False, "You are already using the '--warmup' option"),
        (False, True, "You are already using the '--prepare' option"),
        (False, False, "You should consider using the '--warmup' option"),
    ],
)
def test_slow_initial_run_hint_depends_on_options(warmup, prepare, fragment):
    text = str(SlowInitialRun(0.5, OutlierWarningOptions(warmup, prepare)))
    assert fragment in text
    assert text.endswith(".")


def test_slow_initial_run_hints_differ():
    texts = {
        str(SlowInitialRun(1.0, OutlierWarningOptions(w, p)))
        for w in (True, False)
        for p in (True, False)
    }
    assert len(texts) == 4


@pytest.mark.parametrize(
    "warmup, prepare", [(True, False), (False, True), (False, False)]
)
def test_outliers_detected_suggests_options(warmup, prepare):
    text = str(OutliersDetected(OutlierWarningOptions(warmup, prepare)))
    assert text.endswith(" It might help to use the '--warmup' or '--prepare' options.")


def test_outliers_detected_without_hint_when_both_used():
    text = str(OutliersDetected(OutlierWarningOptions(True, True)))
    assert text.endswith("without any interferences from other programs.")
    assert "--warmup" not in text