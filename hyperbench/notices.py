"""Warnings shown to the user about the quality of benchmark results."""

from __future__ import annotations

from dataclasses import dataclass

from .formatting import format_duration
from .units import Second


@dataclass(frozen=True)
class OutlierWarningOptions:
    """Which options that affect outliers were in use."""

    warmup_in_use: bool
    prepare_in_use: bool


@dataclass(frozen=True)
class FastExecutionTime:
    """The command finished faster than the shell startup time can be calibrated."""

    min_execution_time: Second

    def __str__(self) -> str:
        return (
            f"Command took less than {self.min_execution_time * 1e3:.0f} ms to complete. "
            "Note that the results might be inaccurate because hyperbench can not calibrate "
            "the shell startup time much more precise than this limit. You can try to use "
            "the `-N`/`--shell=none` option to disable the shell completely."
        )


@dataclass(frozen=True)
class NonZeroExitCode:
    """A command failed and the failure was ignored."""

    def __str__(self) -> str:
        return "Ignoring non-zero exit code."


_SLOW_RUN_HINTS = {
    (True, True): (
        "You are already using both the '--warmup' option as well as the '--prepare' "
        "option. Consider re-running the benchmark on a quiet system. Maybe it was a "
        "random outlier. Alternatively, consider increasing the warmup count."
    ),
    (True, False): (
        "You are already using the '--warmup' option which helps to fill these caches "
        "before the actual benchmark. You can either try to increase the warmup count "
        "further or re-run this benchmark on a quiet system in case it was a random "
        "outlier. Alternatively, consider using the '--prepare' option to clear the "
        "caches before each timing run."
    ),
    (False, True): (
        "You are already using the '--prepare' option which can be used to clear caches. "
        "If you did not use a cache-clearing command with '--prepare', you can either try "
        "that or consider using the '--warmup' option to fill those caches before the "
        "actual benchmark."
    ),
    (False, False): (
        "You should consider using the '--warmup' option to fill those caches before the "
        "actual benchmark. Alternatively, use the '--prepare' option to clear the caches "
        "before each timing run."
    ),
}


@dataclass(frozen=True)
class SlowInitialRun:
    """The first timing run was much slower than the rest."""

    time_first_run: Second
    options: OutlierWarningOptions

    def __str__(self) -> str:
        hints = _SLOW_RUN_HINTS[(self.options.warmup_in_use, self.options.prepare_in_use)]
        return (
            "The first benchmarking run for this command was significantly slower than the "
            f"rest ({format_duration(self.time_first_run, None)}). This could be caused by "
            "(filesystem) caches that were not filled until after the first run. "
            f"{hints}"
        )


@dataclass(frozen=True)
class OutliersDetected:
    """Statistical outliers were found among the timings."""

    options: OutlierWarningOptions

    def __str__(self) -> str:
        if self.options.warmup_in_use and self.options.prepare_in_use:
            hint = ""
        else:
            hint = " It might help to use the '--warmup' or '--prepare' options."
        return (
            "Statistical outliers were detected. Consider re-running this benchmark on a "
            f"quiet system without any interferences from other programs.{hint}"
        )