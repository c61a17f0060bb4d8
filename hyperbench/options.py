"""Settings for a benchmark session and how they are read from parsed arguments."""

from __future__ import annotations

import enum
import os
import re
import shlex
import subprocess
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import IO, Any, Union

from .units import Unit

DEFAULT_SHELL = "cmd.exe" if os.name == "nt" else "sh"

_U64_MAX = 2**64 - 1
_U64_PATTERN = re.compile(r"\+?[0-9]+")

StreamTarget = Union[int, IO[bytes], None]


class OptionsError(ValueError):
    """Raised when the benchmark options are invalid."""


@dataclass(frozen=True)
class Shell:
    """Shell used to run the benchmarked commands."""

    cmdline: tuple[str, ...] = (DEFAULT_SHELL,)
    custom: bool = False

    @classmethod
    def parse_from_str(cls, s: str) -> Shell:
        """Parse a string as a shell command line."""
        try:
            words = shlex.split(s)
        except ValueError as exc:
            raise OptionsError(
                f"Failed to parse '--shell <command>' expression as command line: {exc}"
            ) from exc
        if not words or not words[0]:
            raise OptionsError("Empty command at --shell option")
        return cls(tuple(words), custom=True)

    def command(self) -> list[str]:
        """The program and its leading arguments."""
        return list(self.cmdline)

    def __str__(self) -> str:
        if self.custom:
            return shlex.join(self.cmdline)
        return self.cmdline[0]


class CmdFailureAction(enum.Enum):
    """Action to take when an executed command fails."""

    RAISE_ERROR = "raise-error"
    IGNORE = "ignore"


class OutputStyleOption(enum.Enum):
    """How the terminal output is styled."""

    BASIC = "basic"
    FULL = "full"
    NO_COLOR = "nocolor"
    COLOR = "color"
    DISABLED = "none"


class SortOrder(enum.Enum):
    """How benchmarks are ordered in comparisons and exports."""

    COMMAND = "command"
    MEAN_TIME = "mean-time"


@dataclass
class RunBounds:
    """Bounds for the number of benchmark runs."""

    min: int = 10
    max: int | None = None


@dataclass(frozen=True)
class CommandInputPolicy:
    """Where the benchmarked command reads its input from; no path means the null device."""

    path: Path | None = None

    @contextmanager
    def open_stdin(self) -> Iterator[StreamTarget]:
        """Yield a value suitable as the stdin of a subprocess."""
        if self.path is None:
            yield subprocess.DEVNULL
            return
        with open(self.path, "rb") as stream:
            yield stream


_OUTPUT_KINDS = ("null", "pipe", "file", "inherit")


@dataclass(frozen=True)
class CommandOutputPolicy:
    """What happens to the output of a benchmarked command."""

    kind: str = "null"
    path: Path | None = None

    def __post_init__(self) -> None:
        if self.kind not in _OUTPUT_KINDS:
            raise ValueError(f"unknown output policy kind: {self.kind!r}")
        if (self.kind == "file") != (self.path is not None):
            raise ValueError("a path is required for, and only for, the 'file' policy")

    @contextmanager
    def open_streams(self) -> Iterator[tuple[StreamTarget, StreamTarget]]:
        """Yield the (stdout, stderr) values for a subprocess."""
        if self.kind == "null":
            yield subprocess.DEVNULL, subprocess.DEVNULL
        elif self.kind == "pipe":
            # Typically only stdout is performance-relevant, so just pipe that.
            yield subprocess.PIPE, subprocess.DEVNULL
        elif self.kind == "inherit":
            yield None, None
        else:
            assert self.path is not None
            with open(self.path, "wb") as stream:
                yield stream, subprocess.DEVNULL


_EXECUTOR_KINDS = ("raw", "shell", "mock")


@dataclass(frozen=True)
class ExecutorKind:
    """How commands are run: directly, through a shell, or mocked."""

    kind: str = "shell"
    shell: Shell | None = None
    mock_shell: str | None = None

    def __post_init__(self) -> None:
        if self.kind not in _EXECUTOR_KINDS:
            raise ValueError(f"unknown executor kind: {self.kind!r}")
        if self.kind == "shell" and self.shell is None:
            object.__setattr__(self, "shell", Shell())


def _parse_u64(matches: Mapping[str, Any], param: str) -> int | None:
    value = matches.get(param)
    if value is None:
        return None
    text = str(value)
    if not _U64_PATTERN.fullmatch(text) or int(text) > _U64_MAX:
        raise OptionsError(f"Could not parse '--{param}' value as an integer: '{text}'")
    return int(text)


def _component_count(arg: str) -> int:
    leading_current = arg == "." or arg.startswith("./") or (
        os.name == "nt" and arg.startswith(".\\")
    )
    return len(PurePath(arg).parts) + (1 if leading_current else 0)


def _output_policy(value: str) -> CommandOutputPolicy:
    if value in ("null", "pipe", "inherit"):
        return CommandOutputPolicy(value)
    if _component_count(value) <= 1:
        raise OptionsError(
            f"Unknown output policy '{value}'. Use './{value}' to output to a file named '{value}'."
        )
    return CommandOutputPolicy("file", Path(value))


def _stdout_is_terminal() -> bool:
    stream = sys.stdout
    return stream is not None and stream.isatty()


def _default_output_style(policies: list[CommandOutputPolicy]) -> OutputStyleOption:
    if any(policy.kind == "inherit" for policy in policies) or not _stdout_is_terminal():
        return OutputStyleOption.BASIC
    term = os.environ.get("TERM")
    plain_term = term in ("unknown", "dumb") if term is not None else os.name != "nt"
    if plain_term or os.environ.get("NO_COLOR"):
        return OutputStyleOption.NO_COLOR
    return OutputStyleOption.FULL


_STYLES = {
    "full": OutputStyleOption.FULL,
    "basic": OutputStyleOption.BASIC,
    "nocolor": OutputStyleOption.NO_COLOR,
    "color": OutputStyleOption.COLOR,
    "none": OutputStyleOption.DISABLED,
}

_SORT_ORDERS = {
    "auto": (SortOrder.MEAN_TIME, SortOrder.COMMAND),
    "command": (SortOrder.COMMAND, SortOrder.COMMAND),
    "mean-time": (SortOrder.MEAN_TIME, SortOrder.MEAN_TIME),
}

_TIME_UNITS = {
    "microsecond": Unit.MICROSECOND,
    "millisecond": Unit.MILLISECOND,
    "second": Unit.SECOND,
}


def _executor_kind(matches: Mapping[str, Any]) -> ExecutorKind:
    if matches.get("no-shell"):
        return ExecutorKind("raw")
    shell = matches.get("shell")
    if matches.get("debug-mode"):
        return ExecutorKind("mock", mock_shell=shell)
    if shell is None or shell == "default":
        return ExecutorKind("shell", Shell())
    if shell == "none":
        return ExecutorKind("raw")
    return ExecutorKind("shell", Shell.parse_from_str(shell))


def _parse_float(param: str, value: str) -> float:
    if value != value.strip() or "_" in value:
        raise OptionsError(f"Could not parse '--{param}' value as a float: '{value}'")
    try:
        return float(value)
    except ValueError as exc:
        raise OptionsError(f"Could not parse '--{param}' value as a float: '{value}'") from exc


@dataclass
class Options:
    """The main settings for a benchmark session."""

    run_bounds: RunBounds = field(default_factory=RunBounds)
    warmup_count: int = 0
    min_benchmarking_time: float = 3.0
    command_failure_action: CmdFailureAction = CmdFailureAction.RAISE_ERROR
    reference_command: str | None = None
    preparation_command: list[str] | None = None
    conclusion_command: list[str] | None = None
    setup_command: str | None = None
    cleanup_command: str | None = None
    output_style: OutputStyleOption = OutputStyleOption.FULL
    sort_order_speed_comparison: SortOrder = SortOrder.MEAN_TIME
    sort_order_exports: SortOrder = SortOrder.COMMAND
    executor_kind: ExecutorKind = field(default_factory=ExecutorKind)
    command_input_policy: CommandInputPolicy = field(default_factory=CommandInputPolicy)
    command_output_policies: list[CommandOutputPolicy] = field(
        default_factory=lambda: [CommandOutputPolicy()]
    )
    time_unit: Unit | None = None

    @classmethod
    def from_cli_arguments(cls, matches: Mapping[str, Any] | Any) -> Options:
        """Build options from parsed arguments keyed by long option name."""
        if not isinstance(matches, Mapping):
            matches = vars(matches)
        options = cls()

        warmup = _parse_u64(matches, "warmup")
        if warmup is not None:
            options.warmup_count = warmup

        min_runs = _parse_u64(matches, "min-runs")
        max_runs = _parse_u64(matches, "max-runs")
        runs = _parse_u64(matches, "runs")
        if runs is not None:
            min_runs = max_runs = runs

        if min_runs is not None and max_runs is not None and min_runs > max_runs:
            raise OptionsError("Minimum number of runs is larger than maximum number of runs")
        if min_runs is not None:
            options.run_bounds.min = min_runs
        elif max_runs is not None:
            # The minimum was not explicit, so lower it if max is below the default.
            options.run_bounds.min = min(options.run_bounds.min, max_runs)
        options.run_bounds.max = max_runs

        options.setup_command = matches.get("setup")
        options.reference_command = matches.get("reference")
        prepare = matches.get("prepare")
        options.preparation_command = list(prepare) if prepare is not None else None
        conclude = matches.get("conclude")
        options.conclusion_command = list(conclude) if conclude is not None else None
        options.cleanup_command = matches.get("cleanup")

        outputs = matches.get("output")
        if matches.get("show-output"):
            options.command_output_policies = [CommandOutputPolicy("inherit")]
        elif outputs is not None:
            options.command_output_policies = [_output_policy(value) for value in outputs]
        else:
            options.command_output_policies = [CommandOutputPolicy()]

        style = matches.get("style")
        if style in _STYLES:
            options.output_style = _STYLES[style]
        else:
            options.output_style = _default_output_style(options.command_output_policies)

        sort = matches.get("sort") or "auto"
        if sort not in _SORT_ORDERS:
            raise OptionsError(f"Unknown sort order '{sort}'")
        options.sort_order_speed_comparison, options.sort_order_exports = _SORT_ORDERS[sort]

        options.executor_kind = _executor_kind(matches)

        if matches.get("ignore-failure"):
            options.command_failure_action = CmdFailureAction.IGNORE

        options.time_unit = _TIME_UNITS.get(matches.get("time-unit"))

        min_time = matches.get("min-benchmarking-time")
        if min_time is not None:
            options.min_benchmarking_time = _parse_float("min-benchmarking-time", str(min_time))

        input_path = matches.get("input")
        if input_path is None or input_path == "null":
            options.command_input_policy = CommandInputPolicy()
        else:
            path = Path(input_path)
            if not path.exists():
                raise OptionsError(
                    f"The file '{input_path}' specified as '--input' does not exist"
                )
            options.command_input_policy = CommandInputPolicy(path)

        return options

    def validate_against_command_list(self, num_commands: int) -> None:
        """Check per-command options against the number of commands, reference included."""

        def message(option: str) -> str:
            return (
                f"The '--{option}' option has to be provided just once or N times, "
                f"where N={num_commands} is the number of benchmark commands "
                "(including a potential reference)."
            )

        for option, commands in (
            ("prepare", self.preparation_command),
            ("conclude", self.conclusion_command),
        ):
            if commands is not None and len(commands) > 1 and len(commands) != num_commands:
                raise OptionsError(message(option))

        if len(self.command_output_policies) == 1:
            self.command_output_policies = self.command_output_policies * num_commands
        elif len(self.command_output_policies) != num_commands:
            raise OptionsError(message("output"))