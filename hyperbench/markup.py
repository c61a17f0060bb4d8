"""Table exports of benchmark results in markup formats."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from .export_data import BenchmarkResult
from .formatting import format_duration_value
from .units import Unit

_PLUS_MINUS = "\u00b1"

_CELL_ALIGNMENTS = (
    "left",
    "right",
    "right",
    "right",
    "right",
)


class Alignment(enum.Enum):
    """Horizontal alignment of a table column."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class RelativeSpeedEntry:
    """A benchmark result together with its speed relative to the reference."""

    result: BenchmarkResult
    relative_speed: float
    relative_speed_stddev: float | None = None
    is_reference: bool = False


def determine_unit_from_results(results: Sequence[BenchmarkResult]) -> Unit:
    """The unit suited to the first result's mean, or seconds if there are no results."""
    if results:
        return format_duration_value(results[0].mean, None)[1]
    return Unit.SECOND


class MarkupExporter(ABC):
    """Renders benchmark results as a table in some markup language."""

    #: Line that closes the table; formats without one leave it empty.
    table_delimiter: str = ""

    def table_results(self, entries: Sequence[RelativeSpeedEntry], unit: Unit) -> str:
        """Render the whole table for the given entries, using one unit throughout."""
        notation = f"[{unit.short_name()}]"
        alignments = [Alignment(name) for name in _CELL_ALIGNMENTS]

        parts = [
            self.table_header(alignments),
            self.table_row(
                [
                    "Command",
                    f"Mean {notation}",
                    f"Min {notation}",
                    f"Max {notation}",
                    "Relative",
                ]
            ),
            self.table_divider(alignments),
        ]

        for entry in entries:
            measurement = entry.result
            cmd_str = measurement.command_with_unused_parameters.replace("|", "\\|")
            mean_str = format_duration_value(measurement.mean, unit)[0]
            if measurement.stddev is not None:
                stddev_str = f" {_PLUS_MINUS} {format_duration_value(measurement.stddev, unit)[0]}"
            else:
                stddev_str = ""
            min_str = format_duration_value(measurement.min, unit)[0]
            max_str = format_duration_value(measurement.max, unit)[0]
            rel_str = f"{entry.relative_speed:.2f}"
            if not entry.is_reference and entry.relative_speed_stddev is not None:
                rel_stddev_str = f" {_PLUS_MINUS} {entry.relative_speed_stddev:.2f}"
            else:
                rel_stddev_str = ""

            parts.append(
                self.table_row(
                    [
                        self.command(cmd_str),
                        f"{mean_str}{stddev_str}",
                        min_str,
                        max_str,
                        f"{rel_str}{rel_stddev_str}",
                    ]
                )
            )

        parts.append(self.table_footer(alignments))
        return "".join(parts)

    @abstractmethod
    def table_row(self, cells: Sequence[str]) -> str:
        """Render one row of cells."""

    @abstractmethod
    def table_divider(self, cell_alignments: Sequence[Alignment]) -> str:
        """Render the line between the header row and the data rows."""

    def table_header(self, cell_alignments: Sequence[Alignment]) -> str:
        """Render what comes before the first row."""
        return ""

    def table_footer(self, cell_alignments: Sequence[Alignment]) -> str:
        """Render what comes after the last row: the closing delimiter line, if any."""
        if not self.table_delimiter:
            return ""
        return f"{self.table_delimiter}\n"

    @abstractmethod
    def command(self, cmd: str) -> str:
        """Render a command name as inline code."""


class AsciidocExporter(MarkupExporter):
    """AsciiDoc tables."""

    table_delimiter = "|==="

    def table_header(self, cell_alignments: Sequence[Alignment]) -> str:
        cols = ",".join("<" if a is Alignment.LEFT else ">" for a in cell_alignments)
        return f'[cols="{cols}"]\n{self.table_delimiter}'

    def table_row(self, cells: Sequence[str]) -> str:
        return "\n| " + " \n| ".join(cells) + " \n"

    def table_divider(self, cell_alignments: Sequence[Alignment]) -> str:
        return ""

    def command(self, cmd: str) -> str:
        return f"`{cmd}`"


class MarkdownExporter(MarkupExporter):
    """Markdown tables."""

    def table_row(self, cells: Sequence[str]) -> str:
        return "| " + " | ".join(cells) + " |\n"

    def table_divider(self, cell_alignments: Sequence[Alignment]) -> str:
        cells = "".join(":---|" if a is Alignment.LEFT else "---:|" for a in cell_alignments)
        return f"|{cells}\n"

    def command(self, cmd: str) -> str:
        return f"`{cmd}`"


class OrgmodeExporter(MarkupExporter):
    """Emacs org-mode tables."""

    def table_row(self, cells: Sequence[str]) -> str:
        first, *rest = cells
        return f"| {first}  |  " + " |  ".join(rest) + " |\n"

    def table_divider(self, cell_alignments: Sequence[Alignment]) -> str:
        return "|" + "--+" * (len(cell_alignments) - 1) + "--|\n"

    def command(self, cmd: str) -> str:
        return f"={cmd}="