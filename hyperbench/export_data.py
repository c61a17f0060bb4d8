"""Benchmark results and their CSV and JSON exports."""

from __future__ import annotations

import csv
import io
import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .options import SortOrder
from .units import Unit

_CSV_HEADERS = ("command", "mean", "stddev", "median", "user", "system", "min", "max")


@dataclass
class BenchmarkResult:
    """The statistics of one benchmarked command."""

    command: str
    command_with_unused_parameters: str
    mean: float
    stddev: float | None
    median: float
    user: float
    system: float
    min: float
    max: float
    times: list[float] | None = None
    memory_usage_byte: list[int] | None = None
    exit_codes: list[int | None] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def sorted_parameters(self) -> list[tuple[str, str]]:
        """Parameters ordered by name."""
        return sorted(self.parameters.items())

    def to_dict(self) -> dict[str, Any]:
        """The result as a JSON-ready dictionary."""
        data: dict[str, Any] = {
            "command": self.command,
            "mean": self.mean,
            "stddev": self.stddev,
            "median": self.median,
            "user": self.user,
            "system": self.system,
            "min": self.min,
            "max": self.max,
            "times": self.times,
            "memory_usage_byte": self.memory_usage_byte,
            "exit_codes": self.exit_codes,
        }
        if self.parameters:
            data["parameters"] = dict(self.sorted_parameters())
        return data


def _format_float(value: float) -> str:
    """Shortest round-trip form, without exponent and without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class CsvExporter:
    """Exports results as comma separated values; timing lists are left out."""

    def serialize(
        self,
        results: list[BenchmarkResult],
        unit: Unit | None = None,
        sort_order: SortOrder = SortOrder.COMMAND,
    ) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        headers = list(_CSV_HEADERS)
        if results:
            headers.extend(f"parameter_{name}" for name, _ in results[0].sorted_parameters())
        writer.writerow(headers)
        for res in results:
            numbers = (
                res.mean,
                res.stddev if res.stddev is not None else 0.0,
                res.median,
                res.user,
                res.system,
                res.min,
                res.max,
            )
            writer.writerow(
                [res.command]
                + [_format_float(number) for number in numbers]
                + [value for _, value in res.sorted_parameters()]
            )
        return buffer.getvalue().encode("utf-8")


class JsonExporter:
    """Exports results as pretty-printed JSON."""

    def serialize(
        self,
        results: list[BenchmarkResult],
        unit: Unit | None = None,
        sort_order: SortOrder = SortOrder.COMMAND,
    ) -> bytes:
        summary = {"results": [res.to_dict() for res in results]}
        text = json.dumps(summary, indent=2, ensure_ascii=False, allow_nan=False)
        return (text + "\n").encode("utf-8")