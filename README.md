# hyperbench

Building blocks for benchmarking commands and reporting the results:
duration formatting, outlier statistics, parameter scans, benchmark
options and table/CSV/JSON export.

## Modules

- `hyperbench.units`: the `Unit` enum (`SECOND`, `MILLISECOND`,
  `MICROSECOND`) with `short_name()` and `format(value)`.
- `hyperbench.formatting`: `format_duration`, `format_duration_unit` and
  `format_duration_value`, which pick a readable unit automatically or use
  the one given.
- `hyperbench.outliers`: `modified_zscores` and `num_outliers`, based on the
  median absolute deviation, with the threshold `OUTLIER_THRESHOLD`.
- `hyperbench.numeric`: `fmin`, `fmax`, `to_usize`, `format_number` and
  `random_environment_offset`.
- `hyperbench.parameters`: `tokenize` for comma-separated lists with `\,`
  and `\\` escapes, `RangeStep` for integer or `Decimal` parameter scans
  (at most 100,000 values; invalid ranges raise `ParameterScanError`), and
  `ParameterValue`.
- `hyperbench.options`: `Options` with `from_cli_arguments` (takes a mapping
  keyed by long option names such as `"runs"`, `"min-runs"`, `"prepare"`,
  `"output"`, `"sort"`, `"shell"`, `"time-unit"`, `"input"`) and
  `validate_against_command_list(num_commands)`; `Shell`, `RunBounds`,
  `CommandInputPolicy.open_stdin()` and `CommandOutputPolicy.open_streams()`
  (context managers yielding values for `subprocess`), `ExecutorKind`,
  `SortOrder`, `OutputStyleOption`, `CmdFailureAction`. Invalid settings
  raise `OptionsError`.
- `hyperbench.notices`: `FastExecutionTime`, `NonZeroExitCode`,
  `SlowInitialRun` and `OutliersDetected`, whose `str()` is the warning text.
- `hyperbench.export_data`: `BenchmarkResult`, and `CsvExporter` and
  `JsonExporter`, whose `serialize(results, unit, sort_order)` returns bytes.
- `hyperbench.markup`: `MarkdownExporter`, `AsciidocExporter` and
  `OrgmodeExporter`, which render `RelativeSpeedEntry` objects with
  `table_results(entries, unit)`; `determine_unit_from_results` picks the
  unit from the first result.

## Install

```
pip install hyperbench
```

## Examples

Format a duration:

```python
from hyperbench.formatting import format_duration_unit

format_duration_unit(0.999, None)   # ("999.0 ms", Unit.MILLISECOND)
```

Build the values for a parameter scan:

```python
from decimal import Decimal
from hyperbench.parameters import RangeStep, tokenize

list(RangeStep(0, 10, 3))                               # [0, 3, 6, 9]
len(RangeStep(Decimal(0), Decimal(1), Decimal("0.1")))  # 11
tokenize(r"hello\, world!,foo")                         # ["hello, world!", "foo"]
```

Read options:

```python
from hyperbench.options import Options

options = Options.from_cli_arguments({"runs": "5", "sort": "command"})
options.run_bounds   # RunBounds(min=5, max=5)
options.validate_against_command_list(2)
```

Write a Markdown table:

```python
from hyperbench.export_data import BenchmarkResult
from hyperbench.markup import MarkdownExporter, RelativeSpeedEntry, determine_unit_from_results

result = BenchmarkResult(
    command="sleep 0.1", command_with_unused_parameters="sleep 0.1",
    mean=0.1057, stddev=0.0016, median=0.1057, user=0.0009,
    system=0.0011, min=0.1023, max=0.1080,
)
entries = [RelativeSpeedEntry(result, 1.0, is_reference=True)]
print(MarkdownExporter().table_results(entries, determine_unit_from_results([result])))
```

## What it does not do

The package does not run or time commands: there is no timer, no benchmark
scheduler and no command-line program. It does not compute relative speeds
either; `RelativeSpeedEntry` values are built by the caller. Output styles
are chosen but no progress bars or coloured output are drawn.

## Tests

```
pip install -e ".[test]"
pytest
```