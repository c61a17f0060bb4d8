"""Duration formatting, outlier statistics, parameter scans, options and result export for benchmarks."""

__version__ = "1.19.0"

__all__ = [
    "units",
    "formatting",
    "outliers",
    "numeric",
    "parameters",
    "options",
    "notices",
    "export_data",
    "markup",
]