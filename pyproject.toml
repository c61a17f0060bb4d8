[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyperbench"
version = "1.19.0"
description = "Building blocks for command-line benchmarking: duration formatting, outlier statistics, parameter scans, options and result export"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "timing", "performance", "statistics", "export"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hyperbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
