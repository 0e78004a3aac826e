[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tds"
version = "0.1.0"
description = "Trading data toolkit: market records, security codes, bar periods, trade calendars and performance statistics"
requires-python = ">=3.10"
keywords = ["trading", "kline", "market-data", "calendar", "statistics", "finance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = [
    "redis",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tds"]

[tool.pytest.ini_options]
addopts = "-ra"
