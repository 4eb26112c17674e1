[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redistool"
version = "0.1.0"
description = "Command-line front-end tools for a Redis-compatible server: option parsing, usage text and version reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "cli", "database", "command-line", "rdb"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
redistool-cli = "redistool.cli:main"
redistool-check-rdb = "redistool.check_rdb:main"
redistool-benchmark = "redistool.tools:benchmark_main"
redistool-check-aof = "redistool.tools:check_aof_main"
redistool-sentinel = "redistool.tools:sentinel_main"
redistool-server = "redistool.tools:server_main"

[tool.hatch.build.targets.wheel]
packages = ["redistool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
