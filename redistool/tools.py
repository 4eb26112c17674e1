"""Entry points of the remaining server-side tools."""

from __future__ import annotations

import sys
from typing import Sequence


def _greet(name: str) -> int:
    print(f"Hello, {name}!")
    return 0


def benchmark_main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark tool."""
    return _greet("redis-benchmark")


def check_aof_main(argv: Sequence[str] | None = None) -> int:
    """Run the AOF checker."""
    return _greet("redis-check-aof")


def sentinel_main(argv: Sequence[str] | None = None) -> int:
    """Run the sentinel."""
    return _greet("redis-sentinel")


def server_main(argv: Sequence[str] | None = None) -> int:
    """Run the server."""
    return _greet("redis-server")


if __name__ == "__main__":
    sys.exit(server_main())