"""Entry point of the RDB file checker."""

from __future__ import annotations

import sys
from typing import Sequence

from redistool.version import check_rdb_version

PROG = "redis-check-rdb"


def main(argv: Sequence[str] | None = None) -> int:
    """Check the RDB file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {PROG} <rdb-file-name>")
        raise SystemExit(1)
    target = args[0]
    if target in ("-v", "--version"):
        print(check_rdb_version())
        return 0
    print(f"[offset 0] Checking RDB file {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())