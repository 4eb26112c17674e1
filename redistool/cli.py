"""Command-line entry point of the client: option parsing and dispatch."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Sequence

from redistool.cli_config import CliConfig, ClusterManagerFlag, OutputMode
from redistool.cli_help import print_usage
from redistool.version import redis_cli_version

SPECTRUM_PALETTE_COLOR: tuple[int, ...] = (
    0, 233, 234, 235, 237, 239, 241, 243, 245, 247,
    144, 143, 142, 184, 226, 214, 208, 202, 196,
)
SPECTRUM_PALETTE_MONO: tuple[int, ...] = (
    0, 233, 234, 235, 237, 239, 241, 243, 245, 247, 249, 251, 253,
)


@dataclass
class ParsedOptions:
    """Result of parsing the client's command line."""

    config: CliConfig = field(default_factory=CliConfig)
    spectrum_palette: tuple[int, ...] = SPECTRUM_PALETTE_COLOR


def _parse_int(text: str, bits: int = 32, signed: bool = True) -> int:
    """Parse a strict decimal integer of the given width; 0 when invalid."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body or not all("0" <= ch <= "9" for ch in body):
        return 0
    if text.startswith("-") and not signed:
        return 0
    value = int(text)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    return value if low <= value <= high else 0


def _apply_flag(config: CliConfig, arg: str) -> bool:
    """Apply an option that takes no value. Return whether it was one."""
    command = config.cluster_manager_command
    match arg:
        case "-x":
            config.stdin_last_arg = True
        case "--no-auth-warning":
            config.no_auth_warning = True
        case "--askpass":
            config.ask_pass = True
        case "--raw":
            config.output = OutputMode.RAW
        case "--no-raw":
            config.output = OutputMode.STANDARD
        case "--quoted-input":
            config.quoted_input = True
        case "--csv":
            config.output = OutputMode.CSV
        case "--json" | "--quoted-json":
            if config.resp3 == 0:
                config.resp3 = 2
            config.output = (
                OutputMode.JSON if arg == "--json" else OutputMode.QUOTED_JSON
            )
        case "--latency":
            config.latency_mode = True
        case "--latency-dist":
            config.latency_dist_mode = True
        case "--latency-history":
            config.latency_mode = True
            config.latency_history = True
        case "--slave" | "--replica":
            config.slave_mode = True
        case "--stat":
            config.stat_mode = True
        case "--scan":
            config.scan_mode = True
        case "--pipe":
            config.pipe_mode = True
        case "--bigkeys":
            config.big_keys = True
        case "--memkeys":
            config.mem_keys = True
            config.mem_keys_samples = 0
        case "--hotkeys":
            config.hot_keys = True
        case "--ldb":
            config.eval_ldb = True
            config.output = OutputMode.RAW
        case "--ldb-sync-mode":
            config.eval_ldb = True
            config.eval_ldb_sync = True
            config.output = OutputMode.RAW
        case "-c":
            config.cluster_mode = True
        case "-e":
            config.set_errcode = True
        case "--verbose":
            config.verbose = True
        case "--cluster-only-masters":
            command.flags |= ClusterManagerFlag.MASTERS_ONLY
        case "--cluster-only-replicas":
            command.flags |= ClusterManagerFlag.SLAVES_ONLY
        case _:
            return False
    return True


def _apply_valued(config: CliConfig, arg: str, value: str) -> None:
    """Apply an option followed by a value; unknown options are ignored."""
    conn = config.conn_info
    command = config.cluster_manager_command
    match arg:
        case "-h":
            conn.host_ip = value
        case "-X":
            config.stdin_tag_arg = True
            config.stdin_tag_name = value
        case "-p":
            conn.host_port = _parse_int(value)
        case "-s":
            config.host_socket = value
        case "-r":
            config.repeat = _parse_int(value, 64)
        case "-i":
            config.interval = _parse_int(value, 64) * 1_000_000
        case "-n":
            conn.input_db_num = _parse_int(value)
        case "-a" | "--pass":
            conn.auth = value
        case "--user":
            conn.user = value
        case "--lru-test":
            config.lru_test_mode = True
            config.lru_test_sample_size = _parse_int(value, 64)
        case "--pattern":
            config.pattern = value
        case "--quoted-pattern":
            config.pattern = value
            if not value:
                print(
                    "Invalid quoted string specified for --quoted-pattern.",
                    file=sys.stderr,
                )
                raise SystemExit(1)
        case "--intrinsic-latency":
            config.intrinsic_latency_mode = True
            config.intrinsic_latency_duration = _parse_int(value)
        case "--rdb":
            config.get_rdb_mode = True
            config.rdb_filename = value
        case "--functions-rdb":
            config.get_functions_rdb_mode = True
            config.rdb_filename = value
        case "--pipe-timeout":
            config.pipe_timeout = _parse_int(value)
        case "--eval":
            config.eval = value
        case "-d":
            config.mb_delim = value
        case "-D":
            config.cmd_delim = value
        case "--cluster":
            if command.name:
                print_usage(1)
        case "--cluster-replicas":
            command.replicas = _parse_int(value)
        case "--cluster-master-id":
            command.master_id = value


def parse_options(args: Sequence[str]) -> ParsedOptions:
    """Parse client options (without the program name).

    Every argument is examined in turn, including those consumed as the
    value of the option before it.
    """
    args = list(args)
    parsed = ParsedOptions()
    config = parsed.config
    for arg, value in zip_longest(args, args[1:]):
        if arg == "--help":
            print_usage(0)
        elif arg == "--mono":
            parsed.spectrum_palette = SPECTRUM_PALETTE_MONO
        elif arg == "--memkeys-samples":
            if value is None:
                raise ValueError("--memkeys-samples requires a value")
            config.mem_keys = True
            config.mem_keys_samples = _parse_int(value, 32, signed=False)
        elif _apply_flag(config, arg):
            continue
        elif value is not None:
            _apply_valued(config, arg, value)
        elif arg == "-h":
            print_usage(0)
        elif arg == "--cluster":
            print_usage(1)
    return parsed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client with ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_usage(0)
    parse_options(args)
    if args[0] in ("-v", "--version"):
        print(redis_cli_version())
    return 0


if __name__ == "__main__":
    sys.exit(main())