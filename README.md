# redistool

Command-line front-end tools for a Redis-compatible server. The package
provides the client's option parser, its usage text, version reporting and a
few companion commands.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `redistool-cli`

Parses client options in the familiar `redis-cli` style and prints help or
version information.

```
redistool-cli --help
redistool-cli --version
redistool-cli -h 10.0.0.5 -p 6380 -n 2 --raw
```

With no arguments, or with `--help`, the full usage text is printed to
standard output and the command exits with status 0. `-h` given as the last
argument does the same. `--cluster` given as the last argument prints the
usage text to standard error and exits with status 1. `--quoted-pattern` with
an empty value prints an error and exits with status 1. When the first
argument is `-v` or `--version`, the version line is printed.

Options that take no value: `-x`, `-c`, `-e`, `--raw`, `--no-raw`,
`--quoted-input`, `--csv`, `--json`, `--quoted-json`, `--latency`,
`--latency-history`, `--latency-dist`, `--mono`, `--replica` (or `--slave`),
`--stat`, `--scan`, `--pipe`, `--bigkeys`, `--memkeys`, `--hotkeys`, `--ldb`,
`--ldb-sync-mode`, `--verbose`, `--askpass`, `--no-auth-warning`,
`--cluster-only-masters` and `--cluster-only-replicas`.

Options that take a value: `-h`, `-p`, `-s`, `-a`/`--pass`, `--user`, `-r`,
`-i`, `-n`, `-X`, `-d`, `-D`, `--lru-test`, `--pattern`, `--quoted-pattern`,
`--intrinsic-latency`, `--rdb`, `--functions-rdb`, `--pipe-timeout`,
`--memkeys-samples`, `--eval`, `--cluster-replicas` and
`--cluster-master-id`. Numeric values must be plain decimal integers that fit
the field; anything else is taken as 0. `-i` takes whole seconds and is stored
in microseconds.

### `redistool-check-rdb`

```
redistool-check-rdb dump.rdb
redistool-check-rdb --version
```

Takes exactly one argument: the RDB file name, or `-v`/`--version`. Any other
number of arguments prints a usage line and exits with status 1.

### Other commands

`redistool-benchmark`, `redistool-check-aof`, `redistool-sentinel` and
`redistool-server` each print a greeting line and exit.

## Library use

```python
from redistool.version import redis_cli_version
from redistool.cli import parse_options
from redistool.cli_config import OutputMode

print(redis_cli_version())   # redis-cli 7.0.11 (git:bdb1e6cc-dirty)

options = parse_options(["-p", "6380", "--csv"])
assert options.config.conn_info.host_port == 6380
assert options.config.output is OutputMode.CSV
```

`parse_options` takes the arguments without the program name and returns a
`ParsedOptions` holding the `CliConfig` and the chosen `spectrum_palette`.
`--memkeys-samples` without a value raises `ValueError`.

`redistool.cli_config` holds the configuration dataclasses (`CliConfig`,
`CliConnInfo`, `CliSSLConfig`, `ClusterManagerCommand`, `Pref`) and the
`OutputMode` and `ClusterManagerFlag` enums. `redistool.cli_help.usage_text()`
returns the usage text without printing it; `print_usage(code)` prints it and
exits with `code`.

## What it does not do

- The client never connects to a server and sends no commands; it only parses
  options into a configuration and prints help or version text.
- `-u`, `-2`, `-3`, `--show-pushes` and the arguments after `--cluster` are
  listed in the usage text but have no effect; the TLS options are not
  accepted.
- `redistool-check-rdb` does not open or validate the file it is given; it
  only prints the line announcing the check.
- The benchmark, AOF checker, sentinel and server commands do nothing beyond
  printing their greeting.