"""Usage text of the command-line client."""

import sys

from redistool.version import redis_cli_version

REDIS_CLI_AUTH_ENV = "REDISCLI_AUTH"
REDIS_CLI_DEFAULT_PIPE_TIMEOUT = 30

_OPTION_WIDTH = 18
_CONTINUATION_INDENT = " " * (_OPTION_WIDTH + 3)

# Each entry: the option with its argument, then the lines describing it.
_OPTIONS: list[tuple[str, list[str]]] = [
    ("-h <hostname>", ["Server hostname (default: 127.0.0.1)."]),
    ("-p <port>", ["Server port (default: 6379)."]),
    ("-s <socket>", ["Server socket (overrides hostname and port)."]),
    ("-a <password>", [
        "Password to use when connecting to the server.",
        f"You can also use the {REDIS_CLI_AUTH_ENV} environment",
        "variable to pass this password more safely",
        "(if both are used, this argument takes precedence).",
    ]),
    ("--user <username>", ["Used to send ACL style 'AUTH username pass'. Needs -a."]),
    ("--pass <password>", ["Alias of -a for consistency with the new --user option."]),
    ("--askpass", [
        "Force user to input password with mask from STDIN.",
        f"If this argument is used, '-a' and {REDIS_CLI_AUTH_ENV}",
        "environment variable will be ignored.",
    ]),
    ("-u <uri>", ["Server URI."]),
    ("-r <repeat>", ["Execute specified command N times."]),
    ("-i <interval>", [
        "When -r is used, waits <interval> seconds per command.",
        "It is possible to specify sub-second times like -i 0.1.",
        "This interval is also used in --scan and --stat per cycle.",
        "and in --bigkeys, --memkeys, and --hotkeys per 100 cycles.",
    ]),
    ("-n <db>", ["Database number."]),
    ("-2", ["Start session in RESP2 protocol mode."]),
    ("-3", ["Start session in RESP3 protocol mode."]),
    ("-x", ["Read last argument from STDIN (see example below)."]),
    ("-X", ["Read <tag> argument from STDIN (see example below)."]),
    ("-d <delimiter>", ["Delimiter between response bulks for raw formatting (default: \\n)."]),
    ("-D <delimiter>", ["Delimiter between responses for raw formatting (default: \\n)."]),
    ("-c", ["Enable cluster mode (follow -ASK and -MOVED redirections)."]),
    ("-e", ["Return exit error code when command execution fails."]),
    ("--raw", [
        "Use raw formatting for replies (default when STDOUT is",
        "not a tty).",
    ]),
    ("--no-raw", ["Force formatted output even when STDOUT is not a tty."]),
    ("--quoted-input", ["Force input to be handled as quoted strings."]),
    ("--csv", ["Output in CSV format."]),
    ("--json", ["Output in JSON format (default RESP3, use -2 if you want to use with RESP2)."]),
    ("--quoted-json", ["Same as --json, but produce ASCII-safe quoted strings, not Unicode."]),
    ("--show-pushes <yn>", [
        "Whether to print RESP3 PUSH messages.  Enabled by default when",
        "STDOUT is a tty but can be overridden with --show-pushes no.",
    ]),
    ("--stat", ["Print rolling stats about server: mem, clients, ..."]),
    ("--latency", [
        "Enter a special mode continuously sampling latency.",
        "If you use this mode in an interactive session it runs",
        "forever displaying real-time stats. Otherwise if --raw or",
        "--csv is specified, or if you redirect the output to a non",
        "TTY, it samples the latency for 1 second (you can use",
        "-i to change the interval), then produces a single output",
        "and exits.",
    ]),
    ("--latency-history", [
        "Like --latency but tracking latency changes over time.",
        "Default time interval is 15 sec. Change it using -i.",
    ]),
    ("--latency-dist", [
        "Shows latency as a spectrum, requires xterm 256 colors.",
        "Default time interval is 1 sec. Change it using -i.",
    ]),
    ("--lru-test <keys>", ["Simulate a cache workload with an 80-20 distribution."]),
    ("--replica", ["Simulate a replica showing commands received from the master."]),
    ("--rdb <filename>", [
        "Transfer an RDB dump from remote server to local file.",
        'Use filename of "-" to write to stdout.',
    ]),
    ("--functions-rdb <filename>", [
        "Like --rdb but only get the functions (not the keys)",
        "when getting the RDB dump file.",
    ]),
    ("--pipe", ["Transfer raw Redis protocol from stdin to server."]),
    ("--pipe-timeout <n>", [
        "In --pipe mode, abort with error if after sending all data.",
        "no reply is received within <n> seconds.",
        f"Default timeout: {REDIS_CLI_DEFAULT_PIPE_TIMEOUT}. Use 0 to wait forever.",
    ]),
    ("--bigkeys", ["Sample Redis keys looking for keys with many elements (complexity)."]),
    ("--memkeys", ["Sample Redis keys looking for keys consuming a lot of memory."]),
    ("--memkeys-samples <n>", [
        "Sample Redis keys looking for keys consuming a lot of memory.",
        "And define number of key elements to sample",
    ]),
    ("--hotkeys", [
        "Sample Redis keys looking for hot keys.",
        "only works when maxmemory-policy is *lfu.",
    ]),
    ("--scan", ["List all keys using the SCAN command."]),
    ("--pattern <pat>", [
        "Keys pattern when using the --scan, --bigkeys or --hotkeys",
        "options (default: *).",
    ]),
    ("--quoted-pattern <pat>", [
        "Same as --pattern, but the specified string can be",
        "    quoted, in order to pass an otherwise non binary-safe string.",
    ]),
    ("--intrinsic-latency <sec>", [
        "Run a test to measure intrinsic system latency.",
        "The test will run for the specified amount of seconds.",
    ]),
    ("--eval <file>", ["Send an EVAL command using the Lua script at <file>."]),
    ("--ldb", ["Used with --eval enable the Redis Lua debugger."]),
    ("--ldb-sync-mode", [
        "Like --ldb but uses the synchronous Lua debugger, in",
        "this mode the server is blocked and script changes are",
        "not rolled back from the server memory.",
    ]),
    ("--cluster <command> [args...] [opts...]", [
        "",
        "Cluster Manager command and arguments (see below).",
    ]),
    ("--verbose", ["Verbose mode."]),
    ("--no-auth-warning", [
        "Don't show warning message when using password on command",
        "line interface.",
    ]),
    ("--help", ["Output this help and exit."]),
    ("--version", ["Output version and exit."]),
]

_EXAMPLES = [
    "cat /etc/passwd | redis-cli -x set mypasswd",
    'redis-cli -D "" --raw dump key > key.dump'
    " && redis-cli -X dump_tag restore key2 0 dump_tag replace < key.dump",
    "redis-cli -r 100 lpush mylist x",
    "redis-cli -r 100 -i 1 info | grep used_memory_human:",
    "redis-cli --quoted-input set '\"null-\\x00-separated\"' value",
    "redis-cli --eval myscript.lua key1 key2 , arg1 arg2 arg3",
    "redis-cli --scan --pattern '*:12345*'",
]

_CLOSING = [
    "When no command is given, redis-cli starts in interactive mode.",
    'Type "help" in interactive mode for information on available commands',
    "and settings.",
]


def _option_lines():
    for option, (first, *rest) in _OPTIONS:
        yield f"  {option:<{_OPTION_WIDTH}} {first}".rstrip()
        for line in rest:
            yield _CONTINUATION_INDENT + line


def usage_text() -> str:
    """Return the full usage message of the client."""
    lines = [
        redis_cli_version(),
        "",
        "Usage: redis-cli [OPTIONS] [cmd [arg [arg ...]]]",
        *_option_lines(),
        "",
        "Cluster Manager Commands:",
        "  Use --cluster help to list all available cluster manager commands.",
        "",
        "Examples:",
        *(f"  {example}" for example in _EXAMPLES),
        "",
        "  (Note: when using --eval the comma separates KEYS[] from ARGV[] items)",
        "",
        *_CLOSING,
    ]
    return "\n".join(lines) + "\n"


def print_usage(code: int) -> None:
    """Print the usage message and exit with ``code``.

    The message goes to standard output on success, standard error otherwise.
    """
    usage = usage_text()
    if code == 0:
        print(usage)
    else:
        sys.stderr.write(usage)
    raise SystemExit(code)