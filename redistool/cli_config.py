"""Configuration state of the command-line client."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

REDIS_CLI_DEFAULT_PIPE_TIMEOUT = 30
CLUSTER_MANAGER_MIGRATE_TIMEOUT = 60000
CLUSTER_MANAGER_MIGRATE_PIPELINE = 10
CLUSTER_MANAGER_REBALANCE_THRESHOLD = 2.0


class OutputMode(enum.IntEnum):
    """How replies are rendered."""

    STANDARD = 0
    RAW = 1
    CSV = 2
    JSON = 3
    QUOTED_JSON = 4


class ClusterManagerFlag(enum.IntFlag):
    """Option flags of a cluster manager command."""

    NONE = 0
    MASTERS_ONLY = 1 << 11
    SLAVES_ONLY = 1 << 12


@dataclass
class CliConnInfo:
    """Where and as whom to connect."""

    host_ip: str = "127.0.0.1"
    host_port: int = 6379
    input_db_num: int = 0
    auth: str = ""
    user: str = ""


@dataclass
class CliSSLConfig:
    """TLS settings of a connection."""

    sni: str = ""
    ca_cert: str = ""
    ca_cert_dir: str = ""
    skip_cert_verify: bool = False
    cert: str = ""
    key: str = ""
    ciphers: str = ""
    cipher_suites: str = ""


@dataclass
class ClusterManagerCommand:
    """A cluster manager command with its arguments and options."""

    name: str = ""
    argv: list[str] = field(default_factory=list)
    stdin_arg: str = ""
    flags: ClusterManagerFlag = ClusterManagerFlag.NONE
    replicas: int = 0
    from_: str = ""
    to: str = ""
    weight: list[str] = field(default_factory=list)
    master_id: str = ""
    slots: int = 0
    timeout: int = CLUSTER_MANAGER_MIGRATE_TIMEOUT
    pipeline: int = CLUSTER_MANAGER_MIGRATE_PIPELINE
    threshold: float = CLUSTER_MANAGER_REBALANCE_THRESHOLD
    backup_dir: str = ""
    from_user: str = ""
    from_pass: str = ""
    from_ask_pass: bool = False

    @property
    def argc(self) -> int:
        return len(self.argv)

    @property
    def weight_argc(self) -> int:
        return len(self.weight)


@dataclass
class CliConfig:
    """Complete client configuration, as set by the command line."""

    conn_info: CliConnInfo = field(default_factory=CliConnInfo)
    host_socket: str = ""
    tls: bool = False
    ssl_config: CliSSLConfig = field(default_factory=CliSSLConfig)
    repeat: int = 1
    interval: int = 0
    db_num: int = 0
    interactive: bool = False
    shutdown: bool = False
    monitor_mode: bool = False
    pub_sub_mode: bool = False
    blocking_state_aborted: bool = False
    latency_mode: bool = False
    latency_dist_mode: bool = False
    latency_history: bool = False
    lru_test_mode: bool = False
    lru_test_sample_size: int = 0
    cluster_mode: bool = False
    cluster_reissue_command: bool = False
    cluster_send_asking: bool = False
    slave_mode: bool = False
    pipe_mode: bool = False
    pipe_timeout: int = REDIS_CLI_DEFAULT_PIPE_TIMEOUT
    get_rdb_mode: bool = False
    get_functions_rdb_mode: bool = False
    stat_mode: bool = False
    scan_mode: bool = False
    intrinsic_latency_mode: bool = False
    intrinsic_latency_duration: int = 0
    pattern: str = ""
    rdb_filename: str = ""
    big_keys: bool = False
    mem_keys: bool = False
    mem_keys_samples: int = 0
    hot_keys: bool = False
    stdin_last_arg: bool = False
    stdin_tag_arg: bool = False
    stdin_tag_name: str = ""
    ask_pass: bool = False
    quoted_input: bool = False
    output: OutputMode = OutputMode.STANDARD
    push_output: bool = True
    mb_delim: str = "\n"
    cmd_delim: str = "\n"
    prompt: str = ""
    eval: str = ""
    eval_ldb: bool = False
    eval_ldb_sync: bool = False
    eval_ldb_end: bool = False
    enable_ldb_on_eval: bool = False
    last_cmd_type: int = -1
    verbose: bool = False
    set_errcode: bool = False
    cluster_manager_command: ClusterManagerCommand = field(
        default_factory=ClusterManagerCommand
    )
    no_auth_warning: bool = False
    resp2: int = 0
    resp3: int = 0
    in_multi: bool = False
    pre_multi_db_num: int = 0


@dataclass
class Pref:
    """Interactive-mode preferences."""

    hints: bool = True