from redistool.cli_config import (
    CLUSTER_MANAGER_MIGRATE_PIPELINE,
    CLUSTER_MANAGER_MIGRATE_TIMEOUT,
    CLUSTER_MANAGER_REBALANCE_THRESHOLD,
    REDIS_CLI_DEFAULT_PIPE_TIMEOUT,
    CliConfig,
    CliConnInfo,
    CliSSLConfig,
    ClusterManagerCommand,
    ClusterManagerFlag,
    OutputMode,
    Pref,
)


def test_conn_info_defaults():
    info = CliConnInfo()
    assert info.host_ip == "127.0.0.1"
    assert info.host_port == 6379
    assert info.auth == ""


def test_config_defaults():
    config = CliConfig()
    assert config.repeat == 1
    assert config.pipe_timeout == REDIS_CLI_DEFAULT_PIPE_TIMEOUT
    assert config.output is OutputMode.STANDARD
    assert config.mb_delim == "\n"
    assert config.cmd_delim == "\n"
    assert config.last_cmd_type == -1
    assert config.push_output is True


def test_cluster_command_defaults():
    command = ClusterManagerCommand()
    assert command.timeout == CLUSTER_MANAGER_MIGRATE_TIMEOUT
    assert command.pipeline == CLUSTER_MANAGER_MIGRATE_PIPELINE
    assert command.threshold == CLUSTER_MANAGER_REBALANCE_THRESHOLD
    assert command.flags == ClusterManagerFlag.NONE
    assert command.argc == 0


def test_argc_tracks_argv():
    command = ClusterManagerCommand(argv=["a", "b"], weight=["w"])
    assert command.argc == 2
    assert command.weight_argc == 1


def test_flags_combine():
    command = ClusterManagerCommand()
    command.flags |= ClusterManagerFlag.MASTERS_ONLY
    command.flags |= ClusterManagerFlag.SLAVES_ONLY
    assert ClusterManagerFlag.MASTERS_ONLY in command.flags
    assert ClusterManagerFlag.SLAVES_ONLY in command.flags
    assert command.flags == (1 << 11) | (1 << 12)


def test_configs_do_not_share_state():
    first = CliConfig()
    second = CliConfig()
    first.conn_info.host_port = 1
    first.cluster_manager_command.argv.append("x")
    assert second.conn_info.host_port == 6379
    assert second.cluster_manager_command.argv == []


def test_ssl_and_pref_defaults():
    assert CliSSLConfig().skip_cert_verify is False
    assert Pref().hints is True