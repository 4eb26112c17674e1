from redistool.version import (
    REDIS_GIT_SHA1,
    REDIS_VERSION,
    add,
    check_rdb_version,
    redis_cli_version,
)


def test_add_it_works():
    assert add(2, 2) == 4


def test_cli_version_string():
    assert redis_cli_version() == "redis-cli 7.0.11 (git:bdb1e6cc-dirty)"


def test_check_rdb_version_string():
    assert check_rdb_version() == "redis-check-rdb 7.0.11 (git:bdb1e6cc-dirty)"


def test_versions_share_suffix():
    cli_suffix = redis_cli_version().removeprefix("redis-cli")
    rdb_suffix = check_rdb_version().removeprefix("redis-check-rdb")
    assert cli_suffix == rdb_suffix
    assert REDIS_VERSION in cli_suffix
    assert REDIS_GIT_SHA1 in cli_suffix