"""Version strings shared by the command-line tools."""

REDIS_VERSION = "7.0.11"
REDIS_GIT_SHA1 = "bdb1e6cc"
REDIS_GIT_DIRTY = 1


def add(left: int, right: int) -> int:
    """Return the sum of two numbers."""
    return left + right


def _version(name: str) -> str:
    text = f"{name} {REDIS_VERSION}"
    if REDIS_GIT_SHA1.strip():
        text = f"{text} (git:{REDIS_GIT_SHA1}"
        if REDIS_GIT_DIRTY > 0:
            text += "-dirty"
        text += ")"
    return text


def check_rdb_version() -> str:
    """Version line of the RDB checker."""
    return _version("redis-check-rdb")


def redis_cli_version() -> str:
    """Version line of the command-line client."""
    return _version("redis-cli")