import pytest

from redistool.tools import benchmark_main, check_aof_main, sentinel_main, server_main


@pytest.mark.parametrize(
    ("entry", "expected"),
    [
        (benchmark_main, "Hello, redis-benchmark!\n"),
        (check_aof_main, "Hello, redis-check-aof!\n"),
        (sentinel_main, "Hello, redis-sentinel!\n"),
        (server_main, "Hello, redis-server!\n"),
    ],
)
def test_greeting(entry, expected, capsys):
    assert entry() == 0
    assert capsys.readouterr().out == expected


def test_arguments_do_not_change_output(capsys):
    assert server_main(["--port", "7000"]) == 0
    assert capsys.readouterr().out == "Hello, redis-server!\n"