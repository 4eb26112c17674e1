import pytest

from redistool.check_rdb import main
from redistool.version import check_rdb_version


@pytest.mark.parametrize("args", [[], ["a.rdb", "b.rdb"]])
def test_wrong_argument_count(args, capsys):
    with pytest.raises(SystemExit) as exc:
        main(args)
    assert exc.value.code == 1
    assert capsys.readouterr().out == "Usage: redis-check-rdb <rdb-file-name>\n"


@pytest.mark.parametrize("flag", ["-v", "--version"])
def test_version(flag, capsys):
    assert main([flag]) == 0
    assert capsys.readouterr().out == check_rdb_version() + "\n"


def test_checks_named_file(capsys):
    assert main(["dump.rdb"]) == 0
    assert capsys.readouterr().out == "[offset 0] Checking RDB file dump.rdb\n"