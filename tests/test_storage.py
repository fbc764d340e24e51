import pytest

from nissy.storage import TableStorage, timerun, write_table


def test_read_missing_key_returns_none(tmp_path):
    storage = TableStorage(tmp_path)
    assert storage.read("h48h0k4", 4) is None


def test_write_then_read_round_trip(tmp_path):
    storage = TableStorage(tmp_path)
    data = bytes(range(256)) * 3
    storage.write("h48h1k2", data)
    assert storage.read("h48h1k2", len(data)) == data


def test_read_returns_only_requested_prefix(tmp_path):
    storage = TableStorage(tmp_path)
    data = b"abcdefgh"
    storage.write("key", data)
    assert storage.read("key", 3) == data[:3]


def test_read_too_much_returns_none(tmp_path):
    storage = TableStorage(tmp_path)
    storage.write("key", b"abc")
    assert storage.read("key", 10) is None


def test_read_negative_size_raises(tmp_path):
    storage = TableStorage(tmp_path)
    with pytest.raises(ValueError):
        storage.read("key", -1)


def test_write_replaces_previous_data(tmp_path):
    storage = TableStorage(tmp_path)
    storage.write("key", b"first data")
    storage.write("key", b"second")
    assert storage.read("key", 6) == b"second"
    assert storage.read("key", 10) is None


def test_write_creates_prefix_directory(tmp_path):
    storage = TableStorage(tmp_path / "tables")
    storage.write("key", b"xyz")
    assert (tmp_path / "tables" / "key").read_bytes() == b"xyz"


def test_write_failure_raises_oserror(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    storage = TableStorage(blocker / "sub")
    with pytest.raises(OSError):
        storage.write("key", b"data")


def test_write_table_success(tmp_path, capsys):
    target = tmp_path / "table.bin"
    assert write_table(b"\x00\x01\x02", target) is True
    assert target.read_bytes() == b"\x00\x01\x02"
    assert capsys.readouterr().out == f"Table written to {target}.\n"


def test_write_table_failure(tmp_path, capsys):
    target = tmp_path / "missing" / "table.bin"
    assert write_table(b"data", target) is False
    out = capsys.readouterr().out
    assert out.startswith(f"Could not write tables to file {target}")
    assert not target.exists()


def test_timerun_calls_function_and_reports(capsys):
    calls = []
    elapsed = timerun(lambda: calls.append(1))
    assert calls == [1]
    assert elapsed >= 0.0
    out = capsys.readouterr().out
    assert out.startswith("---------\n")
    assert "Total time: " in out


def test_timerun_without_function_raises():
    with pytest.raises(ValueError):
        timerun(None)