import logging

import pytest

import decode_log
import process_logs
from flightlog.schema import HEADER_LINE


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def log_file(tmp_path, line_factory):
    path = tmp_path / "session.csv"
    lines = [line_factory(i, current=6.0 if 11 <= i <= 30 else 0.0) for i in range(1, 41)]
    path.write_text("\n".join([HEADER_LINE, *lines]) + "\n")
    return path


def test_process_logs_prints_summary(log_file, capsys):
    process_logs.main([str(log_file)])
    out = capsys.readouterr().out
    assert "contains data for 1 LiPos worth of flights:" in out
    assert "LiPo 0: 00:20" in out
    assert log_file.with_name("session_processed.csv").exists()


def test_process_logs_exit_code_on_failure(log_file, tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        process_logs.main([str(tmp_path / "nope.csv"), str(log_file)])
    assert info.value.code == 1
    out = capsys.readouterr().out
    assert "[skipped]" in out
    assert "LiPo 0" in out


def test_process_logs_requires_a_path():
    with pytest.raises(SystemExit) as info:
        process_logs.main([])
    assert info.value.code == 2


def test_process_logs_rejects_bad_config(log_file):
    with pytest.raises(SystemExit) as info:
        process_logs.main([str(log_file), "--smooth-units", "0"])
    assert info.value.code == 2


def test_process_logs_pause(log_file, monkeypatch):
    prompts = []
    monkeypatch.setattr("builtins.input", lambda prompt="": prompts.append(prompt))
    process_logs.main([str(log_file), "--pause"])
    assert prompts == ["Finished, press Enter to close."]


def test_decode_log_summary(log_file, capsys):
    decode_log.main([str(log_file), "--summary"])
    out = capsys.readouterr().out
    assert "samples      : 40" in out
    assert "duration     : 39.000 s" in out


def test_decode_log_limit(log_file, capsys):
    decode_log.main([str(log_file), "--limit", "2"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert "'index': 1" in lines[0]


def test_process_logs_rejects_unknown_log_level(log_file, capsys):
    with pytest.raises(SystemExit) as info:
        process_logs.main([str(log_file), "--log-level", "verbose"])
    assert info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_process_logs_log_level_is_case_insensitive(log_file):
    process_logs.main([str(log_file), "--log-level", "info"])
    assert logging.getLogger().level == logging.INFO
