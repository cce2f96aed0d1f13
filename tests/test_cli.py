import json

import pytest

from tick_eta.cli import main


def test_cli_reports_progress_for_stdin_lines(tmp_path, restore_root_logging):
    log_path = tmp_path / "progress.log"
    lines = ["alpha\n", "\n", "gamma\n", "delta\n"]

    exit_code = main(
        [
            "--total",
            "4",
            "--every",
            "2",
            "--template",
            "{{done}}/{{total}} {{text}}",
            "--log-file",
            str(log_path),
        ],
        stdin=lines,
    )

    assert exit_code == 0
    messages = [line.split(" - ", 2)[-1] for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert messages == ["2/4 alpha", "4/4 delta"]


def test_cli_reads_template_from_config_file(tmp_path, restore_root_logging):
    log_path = tmp_path / "progress.log"
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"template": "[{{done}}]", "every": 5, "log_file": str(log_path)}),
        encoding="utf-8",
    )

    exit_code = main(["--total", "3", "--config", str(config_path)], stdin=["a\n", "b\n"])

    assert exit_code == 0
    messages = [line.split(" - ", 2)[-1] for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert messages == ["[2]"]


def test_cli_rejects_negative_total(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--total", "-1"], stdin=[])

    assert excinfo.value.code == 2
    assert "Total must be zero or greater" in capsys.readouterr().err


def test_cli_reports_invalid_config(tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--total", "1", "--config", str(config_path)], stdin=[])

    assert excinfo.value.code == 2
    assert "Could not load settings" in capsys.readouterr().err


def test_cli_reports_unusable_log_file(tmp_path, capsys, restore_root_logging):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--total", "1", "--log-file", str(blocker / "progress.log")], stdin=[])

    assert excinfo.value.code == 2
    assert "Could not open log file" in capsys.readouterr().err
