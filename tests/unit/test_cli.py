"""Unit tests for the command-line entry point."""

import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from space_scanner.__main__ import (
    EXIT_CONFIG_ERROR,
    EXIT_SCAN_ERROR,
    EXIT_SUCCESS,
    build_parser,
    main,
    run,
)
from space_scanner.core.config import OutputFormat
from space_scanner.types.models import Volume


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the logging configuration each CLI run installs."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestParser:
    """Test argument parsing."""

    def test_list_command(self) -> None:
        args = build_parser().parse_args(["list", "/tmp"])

        assert args.command == "list"
        assert args.path == "/tmp"
        assert args.config is None
        assert args.format is None

    def test_global_options(self) -> None:
        args = build_parser().parse_args(
            ["--format", "json", "--log-level", "DEBUG", "--raw-sizes", "-c", "x.yaml", "volumes", "--all"]
        )

        assert args.format is OutputFormat.JSON
        assert args.log_level == "DEBUG"
        assert args.raw_sizes is True
        assert args.config == Path("x.yaml")
        assert args.all_partitions is True

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            _ = build_parser().parse_args([])


@pytest.mark.unit
class TestListCommand:
    """Test `list PATH`."""

    def test_json_output(self, scenario_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(["--format", "json", "list", str(scenario_root)])

        assert exit_code == EXIT_SUCCESS
        payload = json.loads(capsys.readouterr().out)
        assert payload == [
            {"name": "docs", "path": str(scenario_root / "docs"), "is_directory": True, "size_bytes": 10},
            {"name": "c.txt", "path": str(scenario_root / "c.txt"), "is_directory": False, "size_bytes": 5},
        ]

    def test_table_output(self, scenario_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(["list", str(scenario_root)])

        out = capsys.readouterr().out.splitlines()
        assert exit_code == EXIT_SUCCESS
        assert out[2].split() == ["dir", "10", "Bytes", "docs/"]
        assert out[3].split() == ["file", "5", "Bytes", "c.txt"]

    def test_empty_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["list", str(tmp_path)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == "(empty)"

    def test_missing_path(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(["list", str(tmp_path / "missing")])

        captured = capsys.readouterr()
        assert exit_code == EXIT_SCAN_ERROR
        assert "does not exist" in captured.err
        assert captured.out == ""

    def test_not_a_directory_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        plain = tmp_path / "plain.txt"
        _ = plain.write_text("x")

        exit_code = run(["--format", "json", "list", str(plain)])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_SCAN_ERROR
        assert payload["error"]["kind"] == "not_a_directory"
        assert payload["error"]["path"] == str(plain)


@pytest.fixture
def undecodable_name_dir(tmp_path: Path) -> Path:
    """Directory holding a 3-byte file whose name is not valid UTF-8."""
    raw_path = os.path.join(os.fsencode(tmp_path), b"bad\xff.txt")
    try:
        with open(raw_path, "wb") as fh:
            _ = fh.write(b"abc")
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 file names")
    return tmp_path


@pytest.mark.unit
class TestUndecodableNames:
    """Test listing names that are not valid UTF-8."""

    def test_json_output(self, undecodable_name_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(["--format", "json", "list", str(undecodable_name_dir)])

        [entry] = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_SUCCESS
        assert entry["name"] == os.fsdecode(b"bad\xff.txt")
        assert entry["size_bytes"] == 3

    def test_table_output(self, undecodable_name_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(["list", str(undecodable_name_dir)])

        out = capsys.readouterr().out.splitlines()
        assert exit_code == EXIT_SUCCESS
        assert out[2].split() == ["file", "3", "Bytes", "bad\ufffd.txt"]


@pytest.mark.unit
class TestVolumesCommand:
    """Test `volumes`."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        volumes = [Volume(name="/ (/dev/sda1)", mount_path="/", total_bytes=100, available_bytes=60)]

        with patch("space_scanner.__main__.list_volumes", return_value=volumes) as mock_list:
            exit_code = run(["--format", "json", "volumes", "--all"])

        assert exit_code == EXIT_SUCCESS
        mock_list.assert_called_once_with(all_partitions=True)
        assert json.loads(capsys.readouterr().out) == [
            {"name": "/ (/dev/sda1)", "mount_path": "/", "total_bytes": 100, "available_bytes": 60}
        ]

    def test_table_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        volumes = [Volume(name="/mnt", mount_path="/mnt", total_bytes=0, available_bytes=0)]

        with patch("space_scanner.__main__.list_volumes", return_value=volumes):
            exit_code = run(["volumes"])

        out = capsys.readouterr().out.splitlines()
        assert exit_code == EXIT_SUCCESS
        assert out[2].split() == ["/mnt", "/mnt", "-", "-", "-"]

    def test_no_volumes(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("space_scanner.__main__.list_volumes", return_value=[]):
            exit_code = run(["volumes"])

        assert exit_code == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == "No volumes found"

    def test_no_volumes_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("space_scanner.__main__.list_volumes", return_value=[]):
            _ = run(["--format", "json", "volumes"])

        assert json.loads(capsys.readouterr().out) == []


@pytest.mark.unit
class TestConfiguration:
    """Test config file handling from the command line."""

    def test_config_file_sets_format(
        self, tmp_path: Path, scenario_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config_file = tmp_path / "scanner.yaml"
        _ = config_file.write_text("output:\n  format: json\n")

        assert run(["--config", str(config_file), "list", str(scenario_root)]) == EXIT_SUCCESS
        assert isinstance(json.loads(capsys.readouterr().out), list)

    def test_cli_overrides_config(
        self, tmp_path: Path, scenario_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config_file = tmp_path / "scanner.yaml"
        _ = config_file.write_text("output:\n  format: json\n")

        _ = run(["--config", str(config_file), "--format", "table", "list", str(scenario_root)])

        assert capsys.readouterr().out.startswith("TYPE")

    def test_log_level_override(self, scenario_root: Path) -> None:
        _ = run(["--log-level", "DEBUG", "list", str(scenario_root)])

        assert logging.getLogger().level == logging.DEBUG

    def test_missing_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(["--config", str(tmp_path / "absent.yaml"), "volumes"])

        assert exit_code == EXIT_CONFIG_ERROR
        assert "Configuration error" in capsys.readouterr().err


@pytest.mark.unit
class TestMain:
    """Test the console-script wrapper."""

    def test_exits_with_run_result(self) -> None:
        with patch("space_scanner.__main__.run", return_value=EXIT_SCAN_ERROR):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == EXIT_SCAN_ERROR

    def test_keyboard_interrupt(self) -> None:
        with patch("space_scanner.__main__.run", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 130
