"""
Tests for the flag table CLI.
"""

import io
import logging

import pytest
from rich.console import Console

from appsearch_flags import FlagName
from appsearch_flags.cli import build_flag_table, main
from appsearch_flags.flag_config import FlagConfig


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture(autouse=True)
def basic_config_calls(monkeypatch):
    """Record logging.basicConfig calls instead of reconfiguring the root logger."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


class TestCli:
    def test_root_logger_untouched(self, basic_config_calls):
        root_handlers = list(logging.getLogger().handlers)

        assert main(["--log-level", "DEBUG"], console=_console()) == 0

        assert logging.getLogger().handlers == root_handlers
        assert basic_config_calls[0]["level"] == logging.DEBUG
        assert basic_config_calls[0]["force"] is True

    def test_prints_every_flag(self):
        console = _console()

        assert main([], console=console) == 0

        output = console.file.getvalue()
        for flag in FlagName:
            assert flag.key in output
        assert "false" not in output

    def test_config_overrides(self, write_flag_file):
        path = write_flag_file("flags:\n  enable_grouping_type_per_schema: false\n")
        console = _console()

        assert main(["--config", str(path)], console=console) == 0

        assert "false" in console.file.getvalue()

    def test_configuration_error(self, tmp_path):
        console = _console()

        assert main(["--config", str(tmp_path / "missing.yaml")], console=console) == 2

        assert "Flag configuration error" in console.file.getvalue()

    def test_build_flag_table(self):
        table = build_flag_table(FlagConfig(enable_safe_parcelable=False))

        assert table.row_count == len(FlagName)
        assert [column.header for column in table.columns] == ["Key", "Accessor", "Enabled"]
