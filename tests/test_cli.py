"""Tests for CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner
from ethph_academy.cli import cli
from ethph_academy.config import Config


class TestRoutesCommand:
    """Tests for the routes command."""

    def test__lists_every_page(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["routes"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 31
        assert lines[0].startswith("/ ")
        assert any(line.startswith("/playground ") for line in lines)

    def test__tutorial__shows_sidebar_section(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["routes"])

        erc20 = next(
            line for line in result.output.splitlines() if line.startswith("/tutorials/erc20 ")
        )
        assert "ERC20 Token Standard" in erc20
        assert "(Smart Contracts)" in erc20

    def test__invalid_config__exits_with_error(self, tmp_path: Path) -> None:
        """Fail gracefully when the config file is malformed."""
        config_file = tmp_path / "academy.toml"
        config_file.write_text("[playground]\nfailure_rate = 2\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["routes", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test__missing_config__fails(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["routes", "--config", str(tmp_path / "nonexistent.toml")])

        assert result.exit_code != 0


class TestServeCommand:
    """Tests for the serve command."""

    @pytest.fixture
    def served(self, monkeypatch: pytest.MonkeyPatch) -> list[Config]:
        configs: list[Config] = []
        monkeypatch.setattr("ethph_academy.server.run_server", configs.append)
        return configs

    def test__options__override_config(self, tmp_path: Path, served: list[Config]) -> None:
        """Command-line options win over the config file."""
        config_file = tmp_path / "academy.toml"
        config_file.write_text('[server]\nport = 3000\n\n[site]\nname = "Mindanao Track"\n')

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["serve", "-c", str(config_file), "--host", "0.0.0.0", "--compile-delay", "0"],
        )

        assert result.exit_code == 0
        assert "Starting server on 0.0.0.0:3000" in result.output
        assert f"Configuration: {config_file}" in result.output
        assert "Site name: Mindanao Track" in result.output
        assert "Playground: compile delay 0.0s, failure rate 10%" in result.output
        assert len(served) == 1
        assert served[0].server.host == "0.0.0.0"
        assert served[0].playground.compile_delay == 0.0

    def test__verbose__enables_debug_logging(
        self,
        tmp_path: Path,
        served: list[Config],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)

        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "-v", "-p", "9000"])

        assert result.exit_code == 0
        assert served[0].server.port == 9000
        assert served[0].logging.level == "DEBUG"

    def test__negative_compile_delay__is_rejected(self, served: list[Config]) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "--compile-delay", "-1"])

        assert result.exit_code != 0
        assert served == []
