"""
Tests for the gobench-client command line interface.
"""

import logging
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from gobench_client.cli.error_handler import (
    EXIT_API,
    EXIT_CONFIGURATION,
    EXIT_CONNECTION,
    EXIT_VALIDATION,
    exit_code_for,
    handle_cli_exceptions,
)
from gobench_client.cli.main import cli
from gobench_client.exceptions import (
    ApiConnectionError,
    ApiResponseError,
    ConfigurationValidationError,
    MissingNameError,
)
from gobench_client.logging import logging_manager

pytestmark = pytest.mark.usefixtures("clean_environment")


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in logging_manager.handlers:
        root.removeHandler(handler)
        handler.close()
    logging_manager.handlers.clear()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def written_config(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text('[api]\nbase_url = "http://bench:6891"\n')
    return config_file


@pytest.fixture
def invoke(runner, written_config, fake_gateway):
    """Run the CLI against the in-memory gateway."""

    def run(*args, gateway=None):
        with patch(
            "gobench_client.cli.main.AsyncApplicationGateway",
            return_value=gateway or fake_gateway,
        ):
            return runner.invoke(cli, ["--config", str(written_config), *args])

    return run


@pytest.fixture
def scenario_file(temp_dir):
    path = temp_dir / "scenario.go"
    path.write_text("package main\n\n// 負荷\nfunc main() {}\n", encoding="utf-8")
    return path


class TestListCommand:
    def test_lists_applications(self, invoke, fake_gateway):
        result = invoke("list")

        assert result.exit_code == 0
        assert "load-test" in result.output
        assert "smoke" in result.output
        assert "running" in result.output
        assert fake_gateway.closed

    def test_empty_collection(self, invoke, empty_gateway):
        result = invoke("list", gateway=empty_gateway)

        assert result.exit_code == 0
        assert "No applications yet" in result.output

    def test_unreachable_master(self, invoke, fake_gateway):
        fake_gateway.failures["list"] = ApiConnectionError("list", "http://bench:6891/api/applications")

        result = invoke("list")

        assert result.exit_code == EXIT_CONNECTION
        assert "connection to http://bench:6891/api/applications failed" in result.output


class TestCreateCommand:
    def test_create(self, invoke, fake_gateway, scenario_file):
        result = invoke("create", "--name", "fresh", "--scenario-file", str(scenario_file))

        assert result.exit_code == 0, result.output
        assert "Created application fresh (100)" in result.output
        assert "/application/100" in result.output
        assert fake_gateway.apps[-1].scenario == scenario_file.read_text(encoding="utf-8")

    def test_blank_name(self, invoke, fake_gateway, scenario_file):
        result = invoke("create", "--name", "  ", "--scenario-file", str(scenario_file))

        assert result.exit_code == EXIT_VALIDATION
        assert "name is required." in result.output
        assert fake_gateway.count("create") == 0

    def test_empty_scenario_from_stdin(self, runner, written_config, fake_gateway):
        with patch("gobench_client.cli.main.AsyncApplicationGateway", return_value=fake_gateway):
            result = runner.invoke(
                cli,
                ["--config", str(written_config), "create", "-n", "x", "-f", "-"],
                input="",
            )

        assert result.exit_code == EXIT_VALIDATION
        assert "scenario is required." in result.output

    def test_requires_options(self, invoke):
        result = invoke("create")
        assert result.exit_code == 2
        assert "Missing option" in result.output


class TestCloneCommand:
    def test_clone_with_explicit_name(self, invoke, fake_gateway, sample_apps):
        result = invoke("clone", "load-test", "--name", "copy")

        assert result.exit_code == 0, result.output
        assert "Cloned load-test as copy (100)" in result.output
        assert fake_gateway.apps[-1].scenario == sample_apps[0].scenario

    def test_clone_default_name_is_timestamped(self, invoke, fake_gateway):
        result = invoke("clone", "smoke")

        assert result.exit_code == 0, result.output
        assert fake_gateway.apps[-1].name.startswith("smoke-")

    def test_clone_with_replacement_scenario(self, invoke, fake_gateway, scenario_file):
        invoke("clone", "smoke", "-n", "copy", "-f", str(scenario_file))
        assert fake_gateway.apps[-1].scenario == scenario_file.read_text(encoding="utf-8")

    def test_unknown_source(self, invoke, fake_gateway):
        result = invoke("clone", "ghost")

        assert result.exit_code == EXIT_VALIDATION
        assert "application 'ghost' not found." in result.output
        assert fake_gateway.count("create") == 0

    def test_unreachable_master_reports_load_error_only(self, invoke, fake_gateway):
        fake_gateway.failures["list"] = ApiConnectionError("list", "http://bench:6891/api/applications")

        result = invoke("clone", "load-test")

        assert result.exit_code == EXIT_CONNECTION
        assert "connection to http://bench:6891/api/applications failed" in result.output
        assert "not found" not in result.output
        assert fake_gateway.count("create") == 0


class TestDeleteAndCancel:
    def test_delete(self, invoke, fake_gateway):
        result = invoke("delete", "1")

        assert result.exit_code == 0
        assert "Deleted application 1" in result.output
        assert [a.name for a in fake_gateway.apps] == ["smoke"]

    def test_delete_unknown(self, invoke):
        result = invoke("delete", "404")

        assert result.exit_code == EXIT_API
        assert "Application 404 not found" in result.output

    def test_cancel_shows_refreshed_status(self, invoke, fake_gateway):
        result = invoke("cancel", "2")

        assert result.exit_code == 0
        assert "Cancel requested for application 2" in result.output
        assert "cancel" in result.output
        assert fake_gateway.apps[1].status == "cancel"

    def test_cancel_backend_error(self, invoke, fake_gateway):
        fake_gateway.failures["cancel"] = ApiResponseError("cancel", 500)

        result = invoke("cancel", "2")

        assert result.exit_code == EXIT_API
        assert "backend answered HTTP 500" in result.output


class TestWatchCommand:
    def test_watch_stops_after_count(self, invoke, fake_gateway):
        result = invoke("watch", "--interval", "0.01", "--count", "2")

        assert result.exit_code == 0, result.output
        assert fake_gateway.count("list") >= 2
        assert result.output.count("load-test") >= 2


class TestConfigCommands:
    def test_show_effective_config(self, invoke):
        result = invoke("config", "show")

        assert result.exit_code == 0
        assert "http://bench:6891" in result.output

    def test_api_url_option_overrides_file(self, runner, written_config):
        result = runner.invoke(
            cli, ["--config", str(written_config), "--api-url", "http://other:7000/", "config", "show"]
        )

        assert result.exit_code == 0
        assert "http://other:7000" in result.output

    def test_init_refuses_to_overwrite(self, invoke):
        result = invoke("config", "init")

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_init_writes_default_location(self, runner, temp_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(temp_dir))

        result = runner.invoke(cli, ["config", "init"])

        assert result.exit_code == 0, result.output
        assert (temp_dir / ".config" / "gobench-client" / "config.toml").exists()

    def test_invalid_config_file(self, runner, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text('[api]\nbase_url = "ftp://bench"\n')

        result = runner.invoke(cli, ["--config", str(config_file), "list"])

        assert isinstance(result.exception, ConfigurationValidationError)


class TestErrorHandler:
    @pytest.mark.parametrize("error,code", [
        (MissingNameError(), EXIT_VALIDATION),
        (ConfigurationValidationError(["api.base_url: bad"]), EXIT_CONFIGURATION),
        (ApiConnectionError("list", "http://x"), EXIT_CONNECTION),
        (ApiResponseError("list", 500), EXIT_API),
        (RuntimeError("x"), 1),
    ])
    def test_exit_codes(self, error, code):
        assert exit_code_for(error) == code

    def test_client_error_is_printed_and_mapped(self, capsys):
        from rich.console import Console

        @click.command()
        def failing():
            raise ConfigurationValidationError(["api.base_url: bad"])

        with patch("sys.argv", ["gobench-client"]):
            with pytest.raises(SystemExit) as exc_info:
                handle_cli_exceptions(Console(), failing)

        assert exc_info.value.code == EXIT_CONFIGURATION
        assert "Configuration validation failed" in capsys.readouterr().out

    def test_keyboard_interrupt(self):
        from rich.console import Console

        @click.command()
        def interrupted():
            raise KeyboardInterrupt

        with patch("sys.argv", ["gobench-client"]):
            with pytest.raises(SystemExit) as exc_info:
                handle_cli_exceptions(Console(), interrupted)

        assert exc_info.value.code == 130
