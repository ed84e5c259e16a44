"""Tests for the toolrunner CLI."""

import json

import pytest

from toolrunner.capabilities.registry import CapabilityRegistry
from toolrunner.cli import load_plan, load_registry, main
from toolrunner.models.state import ToolCallState


class TestLoadRegistry:

    def test_registry_attribute(self):
        registry = load_registry("tests.helpers.sample_registry:REGISTRY")
        assert registry.names() == ["get_price_snapshot", "get_delisted"]

    def test_iterable_attribute(self):
        registry = load_registry("tests.helpers.sample_registry:CAPABILITIES")
        assert isinstance(registry, CapabilityRegistry)
        assert len(registry) == 2

    def test_single_capability_attribute(self):
        registry = load_registry("tests.helpers.sample_registry:get_price_snapshot")
        assert registry.names() == ["get_price_snapshot"]

    def test_bad_spec(self):
        with pytest.raises(ValueError):
            load_registry("tests.helpers.sample_registry")


def test_load_plan(tmp_path):
    plan_path = tmp_path / "plan.json"
    plan_path.write_text(json.dumps([{"tool": "get_price_snapshot", "args": {"ticker": "AAPL"}}]))

    [call] = load_plan(str(plan_path))

    assert call.tool == "get_price_snapshot"
    assert call.args == {"ticker": "AAPL"}
    assert call.status is ToolCallState.PENDING


class TestMain:

    def test_capabilities_command(self, capsys):
        assert main(["capabilities", "--registry", "tests.helpers.sample_registry:REGISTRY"]) == 0
        out = capsys.readouterr().out
        assert "get_price_snapshot" in out
        assert "- ticker: The stock ticker symbol, e.g. 'AAPL'." in out

    def test_run_command_success(self, tmp_path, capsys):
        plan_path = tmp_path / "plan.json"
        plan_path.write_text(json.dumps([
            {"tool": "get_price_snapshot", "args": {"ticker": "aapl"}},
            {"tool": "get_price_snapshot", "args": {"ticker": "msft"}},
        ]))

        code = main([
            "run",
            "--registry", "tests.helpers.sample_registry:REGISTRY",
            "--plan", str(plan_path),
            "--correlation-id", "cli-1",
            "--context-dir", str(tmp_path / "ctx"),
        ])

        assert code == 0
        assert len(list((tmp_path / "ctx" / "cli-1").glob("*.json"))) == 2
        out = capsys.readouterr().out
        assert "#0 completed" in out
        assert "#1 completed" in out

    def test_run_command_failure_exit_code(self, tmp_path, capsys):
        plan_path = tmp_path / "plan.json"
        plan_path.write_text(json.dumps([{"tool": "get_delisted", "args": {"ticker": "ENRN"}}]))

        code = main([
            "run",
            "--registry", "tests.helpers.sample_registry:REGISTRY",
            "--plan", str(plan_path),
            "--context-dir", str(tmp_path / "ctx"),
        ])

        assert code == 1
        assert "No data for ENRN" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 2

    def test_help_ignores_malformed_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("TOOLRUNNER_MAX_CONCURRENT_TOOL_CALLS", "lots")

        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--help"])

        assert exc_info.value.code == 0
        assert "--max-concurrent" in capsys.readouterr().out
