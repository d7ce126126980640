"""Tests for the command line interface."""
import json

import pytest
from rich.console import Console
from typer.testing import CliRunner

from aria.chat import DEFAULT_ERROR_MESSAGE
from aria.cli import app as cli_app
from aria.cli.app import app
from aria.cli.providers import build_coordinator, get_llm, parse_delay
from aria.llm import DemoProvider, GeminiProvider, LLMProvider, NetworkError, OpenAIProvider
from aria.llm.providers.demo import DEMO_RESPONSES

runner = CliRunner()


class FailingProvider(LLMProvider):
    @property
    def model(self) -> str:
        return "failing"

    async def chat_completion(self, messages, model=None, temperature=0.7, max_tokens=None, **kwargs):
        raise NetworkError("connection refused")

    async def close(self) -> None:
        pass


@pytest.fixture
def demo_env(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "demo")
    monkeypatch.setenv("ARIA_DEMO_DELAY", "0")


@pytest.fixture
def quiet_console():
    return Console(quiet=True)


class TestParseDelay:
    def test_single_value(self):
        assert parse_delay("0.5") == (0.5, 0.5)

    def test_range(self):
        assert parse_delay("1, 3") == (1.0, 3.0)

    @pytest.mark.parametrize("value", ["", "fast", "1,2,3"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_delay(value)


class TestGetLLM:
    def test_gemini_without_key(self, monkeypatch, quiet_console):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        assert get_llm(quiet_console, provider="gemini") is None

    def test_gemini_with_key(self, monkeypatch, quiet_console):
        monkeypatch.setenv("GEMINI_API_KEY", "key")
        monkeypatch.setenv("GEMINI_MODEL", "gemini-test")

        llm = get_llm(quiet_console, provider="gemini")

        assert isinstance(llm, GeminiProvider)
        assert llm.model == "gemini-test"

    def test_openai_model_override(self, monkeypatch, quiet_console):
        monkeypatch.setenv("OPENAI_API_KEY", "key")

        llm = get_llm(quiet_console, provider="openai", model="gpt-test")

        assert isinstance(llm, OpenAIProvider)
        assert llm.model == "gpt-test"

    def test_demo_from_env(self, demo_env, quiet_console):
        assert isinstance(get_llm(quiet_console), DemoProvider)

    def test_bad_demo_delay(self, monkeypatch, quiet_console):
        monkeypatch.setenv("ARIA_DEMO_DELAY", "soon")
        assert get_llm(quiet_console, provider="demo") is None

    def test_unknown_provider(self, quiet_console):
        assert get_llm(quiet_console, provider="nope") is None

    def test_build_coordinator_system_prompt(self):
        with_prompt = build_coordinator(DemoProvider(delay=(0.0, 0.0)), system_prompt=True)
        without = build_coordinator(DemoProvider(delay=(0.0, 0.0)))

        assert with_prompt.client._system_prompt
        assert without.client._system_prompt is None
        assert without.busy is False
        assert len(without.transcript) == 0


class TestAskCommand:
    def test_demo_reply(self, demo_env):
        result = runner.invoke(app, ["ask", "Hello"])

        assert result.exit_code == 0, result.output
        assert "ARIA:" in result.output
        assert any(reply in result.output for reply in DEMO_RESPONSES)

    def test_blank_message(self, demo_env):
        result = runner.invoke(app, ["ask", "   "])

        assert result.exit_code == 1
        assert "Nothing to send" in result.output

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)

        result = runner.invoke(app, ["ask", "--provider", "gemini", "Hello"])

        assert result.exit_code == 1
        assert "not configured" in result.output

    def test_failed_round_trip(self, monkeypatch):
        monkeypatch.setattr(cli_app, "require_llm", lambda *args, **kwargs: FailingProvider())

        result = runner.invoke(app, ["ask", "Hello"])

        assert result.exit_code == 1
        assert "Failed to get response from AI" in result.output
        assert DEFAULT_ERROR_MESSAGE in result.output


class TestThemeCommand:
    def test_set_and_show(self, preferences_path):
        result = runner.invoke(app, ["theme", "dark"])
        assert result.exit_code == 0, result.output
        assert "Theme: dark" in result.output
        assert json.loads(preferences_path.read_text()) == {"darkMode": True}

        result = runner.invoke(app, ["theme"])
        assert "Theme: dark" in result.output

    def test_toggle(self, preferences_path):
        result = runner.invoke(app, ["theme", "toggle"])
        assert "Theme: dark" in result.output

        result = runner.invoke(app, ["theme", "toggle"])
        assert "Theme: light" in result.output

    def test_default_is_light(self, preferences_path):
        result = runner.invoke(app, ["theme"])
        assert "Theme: light" in result.output
