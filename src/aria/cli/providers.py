"""Provider factory functions for CLI.

Centralizes creation of the LLM provider and the chat session from
environment variables. Hides configuration details from command
implementations.
"""

import os
from typing import Any

import typer
from rich.console import Console

from ..chat import CompletionClient, SendCoordinator
from ..llm import LLMProvider, create_llm_provider
from ..prompts import get_system_prompt

# Default console for output
_console = Console()

DEFAULT_PROVIDER = "gemini"


def parse_delay(value: str) -> tuple[float, float]:
    """Parse ARIA_DEMO_DELAY: either 'seconds' or 'min,max'."""
    parts = [p.strip() for p in value.split(",") if p.strip()]
    try:
        numbers = [float(p) for p in parts]
    except ValueError as e:
        raise ValueError(f"Invalid ARIA_DEMO_DELAY: {value!r}") from e
    if len(numbers) == 1:
        return numbers[0], numbers[0]
    if len(numbers) == 2:
        return numbers[0], numbers[1]
    raise ValueError(f"Invalid ARIA_DEMO_DELAY: {value!r}")


def get_llm(
    console: Console | None = None,
    provider: str | None = None,
    model: str | None = None,
) -> LLMProvider | None:
    """Create LLM provider from environment variables.

    Args:
        console: Optional Rich console for output
        provider: Provider name overriding LLM_PROVIDER
        model: Model name overriding the provider-specific variable

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        LLM_PROVIDER: Provider type (gemini, openai, demo; default: gemini)
        GEMINI_API_KEY: Gemini API key (for gemini provider)
        GEMINI_MODEL: Gemini model (default: gemini-1.5-flash)
        OPENAI_API_KEY: OpenAI API key (for openai provider)
        OPENAI_CHAT_MODEL: OpenAI model (default: gpt-3.5-turbo)
        OPENAI_BASE_URL: Optional OpenAI-compatible endpoint
        ARIA_DEMO_DELAY: Demo reply delay, 'seconds' or 'min,max' (default: 1,3)
    """
    con = console or _console
    llm_provider = (provider or os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER)).lower()

    if llm_provider == "gemini":
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: GEMINI_API_KEY not set, LLM features disabled[/yellow]")
            return None
        return create_llm_provider(
            "gemini",
            api_key=api_key,
            model=model or os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
        )

    elif llm_provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: OPENAI_API_KEY not set, LLM features disabled[/yellow]")
            return None
        return create_llm_provider(
            "openai",
            api_key=api_key,
            model=model or os.getenv("OPENAI_CHAT_MODEL", "gpt-3.5-turbo"),
            base_url=os.getenv("OPENAI_BASE_URL") or None,
        )

    elif llm_provider == "demo":
        config: dict[str, Any] = {}
        delay = os.getenv("ARIA_DEMO_DELAY")
        if delay:
            try:
                config["delay"] = parse_delay(delay)
            except ValueError as e:
                con.print(f"[red]Error: {e}[/red]")
                return None
        return create_llm_provider("demo", **config)

    else:
        con.print(f"[red]Error: Unknown LLM provider: {llm_provider}[/red]")
        return None


def require_llm(
    console: Console | None = None,
    provider: str | None = None,
    model: str | None = None,
) -> LLMProvider:
    """Get LLM provider, raising error if not configured.

    Raises:
        typer.Exit: If LLM provider is not configured
    """
    con = console or _console
    llm = get_llm(con, provider=provider, model=model)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        con.print("[dim]Set an API key, or try LLM_PROVIDER=demo for offline mode.[/dim]")
        raise typer.Exit(code=1)
    return llm


def build_coordinator(llm: LLMProvider, system_prompt: bool = False) -> SendCoordinator:
    """Wire a fresh chat session around a provider.

    Args:
        llm: Provider used for every round trip
        system_prompt: Prepend the ARIA persona instruction to each request
    """
    client = CompletionClient(
        llm,
        system_prompt=get_system_prompt() if system_prompt else None,
    )
    return SendCoordinator(client)
