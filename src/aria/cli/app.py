"""Main CLI application using Typer."""
import asyncio
import contextlib
from enum import Enum

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..chat import Notification
from ..preferences import ThemePreference
from .providers import build_coordinator, require_llm

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="aria",
    help="ARIA - Adaptive Reasoning & Intelligence Assistant",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()


class ThemeMode(str, Enum):
    """Theme command choices."""

    DARK = "dark"
    LIGHT = "light"
    TOGGLE = "toggle"


@app.command()
def chat(
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="LLM provider: gemini, openai or demo (default: $LLM_PROVIDER or gemini)"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (default: provider-specific environment variable)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    system_prompt: bool = typer.Option(
        False,
        "--system-prompt",
        help="Prepend the ARIA persona instruction to every request"
    ),
    login: bool = typer.Option(
        False,
        "--login",
        help="Require sign-in (process-local accounts) before chatting"
    ),
):
    """Launch the interactive chat interface."""
    async def _chat():
        from ..auth import InMemoryIdentityProvider
        from ..ui import run_textual_tui

        llm = require_llm(console, provider=provider, model=model)
        coordinator = build_coordinator(llm, system_prompt=system_prompt)

        try:
            await run_textual_tui(
                coordinator=coordinator,
                identity=InMemoryIdentityProvider() if login else None,
                preferences=ThemePreference(),
                log_level=log_level,
                provider_name=llm.name,
            )
        finally:
            with contextlib.suppress(Exception):
                await llm.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_chat())
    except KeyboardInterrupt:
        pass


@app.command()
def ask(
    text: list[str] = typer.Argument(..., help="Message to send"),
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="LLM provider: gemini, openai or demo"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name"
    ),
    system_prompt: bool = typer.Option(
        False,
        "--system-prompt",
        help="Prepend the ARIA persona instruction"
    ),
):
    """Send a single message and print ARIA's reply."""
    message = " ".join(text)
    if not message.strip():
        console.print("[red]Error: Nothing to send[/red]")
        raise typer.Exit(code=1)

    async def _ask() -> bool:
        llm = require_llm(console, provider=provider, model=model)
        coordinator = build_coordinator(llm, system_prompt=system_prompt)

        errors: list[Notification] = []
        coordinator.subscribe_notifications(
            lambda n: errors.append(n) if n.severity == "error" else None
        )

        try:
            with console.status("[dim]ARIA is thinking...[/dim]"):
                await coordinator.submit(message)
        finally:
            with contextlib.suppress(Exception):
                await llm.close()

        reply = coordinator.transcript.last
        if errors:
            console.print("[bold magenta]ARIA:[/bold magenta]")
            console.print(reply.content, style="red", markup=False, highlight=False, soft_wrap=True)
            console.print(f"[red]Error: {errors[0].message}[/red]")
            return False

        console.print("[bold magenta]ARIA:[/bold magenta]")
        console.print(reply.content, markup=False, highlight=False, soft_wrap=True)
        return True

    if not asyncio.run(_ask()):
        raise typer.Exit(code=1)


@app.command()
def theme(
    mode: ThemeMode | None = typer.Argument(
        None,
        help="dark, light or toggle (omit to show the current theme)"
    ),
):
    """Show or change the stored theme preference."""
    prefs = ThemePreference()

    try:
        if mode == ThemeMode.TOGGLE:
            dark = prefs.toggle()
        elif mode is not None:
            dark = mode == ThemeMode.DARK
            prefs.save(dark)
        else:
            dark = prefs.load()
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"Theme: [bold]{'dark' if dark else 'light'}[/bold]")
    console.print(f"[dim]{prefs.path}[/dim]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
