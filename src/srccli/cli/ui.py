"""Shared UI components for the src CLI."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

theme = Theme(
    {
        "info": "dim cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "tip": "blue",
        "suggestion": "italic dim",
        "command": "white",
    }
)

console = Console(theme=theme)
error_console = Console(theme=theme, stderr=True)


def print_error(title: str, message: str, tip: str | None = None) -> None:
    """Print a styled error message with an optional actionable tip."""
    content = Text()
    content.append(f"{message}\n", style="white")

    if tip:
        content.append("\nTip: ", style="bold blue")
        content.append(tip, style="blue")

    error_console.print(
        Panel(
            content,
            title=f"[bold red]Error: {title}[/bold red]",
            border_style="red",
            padding=(1, 1),
        )
    )


def print_success(message: str) -> None:
    console.print(Text.assemble(("✓ ", "success"), message), soft_wrap=True)


def print_info(message: str) -> None:
    console.print(Text.assemble(("ℹ ", "info"), message), soft_wrap=True)


def print_warning(message: str) -> None:
    error_console.print(Text.assemble(("! ", "warning"), (message, "warning")), soft_wrap=True)


def print_suggestion(message: str) -> None:
    console.print(Text(message, style="suggestion"), soft_wrap=True)


def print_command_block(title: str, commands: Iterable[str]) -> None:
    """Print a titled block of shell commands.

    Commands are printed without wrapping or markup so they can be copied as-is.
    """
    print_success(title)
    console.print()
    for command in commands:
        console.print(Text(f"  {command}", style="command"), soft_wrap=True)
    console.print()
