"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (panels, syntax, tables) in one module that
knows nothing about domain logic.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "NLG Formatter") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]", highlight=False)


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active formatter configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


def layout_table(rules: dict[str, str]) -> None:
    """Print the layout rule applied to each category."""
    table = Table(title="📐 Layout rules", show_header=True, border_style="blue")
    table.add_column("Category", style="cyan", width=12)
    table.add_column("Rule", style="green")
    for category, rule in rules.items():
        table.add_row(category, rule)
    console.print(table)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich; DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
