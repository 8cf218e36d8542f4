"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
No direct imports from infrastructure/ here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from nlg_formatter.domain.errors import FormatterError
from nlg_formatter.presentation.cli.formatters import (
    configure_logging,
    error_message,
    json_panel,
    layout_table,
    success_panel,
)

app = typer.Typer(
    name="nlgfmt",
    help="📄 Lay out realised NLG document trees as plain text",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Inspect formatter configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


# ---------------------------------------------------------------------------
# nlgfmt render
# ---------------------------------------------------------------------------


@app.command()
def render(
    source: Annotated[str, typer.Argument(help="JSON document tree to render")],
    output: Annotated[
        Optional[str], typer.Option("--output", "-o", help="Write the text to this file")
    ] = None,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Render a serialized document tree to plain text."""
    from nlg_formatter.bootstrap import Container

    configure_logging(verbose)

    try:
        container = Container(config_path=config)
        uc = container.render_document()
        text = uc.execute(Path(source), Path(output) if output else None)
    except FormatterError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    if output:
        success_panel(f"✅ Text written to: [bold green]{output}[/]")
    else:
        typer.echo(text)


# ---------------------------------------------------------------------------
# nlgfmt demo
# ---------------------------------------------------------------------------


@app.command()
def demo(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Where to save the demo tree")
    ] = "demo_document.json",
    title: Annotated[str, typer.Option("--title", "-t", help="Document title")] = "Weekly Report",
) -> None:
    """Write a sample document tree that exercises every layout rule."""
    from nlg_formatter.bootstrap import Container

    container = Container()
    doc = container.generate_demo().execute(title=title)
    dest = Path(output)
    try:
        container.source.save([doc], dest)
    except OSError as e:
        error_message(f"Could not write {dest}: {e}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Demo tree written to: [bold green]{dest}[/]\n\n"
        f'Render it with:\n  nlgfmt render "{dest}"',
        title="🎓 Demo",
    )


# ---------------------------------------------------------------------------
# nlgfmt rules
# ---------------------------------------------------------------------------


@app.command()
def rules() -> None:
    """Show the layout rule applied to each category."""
    from nlg_formatter.rules.constants import (
        LIST_ITEM_BULLET,
        PARAGRAPH_TERMINATOR,
        SENTENCE_SEPARATOR,
        TITLE_SEPARATOR,
    )

    layout_table(
        {
            "document": f"title + {TITLE_SEPARATOR!r}, then children back to back",
            "section": f"title + {TITLE_SEPARATOR!r}, then children back to back",
            "list": f"title + {TITLE_SEPARATOR!r}, then children back to back",
            "paragraph": f"children joined by {SENTENCE_SEPARATOR!r}, then {PARAGRAPH_TERMINATOR!r}",
            "sentence": "own text verbatim",
            "list_item": f"{LIST_ITEM_BULLET!r} + own text",
            "(other)": "nothing",
        }
    )


# ---------------------------------------------------------------------------
# nlgfmt config show / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """Show the active formatter configuration."""
    from nlg_formatter.config import get_config, load_config

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except (FileNotFoundError, ValueError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON configuration file to validate")],
) -> None:
    """Validate a formatter configuration file."""
    from nlg_formatter.config import load_config

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_config(path)
    except ValueError as e:
        error_message(f"Validation error:\n\n{e}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Name: [cyan]{cfg.metadata.name}[/] (v{cfg.metadata.version})\n"
        f"  Max depth: [cyan]{cfg.realisation.max_depth}[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
