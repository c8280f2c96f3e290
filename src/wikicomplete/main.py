import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wikicomplete.application.detector import ContextDetector
from wikicomplete.application.setup import build_provider
from wikicomplete.config import CompletionConfig, load_config
from wikicomplete.logger import get_logger, setup_logger

load_dotenv()

console = Console()

cli = typer.Typer(
    name="wikicomplete",
    help="Wiki link and tag completion backed by a SQLite notes index",
    epilog="""
    Examples:
    $ wikicomplete edit notes/today.md --db ~/notes/markdown_data.db
    $ wikicomplete suggest "See [[Pro" --debug
    """,
    add_completion=False,
)

ConfigOption = typer.Option(
    os.getenv("WIKICOMPLETE_CONFIG"),
    "--config",
    "-c",
    help="JSON configuration file",
)
DbOption = typer.Option(os.getenv("WIKICOMPLETE_DB_PATH"), "--db", help="SQLite database to query")
DebugOption = typer.Option(
    os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"
)


def _load(config_path: Optional[Path], db: Optional[str], debug: bool, console_output: bool = False) -> CompletionConfig:
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        # ValidationError and JSONDecodeError are both ValueErrors
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    config = config.with_overrides(db_path=db, debug=debug or None)
    setup_logger(log_level="DEBUG" if config.debug else "INFO", console_output=console_output)
    return config


@cli.command()
def edit(
    path: Path = typer.Argument(..., help="Markdown file to edit (created on save)"),
    config_path: Optional[Path] = ConfigOption,
    db: Optional[str] = DbOption,
    debug: bool = DebugOption,
):
    """Open PATH in the editor with completion enabled."""
    from wikicomplete.presentation import CompletionApp

    config = _load(config_path, db, debug)
    logger = get_logger("main")
    logger.info(f"Starting editor for {path}")
    CompletionApp(config, path=path).run()


@cli.command()
def suggest(
    text: str = typer.Argument(..., help="Text before the cursor, e.g. 'See [[Pro'"),
    config_path: Optional[Path] = ConfigOption,
    db: Optional[str] = DbOption,
    debug: bool = DebugOption,
):
    """Print the suggestions the editor would offer after TEXT."""
    config = _load(config_path, db, debug, console_output=True)
    context = ContextDetector(config.triggers).detect(text)
    if context is None:
        console.print("[yellow]No trigger matches the end of the text[/yellow]")
        raise typer.Exit(code=1)

    provider = build_provider(config)
    if not provider.meets_threshold(context):
        console.print(
            f"[yellow]Prefix {escape(repr(context.raw_prefix))} is shorter than {config.min_chars} characters[/yellow]"
        )
        raise typer.Exit(code=1)

    suggestions = provider.fetch(context)
    table = Table(title=escape(f"{context.trigger.name}: {context.raw_prefix!r}"))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Word", style="bold")
    table.add_column("Kind")
    table.add_column("Inserted as")
    for index, suggestion in enumerate(suggestions, start=1):
        table.add_row(
            str(index),
            escape(suggestion.word),
            escape(suggestion.kind),
            escape(f"{context.trigger.trigger_text}{suggestion.word}{context.trigger.stop_delimiter}"),
        )
    console.print(table)
    if not suggestions:
        console.print("[dim]No suggestions (missing store, failed query or no rows)[/dim]")


@cli.command()
def triggers(
    config_path: Optional[Path] = ConfigOption,
):
    """List configured triggers in priority order."""
    config = _load(config_path, None, False)
    table = Table(title="Triggers")
    for column in ("Key", "Name", "Trigger", "Pattern", "Stop", "Kind"):
        table.add_column(column)
    for definition in config.triggers:
        table.add_row(
            escape(definition.key),
            escape(definition.name),
            escape(definition.trigger_text),
            escape(definition.match_pattern),
            escape(repr(definition.stop_delimiter)),
            escape(definition.display_kind),
        )
    console.print(table)


def run() -> None:
    cli()


if __name__ == "__main__":
    run()
