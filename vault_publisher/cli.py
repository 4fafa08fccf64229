"""
Vault Publisher CLI.

Command-line entry point standing in for the editor commands: export a
note to the Hugo site, publish it to the ingest endpoint, snapshot the
start page to HTML, or watch a note and export it whenever it changes.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from vault_publisher.config import Settings, config_path, load_settings, save_settings
from vault_publisher.core.debounce import Debouncer
from vault_publisher.core.eligibility import EligibilityFilter
from vault_publisher.core.models import NoteContext, VaultPublisherError
from vault_publisher.core.processor import ContentProcessor
from vault_publisher.core.publisher import Publisher
from vault_publisher.core.snapshot import StartPageExporter
from vault_publisher.core.vault import FileSystemVault

console = Console()

app = typer.Typer(
    name="vault-publisher",
    help="Export and publish notes from a markdown vault",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
config_app = typer.Typer(help="Show and change persisted settings")
app.add_typer(config_app, name="config")


@dataclass
class CliState:
    config: Optional[Path]
    vault: FileSystemVault

    def settings(self) -> Settings:
        return load_settings(self.config)

    def note(self, name: str) -> NoteContext:
        context = self.vault.note(name)
        if context is None:
            raise VaultPublisherError(f"Note not found in vault: {name}")
        return context

    def vault_name(self, settings: Settings) -> str:
        return settings.vault_name or self.vault.name


class ConsoleNotifier:
    """Shows notices on the console."""

    def notify(self, message: str) -> None:
        console.print(f"[bold]{escape(message)}[/bold]")


def setup_logging(verbose: bool = False) -> None:
    """Send log records through rich; DEBUG when verbose."""
    logging.getLogger().handlers.clear()
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_time=True, show_path=False, rich_tracebacks=True)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def build_processor(state: CliState, settings: Settings) -> ContentProcessor:
    return ContentProcessor(
        resolver=state.vault,
        content_dir=Path(settings.require("content_dir")),
        static_dir=Path(settings.require("static_dir")),
        eligibility=EligibilityFilter(require_publish_tag=settings.export_requires_publish_tag),
        strip_tag_lines=settings.strip_tag_lines,
        notifier=ConsoleNotifier(),
    )


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file"),
    vault: Path = typer.Option(Path("."), "--vault", help="Vault root directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Export and publish notes from a markdown vault."""
    setup_logging(verbose)
    ctx.obj = CliState(config=config, vault=FileSystemVault(vault))


@app.command()
def export(ctx: typer.Context, note: str = typer.Argument(..., help="Note name or path")):
    """Export a note and its images to the Hugo site."""
    state: CliState = ctx.obj
    try:
        processor = build_processor(state, state.settings())
        result = processor.export(state.note(note).snapshot())
    except VaultPublisherError as e:
        fail(str(e))

    if result.skipped:
        console.print(f"[yellow]Skipped {escape(result.note.filename)}:[/yellow] {escape(result.reason)}")
        return

    if result.images:
        table = Table(title="Images")
        table.add_column("Reference")
        table.add_column("Status")
        for outcome in result.images:
            table.add_row(escape(outcome.reference), outcome.status)
        console.print(table)

    if not result.written:
        raise typer.Exit(1)


@app.command()
def publish(ctx: typer.Context, note: str = typer.Argument(..., help="Note name or path")):
    """Publish a note tagged #publish to the ingest endpoint."""
    state: CliState = ctx.obj
    try:
        settings = state.settings()
        snapshot = state.note(note).snapshot()
        with Publisher(settings.require("publish_endpoint")) as publisher:
            result = publisher.publish(snapshot)
    except VaultPublisherError as e:
        fail(str(e))
    except httpx.HTTPError as e:
        fail(f"Publish request failed: {e}")

    if result is None:
        console.print(f"[yellow]Skipped {escape(snapshot.filename)}[/yellow]")
        return
    console.print(f"Published [bold]{escape(str(result.payload['title']))}[/bold] (HTTP {result.status_code})")


@app.command()
def snapshot(ctx: typer.Context, note: str = typer.Argument(..., help="Note name or path")):
    """Render the start page to a standalone HTML file."""
    state: CliState = ctx.obj
    try:
        settings = state.settings()
        exporter = StartPageExporter(
            export_path=settings.start_page_export_path,
            vault_name=state.vault_name(settings),
            page_name=settings.start_page_name,
            script=settings.start_page_script or None,
            notifier=ConsoleNotifier(),
        )
        result = exporter.export(state.note(note).snapshot())
    except VaultPublisherError as e:
        fail(str(e))

    if result is not None and not result.written:
        raise typer.Exit(1)


@app.command()
def watch(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note name or path"),
    interval: float = typer.Option(0.5, "--interval", help="Seconds between change checks"),
):
    """Export a note every time it changes, after edits settle."""
    state: CliState = ctx.obj
    try:
        settings = state.settings()
        processor = build_processor(state, settings)
        context = state.note(note)
    except VaultPublisherError as e:
        fail(str(e))

    debouncer = Debouncer(settings.auto_export_delay)

    def run_export() -> None:
        processor.export(context.snapshot())

    console.print(f"Watching [bold]{escape(str(context.path))}[/bold] (Ctrl+C to stop)")
    last_mtime = context.path.stat().st_mtime
    try:
        while True:
            time.sleep(interval)
            try:
                mtime = context.path.stat().st_mtime
            except FileNotFoundError:
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                debouncer.trigger(run_export)
    except KeyboardInterrupt:
        debouncer.cancel()
        console.print("Stopped watching")


@config_app.command("show")
def config_show(ctx: typer.Context):
    """Show current settings."""
    state: CliState = ctx.obj
    try:
        settings = state.settings()
    except VaultPublisherError as e:
        fail(str(e))

    table = Table(title=str(config_path(state.config)))
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in settings.to_dict().items():
        table.add_row(key, escape(str(value)))
    console.print(table)


@config_app.command("set")
def config_set(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Setting name"),
    value: str = typer.Argument(..., help="New value"),
):
    """Change one setting and save."""
    state: CliState = ctx.obj
    try:
        settings = state.settings()
        settings.update(key, value)
        path = save_settings(settings, state.config)
    except VaultPublisherError as e:
        fail(str(e))

    console.print(f"Saved {key} to {path}")


if __name__ == "__main__":
    app()
