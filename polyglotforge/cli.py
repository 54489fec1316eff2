"""CLI entry point for PolyglotForge."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.syntax import Syntax

from polyglotforge.config import PolyglotForgeConfig, load_config
from polyglotforge.config.loader import DEFAULT_CONFIG_TEMPLATE
from polyglotforge.converter import (
    ConversionRequest,
    ConversionResult,
    ConvertedFile,
    InputFile,
    create_batch_converter,
)
from polyglotforge.intake import collect_files, snippet_file
from polyglotforge.logging_setup import configure_logging
from polyglotforge.output import build_tree, write_archive

app = typer.Typer(
    name="polyglotforge",
    help="Convert a folder or files to another language using AI.",
)

config_app = typer.Typer(help="Manage PolyglotForge configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: PolyglotForgeConfig | None = None


def _get_config() -> PolyglotForgeConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to polyglotforge.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _gather_inputs(paths: list[str], snippet: str | None) -> list[InputFile]:
    files = collect_files(paths)
    if snippet is not None:
        text = sys.stdin.read() if snippet == "-" else Path(snippet).read_text(
            encoding="utf-8", errors="replace"
        )
        pasted = snippet_file(text)
        if pasted is not None:
            files.append(pasted)
    return files


def _run_batch(cfg: PolyglotForgeConfig, request: ConversionRequest) -> ConversionResult:
    batch = create_batch_converter(cfg)
    with Progress(
        TextColumn("[bold]Converting[/bold]"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("{task.description}"),
    ) as progress:
        task = progress.add_task("", total=len(request.files))

        def on_progress(done: int, total: int, converted: ConvertedFile) -> None:
            progress.update(task, completed=done, description=escape(converted.path))

        return asyncio.run(batch.convert(request, on_progress=on_progress))


@app.command()
def convert(
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Files or directories to convert"),
    ] = None,
    to: Annotated[str, typer.Option("--to", "-t", help="Target language")] = "Python",
    version: Annotated[
        str | None,
        typer.Option("--version", "-v", help="Version / flavor, 'latest' lets the model pick"),
    ] = None,
    snippet: Annotated[
        str | None,
        typer.Option("--snippet", "-s", help="File with pasted code, or '-' for stdin"),
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="ZIP archive to write")
    ] = None,
    show_content: Annotated[
        bool, typer.Option("--show-content", help="Preview converted code in the tree")
    ] = False,
    dry_run: bool = typer.Option(False, "--dry-run", help="Convert but do not write the archive"),
) -> None:
    """Convert files with the configured LLM and package them as a ZIP."""
    cfg = _get_config()

    try:
        files = _gather_inputs(paths or [], snippet)
    except OSError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    if not files:
        rprint("[red]Error:[/red] No files provided. Pass paths or --snippet.")
        raise typer.Exit(1)

    request = ConversionRequest(
        files=files,
        target_language=to,
        target_version=version or cfg.conversion.default_version,
    )
    rprint(
        f"[bold]Converting[/bold] {len(files)} file(s) to {to} "
        f"(llm: {cfg.llm.provider})..."
    )

    try:
        result = _run_batch(cfg, request)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    rprint(build_tree(result.files, show_content=show_content))

    dest = write_archive(
        result.files, output or cfg.output.archive_name, dry_run=dry_run
    )
    rprint(
        Panel(
            f"[dim]Archive:[/dim]    {dest}{' (dry run)' if dry_run else ''}\n"
            f"[dim]Converted:[/dim]  {result.converted_count}\n"
            f"[dim]Fallback:[/dim]   {result.fallback_count}",
            title="Conversion Complete",
            border_style="yellow" if result.fallback_count else "green",
        )
    )
    if result.fallback_count == len(result.files):
        raise typer.Exit(2)


@app.command()
def serve(
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", "-p", help="Listen port")] = None,
) -> None:
    """Run the HTTP API (POST /api/convert, GET /api/health)."""
    from polyglotforge.server import run

    cfg = _get_config()
    try:
        run(cfg, host=host, port=port)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default polyglotforge.yaml in current directory."""
    target = Path("polyglotforge.yaml")
    if target.exists() and not force:
        rprint("[yellow]polyglotforge.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
