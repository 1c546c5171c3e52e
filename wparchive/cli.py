"""CLI entry point for wparchive."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.syntax import Syntax
from rich.table import Table

from wparchive.config import DEFAULT_CONFIG_TEMPLATE, ExportConfig, load_config
from wparchive.export import ArchiveExporter, DefaultDelegate, ExportReport
from wparchive.logging_setup import configure_logging
from wparchive.posts import FilePostReader
from wparchive.transform import ArchiveDelegate

app = typer.Typer(
    name="wparchive",
    help="Export blog posts into a dated Markdown archive with YAML front matter.",
)

config_app = typer.Typer(help="Manage wparchive configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: ExportConfig | None = None


def _get_config() -> ExportConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to wparchive.yaml")
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


def _display_report(report: ExportReport) -> None:
    title = "Dry Run — posts that would be exported" if report.dry_run else "Export"
    table = Table(title=f"{title} ({report.exported})")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Path", style="green")
    for p in report.posts:
        table.add_row(str(p.post_id), p.title or "-", p.path)
    rprint(table)

    summary = f"[green]Done.[/green] {report.exported} post(s) in {report.duration:.2f}s"
    if report.renamed:
        summary += f", [yellow]{report.renamed} renamed to avoid collisions[/yellow]"
    rprint(summary)


@app.command()
def export(
    source: Annotated[
        str | None, typer.Option("--source", "-s", help="Post dump (YAML or JSON)")
    ] = None,
    content_dir: Annotated[
        str | None, typer.Option("--content-dir", "-o", help="Output content directory")
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show paths without writing")] = False,
) -> None:
    """Export posts to the content directory."""
    cfg = _get_config()
    source_path = Path(source or cfg.source.path)
    if not source_path.is_file():
        rprint(f"[red]Error:[/red] post dump not found: {source_path}")
        raise typer.Exit(1)

    delegate = ArchiveDelegate(
        cfg.patterns,
        default=DefaultDelegate(),
        placeholder_slug=cfg.placeholder_slug,
    )
    exporter = ArchiveExporter(
        reader=FilePostReader(source_path, statuses=cfg.source.statuses),
        content_dir=content_dir or cfg.output.content_dir,
        delegate=delegate,
        archive_path=cfg.output.archive_path,
        extension=cfg.output.extension,
    )

    rprint(f"[bold]Exporting[/bold] {source_path} -> {exporter.content_dir}...")
    try:
        report = exporter.export(dry_run=dry_run)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except OSError as e:
        rprint(f"[red]I/O error:[/red] {e}")
        raise typer.Exit(1)

    _display_report(report)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False, sort_keys=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default wparchive.yaml in current directory."""
    target = Path("wparchive.yaml")
    if target.exists() and not force:
        rprint("[yellow]wparchive.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
