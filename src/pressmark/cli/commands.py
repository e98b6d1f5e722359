"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from pressmark.config import Settings, load_config
from pressmark.core.export import build_markdown_export
from pressmark.core.models import Metadata
from pressmark.core.pipeline import load_source, prepare, run_export, run_render


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _source(path: str) -> tuple[Metadata, str]:
    """Load a single source file with standard CLI error handling."""
    p = Path(path)
    if not p.is_file():
        _fail(f"Not a file: {path}")
    try:
        return load_source(p)
    except ValueError as e:
        _fail(f"Could not read {path}", e)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Source file or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    no_tracking: Annotated[bool, typer.Option("--no-tracking", help="Leave link targets untouched")] = False,
    break_level: Annotated[Optional[int], typer.Option("--section-break-level", help="Heading level that opens a new print section; 0 = one section")] = None,
    hoist: Annotated[Optional[bool], typer.Option("--hoist-callouts/--no-hoist-callouts", help="Print callouts ahead of other content")] = None,
    ):
    """Write <slug>.html, <slug>.print.json and <slug>.post.json for each source."""
    settings = _settings(overrides={
        "output_dir": out, "section_break_level": break_level, "hoist_callouts": hoist,
        "track_links": False if no_tracking else None,
    })
    output_dir = Path(settings.output_dir)
    try:
        results = run_export(path, settings, output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No source files found under {path}.")
        raise typer.Exit(1)
    for src, html_path in results:
        typer.echo(f"  {src} -> {html_path}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def parse_cmd(
    path: Annotated[str, typer.Argument(help="Source file to parse")],
    no_tracking: Annotated[bool, typer.Option("--no-tracking", help="Leave link targets untouched")] = False,
    ):
    """Print the parsed block sequence as JSON."""
    settings = _settings(overrides={"track_links": False if no_tracking else None})
    meta, body = _source(path)
    doc = prepare(body, meta, settings)
    typer.echo(json.dumps(doc.model_dump(mode="json")["blocks"], indent=2, ensure_ascii=False))


def html_cmd(
    path: Annotated[str, typer.Argument(help="Source file to render")],
    ):
    """Print the CMS hypertext body to stdout."""
    settings = _settings()
    meta, body = _source(path)
    typer.echo(run_render(body, meta, settings).html)


def export_md_cmd(
    path: Annotated[str, typer.Argument(help="Source file to export")],
    ):
    """Print a markdown export with a status/type header."""
    meta, body = _source(path)
    typer.echo(build_markdown_export(meta, body), nl=False)
