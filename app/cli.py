"""Command-line interface for anchor-relative extraction."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from app.core.config import settings
from app.core.logging import setup_logging
from app.services.rules.extractor import extract
from app.services.rules.template_extractor import TemplateRuleExtractor
from app.services.rules.template_loader import load_config, load_document, load_templates

app = typer.Typer(add_completion=False, help="Locate document lines relative to anchor text")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log extraction details to stdout"),
) -> None:
    if verbose:
        setup_logging("debug")


@app.command("extract")
def extract_command(
    config_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Rule JSON file"),
    document_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Standardized text JSON file"),
) -> None:
    try:
        config = load_config(config_path)
        document = load_document(document_path)
    except (ValidationError, json.JSONDecodeError) as exc:
        typer.echo(f"Invalid input: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    line = extract(
        config,
        document,
        candidate_window=settings.candidate_window,
        row_band=settings.row_band_tolerance,
    )
    if line is None:
        typer.echo("not found")
        raise typer.Exit(code=1)
    typer.echo(line.model_dump_json(by_alias=True))


@app.command("template")
def template_command(
    name: str = typer.Argument(..., help="Template name"),
    document_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Standardized text JSON file"),
    template_dir: Optional[Path] = typer.Option(
        None,
        "--template-dir",
        file_okay=False,
        help="Directory of template JSON files",
    ),
) -> None:
    try:
        document = load_document(document_path)
        templates = load_templates(template_dir or settings.template_dir)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"Invalid input: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    extractor = TemplateRuleExtractor(
        templates,
        candidate_window=settings.candidate_window,
        row_band=settings.row_band_tolerance,
    )
    try:
        result = extractor.extract(name, document)
    except KeyError as exc:
        typer.echo(f"Unknown template: {name}", err=True)
        raise typer.Exit(code=2) from exc

    typer.echo(json.dumps(result.data, ensure_ascii=False))
    if not result.complete:
        typer.echo(f"Missing: {', '.join(result.errors)}", err=True)
        raise typer.Exit(code=1)


@app.command("serve")
def serve_command(
    host: str = typer.Option("0.0.0.0", "--host", help="Service bind host"),
    port: int = typer.Option(8000, "--port", help="Service port"),
) -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=host, port=port)


if __name__ == "__main__":
    app()
