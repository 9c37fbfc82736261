from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer

from molmeta.analysis.engine import StructureSummary, summarize
from molmeta.config import load_settings
from molmeta.core.logging_utils import get_logger
from molmeta.core.report import SummaryReport

logger = get_logger(__name__)
app = typer.Typer(no_args_is_help=True)


def _settings():
    try:
        return load_settings()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None


def load_snapshot(path: Path) -> tuple[Any, list[Any]]:
    """Read a {"model": ..., "structures": [...]} JSON snapshot."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: snapshot must be a JSON object, got {type(data).__name__}")
    structures = data.get("structures") or []
    if not isinstance(structures, list):
        raise ValueError(f"{path}: 'structures' must be a list")
    return data.get("model"), structures


def _print_summary(summary: StructureSummary) -> None:
    typer.echo(f"Label:        {summary.label}")
    typer.echo(f"Space group:  {summary.spacegroup}")
    typer.echo(f"Ortho code:   {summary.ortho_code}")
    typer.echo(f"Composition:  {summary.analysis}")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    settings = _settings()
    get_logger("molmeta", level="DEBUG" if verbose else settings.log_level)


@app.command("summarize")
def summarize_cmd(
    snapshot: Path = typer.Argument(..., exists=True, dir_okay=False, help="Snapshot JSON file."),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
):
    settings = _settings()
    model, structures = load_snapshot(snapshot)
    summary = summarize(model, structures, settings)
    if as_json:
        typer.echo(json.dumps(summary.to_dict(), indent=2))
    else:
        _print_summary(summary)


@app.command("batch")
def batch_cmd(
    directory: Path = typer.Argument(..., exists=True, file_okay=False, help="Directory of snapshot JSON files."),
    out: Optional[Path] = typer.Option(None, help="Output report (.parquet or .csv)."),
    pattern: str = typer.Option("*.json", help="Glob pattern for snapshot files."),
):
    settings = _settings()
    out = out or Path(f"molmeta_report.{settings.report_format}")

    items: list[tuple[str, StructureSummary]] = []
    paths = sorted(directory.glob(pattern))
    logger.info("Found %d snapshots matching '%s' in %s", len(paths), pattern, directory)
    for path in paths:
        try:
            model, structures = load_snapshot(path)
        except (OSError, ValueError) as e:
            logger.warning("Skipping %s: %s", path, e)
            continue
        items.append((path.stem, summarize(model, structures, settings)))

    report = SummaryReport.from_summaries(items)
    report.save(out)
    totals = report.totals()
    logger.info(
        "Wrote report to %s (count=%d chains=%d ligands=%d)",
        out, report.count(), totals["num_chains"], totals["num_ligands"],
    )
