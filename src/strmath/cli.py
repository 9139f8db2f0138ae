from __future__ import annotations

"""CLI entrypoint for strmath."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import DistanceSettings, load_settings
from .distance import Recurrence, TrivialMatrixError, as_bytes, build
from .numeric import prime_sieve
from .reports import compute, load_pairs, run_batch, summarise, write_report

app = typer.Typer(help="Edit distance and small numeric utilities.")
console = Console()
log_console = Console(stderr=True)


def _settings(
    config: Optional[Path],
    method: Optional[str] = None,
    recurrence: Optional[str] = None,
) -> DistanceSettings:
    try:
        settings = load_settings(config)
        updates = {}
        if method is not None:
            updates["method"] = method
        if recurrence is not None:
            updates["recurrence"] = recurrence
        if updates:
            settings = DistanceSettings.model_validate(
                {**settings.model_dump(), **updates}
            )
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Configuration error[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=log_console, show_path=False)],
        force=True,
    )
    return settings


@app.command()
def distance(
    source: str = typer.Argument(..., help="First string."),
    target: str = typer.Argument(..., help="Second string."),
    method: Optional[str] = typer.Option(
        None, "--method", "-m", help="rolling or matrix."
    ),
    recurrence: Optional[str] = typer.Option(
        None, "--recurrence", "-r", help="levenshtein or smith_waterman (matrix only)."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file."
    ),
) -> None:
    settings = _settings(config, method, recurrence)
    try:
        value = compute(source, target, settings)
    except TrivialMatrixError as exc:
        if not settings.handle_trivial:
            console.print("[red]Trivial matrix[/red]: inputs are equal or empty")
            raise typer.Exit(code=1) from exc
        value = abs(len(exc.source) - len(exc.target))
    console.print(str(value), highlight=False)


@app.command()
def matrix(
    source: str = typer.Argument(..., help="Row string."),
    target: str = typer.Argument(..., help="Column string."),
    recurrence: str = typer.Option(
        "levenshtein", "--recurrence", "-r", help="levenshtein or smith_waterman."
    ),
) -> None:
    try:
        selected = Recurrence.parse(recurrence)
        m = build(source, target, selected)
    except TrivialMatrixError as exc:
        console.print("[red]Trivial matrix[/red]: inputs are equal or empty")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    row_labels = [""] + [escape(chr(c)) for c in as_bytes(source)]
    table = Table(title=f"{selected.value} tableau")
    table.add_column("")
    table.add_column("", justify="right")
    for byte in as_bytes(target):
        table.add_column(escape(chr(byte)), justify="right")
    for label, row in zip(row_labels, m):
        table.add_row(label, *(str(cell) for cell in row))
    console.print(table)


@app.command()
def batch(
    pairs_path: Path = typer.Argument(..., help="JSONL file of {source, target} rows."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to write the JSON report."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file."
    ),
) -> None:
    if not pairs_path.exists():
        console.print(f"[red]Pairs file not found:[/red] {pairs_path}")
        raise typer.Exit(code=1)
    settings = _settings(config)
    try:
        pairs = load_pairs(pairs_path)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    results = run_batch(pairs, settings)
    summary = summarise(results)

    table = Table(title="Batch Summary")
    table.add_column("metric")
    table.add_column("value")
    for key, value in summary.items():
        table.add_row(key, f"{value:.3f}" if isinstance(value, float) else str(value))
    console.print(table)

    if output is not None:
        write_report(results, output)
        console.print(f"Report written to [green]{output}[/green]")


@app.command()
def primes(limit: int = typer.Argument(..., help="Largest candidate.")) -> None:
    console.print(" ".join(str(p) for p in prime_sieve(limit)), highlight=False)


if __name__ == "__main__":  # pragma: no cover
    app()
