"""Typer CLI for entropy computations on a single series."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import NoReturn, Optional

import polars as pl
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from liq.entropy.binary import binary_entropy
from liq.entropy.exceptions import EntropyError
from liq.entropy.multiscale import multiscale_entropy_results
from liq.entropy.sample import sample_entropy_result
from liq.entropy.shannon import shannon_entropy_discrete

app = typer.Typer(help="liq-entropy CLI")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Complexity measures for numeric time series."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s",
    )


def _load_series(path: Path, column: str) -> list[float]:
    if path.suffix.lower() == ".parquet":
        df = pl.read_parquet(path)
    elif path.suffix.lower() == ".csv":
        df = pl.read_csv(path)
    else:
        with path.open() as f:
            data = json.load(f)
        df = pl.DataFrame(data)
    if column not in df.columns:
        raise typer.BadParameter(f"Expected column '{column}'", param_hint="--column")
    return df[column].drop_nulls().cast(pl.Float64).to_list()


def _format_value(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf"
    return f"{value:.6f}"


def _fail(exc: EntropyError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


@app.command("sampen")
def sampen(
    series_path: Path = typer.Argument(..., help="Path to CSV/Parquet/JSON series"),
    column: str = typer.Option("value", help="Column holding the series"),
    m: int = typer.Option(2, help="Embedding dimension"),
    r: float = typer.Option(0.2, help="Tolerance ratio (fraction of std)"),
) -> None:
    """Sample entropy with its template-match counts."""
    series = _load_series(series_path, column)
    try:
        result = sample_entropy_result(series, m=m, r=r)
    except EntropyError as exc:
        _fail(exc)

    table = Table(title="Sample Entropy")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("SampEn", _format_value(result.value))
    table.add_row("cm", str(result.matches_m))
    table.add_row("cm1", str(result.matches_m1))
    table.add_row("Tolerance", _format_value(result.tolerance))
    table.add_row("Status", result.status.value)
    console.print(table)


@app.command("shannon")
def shannon(
    series_path: Path = typer.Argument(..., help="Path to CSV/Parquet/JSON series"),
    column: str = typer.Option("value", help="Column holding the series"),
) -> None:
    """Shannon entropy of the discretized series (bits)."""
    series = _load_series(series_path, column)
    try:
        value = shannon_entropy_discrete(series)
    except EntropyError as exc:
        _fail(exc)
    console.print(f"Shannon entropy: {_format_value(value)}")


@app.command("bientropy")
def bientropy(
    series_path: Path = typer.Argument(..., help="Path to CSV/Parquet/JSON 0/1 series"),
    column: str = typer.Option("value", help="Column holding the series"),
    tres: bool = typer.Option(False, "--tres", help="Use logarithmic (Tres) weighting"),
) -> None:
    """Binary entropy of a 0/1 series."""
    series = _load_series(series_path, column)
    try:
        value = binary_entropy(series, tres=tres)
    except EntropyError as exc:
        _fail(exc)
    label = "TBiEn" if tres else "BiEn"
    console.print(f"{label}: {_format_value(value)}")


@app.command("mse")
def mse(
    series_path: Path = typer.Argument(..., help="Path to CSV/Parquet/JSON series"),
    scale: list[int] = typer.Option(..., "--scale", "-s", help="Scale factor (repeatable)"),
    column: str = typer.Option("value", help="Column holding the series"),
    jobs: int = typer.Option(1, "--jobs", "-j", help="Worker threads"),
    output: Optional[Path] = typer.Option(None, help="Optional JSON output path"),
) -> None:
    """Multiscale entropy over the given scale factors."""
    series = _load_series(series_path, column)
    try:
        results = multiscale_entropy_results(series, scale, n_jobs=jobs)
    except EntropyError as exc:
        _fail(exc)

    if output:
        payload = {
            str(s): res.value if res.is_defined else _format_value(res.value)
            for s, res in sorted(results.items())
        }
        output.write_text(json.dumps(payload))
        console.print(f"[green]Wrote multiscale entropy to {output}[/green]")
        return

    table = Table(title="Multiscale Entropy")
    table.add_column("Scale", style="cyan")
    table.add_column("Points", style="cyan")
    table.add_column("SampEn", style="green")
    for s, res in sorted(results.items()):
        table.add_row(str(s), str(res.n_points), _format_value(res.value))
    console.print(table)
