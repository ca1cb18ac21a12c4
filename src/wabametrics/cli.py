from __future__ import annotations

import logging
from pathlib import Path

import typer

from wabametrics.api import create_app
from wabametrics.context import infer_polarity
from wabametrics.engine import MetricsConfig, compute_metrics
from wabametrics.loaders import load_witnesses
from wabametrics.logging import configure_logging
from wabametrics.settings import settings
from wabametrics.utils import dump_json, dumps_json

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def compute(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Witnesses (.json/.jsonl) or clingo JSON output"),
    polarity: str = typer.Option(settings.polarity, help="cost (lower is better) or strength (higher is better)"),
    initial_levels: int = typer.Option(settings.initial_levels, "--initial-levels", "-k", min=1),
    min_coverage: int = typer.Option(settings.min_coverage, "--min-coverage", "-m", min=0),
    monoid: str = typer.Option(settings.monoid, help="Aggregation for witnesses without an Optimization value"),
    output: Path | None = typer.Option(None, "--output", "-o", dir_okay=False, help="Write JSON here instead of stdout"),
) -> None:
    """Compute near-optimal set and per-atom metrics for a witness file."""
    configure_logging(getattr(logging, settings.log_level.upper(), logging.INFO))
    witnesses = load_witnesses(path, monoid=monoid)
    cfg = MetricsConfig(polarity=polarity, initial_levels=initial_levels, min_coverage=min_coverage)
    res = compute_metrics(witnesses, cfg)
    if res is None:
        typer.echo("No metrics available.")
        raise typer.Exit(1)

    payload = res.to_payload()
    if output is not None:
        dump_json(output, payload)
        g = res.global_metrics
        typer.echo(f"Wrote metrics for {len(res.atoms)} atoms ({g.num_in_s}/{g.total_models} models in S) to: {output}")
    else:
        typer.echo(dumps_json(payload).decode("utf-8"))


@app.command("polarity")
def polarity_cmd(semiring: str = typer.Argument(..., help="Example: tropical")) -> None:
    """Print the polarity implied by a semiring."""
    typer.echo(infer_polarity(semiring))


@app.command()
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
    log_level: str = typer.Option(settings.log_level.lower(), help="debug, info, warning or error"),
) -> None:
    """Serve the metrics endpoints over HTTP."""
    import uvicorn

    level = log_level.lower()
    configure_logging(getattr(logging, level.upper(), logging.INFO))
    typer.echo(f"Serving wabametrics on http://{host}:{port} (default polarity={settings.polarity})")
    uvicorn.run(create_app(), host=host, port=port, log_level=level)


@app.command()
def version() -> None:
    """Print the current version."""
    from wabametrics import __version__

    typer.echo(__version__)


if __name__ == "__main__":
    app()
