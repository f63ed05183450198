"""
Command-line interface for match news aggregation.

Uses Typer to provide a CLI with options for the most common
configuration settings. Loads .env files for provider credentials.
"""

from __future__ import annotations

import json
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
import typer

from .cache import ResultCache
from .config import AppConfig, get_naver_credentials, load_config
from .core.types import AggregationResult, HeadlinePolicy, MissingInputError
from .runner import run_aggregation
from .sources.factory import available_sources
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False)
console = Console()


def _load(config: Path | None) -> AppConfig:
    load_dotenv()
    return load_config(str(config) if config else None)


@app.command()
def run(
    home: str = typer.Option(..., "--home", help="Home team name."),
    away: str = typer.Option(..., "--away", help="Away team name."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    policy: str | None = typer.Option(None, "--policy", help="Headline policy: priority or keyword."),
    keywords: int | None = typer.Option(None, "--keywords", "-k", min=0, help="Number of keywords."),
    headlines: int | None = typer.Option(None, "--headlines", "-m", min=0, help="Number of headlines."),
    window_days: int | None = typer.Option(None, "--window-days", min=1, help="Recency window in days."),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON payload instead of tables."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_dir: Path | None = typer.Option(None, "--log-dir", help="Write a log file into this directory."),
):
    """Aggregate news for one fixture and print keywords and headlines."""
    cfg = _load(config)

    if policy:
        try:
            cfg.aggregation.headline_policy = HeadlinePolicy.parse(policy).value
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--policy") from exc
    if keywords is not None:
        cfg.aggregation.keywords = keywords
    if headlines is not None:
        cfg.aggregation.headlines = headlines
    if window_days is not None:
        cfg.aggregation.window_days = window_days
    if log_level:
        cfg.logging.level = log_level
    if log_dir is not None:
        cfg.logging.file = True
    if as_json:
        # Keep stdout clean for the payload.
        cfg.logging.console = False

    setup_logging(cfg.logging, log_dir)

    try:
        result = run_aggregation(home, away, cfg)
    except MissingInputError as exc:
        console.print(f"[red]Missing required input:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return
    _print_result(result)


@app.command()
def batch(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True,
                               help="JSON list of {\"homeTeam\": ..., \"awayTeam\": ...} objects."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write results here instead of stdout."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Aggregate news for several fixtures; repeated fixtures are served from cache."""
    cfg = _load(config)
    if log_level:
        cfg.logging.level = log_level
    if output is None:
        cfg.logging.console = False
    setup_logging(cfg.logging, None)

    with open(input, encoding="utf-8") as f:
        fixtures = json.load(f)
    if not isinstance(fixtures, list):
        raise typer.BadParameter("expected a JSON list of fixtures", param_hint="--input")

    cache = ResultCache(cfg.cache.ttl_seconds) if cfg.cache.enabled else None
    results = []
    for fixture in fixtures:
        fixture = fixture if isinstance(fixture, dict) else {}
        home = fixture.get("homeTeam")
        away = fixture.get("awayTeam")
        try:
            payload = run_aggregation(home, away, cfg, cache=cache).to_dict()
        except MissingInputError as exc:
            payload = {"error": str(exc)}
        results.append({"homeTeam": home, "awayTeam": away, **payload})

    text = json.dumps(results, ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"Wrote {len(results)} results to {output}")


@app.command()
def sources(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
):
    """List registered news sources and whether each is enabled."""
    cfg = _load(config)
    table = Table(title="News sources")
    table.add_column("Source")
    table.add_column("Enabled")
    table.add_column("Notes")
    for name in available_sources():
        notes = ""
        if name == "naver" and get_naver_credentials(cfg.sources) is None:
            notes = f"set {cfg.sources.naver_client_id_env} / {cfg.sources.naver_client_secret_env}"
        table.add_row(name, "yes" if name in cfg.sources.enabled else "no", notes)
    console.print(table)


def _print_result(result: AggregationResult) -> None:
    payload = result.to_dict()

    keyword_table = Table(title=f"Keywords ({payload['totalArticles']} articles)")
    keyword_table.add_column("Keyword")
    keyword_table.add_column("Count", justify="right")
    keyword_table.add_column("Relevance", justify="right")
    for item in payload["keywords"]:
        keyword_table.add_row(item["keyword"], str(item["count"]), f"{item['relevance']:.4f}")
    console.print(keyword_table)

    headline_table = Table(title="Headlines")
    headline_table.add_column("Date")
    headline_table.add_column("Source")
    headline_table.add_column("Title")
    for item in payload["headlines"]:
        headline_table.add_row(item["date"], item["source"], item["title"])
    console.print(headline_table)

    counts = ", ".join(f"{name}={count}" for name, count in payload["sources"].items())
    console.print(f"Sources: {counts or 'none'}")


if __name__ == "__main__":
    app()
