"""Tests for the Typer CLI."""

import json
import tempfile
from pathlib import Path

from typer.testing import CliRunner

from match_news import cli
from match_news.core.types import AggregationResult, MissingInputError, TermStat


runner = CliRunner()


def _fake_result():
    return AggregationResult(
        keywords=[TermStat("injury", 2, 1, 0.8109)],
        headlines=[],
        total_articles=2,
        per_source_counts={"google": 2},
    )


def test_run_prints_json_payload(monkeypatch):
    seen = {}

    def fake_run(home, away, cfg, **kwargs):
        seen["args"] = (home, away, cfg.aggregation.headline_policy, cfg.aggregation.keywords)
        return _fake_result()

    monkeypatch.setattr(cli, "run_aggregation", fake_run)
    result = runner.invoke(
        cli.app,
        ["run", "--home", "Tottenham", "--away", "Arsenal", "--policy", "keyword", "-k", "3", "--json"],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["keywords"] == [{"keyword": "injury", "count": 2, "relevance": 0.8109}]
    assert payload["sources"] == {"google": 2}
    assert seen["args"] == ("Tottenham", "Arsenal", "keyword", 3)


def test_run_rejects_unknown_policy(monkeypatch):
    monkeypatch.setattr(cli, "run_aggregation", lambda *a, **k: _fake_result())
    result = runner.invoke(cli.app, ["run", "--home", "A team", "--away", "B team", "--policy", "random"])
    assert result.exit_code != 0


def test_run_missing_input_exits_with_code_two(monkeypatch):
    def fake_run(*args, **kwargs):
        raise MissingInputError("home and away entity names are required")

    monkeypatch.setattr(cli, "run_aggregation", fake_run)
    result = runner.invoke(cli.app, ["run", "--home", " ", "--away", "Arsenal", "--json"])
    assert result.exit_code == 2


def test_batch_reuses_cache_for_repeated_fixtures(monkeypatch):
    calls = []

    def fake_run(home, away, cfg, cache=None, **kwargs):
        calls.append((home, away, cache))
        if not home:
            raise MissingInputError("home and away entity names are required")
        return _fake_result()

    monkeypatch.setattr(cli, "run_aggregation", fake_run)
    with tempfile.TemporaryDirectory() as tmpdir:
        fixtures = Path(tmpdir) / "fixtures.json"
        fixtures.write_text(json.dumps([
            {"homeTeam": "Tottenham", "awayTeam": "Arsenal"},
            {"homeTeam": "", "awayTeam": "Chelsea"},
        ]), encoding="utf-8")
        out = Path(tmpdir) / "out" / "results.json"

        result = runner.invoke(cli.app, ["batch", "-i", str(fixtures), "-o", str(out)])
        assert result.exit_code == 0, result.output
        payload = json.loads(out.read_text(encoding="utf-8"))

    assert payload[0]["homeTeam"] == "Tottenham"
    assert payload[0]["totalArticles"] == 2
    assert "error" in payload[1]
    assert calls[0][2] is not None
    assert calls[0][2] is calls[1][2]
