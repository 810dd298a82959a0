"""
Tests for the text report and the run_scraper CLI.
"""

import json

import pytest

import run_scraper
from portfolio_scraper.analyzer import PortfolioAnalyzer
from portfolio_scraper.exceptions import FetchFailure
from portfolio_scraper.extractor import extract_profile
from portfolio_scraper.report import render_report
from portfolio_scraper.schemas import FetchResult, GitHubProfile, GitHubRepository, ScrapeResult


@pytest.fixture
def result(sample_document):
    profile = extract_profile(sample_document, "https://jane.dev")
    return ScrapeResult(profile=profile, analysis=PortfolioAnalyzer().analyze(profile))


def test_report_lists_scores_and_projects(result):
    report = render_report(result)

    assert report.startswith("Portfolio Analysis")
    assert "SEO           [" in report
    assert "Weather Dashboard <https://github.com/janedoe/weather>" in report
    assert "Senior Developer at Acme Corp (2021 - Present)" in report
    assert "Email:    jane@example.com" in report


def test_report_marks_cached_results(result):
    cached = result.model_copy(update={"cached": True})

    assert render_report(cached).startswith("Portfolio Analysis (cached)")


def test_report_puts_github_section_first(result):
    github = (
        GitHubProfile(login="janedoe", name="Jane Doe", public_repo_count=12),
        [GitHubRepository(name="weather", url="https://github.com/janedoe/weather",
                          star_count=3, primary_language="Python")],
    )

    report = render_report(result, github=github)

    assert report.startswith("GitHub Profile")
    assert "Jane Doe (@janedoe)" in report
    assert "weather [Python]  stars=3 forks=0" in report
    assert report.index("GitHub Profile") < report.index("Portfolio Analysis")


# --- CLI ---

@pytest.fixture
def cache_env(tmp_path, monkeypatch):
    monkeypatch.setenv("PORTFOLIO_CACHE_DIR", str(tmp_path))
    return tmp_path


def test_cli_rejects_invalid_url(cache_env, capsys):
    assert run_scraper.main(["not-a-url"]) == 2
    assert "portfolio" in capsys.readouterr().err


def test_cli_scrape_failure_exit_code(cache_env, monkeypatch, capsys):
    def failing_fetch(self, url):
        raise FetchFailure("Could not retrieve page content (offline)", url=url)

    monkeypatch.setattr("portfolio_scraper.fetcher.Fetcher.fetch", failing_fetch)

    assert run_scraper.main(["https://jane.dev"]) == 1
    assert "Failed to scrape https://jane.dev" in capsys.readouterr().err


def test_cli_json_output(cache_env, monkeypatch, sample_html, tmp_path):
    monkeypatch.setattr(
        "portfolio_scraper.fetcher.Fetcher.fetch",
        lambda self, url: FetchResult(html=sample_html, url=url),
    )
    output = tmp_path / "out.json"

    assert run_scraper.main(["https://jane.dev", "--json", "-o", str(output)]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["portfolio"]["profile"]["url"] == "https://jane.dev"
    assert "technicalScore" in payload["portfolio"]["analysis"]


def test_cli_list_and_clear_cache(cache_env, capsys):
    (cache_env / "portfolio_x-0123456789ab.json").write_text(
        json.dumps({"key": "portfolio_x", "created_at": "2024-01-01T00:00:00", "value": {}}),
        encoding="utf-8",
    )

    assert run_scraper.main(["--list-cache"]) == 0
    assert "portfolio_x" in capsys.readouterr().out

    assert run_scraper.main(["--clear-cache"]) == 0
    assert "Cleared 1 cache entries" in capsys.readouterr().out
