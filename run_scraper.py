#!/usr/bin/env python3
"""
CLI script to scrape and score a portfolio.

Fetches the portfolio page, extracts a profile, scores it and prints a
report. With --github the GitHub profile and recent repositories are shown
above the portfolio section.

Usage:
    python run_scraper.py https://jane.dev
    python run_scraper.py https://jane.dev --github https://github.com/jane
    python run_scraper.py https://jane.dev --json -o jane.json
    python run_scraper.py https://jane.dev --use-cache
    python run_scraper.py --list-cache
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Load .env file automatically
from dotenv import load_dotenv
load_dotenv()

from portfolio_scraper.config import load_settings
from portfolio_scraper.exceptions import GitHubClientError, InvalidURLError, ScrapeError
from portfolio_scraper.github_client import GitHubClient
from portfolio_scraper.logger import setup_logger
from portfolio_scraper.main import PortfolioScraper
from portfolio_scraper.profile_cache import ProfileCache
from portfolio_scraper.report import render_report
from portfolio_scraper.validation import validate_urls


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape a developer portfolio and score it"
    )
    parser.add_argument(
        "portfolio",
        nargs="?",
        help="Portfolio URL to analyze"
    )
    parser.add_argument(
        "--github",
        help="GitHub profile URL (https://github.com/<user>)"
    )
    parser.add_argument(
        "--linkedin",
        help="LinkedIn profile URL (validated only)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Write the result to this file instead of stdout"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of the text report"
    )
    parser.add_argument(
        "--use-cache",
        action="store_true",
        help="Serve a previously cached result when available"
    )
    parser.add_argument(
        "--list-cache",
        action="store_true",
        help="List cached entries and exit"
    )
    parser.add_argument(
        "--clear-cache",
        action="store_true",
        help="Delete all cached entries and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging"
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings = load_settings()
    cache = ProfileCache(settings.cache_dir)

    if args.list_cache:
        for entry in cache.list_cached():
            print(f"{entry['created_at']}  {entry['key']}")
        return 0

    if args.clear_cache:
        print(f"Cleared {cache.clear()} cache entries")
        return 0

    if not args.portfolio:
        parser.error("a portfolio URL is required")

    try:
        urls = validate_urls(args.portfolio, github=args.github, linkedin=args.linkedin)
    except InvalidURLError as e:
        for error in e.errors:
            print(f"✗ {error}", file=sys.stderr)
        return 2

    github = None
    if urls.github:
        try:
            github = GitHubClient(settings=settings).fetch_user(urls.github)
        except GitHubClientError as e:
            # The portfolio report is still useful without the GitHub section
            print(f"✗ GitHub: {e.message}", file=sys.stderr)

    scraper = PortfolioScraper(settings=settings, cache=cache)
    try:
        result = scraper.scrape(urls.portfolio, use_cache=args.use_cache)
    except ScrapeError as e:
        print(f"✗ {e.message}", file=sys.stderr)
        return 1

    if args.json:
        payload = {"portfolio": result.model_dump(mode="json", by_alias=True)}
        if github is not None:
            profile, repositories = github
            payload["github"] = {
                "profile": profile.model_dump(mode="json", by_alias=True),
                "repositories": [repo.model_dump(mode="json", by_alias=True) for repo in repositories],
            }
        # ensure_ascii=False preserves unicode characters in the JSON
        output = json.dumps(payload, indent=2, ensure_ascii=False)
    else:
        output = render_report(result, github=github)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"Saved to: {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
