"""
Portfolio Scraper

Fetches a developer's portfolio page, extracts a structured profile with
selector and keyword heuristics, and scores it.
- Fetcher: direct request with a proxy fallback
- DocumentParser: sanitizing, never-fail HTML parsing
- PortfolioExtractor: cascading-selector field extraction
- PortfolioAnalyzer: weighted heuristic scoring

Public API surface:
  Pipeline: PortfolioScraper, Fetcher, DocumentParser, PortfolioExtractor, PortfolioAnalyzer
  Data models: PortfolioProfile, PortfolioAnalysis, ScrapeResult, Project, Experience, Education
  Error types: ScrapeError (wraps FetchFailure / ParseFailure)
  Caching: ProfileCache
  Collaborators: GitHubClient, validate_urls, render_report
"""

# --- Pipeline stage classes ---
from .fetcher import Fetcher
from .document import Document, DocumentParser
from .extractor import PortfolioExtractor
from .analyzer import PortfolioAnalyzer
from .main import PortfolioScraper

# --- Data models ---
from .schemas import (
    PortfolioProfile, PortfolioAnalysis, ScrapeResult, Project, Experience, Education
)

# --- Exceptions ---
from .exceptions import (
    PortfolioScraperError, FetchFailure, ParseFailure, ScrapeError,
    GitHubClientError, InvalidURLError
)

# --- Cache, config and collaborators ---
from .profile_cache import ProfileCache
from .config import ScraperSettings, load_settings
from .github_client import GitHubClient
from .validation import validate_urls
from .report import render_report

__version__ = "0.1.0"
__all__ = [
    "Fetcher",
    "Document",
    "DocumentParser",
    "PortfolioExtractor",
    "PortfolioAnalyzer",
    "PortfolioScraper",
    "PortfolioProfile",
    "PortfolioAnalysis",
    "ScrapeResult",
    "Project",
    "Experience",
    "Education",
    "PortfolioScraperError",
    "FetchFailure",
    "ParseFailure",
    "ScrapeError",
    "GitHubClientError",
    "InvalidURLError",
    "ProfileCache",
    "ScraperSettings",
    "load_settings",
    "GitHubClient",
    "validate_urls",
    "render_report",
]
