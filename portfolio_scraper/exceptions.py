"""
Custom exceptions for the portfolio scraper.

Error philosophy:
  - FetchFailure  -> FAIL HARD: both the direct request and the proxy failed,
                     or the page came back empty. Nothing is cached.
  - ParseFailure  -> FAIL HARD: every parser backend rejected the markup.
                     The parser chain makes this practically unreachable.
  - ScrapeError   -> the single error the pipeline surfaces to callers; it
                     wraps one of the above and carries its message.
  - Extraction has no error type at all: extractors degrade to defaults.

GitHubClientError and InvalidURLError belong to the collaborators around
the pipeline (GitHub REST client, input validation).
"""

from typing import Optional


class PortfolioScraperError(Exception):
    """Base exception for all portfolio scraper errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- FAIL HARD: stops the pipeline ---

class FetchFailure(PortfolioScraperError):
    """Raised when the page could not be retrieved by any transport."""

    def __init__(self, message: str, url: str, details: Optional[dict] = None):
        super().__init__(message, details)
        self.url = url


class ParseFailure(PortfolioScraperError):
    """Raised when no parser backend could build a document tree."""
    pass


class ScrapeError(PortfolioScraperError):
    """
    Wrapped pipeline failure.

    Carries the underlying FetchFailure / ParseFailure as ``cause`` so the
    caller can inspect it, while ``message`` is ready for display.
    """

    def __init__(self, url: str, cause: PortfolioScraperError):
        super().__init__(
            f"Failed to scrape {url}: {cause.message}",
            details={"url": url, "cause": type(cause).__name__, **cause.details}
        )
        self.url = url
        self.cause = cause

    def to_response(self) -> dict:
        """Convert to a JSON-friendly error payload."""
        return {
            "error": "ScrapeError",
            "message": self.message,
            "cause": type(self.cause).__name__,
            "details": self.details
        }


# --- Collaborators ---

class GitHubClientError(PortfolioScraperError):
    """Raised when a GitHub REST call fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.status_code = status_code  # None for transport errors


class InvalidURLError(PortfolioScraperError):
    """Raised when user-supplied URLs fail validation."""

    def __init__(self, message: str, errors: Optional[list[str]] = None):
        super().__init__(message, details={"errors": errors or []})
        self.errors = errors or []
