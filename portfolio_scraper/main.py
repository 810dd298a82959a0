"""
Main orchestrator for the portfolio scraper.

Coordinates the pipeline: Fetcher -> DocumentParser -> PortfolioExtractor ->
PortfolioAnalyzer, and writes the profile and its analysis to the cache.
"""

from typing import Optional

from .analyzer import PortfolioAnalyzer
from .config import ScraperSettings
from .document import DocumentParser
from .exceptions import FetchFailure, ParseFailure, ScrapeError
from .extractor import PortfolioExtractor
from .fetcher import Fetcher
from .logger import get_module_logger, setup_logger
from .profile_cache import ProfileCache
from .schemas import ScrapeResult

logger = get_module_logger("main")


class PortfolioScraper:
    """
    Main orchestrator for portfolio scraping.

    Coordinates the pipeline:
    1. Fetcher: Retrieves raw markup (direct, then proxy)
    2. DocumentParser: Builds a best-effort tree
    3. PortfolioExtractor: Resolves profile fields
    4. PortfolioAnalyzer: Scores the profile

    Collaborators are injectable; anything not passed in is built from
    ``settings``.
    """

    def __init__(
        self,
        settings: Optional[ScraperSettings] = None,
        fetcher: Optional[Fetcher] = None,
        cache: Optional[ProfileCache] = None,
        analyzer: Optional[PortfolioAnalyzer] = None,
        log_level: int = None
    ):
        if log_level is not None:
            setup_logger(level=log_level)

        self.settings = settings or ScraperSettings()
        self.fetcher = fetcher or Fetcher(settings=self.settings)
        self.parser = DocumentParser()
        self.cache = cache if cache is not None else ProfileCache(self.settings.cache_dir)
        self.analyzer = analyzer or PortfolioAnalyzer()

        logger.info("PortfolioScraper initialized")

    def scrape(self, url: str, use_cache: bool = False) -> ScrapeResult:
        """
        Scrape, extract and score one portfolio page.

        Args:
            url: Absolute URL of the portfolio
            use_cache: Return a previously cached profile/analysis when present

        Returns:
            ScrapeResult with the profile and its analysis

        Raises:
            ScrapeError: the page could not be fetched or parsed; nothing is cached
        """
        if use_cache:
            cached = self.get_cached(url)
            if cached is not None:
                logger.info(f"Serving {url} from cache")
                return cached

        logger.info(f"Starting pipeline for {url}")

        try:
            fetched = self.fetcher.fetch(url)
            document = self.parser.parse(fetched.html)
        except (FetchFailure, ParseFailure) as e:
            logger.error(f"Scrape failed for {url}: {e.message}")
            raise ScrapeError(url, e) from e

        profile = PortfolioExtractor(document, base_url=url).extract(
            page_load_time=fetched.elapsed_ms
        )
        self.cache.put_profile(url, profile)

        analysis = self.analyzer.analyze(profile)
        self.cache.put_analysis(url, analysis)

        logger.info(f"Complete: {url} (via {fetched.via})")
        return ScrapeResult(profile=profile, analysis=analysis)

    def get_cached(self, url: str) -> Optional[ScrapeResult]:
        """Cached profile and analysis for ``url``, if both are present."""
        profile = self.cache.get_profile(url)
        if profile is None:
            return None

        analysis = self.cache.get_analysis(url)
        if analysis is None:
            # Profile survived but the analysis didn't: rescoring is pure
            analysis = self.analyzer.analyze(profile)
            self.cache.put_analysis(url, analysis)

        return ScrapeResult(profile=profile, analysis=analysis, cached=True)


def scrape_portfolio(url: str, settings: Optional[ScraperSettings] = None) -> ScrapeResult:
    """Convenience function to scrape a single portfolio."""
    return PortfolioScraper(settings=settings).scrape(url)
