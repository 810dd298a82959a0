"""
Runtime settings for the portfolio scraper.

Values come from environment variables (a local .env file is loaded first),
falling back to the defaults below.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_PROXY_URL = "https://api.allorigins.win/get"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ScraperSettings(BaseModel):
    """Settings shared by the fetcher, cache and GitHub client."""
    proxy_url: str = DEFAULT_PROXY_URL          # Pass-through proxy with a JSON envelope
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0)  # Seconds, per request
    cache_dir: str = "portfolio_cache"
    github_token: Optional[str] = None
    github_api_url: str = "https://api.github.com"


def load_settings(env_file: Optional[str] = None) -> ScraperSettings:
    """Build settings from the environment (and an optional .env file)."""
    load_dotenv(env_file)

    defaults = ScraperSettings()
    return ScraperSettings(
        proxy_url=os.getenv("PORTFOLIO_PROXY_URL", defaults.proxy_url),
        user_agent=os.getenv("PORTFOLIO_USER_AGENT", defaults.user_agent),
        timeout=float(os.getenv("PORTFOLIO_TIMEOUT", defaults.timeout)),
        cache_dir=os.getenv("PORTFOLIO_CACHE_DIR", defaults.cache_dir),
        github_token=os.getenv("GITHUB_TOKEN") or None,
        github_api_url=os.getenv("GITHUB_API_URL", defaults.github_api_url),
    )
