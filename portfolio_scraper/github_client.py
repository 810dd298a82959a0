"""
Minimal GitHub REST client.

Two calls, no retries, no rate-limit handling: the user's public profile and
their most recently updated repositories. A token is optional and only
raises the anonymous rate limit.
"""

import re
from typing import Optional

import requests

from .config import ScraperSettings
from .exceptions import GitHubClientError
from .logger import get_module_logger
from .schemas import GitHubProfile, GitHubRepository

logger = get_module_logger("github_client")

USERNAME_PATTERN = re.compile(r"github\.com/([A-Za-z0-9-]+)", re.IGNORECASE)


def username_from_url(url: str) -> str:
    """Extract the username from a profile URL like https://github.com/octocat."""
    match = USERNAME_PATTERN.search(url or "")
    if not match:
        raise GitHubClientError(f"Invalid GitHub URL: {url}")
    return match.group(1)


class GitHubClient:
    """Fetches public profile and repository data from the GitHub API."""

    def __init__(
        self,
        settings: Optional[ScraperSettings] = None,
        session: Optional[requests.Session] = None
    ):
        self.settings = settings or ScraperSettings()
        self.api_url = self.settings.github_api_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "User-Agent": "portfolio-scraper",
        })
        if self.settings.github_token:
            self.session.headers["Authorization"] = f"token {self.settings.github_token}"

    def _get(self, path: str, params: Optional[dict] = None):
        url = f"{self.api_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.settings.timeout)
        except requests.RequestException as e:
            logger.error(f"GitHub request failed for {path}: {e}")
            raise GitHubClientError(f"GitHub API unreachable: {e}") from e

        if response.status_code != 200:
            logger.error(f"GitHub returned {response.status_code} for {path}")
            raise GitHubClientError(
                f"GitHub API request failed with status {response.status_code}",
                status_code=response.status_code,
                details={"path": path}
            )
        return response.json()

    def fetch_profile(self, username: str) -> GitHubProfile:
        data = self._get(f"/users/{username}")
        return GitHubProfile(
            login=data.get("login") or username,
            name=data.get("name"),
            bio=data.get("bio"),
            public_repo_count=data.get("public_repos") or 0,
            followers=data.get("followers") or 0,
            following=data.get("following") or 0,
            avatar_url=data.get("avatar_url"),
            html_url=data.get("html_url"),
            created_at=data.get("created_at"),
        )

    def fetch_repositories(self, username: str, limit: int = 5) -> list[GitHubRepository]:
        """Most recently updated public repositories."""
        data = self._get(f"/users/{username}/repos", params={"sort": "updated", "per_page": limit})
        return [
            GitHubRepository(
                name=repo.get("name", ""),
                description=repo.get("description"),
                url=repo.get("html_url", ""),
                star_count=repo.get("stargazers_count") or 0,
                fork_count=repo.get("forks_count") or 0,
                primary_language=repo.get("language"),
                updated_at=repo.get("updated_at"),
            )
            for repo in data
        ]

    def fetch_user(self, profile_url: str) -> tuple[GitHubProfile, list[GitHubRepository]]:
        """Profile and repositories for a GitHub profile URL."""
        username = username_from_url(profile_url)
        logger.info(f"Fetching GitHub data for {username}")
        return self.fetch_profile(username), self.fetch_repositories(username)
