"""
Tests for settings loading and logger setup.
"""

import logging

import pytest
from pydantic import ValidationError

from portfolio_scraper.config import ScraperSettings, load_settings
from portfolio_scraper.logger import get_module_logger, setup_logger

SETTINGS_ENV = [
    "PORTFOLIO_PROXY_URL", "PORTFOLIO_USER_AGENT", "PORTFOLIO_TIMEOUT",
    "PORTFOLIO_CACHE_DIR", "GITHUB_TOKEN", "GITHUB_API_URL",
]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the variables even if a .env file sets them
    for name in SETTINGS_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults():
    settings = ScraperSettings()

    assert settings.proxy_url == "https://api.allorigins.win/get"
    assert settings.timeout == 30.0
    assert settings.github_token is None


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        ScraperSettings(timeout=0)


def test_load_settings_from_environment(clean_env):
    clean_env.setenv("PORTFOLIO_TIMEOUT", "12.5")
    clean_env.setenv("PORTFOLIO_CACHE_DIR", "/tmp/portfolio")
    clean_env.setenv("GITHUB_TOKEN", "ghp_example")

    settings = load_settings()

    assert settings.timeout == 12.5
    assert settings.cache_dir == "/tmp/portfolio"
    assert settings.github_token == "ghp_example"
    assert settings.github_api_url == "https://api.github.com"


def test_empty_token_means_anonymous(clean_env):
    clean_env.setenv("GITHUB_TOKEN", "")

    assert load_settings().github_token is None


def test_load_settings_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "PORTFOLIO_USER_AGENT=TestAgent/2.0\nGITHUB_API_URL=https://ghe.example.com/api/v3\n",
        encoding="utf-8",
    )

    settings = load_settings(str(env_file))

    assert settings.user_agent == "TestAgent/2.0"
    assert settings.github_api_url == "https://ghe.example.com/api/v3"


def test_module_loggers_are_package_children():
    assert get_module_logger("fetcher").name == "portfolio_scraper.fetcher"


def test_setup_logger_is_idempotent():
    logger = setup_logger("portfolio_scraper.test_setup", level=logging.INFO)
    again = setup_logger("portfolio_scraper.test_setup", level=logging.DEBUG)

    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_setup_logger_level_from_environment(monkeypatch):
    monkeypatch.setenv("PORTFOLIO_LOG_LEVEL", "warning")

    logger = setup_logger("portfolio_scraper.test_env_level")

    assert logger.level == logging.WARNING
