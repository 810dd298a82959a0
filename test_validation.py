"""
Tests for submitted-URL validation.
"""

import pytest

from portfolio_scraper.exceptions import InvalidURLError
from portfolio_scraper.validation import validate_urls


def test_portfolio_only():
    urls = validate_urls(" https://jane.dev ")

    assert urls.portfolio == "https://jane.dev"
    assert urls.github is None
    assert urls.linkedin is None


def test_all_urls():
    urls = validate_urls(
        "http://jane.dev/portfolio",
        github="https://github.com/janedoe",
        linkedin="https://www.linkedin.com/in/jane-doe/",
    )

    assert urls.github == "https://github.com/janedoe"
    assert urls.linkedin == "https://www.linkedin.com/in/jane-doe/"


def test_empty_optional_urls_are_ignored():
    urls = validate_urls("https://jane.dev", github="", linkedin="")

    assert urls.github is None
    assert urls.linkedin is None


@pytest.mark.parametrize("portfolio", ["jane.dev", "ftp://jane.dev", "https://", "not a url"])
def test_invalid_portfolio(portfolio):
    with pytest.raises(InvalidURLError) as exc_info:
        validate_urls(portfolio)

    assert exc_info.value.errors[0].startswith("portfolio")


def test_every_invalid_field_reported():
    with pytest.raises(InvalidURLError) as exc_info:
        validate_urls(
            "https://jane.dev",
            github="https://github.com/janedoe/repo",
            linkedin="https://linkedin.com/company/acme",
        )

    errors = exc_info.value.errors
    assert len(errors) == 2
    assert any("Invalid GitHub URL format" in error for error in errors)
    assert any("Invalid LinkedIn URL format" in error for error in errors)
    assert exc_info.value.details == {"errors": errors}
