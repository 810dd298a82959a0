"""
Validation of the URLs a user submits.

Only the portfolio URL is required; GitHub and LinkedIn URLs are optional
but must point at a profile when given.
"""

import re
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from .exceptions import InvalidURLError

URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)
GITHUB_PATTERN = re.compile(r"^https://(?:www\.)?github\.com/[a-zA-Z0-9-]+/?$", re.IGNORECASE)
LINKEDIN_PATTERN = re.compile(r"^https://(?:www\.)?linkedin\.com/in/[a-zA-Z0-9-]+/?$", re.IGNORECASE)


class UrlInputs(BaseModel):
    portfolio: str
    github: Optional[str] = None
    linkedin: Optional[str] = None

    @field_validator("portfolio")
    @classmethod
    def _check_portfolio(cls, value: str) -> str:
        value = value.strip()
        if not URL_PATTERN.match(value):
            raise ValueError("Must be a valid URL")
        return value

    @field_validator("github")
    @classmethod
    def _check_github(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        value = value.strip()
        if not GITHUB_PATTERN.match(value):
            raise ValueError("Invalid GitHub URL format")
        return value

    @field_validator("linkedin")
    @classmethod
    def _check_linkedin(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        value = value.strip()
        if not LINKEDIN_PATTERN.match(value):
            raise ValueError("Invalid LinkedIn URL format")
        return value


def validate_urls(
    portfolio: str,
    github: Optional[str] = None,
    linkedin: Optional[str] = None
) -> UrlInputs:
    """
    Validate submitted URLs.

    Raises:
        InvalidURLError: one or more URLs are malformed; ``errors`` lists them
    """
    try:
        return UrlInputs(portfolio=portfolio, github=github, linkedin=linkedin)
    except ValidationError as e:
        errors = [f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise InvalidURLError("Invalid input URLs", errors=errors) from e
