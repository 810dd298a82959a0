"""
Pydantic schemas defining the contracts between modules.

PortfolioProfile: Contract from the Extractor to the Analyzer (and the cache)
PortfolioAnalysis: Output of the Analyzer

Data flow through the pipeline:
  Fetcher -> FetchResult -> DocumentParser -> Document
  Document -> PortfolioExtractor -> PortfolioProfile
  PortfolioProfile -> PortfolioAnalyzer -> PortfolioAnalysis

Python attributes are snake_case. JSON output uses camelCase
(``model_dump(by_alias=True)``), which is also what the cache stores.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model: camelCase aliases, construction by either name."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    """Immutable variant for everything the extractor produces."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# --- Transport ---

class FetchResult(BaseModel):
    """Raw markup plus how it was obtained."""
    html: str
    url: str
    via: str = "direct"         # "direct" or "proxy"
    elapsed_ms: float = 0.0     # Wall time of the successful path


# --- Profile (Extractor -> Analyzer) ---

class Project(FrozenCamelModel):
    name: str = "Untitled Project"
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: Optional[str] = None
    images: Optional[list[str]] = None
    status: Optional[str] = None
    duration: Optional[str] = None
    team_size: Optional[str] = None
    role: Optional[str] = None


class Experience(FrozenCamelModel):
    company: str = "Unknown Company"
    role: str = "Unknown Role"
    duration: str = "Duration not specified"
    description: str = "No description provided"
    achievements: Optional[list[str]] = None


class Education(FrozenCamelModel):
    institution: str = "Unknown Institution"
    degree: str = "Unknown Degree"
    duration: str = "Duration not specified"
    achievements: Optional[list[str]] = None


class Contact(FrozenCamelModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    social: dict[str, str] = Field(default_factory=dict)   # platform -> URL


class PageMetadata(FrozenCamelModel):
    last_updated: str                       # ISO 8601 timestamp
    page_load_time: float = 0.0             # Milliseconds
    word_count: int = 0
    seo_score: int = Field(default=0, ge=0, le=100)
    has_resume: bool = False
    has_blog: bool = False


class PortfolioProfile(FrozenCamelModel):
    """Structured profile produced by one scrape of one URL."""
    url: str = ""
    title: str = ""
    description: str = ""
    technologies: set[str] = Field(default_factory=set)
    projects: list[Project] = Field(default_factory=list)
    skills: set[str] = Field(default_factory=set)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    contact: Contact = Field(default_factory=Contact)
    metadata: PageMetadata

    # Sets have no stable iteration order; sort them so cached JSON is stable
    @field_serializer("technologies", "skills")
    def _serialize_sorted(self, values: set[str]) -> list[str]:
        return sorted(values)


# --- Analysis (Analyzer output) ---

class DetailedAnalysis(CamelModel):
    technical_depth: str
    presentation_quality: str
    content_quality: str
    overall_impression: str


class PortfolioAnalysis(CamelModel):
    strengths: list[str]
    weaknesses: list[str]
    suggestions: list[str]
    technical_score: int = Field(ge=0, le=100)
    presentation_score: int = Field(ge=0, le=100)
    content_score: int = Field(ge=0, le=100)
    seo_score: int = Field(ge=0, le=100)
    detailed_analysis: DetailedAnalysis


class ScrapeResult(CamelModel):
    """Final pipeline product handed to the presentation layer."""
    profile: PortfolioProfile
    analysis: PortfolioAnalysis
    cached: bool = False    # True when served from the cache instead of a fresh scrape


# --- GitHub collaborator ---

class GitHubProfile(CamelModel):
    login: str
    name: Optional[str] = None
    bio: Optional[str] = None
    public_repo_count: int = 0
    followers: int = 0
    following: int = 0
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None


class GitHubRepository(CamelModel):
    name: str
    description: Optional[str] = None
    url: str
    star_count: int = 0
    fork_count: int = 0
    primary_language: Optional[str] = None
    updated_at: Optional[str] = None
