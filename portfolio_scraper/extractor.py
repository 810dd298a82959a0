"""
Rule-based portfolio field extraction.

Walks a parsed Document with cascading selector lists and keyword
heuristics, producing one PortfolioProfile. Portfolio sites share no common
markup, so every field is resolved by trying an ordered list of candidate
selectors until one yields something useful.

Pipeline position: Stage 3 (Fetcher -> DocumentParser -> Extractor -> Analyzer).
Input:  Document + the page URL (for resolving relative links)
Output: PortfolioProfile

Nothing in here raises on a missing field: every extractor returns a typed
default, and a selector that fails to compile is logged and skipped.
"""

import re
from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional
from urllib.parse import urljoin

from bs4 import Tag

from .document import Document
from .logger import get_module_logger
from .schemas import (
    Contact, Education, Experience, PageMetadata, PortfolioProfile, Project
)

logger = get_module_logger("extractor")

# Text at or below this length is treated as decoration (icon labels,
# "Read more", bullets) and skipped in favour of later candidates.
SIGNIFICANCE_THRESHOLD = 10

# Upper bound for a single technology/skill label. Longer text is a
# container or a sentence, not a label.
MAX_LABEL_LENGTH = 40

ACHIEVEMENT_MIN_LENGTH = 20

# Children that make an element a container rather than a label
BLOCK_CHILD_TAGS = ["ul", "ol", "li", "div", "p", "section", "article", "table"]

HEADING_TAGS = ["h1", "h2", "h3", "h4"]
SECTION_TAGS = ("section", "article", "div")

# --- Technologies ---

TECH_SELECTORS = [
    ".technology", ".technologies li", ".tech", ".tech-stack li", ".tech-stack span",
    ".skill", ".skills li",
    "[class*='tech']", "[class*='skill']", "[data-tech]", "[data-technology]",
    "code",
]

# Canonical name -> pattern. Matched case-insensitively on word boundaries.
TECH_KEYWORDS = {
    "JavaScript": r"javascript",
    "TypeScript": r"typescript",
    "Python": r"python",
    "Java": r"java",
    "C++": r"c\+\+",
    "C#": r"c#",
    "Go": r"golang",
    "Rust": r"rust",
    "Ruby": r"ruby",
    "PHP": r"php",
    "Swift": r"swift",
    "Kotlin": r"kotlin",
    "HTML": r"html5?",
    "CSS": r"css3?",
    "Sass": r"sass|scss",
    "React": r"react(?:\.js|js)?",
    "Angular": r"angular(?:js)?",
    "Vue.js": r"vue(?:\.js|js)?",
    "Svelte": r"svelte",
    "Next.js": r"next\.js|nextjs",
    "Node.js": r"node\.js|nodejs",
    "Express": r"express\.js|expressjs",
    "Django": r"django",
    "Flask": r"flask",
    "FastAPI": r"fastapi",
    "Spring Boot": r"spring boot",
    "Ruby on Rails": r"ruby on rails|rails",
    "Laravel": r"laravel",
    "GraphQL": r"graphql",
    "MongoDB": r"mongodb|mongo",
    "PostgreSQL": r"postgresql|postgres",
    "MySQL": r"mysql",
    "Redis": r"redis",
    "Firebase": r"firebase",
    "Docker": r"docker",
    "Kubernetes": r"kubernetes|k8s",
    "AWS": r"aws",
    "Azure": r"azure",
    "Google Cloud": r"gcp|google cloud",
    "Git": r"git",
    "Tailwind CSS": r"tailwind(?:\s?css)?",
    "Bootstrap": r"bootstrap",
    "TensorFlow": r"tensorflow",
    "PyTorch": r"pytorch",
    "Figma": r"figma",
    "Linux": r"linux",
}

TECH_KEYWORD_PATTERNS = {
    name: re.compile(rf"(?<![\w+#.])(?:{pattern})(?![\w+#])", re.IGNORECASE)
    for name, pattern in TECH_KEYWORDS.items()
}

SWEEP_TAGS = ["p", "li", "div", "span"]

# Class tokens of proficiency widgets ("skill-level", "progress-bar"): their
# text is a rating, not a name
PROFICIENCY_CLASS_PATTERN = re.compile(
    r"(?:^|[-_])(?:level|percent|percentage|progress|bar|rating|meter)(?:$|[-_])", re.IGNORECASE
)
LETTER_PATTERN = re.compile(r"[^\W\d_]")

# Substring of a <script src> -> framework it ships
SCRIPT_FINGERPRINTS = [
    ("react", "React"),
    ("vue", "Vue.js"),
    ("angular", "Angular"),
    ("svelte", "Svelte"),
    ("jquery", "jQuery"),
    ("_next/", "Next.js"),
    ("gatsby", "Gatsby"),
    ("nuxt", "Nuxt"),
    ("bootstrap", "Bootstrap"),
    ("tailwind", "Tailwind CSS"),
    ("three.", "Three.js"),
]

# --- Projects ---

PROJECT_SELECTORS = [
    ".project", ".project-card", ".project-item", "[data-project]",
    ".portfolio-item", ".work-item",
    "#projects article", "#projects .card", ".projects article", ".projects .card",
    "#work article",
    "article",
]
PROJECT_NAME_SELECTORS = ["h1", "h2", "h3", "h4", ".project-title", ".title", ".name",
                          "[class*='title']", "strong"]
PROJECT_DESCRIPTION_SELECTORS = [".project-description", ".description", "[class*='desc']",
                                 "p", ".summary"]
PROJECT_TECH_SELECTORS = [".tech", ".tags li", ".tag", ".chip", ".stack li",
                          ".technologies li", ".tech-stack li",
                          "[class*='tech'] li", "[class*='tech'] span", "code"]
PROJECT_STATUS_SELECTORS = ["[class*='status']"]
DURATION_SELECTORS = [".duration", ".dates", ".date", "time", "[class*='date']",
                      "[class*='period']", "[class*='duration']"]
PROJECT_TEAM_SELECTORS = ["[class*='team-size']", "[class*='team']"]
PROJECT_ROLE_SELECTORS = ["[class*='role']", ".position"]

TEAM_SIZE_PATTERN = re.compile(
    r"\bteam(?:\s+size)?\s*(?:of|:|-)\s*(\d+)|\b(\d+)\s*(?:person|people|member|developer)s?\b",
    re.IGNORECASE
)
PROJECT_LINK_PATTERN = re.compile(r"github|demo|live", re.IGNORECASE)
DOMAIN_SUFFIX_PATTERN = re.compile(
    r"\.(?:com|io|dev|app|net|org|me|co|site|tech)(?:[/:?#]|$)", re.IGNORECASE
)
PLACEHOLDER_IMAGE_HINTS = ("placeholder", "dummyimage", "spacer", "blank.", "1x1",
                           "pixel.gif", "data:image/gif")
SKIPPED_HREF_PREFIXES = ("#", "javascript:", "mailto:", "tel:")

# --- Experience / education ---

EXPERIENCE_HEADING_PATTERN = re.compile(
    r"^\s*(?:work\s+|professional\s+)?(?:experience|work history|employment|career history)\b",
    re.IGNORECASE
)
EXPERIENCE_ITEM_SELECTORS = [".experience-item", ".job", ".position", ".timeline-item",
                             "#experience article", "#experience .card",
                             ".experience article", ".experience .card",
                             "[class*='experience'] .item"]
COMPANY_SELECTORS = [".company", "[class*='company']", ".organization",
                     "[class*='employer']", "h4"]
ROLE_SELECTORS = [".role", ".job-title", ".position-title", "[class*='role']",
                  "[class*='title']", "h3"]

EDUCATION_HEADING_PATTERN = re.compile(
    r"^\s*(?:education|academic background|academics|qualifications?)\b", re.IGNORECASE
)
EDUCATION_ITEM_SELECTORS = [".education-item", ".degree-item", ".school-item",
                            "#education article", "#education .card",
                            ".education article", ".education .card",
                            "[class*='education'] .item"]
INSTITUTION_SELECTORS = [".institution", ".school", ".university", "[class*='institution']",
                         "[class*='school']", "[class*='university']", "[class*='college']",
                         "h3"]
DEGREE_SELECTORS = [".degree", "[class*='degree']", ".qualification",
                    "[class*='qualification']", "[class*='major']", "h4"]

ENTRY_DESCRIPTION_SELECTORS = [".description", "[class*='desc']", "p"]
SUB_ENTRY_SELECTORS = "article, .card, .item, .entry"

# Primary fields (names, dates) are legitimately short: any text counts
SHORT_FIELD_MIN_LENGTH = 0

# --- Skills / contact ---

SKILL_SELECTORS = [".skill", ".skills li", ".skills span", "#skills li", "#skills span",
                   ".skill-item", ".skill-name", "[class*='skill'] li"]
SKILLS_HEADING_PATTERN = re.compile(r"^\s*(?:technical\s+|core\s+)?skills\b", re.IGNORECASE)

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
PHONE_PATTERN = re.compile(r"(?:\+\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b")
LOCATION_SELECTORS = [".location", "[class*='location']", "[itemprop='address']",
                      ".address", "[class*='address']"]

SOCIAL_PLATFORMS = ["github", "gitlab", "linkedin", "twitter", "instagram", "facebook",
                    "youtube", "dribbble", "behance", "medium", "stackoverflow",
                    "codepen", "kaggle", "dev.to"]

# --- Page metadata ---

DESCRIPTION_FALLBACK_SELECTORS = [".about p", "#about p", ".bio", ".intro", ".hero p",
                                  "header p", "main p", "p"]
LAST_UPDATED_SELECTORS = [".last-updated", ".updated", "[class*='last-updated']"]
RESUME_PATTERN = re.compile(r"\b(?:resume|résumé|cv)\b", re.IGNORECASE)
BLOG_PATTERN = re.compile(r"\bblog\b|/posts?/|medium\.com|dev\.to|hashnode", re.IGNORECASE)

SEO_TITLE_MIN, SEO_TITLE_MAX = 20, 60
SEO_DESCRIPTION_MIN = 120
SEO_BODY_TEXT_MIN = 1000


class PortfolioExtractor:
    """Extracts profile fields from one parsed portfolio page."""

    def __init__(self, document: Document, base_url: str = ""):
        self.document = document
        self.base_url = base_url

    # --- Selector helpers ---

    def _select_all(self, selectors: Iterable[str], scope: Optional[Tag] = None) -> Iterator[Tag]:
        """Yield matches selector by selector; bad selectors are skipped."""
        for selector in selectors:
            try:
                matches = self.document.select(selector, scope)
            except Exception as e:
                logger.warning(f"Invalid selector '{selector}': {e}")
                continue
            yield from matches

    def get_content(
        self,
        selectors: Iterable[str],
        scope: Optional[Tag] = None,
        min_length: int = SIGNIFICANCE_THRESHOLD
    ) -> str:
        """
        First matched text longer than ``min_length`` characters.

        Selectors are tried in priority order and, within a selector, matches
        in document order. A short match never shadows a longer candidate
        further down the list. Returns '' when nothing qualifies.
        """
        for element in self._select_all(selectors, scope):
            text = self.document.text(element)
            if len(text) > min_length:
                return text
        return ""

    def _is_label(self, element: Tag) -> bool:
        if element.name in HEADING_TAGS or element.find(BLOCK_CHILD_TAGS) is not None:
            return False
        classes = element.get("class") or []
        return not any(PROFICIENCY_CLASS_PATTERN.search(token) for token in classes)

    def _label_elements(self, selectors: Iterable[str], scope: Optional[Tag] = None) -> Iterator[tuple[Tag, str]]:
        """(element, text) for distinct short leaf texts, first-seen order."""
        seen = set()
        for element in self._select_all(selectors, scope):
            if not self._is_label(element):
                continue
            text = self.document.text(element)
            # "90%" or "4/5" is a rating, not a name
            if not text or len(text) > MAX_LABEL_LENGTH or not LETTER_PATTERN.search(text):
                continue
            if text.lower() in seen:
                continue
            seen.add(text.lower())
            yield element, text

    def _collect_labels(self, selectors: Iterable[str], scope: Optional[Tag] = None) -> list[str]:
        """Distinct short leaf texts (tech badges, skill chips), first-seen order."""
        return [text for _, text in self._label_elements(selectors, scope)]

    def _resolve(self, href: str) -> str:
        return urljoin(self.base_url, href) if self.base_url else href

    def _links(self, scope: Optional[Tag] = None) -> Iterator[tuple[Tag, str]]:
        """(anchor, resolved URL) for every navigable anchor."""
        for anchor in self.document.find_all("a", scope):
            href = self.document.attr(anchor, "href")
            if not href or href.lower().startswith(SKIPPED_HREF_PREFIXES):
                continue
            yield anchor, self._resolve(href)

    # --- Page-level fields ---

    def get_title(self) -> str:
        return (
            self.document.title
            or self.document.meta("og:title")
            or self.document.text(self.document.soup.find("h1"))
        )

    def get_description(self) -> str:
        return (
            self.document.meta("description")
            or self.document.meta("og:description")
            or self.get_content(DESCRIPTION_FALLBACK_SELECTORS)
        )

    # --- Technologies / skills ---

    def get_technologies(self) -> set[str]:
        """
        Technologies named on the page.

        Pass 1 collects labels from technology-ish markup. Pass 2 sweeps prose
        for a fixed vocabulary so technologies mentioned without any markup
        hint are still found. <script src> fingerprints are added last.

        A canonical name is only added when no collected label already
        spells the same technology ("postgres" blocks "PostgreSQL").
        """
        technologies = set()
        labelled = set()
        for element, text in self._label_elements(TECH_SELECTORS):
            technologies.add(text)
            labelled.add(id(element))

        # Only outermost sweep nodes: their text already covers nested ones
        for node in self.document.find_all(SWEEP_TAGS):
            if id(node) in labelled or node.find_parent(SWEEP_TAGS) is not None:
                continue
            text = node.get_text(" ")
            for name, pattern in TECH_KEYWORD_PATTERNS.items():
                if pattern.search(text) and not self._already_listed(name, technologies):
                    technologies.add(name)

        for script in self.document.find_all("script"):
            src = self.document.attr(script, "src").lower()
            if not src:
                continue
            for fingerprint, name in SCRIPT_FINGERPRINTS:
                if fingerprint in src and not self._already_listed(name, technologies):
                    technologies.add(name)

        return technologies

    @staticmethod
    def _already_listed(name: str, technologies: set[str]) -> bool:
        """True if ``name`` or another spelling of it is already in ``technologies``."""
        pattern = TECH_KEYWORD_PATTERNS.get(name)
        for known in technologies:
            if known.lower() == name.lower():
                return True
            if pattern is not None and pattern.fullmatch(known):
                return True
        return False

    def get_skills(self) -> set[str]:
        skills = set(self._collect_labels(SKILL_SELECTORS))

        # Plain <ul> right after a "Skills" heading
        for heading in self.document.find_all(HEADING_TAGS):
            if not SKILLS_HEADING_PATTERN.search(self.document.text(heading)):
                continue
            listing = heading.find_next_sibling(["ul", "ol"])
            if listing is None:
                continue
            for item in listing.find_all("li"):
                text = self.document.text(item)
                if text and len(text) <= MAX_LABEL_LENGTH:
                    skills.add(text)

        return skills

    # --- Projects ---

    def get_projects(self) -> list[Project]:
        """
        Project cards found on the page.

        An element matched by several selectors is registered once, and an
        element inside an already registered project is skipped.
        """
        projects = []
        registered = []
        seen = set()

        for element in self._select_all(PROJECT_SELECTORS):
            if id(element) in seen:
                continue
            seen.add(id(element))
            if any(self.document.contains(container, element) for container in registered):
                continue

            project = self._build_project(element)
            if project is not None:
                projects.append(project)
                registered.append(element)

        return projects

    def _build_project(self, element: Tag) -> Optional[Project]:
        name = self.get_content(PROJECT_NAME_SELECTORS, element, min_length=SHORT_FIELD_MIN_LENGTH)
        description = self.get_content(PROJECT_DESCRIPTION_SELECTORS, element)
        if not name and not description:
            return None

        return Project(
            name=name or "Untitled Project",
            description=description,
            technologies=self._collect_labels(PROJECT_TECH_SELECTORS, element),
            url=self._project_link(element),
            images=self._project_images(element),
            status=self._optional_text(PROJECT_STATUS_SELECTORS, element),
            duration=self._optional_text(DURATION_SELECTORS, element),
            team_size=self._team_size(element),
            role=self._optional_text(PROJECT_ROLE_SELECTORS, element),
        )

    def _optional_text(self, selectors: Iterable[str], scope: Tag) -> Optional[str]:
        return self.get_content(selectors, scope, min_length=SHORT_FIELD_MIN_LENGTH) or None

    def _team_size(self, scope: Tag) -> Optional[str]:
        team = self._optional_text(PROJECT_TEAM_SELECTORS, scope)
        if team:
            return team
        match = TEAM_SIZE_PATTERN.search(self.document.text(scope))
        if match:
            return match.group(1) or match.group(2)
        return None

    def _project_link(self, scope: Tag) -> Optional[str]:
        """Repository/demo link first, then any absolute link to a real domain."""
        links = list(self._links(scope))
        for _, url in links:
            if PROJECT_LINK_PATTERN.search(url):
                return url
        for anchor, url in links:
            href = self.document.attr(anchor, "href")
            if href.lower().startswith(("http://", "https://")) and DOMAIN_SUFFIX_PATTERN.search(href):
                return url
        return None

    def _project_images(self, scope: Tag) -> Optional[list[str]]:
        images = []
        for image in self.document.find_all("img", scope):
            src = self.document.attr(image, "src") or self.document.attr(image, "data-src")
            if not src or any(hint in src.lower() for hint in PLACEHOLDER_IMAGE_HINTS):
                continue
            url = self._resolve(src)
            if url not in images:
                images.append(url)
        return images or None

    # --- Experience / education ---

    def _section_entries(
        self,
        item_selectors: list[str],
        heading_pattern: re.Pattern
    ) -> list[Tag]:
        """
        Containers holding one experience/education entry each.

        Explicit item markup wins. Sections found only through their heading
        contribute their cards, or the section itself when it has none.
        """
        entries = []
        seen = set()

        for element in self._select_all(item_selectors):
            if id(element) not in seen:
                seen.add(id(element))
                entries.append(element)

        for heading in self.document.find_all(HEADING_TAGS):
            if not heading_pattern.search(self.document.text(heading)):
                continue
            section = (self.document.closest(heading, ("section",))
                       or self.document.closest(heading, SECTION_TAGS))
            if section is None or id(section) in seen:
                continue
            if any(self.document.contains(section, entry) or self.document.contains(entry, section)
                   for entry in entries):
                continue
            seen.add(id(section))

            cards = [card for card in self.document.select(SUB_ENTRY_SELECTORS, section)
                     if id(card) not in seen]
            for card in cards or [section]:
                seen.add(id(card))
                entries.append(card)

        return entries

    def _achievements(self, scope: Tag) -> Optional[list[str]]:
        achievements = [
            text for text in (self.document.text(item) for item in self.document.find_all("li", scope))
            if len(text) > ACHIEVEMENT_MIN_LENGTH
        ]
        return achievements or None

    def get_experience(self) -> list[Experience]:
        experience = []
        for entry in self._section_entries(EXPERIENCE_ITEM_SELECTORS, EXPERIENCE_HEADING_PATTERN):
            company = self.get_content(COMPANY_SELECTORS, entry, min_length=SHORT_FIELD_MIN_LENGTH)
            role = self.get_content(ROLE_SELECTORS, entry, min_length=SHORT_FIELD_MIN_LENGTH)
            if not company and not role:
                continue

            duration = self.get_content(DURATION_SELECTORS, entry, min_length=SHORT_FIELD_MIN_LENGTH)
            description = self.get_content(ENTRY_DESCRIPTION_SELECTORS, entry)
            experience.append(Experience(
                company=company or "Unknown Company",
                role=role or "Unknown Role",
                duration=duration or "Duration not specified",
                description=description or "No description provided",
                achievements=self._achievements(entry),
            ))
        return experience

    def get_education(self) -> list[Education]:
        education = []
        for entry in self._section_entries(EDUCATION_ITEM_SELECTORS, EDUCATION_HEADING_PATTERN):
            institution = self.get_content(INSTITUTION_SELECTORS, entry,
                                           min_length=SHORT_FIELD_MIN_LENGTH)
            degree = self.get_content(DEGREE_SELECTORS, entry, min_length=SHORT_FIELD_MIN_LENGTH)
            if not institution and not degree:
                continue

            duration = self.get_content(DURATION_SELECTORS, entry, min_length=SHORT_FIELD_MIN_LENGTH)
            education.append(Education(
                institution=institution or "Unknown Institution",
                degree=degree or "Unknown Degree",
                duration=duration or "Duration not specified",
                achievements=self._achievements(entry),
            ))
        return education

    # --- Contact ---

    def get_social_links(self) -> dict[str, str]:
        """First link per platform whose URL mentions the platform name."""
        social = {}
        for _, url in self._links():
            lowered = url.lower()
            for platform in SOCIAL_PLATFORMS:
                if platform not in social and platform in lowered:
                    social[platform] = url
        return social

    def get_contact(self) -> Contact:
        email = None
        phone = None
        for anchor in self.document.find_all("a"):
            href = self.document.attr(anchor, "href")
            lowered = href.lower()
            if email is None and lowered.startswith("mailto:"):
                email = href[len("mailto:"):].split("?")[0].strip() or None
            elif phone is None and lowered.startswith("tel:"):
                phone = href[len("tel:"):].strip() or None

        body_text = self.document.body_text
        if email is None:
            match = EMAIL_PATTERN.search(body_text)
            email = match.group(0) if match else None
        if phone is None:
            match = PHONE_PATTERN.search(body_text)
            phone = match.group(0).strip() if match else None

        location = self.get_content(LOCATION_SELECTORS, min_length=SHORT_FIELD_MIN_LENGTH) or None

        return Contact(email=email, phone=phone, location=location, social=self.get_social_links())

    # --- SEO / metadata ---

    def calculate_seo_score(self) -> int:
        soup = self.document.soup
        score = 0

        title = self.document.title
        if title:
            score += 10
            if SEO_TITLE_MIN <= len(title) < SEO_TITLE_MAX:
                score += 5

        description = self.document.meta("description")
        if description:
            score += 10
            if len(description) >= SEO_DESCRIPTION_MIN:
                score += 5

        if soup.find("h1") is not None:
            score += 10
        if soup.find("h2") is not None:
            score += 5

        images = soup.find_all("img")
        if images and all(self.document.attr(image, "alt") for image in images):
            score += 10

        if soup.find("a", href=True) is not None:
            score += 5

        if len(self.document.body_text) > SEO_BODY_TEXT_MIN:
            score += 10

        return max(0, min(100, score))

    def get_last_updated(self) -> str:
        for element in self.document.find_all("time"):
            stamp = self.document.attr(element, "datetime")
            if stamp:
                return stamp
        updated = self.get_content(LAST_UPDATED_SELECTORS, min_length=SHORT_FIELD_MIN_LENGTH)
        if updated:
            return updated
        return (
            self.document.meta("article:modified_time")
            or self.document.meta("last-modified")
            or datetime.now(timezone.utc).isoformat()
        )

    def _has_link_matching(self, pattern: re.Pattern) -> bool:
        for anchor, url in self._links():
            if pattern.search(url) or pattern.search(self.document.text(anchor)):
                return True
        return False

    def get_metadata(self, page_load_time: float = 0.0) -> PageMetadata:
        return PageMetadata(
            last_updated=self.get_last_updated(),
            page_load_time=page_load_time,
            word_count=len(self.document.body_text.split()),
            seo_score=self.calculate_seo_score(),
            has_resume=self._has_link_matching(RESUME_PATTERN),
            has_blog=self._has_link_matching(BLOG_PATTERN),
        )

    # --- Assembly ---

    def extract(self, page_load_time: float = 0.0) -> PortfolioProfile:
        """Run every extractor and assemble the profile."""
        logger.info(f"Extracting profile fields from {self.base_url or 'document'}")

        profile = PortfolioProfile(
            url=self.base_url,
            title=self.get_title(),
            description=self.get_description(),
            technologies=self.get_technologies(),
            projects=self.get_projects(),
            skills=self.get_skills(),
            experience=self.get_experience(),
            education=self.get_education(),
            contact=self.get_contact(),
            metadata=self.get_metadata(page_load_time),
        )

        logger.info(
            f"Extracted {len(profile.technologies)} technologies, "
            f"{len(profile.projects)} projects, {len(profile.experience)} experience entries"
        )
        return profile


def extract_profile(document: Document, base_url: str = "", page_load_time: float = 0.0) -> PortfolioProfile:
    """Convenience function to extract a profile from a parsed page."""
    return PortfolioExtractor(document, base_url).extract(page_load_time)
