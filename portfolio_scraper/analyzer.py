"""
Heuristic portfolio scoring.

Turns a PortfolioProfile into a PortfolioAnalysis: four sub-scores
(technical, presentation, content, SEO), qualitative labels, and the
strengths / weaknesses / suggestions that explain them.

Pipeline position: Stage 4 (Fetcher -> DocumentParser -> Extractor -> Analyzer).
Input:  PortfolioProfile
Output: PortfolioAnalysis

Scoring is a pure function of the profile. Every rule is a band on a
countable or length attribute; each band adds points and a remark, and a
band below the ideal one also adds a suggestion.
"""

from dataclasses import dataclass, field

from .logger import get_module_logger
from .schemas import DetailedAnalysis, PortfolioAnalysis, PortfolioProfile

logger = get_module_logger("analyzer")

# Overused self-descriptions. More than BUZZWORD_LIMIT of them in the
# description costs BUZZWORD_PENALTY presentation points.
BUZZWORDS = [
    "passionate", "guru", "ninja", "rockstar", "wizard", "synergy", "innovative",
    "hardworking", "hard-working", "detail-oriented", "team player", "self-starter",
    "results-driven", "go-getter", "thought leader", "disruptive", "cutting-edge",
    "dynamic", "motivated", "think outside the box",
]
BUZZWORD_LIMIT = 3
BUZZWORD_PENALTY = 15

# (minimum score, label), highest first
SCORE_BANDS = [
    (90, "Exceptional"),
    (80, "Excellent"),
    (70, "Very Good"),
    (60, "Good"),
    (50, "Fair"),
]
LOWEST_BAND = "Needs Improvement"

NO_STRENGTHS = "No standout strengths detected yet"
NO_WEAKNESSES = "No major weaknesses detected"
NO_SUGGESTIONS = "Keep your portfolio updated with your latest work"

WELL_DOCUMENTED_DESCRIPTION = 50


def clamp_score(value: float) -> int:
    """Round and clamp a raw score into 0-100."""
    return max(0, min(100, int(round(value))))


def score_label(score: float) -> str:
    for minimum, label in SCORE_BANDS:
        if score >= minimum:
            return label
    return LOWEST_BAND


@dataclass
class _Findings:
    """Remarks collected while scoring one profile."""
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


class PortfolioAnalyzer:
    """Scores a portfolio profile. Holds no state between calls."""

    def analyze(self, profile: PortfolioProfile) -> PortfolioAnalysis:
        findings = _Findings()

        technical = self._score_technical(profile, findings)
        presentation = self._score_presentation(profile, findings)
        content = self._score_content(profile, findings)
        seo = self._score_seo(profile, findings)

        technical_score = clamp_score(technical)
        presentation_score = clamp_score(presentation)
        content_score = clamp_score(content)
        seo_score = clamp_score(seo)
        average = (technical_score + presentation_score + content_score) / 3

        logger.info(
            f"Scored {profile.url or 'profile'}: technical={technical_score} "
            f"presentation={presentation_score} content={content_score} seo={seo_score}"
        )

        return PortfolioAnalysis(
            strengths=findings.strengths or [NO_STRENGTHS],
            weaknesses=findings.weaknesses or [NO_WEAKNESSES],
            suggestions=findings.suggestions or [NO_SUGGESTIONS],
            technical_score=technical_score,
            presentation_score=presentation_score,
            content_score=content_score,
            seo_score=seo_score,
            detailed_analysis=DetailedAnalysis(
                technical_depth=score_label(technical_score),
                presentation_quality=score_label(presentation_score),
                content_quality=score_label(content_score),
                overall_impression=score_label(average),
            ),
        )

    # --- Technical ---

    def _score_technical(self, profile: PortfolioProfile, findings: _Findings) -> int:
        score = 0

        tech_count = len(profile.technologies)
        if tech_count >= 12:
            score += 35
            findings.strengths.append(f"Extensive technology stack ({tech_count} technologies)")
        elif tech_count >= 8:
            score += 28
            findings.strengths.append(f"Broad technology stack ({tech_count} technologies)")
            findings.suggestions.append("Highlight a few more of the tools you use day to day")
        elif tech_count >= 5:
            score += 20
            findings.strengths.append("Solid core technology stack")
            findings.suggestions.append("Show more of your technical range, such as testing or deployment tools")
        else:
            score += tech_count * 3
            findings.weaknesses.append("Limited technology stack on display")
            findings.suggestions.append("List the languages, frameworks and tools you work with")

        project_count = len(profile.projects)
        if project_count >= 5:
            score += 35
            findings.strengths.append(f"Strong project portfolio ({project_count} projects)")
        elif project_count >= 3:
            score += 25
            findings.strengths.append("Good selection of projects")
            findings.suggestions.append("Add a couple more projects to show depth")
        elif project_count >= 1:
            score += 10
            findings.weaknesses.append("Few projects showcased")
            findings.suggestions.append("Add more project examples to demonstrate your capabilities")
        else:
            findings.weaknesses.append("No projects showcased")
            findings.suggestions.append("Create a projects section with your best work")

        if profile.projects:
            documented = sum(
                1 for project in profile.projects
                if len(project.description) > WELL_DOCUMENTED_DESCRIPTION and project.technologies
            )
            ratio = documented / project_count
            if ratio >= 0.8:
                score += 15
                findings.strengths.append("Projects are well documented")
            elif ratio >= 0.5:
                score += 8
                findings.suggestions.append("Describe every project and the technologies it uses")
            else:
                findings.weaknesses.append("Project descriptions lack detail")
                findings.suggestions.append("Explain what each project does and which technologies it uses")

            linked = sum(1 for project in profile.projects if project.url)
            if linked / project_count >= 0.5:
                score += 10
                findings.strengths.append("Projects link to live demos or source code")
            else:
                findings.suggestions.append("Link each project to its repository or a live demo")

        return score

    # --- Presentation ---

    def _score_presentation(self, profile: PortfolioProfile, findings: _Findings) -> int:
        score = 0

        description_length = len(profile.description)
        if description_length >= 300:
            score += 30
            findings.strengths.append("Landing page gives visitors a detailed introduction")
        elif description_length >= 150:
            score += 20
            findings.strengths.append("Landing page introduction is well sized")
        elif description_length >= 50:
            score += 10
            findings.weaknesses.append("Short landing page introduction")
        else:
            findings.weaknesses.append("Landing page lacks an introduction")

        contact = profile.contact
        if contact.email:
            score += 10
        if contact.phone:
            score += 5
            findings.strengths.append("Phone number listed")
        if contact.location:
            score += 5
            findings.strengths.append("Location listed")

        social_count = len(contact.social)
        if social_count >= 3:
            score += 15
            findings.strengths.append(f"Links to {social_count} professional profiles")
        elif social_count >= 1:
            score += 8
            findings.strengths.append("Links to a professional profile")
            findings.suggestions.append("Link more of your professional profiles, such as GitHub or LinkedIn")
        else:
            findings.weaknesses.append("No professional profile links")

        if contact.email and social_count:
            findings.strengths.append("Good professional networking presence")
        else:
            findings.weaknesses.append("Limited contact information")
            findings.suggestions.append("Add an email address and links to your professional profiles")

        if profile.metadata.has_resume:
            score += 10
            findings.strengths.append("Resume is available for download")
        else:
            findings.suggestions.append("Link a downloadable resume")

        if any(project.images for project in profile.projects):
            score += 10
            findings.strengths.append("Projects include screenshots")
        elif profile.projects:
            findings.suggestions.append("Add screenshots to your projects")

        description = profile.description.lower()
        buzzwords = [word for word in BUZZWORDS if word in description]
        if len(buzzwords) > BUZZWORD_LIMIT:
            score -= BUZZWORD_PENALTY
            findings.weaknesses.append(f"Overuse of buzzwords ({', '.join(buzzwords[:5])})")
            findings.suggestions.append("Replace generic buzzwords with concrete accomplishments")

        return score

    # --- Content ---

    def _score_content(self, profile: PortfolioProfile, findings: _Findings) -> int:
        score = 0

        description_length = len(profile.description)
        if description_length >= 300:
            score += 30
            findings.strengths.append("Comprehensive professional summary")
        elif description_length >= 150:
            score += 20
            findings.strengths.append("Clear professional summary")
            findings.suggestions.append("Expand your summary with your focus areas and goals")
        elif description_length >= 50:
            score += 10
            findings.weaknesses.append("Brief professional description")
            findings.suggestions.append("Expand your professional summary to better highlight your expertise")
        else:
            findings.weaknesses.append("Missing professional description")
            findings.suggestions.append("Write a short professional summary for your landing page")

        experience_count = len(profile.experience)
        if experience_count >= 3:
            score += 25
            findings.strengths.append(f"Substantial work history ({experience_count} roles)")
        elif experience_count >= 1:
            score += 15
            findings.suggestions.append("Detail more of your professional experience")
        else:
            findings.weaknesses.append("No work experience listed")
            findings.suggestions.append("Add an experience section, including internships or freelance work")

        if profile.education:
            score += 15
            findings.strengths.append("Education background included")
        else:
            findings.suggestions.append("Add your education or certifications")

        skill_count = len(profile.skills)
        if skill_count >= 10:
            score += 15
            findings.strengths.append("Detailed skills section")
        elif skill_count >= 5:
            score += 10
            findings.suggestions.append("Expand your skills section")
        else:
            findings.weaknesses.append("Skills are not clearly listed")
            findings.suggestions.append("Add a dedicated skills section")

        if profile.metadata.has_blog:
            score += 10
            findings.strengths.append("Active blog or writing")

        word_count = profile.metadata.word_count
        if word_count > 500:
            score += 5
            findings.strengths.append(f"Substantial written content ({word_count} words)")
        else:
            findings.weaknesses.append("Little written content on the page")

        return score

    # --- SEO ---

    def _score_seo(self, profile: PortfolioProfile, findings: _Findings) -> int:
        seo = profile.metadata.seo_score
        if seo >= 80:
            findings.strengths.append("Strong search engine optimization")
        elif seo < 50:
            findings.weaknesses.append("Weak search engine optimization")
            findings.suggestions.append("Add a descriptive page title, meta description and image alt text")
        return seo


def analyze(profile: PortfolioProfile) -> PortfolioAnalysis:
    """Convenience function to score a profile."""
    return PortfolioAnalyzer().analyze(profile)
