"""
Plain-text rendering of scrape results for the terminal.
"""

from typing import Optional

from .schemas import GitHubProfile, GitHubRepository, ScrapeResult

BAR_WIDTH = 20


def _bar(score: int) -> str:
    filled = round(score / 100 * BAR_WIDTH)
    return "#" * filled + "-" * (BAR_WIDTH - filled)


def _section(title: str, items: list[str], marker: str = "-") -> list[str]:
    lines = ["", f"{title}:"]
    lines.extend(f"  {marker} {item}" for item in items)
    return lines


def render_portfolio(result: ScrapeResult) -> str:
    profile = result.profile
    analysis = result.analysis
    details = analysis.detailed_analysis

    lines = [
        "Portfolio Analysis" + (" (cached)" if result.cached else ""),
        "=" * 60,
        f"URL:   {profile.url}",
        f"Title: {profile.title or 'N/A'}",
        "",
        f"Technical     [{_bar(analysis.technical_score)}] {analysis.technical_score}/100  {details.technical_depth}",
        f"Presentation  [{_bar(analysis.presentation_score)}] {analysis.presentation_score}/100  {details.presentation_quality}",
        f"Content       [{_bar(analysis.content_score)}] {analysis.content_score}/100  {details.content_quality}",
        f"SEO           [{_bar(analysis.seo_score)}] {analysis.seo_score}/100",
        f"Overall: {details.overall_impression}",
    ]

    lines += _section("Strengths", analysis.strengths, "+")
    lines += _section("Areas for Improvement", analysis.weaknesses, "!")
    lines += _section("Suggestions", analysis.suggestions, ">")

    lines += ["", f"Technologies ({len(profile.technologies)}): {', '.join(sorted(profile.technologies)) or 'none'}"]
    lines += [f"Projects ({len(profile.projects)}):"]
    for project in profile.projects:
        link = f" <{project.url}>" if project.url else ""
        lines.append(f"  - {project.name}{link}")

    if profile.experience:
        lines += [f"Experience ({len(profile.experience)}):"]
        lines.extend(f"  - {entry.role} at {entry.company} ({entry.duration})" for entry in profile.experience)
    if profile.education:
        lines += [f"Education ({len(profile.education)}):"]
        lines.extend(f"  - {entry.degree}, {entry.institution}" for entry in profile.education)

    contact = profile.contact
    lines += ["", "Contact:"]
    lines.append(f"  Email:    {contact.email or 'N/A'}")
    lines.append(f"  Phone:    {contact.phone or 'N/A'}")
    lines.append(f"  Location: {contact.location or 'N/A'}")
    for platform, url in contact.social.items():
        lines.append(f"  {platform.capitalize()}: {url}")

    return "\n".join(lines)


def render_github(profile: GitHubProfile, repositories: list[GitHubRepository]) -> str:
    lines = [
        "GitHub Profile",
        "=" * 60,
        f"{profile.name or profile.login} (@{profile.login})",
    ]
    if profile.bio:
        lines.append(profile.bio)
    lines.append(
        f"Repositories: {profile.public_repo_count}  "
        f"Followers: {profile.followers}  Following: {profile.following}"
    )

    lines += ["", "Recent repositories:"]
    for repo in repositories:
        language = f" [{repo.primary_language}]" if repo.primary_language else ""
        lines.append(f"  - {repo.name}{language}  stars={repo.star_count} forks={repo.fork_count}")
        if repo.description:
            lines.append(f"      {repo.description}")

    return "\n".join(lines)


def render_report(
    result: ScrapeResult,
    github: Optional[tuple[GitHubProfile, list[GitHubRepository]]] = None
) -> str:
    """Full report: GitHub section (when given) followed by the portfolio."""
    parts = []
    if github is not None:
        parts.append(render_github(*github))
    parts.append(render_portfolio(result))
    return "\n\n".join(parts)
