"""
Shared fixtures: a realistic portfolio page and a fake HTTP session.

No test touches the network; fetchers and the GitHub client get a
FakeSession that answers from a url -> response table.
"""

import pytest
import requests

from portfolio_scraper.document import DocumentParser

PORTFOLIO_URL = "https://jane.dev"
PROXY_URL = "https://api.allorigins.win/get"

SAMPLE_PORTFOLIO_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Jane Doe - Full Stack Developer</title>
  <meta name="description" content="Full stack developer building accessible web applications with Python and React.">
  <script src="https://cdn.example.com/react.production.min.js"></script>
  <!-- analytics snippet removed -->
</head>
<body>
  <header>
    <h1>Jane Doe</h1>
    <p class="location">Berlin, Germany</p>
  </header>
  <section id="about">
    <h2>About</h2>
    <p>I build web applications with Django and PostgreSQL, and deploy them with Docker.</p>
  </section>
  <section id="skills" class="skills">
    <h2>Skills</h2>
    <ul>
      <li>Python</li><li>JavaScript</li><li>SQL</li><li>Testing</li><li>Accessibility</li>
    </ul>
  </section>
  <section id="projects" class="projects">
    <h2>Projects</h2>
    <div class="project">
      <h3>Weather Dashboard</h3>
      <p>A dashboard that aggregates forecasts from three public weather APIs.</p>
      <ul class="tech-stack"><li>React</li><li>Flask</li></ul>
      <img src="/img/weather.png" alt="Weather dashboard screenshot">
      <span class="status">Completed</span>
      <a href="https://github.com/janedoe/weather">Source</a>
    </div>
    <div class="project">
      <h3>Recipe Finder</h3>
      <p>Search recipes by the ingredients you already have at home.</p>
      <img src="https://via.placeholder.com/300" alt="Placeholder">
      <a href="/recipes">Details</a>
      <a href="https://recipes.example.com">Visit</a>
    </div>
  </section>
  <section id="experience" class="experience">
    <h2>Experience</h2>
    <div class="experience-item">
      <h3>Senior Developer</h3>
      <h4>Acme Corp</h4>
      <span class="date">2021 - Present</span>
      <p>Leading the frontend platform team.</p>
      <ul><li>Cut page load times by forty percent</li><li>Mentored</li></ul>
    </div>
    <div class="experience-item">
      <h3>Junior Developer</h3>
      <h4>Initech</h4>
      <span class="date">2018 - 2021</span>
    </div>
  </section>
  <section id="education">
    <h2>Education</h2>
    <div class="education-item">
      <h3>Technical University of Berlin</h3>
      <h4>BSc Computer Science</h4>
      <span class="date">2014 - 2018</span>
    </div>
  </section>
  <footer>
    <a href="mailto:jane@example.com?subject=Hi">Email</a>
    <a href="tel:+49 30 1234567">Call</a>
    <a href="https://github.com/janedoe">GitHub</a>
    <a href="https://www.linkedin.com/in/janedoe">LinkedIn</a>
    <a href="/files/jane-doe-resume.pdf">Resume</a>
    <a href="https://blog.jane.dev">Blog</a>
    <time datetime="2024-05-01">May 2024</time>
  </footer>
</body>
</html>
"""


class FakeResponse:
    """Just enough of requests.Response for the fetcher and GitHub client."""

    def __init__(self, status_code: int = 200, text: str = "", json_data=None):
        self.status_code = status_code
        self.text = text
        self.json_data = json_data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def json(self):
        if self.json_data is None:
            raise ValueError("No JSON object could be decoded")
        return self.json_data


class FakeSession:
    """Answers GETs from a url -> FakeResponse/Exception table and records calls."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        outcome = self.routes.get(url)
        if outcome is None:
            raise requests.ConnectionError(f"No route to {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def sample_html():
    return SAMPLE_PORTFOLIO_HTML


@pytest.fixture
def sample_document():
    return DocumentParser().parse(SAMPLE_PORTFOLIO_HTML)


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    """Factory: fake_session({url: FakeResponse(...) or Exception})."""
    return FakeSession
