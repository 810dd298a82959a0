"""
Document parser: sanitizes raw markup and builds a queryable tree.

Design principle: NEVER FAIL on bad HTML. Portfolio pages are uncontrolled
input, so malformed markup must still produce a best-effort tree.

Pipeline position: Stage 2 (Fetcher -> DocumentParser -> Extractor -> Analyzer).
Input:  raw HTML string (possibly malformed)
Output: Document, a thin query wrapper around a BeautifulSoup tree
"""

import re
from typing import Iterable, Iterator, Optional, Union

from bs4 import BeautifulSoup, Comment, Tag

from .exceptions import ParseFailure
from .logger import get_module_logger

logger = get_module_logger("document")

WHITESPACE_PATTERN = re.compile(r"\s+")

# Parser fallback chain. html5lib implements the WHATWG algorithm and copes
# with the worst markup; lxml is fast and tolerant; html.parser ships with
# Python.
PARSER_BACKENDS = ("html5lib", "lxml", "html.parser")


class Document:
    """
    Query wrapper over a parsed page.

    Every query can be scoped to a subtree by passing ``scope``; without it
    the whole document is searched. Selector errors propagate to the caller,
    which decides whether to skip the selector.
    """

    def __init__(self, soup: BeautifulSoup, warnings: Optional[list[str]] = None):
        self.soup = soup
        self.warnings = warnings or []

    # --- Selector queries ---

    def select(self, selector: str, scope: Optional[Tag] = None) -> list[Tag]:
        """All elements matching ``selector``, in document order."""
        return (scope or self.soup).select(selector)

    def select_one(self, selector: str, scope: Optional[Tag] = None) -> Optional[Tag]:
        """First element matching ``selector``, or None."""
        return (scope or self.soup).select_one(selector)

    def find_all(self, names: Union[str, Iterable[str]], scope: Optional[Tag] = None) -> list[Tag]:
        """All elements with the given tag name(s)."""
        if not isinstance(names, str):
            names = list(names)
        return (scope or self.soup).find_all(names)

    # --- Element accessors ---

    @staticmethod
    def text(element: Optional[Tag]) -> str:
        """Trimmed text content with runs of whitespace collapsed."""
        if element is None:
            return ""
        return WHITESPACE_PATTERN.sub(" ", element.get_text(" ", strip=True)).strip()

    @staticmethod
    def attr(element: Optional[Tag], name: str) -> str:
        """Attribute value as a trimmed string ('' when absent)."""
        if element is None:
            return ""
        value = element.get(name)
        if value is None:
            return ""
        # Multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        return value.strip()

    # --- Relationship queries ---

    @staticmethod
    def ancestors(element: Tag) -> Iterator[Tag]:
        """Enclosing elements from the nearest outwards."""
        for parent in element.parents:
            if isinstance(parent, Tag) and not isinstance(parent, BeautifulSoup):
                yield parent

    def closest(self, element: Tag, names: Iterable[str]) -> Optional[Tag]:
        """Nearest ancestor whose tag name is in ``names``."""
        wanted = set(names)
        for parent in self.ancestors(element):
            if parent.name in wanted:
                return parent
        return None

    def contains(self, ancestor: Tag, element: Tag) -> bool:
        """True if ``element`` lies strictly inside ``ancestor``."""
        return any(parent is ancestor for parent in self.ancestors(element))

    # --- Page-level shortcuts ---

    @property
    def title(self) -> str:
        return self.text(self.soup.find("title"))

    @property
    def body_text(self) -> str:
        body = self.soup.find("body")
        return self.text(body if body is not None else self.soup)

    def meta(self, name: str) -> str:
        """Content of <meta name=...> or <meta property=...> ('' when absent)."""
        element = self.soup.find("meta", attrs={"name": name})
        if element is None:
            element = self.soup.find("meta", attrs={"property": name})
        return self.attr(element, "content")


class DocumentParser:
    """
    Rule-based sanitizer plus a parser fallback chain.

    Comments are dropped and <style>/<noscript>/inline <script> bodies are
    cleared so their text never leaks into extracted content. <script src>
    attributes stay in place: the extractor reads them as framework
    fingerprints.
    """

    CONTENT_STRIP_ELEMENTS = ["script", "style", "noscript"]

    def parse(self, html: str) -> Document:
        """
        Parse raw markup into a Document.

        Raises:
            ParseFailure: every parser backend rejected the markup
        """
        sanitized, warnings = self._sanitize_html(html or "")

        soup = None
        errors = {}
        for backend in PARSER_BACKENDS:
            try:
                soup = BeautifulSoup(sanitized, backend)
                break
            except Exception as e:
                # Missing optional backends (FeatureNotFound) land here as well
                logger.warning(f"{backend} parsing failed: {e}")
                warnings.append(f"{backend} parsing failed: {e}")
                errors[backend] = str(e)

        if soup is None:
            raise ParseFailure("No parser backend could read the document", details=errors)

        self._remove_comments(soup)
        self._clear_script_style(soup)

        logger.debug(f"Parsed document ({len(sanitized)} chars, {len(warnings)} warnings)")
        return Document(soup, warnings)

    def _sanitize_html(self, html: str) -> tuple[str, list[str]]:
        """
        Fix common malformations at the string level so parsers don't choke.

        Returns:
            Tuple of (sanitized HTML, list of warnings)
        """
        warnings = []
        sanitized = html.encode("utf-8", errors="replace").decode("utf-8")

        if "\x00" in sanitized:
            sanitized = sanitized.replace("\x00", "")
            warnings.append("Removed NULL bytes")

        # <<p>> from copy-paste corruption
        double_bracket_pattern = r"<{2,}(\/?[a-zA-Z][^>]*?)>{2,}"
        if re.search(double_bracket_pattern, sanitized):
            sanitized = re.sub(double_bracket_pattern, r"<\1>", sanitized)
            warnings.append("Fixed double angle brackets")

        # href=="/path" is a common CMS bug
        malformed_attr_pattern = r"(\w+)==([\"'])"
        if re.search(malformed_attr_pattern, sanitized):
            sanitized = re.sub(malformed_attr_pattern, r"\1=\2", sanitized)
            warnings.append("Fixed malformed attributes (double equals)")

        sanitized = sanitized.replace("\r\n", "\n").replace("\r", "\n")

        control_chars = "".join(chr(c) for c in range(32) if c not in (9, 10, 13))
        if any(c in sanitized for c in control_chars):
            sanitized = sanitized.translate(str.maketrans("", "", control_chars))
            warnings.append("Removed control characters")

        return sanitized, warnings

    @staticmethod
    def _remove_comments(soup: BeautifulSoup) -> int:
        comments = soup.find_all(string=lambda text: isinstance(text, Comment))
        for comment in comments:
            comment.extract()
        return len(comments)

    def _clear_script_style(self, soup: BeautifulSoup) -> None:
        for element in soup.find_all(self.CONTENT_STRIP_ELEMENTS):
            element.clear()


def parse_document(html: str) -> Document:
    """Convenience function to parse markup into a Document."""
    return DocumentParser().parse(html)
