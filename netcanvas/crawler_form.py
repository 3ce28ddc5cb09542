"""Options for the web crawler, with validation of the seed URL and URL patterns."""

from __future__ import annotations

import html as _html
from dataclasses import dataclass, field
from typing import Callable, Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

_ALLOWED_SCHEMES = ("http", "https")
_DEFAULT_SCHEME = "http"
_BAD_HOST_CHARS = frozenset(" \t<>\"{}|\\^`")

_LINE_BREAK = "<br />"
_PARAGRAPH_OPEN = "<p"
_PARAGRAPH_CLOSE = "</p>"

_DEPENDENT_OPTIONS = (
    "self_links",
    "parent_links",
    "child_links",
    "ext_links_crawl",
    "social_links",
)


def _simplified(text: str) -> str:
    """Trim the text and collapse every run of whitespace into one space."""
    return " ".join(text.split())


def parse_text_edit_input(html: str) -> list[str]:
    """Return the text of every paragraph in rich-text HTML, one entry per paragraph.

    Line breaks are dropped, whitespace is simplified and wildcards are
    removed. Patterns cannot contain spaces: if any paragraph does, the
    result is empty.
    """
    parsed: list[str] = []
    if not html:
        return parsed
    for chunk in html.split(_PARAGRAPH_OPEN)[1:]:
        start = chunk.find(">") + 1
        end = chunk.find(_PARAGRAPH_CLOSE)
        text = chunk[start:end] if end - start >= 0 else chunk[start:]
        text = _simplified(text.replace(_LINE_BREAK, ""))
        text = text.replace("*", "")
        if " " in text:
            return []
        parsed.append(text)
    return parsed


def _text_to_html(text: str) -> str:
    """Render plain multi-line text as rich-text HTML, one paragraph per line."""
    paragraphs = []
    for line in text.split("\n"):
        body = _html.escape(line, quote=False) if line else _LINE_BREAK
        paragraphs.append(f"<p>{body}</p>")
    return "<html><body>" + "".join(paragraphs) + "</body></html>"


def _split_seed(text: str) -> SplitResult:
    simplified = _simplified(text)
    parts = urlsplit(simplified)
    if parts.scheme not in _ALLOWED_SCHEMES:
        parts = urlsplit("//" + simplified)._replace(scheme=_DEFAULT_SCHEME)
    if not parts.path:
        parts = parts._replace(path="/")
    return parts


def normalize_seed_url(text: str) -> str:
    """Clean up a seed URL: add the http scheme if it has none and a '/' path if empty."""
    return urlunsplit(_split_seed(text))


def _seed_is_valid(parts: SplitResult) -> bool:
    host = parts.hostname or ""
    if not host or "." not in host:
        return False
    return not any(char in _BAD_HOST_CHARS for char in parts.netloc)


@dataclass(frozen=True)
class CrawlerChoices:
    seed_url: str
    url_patterns_included: tuple[str, ...]
    url_patterns_excluded: tuple[str, ...]
    link_classes: tuple[str, ...]
    max_urls_to_crawl: int
    max_links_per_page: int
    int_links: bool
    child_links: bool
    parent_links: bool
    self_links: bool
    ext_links_allowed: bool
    ext_links_crawl: bool
    social_links: bool
    delayed_requests: bool


@dataclass(frozen=True)
class CrawlerFormErrors:
    url: bool = False
    patterns_included: bool = False
    patterns_excluded: bool = False
    checkboxes: bool = False

    @property
    def any(self) -> bool:
        return self.url or self.patterns_included or self.patterns_excluded or self.checkboxes


@dataclass
class CrawlerForm:
    """The crawler options a user fills in, checked before they are handed on."""

    seed_url_text: str = ""
    max_urls_to_crawl: int = 600
    max_links_per_page: int = 0
    patterns_included_text: str = "*"
    patterns_excluded_text: str = ""
    int_links: bool = True
    child_links: bool = True
    parent_links: bool = False
    self_links: bool = False
    ext_links_allowed: bool = False
    ext_links_crawl: bool = False
    social_links: bool = False
    delayed_requests: bool = True
    on_choices: Optional[Callable[[CrawlerChoices], None]] = None

    seed_url: str = field(default="", init=False)
    url_patterns_included: list[str] = field(default_factory=list, init=False)
    url_patterns_excluded: list[str] = field(default_factory=list, init=False)
    link_classes: list[str] = field(default_factory=list, init=False)
    ok_enabled: bool = field(default=False, init=False)
    errors: CrawlerFormErrors = field(default_factory=CrawlerFormErrors, init=False)
    enabled: dict[str, bool] = field(init=False)

    def __post_init__(self) -> None:
        self.enabled = {name: True for name in _DEPENDENT_OPTIONS}
        self.enabled["ext_links_crawl"] = self.ext_links_allowed

    def check_errors(self) -> CrawlerFormErrors:
        """Validate the form, update which options are available and whether it may be accepted."""
        parts = _split_seed(self.seed_url_text)
        self.seed_url = urlunsplit(parts)
        error_url = not _seed_is_valid(parts)

        error_checkboxes = not self.int_links and not self.ext_links_allowed
        if error_checkboxes:
            self.enabled = {name: False for name in _DEPENDENT_OPTIONS}
        else:
            self.enabled = {
                "self_links": self.int_links,
                "parent_links": self.int_links,
                "child_links": self.int_links,
                "ext_links_crawl": self.ext_links_allowed,
                "social_links": self.ext_links_allowed,
            }

        included = parse_text_edit_input(_text_to_html(self.patterns_included_text))
        error_included = not included
        if included == [""]:
            included = []
        self.url_patterns_included = included

        excluded = parse_text_edit_input(_text_to_html(self.patterns_excluded_text))
        error_excluded = len(excluded) == 1 and excluded[0] == "*"
        self.url_patterns_excluded = excluded

        self.errors = CrawlerFormErrors(
            url=error_url,
            patterns_included=error_included,
            patterns_excluded=error_excluded,
            checkboxes=error_checkboxes,
        )
        self.ok_enabled = not self.errors.any
        return self.errors

    def user_choices(self) -> CrawlerChoices:
        """Gather the checked choices and pass them to the listener, if any."""
        choices = CrawlerChoices(
            seed_url=self.seed_url,
            url_patterns_included=tuple(self.url_patterns_included),
            url_patterns_excluded=tuple(self.url_patterns_excluded),
            link_classes=tuple(self.link_classes),
            max_urls_to_crawl=self.max_urls_to_crawl,
            max_links_per_page=self.max_links_per_page,
            int_links=self.int_links,
            child_links=self.child_links,
            parent_links=self.parent_links,
            self_links=self.self_links,
            ext_links_allowed=self.ext_links_allowed,
            ext_links_crawl=self.ext_links_crawl,
            social_links=self.social_links,
            delayed_requests=self.delayed_requests,
        )
        if self.on_choices is not None:
            self.on_choices(choices)
        return choices