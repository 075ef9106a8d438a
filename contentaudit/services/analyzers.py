"""
Keyword and link analyzers used by the content validators.

Keyword density is a deliberately crude bag-of-words measure: content is
split on whitespace and a token counts as a hit when it contains the keyword
as a substring. Links are extracted by walking the parsed HTML tree.
"""

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from contentaudit.services.audit_config import AuditConfig, resolve_config

logger = logging.getLogger(__name__)

OPTIMAL_DENSITY_MIN = 1.0
OPTIMAL_DENSITY_MAX = 3.0
MIN_INTERNAL_LINK_RATIO = 0.3
MAX_LINKS_PER_PAGE = 100


@dataclass(frozen=True)
class KeywordDensityResult:
    keyword: str
    count: int
    density: float
    is_optimal: bool


@dataclass(frozen=True)
class Link:
    url: str
    anchor_text: str


@dataclass(frozen=True)
class AnchorTextOptimization:
    optimized: int = 0
    generic: int = 0
    suggestions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class InternalLinkAnalysis:
    total_links: int
    internal_links: int
    external_links: int
    broken_links: list[str] = field(default_factory=list)
    anchor_text_optimization: AnchorTextOptimization = field(default_factory=AnchorTextOptimization)


# =========================================================================
# Keyword density
# =========================================================================

def tokenize(content: str) -> list[str]:
    """Lower-cased whitespace tokens."""
    return (content or "").lower().split()


def analyze_keyword_density(content: str, keywords: list[str]) -> list[KeywordDensityResult]:
    words = tokenize(content)
    total_words = len(words)

    results = []
    for keyword in keywords or []:
        keyword_lower = (keyword or "").lower()
        count = sum(1 for word in words if keyword_lower in word)
        density = round(count / total_words * 100, 2) if total_words else 0.0
        results.append(KeywordDensityResult(
            keyword=keyword,
            count=count,
            density=density,
            is_optimal=OPTIMAL_DENSITY_MIN <= density <= OPTIMAL_DENSITY_MAX,
        ))

    logger.debug(f"Keyword density for {len(results)} keywords over {total_words} words")
    return results


# =========================================================================
# Links and anchor text
# =========================================================================

def extract_links(content: str) -> list[Link]:
    """Anchors that carry both an href and visible text, in document order."""
    if not content or "<a" not in content.lower():
        return []

    soup = BeautifulSoup(content, "lxml")
    links = []
    for a in soup.find_all("a", href=True):
        href = a["href"].strip()
        text = a.get_text(" ", strip=True)
        if href and text:
            links.append(Link(url=href, anchor_text=text))
    return links


def is_internal_link(url: str, base_url: str) -> bool:
    return url.startswith("/") or url.startswith(base_url)


def is_generic_anchor(anchor_text: str, generic_phrases) -> bool:
    text = anchor_text.lower()
    return any(phrase.lower() in text for phrase in generic_phrases)


def partition_links(links: list[Link], base_url: str) -> tuple[list[Link], list[Link]]:
    """Split links into (internal, external)."""
    internal, external = [], []
    for link in links:
        (internal if is_internal_link(link.url, base_url) else external).append(link)
    return internal, external


def analyze_internal_links(
    content: str,
    base_url: str | None = None,
    config: AuditConfig | None = None,
) -> InternalLinkAnalysis:
    config = resolve_config(config)
    base_url = base_url if base_url is not None else config.base_url

    links = extract_links(content)
    internal, external = partition_links(links, base_url)
    total = len(links)

    generic = sum(1 for link in links if is_generic_anchor(link.anchor_text, config.generic_anchor_phrases))
    optimized = total - generic

    suggestions = []
    if generic > 0:
        suggestions.append(
            f"Replace {generic} generic anchor texts with descriptive, keyword-rich alternatives."
        )
    if len(internal) < total * MIN_INTERNAL_LINK_RATIO:
        suggestions.append("Consider adding more internal links to improve site structure and SEO.")
    if total > MAX_LINKS_PER_PAGE:
        suggestions.append("Consider reducing the number of links per page for better user experience.")

    logger.debug(f"Links: {total} total, {len(internal)} internal, {generic} generic anchors")

    # Links are never fetched, so nothing is reported as broken
    return InternalLinkAnalysis(
        total_links=total,
        internal_links=len(internal),
        external_links=len(external),
        broken_links=[],
        anchor_text_optimization=AnchorTextOptimization(
            optimized=optimized,
            generic=generic,
            suggestions=suggestions,
        ),
    )
