"""
Content validators for page metadata.

Each validator inspects one aspect of a page and returns a ValidationResult
built from a ScoreCard with fixed per-finding penalties.
"""

import json
import logging
import re
from collections import Counter

from bs4 import BeautifulSoup

from contentaudit.services.audit_config import AuditConfig, resolve_config
from contentaudit.services.scoring import ScoreCard, ValidationResult

logger = logging.getLogger(__name__)

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
TITLE_OPTIMAL_LENGTH = 55

DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160
DESCRIPTION_OPTIMAL_MIN = 140

STUFFING_MIN_WORD_LENGTH = 4
STUFFING_MAX_REPEATS = 2

SOFTWARE_APPLICATION_REQUIRED = ["name", "description", "applicationCategory"]
SOFTWARE_APPLICATION_RECOMMENDED = ["author", "offers", "operatingSystem", "url"]

REQUIRED_META_TAGS = [
    ("title", {}, "Title tag"),
    ("meta", {"name": "description"}, "Meta description"),
    ("meta", {"name": "keywords"}, "Meta keywords"),
    ("link", {"rel": "canonical"}, "Canonical URL"),
]
OPEN_GRAPH_TAGS = ["og:title", "og:description", "og:type", "og:url", "og:image"]
TWITTER_CARD_TAGS = ["twitter:card", "twitter:title", "twitter:description", "twitter:image"]

_NON_WORD = re.compile(r"[^\w]")


def is_title_case(title: str) -> bool:
    """Every word, punctuation stripped, starts with an uppercase letter."""
    words = [_NON_WORD.sub("", word) for word in title.split()]
    words = [word for word in words if word]
    if not words:
        return False
    return all(word[0].isalpha() and word[0].isupper() for word in words)


def validate_title(title: str, config: AuditConfig | None = None) -> ValidationResult:
    config = resolve_config(config)
    title = title or ""
    card = ScoreCard()
    length = len(title)

    if length < TITLE_MIN_LENGTH:
        card.error(
            f"Title is too short ({length} chars). Minimum recommended: {TITLE_MIN_LENGTH} characters.",
            30,
        )
    elif length > TITLE_MAX_LENGTH:
        card.warn(
            f"Title is too long ({length} chars). Maximum recommended: {TITLE_MAX_LENGTH} characters.",
            15,
        )
    elif length > TITLE_OPTIMAL_LENGTH:
        card.warn(
            f"Title is approaching maximum length ({length} chars). "
            f"Optimal: under {TITLE_OPTIMAL_LENGTH} characters.",
            5,
        )

    if config.brand_token not in title:
        card.warn(
            f'Title should include the brand name "{config.brand_token}" for better brand recognition.',
            10,
        )

    if not is_title_case(title):
        card.warn("Consider using title case for better readability.", 5)

    result = card.result()
    logger.debug(f"Title validation: score={result.score}, {len(result.errors)} errors")
    return result


def find_repeated_words(text: str) -> list[str]:
    counts = Counter(text.lower().split())
    return [
        word for word, count in counts.items()
        if count > STUFFING_MAX_REPEATS and len(word) >= STUFFING_MIN_WORD_LENGTH
    ]


def validate_description(description: str, config: AuditConfig | None = None) -> ValidationResult:
    config = resolve_config(config)
    description = description or ""
    card = ScoreCard()
    length = len(description)
    lowered = description.lower()

    if length < DESCRIPTION_MIN_LENGTH:
        card.warn(
            f"Description is too short ({length} chars). "
            f"Minimum recommended: {DESCRIPTION_MIN_LENGTH} characters.",
            20,
        )
    elif length > DESCRIPTION_MAX_LENGTH:
        card.error(
            f"Description is too long ({length} chars). "
            f"Maximum recommended: {DESCRIPTION_MAX_LENGTH} characters.",
            25,
        )
    elif length < DESCRIPTION_OPTIMAL_MIN:
        card.warn(
            f"Description could be longer ({length} chars). "
            f"Optimal range: {DESCRIPTION_OPTIMAL_MIN}-{DESCRIPTION_MAX_LENGTH} characters.",
            5,
        )

    found_keywords = [kw for kw in config.primary_keywords if kw.lower() in lowered]
    if not found_keywords:
        card.warn(
            "Description should include at least one primary keyword "
            f"({', '.join(config.primary_keywords)}).",
            15,
        )
    elif len(found_keywords) < 2:
        card.warn("Consider including more primary keywords in the description.", 5)

    if not any(word.lower() in lowered for word in config.action_words):
        card.warn(
            "Consider adding action-oriented language to make the description more compelling.",
            10,
        )

    repeated = find_repeated_words(description)
    if repeated:
        card.warn(f"Potential keyword stuffing detected. Repeated words: {', '.join(repeated)}", 10)

    result = card.result()
    logger.debug(f"Description validation: score={result.score}, {len(result.warnings)} warnings")
    return result


def validate_structured_data(schema: dict, config: AuditConfig | None = None) -> ValidationResult:
    config = resolve_config(config)
    schema = schema or {}
    card = ScoreCard()

    if not schema.get("@context"):
        card.error("Missing required @context property in structured data.", 30)
    elif schema["@context"] != config.schema_context:
        card.warn(f'@context should be "{config.schema_context}" for best compatibility.', 5)

    if not schema.get("@type"):
        card.error("Missing required @type property in structured data.", 30)

    if schema.get("@type") == "SoftwareApplication":
        for name in SOFTWARE_APPLICATION_REQUIRED:
            if not schema.get(name):
                card.error(f'Missing required field "{name}" for SoftwareApplication schema.', 15)
        for name in SOFTWARE_APPLICATION_RECOMMENDED:
            if not schema.get(name):
                card.warn(f'Missing recommended field "{name}" for SoftwareApplication schema.', 5)

    for key, value in schema.items():
        if value is None or value == "":
            card.warn(f'Empty value for property "{key}".', 5)

    return card.result()


def _tag_value(tag) -> str:
    for attr in ("content", "href"):
        if tag.get(attr):
            return str(tag[attr])
    return tag.get_text()


def validate_meta_tags(html: str) -> ValidationResult:
    """Check head tags of a rendered page: required meta, social cards, JSON-LD."""
    soup = BeautifulSoup(html or "", "lxml")
    card = ScoreCard()

    for tag_name, attrs, label in REQUIRED_META_TAGS:
        tag = soup.find(tag_name, attrs=attrs)
        if tag is None:
            card.error(f"Missing {label}.", 20)
        elif not _tag_value(tag).strip():
            card.error(f"Empty {label}.", 15)

    for prop in OPEN_GRAPH_TAGS:
        if soup.find("meta", attrs={"property": prop}) is None:
            card.warn(f"Missing Open Graph tag: {prop}.", 5)

    for name in TWITTER_CARD_TAGS:
        if soup.find("meta", attrs={"name": name}) is None:
            card.warn(f"Missing Twitter Card tag: {name}.", 3)

    script = soup.find("script", attrs={"type": "application/ld+json"})
    if script is None:
        card.warn("Missing structured data (JSON-LD).", 10)
    else:
        try:
            json.loads(script.string or script.get_text() or "")
        except json.JSONDecodeError:
            card.error("Invalid JSON-LD structured data.", 15)

    return card.result()
