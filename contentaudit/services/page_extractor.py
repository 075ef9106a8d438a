"""
Extracts PageMetadata from a rendered HTML page.
"""

import json
import logging

from bs4 import BeautifulSoup

from contentaudit.services.auditor import PageMetadata

logger = logging.getLogger(__name__)


def extract_structured_data(soup: BeautifulSoup) -> dict | None:
    """First JSON-LD object on the page, or None."""
    for script in soup.find_all("script", type="application/ld+json"):
        try:
            data = json.loads(script.string or "")
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug(f"Skipping unparseable JSON-LD block: {e}")
            continue
        if isinstance(data, list):
            data = next((item for item in data if isinstance(item, dict)), None)
        if isinstance(data, dict):
            return data
    return None


def extract_page_metadata(html: str) -> PageMetadata:
    soup = BeautifulSoup(html or "", "lxml")

    title = ""
    title_tag = soup.find("title")
    if title_tag:
        title = title_tag.get_text(strip=True)

    description = ""
    meta_desc_tag = soup.find("meta", attrs={"name": "description"})
    if meta_desc_tag:
        description = meta_desc_tag.get("content", "")

    keywords = []
    meta_keywords_tag = soup.find("meta", attrs={"name": "keywords"})
    if meta_keywords_tag:
        keywords = [kw.strip() for kw in meta_keywords_tag.get("content", "").split(",") if kw.strip()]

    structured_data = extract_structured_data(soup)

    # Body markup keeps anchors available to the link analyzer
    for tag in soup.find_all(["script", "style", "noscript"]):
        tag.decompose()
    body = soup.find("body")
    content = body.decode_contents() if body else ""

    return PageMetadata(
        title=title,
        description=description,
        content=content,
        keywords=keywords,
        structured_data=structured_data,
    )
