"""
ContentAudit page auditor.

Runs every content validator over one page's metadata and merges the
results into a single AuditReport:

1. Title and description validation
2. Structured data validation (only when structured data is supplied)
3. Keyword density analysis
4. Internal link analysis

The overall score is the unweighted mean of the title, description and
structured data scores. Pages without structured data get a fixed default
component score instead.
"""

import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Mapping

from contentaudit.services.analyzers import (
    InternalLinkAnalysis,
    KeywordDensityResult,
    analyze_internal_links,
    analyze_keyword_density,
)
from contentaudit.services.audit_config import AuditConfig, resolve_config
from contentaudit.services.scoring import ValidationResult, average_score
from contentaudit.services.validators import (
    validate_description,
    validate_structured_data,
    validate_title,
)

logger = logging.getLogger(__name__)

DEFAULT_STRUCTURED_DATA_SCORE = 80

RECOMMEND_TITLE = "Optimize page title for better SEO performance."
RECOMMEND_DESCRIPTION = "Improve meta description for better click-through rates."
RECOMMEND_KEYWORDS = "Optimize keyword density for: {keywords}"
RECOMMEND_ANCHORS = "Replace generic anchor texts with descriptive alternatives."
RECOMMEND_STRUCTURED_DATA = "Add structured data to improve search engine understanding."


@dataclass
class PageMetadata:
    title: str = ""
    description: str = ""
    content: str = ""
    keywords: list[str] = field(default_factory=list)
    structured_data: dict[str, Any] | None = None

    def __post_init__(self):
        self.title = self.title or ""
        self.description = self.description or ""
        self.content = self.content or ""
        self.keywords = [kw for kw in (self.keywords or []) if kw is not None]
        if self.structured_data is not None and not isinstance(self.structured_data, Mapping):
            logger.warning(f"Ignoring structured data of type {type(self.structured_data).__name__}")
            self.structured_data = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageMetadata":
        """Build from a dict using either snake_case or camelCase keys."""
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            content=data.get("content", ""),
            keywords=list(data.get("keywords") or []),
            structured_data=data.get("structured_data", data.get("structuredData")),
        )


@dataclass(frozen=True)
class AuditReport:
    overall_score: int
    title_validation: ValidationResult
    description_validation: ValidationResult
    keyword_density: list[KeywordDensityResult]
    structured_data_validation: ValidationResult | None
    internal_link_analysis: InternalLinkAnalysis
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


class ContentAuditor:
    """Audits page metadata with an injected brand/keyword configuration."""

    def __init__(self, config: AuditConfig | None = None):
        self.config = resolve_config(config)

    def audit_page(self, page: PageMetadata | Mapping[str, Any]) -> AuditReport:
        if not isinstance(page, PageMetadata):
            page = PageMetadata.from_dict(page)

        logger.info(f"Auditing page '{page.title[:60]}' ({len(page.keywords)} keywords)")

        title_validation = validate_title(page.title, self.config)
        description_validation = validate_description(page.description, self.config)
        keyword_density = analyze_keyword_density(page.content, page.keywords)
        structured_data_validation = (
            validate_structured_data(page.structured_data, self.config)
            if page.structured_data is not None
            else None
        )
        internal_link_analysis = analyze_internal_links(
            page.content, self.config.base_url, self.config
        )

        overall_score = self.calculate_score(
            title_validation, description_validation, structured_data_validation
        )
        recommendations = self.build_recommendations(
            title_validation,
            description_validation,
            keyword_density,
            internal_link_analysis,
            has_structured_data=page.structured_data is not None,
        )

        logger.info(f"Audit complete: score {overall_score}, {len(recommendations)} recommendations")
        return AuditReport(
            overall_score=overall_score,
            title_validation=title_validation,
            description_validation=description_validation,
            keyword_density=keyword_density,
            structured_data_validation=structured_data_validation,
            internal_link_analysis=internal_link_analysis,
            recommendations=recommendations,
        )

    @staticmethod
    def calculate_score(
        title_validation: ValidationResult,
        description_validation: ValidationResult,
        structured_data_validation: ValidationResult | None,
    ) -> int:
        structured_score = (
            structured_data_validation.score
            if structured_data_validation is not None
            else DEFAULT_STRUCTURED_DATA_SCORE
        )
        return average_score([
            title_validation.score,
            description_validation.score,
            structured_score,
        ])

    @staticmethod
    def build_recommendations(
        title_validation: ValidationResult,
        description_validation: ValidationResult,
        keyword_density: list[KeywordDensityResult],
        internal_link_analysis: InternalLinkAnalysis,
        has_structured_data: bool,
    ) -> list[str]:
        recommendations = []

        if title_validation.has_issues:
            recommendations.append(RECOMMEND_TITLE)

        if description_validation.has_issues:
            recommendations.append(RECOMMEND_DESCRIPTION)

        poor_keywords = [kw.keyword for kw in keyword_density if not kw.is_optimal]
        if poor_keywords:
            recommendations.append(RECOMMEND_KEYWORDS.format(keywords=", ".join(poor_keywords)))

        if internal_link_analysis.anchor_text_optimization.generic > 0:
            recommendations.append(RECOMMEND_ANCHORS)

        if not has_structured_data:
            recommendations.append(RECOMMEND_STRUCTURED_DATA)

        return recommendations


def audit_page_seo(
    page_data: PageMetadata | Mapping[str, Any],
    config: AuditConfig | None = None,
) -> AuditReport:
    """Audit one page with the given (or settings-derived) configuration."""
    return ContentAuditor(config).audit_page(page_data)
