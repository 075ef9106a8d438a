"""
Content audit schemas.
"""
from typing import Any

from pydantic import ConfigDict, Field

from contentaudit.schemas.common import BaseSchema


class PageMetadataRequest(BaseSchema):
    """Page metadata to audit."""

    title: str = ""
    description: str = ""
    content: str = ""
    keywords: list[str] = Field(default_factory=list)
    structured_data: dict[str, Any] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Getting Started With Mifty Framework Installation Guide",
                "description": "Learn how to install and set up Mifty Framework for Node.js "
                               "TypeScript development with the CLI and visual database designer.",
                "content": '<p>Install the <a href="/docs/cli">Mifty CLI</a> first.</p>',
                "keywords": ["mifty", "typescript"],
                "structuredData": {"@context": "https://schema.org", "@type": "TechArticle"},
            }
        }
    )


class TitleRequest(BaseSchema):
    title: str


class DescriptionRequest(BaseSchema):
    description: str


class KeywordDensityRequest(BaseSchema):
    content: str
    keywords: list[str] = Field(default_factory=list)


class StructuredDataRequest(BaseSchema):
    structured_data: dict[str, Any]


class InternalLinksRequest(BaseSchema):
    content: str
    base_url: str | None = Field(
        None,
        description="Links starting with this prefix count as internal. Defaults to the configured site URL.",
    )


class HtmlPageRequest(BaseSchema):
    html: str
    path: str = ""


class ValidationResultResponse(BaseSchema):
    is_valid: bool
    warnings: list[str]
    errors: list[str]
    score: int = Field(..., ge=0, le=100)


class KeywordDensityResponse(BaseSchema):
    keyword: str
    count: int = Field(..., ge=0)
    density: float
    is_optimal: bool


class AnchorTextOptimizationResponse(BaseSchema):
    optimized: int
    generic: int
    suggestions: list[str]


class InternalLinkAnalysisResponse(BaseSchema):
    total_links: int
    internal_links: int
    external_links: int
    broken_links: list[str]
    anchor_text_optimization: AnchorTextOptimizationResponse


class AuditReportResponse(BaseSchema):
    overall_score: int = Field(..., ge=0, le=100)
    title_validation: ValidationResultResponse
    description_validation: ValidationResultResponse
    keyword_density: list[KeywordDensityResponse]
    structured_data_validation: ValidationResultResponse | None = None
    internal_link_analysis: InternalLinkAnalysisResponse
    recommendations: list[str]


class PageAuditResponse(BaseSchema):
    path: str
    title: str
    description: str
    overall_score: int = Field(..., ge=0, le=100)
    report: AuditReportResponse
    meta_tags_validation: ValidationResultResponse
    recommendations: list[str]
