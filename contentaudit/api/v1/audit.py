"""
Content Audit API Endpoints

Synchronous endpoints for auditing page metadata. Every call is pure and
in-memory; nothing is fetched or stored.
"""

import logging

from fastapi import APIRouter

from contentaudit.core.deps import AuditConfigDep, ContentAuditorDep, SiteAuditorDep
from contentaudit.core.exceptions import BadRequestError
from contentaudit.schemas.audit import (
    AuditReportResponse,
    DescriptionRequest,
    HtmlPageRequest,
    InternalLinkAnalysisResponse,
    InternalLinksRequest,
    KeywordDensityRequest,
    KeywordDensityResponse,
    PageAuditResponse,
    PageMetadataRequest,
    StructuredDataRequest,
    TitleRequest,
    ValidationResultResponse,
)
from contentaudit.schemas.common import ErrorResponse
from contentaudit.services.analyzers import analyze_internal_links, analyze_keyword_density
from contentaudit.services.auditor import PageMetadata
from contentaudit.services.validators import (
    validate_description,
    validate_meta_tags,
    validate_structured_data,
    validate_title,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/audit", tags=["Audit"])

EMPTY_HTML_RESPONSES = {400: {"model": ErrorResponse, "description": "HTML document is empty"}}


def _require_html(html: str) -> str:
    if not html or not html.strip():
        raise BadRequestError("HTML document is empty")
    return html


@router.post(
    "/page",
    response_model=AuditReportResponse,
    summary="Audit page metadata",
    description="""
    Run every content validator over one page and return the combined report.

    The overall score averages the title, description and structured data
    scores. Pages without structured data use a default component score of 80.
    """,
)
async def audit_page(
    request: PageMetadataRequest,
    auditor: ContentAuditorDep,
) -> AuditReportResponse:
    page = PageMetadata(
        title=request.title,
        description=request.description,
        content=request.content,
        keywords=request.keywords,
        structured_data=request.structured_data,
    )
    report = auditor.audit_page(page)
    return AuditReportResponse.model_validate(report)


@router.post(
    "/page/html",
    response_model=PageAuditResponse,
    responses=EMPTY_HTML_RESPONSES,
    summary="Audit a rendered HTML page",
    description="Extract metadata from rendered HTML, audit it, and validate its head tags.",
)
async def audit_html_page(
    request: HtmlPageRequest,
    site_auditor: SiteAuditorDep,
) -> PageAuditResponse:
    result = site_auditor.audit_html(_require_html(request.html), request.path)
    return PageAuditResponse.model_validate(result)


@router.post("/title", response_model=ValidationResultResponse, summary="Validate a page title")
async def check_title(request: TitleRequest, config: AuditConfigDep) -> ValidationResultResponse:
    return ValidationResultResponse.model_validate(validate_title(request.title, config))


@router.post("/description", response_model=ValidationResultResponse, summary="Validate a meta description")
async def check_description(request: DescriptionRequest, config: AuditConfigDep) -> ValidationResultResponse:
    return ValidationResultResponse.model_validate(validate_description(request.description, config))


@router.post(
    "/keyword-density",
    response_model=list[KeywordDensityResponse],
    summary="Analyze keyword density",
)
async def check_keyword_density(request: KeywordDensityRequest) -> list[KeywordDensityResponse]:
    results = analyze_keyword_density(request.content, request.keywords)
    return [KeywordDensityResponse.model_validate(r) for r in results]


@router.post(
    "/structured-data",
    response_model=ValidationResultResponse,
    summary="Validate structured data",
)
async def check_structured_data(
    request: StructuredDataRequest,
    config: AuditConfigDep,
) -> ValidationResultResponse:
    return ValidationResultResponse.model_validate(validate_structured_data(request.structured_data, config))


@router.post(
    "/internal-links",
    response_model=InternalLinkAnalysisResponse,
    summary="Analyze links and anchor text",
)
async def check_internal_links(
    request: InternalLinksRequest,
    config: AuditConfigDep,
) -> InternalLinkAnalysisResponse:
    analysis = analyze_internal_links(request.content, request.base_url, config)
    return InternalLinkAnalysisResponse.model_validate(analysis)


@router.post(
    "/meta-tags",
    response_model=ValidationResultResponse,
    responses=EMPTY_HTML_RESPONSES,
    summary="Validate head meta tags",
)
async def check_meta_tags(request: HtmlPageRequest) -> ValidationResultResponse:
    return ValidationResultResponse.model_validate(validate_meta_tags(_require_html(request.html)))
