"""
Pydantic schemas for the ContentAudit API.
"""
from contentaudit.schemas.common import (
    BaseSchema,
    ErrorResponse,
    HealthResponse,
)
from contentaudit.schemas.audit import (
    PageMetadataRequest,
    TitleRequest,
    DescriptionRequest,
    KeywordDensityRequest,
    StructuredDataRequest,
    InternalLinksRequest,
    HtmlPageRequest,
    ValidationResultResponse,
    KeywordDensityResponse,
    AnchorTextOptimizationResponse,
    InternalLinkAnalysisResponse,
    AuditReportResponse,
    PageAuditResponse,
)

__all__ = [
    "BaseSchema",
    "ErrorResponse",
    "HealthResponse",
    "PageMetadataRequest",
    "TitleRequest",
    "DescriptionRequest",
    "KeywordDensityRequest",
    "StructuredDataRequest",
    "InternalLinksRequest",
    "HtmlPageRequest",
    "ValidationResultResponse",
    "KeywordDensityResponse",
    "AnchorTextOptimizationResponse",
    "InternalLinkAnalysisResponse",
    "AuditReportResponse",
    "PageAuditResponse",
]
