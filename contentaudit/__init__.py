"""
ContentAudit: content-quality analysis for documentation pages.
"""
from contentaudit.services.analyzers import (
    InternalLinkAnalysis,
    KeywordDensityResult,
    analyze_internal_links,
    analyze_keyword_density,
)
from contentaudit.services.audit_config import AuditConfig
from contentaudit.services.auditor import AuditReport, ContentAuditor, PageMetadata, audit_page_seo
from contentaudit.services.markdown_generator import MarkdownGenerator
from contentaudit.services.page_extractor import extract_page_metadata
from contentaudit.services.scoring import ValidationResult
from contentaudit.services.site_audit import SiteAuditor, SiteAuditSummary
from contentaudit.services.validators import (
    validate_description,
    validate_meta_tags,
    validate_structured_data,
    validate_title,
)

__version__ = "0.1.0"

__all__ = [
    "AuditConfig",
    "AuditReport",
    "ContentAuditor",
    "InternalLinkAnalysis",
    "KeywordDensityResult",
    "MarkdownGenerator",
    "PageMetadata",
    "SiteAuditSummary",
    "SiteAuditor",
    "ValidationResult",
    "analyze_internal_links",
    "analyze_keyword_density",
    "audit_page_seo",
    "extract_page_metadata",
    "validate_description",
    "validate_meta_tags",
    "validate_structured_data",
    "validate_title",
]
