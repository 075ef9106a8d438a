"""
FastAPI dependencies for the content audit endpoints.
"""
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from contentaudit.services.audit_config import AuditConfig
from contentaudit.services.auditor import ContentAuditor
from contentaudit.services.site_audit import SiteAuditor


@lru_cache
def get_audit_config() -> AuditConfig:
    """Engine configuration derived from settings, built once per process."""
    return AuditConfig.from_settings()


def get_content_auditor(
    config: Annotated[AuditConfig, Depends(get_audit_config)],
) -> ContentAuditor:
    return ContentAuditor(config)


def get_site_auditor(
    config: Annotated[AuditConfig, Depends(get_audit_config)],
) -> SiteAuditor:
    return SiteAuditor(config)


AuditConfigDep = Annotated[AuditConfig, Depends(get_audit_config)]
ContentAuditorDep = Annotated[ContentAuditor, Depends(get_content_auditor)]
SiteAuditorDep = Annotated[SiteAuditor, Depends(get_site_auditor)]
