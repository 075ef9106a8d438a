"""
Site auditor for a built documentation site.

Walks a build directory, audits every rendered HTML page and summarizes the
results: average score, score distribution, pages needing attention and the
most common issue categories.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field, asdict
from pathlib import Path

from contentaudit.config import settings
from contentaudit.core.exceptions import BuildDirectoryNotFoundError
from contentaudit.services.audit_config import AuditConfig
from contentaudit.services.auditor import AuditReport, ContentAuditor
from contentaudit.services.page_extractor import extract_page_metadata
from contentaudit.services.scoring import ValidationResult, average_score, score_band
from contentaudit.services.validators import validate_meta_tags

logger = logging.getLogger(__name__)

COMMON_ISSUES_LIMIT = 5


@dataclass(frozen=True)
class PageAuditResult:
    path: str
    title: str
    description: str
    overall_score: int
    report: AuditReport
    meta_tags_validation: ValidationResult
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SiteAuditSummary:
    total_pages: int
    average_score: int
    distribution: dict[str, int]
    pages: list[PageAuditResult] = field(default_factory=list)
    common_issues: list[tuple[str, int]] = field(default_factory=list)
    failed_files: list[str] = field(default_factory=list)
    threshold: int = 70
    passed: bool = False

    def pages_in_band(self, band: str) -> list[PageAuditResult]:
        return [p for p in self.pages if score_band(p.overall_score) == band]

    def to_dict(self) -> dict:
        """Compact report: per-page scores and recommendations only."""
        return {
            "summary": {
                "total_pages": self.total_pages,
                "average_score": self.average_score,
                "threshold": self.threshold,
                "passed": self.passed,
                "distribution": dict(self.distribution),
            },
            "pages": [
                {
                    "path": p.path,
                    "title": p.title,
                    "description": p.description,
                    "score": p.overall_score,
                    "recommendations": list(p.recommendations),
                }
                for p in self.pages
            ],
            "common_issues": [{"issue": issue, "count": count} for issue, count in self.common_issues],
            "failed_files": list(self.failed_files),
        }


def flatten_findings(prefix: str, result: ValidationResult) -> list[str]:
    return [f"{prefix}: {w}" for w in result.warnings] + [f"{prefix}: {e}" for e in result.errors]


def find_html_files(build_dir: Path) -> list[Path]:
    return sorted(p for p in build_dir.rglob("*.html") if p.is_file())


class SiteAuditor:
    """Audits every HTML page of a built site."""

    def __init__(self, config: AuditConfig | None = None, threshold: int | None = None):
        self.auditor = ContentAuditor(config)
        self.threshold = threshold if threshold is not None else settings.SITE_AUDIT_PASS_THRESHOLD

    def audit_html(self, html: str, path: str = "") -> PageAuditResult:
        page = extract_page_metadata(html)
        report = self.auditor.audit_page(page)
        meta_tags_validation = validate_meta_tags(html)

        overall_score = average_score([
            report.title_validation.score,
            report.description_validation.score,
            meta_tags_validation.score,
        ])
        recommendations = (
            flatten_findings("Title", report.title_validation)
            + flatten_findings("Description", report.description_validation)
            + flatten_findings("Meta", meta_tags_validation)
        )

        return PageAuditResult(
            path=path,
            title=page.title,
            description=page.description,
            overall_score=overall_score,
            report=report,
            meta_tags_validation=meta_tags_validation,
            recommendations=recommendations,
        )

    def audit_directory(self, build_dir: str | Path) -> SiteAuditSummary:
        build_dir = Path(build_dir)
        if not build_dir.is_dir():
            raise BuildDirectoryNotFoundError(str(build_dir))

        html_files = find_html_files(build_dir)
        logger.info(f"Auditing {len(html_files)} HTML files in {build_dir}")

        pages: list[PageAuditResult] = []
        failed_files: list[str] = []
        for file_path in html_files:
            relative_path = file_path.relative_to(build_dir).as_posix()
            try:
                html = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Error auditing {relative_path}: {e}")
                failed_files.append(relative_path)
                continue
            pages.append(self.audit_html(html, relative_path))

        return self.summarize(pages, failed_files)

    def summarize(self, pages: list[PageAuditResult], failed_files: list[str] | None = None) -> SiteAuditSummary:
        avg = average_score([p.overall_score for p in pages])

        distribution = {"excellent": 0, "good": 0, "needs_improvement": 0, "poor": 0}
        for page in pages:
            distribution[score_band(page.overall_score)] += 1

        issue_counts = Counter(
            rec.split(":", 1)[0] for page in pages for rec in page.recommendations
        )
        common_issues = issue_counts.most_common(COMMON_ISSUES_LIMIT)

        passed = bool(pages) and avg >= self.threshold
        logger.info(f"Site audit: {len(pages)} pages, average score {avg}, passed={passed}")

        return SiteAuditSummary(
            total_pages=len(pages),
            average_score=avg,
            distribution=distribution,
            pages=pages,
            common_issues=common_issues,
            failed_files=list(failed_files or []),
            threshold=self.threshold,
            passed=passed,
        )
