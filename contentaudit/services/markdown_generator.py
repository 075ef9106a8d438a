"""
Markdown Report Generator

Renders page and site content audits as markdown for review in pull
requests or documentation dashboards.
"""

from datetime import datetime, timezone
from typing import List, Optional

from contentaudit.services.auditor import AuditReport
from contentaudit.services.scoring import ValidationResult
from contentaudit.services.site_audit import SiteAuditSummary

BAND_LABELS = {
    "excellent": "Excellent (90-100)",
    "good": "Good (70-89)",
    "needs_improvement": "Needs Improvement (50-69)",
    "poor": "Poor (0-49)",
}


class MarkdownGenerator:
    """Generates markdown reports from content audit results."""

    @staticmethod
    def _findings_section(heading: str, result: Optional[ValidationResult]) -> List[str]:
        lines = [f"### {heading}", ""]
        if result is None:
            lines.extend(["_Not provided._", ""])
            return lines

        lines.append(f"**Score:** {result.score}/100  ")
        lines.append(f"**Valid:** {'yes' if result.is_valid else 'no'}")
        lines.append("")
        for error in result.errors:
            lines.append(f"- ❌ {error}")
        for warning in result.warnings:
            lines.append(f"- ⚠️ {warning}")
        if not result.has_issues:
            lines.append("- ✅ No issues found")
        lines.append("")
        return lines

    @classmethod
    def generate_page_report(
        cls,
        report: AuditReport,
        title: str = "",
        generated_at: Optional[datetime] = None,
    ) -> str:
        """
        Generate a single-page content audit report.

        Args:
            report: Result of auditing one page
            title: Page title shown in the header
            generated_at: Report generation timestamp

        Returns:
            Markdown formatted report
        """
        generated_at = generated_at or datetime.now(timezone.utc)

        lines = [
            "# Content Audit Report",
            "",
        ]
        if title:
            lines.append(f"**Page:** {title}  ")
        lines.extend([
            f"**Generated:** {generated_at.strftime('%Y-%m-%d %H:%M UTC')}  ",
            f"**Overall Score:** {report.overall_score}/100",
            "",
            "---",
            "",
            "## Validation",
            "",
        ])

        lines.extend(cls._findings_section("Title", report.title_validation))
        lines.extend(cls._findings_section("Description", report.description_validation))
        lines.extend(cls._findings_section("Structured Data", report.structured_data_validation))

        if report.keyword_density:
            lines.extend([
                "## Keyword Density",
                "",
                "| Keyword | Count | Density | Optimal |",
                "|---------|-------|---------|---------|",
            ])
            for kw in report.keyword_density:
                lines.append(
                    f"| {kw.keyword} | {kw.count} | {kw.density:.2f}% | {'yes' if kw.is_optimal else 'no'} |"
                )
            lines.append("")

        links = report.internal_link_analysis
        anchors = links.anchor_text_optimization
        lines.extend([
            "## Links",
            "",
            "| Metric | Count |",
            "|--------|-------|",
            f"| Total | {links.total_links} |",
            f"| Internal | {links.internal_links} |",
            f"| External | {links.external_links} |",
            f"| Descriptive anchors | {anchors.optimized} |",
            f"| Generic anchors | {anchors.generic} |",
            "",
        ])
        for suggestion in anchors.suggestions:
            lines.append(f"- {suggestion}")
        if anchors.suggestions:
            lines.append("")

        if report.recommendations:
            lines.extend(["---", "", "## Recommendations", ""])
            for idx, rec in enumerate(report.recommendations, 1):
                lines.append(f"{idx}. {rec}")
            lines.append("")

        return "\n".join(lines)

    @classmethod
    def generate_site_report(
        cls,
        summary: SiteAuditSummary,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Generate a site-wide report with score distribution and common issues."""
        generated_at = generated_at or datetime.now(timezone.utc)

        lines = [
            "# Site Content Audit",
            "",
            f"**Generated:** {generated_at.strftime('%Y-%m-%d %H:%M UTC')}  ",
            f"**Pages Audited:** {summary.total_pages}  ",
            f"**Average Score:** {summary.average_score}/100  ",
            f"**Result:** {'PASSED' if summary.passed else 'FAILED'} (threshold {summary.threshold})",
            "",
            "## Score Distribution",
            "",
            "| Band | Pages |",
            "|------|-------|",
        ]
        for band, label in BAND_LABELS.items():
            lines.append(f"| {label} | {summary.distribution.get(band, 0)} |")
        lines.append("")

        poor = summary.pages_in_band("poor")
        if poor:
            lines.extend(["## Pages Requiring Immediate Attention", ""])
            for page in poor:
                lines.append(f"- `{page.path}` (Score: {page.overall_score})")
                for rec in page.recommendations[:3]:
                    lines.append(f"  - {rec}")
            lines.append("")

        improvable = summary.pages_in_band("needs_improvement")
        if improvable:
            lines.extend(["## Pages That Could Be Improved", ""])
            for page in improvable[:5]:
                lines.append(f"- `{page.path}` (Score: {page.overall_score})")
                for rec in page.recommendations[:2]:
                    lines.append(f"  - {rec}")
            lines.append("")

        if summary.common_issues:
            lines.extend(["## Most Common Issues", ""])
            for issue, count in summary.common_issues:
                lines.append(f"- **{issue}**: {count} findings")
            lines.append("")

        if summary.failed_files:
            lines.extend(["## Files That Could Not Be Read", ""])
            for path in summary.failed_files:
                lines.append(f"- `{path}`")
            lines.append("")

        return "\n".join(lines)
