"""
Command line entry point: audit one rendered page or a whole build directory.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from contentaudit.config import settings
from contentaudit.core.exceptions import BuildDirectoryNotFoundError
from contentaudit.services.markdown_generator import MarkdownGenerator
from contentaudit.services.site_audit import SiteAuditor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contentaudit",
        description="Audit titles, descriptions, keywords, structured data and links of documentation pages.",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    page = subparsers.add_parser("page", help="Audit a single rendered HTML file")
    page.add_argument("file", help="Path to the HTML file")
    page.add_argument("--json", action="store_true", help="Print the full report as JSON")
    page.add_argument("--markdown", help="Write a markdown report to this path")

    site = subparsers.add_parser("site", help="Audit every HTML file under a build directory")
    site.add_argument("build_dir", help="Built site directory")
    site.add_argument("--output", default="seo-audit-report.json", help="JSON report path")
    site.add_argument("--markdown", help="Write a markdown report to this path")
    site.add_argument(
        "--threshold",
        type=int,
        default=settings.SITE_AUDIT_PASS_THRESHOLD,
        help="Minimum average score for the audit to pass",
    )
    return parser


def run_page(args: argparse.Namespace) -> int:
    path = Path(args.file)
    if not path.is_file():
        print(f"Error: file not found: {path}")
        return 2

    try:
        html = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading {path}: {e}")
        print(f"Error: could not read {path}: {e}")
        return 2

    result = SiteAuditor().audit_html(html, path.name)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(f"Page: {result.path}")
        print(f"Title: {result.title}")
        print(f"Score: {result.overall_score}/100 (content score {result.report.overall_score}/100)")
        for rec in result.report.recommendations:
            print(f"  - {rec}")
        for rec in result.recommendations:
            print(f"  * {rec}")

    if args.markdown:
        Path(args.markdown).write_text(
            MarkdownGenerator.generate_page_report(result.report, title=result.title),
            encoding="utf-8",
        )
        print(f"Markdown report: {args.markdown}")
    return 0


def run_site(args: argparse.Namespace) -> int:
    auditor = SiteAuditor(threshold=args.threshold)
    print(f"Scanning: {args.build_dir}")
    try:
        summary = auditor.audit_directory(args.build_dir)
    except BuildDirectoryNotFoundError as e:
        print(f"Error: {e}. Build the site first.")
        return 2

    print(f"Total pages audited: {summary.total_pages}")
    print(f"Average score: {summary.average_score}/100")
    for band, count in summary.distribution.items():
        print(f"  {band.replace('_', ' ')}: {count} pages")
    for issue, count in summary.common_issues:
        print(f"  {issue}: {count} findings")

    Path(args.output).write_text(json.dumps(summary.to_dict(), indent=2), encoding="utf-8")
    print(f"Detailed report: {args.output}")

    if args.markdown:
        Path(args.markdown).write_text(MarkdownGenerator.generate_site_report(summary), encoding="utf-8")
        print(f"Markdown report: {args.markdown}")

    if not summary.passed:
        print(f"Audit failed: average score below {summary.threshold}.")
        return 1
    print("Audit passed.")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    if args.command == "page":
        return run_page(args)
    return run_site(args)


if __name__ == "__main__":
    sys.exit(main())
