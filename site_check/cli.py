#!/usr/bin/env python3
"""
Score one HTML document on static HTML/SEO rules and viewport overflow.

Usage:
    site-check
    site-check --root build --timeout 15
    site-check --file public/index.html --json-output site-check.json

Always exits 0; the score is informational.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .dom import SoupDocument
from .loader import CANDIDATES, locate_document, read_markup
from .output import append_summary, print_report, summary_target, write_json
from .rules import evaluate_rules
from .scoring import ScoreReport, build_report, missing_document_report
from .viewport import DEFAULT_TIMEOUT, VIEWPORT_WIDTHS, SessionOpener, check_viewports

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("asyncio").setLevel(logging.ERROR)


def run_check(
    root: str | Path = ".",
    file: str | Path | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    open_session: SessionOpener | None = None,
) -> ScoreReport:
    if file is not None:
        path: Path | None = Path(file) if Path(file).is_file() else None
        candidates: tuple[str, ...] = (str(file),)
    else:
        path = locate_document(root)
        candidates = CANDIDATES
    if path is None:
        report = missing_document_report(candidates)
        logger.info(report.note)
        return report

    try:
        markup = read_markup(path)
    except OSError as exc:
        logger.info("could not read %s: %s", path, exc)
        return missing_document_report(candidates)

    doc = SoupDocument.from_markup(markup)
    rule_results = evaluate_rules(doc)
    viewport_results = check_viewports(path, VIEWPORT_WIDTHS, timeout=timeout, open_session=open_session)
    return build_report(rule_results, viewport_results)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score an HTML document for HTML/SEO rules and horizontal overflow.")
    parser.add_argument("--root", default=".", help="Directory searched for index.html or docs/index.html")
    parser.add_argument("--file", help="Explicit HTML file; skips the candidate search")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Per-viewport load timeout in seconds")
    parser.add_argument("--summary-file", help="Markdown summary target (default: $GITHUB_STEP_SUMMARY)")
    parser.add_argument("--json-output", help="Write the report as JSON to this path")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    try:
        report = run_check(args.root, args.file, timeout=args.timeout)
    except Exception:
        logger.exception("site check crashed; reporting zero score")
        report = ScoreReport(note="site check crashed before scoring")

    print_report(report)
    append_summary(report, summary_target(args.summary_file))
    write_json(report, args.json_output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
