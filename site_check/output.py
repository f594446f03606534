"""
Console, CI step summary, and JSON output for a ScoreReport.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .scoring import ScoreReport

logger = logging.getLogger(__name__)

SUMMARY_ENV = "GITHUB_STEP_SUMMARY"
PASS_MARK = "✅"
FAIL_MARK = "❌"


def mark(passed: bool) -> str:
    return PASS_MARK if passed else FAIL_MARK


def console_lines(report: ScoreReport) -> list[str]:
    lines = [f"Score: {report.score}/100"]
    if report.note:
        lines.append(f"Note: {report.note}")
    for r in report.results:
        lines.append(f"{mark(r.passed)} {r.label}")
    return lines


def print_report(report: ScoreReport) -> None:
    for line in console_lines(report):
        print(line)


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def summary_markdown(report: ScoreReport) -> str:
    lines = ["# Site check results", f"**Score: {report.score}/100**"]
    if report.note:
        lines.append(f"\n> {report.note}\n")
    lines.append("\n| Rule | Result |")
    lines.append("|------|------|")
    for r in report.results:
        lines.append(f"| {_cell(r.label)} | {mark(r.passed)} |")
    return "\n".join(lines) + "\n"


def summary_target(explicit: str | None = None) -> str | None:
    return explicit or os.getenv(SUMMARY_ENV) or None


def append_summary(report: ScoreReport, target: str | Path | None) -> bool:
    if not target:
        return False
    try:
        with open(target, "a", encoding="utf-8") as fh:
            fh.write(summary_markdown(report))
    except OSError as exc:
        logger.warning("could not append step summary to %s: %s", target, exc)
        return False
    return True


def write_json(report: ScoreReport, target: str | Path | None) -> bool:
    if not target:
        return False
    try:
        Path(target).write_text(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write JSON summary to %s: %s", target, exc)
        return False
    return True
