"""
Single-page HTML/SEO conformance and viewport overflow scoring.
"""

from __future__ import annotations

from .scoring import CheckResult, ScoreReport, build_report, missing_document_report

__all__ = ["CheckResult", "ScoreReport", "build_report", "missing_document_report"]
__version__ = "0.1.0"
