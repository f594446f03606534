"""
Equal-weight scoring of rule and viewport results.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Sequence


@dataclass(frozen=True)
class CheckResult:
    label: str
    passed: bool
    detail: str = ""


@dataclass(frozen=True)
class ScoreReport:
    results: tuple[CheckResult, ...] = field(default_factory=tuple)
    score: int = 0
    note: str | None = None

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [asdict(r) for r in self.results],
            "score": self.score,
            "passed": self.passed_count,
            "weight": round(item_weight(len(self.results)), 4),
            "note": self.note,
        }


def item_weight(total: int) -> float:
    if total <= 0:
        return 0.0
    return 100 / total


def score_results(results: Sequence[CheckResult]) -> int:
    """Round ``100 * passed / total`` to the nearest integer, halves up."""
    total = len(results)
    if total == 0:
        return 0
    passed = sum(1 for r in results if r.passed)
    return (200 * passed + total) // (2 * total)


def build_report(rule_results: Iterable[CheckResult], viewport_results: Iterable[CheckResult]) -> ScoreReport:
    results = tuple(rule_results) + tuple(viewport_results)
    return ScoreReport(results=results, score=score_results(results))


def missing_document_report(candidates: Sequence[str]) -> ScoreReport:
    wanted = " or ".join(candidates) if candidates else "an HTML document"
    return ScoreReport(results=(), score=0, note=f"Could not find {wanted}")
