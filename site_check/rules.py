"""
Static HTML/SEO rules.

Each rule is a pure predicate over a ``DocumentQuery``. A missing element is a
failed rule, never an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from .dom import DocumentQuery
from .scoring import CheckResult

logger = logging.getLogger(__name__)

DESCRIPTION_RANGE = (50, 160)


@dataclass(frozen=True)
class Rule:
    label: str
    check: Callable[[DocumentQuery], bool]


def _attr(doc: DocumentQuery, element: object, name: str) -> str:
    return (doc.attribute(element, name) or "").strip()


def has_basic_structure(doc: DocumentQuery) -> bool:
    return all(doc.query(tag) for tag in ("html", "head", "body"))


def has_html_lang(doc: DocumentQuery) -> bool:
    roots = doc.query("html")
    return bool(roots) and bool(_attr(doc, roots[0], "lang"))


def has_meta_charset(doc: DocumentQuery) -> bool:
    return len(doc.query("meta[charset]")) > 0


def has_title(doc: DocumentQuery) -> bool:
    # inline <svg><title> counts too
    return any(doc.text(title).strip() for title in doc.query("title"))


def has_meta_description(doc: DocumentQuery) -> bool:
    tags = doc.query('meta[name="description"]')
    if not tags:
        return False
    content = doc.attribute(tags[0], "content") or ""
    low, high = DESCRIPTION_RANGE
    return bool(content.strip()) and low <= len(content) <= high


def has_single_h1(doc: DocumentQuery) -> bool:
    return len(doc.query("h1")) == 1


def images_have_alt(doc: DocumentQuery) -> bool:
    return all(_attr(doc, img, "alt") for img in doc.query("img"))


def links_have_href(doc: DocumentQuery) -> bool:
    for link in doc.query("a"):
        href = _attr(doc, link, "href")
        if not href or href == "#":
            return False
    return True


RULES: tuple[Rule, ...] = (
    Rule("Basic structure <html><head><body>", has_basic_structure),
    Rule("<html lang>", has_html_lang),
    Rule("<meta charset>", has_meta_charset),
    Rule("<title> not empty", has_title),
    Rule(f"<meta name=description> {DESCRIPTION_RANGE[0]}-{DESCRIPTION_RANGE[1]} chars", has_meta_description),
    Rule("Exactly one <h1>", has_single_h1),
    Rule("Every <img> has non-empty alt", images_have_alt),
    Rule("Every <a> has a valid href (not empty, not #)", links_have_href),
)


def run_rule(doc: DocumentQuery, rule: Rule) -> CheckResult:
    try:
        passed = bool(rule.check(doc))
    except Exception as exc:
        logger.warning("rule %r raised %s; counted as failed", rule.label, exc)
        return CheckResult(rule.label, False, f"rule error: {exc}")
    return CheckResult(rule.label, passed)


def evaluate_rules(doc: DocumentQuery, rules: tuple[Rule, ...] = RULES) -> list[CheckResult]:
    return [run_rule(doc, rule) for rule in rules]
