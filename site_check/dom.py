"""
Document query layer consumed by the rule engine.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag


class DocumentQuery(Protocol):
    def query(self, selector: str) -> Sequence[Any]: ...

    def attribute(self, element: Any, name: str) -> str | None: ...

    def text(self, element: Any) -> str: ...


def soup_of(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except Exception:
        return BeautifulSoup(html, "html.parser")


class SoupDocument:
    """BeautifulSoup-backed implementation of the query contract."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    @classmethod
    def from_markup(cls, html: str) -> "SoupDocument":
        return cls(soup_of(html))

    def query(self, selector: str) -> list[Tag]:
        return self.soup.select(selector)

    def attribute(self, element: Tag, name: str) -> str | None:
        value = element.get(name)
        if value is None:
            return None
        # multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def text(self, element: Tag) -> str:
        return element.get_text()
