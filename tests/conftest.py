"""Shared pytest fixtures for site_check tests."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any

import pytest

from site_check.viewport import Measurement

DESCRIPTION_50 = "Hand-thrown stoneware mugs and bowls from Lisbon.."


def page(title: str = "<title>T</title>", body: str = '<h1>H</h1><img alt="x"><a href="/p">L</a>') -> str:
    return (
        '<html lang="en"><head><meta charset="utf-8">'
        f'{title}<meta name="description" content="{DESCRIPTION_50}">'
        f"</head><body>{body}</body></html>"
    )


@pytest.fixture
def good_html() -> str:
    return page()


@pytest.fixture
def untitled_html() -> str:
    return page(title="")


@pytest.fixture
def two_h1_html() -> str:
    return page(body='<h1>One</h1><h1>Two</h1><img alt="x"><a href="/p">L</a>')


# ============================================================================
# Fake browser sessions
# ============================================================================


class FakeSession:
    def __init__(self, width: int, behaviour: Any, log: list[str]) -> None:
        self.width = width
        self.behaviour = behaviour
        self.log = log

    async def navigate(self, uri: str) -> None:
        self.log.append(f"navigate {self.width} {uri}")
        if self.behaviour == "load-error":
            raise RuntimeError("net::ERR_FILE_NOT_FOUND")
        if self.behaviour == "hang":
            await asyncio.sleep(10)

    async def measure(self) -> Measurement:
        if isinstance(self.behaviour, int):
            return Measurement(self.behaviour, self.width)
        return Measurement(self.width, self.width)


class FakeBrowser:
    """Session opener keyed by width.

    Behaviour per width: ``None`` fits, an int is the measured scrollWidth,
    ``"load-error"`` raises on navigate, ``"hang"`` never finishes loading,
    ``"close-error"`` raises on teardown, ``"launch-error"`` raises on open.
    """

    def __init__(self, behaviours: dict[int, Any] | None = None) -> None:
        self.behaviours = behaviours or {}
        self.log: list[str] = []

    @asynccontextmanager
    async def __call__(self, width: int, height: int):
        behaviour = self.behaviours.get(width)
        if behaviour == "launch-error":
            self.log.append(f"launch-failed {width}")
            raise RuntimeError("browser crashed on launch")
        self.log.append(f"open {width}x{height}")
        try:
            yield FakeSession(width, behaviour, self.log)
        finally:
            self.log.append(f"close {width}")
        if behaviour == "close-error":
            raise RuntimeError("browser did not exit")


@pytest.fixture
def fake_browser():
    return FakeBrowser
