"""
Horizontal overflow probes.

Every width gets its own browser launch, run one after another so only a single
headless Chromium is alive at a time. A failure at one width is recorded as a
failed check for that width and never reaches its siblings.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Iterable, Protocol

from playwright.async_api import Page, async_playwright

from .scoring import CheckResult

logger = logging.getLogger(__name__)

VIEWPORT_WIDTHS: tuple[int, ...] = (320, 768, 1440)
VIEWPORT_HEIGHT = 800
DEFAULT_TIMEOUT = 30.0

MEASURE_SCRIPT = """() => ({
    contentWidth: document.documentElement.scrollWidth,
    viewportWidth: window.innerWidth,
})"""


@dataclass(frozen=True)
class Measurement:
    content_width: int
    viewport_width: int

    @property
    def overflows(self) -> bool:
        return self.content_width > self.viewport_width


class Session(Protocol):
    async def navigate(self, uri: str) -> None: ...

    async def measure(self) -> Measurement: ...


SessionOpener = Callable[[int, int], AsyncContextManager[Session]]


class PlaywrightSession:
    def __init__(self, page: Page, timeout: float) -> None:
        self.page = page
        self.timeout = timeout

    async def navigate(self, uri: str) -> None:
        await self.page.goto(uri, wait_until="load", timeout=self.timeout * 1000)

    async def measure(self) -> Measurement:
        raw: dict[str, Any] = await self.page.evaluate(MEASURE_SCRIPT)
        return Measurement(int(raw["contentWidth"]), int(raw["viewportWidth"]))


@asynccontextmanager
async def playwright_session(width: int, height: int, timeout: float = DEFAULT_TIMEOUT) -> AsyncIterator[PlaywrightSession]:
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True, args=["--disable-dev-shm-usage", "--no-sandbox"])
        try:
            page = await browser.new_page(viewport={"width": width, "height": height})
            yield PlaywrightSession(page, timeout)
        finally:
            await browser.close()


def viewport_label(width: int) -> str:
    return f"{width}px no horizontal scroll"


def file_uri(path: str | Path) -> str:
    return Path(path).resolve().as_uri()


async def _load_and_measure(session: Session, uri: str) -> Measurement:
    await session.navigate(uri)
    return await session.measure()


async def probe_width(
    uri: str,
    width: int,
    *,
    height: int = VIEWPORT_HEIGHT,
    timeout: float = DEFAULT_TIMEOUT,
    open_session: SessionOpener = playwright_session,
) -> CheckResult:
    label = viewport_label(width)
    try:
        async with open_session(width, height) as session:
            measurement = await asyncio.wait_for(_load_and_measure(session, uri), timeout)
    except Exception as exc:
        reason = str(exc).strip().splitlines()[0] if str(exc).strip() else type(exc).__name__
        logger.warning("viewport probe at %spx failed: %s", width, reason)
        return CheckResult(label, False, f"probe failed: {reason}")
    return CheckResult(
        label,
        not measurement.overflows,
        f"scrollWidth={measurement.content_width} innerWidth={measurement.viewport_width}",
    )


async def probe_viewports(
    uri: str,
    targets: Iterable[int] = VIEWPORT_WIDTHS,
    *,
    height: int = VIEWPORT_HEIGHT,
    timeout: float = DEFAULT_TIMEOUT,
    open_session: SessionOpener = playwright_session,
) -> list[CheckResult]:
    results: list[CheckResult] = []
    for width in sorted(targets):
        result = await probe_width(uri, width, height=height, timeout=timeout, open_session=open_session)
        logger.debug("probe %s -> %s", width, result.passed)
        results.append(result)
    return results


def check_viewports(
    path: str | Path,
    targets: Iterable[int] = VIEWPORT_WIDTHS,
    *,
    height: int = VIEWPORT_HEIGHT,
    timeout: float = DEFAULT_TIMEOUT,
    open_session: SessionOpener | None = None,
) -> list[CheckResult]:
    if open_session is None:
        open_session = functools.partial(playwright_session, timeout=timeout)
    return asyncio.run(
        probe_viewports(file_uri(path), targets, height=height, timeout=timeout, open_session=open_session)
    )
