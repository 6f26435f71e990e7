import asyncio
import logging
import socket
import time
from typing import List, Optional, Sequence, Set

import httpx
from playwright.async_api import Browser, Playwright, async_playwright

from ..config import DEVTOOLS_HOST, DEVTOOLS_READY_TIMEOUT
from ..errors import ResourceAcquisitionError

log = logging.getLogger("pagescore")

CHROME_FLAGS = (
    "--headless=new",
    "--no-sandbox",
    "--disable-gpu",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
)

PORT_ATTEMPTS = 20

# Ports handed to sessions in this process that are still open.
_reserved_ports: Set[int] = set()


def _ephemeral_port(host: str) -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        return s.getsockname()[1]


def free_port(host: str = DEVTOOLS_HOST) -> int:
    """Reserve an unused local port for Chromium's debugging endpoint.

    The probe socket is closed before Chromium binds, so another program can
    still grab the port in between; sessions in this process never share one.
    """
    for _ in range(PORT_ATTEMPTS):
        port = _ephemeral_port(host)
        if port not in _reserved_ports:
            _reserved_ports.add(port)
            return port
    raise ResourceAcquisitionError(f"No free debugging port on {host}")


def release_port(port: Optional[int]) -> None:
    _reserved_ports.discard(port)


async def wait_for_devtools(port: int, host: str = DEVTOOLS_HOST,
                            timeout: float = DEVTOOLS_READY_TIMEOUT) -> str:
    """Poll /json/version until Chromium answers; return its websocket URL."""
    deadline = time.monotonic() + timeout
    url = f"http://{host}:{port}/json/version"
    last_error: Optional[Exception] = None
    async with httpx.AsyncClient(timeout=2) as client:
        while time.monotonic() < deadline:
            try:
                r = await client.get(url)
                if r.status_code == 200:
                    payload = r.json()
                    ws = payload.get("webSocketDebuggerUrl") if isinstance(payload, dict) else None
                    if ws:
                        return ws
                last_error = None
            except (httpx.HTTPError, ValueError) as e:
                last_error = e
            await asyncio.sleep(0.2)
    raise ResourceAcquisitionError(
        f"DevTools endpoint on port {port} not ready after {timeout}s: {last_error}"
    )


class BrowserSession:
    """One headless Chromium process, owned by a single audit.

    ``close()`` may be called any number of times, including when
    ``launch()`` never ran or failed halfway.
    """

    def __init__(self, flags: Sequence[str] = CHROME_FLAGS, host: str = DEVTOOLS_HOST):
        self.flags: List[str] = list(flags)
        self.host = host
        self.port: Optional[int] = None
        self.ws_endpoint: Optional[str] = None
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def launch(self) -> "BrowserSession":
        try:
            self.port = free_port(self.host)
        except OSError as e:
            raise ResourceAcquisitionError(f"Could not reserve a debugging port on {self.host}: {e}") from e
        args = [*self.flags, f"--remote-debugging-port={self.port}"]
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=True, args=args)
        except Exception as e:
            raise ResourceAcquisitionError(f"Chromium launch failed: {e}") from e

        self.ws_endpoint = await wait_for_devtools(self.port, self.host)
        log.info("Chromium up on port %s", self.port)
        return self

    async def close(self) -> None:
        browser, self._browser = self._browser, None
        pw, self._playwright = self._playwright, None
        if browser is not None:
            try:
                await browser.close()
            except Exception as e:
                log.warning(f"Browser close failed on port {self.port}: {e}")
        if pw is not None:
            try:
                await pw.stop()
            except Exception as e:
                log.warning(f"Playwright stop failed: {e}")
        release_port(self.port)
        if browser is not None:
            log.info("Chromium on port %s closed", self.port)

    async def __aenter__(self) -> "BrowserSession":
        try:
            return await self.launch()
        except BaseException:
            await self.close()
            raise

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
