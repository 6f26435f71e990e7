import logging
from typing import Callable, Optional

from pydantic import ValidationError

from ..audit.profiles import resolve_profile
from ..errors import (
    AuditFailed,
    ConfigurationError,
    EngineInvocationError,
    ResourceAcquisitionError,
)
from ..extractor.report import project
from ..models.schema import AuditRequest, AuditResult
from .browser import BrowserSession
from .engine import LighthouseRunner

log = logging.getLogger("pagescore")


async def run_audit(
    url: str,
    device: str = "mobile",
    *,
    browser_factory: Callable[[], BrowserSession] = BrowserSession,
    runner: Optional[LighthouseRunner] = None,
) -> AuditResult:
    """
    Audit ``url`` with Lighthouse under the given device profile.

      1) launch a private headless Chromium
      2) run Lighthouse against its debugging port
      3) project the report into an AuditResult
    The browser is closed on every path. Launch and engine failures
    surface as AuditFailed; bad input raises ConfigurationError.
    """
    profile = resolve_profile(device)
    try:
        request = AuditRequest(url=url, device=device)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid audit request: {e.errors()[0]['msg']}") from e

    runner = runner or LighthouseRunner()
    log.info("Audit requested for: %s (device=%s)", request.url, request.device)

    browser = browser_factory()
    try:
        await browser.launch()
        report = await runner.run(request.url, browser.port, profile)
    except ResourceAcquisitionError as e:
        log.error("Browser launch failed for %s: %s", request.url, e)
        raise AuditFailed(f"Could not start browser: {e}", cause=e) from e
    except EngineInvocationError as e:
        log.error("Lighthouse failed for %s: %s", request.url, e)
        raise AuditFailed(f"Lighthouse audit failed: {e}", cause=e) from e
    finally:
        try:
            await browser.close()
        except Exception as e:
            log.warning(f"Browser teardown failed for {request.url}: {e}")

    result = project(report, request.url, request.device)
    log.info(
        "Audit finished for %s: performance=%s seo=%s",
        request.url, result.categories.performance, result.categories.seo,
    )
    return result
