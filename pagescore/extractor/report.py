from typing import Any, Dict, Optional

from ..audit.rules import GROUP_RULES
from ..core.utils import count_words, dig
from ..models.schema import (
    AuditResult,
    CategoryScores,
    KeywordHints,
    MetaInformation,
    PerformanceMetrics,
    SeoSignals,
)

# output field -> Lighthouse category id
CATEGORY_IDS = {
    "performance": "performance",
    "accessibility": "accessibility",
    "seo": "seo",
    "best_practices": "best-practices",
    "pwa": "pwa",
}

# output field -> Lighthouse audit id (displayValue is reported)
PERFORMANCE_AUDITS = {
    "first_contentful_paint": "first-contentful-paint",
    "speed_index": "speed-index",
    "largest_contentful_paint": "largest-contentful-paint",
    "time_to_interactive": "interactive",
    "total_blocking_time": "total-blocking-time",
    "cumulative_layout_shift": "cumulative-layout-shift",
}

# output field -> Lighthouse audit id (score is reported)
SEO_SIGNAL_AUDITS = {
    "meta_description": "meta-description",
    "viewport": "viewport",
    "canonical": "canonical",
    "structured_data": "structured-data",
    "headings": "heading-levels",
    "mobile_friendly": "uses-responsive-images",
}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _score(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _headings_words(audits: Dict[str, Any]) -> int:
    items = dig(audits, "heading-order", "details", "items", default=[])
    if not isinstance(items, list):
        return 0
    return sum(count_words(h.get("text")) for h in items if isinstance(h, dict))


def project(raw: Any, url: str, device: str) -> AuditResult:
    """Narrow a Lighthouse JSON report into an AuditResult.

    Missing pieces of the report never raise; they fall back to 0 for
    category scores, None for metrics and "N/A" for meta text.
    """
    report = _as_dict(raw)
    categories = _as_dict(report.get("categories"))
    audits = _as_dict(report.get("audits"))

    scores = {}
    for field, cat_id in CATEGORY_IDS.items():
        scores[field] = _score(dig(categories, cat_id, "score")) or 0

    metrics = {
        field: _text(dig(audits, audit_id, "displayValue"))
        for field, audit_id in PERFORMANCE_AUDITS.items()
    }

    signals = {
        field: _score(dig(audits, audit_id, "score"))
        for field, audit_id in SEO_SIGNAL_AUDITS.items()
    }

    groups = {rule.name: list(rule.select(audits)) for rule in GROUP_RULES}

    title_text = _text(dig(audits, "document-title", "title"))
    meta_text = _text(dig(audits, "meta-description", "description"))

    meta = MetaInformation(
        meta_description=_text(dig(audits, "meta-description", "displayValue")) or "N/A",
        viewport=_text(dig(audits, "viewport", "displayValue")) or "N/A",
        title=title_text or "N/A",
    )

    hints = KeywordHints(
        title_words=count_words(title_text),
        meta_words=count_words(meta_text),
        headings_words=_headings_words(audits),
    )

    return AuditResult(
        url=url,
        device=device,
        fetch_time=_text(report.get("fetchTime")),
        user_agent=_text(report.get("userAgent")),
        # Lighthouse 10+ dropped finalUrl in favour of finalDisplayedUrl
        final_url=_text(report.get("finalUrl")) or _text(report.get("finalDisplayedUrl")),
        categories=CategoryScores(**scores),
        performance=PerformanceMetrics(**metrics),
        meta_information=meta,
        keyword_hints=hints,
        seo_signals=SeoSignals(**signals),
        **groups,
    )
