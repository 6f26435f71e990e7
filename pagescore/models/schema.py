from typing import Any, Dict, List, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator
from pydantic.alias_generators import to_camel

Device = Literal["mobile", "desktop"]


class CamelModel(BaseModel):
    # Python attributes stay snake_case; dumps with by_alias=True speak camelCase
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- input ----------
class AuditRequest(CamelModel):
    model_config = ConfigDict(frozen=True)

    url: str
    device: Device = "mobile"

    @field_validator("url")
    @classmethod
    def _http_url(cls, v: str) -> str:
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"not an http(s) URL: {v!r}")
        return v


# ---------- device profiles (Lighthouse settings) ----------
class ScreenEmulation(CamelModel):
    model_config = ConfigDict(frozen=True)

    mobile: bool
    width: int
    height: int
    device_scale_factor: float
    disabled: bool = False


class Throttling(CamelModel):
    model_config = ConfigDict(frozen=True)

    rtt_ms: float
    throughput_kbps: float
    cpu_slowdown_multiplier: float
    request_latency_ms: float
    download_throughput_kbps: float
    upload_throughput_kbps: float


class DeviceProfile(CamelModel):
    model_config = ConfigDict(frozen=True)

    form_factor: Device
    screen_emulation: ScreenEmulation
    throttling: Throttling


# ---------- output ----------
class CategoryScores(CamelModel):
    performance: float = 0
    accessibility: float = 0
    seo: float = 0
    best_practices: float = 0
    pwa: float = 0


class PerformanceMetrics(CamelModel):
    first_contentful_paint: Optional[str] = None
    speed_index: Optional[str] = None
    largest_contentful_paint: Optional[str] = None
    time_to_interactive: Optional[str] = None
    total_blocking_time: Optional[str] = None
    cumulative_layout_shift: Optional[str] = None


class MetaInformation(CamelModel):
    meta_description: str = "N/A"
    viewport: str = "N/A"
    title: str = "N/A"


class KeywordHints(CamelModel):
    title_words: NonNegativeInt = 0
    meta_words: NonNegativeInt = 0
    headings_words: NonNegativeInt = 0


class SeoSignals(CamelModel):
    """Raw scores of the individual SEO audits the dashboard flags."""

    meta_description: Optional[float] = None
    viewport: Optional[float] = None
    canonical: Optional[float] = None
    structured_data: Optional[float] = None
    headings: Optional[float] = None
    mobile_friendly: Optional[float] = None


class AuditResult(CamelModel):
    url: str
    device: Device
    fetch_time: Optional[str] = None
    user_agent: Optional[str] = None
    final_url: Optional[str] = None
    categories: CategoryScores = Field(default_factory=CategoryScores)
    performance: PerformanceMetrics = Field(default_factory=PerformanceMetrics)
    accessibility_checks: List[Dict[str, Any]] = Field(default_factory=list)
    best_practices: List[Dict[str, Any]] = Field(default_factory=list)
    seo_metrics: List[Dict[str, Any]] = Field(default_factory=list)
    meta_information: MetaInformation = Field(default_factory=MetaInformation)
    keyword_hints: KeywordHints = Field(default_factory=KeywordHints)
    seo_signals: SeoSignals = Field(default_factory=SeoSignals)
