"""Fixed Lighthouse device profiles and the config document built from them."""
from typing import Any, Dict

from ..config import MAX_WAIT_FOR_FCP, MAX_WAIT_FOR_LOAD
from ..errors import ConfigurationError
from ..models.schema import DeviceProfile, ScreenEmulation, Throttling

ONLY_CATEGORIES = ("performance", "accessibility", "best-practices", "seo", "pwa")

DEVICE_PROFILES: Dict[str, DeviceProfile] = {
    "mobile": DeviceProfile(
        form_factor="mobile",
        screen_emulation=ScreenEmulation(
            mobile=True, width=360, height=640, device_scale_factor=2.625,
        ),
        throttling=Throttling(
            rtt_ms=150,
            throughput_kbps=1638.4,
            cpu_slowdown_multiplier=4,
            request_latency_ms=562.5,
            download_throughput_kbps=1474.56,
            upload_throughput_kbps=675,
        ),
    ),
    "desktop": DeviceProfile(
        form_factor="desktop",
        screen_emulation=ScreenEmulation(
            mobile=False, width=1350, height=940, device_scale_factor=1,
        ),
        throttling=Throttling(
            rtt_ms=40,
            throughput_kbps=10240,
            cpu_slowdown_multiplier=1,
            request_latency_ms=0,
            download_throughput_kbps=0,
            upload_throughput_kbps=0,
        ),
    ),
}


def resolve_profile(device: str) -> DeviceProfile:
    try:
        return DEVICE_PROFILES[device]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unsupported device {device!r}; expected one of {sorted(DEVICE_PROFILES)}"
        ) from None


def engine_config(profile: DeviceProfile) -> Dict[str, Any]:
    """Lighthouse config document (``--config-path``) for one run."""
    settings = profile.model_dump(by_alias=True)
    settings.update({
        "onlyCategories": list(ONLY_CATEGORIES),
        "maxWaitForFcp": MAX_WAIT_FOR_FCP,
        "maxWaitForLoad": MAX_WAIT_FOR_LOAD,
    })
    return {"extends": "lighthouse:default", "settings": settings}
