"""Tests for pagescore.audit.profiles."""

import pytest
from pydantic import ValidationError

from pagescore.audit.profiles import DEVICE_PROFILES, ONLY_CATEGORIES, engine_config, resolve_profile
from pagescore.errors import ConfigurationError


class TestResolveProfile:
    def test_mobile(self):
        p = resolve_profile("mobile")
        assert p.form_factor == "mobile"
        assert p.screen_emulation.mobile is True
        assert p.throttling.cpu_slowdown_multiplier == 4

    def test_desktop(self):
        p = resolve_profile("desktop")
        assert p.form_factor == "desktop"
        assert p.screen_emulation.mobile is False
        assert p.throttling.cpu_slowdown_multiplier == 1

    def test_mobile_table_values(self):
        p = resolve_profile("mobile")
        assert (p.screen_emulation.width, p.screen_emulation.height) == (360, 640)
        assert p.screen_emulation.device_scale_factor == 2.625
        t = p.throttling
        assert t.rtt_ms == 150
        assert t.throughput_kbps == 1638.4
        assert t.request_latency_ms == 562.5
        assert t.download_throughput_kbps == 1474.56
        assert t.upload_throughput_kbps == 675

    def test_desktop_table_values(self):
        p = resolve_profile("desktop")
        assert (p.screen_emulation.width, p.screen_emulation.height) == (1350, 940)
        assert p.screen_emulation.device_scale_factor == 1
        t = p.throttling
        assert t.rtt_ms == 40
        assert t.throughput_kbps == 10240
        assert t.request_latency_ms == 0
        assert t.download_throughput_kbps == 0
        assert t.upload_throughput_kbps == 0

    def test_same_instance_every_call(self):
        assert resolve_profile("mobile") is resolve_profile("mobile")

    @pytest.mark.parametrize("device", ["tablet", "Mobile", "", None, ["mobile"]])
    def test_unknown_device_rejected(self, device):
        with pytest.raises(ConfigurationError):
            resolve_profile(device)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_profile("watch")

    def test_profiles_are_frozen(self):
        with pytest.raises(ValidationError):
            DEVICE_PROFILES["mobile"].throttling.rtt_ms = 1


class TestEngineConfig:
    def test_extends_default(self):
        assert engine_config(resolve_profile("mobile"))["extends"] == "lighthouse:default"

    def test_settings_are_camel_case(self):
        settings = engine_config(resolve_profile("mobile"))["settings"]
        assert settings["formFactor"] == "mobile"
        assert settings["screenEmulation"] == {
            "mobile": True,
            "width": 360,
            "height": 640,
            "deviceScaleFactor": 2.625,
            "disabled": False,
        }
        assert settings["throttling"]["cpuSlowdownMultiplier"] == 4
        assert settings["throttling"]["rttMs"] == 150

    def test_category_allowlist(self):
        settings = engine_config(resolve_profile("desktop"))["settings"]
        assert settings["onlyCategories"] == list(ONLY_CATEGORIES)
        assert set(settings["onlyCategories"]) == {
            "performance", "accessibility", "best-practices", "seo", "pwa",
        }

    def test_wait_limits(self):
        settings = engine_config(resolve_profile("desktop"))["settings"]
        assert settings["maxWaitForFcp"] == 45000
        assert settings["maxWaitForLoad"] == 60000

    def test_does_not_mutate_profile(self):
        profile = resolve_profile("desktop")
        engine_config(profile)["settings"]["throttling"]["rttMs"] = 999
        assert profile.throttling.rtt_ms == 40
