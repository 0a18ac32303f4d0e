"""Tests for configuration parsing."""

from nutrition_estimator.config import DEMO_API_KEY, Settings, parse_warm_up_foods


def test_parse_warm_up_foods() -> None:
    assert parse_warm_up_foods(None) is None
    assert parse_warm_up_foods("  ") is None
    assert parse_warm_up_foods("*") is None
    assert parse_warm_up_foods("Oats, greek  YOGURT,,") == ("oats", "greek yogurt")


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("FDC_API_KEY", raising=False)
    settings = Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        admin_token="admin-token",
    )

    assert settings.fdc_api_key == DEMO_API_KEY
    assert settings.memory_cache_max_entries == 2000
    assert settings.memory_cache_ttl_seconds == 7200
