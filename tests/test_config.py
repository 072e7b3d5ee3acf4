"""Configuration defaults and export."""

from pricing_intel.utils.config import Config, config


def test_config_exports_settings():
    settings = config.to_dict()

    for key in (
        "SYNTHETIC_DATA_SEED",
        "SYNTHETIC_NUM_COMPANIES",
        "USAGE_HISTORY_DAYS",
        "REVENUE_TREND_DAYS",
        "CHURN_PREDICTION_LIMIT",
        "API_PORT",
    ):
        assert settings[key] == getattr(config, key)


def test_api_base_url():
    assert config.API_BASE_URL == f"http://{Config.API_HOST}:{Config.API_PORT}"
