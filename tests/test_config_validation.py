"""Configuration validation tests."""

import pytest

from gallery.config import EngineConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "GALLERY_DEFAULT_EFFECT",
        "GALLERY_MAX_EFFECTS_PER_ROUND",
        "GALLERY_STRICT_EFFECTS",
        "GALLERY_LOCALE",
        "GALLERY_LOG_LEVEL",
        "GALLERY_PARSE_CACHE_SIZE",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


class TestConfigValidation:
    """Test EngineConfig.validate()."""

    def test_default_config_valid(self):
        cfg = EngineConfig()
        errors = cfg.validate()
        assert errors == [], f"Default config errors: {errors}"

    def test_unsupported_default_effect(self):
        errors = EngineConfig(default_effect="wobble").validate()
        assert any("default_effect" in e for e in errors)

    def test_zero_max_effects(self):
        errors = EngineConfig(max_effects_per_round=0).validate()
        assert any("max_effects_per_round" in e for e in errors)

    def test_negative_cache_size(self):
        errors = EngineConfig(parse_cache_size=-1).validate()
        assert any("parse_cache_size" in e for e in errors)

    def test_unknown_locale(self):
        errors = EngineConfig(locale="ja_JP").validate()
        assert any("locale" in e for e in errors)

    def test_bad_log_level(self):
        errors = EngineConfig(log_level="LOUD").validate()
        assert any("log_level" in e for e in errors)

    def test_multiple_errors_at_once(self):
        cfg = EngineConfig(default_effect="x", max_effects_per_round=0, locale="xx")
        assert len(cfg.validate()) >= 3


class TestEnvOverrides:
    def test_defaults(self):
        cfg = get_config()
        assert cfg.default_effect == "crossfade"
        assert cfg.max_effects_per_round == 3
        assert cfg.strict_effects is False
        assert cfg.locale == "en_US"

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("GALLERY_MAX_EFFECTS_PER_ROUND", "2")
        monkeypatch.setenv("GALLERY_STRICT_EFFECTS", "yes")
        monkeypatch.setenv("GALLERY_LOCALE", "zh_CN")
        reset_config()
        cfg = get_config()
        assert cfg.max_effects_per_round == 2
        assert cfg.strict_effects is True
        assert cfg.locale == "zh_CN"

    def test_bad_int_ignored(self, monkeypatch):
        monkeypatch.setenv("GALLERY_MAX_EFFECTS_PER_ROUND", "many")
        reset_config()
        assert get_config().max_effects_per_round == 3

    def test_singleton(self):
        assert get_config() is get_config()

    def test_frozen(self):
        with pytest.raises(Exception):
            get_config().default_effect = "slide"

    @pytest.mark.parametrize("raw, expected", [("0", 1), ("-4", 1), ("2", 2)])
    def test_round_limit_at_least_one(self, monkeypatch, raw, expected):
        monkeypatch.setenv("GALLERY_MAX_EFFECTS_PER_ROUND", raw)
        reset_config()
        assert get_config().round_limit == expected

    def test_dict_style_get(self):
        assert get_config().get("default_effect") == "crossfade"
        assert get_config().get("missing", 1) == 1
