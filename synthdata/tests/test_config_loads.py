"""Test configuration loading."""

import json

import pytest
from pydantic import ValidationError

from synthdata.core.config_loader import (
    SiteConfig,
    get_nested,
    load_config,
    load_settings,
    set_nested,
)
from synthdata.core.errors import ConfigNotLoadedError
from synthdata.core.localization import LocalizationBinder, TranslationStore


def test_bundled_config_parses():
    """Test that the packaged asset parses and lists its languages."""
    cfg = load_config()
    assert cfg["languages"][0] == "en"
    assert "fr" in cfg["languages"]
    assert cfg["translations"]["fr"]["Start"] == "Commencer"


def test_every_language_gets_a_table(config_file):
    cfg = load_config(config_file)
    assert cfg["translations"]["en"] == {}


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_invalid_config_rejected(tmp_path):
    path = tmp_path / "all.json"
    path.write_text(json.dumps({"languages": ["en", ""]}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)


def test_strict_config_can_be_disabled(tmp_path, monkeypatch):
    path = tmp_path / "all.json"
    path.write_text(json.dumps({"languages": ["en", "en"]}), encoding="utf-8")
    monkeypatch.setenv("STRICT_CONFIG", "0")
    assert load_config(path) == {"languages": ["en", "en"]}


def test_environment_overlay(config_file, monkeypatch):
    overlay = config_file.with_name("all.staging.json")
    overlay.write_text(json.dumps({"translations": {"fr": {"Start": "Démarrer"}}}), encoding="utf-8")
    monkeypatch.setenv("SYNTHDATA_ENV", "staging")

    cfg = load_config(config_file)

    assert cfg["translations"]["fr"]["Start"] == "Démarrer"
    assert cfg["translations"]["fr"]["Synthetic Data"] == "Données synthétiques"


def test_templates_kept_verbatim(tmp_path, monkeypatch, route):
    """Test that ${...} in translations survives loading and substitutes literally."""
    path = tmp_path / "all.json"
    data = {"languages": ["en", "fr"], "translations": {"fr": {"Welcome ${USER}": "Bienvenue ${USER}"}}}
    path.write_text(json.dumps(data), encoding="utf-8")
    monkeypatch.setenv("USER", "root")

    cfg = load_config(path)
    assert cfg["translations"]["fr"] == {"Welcome ${USER}": "Bienvenue ${USER}"}

    binder = LocalizationBinder(route, TranslationStore(), config=SiteConfig(cfg))
    binder.prepare()
    route.commit("lang/fr")
    assert binder.translate("Welcome ${USER}", {"${USER}": "Ana"}) == "Bienvenue Ana"


def test_site_config_requires_loading(config_file):
    config = SiteConfig()
    assert not config.is_loaded
    with pytest.raises(ConfigNotLoadedError):
        config.languages()
    with pytest.raises(ConfigNotLoadedError):
        config.translations()

    config.load(config_file)
    assert config.is_loaded
    assert config.languages() == ["en", "fr"]
    assert config.get("translations.fr.Start") == "Commencer"
    assert config.get("translations.de", {}) == {}


def test_settings_defaults():
    settings = load_settings({})
    assert settings.default_language == "en"
    assert settings.row_count.default == 400
    assert settings.row_count.minimum == 1
    assert settings.row_count.maximum == 4000


def test_settings_from_environment():
    settings = load_settings(
        {
            "SYNTHDATA_ROW_COUNT_MAXIMUM": "100",
            "SYNTHDATA_DEFAULT_LANGUAGE": "fr",
            "SYNTHDATA_ENV": "staging",
            "UNRELATED": "x",
        }
    )
    assert settings.row_count.maximum == 100
    assert settings.default_language == "fr"


def test_settings_reject_inverted_bounds():
    with pytest.raises(ValidationError):
        load_settings({"SYNTHDATA_ROW_COUNT_MINIMUM": "10", "SYNTHDATA_ROW_COUNT_MAXIMUM": "5"})


def test_nested_helpers():
    config = {}
    set_nested(config, "row_count.maximum", 100)
    assert config == {"row_count": {"maximum": 100}}
    assert get_nested(config, "row_count.maximum") == 100
    assert get_nested(config, "row_count.missing", default=7) == 7
