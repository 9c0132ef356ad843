"""Pytest configuration."""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path so the package imports without installation
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from synthdata.core.config_loader import SiteConfig  # noqa: E402
from synthdata.core.config_schema import AppSettings  # noqa: E402
from synthdata.core.event_bus import EventBus  # noqa: E402
from synthdata.core.hash_store import MemoryHashStore  # noqa: E402
from synthdata.core.localization import LocalizationBinder, TranslationStore  # noqa: E402
from synthdata.core.route_state import RouteState  # noqa: E402
from synthdata.ui.page import Element, Page  # noqa: E402

SITE_DATA = {
    "languages": ["en", "fr"],
    "translations": {
        "fr": {
            "Synthetic Data": "Données synthétiques",
            "Start": "Commencer",
            "hello name": "bonjour name",
        },
    },
}


@pytest.fixture
def site_data():
    return json.loads(json.dumps(SITE_DATA))


@pytest.fixture
def config_file(tmp_path, site_data):
    path = tmp_path / "all.json"
    path.write_text(json.dumps(site_data), encoding="utf-8")
    return path


@pytest.fixture
def site_config(site_data):
    return SiteConfig(site_data)


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def store():
    return MemoryHashStore()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def route(store, event_bus):
    return RouteState(store, event_bus=event_bus)


@pytest.fixture
def binder(route, site_config, event_bus):
    return LocalizationBinder(route, TranslationStore(), config=site_config, event_bus=event_bus)


@pytest.fixture
def page():
    return Page(
        [
            Element.with_classes("h1", text="Synthetic Data"),
            Element.with_classes("put-sitename-here"),
            Element.with_classes("translate-me", text="  Start  "),
            Element.with_classes("start-button"),
            Element.with_classes("back-to-home"),
            Element.with_classes("count-values"),
            Element.with_classes("put-year-here"),
            Element.with_classes("start-game", visible=False),
            Element.with_classes("unhide-if-errors", visible=False),
            Element.with_classes("hide-if-errors"),
            Element.with_classes("csv"),
        ]
    )
