"""Test the startup sequence and the page run."""

import pytest

from synthdata.core.app import App
from synthdata.core.app_initializer import initialize_app
from synthdata.core.csv_gen import CsvGen, random_element
from synthdata.core.errors import ConfigNotLoadedError, InvalidArgumentError
from synthdata.core.hash_store import LocationHashStore, MemoryHashStore
from synthdata.core.localization import LocalizationBinder, TranslationStore
from synthdata.core.route_state import RouteState


def start(config_file, settings, page, hash_string=""):
    store = MemoryHashStore(hash_string)
    ctx = initialize_app(store, page=page, config_path=config_file, settings=settings)
    return store, ctx


def texts(page, class_name):
    return [el.text for el in page.select(class_name)]


def test_initialize_wires_components(config_file, settings, page):
    store, ctx = start(config_file, settings, page)
    assert ctx.config.languages() == ["en", "fr"]
    assert ctx.route.store is store
    assert ctx.binder.store is ctx.translations
    assert ctx.app.page is page


def test_initialize_missing_config(tmp_path, settings, page):
    with pytest.raises(FileNotFoundError):
        initialize_app(MemoryHashStore(), page=page, config_path=tmp_path / "nope.json", settings=settings)


def test_run_default_language(config_file, settings, page):
    store, ctx = start(config_file, settings, page)

    assert ctx.app.run() is True
    assert page.errors == []
    # Preparing the page commits the active language
    assert store.get_hash() == "lang/en"
    assert texts(page, "put-sitename-here") == ["Synthetic Data"]
    assert texts(page, "translate-me") == ["Start"]
    assert page.first("count-values").value == 400
    assert page.first("h1").visible is False
    assert page.first("start-game").visible is True


def test_run_translates_from_hash(config_file, settings, page):
    store, ctx = start(config_file, settings, page, "count/99999/lang/fr")

    assert ctx.app.run() is True
    assert texts(page, "put-sitename-here") == ["Données synthétiques"]
    assert texts(page, "translate-me") == ["Commencer"]
    assert page.first("count-values").value == 4000
    assert page.first("start-button").attrs["href"] == (
        "go.html#col-1/name.name/col-2/age.int.18-55/count/400/lang/fr"
    )
    assert page.first("back-to-home").attrs["href"] == "index.html#lang/fr"


def test_language_switch_link(config_file, settings, page):
    store, ctx = start(config_file, settings, page, "count/12")
    ctx.app.run()

    languages = {el.data["lang"]: el for el in page.select("language")}
    assert languages["en"].has_class("active")
    assert 'href="#count/12/lang/fr"' in languages["fr"].html

    languages["fr"].click()

    assert store.get_hash() == "count/12/lang/fr"
    assert store.reload_count == 1
    assert texts(page, "translate-me") == ["Commencer"]
    assert languages["fr"].has_class("active")
    assert not languages["en"].has_class("active")
    assert page.first("back-to-home").attrs["href"] == "index.html#lang/fr"


def test_home_button_resets(config_file, settings, page):
    store, ctx = start(config_file, settings, page, "col-1/name.name/count/10/lang/fr")
    ctx.app.run()

    page.first("back-to-home").click()

    assert store.location == "index.html#lang/fr"
    assert store.get_hash() == "lang/fr"


def test_count_follows_committed_hash(config_file, settings, page):
    _, ctx = start(config_file, settings, page, "count/50")
    ctx.app.run()
    assert page.first("count-values").value == 50

    ctx.route.commit(ctx.route.set_param("count", "75"))
    # Repaints only once queued events are processed
    assert page.first("count-values").value == 50
    ctx.event_bus.process_events()
    assert page.first("count-values").value == 75


def test_file_protocol_shows_error_banner(config_file, settings, page):
    store = LocationHashStore("file:///tmp/index.html#lang/fr")
    ctx = initialize_app(store, page=page, config_path=config_file, settings=settings)

    assert ctx.app.run() is False
    assert "file://" in page.errors[0]
    assert page.first("unhide-if-errors").visible is True
    assert page.first("hide-if-errors").visible is False


def test_missing_config_is_reported_inline(route, settings, page, caplog):
    binder = LocalizationBinder(route, TranslationStore())
    app = App(route, binder, page, settings)

    assert app.run() is False
    assert page.errors == ["LocalizationBinder has no site config."]
    assert "App run failed" in caplog.text


def test_switcher_without_config_reports_config_error(route, settings, page):
    app = App(route, LocalizationBinder(route, TranslationStore()), page, settings)

    with pytest.raises(ConfigNotLoadedError):
        app.multilingual_page.prepare()


def test_download(binder, route, settings, page):
    app = App(route, binder, page, settings)
    uri, filename = app.download()

    assert uri == "data:text/csv;charset=utf-8,a,b,c%0A1,2,3%0A4,5,6"
    assert filename == "donnes-synthetiques.csv"
    assert page.first("csv").text == "a,b,c\n1,2,3\n4,5,6"


def test_csv_columns_from_hash():
    store = MemoryHashStore("col-1/name.name/col-2/age.int.18-55/count/400")
    gen = CsvGen(RouteState(store))
    assert gen.get_columns() == [("col-1", "name.name"), ("col-2", "age.int.18-55")]
    assert CsvGen().get_columns() == []


def test_random_element():
    assert random_element(["only"]) == "only"
    with pytest.raises(InvalidArgumentError):
        random_element(None)
