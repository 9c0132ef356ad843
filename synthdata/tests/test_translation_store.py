"""Test translation tables and argument substitution."""

import pytest

from synthdata.core.errors import ConfigNotLoadedError, InvalidArgumentError
from synthdata.core.localization.service import TranslationStore, replace_args


def test_get_empty_language_returns_detached_dict():
    store = TranslationStore()
    table = store.get("")
    table["x"] = "y"
    assert store.get("") == {}
    assert store.get(None) == {}
    assert store.languages() == []


def test_get_creates_language():
    store = TranslationStore()
    assert store.get("fr") == {}
    assert store.languages() == ["fr"]


def test_set_get_clear():
    store = TranslationStore()
    store.set("xx", {"hello": "world"})
    assert store.get("xx") == {"hello": "world"}

    store.clear()
    assert store.get("xx") == {}


def test_set_merges_into_existing():
    store = TranslationStore()
    store.set("fr", {"Home": "Maison", "Start": "Commencer"})
    store.set("fr", {"Home": "Accueil", "Download": "Télécharger"})
    assert store.get("fr") == {
        "Home": "Accueil",
        "Start": "Commencer",
        "Download": "Télécharger",
    }


def test_set_none_is_rejected():
    store = TranslationStore()
    with pytest.raises(InvalidArgumentError):
        store.set("fr", None)
    with pytest.raises(ValueError):
        store.set("fr", None)


@pytest.mark.parametrize(
    "lang, translations, text, expected",
    [
        ("xx", {}, "hello", "hello"),
        ("fr", {"hello": "bonjour"}, "hello", "bonjour"),
        ("fr", {"hello name": "bonjour name"}, "hello name", "bonjour world"),
        ("fr", {"other": "autre"}, "hello name", "hello world"),
    ],
)
def test_translate(lang, translations, text, expected):
    store = TranslationStore()
    store.set(lang, translations)
    assert store.translate(text, {"name": "world"}, lang) == expected


def test_substitution_is_literal_substring():
    """Test that keys are replaced inside other words too."""
    store = TranslationStore()
    assert store.translate("rename name", {"name": "X"}, "xx") == "reX X"
    assert store.translate("cost: $1.00", {"$1.00": "5 €"}, "xx") == "cost: 5 €"


def test_substitution_applies_keys_in_order():
    assert replace_args("a", {"a": "b", "b": "c"}) == "c"
    assert replace_args("a", {"b": "c", "a": "b"}) == "b"
    assert replace_args("unchanged", None) == "unchanged"


def test_translate_uses_active_language():
    lang = ["fr"]
    store = TranslationStore(active_language=lambda: lang[0])
    store.set("fr", {"Start": "Commencer"})
    assert store.translate("Start") == "Commencer"

    lang[0] = "en"
    assert store.translate("Start") == "Start"
    assert store.translate("Start", lang="fr") == "Commencer"


def test_translate_without_language_source():
    store = TranslationStore()
    with pytest.raises(ConfigNotLoadedError):
        store.translate("Start")
    assert store.translate("Start", lang="fr") == "Start"
