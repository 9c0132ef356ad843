"""Keeps the active language in the URL fragment's ``lang`` parameter.

The binder has two states. Until ``set_active_lang`` is called the fragment
has no ``lang`` parameter and every read reports :data:`DEFAULT_LANGUAGE`.
After it, the parameter holds the chosen code. The language is never
cached: each read decodes the fragment.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from synthdata.core.config_loader import SiteConfig
from synthdata.core.errors import ConfigNotLoadedError
from synthdata.core.event_bus import EventBus
from synthdata.core.events import EventType
from synthdata.core.localization.service import TranslationStore
from synthdata.core.logging_utils import log_event, setup_logger
from synthdata.core.route_state import RouteState

__all__ = ["DEFAULT_LANGUAGE", "LANG_PARAM", "LanguageLink", "LocalizationBinder"]

logger = setup_logger("localization_binder")

DEFAULT_LANGUAGE = "en"
LANG_PARAM = "lang"


@dataclass(frozen=True)
class LanguageLink:
    """One entry of the language switcher."""

    lang: str
    active: bool
    href: str


class LocalizationBinder:
    """Synchronizes a TranslationStore with the route's ``lang`` parameter.

    Args:
        route: Route state holding the fragment
        store: Translation tables; bound to this binder's active language
        config: Site config providing languages and translations
        event_bus: Optional bus for LANGUAGE_CHANGED events
        default_language: Language reported while ``lang`` is unset
    """

    def __init__(
        self,
        route: RouteState,
        store: TranslationStore,
        config: SiteConfig | None = None,
        event_bus: EventBus | None = None,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        self.route = route
        self.store = store
        self.config = config
        self.event_bus = event_bus
        self.default_language = default_language
        self._listeners: list[Callable[[str, str], None]] = []
        store.bind_active_language(self.active_lang)

    def prepare(self):
        """Load every configured language's translations into the store.

        Raises:
            ConfigNotLoadedError: If the site config is missing or unloaded
        """
        languages = self.languages()
        translations = self.config.translations()
        for lang in languages:
            self.store.set(lang, translations.get(lang, {}))

        logger.info(f"Loaded translations for {len(languages)} languages")

    def languages(self) -> list[str]:
        """Configured language codes.

        Raises:
            ConfigNotLoadedError: If the site config is missing or unloaded
        """
        if self.config is None:
            raise ConfigNotLoadedError("LocalizationBinder has no site config.")
        return self.config.languages()

    def active_lang(self) -> str:
        """The language in the fragment, or the default when unset."""
        return self.route.get_param(LANG_PARAM, self.default_language)

    def set_active_lang(self, lang: str, reload: bool = False) -> str:
        """Write ``lang`` into the fragment and re-render listeners.

        Args:
            lang: Language code
            reload: Also request a full page reload

        Returns:
            The committed fragment
        """
        old_lang = self.active_lang()
        hash_string = self.route.set_param(LANG_PARAM, lang)
        self.route.commit(hash_string, reload=reload)

        self._notify_language_change(old_lang, lang)

        if old_lang != lang:
            log_event(logger, "language_changed", {"from": old_lang, "to": lang})
            if self.event_bus is not None:
                self.event_bus.emit(
                    EventType.LANGUAGE_CHANGED,
                    {"old_language": old_lang, "new_language": lang},
                    source="localization_binder",
                )
        return hash_string

    def translate(self, text: str, args: Mapping[str, str] | None = None, lang: str = "") -> str:
        return self.store.translate(text, args, lang)

    def language_links(self) -> list[LanguageLink]:
        """One link per configured language; inactive ones point at a new fragment.

        Raises:
            ConfigNotLoadedError: If the site config is missing or unloaded
        """
        active = self.active_lang()
        links = []
        for lang in self.languages():
            links.append(
                LanguageLink(
                    lang=lang,
                    active=lang == active,
                    href="#" + self.route.set_param(LANG_PARAM, lang),
                )
            )
        return links

    def add_listener(self, callback: Callable[[str, str], None]):
        """Register a callback(old_lang, new_lang) run after every language set."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[str, str], None]):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_language_change(self, old_lang: str, new_lang: str):
        for listener in list(self._listeners):
            try:
                listener(old_lang, new_lang)
            except Exception:
                logger.exception(f"Error in language change listener {listener!r}")
