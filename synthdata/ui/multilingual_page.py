"""Paints translations onto the page model.

Elements tagged ``translate-me`` have their initial text recorded as the
source string. Every language change re-translates each tagged element:
``translate-me-content-text`` elements get new text and
``translate-me-href`` elements a new ``href``.
"""

import json
from collections.abc import Callable, Mapping

from synthdata.core.hash_codec import encode_hash
from synthdata.core.localization.binder import LocalizationBinder
from synthdata.core.logging_utils import setup_logger
from synthdata.ui.page import CONTENT_TEXT, HREF, Element, Page

__all__ = ["MultilingualPage", "DEFAULT_COLUMNS"]

logger = setup_logger("multilingual_page")

TAG_PREFIX = "translate-me"
ARGS_PREFIX = "translate-me-args"

# Columns preset by the start button
DEFAULT_COLUMNS = {
    "col-1": "name.name",
    "col-2": "age.int.18-55",
}


class MultilingualPage:
    """The translated view of a Page.

    Args:
        page: Page model to paint
        binder: Source of the active language and translations
        site_name: Source string for the site name
        default_count: Row count preset by the start button
        on_home: Called when the home button is clicked
        reload_on_switch: Reload the page when the language changes
    """

    def __init__(
        self,
        page: Page,
        binder: LocalizationBinder,
        site_name: str = "Synthetic Data",
        default_count: int = 400,
        on_home: Callable[[], object] | None = None,
        reload_on_switch: bool = True,
    ):
        self.page = page
        self.binder = binder
        self.site_name = site_name
        self.default_count = default_count
        self.on_home = on_home
        self.reload_on_switch = reload_on_switch
        binder.add_listener(self._on_language_change)

    def tag_elements(self):
        """Record the current text of ``translate-me`` elements as their source."""
        for el in self.page.select(TAG_PREFIX):
            el.attrs[f"{TAG_PREFIX}-{CONTENT_TEXT}"] = el.text.strip()
            el.attrs[f"{ARGS_PREFIX}-{CONTENT_TEXT}"] = "{}"
            el.add_class(f"{TAG_PREFIX}-{CONTENT_TEXT}")
        self.translate_interface(self.binder.active_lang())

    def prepare(self):
        """Build the language switcher and chrome for the active language."""
        active_lang = self.binder.active_lang()
        self.put_languages(self.binder.languages())
        self.set_active_lang(active_lang, reload=False)
        self.set_content("put-sitename-here", CONTENT_TEXT, self.site_name)

    def set_active_lang(self, lang: str, reload: bool | None = None):
        """Switch language; listeners repaint the page."""
        if reload is None:
            reload = self.reload_on_switch
        self.binder.set_active_lang(lang, reload=reload)

    def translate_interface(self, lang: str):
        """Re-translate every tagged element into ``lang``."""
        count = 0
        for el in self.page.select(f"{TAG_PREFIX}-{HREF}"):
            el.attrs[HREF] = self._translate_tagged(el, HREF, lang)
            count += 1
        for el in self.page.select(f"{TAG_PREFIX}-{CONTENT_TEXT}"):
            el.text = self._translate_tagged(el, CONTENT_TEXT, lang)
            count += 1
        logger.debug(f"Translated {count} elements into '{lang}'")

    def put_languages(self, languages: list[str]):
        for language in languages:
            self.page.add(Element.with_classes("language", text=language, data={"lang": language}))

    def set_active_lang_link(self, active_lang: str):
        """Mark the active language; turn the others into switch links."""
        links = {link.lang: link for link in self.binder.language_links()}
        for el in self.page.select("language"):
            el.remove_class("active")
            lang = el.data.get("lang")
            if lang == active_lang:
                el.add_class("active")
                el.text = lang
                el.html = ""
                el.on_click = None
            else:
                href = links[lang].href if lang in links else "#"
                el.html = f'<a href="{href}" class="switch-lang" data-lang="{lang}">{lang}</a>'
                el.on_click = lambda lang=lang: self.set_active_lang(lang)

    def set_home_button(self, lang: str):
        for el in self.page.select("back-to-home"):
            el.attrs[HREF] = "index.html#" + encode_hash({"lang": lang})
            el.on_click = self.on_home

    def set_start_button(self, lang: str):
        params = {**DEFAULT_COLUMNS, "count": str(self.default_count), "lang": lang}
        for el in self.page.select("start-button"):
            el.attrs[HREF] = "go.html#" + encode_hash(params)

    def set_content(self, selector: str, loc: str, content: str, args: Mapping[str, str] | None = None):
        """Set translated content and tag it for future re-translation."""
        args = dict(args or {})
        self.page.set_content(
            selector,
            [
                {"loc": loc, "content": self.binder.translate(content, args)},
                {"loc": f"{TAG_PREFIX}-{loc}", "content": content},
                {"loc": f"{ARGS_PREFIX}-{loc}", "content": json.dumps(args)},
            ],
            f"{TAG_PREFIX}-{loc}",
        )

    def _translate_tagged(self, el: Element, loc: str, lang: str) -> str:
        source = el.attrs.get(f"{TAG_PREFIX}-{loc}", "")
        args = json.loads(el.attrs.get(f"{ARGS_PREFIX}-{loc}", "{}"))
        return self.binder.translate(source, args, lang)

    def _on_language_change(self, old_lang: str, new_lang: str):
        self.translate_interface(new_lang)
        self.set_active_lang_link(new_lang)
        self.set_home_button(new_lang)
        self.set_start_button(new_lang)
