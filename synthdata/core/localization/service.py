"""Per-language translation tables with literal argument substitution.

Source strings are their own keys: a string without a translation renders
verbatim. Arguments are substituted by plain substring replacement, so
``{"name": "world"}`` turns ``"bonjour name"`` into ``"bonjour world"``.
There are no delimiters; a key that also occurs inside another word is
replaced there too.
"""

from collections.abc import Callable, Mapping

from synthdata.core.errors import ConfigNotLoadedError, InvalidArgumentError
from synthdata.core.logging_utils import setup_logger

__all__ = ["TranslationStore", "replace_args"]

logger = setup_logger("localization")


def replace_args(text: str, args: Mapping[str, str] | None) -> str:
    """Replace every occurrence of each key of ``args`` in ``text``.

    Keys are applied in iteration order, each one to the output of the
    previous replacement.
    """
    if not args:
        return text
    for key, value in args.items():
        text = text.replace(str(key), str(value))
    return text


class TranslationStore:
    """Holds translations for every language.

    Args:
        active_language: Callable returning the language used when
            :meth:`translate` gets no explicit language
    """

    def __init__(self, active_language: Callable[[], str] | None = None):
        self._translations: dict[str, dict[str, str]] = {}
        self._active_language = active_language

    def bind_active_language(self, active_language: Callable[[], str]):
        self._active_language = active_language

    def get(self, lang: str | None) -> dict[str, str]:
        """Translation table for ``lang``, created empty if absent.

        An empty language has no table; a fresh empty dict is returned and
        nothing is stored.
        """
        if not lang:
            return {}
        return self._translations.setdefault(lang, {})

    def set(self, lang: str, entries: Mapping[str, str] | None):
        """Merge ``entries`` into the table for ``lang``.

        Keys present in both are overwritten; keys only in the existing
        table are kept.

        Raises:
            InvalidArgumentError: If ``entries`` is None
        """
        if entries is None:
            raise InvalidArgumentError(f"Translations for '{lang}' must be a mapping, not None.")
        previous = self.get(lang)
        self._translations[lang] = {**previous, **entries}
        logger.debug(f"Set {len(entries)} translations for '{lang}'")

    def clear(self):
        """Discard all languages and entries."""
        self._translations = {}

    def languages(self) -> list[str]:
        """Languages that currently have a table."""
        return list(self._translations)

    def translate(self, text: str, args: Mapping[str, str] | None = None, lang: str = "") -> str:
        """Translate ``text`` and substitute ``args``.

        Args:
            text: Source string, also the lookup key
            args: Literal substring replacements
            lang: Language code; empty means the active language

        Returns:
            The translated template, or ``text`` itself, with args applied

        Raises:
            ConfigNotLoadedError: If no language is given and none is bound
        """
        if not lang:
            if self._active_language is None:
                raise ConfigNotLoadedError("No active language source bound to the translation store.")
            lang = self._active_language()

        template = self.get(lang).get(text, text)
        return replace_args(template, args)
