"""Localization: translation tables and their binding to the URL fragment."""

from synthdata.core.localization.binder import DEFAULT_LANGUAGE, LocalizationBinder
from synthdata.core.localization.service import TranslationStore, replace_args

__all__ = ["DEFAULT_LANGUAGE", "LocalizationBinder", "TranslationStore", "replace_args"]
