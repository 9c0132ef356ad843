"""Raw storage for the URL fragment.

A HashStore only gets and sets fragment text. Parsing lives in
``hash_codec`` and parameter logic in ``route_state``.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from urllib.parse import urldefrag, urljoin

from synthdata.core.logging_utils import setup_logger

__all__ = ["HashStore", "MemoryHashStore", "LocationHashStore"]

logger = setup_logger("hash_store")


def _strip_marker(hash_string: str) -> str:
    if hash_string.startswith("#"):
        return hash_string[1:]
    return hash_string


class HashStore(ABC):
    """Holds the fragment text, never including the leading ``#``."""

    @property
    def protocol(self) -> str:
        """Page scheme such as ``https:``; empty when there is no page."""
        return ""

    @abstractmethod
    def get_hash(self) -> str:
        """Return the current fragment."""

    @abstractmethod
    def set_hash(self, hash_string: str = ""):
        """Replace the current fragment."""

    @abstractmethod
    def refresh_page(self):
        """Reload the page, discarding in-memory state."""

    @abstractmethod
    def navigate(self, url: str):
        """Replace the whole location with ``url``."""


class MemoryHashStore(HashStore):
    """In-memory store for tests and headless use."""

    def __init__(self, hash_string: str = ""):
        self._hash = _strip_marker(hash_string)
        self.history: list[str] = []
        self.reload_count = 0
        self.location: str | None = None

    def get_hash(self) -> str:
        return self._hash

    def set_hash(self, hash_string: str = ""):
        self._hash = _strip_marker(hash_string)
        self.history.append(self._hash)

    def refresh_page(self):
        self.reload_count += 1

    def navigate(self, url: str):
        self.location = url
        _, fragment = urldefrag(url)
        self.set_hash(fragment)


class LocationHashStore(HashStore):
    """Store backed by a full page URL, like ``window.location``.

    Args:
        url: Current page URL, e.g. ``https://example.org/go.html#lang/fr``
        on_reload: Called with the URL whenever a reload is requested
    """

    def __init__(self, url: str, on_reload: Callable[[str], None] | None = None):
        self._base, self._fragment = urldefrag(url)
        self._on_reload = on_reload
        self.reload_count = 0

    @property
    def url(self) -> str:
        """The full URL including the fragment."""
        return f"{self._base}#{self._fragment}"

    @property
    def protocol(self) -> str:
        """Scheme with trailing colon, as ``location.protocol`` reports it."""
        scheme, sep, _ = self._base.partition(":")
        return f"{scheme}:" if sep else ""

    def get_hash(self) -> str:
        return self._fragment

    def set_hash(self, hash_string: str = ""):
        self._fragment = _strip_marker(hash_string)
        logger.debug(f"Location hash set: {self._fragment}")

    def refresh_page(self):
        self.reload_count += 1
        logger.info(f"Reloading {self.url}")
        if self._on_reload is not None:
            self._on_reload(self.url)

    def navigate(self, url: str):
        self._base, self._fragment = urldefrag(urljoin(self._base, url))
        logger.info(f"Navigated to {self.url}")
