"""Named parameters read from and written to the URL fragment.

The fragment is the single source of truth: nothing is cached, every read
decodes the store again.
"""

import re

from synthdata.core.event_bus import EventBus
from synthdata.core.events import EventType
from synthdata.core.hash_codec import decode_hash, encode_hash
from synthdata.core.hash_store import HashStore, MemoryHashStore
from synthdata.core.logging_utils import setup_logger

__all__ = ["RouteState", "get_param", "set_param"]

logger = setup_logger("route_state")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class RouteState:
    """Read and write single parameters while preserving the others.

    Args:
        store: Where the fragment lives
        event_bus: Optional bus notified on commits
    """

    def __init__(self, store: HashStore, event_bus: EventBus | None = None):
        self.store = store
        self.event_bus = event_bus

    def get_hash(self) -> str:
        return self.store.get_hash()

    def set_hash(self, hash_string: str = ""):
        self.store.set_hash(hash_string)

    def params(self) -> dict[str, str]:
        """Decoded parameters of the current fragment."""
        return decode_hash(self.get_hash())

    def get_param(self, name: str, default: str = "") -> str:
        """Value of ``name``, or ``default`` when missing or empty.

        With ``a/b/a/c`` the first occurrence wins and ``a`` is ``b``.
        A parameter stored as ``""`` reads the same as an unset one.
        """
        value = self.params().get(name)
        if value:
            return value
        return default

    def get_int_param(self, name: str, default: int, minimum: int | None = None, maximum: int | None = None) -> int:
        """Integer value of ``name`` clamped to ``[minimum, maximum]``.

        Leading digits are read the way a browser reads them (``12abc`` and
        ``12.9`` give 12). Values without leading digits fall back to
        ``default`` before clamping.
        """
        raw = self.get_param(name, str(default))
        match = _LEADING_INT.match(raw)
        if match:
            value = int(match.group(1))
        else:
            logger.debug(f"Ignoring non-numeric {name}={raw!r}, using {default}")
            value = default

        if minimum is not None and value < minimum:
            value = minimum
        if maximum is not None and value > maximum:
            value = maximum
        return value

    def set_param(self, name: str, value: str) -> str:
        """Compute the fragment with ``name`` set to ``value``.

        An existing key keeps its position; a new key goes last. The
        result is returned, not written; pass it to :meth:`commit`.

        Example:
            ``a/b/c/d`` with ``z=12`` gives ``a/b/c/d/z/12``.
        """
        params = self.params()
        params[name] = value
        return encode_hash(params)

    def commit(self, hash_string: str, reload: bool = False):
        """Write ``hash_string`` to the store, optionally reloading the page."""
        previous = self.get_hash()
        self.store.set_hash(hash_string)
        logger.debug(f"Committed hash {previous!r} -> {hash_string!r}")

        if self.event_bus is not None:
            self.event_bus.emit(
                EventType.HASH_CHANGED,
                {"old_hash": previous, "new_hash": hash_string},
                source="route_state",
            )

        if reload:
            self.store.refresh_page()


def get_param(hash_string: str, name: str, default: str = "") -> str:
    """:meth:`RouteState.get_param` applied to a fragment string."""
    return RouteState(MemoryHashStore(hash_string)).get_param(name, default)


def set_param(hash_string: str, name: str, value: str) -> str:
    """:meth:`RouteState.set_param` applied to a fragment string."""
    return RouteState(MemoryHashStore(hash_string)).set_param(name, value)
