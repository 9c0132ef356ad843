"""synthdata - shareable synthetic CSV configuration kept in the URL fragment."""

from synthdata.__version__ import __version__
from synthdata.core.config_loader import SiteConfig, load_config
from synthdata.core.errors import (
    ConfigNotLoadedError,
    InvalidArgumentError,
    PreflightError,
    SynthDataError,
)
from synthdata.core.hash_codec import clean_hash, decode_hash, encode_hash
from synthdata.core.hash_store import HashStore, LocationHashStore, MemoryHashStore
from synthdata.core.localization import LocalizationBinder, TranslationStore
from synthdata.core.route_state import RouteState, get_param, set_param

__all__ = [
    "__version__",
    "ConfigNotLoadedError",
    "HashStore",
    "InvalidArgumentError",
    "LocalizationBinder",
    "LocationHashStore",
    "MemoryHashStore",
    "PreflightError",
    "RouteState",
    "SiteConfig",
    "SynthDataError",
    "TranslationStore",
    "clean_hash",
    "decode_hash",
    "encode_hash",
    "get_param",
    "load_config",
    "set_param",
]
