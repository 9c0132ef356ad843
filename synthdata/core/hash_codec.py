"""Conversion between URL fragments and ordered parameter maps.

A fragment such as ``lang/fr/count/40`` holds alternating keys and values
separated by ``/``. Keys and values are percent-encoded with the same safe
set as JavaScript's ``encodeURIComponent``, so a ``/`` inside a key or value
survives as ``%2F``.

Decoding is permissive. The fragment is user-editable text, so malformed
input is dropped rather than rejected:

- a pair whose key decodes to ``""`` is skipped,
- a trailing key without a value is discarded,
- a repeated key keeps its first value.
"""

from collections.abc import Mapping
from urllib.parse import quote, unquote

__all__ = ["SEPARATOR", "decode_hash", "encode_hash", "clean_hash", "quote_component"]

SEPARATOR = "/"

# encodeURIComponent leaves these unescaped on top of quote()'s "_.-~"
_COMPONENT_SAFE = "!*'()"


def quote_component(text: str) -> str:
    """Percent-encode one key or value."""
    return quote(text, safe=_COMPONENT_SAFE)


def decode_hash(hash_string: str | None) -> dict[str, str]:
    """Convert a fragment ``a/b/c/d`` into ``{"a": "b", "c": "d"}``.

    Args:
        hash_string: Fragment text without the leading ``#``

    Returns:
        Parameters in the order their keys first appear
    """
    if hash_string is None:
        return {}

    params: dict[str, str] = {}
    parts = hash_string.split(SEPARATOR)
    # zip() stops at the shorter slice, dropping an unpaired trailing key
    for raw_key, raw_value in zip(parts[0::2], parts[1::2]):
        key = unquote(raw_key)
        if key == "" or key in params:
            continue
        params[key] = unquote(raw_value)
    return params


def encode_hash(params: Mapping[str, str]) -> str:
    """Convert ``{"a": "b"}`` into the fragment ``a/b``."""
    return SEPARATOR.join(
        f"{quote_component(str(key))}{SEPARATOR}{quote_component(str(value))}"
        for key, value in params.items()
    )


def clean_hash(hash_string: str | None) -> str:
    """Normalize a fragment, removing duplicate keys and stray segments."""
    return encode_hash(decode_hash(hash_string))
