"""CSV generation placeholder.

Column definitions come from the fragment (``col-1/name.name``); real
generation is not implemented and a fixed sample is returned.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

from synthdata.core.errors import InvalidArgumentError
from synthdata.core.route_state import RouteState

__all__ = ["CsvGen", "SAMPLE_CSV", "random_element"]

SAMPLE_CSV = "a,b,c\n1,2,3\n4,5,6"

T = TypeVar("T")


def random_element(items: Sequence[T] | None) -> T:
    """Pick a random element.

    Raises:
        InvalidArgumentError: If ``items`` is None
    """
    if items is None:
        raise InvalidArgumentError("random_element requires a sequence; not None.")
    return random.choice(items)


class CsvGen:
    """Produces the CSV for the configured columns."""

    def __init__(self, route: RouteState | None = None):
        self.route = route

    def get_columns(self) -> list[tuple[str, str]]:
        """``(header, type)`` pairs from ``col-N`` parameters, in fragment order."""
        if self.route is None:
            return []
        return [(name, kind) for name, kind in self.route.params().items() if name.startswith("col-")]

    def get_csv(self) -> str:
        return SAMPLE_CSV
