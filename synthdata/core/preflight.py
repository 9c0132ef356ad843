"""Environment checks run before the page is prepared."""

from synthdata.core.errors import PreflightError

__all__ = ["Preflight"]

FILE_PROTOCOL_MESSAGE = (
    "Cannot use file:// protocol. You might want to try: python3 -m http.server; "
    "see https://documentation.dcycle.com for more details."
)


class Preflight:
    """Refuses to run from a ``file://`` page, where the config asset can't load."""

    def __init__(self, protocol: str = ""):
        self.protocol = protocol

    def check(self):
        if self.protocol == "file:":
            raise PreflightError(FILE_PROTOCOL_MESSAGE)
