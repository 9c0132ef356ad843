"""Exception types raised by synthdata."""

__all__ = [
    "SynthDataError",
    "ConfigNotLoadedError",
    "InvalidArgumentError",
    "PreflightError",
]


class SynthDataError(Exception):
    """Base class for all synthdata errors."""


class ConfigNotLoadedError(SynthDataError):
    """A language or translation query ran before the config asset resolved."""


class InvalidArgumentError(SynthDataError, ValueError):
    """A required argument was None."""


class PreflightError(SynthDataError):
    """The page cannot run in its current environment."""
