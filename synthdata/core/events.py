#!/usr/bin/env python3
"""Centralized event types for the entire application.

All event types are defined here to avoid ad-hoc string events.
"""

from enum import Enum, auto

__all__ = ["EventType"]


class EventType(Enum):
    """All possible events in the system."""

    # Hash events
    HASH_CHANGED = auto()  # A new hash was committed to the store

    # Localization events
    LANGUAGE_CHANGED = auto()
