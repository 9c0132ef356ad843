"""In-memory page model standing in for the browser DOM."""

from synthdata.ui.multilingual_page import MultilingualPage
from synthdata.ui.page import Element, Page

__all__ = ["Element", "MultilingualPage", "Page"]
