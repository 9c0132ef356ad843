"""Minimal page model: elements with classes, text and attributes.

Only what the localization layer touches is modeled. Selectors are class
names without the leading dot.
"""

import datetime
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from synthdata.core.logging_utils import setup_logger

__all__ = ["CONTENT_TEXT", "CONTENT_HTML", "HREF", "Element", "Page"]

logger = setup_logger("page")

CONTENT_TEXT = "content-text"
CONTENT_HTML = "content-html"
HREF = "href"


@dataclass
class Element:
    """A tagged page element."""

    classes: set[str] = field(default_factory=set)
    text: str = ""
    html: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)
    visible: bool = True
    value: Any = None
    on_click: Callable[[], Any] | None = None

    @classmethod
    def with_classes(cls, *classes: str, **kwargs) -> "Element":
        return cls(classes=set(classes), **kwargs)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str):
        self.classes.add(name)

    def remove_class(self, name: str):
        self.classes.discard(name)

    def click(self):
        if self.on_click is not None:
            return self.on_click()
        return None


class Page:
    """A flat list of elements plus the inline error banner."""

    def __init__(self, elements: list[Element] | None = None):
        self.elements: list[Element] = list(elements or [])
        self.errors: list[str] = []

    def add(self, element: Element) -> Element:
        self.elements.append(element)
        return element

    def select(self, class_name: str) -> list[Element]:
        return [el for el in self.elements if el.has_class(class_name)]

    def first(self, class_name: str) -> Element | None:
        matches = self.select(class_name)
        return matches[0] if matches else None

    def hide(self, class_name: str):
        for el in self.select(class_name):
            el.visible = False

    def show(self, class_name: str):
        for el in self.select(class_name):
            el.visible = True

    def set_content(self, class_name: str, attributes: list[dict[str, str]], add_class: str = ""):
        """Write each ``{"loc": ..., "content": ...}`` pair to matching elements.

        ``content-text`` sets text, ``content-html`` sets markup, anything
        else is an attribute name.
        """
        for el in self.select(class_name):
            for attribute in attributes:
                loc = attribute["loc"]
                content = attribute["content"]
                if loc == CONTENT_TEXT:
                    el.text = content
                elif loc == CONTENT_HTML:
                    el.html = content
                else:
                    el.attrs[loc] = content
            if add_class:
                el.add_class(add_class)

    def add_error(self, error: BaseException | str):
        """Show ``error`` in the banner and hide the regular content."""
        self.errors.append(str(error))
        self.show("unhide-if-errors")
        self.hide("hide-if-errors")

    def prepare(self):
        """Fill static chrome: current year, title and start section."""
        year = str(datetime.date.today().year)
        for el in self.select("put-year-here"):
            el.text = year
        self.hide("h1")
        self.show("start-game")
        logger.debug(f"Page prepared with {len(self.elements)} elements")
