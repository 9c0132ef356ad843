#!/usr/bin/env python3
"""Command-line entry point: run the page headlessly and print its state.

Usage:
    python -m synthdata --hash "lang/fr/count/50"
    python -m synthdata --hash "lang/en" --lang fr
"""

import argparse
import logging
import sys

from synthdata.__version__ import __version__
from synthdata.core.app_initializer import initialize_app
from synthdata.core.config_loader import DEFAULT_CONFIG_PATH
from synthdata.core.events import EventType
from synthdata.core.hash_store import LocationHashStore
from synthdata.core.logging_utils import configure_file_logging, set_global_log_level, setup_logger
from synthdata.ui.page import Element, Page

logger = setup_logger("main")


def parse_arguments(argv=None):
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(prog="synthdata", description="Synthetic Data page runner")
    parser.add_argument("--url", default="https://localhost/index.html", help="Page URL without fragment")
    parser.add_argument("--hash", default="", help="URL fragment, e.g. lang/fr/count/50")
    parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to the site asset")
    parser.add_argument("--lang", help="Switch to this language after the page runs")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-dir", help="Also write rotating log files to this directory")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_index_page() -> Page:
    """The elements of index.html that take part in translation."""
    return Page(
        [
            Element.with_classes("h1", text="Synthetic Data"),
            Element.with_classes("put-sitename-here"),
            Element.with_classes("translate-me", text=" Generate a CSV file with fake data "),
            Element.with_classes("translate-me", text="Start"),
            Element.with_classes("start-button"),
            Element.with_classes("back-to-home"),
            Element.with_classes("count-values"),
            Element.with_classes("put-year-here"),
            Element.with_classes("start-game", visible=False),
            Element.with_classes("unhide-if-errors", visible=False),
            Element.with_classes("hide-if-errors"),
        ]
    )


def _print_language_change(event):
    print(f"language: {event.payload['old_language']} -> {event.payload['new_language']}")


def main(argv=None) -> int:
    args = parse_arguments(argv)

    store = LocationHashStore(f"{args.url}#{args.hash}")
    page = build_index_page()
    ctx = initialize_app(store, page=page, config_path=args.config)
    if args.debug:
        set_global_log_level(logging.DEBUG)
    if args.log_dir:
        configure_file_logging(args.log_dir)
    ctx.event_bus.subscribe(EventType.LANGUAGE_CHANGED, _print_language_change)

    ok = ctx.app.run()
    if ok and args.lang:
        ctx.app.multilingual_page.set_active_lang(args.lang)
    ctx.event_bus.process_events()

    print(f"url: {store.url}")
    print(f"lang: {ctx.binder.active_lang()}")
    print(f"count: {ctx.app.row_count()}")
    for el in page.elements:
        if el.text and el.visible:
            print(f"  {el.text.strip()}")
    for error in page.errors:
        print(f"error: {error}", file=sys.stderr)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
