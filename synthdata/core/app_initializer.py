#!/usr/bin/env python3
"""Application initialization - ordered startup of all components.

The site config loads on a worker thread while config-independent
components are built. Its future is resolved before anything that reads
languages or translations is constructed, so no lookup can race the load.
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from synthdata.core.app import App
from synthdata.core.config_loader import DEFAULT_CONFIG_PATH, SiteConfig, load_settings
from synthdata.core.config_schema import AppSettings
from synthdata.core.csv_gen import CsvGen
from synthdata.core.event_bus import EventBus
from synthdata.core.hash_store import HashStore
from synthdata.core.localization.binder import LocalizationBinder
from synthdata.core.localization.service import TranslationStore
from synthdata.core.logging_utils import set_global_log_level, setup_logger
from synthdata.core.preflight import Preflight
from synthdata.core.route_state import RouteState
from synthdata.ui.page import Page

__all__ = ["AppContext", "initialize_app", "submit_config_load"]

logger = setup_logger("app_initializer")


@dataclass
class AppContext:
    """Every component of one page lifetime."""

    settings: AppSettings
    config: SiteConfig
    event_bus: EventBus
    route: RouteState
    translations: TranslationStore
    binder: LocalizationBinder
    page: Page
    app: App


def submit_config_load(executor: Executor, config_path: str | Path) -> Future:
    """Start loading the site config on ``executor``."""
    logger.debug(f"Submitting config load: {config_path}")
    return executor.submit(SiteConfig.from_path, config_path)


def initialize_app(
    hash_store: HashStore,
    page: Page | None = None,
    config_path: str | Path = DEFAULT_CONFIG_PATH,
    settings: AppSettings | None = None,
    executor: Executor | None = None,
) -> AppContext:
    """Build all components in dependency order.

    Args:
        hash_store: Where the URL fragment lives
        page: Page model to paint (default: empty page)
        config_path: Site asset path
        settings: Runtime settings (default: from environment)
        executor: Executor for the config load (default: a private one)

    Returns:
        AppContext with every component wired

    Raises:
        FileNotFoundError, yaml.YAMLError, pydantic.ValidationError: If the
            config cannot be loaded
        TimeoutError: If the config load exceeds settings.config_load_timeout
    """
    if settings is None:
        settings = load_settings()
    set_global_log_level(settings.log_level)

    own_executor = executor is None
    if own_executor:
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="config")

    try:
        config_future = submit_config_load(executor, config_path)

        # Config-independent components
        event_bus = EventBus()
        route = RouteState(hash_store, event_bus=event_bus)
        page = page if page is not None else Page()

        config = config_future.result(timeout=settings.config_load_timeout)
    finally:
        if own_executor:
            executor.shutdown(wait=False)

    translations = TranslationStore()
    binder = LocalizationBinder(
        route,
        translations,
        config=config,
        event_bus=event_bus,
        default_language=settings.default_language,
    )
    app = App(
        route,
        binder,
        page,
        settings,
        preflight=Preflight(hash_store.protocol),
        csv_gen=CsvGen(route),
        event_bus=event_bus,
    )

    logger.info(f"App initialized: languages={config.languages()}, hash={route.get_hash()!r}")
    return AppContext(
        settings=settings,
        config=config,
        event_bus=event_bus,
        route=route,
        translations=translations,
        binder=binder,
        page=page,
        app=app,
    )
