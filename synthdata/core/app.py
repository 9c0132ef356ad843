"""Top-level run sequence for the page."""

from urllib.parse import quote

from synthdata.core.config_schema import AppSettings
from synthdata.core.csv_gen import CsvGen
from synthdata.core.event_bus import EventBus
from synthdata.core.events import EventType
from synthdata.core.hash_codec import encode_hash
from synthdata.core.localization.binder import LANG_PARAM, LocalizationBinder
from synthdata.core.logging_utils import setup_logger
from synthdata.core.preflight import Preflight
from synthdata.core.route_state import RouteState
from synthdata.ui.multilingual_page import MultilingualPage
from synthdata.ui.page import Page

__all__ = ["App", "DOWNLOAD_FILENAME"]

logger = setup_logger("app")

DOWNLOAD_FILENAME = "donnes-synthetiques.csv"


class App:
    """Runs preflight and page preparation, reporting failures inline."""

    def __init__(
        self,
        route: RouteState,
        binder: LocalizationBinder,
        page: Page,
        settings: AppSettings,
        preflight: Preflight | None = None,
        csv_gen: CsvGen | None = None,
        event_bus: EventBus | None = None,
    ):
        self.route = route
        self.binder = binder
        self.page = page
        self.settings = settings
        self.preflight = preflight or Preflight()
        self.csv_gen = csv_gen or CsvGen(route)
        self.event_bus = event_bus
        self.multilingual_page = MultilingualPage(
            page,
            binder,
            site_name=settings.site_name,
            default_count=settings.row_count.default,
            on_home=self.reset_all,
        )
        if event_bus is not None:
            event_bus.subscribe(EventType.HASH_CHANGED, self._on_hash_changed)

    def run(self) -> bool:
        """Prepare the page; any error lands in the error banner.

        Returns:
            True when every step succeeded
        """
        try:
            self.preflight.check()
            self.page.prepare()
            self.binder.prepare()
            self.multilingual_page.tag_elements()
            self.set_count()
            self.multilingual_page.prepare()
        except Exception as e:
            logger.exception("App run failed")
            self.page.add_error(e)
            return False
        return True

    def row_count(self) -> int:
        """The ``count`` parameter, clamped to the configured bounds."""
        bounds = self.settings.row_count
        return self.route.get_int_param("count", bounds.default, bounds.minimum, bounds.maximum)

    def set_count(self):
        count = self.row_count()
        for el in self.page.select("count-values"):
            el.value = count

    def _on_hash_changed(self, event):
        self.set_count()

    def reset_all(self) -> str:
        """Go back to the home page, keeping only the language."""
        lang = self.binder.active_lang()
        target = "index.html#" + encode_hash({LANG_PARAM: lang})
        self.route.store.navigate(target)
        return target

    def create_csv(self) -> str:
        csv = self.csv_gen.get_csv()
        for el in self.page.select("csv"):
            el.text = csv
        return csv

    def download(self) -> tuple[str, str]:
        """``(data URI, filename)`` for the generated CSV."""
        csv = self.create_csv()
        # encodeURI keeps URI punctuation
        uri = "data:text/csv;charset=utf-8," + quote(csv, safe=";,/?:@&=+$-_.!~*'()#")
        return uri, DOWNLOAD_FILENAME
