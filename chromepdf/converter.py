"""
HTML → PDF conversion through a headless Chromium.

    pdf = (
        PdfConverter()
        .set_content("<h1>Hello</h1>")
        .set_paper_format("letter")
        .set_margins(10, 10, 10, 10, unit="mm")
        .convert()
    )
"""

import base64
import binascii
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Union

from chromepdf.browser import BrowserLauncher, DevtoolsSession, default_launcher
from chromepdf.config.loader import merge_config
from chromepdf.core.deadline import Deadline
from chromepdf.core.errors import ConfigurationError, MissingContentError, ProtocolError
from chromepdf.core.options import LANDSCAPE, PORTRAIT, PdfOptionsBuilder
from chromepdf.core.temp_file import TempHtmlFile
from chromepdf.monitoring.metrics import MetricsCollector

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10  # seconds


class PdfConverter(PdfOptionsBuilder):
    """
    Fluent converter: page options (inherited from PdfOptionsBuilder)
    plus browser / rendering settings.

    One instance is not safe to share between threads; every `convert()`
    launches its own browser and writes its own temp file.
    """

    def __init__(self, launcher: Optional[BrowserLauncher] = None):
        super().__init__()
        self.launcher = launcher
        self.headless = True

        self.temp_folder: Optional[str] = None
        self.chrome_executable_path: Optional[str] = None
        self.chrome_args = []
        self.wait_for_lifecycle_event: Optional[str] = None
        self.disable_script_execution = False
        self.timeout: float = DEFAULT_TIMEOUT
        self.emulate_media: Optional[str] = None

    # -------------------------------------------------
    # RUNTIME SETTERS
    # -------------------------------------------------
    def set_temp_folder(self, path: Optional[Union[str, Path]]):
        self.temp_folder = str(path) if path is not None else None
        return self

    def get_temp_folder(self) -> Path:
        return TempHtmlFile.resolve_directory(self.temp_folder)

    def set_browser_launcher(self, launcher: BrowserLauncher):
        self.launcher = launcher
        return self

    def append_chrome_args(self, args: Iterable[str]):
        self.chrome_args = list(dict.fromkeys([*self.chrome_args, *args]))
        return self

    def set_chrome_executable_path(self, path: Optional[str]):
        self.chrome_executable_path = path
        return self

    def set_wait_for_lifecycle_event(self, event: Optional[str]):
        self.wait_for_lifecycle_event = event
        return self

    def set_disable_script_execution(self, disable: bool):
        self.disable_script_execution = disable
        return self

    def set_timeout(self, timeout: float):
        if (
            not isinstance(timeout, (int, float))
            or isinstance(timeout, bool)
            or timeout <= 0
        ):
            raise ConfigurationError(
                f"Timeout must be a positive number of seconds, got {timeout!r}"
            )
        self.timeout = timeout
        return self

    def set_emulate_media(self, media: Optional[str]):
        self.emulate_media = media
        return self

    # -------------------------------------------------
    # CONVERSION
    # -------------------------------------------------
    def _resolve_launcher(self) -> BrowserLauncher:
        launcher = self.launcher or default_launcher(headless=self.headless)
        if self.chrome_executable_path:
            launcher.set_executable(self.chrome_executable_path)
        return launcher

    @staticmethod
    def _release(close: Callable[[], Any], what: str):
        try:
            close()
        except Exception as exc:
            logger.warning("Failed to close %s: %s", what, exc)

    def convert(self) -> bytes:
        """
        Render the configured content and return the PDF bytes.

        Order of operations:
        1. validate options (nothing is written on failure)
        2. launch browser, write temp file, open + activate tab
        3. DevTools: emulation, page events, navigate, wait, print
        4. close session, close browser, delete temp file (always)
        """
        if not self.content:
            raise MissingContentError()

        options = self.build()
        params = options.to_print_params()
        folder = TempHtmlFile.ensure_directory(self.temp_folder)

        metrics = MetricsCollector()
        deadline = Deadline(self.timeout)
        instance = self._resolve_launcher().launch(deadline, *self.chrome_args)

        html_path = None
        try:
            try:
                html_path = TempHtmlFile.write(options.content, folder)

                tab = instance.open_tab(deadline)
                tab.activate(deadline)

                devtools = tab.devtools()
                try:
                    data = self._print(devtools, deadline, html_path.as_uri(), params)
                finally:
                    self._release(devtools.close, "DevTools session")
            finally:
                self._release(instance.close, "browser")
        finally:
            if html_path is not None:
                TempHtmlFile.delete(html_path)

        pdf = self._decode(data)
        logger.info("PDF generated: %s", metrics.collect(pdf_bytes=len(pdf)))
        return pdf

    def _print(
        self,
        devtools: DevtoolsSession,
        deadline: Deadline,
        url: str,
        params: Dict[str, Any],
    ) -> str:
        if self.disable_script_execution:
            devtools.set_script_execution_disabled(deadline, True)

        if self.emulate_media is not None:
            devtools.set_emulated_media(deadline, self.emulate_media)

        devtools.enable_page(deadline)
        devtools.set_lifecycle_events_enabled(deadline, True)

        logger.debug("Navigating to %s", url)
        devtools.navigate(deadline, url)
        devtools.await_load_event_fired(deadline)

        if self.wait_for_lifecycle_event is not None:
            logger.debug("Waiting for lifecycle event %r", self.wait_for_lifecycle_event)
            while devtools.await_lifecycle_event(deadline).name != self.wait_for_lifecycle_event:
                pass

        return devtools.print_to_pdf(deadline, params)

    @staticmethod
    def _decode(data: str) -> bytes:
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, TypeError, ValueError) as exc:
            raise ProtocolError(f"Invalid PDF payload: {exc}") from exc

    def save(self, path: Union[str, Path]) -> Path:
        """Convert and write the PDF to `path`."""
        pdf = self.convert()

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf)

        return path

    # -------------------------------------------------
    # CONFIG
    # -------------------------------------------------
    @classmethod
    def from_config(
        cls,
        config: Optional[Dict[str, Any]] = None,
        launcher: Optional[BrowserLauncher] = None,
    ) -> "PdfConverter":
        """Build a converter from a (possibly partial) config mapping."""
        config = merge_config(config or {})
        pdf = config["pdf"]
        browser = config["browser"]
        render = config["render"]

        converter = cls(launcher=launcher)
        unit = pdf.get("unit") or "in"

        if pdf.get("paper_format"):
            converter.set_paper_format(pdf["paper_format"])
        if pdf.get("paper_width"):
            converter.set_paper_width(pdf["paper_width"], unit)
        if pdf.get("paper_height"):
            converter.set_paper_height(pdf["paper_height"], unit)

        orientation = str(pdf.get("orientation") or PORTRAIT).lower()
        if orientation == LANDSCAPE:
            converter.landscape()
        elif orientation == PORTRAIT:
            converter.portrait()
        else:
            raise ConfigurationError(f'Unknown orientation "{orientation}"')

        margins = pdf.get("margins")
        if margins is not None:
            if len(margins) != 4:
                raise ConfigurationError(
                    "margins must list 4 values: top, right, bottom, left"
                )
            converter.set_margins(*margins, unit=unit)

        scale = pdf.get("scale")
        converter.set_scale(1 if scale is None else scale)
        converter.set_header(pdf.get("header"))
        converter.set_footer(pdf.get("footer"))
        converter.set_display_header_footer(bool(pdf.get("display_header_footer")))
        converter.set_prefer_css_page_size(bool(pdf.get("prefer_css_page_size")))
        converter.set_print_background(bool(pdf.get("print_background")))
        converter.set_generate_tagged_pdf(bool(pdf.get("generate_tagged_pdf")))
        converter.set_generate_document_outline(bool(pdf.get("generate_document_outline")))
        converter.set_page_ranges(pdf.get("page_ranges"))

        converter.headless = bool(browser.get("headless", True))
        converter.set_chrome_executable_path(browser.get("executable_path"))
        converter.append_chrome_args(browser.get("args") or [])
        timeout = browser.get("timeout")
        converter.set_timeout(DEFAULT_TIMEOUT if timeout is None else timeout)

        converter.set_temp_folder(render.get("temp_folder"))
        converter.set_wait_for_lifecycle_event(render.get("wait_for_lifecycle_event"))
        converter.set_disable_script_execution(bool(render.get("disable_script_execution")))
        converter.set_emulate_media(render.get("emulate_media"))

        return converter
