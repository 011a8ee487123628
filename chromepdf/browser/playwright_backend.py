"""
Playwright (Chromium) implementation of the browser capability interface.

Playwright owns the browser process; protocol traffic goes through a raw
CDP session (`BrowserContext.new_cdp_session`) so the converter can issue
the exact DevTools commands it needs.
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from chromepdf.browser.base import (
    BrowserInstance,
    BrowserLauncher,
    DevtoolsSession,
    LifecycleEvent,
    Tab,
)
from chromepdf.core.deadline import Deadline
from chromepdf.core.errors import ConversionTimeoutError, ProtocolError

logger = logging.getLogger(__name__)

# Sync Playwright only dispatches CDP events while a call is blocking
POLL_INTERVAL_MS = 50

DEFAULT_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
]


def _timeout_ms(deadline: Deadline) -> float:
    # Playwright treats 0 as "no timeout"
    return max(1.0, deadline.remaining_ms())


def _call(deadline: Deadline, action: str, func: Callable, *args, **kwargs):
    deadline.check(action)
    try:
        result = func(*args, **kwargs)
    except PlaywrightTimeoutError as exc:
        raise ConversionTimeoutError(f"Timed out while {action}: {exc}") from exc
    except PlaywrightError as exc:
        raise ProtocolError(f"Failed while {action}: {exc}") from exc
    deadline.check(action)
    return result


# -------------------------------------------------
# DEVTOOLS SESSION
# -------------------------------------------------
class PlaywrightDevtoolsSession(DevtoolsSession):
    def __init__(self, page, session):
        self.page = page
        self.session = session
        self.load_events: Deque[Dict[str, Any]] = deque()
        self.lifecycle_events: Deque[LifecycleEvent] = deque()

        session.on("Page.loadEventFired", self._on_load_event)
        session.on("Page.lifecycleEvent", self._on_lifecycle_event)

    def _on_load_event(self, params):
        self.load_events.append(params or {})

    def _on_lifecycle_event(self, params):
        params = params or {}
        self.lifecycle_events.append(
            LifecycleEvent(
                name=params.get("name", ""),
                frame_id=params.get("frameId"),
                loader_id=params.get("loaderId"),
                timestamp=params.get("timestamp"),
            )
        )

    def send(self, deadline: Deadline, method: str, params: Optional[Dict[str, Any]] = None):
        """
        Issue one raw CDP command.

        CDPSession.send takes no timeout: the deadline is checked before
        the command and again once it returns, so a command still running
        when the deadline passes (a slow Page.printToPDF, say) only raises
        ConversionTimeoutError after Chromium answers.
        """
        logger.debug("CDP -> %s", method)
        return _call(deadline, f"sending {method}", self.session.send, method, params or {})

    def _wait_for(self, deadline: Deadline, queue: Deque, action: str):
        while not queue:
            deadline.check(action)
            _call(
                deadline,
                action,
                self.page.wait_for_timeout,
                min(POLL_INTERVAL_MS, _timeout_ms(deadline)),
            )
        return queue.popleft()

    # -----------------------------
    # COMMANDS
    # -----------------------------
    def enable_page(self, deadline: Deadline):
        self.send(deadline, "Page.enable")

    def set_lifecycle_events_enabled(self, deadline: Deadline, enabled: bool):
        self.send(deadline, "Page.setLifecycleEventsEnabled", {"enabled": enabled})

    def set_script_execution_disabled(self, deadline: Deadline, value: bool):
        self.send(deadline, "Emulation.setScriptExecutionDisabled", {"value": value})

    def set_emulated_media(self, deadline: Deadline, media: str):
        self.send(deadline, "Emulation.setEmulatedMedia", {"media": media})

    def navigate(self, deadline: Deadline, url: str):
        # Events from the initial about:blank must not satisfy the waits
        self.load_events.clear()
        self.lifecycle_events.clear()

        result = self.send(deadline, "Page.navigate", {"url": url}) or {}
        if result.get("errorText"):
            raise ProtocolError(f"Navigation to {url} failed: {result['errorText']}")

    def await_load_event_fired(self, deadline: Deadline):
        return self._wait_for(deadline, self.load_events, "waiting for load event")

    def await_lifecycle_event(self, deadline: Deadline) -> LifecycleEvent:
        return self._wait_for(
            deadline, self.lifecycle_events, "waiting for lifecycle event"
        )

    def print_to_pdf(self, deadline: Deadline, params: Dict[str, Any]) -> str:
        result = self.send(deadline, "Page.printToPDF", params) or {}
        if "data" not in result:
            raise ProtocolError("Page.printToPDF returned no data")
        return result["data"]

    def close(self):
        self.session.detach()


# -------------------------------------------------
# TAB / INSTANCE / LAUNCHER
# -------------------------------------------------
class PlaywrightTab(Tab):
    def __init__(self, page):
        self.page = page

    def activate(self, deadline: Deadline):
        _call(deadline, "activating tab", self.page.bring_to_front)

    def devtools(self) -> DevtoolsSession:
        try:
            session = self.page.context.new_cdp_session(self.page)
        except PlaywrightError as exc:
            raise ProtocolError(f"Could not open DevTools session: {exc}") from exc
        return PlaywrightDevtoolsSession(self.page, session)


class PlaywrightBrowserInstance(BrowserInstance):
    def __init__(self, playwright, browser):
        self.playwright = playwright
        self.browser = browser

    def open_tab(self, deadline: Deadline) -> Tab:
        page = _call(deadline, "opening tab", self.browser.new_page)
        page.set_default_timeout(_timeout_ms(deadline))
        return PlaywrightTab(page)

    def close(self):
        try:
            self.browser.close()
        finally:
            self.playwright.stop()


class PlaywrightLauncher(BrowserLauncher):
    """
    Launches headless Chromium through Playwright.

    `executable` points Playwright at a specific Chrome/Chromium binary;
    when unset the Playwright-managed Chromium is used.
    """

    def __init__(self, executable: Optional[str] = None, headless: bool = True):
        super().__init__(executable)
        self.headless = headless

    def launch(self, deadline: Deadline, *args: str) -> BrowserInstance:
        deadline.check("launching browser")

        launch_args = list(dict.fromkeys([*DEFAULT_ARGS, *args]))
        logger.info(
            "Launching Chromium (executable=%s, args=%s)",
            self.executable or "bundled",
            launch_args,
        )

        playwright = sync_playwright().start()
        try:
            browser = _call(
                deadline,
                "launching browser",
                playwright.chromium.launch,
                headless=self.headless,
                executable_path=self.executable,
                args=launch_args,
                timeout=_timeout_ms(deadline),
            )
        except BaseException:
            playwright.stop()
            raise

        return PlaywrightBrowserInstance(playwright, browser)
