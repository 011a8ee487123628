import base64
import time

import pytest

from chromepdf.browser.base import (
    BrowserInstance,
    BrowserLauncher,
    DevtoolsSession,
    LifecycleEvent,
    Tab,
)
from chromepdf.core.errors import ProtocolError

FAKE_PDF = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF\n"

DEFAULT_LIFECYCLE = ["init", "DOMContentLoaded", "load", "firstPaint", "networkIdle"]


class FakeDevtools(DevtoolsSession):
    def __init__(self, launcher):
        self.launcher = launcher
        self.pending = list(launcher.lifecycle_events)

    def _record(self, name, *args):
        self.launcher.calls.append((name, *args))
        if self.launcher.fail_on == name:
            raise ProtocolError(f"{name} failed")

    def enable_page(self, deadline):
        self._record("Page.enable")

    def set_lifecycle_events_enabled(self, deadline, enabled):
        self._record("Page.setLifecycleEventsEnabled", enabled)

    def set_script_execution_disabled(self, deadline, value):
        self._record("Emulation.setScriptExecutionDisabled", value)

    def set_emulated_media(self, deadline, media):
        self._record("Emulation.setEmulatedMedia", media)

    def navigate(self, deadline, url):
        self._record("Page.navigate", url)
        self.launcher.navigated_url = url

    def await_load_event_fired(self, deadline):
        self._record("Page.loadEventFired")

    def await_lifecycle_event(self, deadline):
        while not self.pending:
            deadline.check("waiting for lifecycle event")
            time.sleep(0.01)
        name = self.pending.pop(0)
        self.launcher.calls.append(("Page.lifecycleEvent", name))
        return LifecycleEvent(name=name)

    def print_to_pdf(self, deadline, params):
        self._record("Page.printToPDF", params)
        self.launcher.print_params = params
        return base64.b64encode(self.launcher.pdf).decode("ascii")

    def close(self):
        self.launcher.closed["devtools"] += 1
        self.launcher.calls.append(("devtools.close",))


class FakeTab(Tab):
    def __init__(self, launcher):
        self.launcher = launcher

    def activate(self, deadline):
        self.launcher.calls.append(("tab.activate",))

    def devtools(self):
        self.launcher.calls.append(("tab.devtools",))
        return FakeDevtools(self.launcher)


class FakeInstance(BrowserInstance):
    def __init__(self, launcher):
        self.launcher = launcher

    def open_tab(self, deadline):
        self.launcher.calls.append(("browser.open_tab",))
        return FakeTab(self.launcher)

    def close(self):
        self.launcher.closed["browser"] += 1
        self.launcher.calls.append(("browser.close",))


class FakeLauncher(BrowserLauncher):
    """
    In-memory browser: records every call and hands back FAKE_PDF.

    lifecycle_events : names emitted after navigation, in order
    fail_on          : call name that raises ProtocolError
    """

    def __init__(self, lifecycle_events=None, fail_on=None, pdf=FAKE_PDF):
        super().__init__()
        self.lifecycle_events = (
            DEFAULT_LIFECYCLE if lifecycle_events is None else lifecycle_events
        )
        self.fail_on = fail_on
        self.pdf = pdf

        self.calls = []
        self.closed = {"devtools": 0, "browser": 0}
        self.launch_args = None
        self.navigated_url = None
        self.print_params = None

    def launch(self, deadline, *args):
        self.launch_args = list(args)
        self.calls.append(("launch", self.executable))
        return FakeInstance(self)

    def call_names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_launcher():
    return FakeLauncher()


@pytest.fixture
def sample_html():
    return "<html><body>Hi</body></html>"


@pytest.fixture
def temp_folder(tmp_path):
    folder = tmp_path / "html"
    folder.mkdir()
    return folder
