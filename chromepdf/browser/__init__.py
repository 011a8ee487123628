from .base import (
    BrowserInstance,
    BrowserLauncher,
    DevtoolsSession,
    LifecycleEvent,
    Tab,
)

__all__ = [
    "BrowserInstance",
    "BrowserLauncher",
    "DevtoolsSession",
    "LifecycleEvent",
    "Tab",
    "default_launcher",
]


def default_launcher(executable=None, headless=True):
    # Imported lazily so the package imports without a Playwright install
    from .playwright_backend import PlaywrightLauncher

    return PlaywrightLauncher(executable=executable, headless=headless)
