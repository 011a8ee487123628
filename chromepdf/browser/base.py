"""
Browser capability interface.

The converter only talks to these abstract classes, so it can run
against Playwright (see playwright_backend.py) or an in-memory fake.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from chromepdf.core.deadline import Deadline


@dataclass(frozen=True)
class LifecycleEvent:
    """`Page.lifecycleEvent` payload (name e.g. "networkIdle", "firstPaint")."""
    name: str
    frame_id: Optional[str] = None
    loader_id: Optional[str] = None
    timestamp: Optional[float] = None


class DevtoolsSession(ABC):
    """DevTools protocol handle scoped to one tab."""

    @abstractmethod
    def enable_page(self, deadline: Deadline):
        pass

    @abstractmethod
    def set_lifecycle_events_enabled(self, deadline: Deadline, enabled: bool):
        pass

    @abstractmethod
    def set_script_execution_disabled(self, deadline: Deadline, value: bool):
        pass

    @abstractmethod
    def set_emulated_media(self, deadline: Deadline, media: str):
        pass

    @abstractmethod
    def navigate(self, deadline: Deadline, url: str):
        pass

    @abstractmethod
    def await_load_event_fired(self, deadline: Deadline):
        pass

    @abstractmethod
    def await_lifecycle_event(self, deadline: Deadline) -> LifecycleEvent:
        pass

    @abstractmethod
    def print_to_pdf(self, deadline: Deadline, params: Dict[str, Any]) -> str:
        """Return the base64 encoded PDF."""

    @abstractmethod
    def close(self):
        pass


class Tab(ABC):
    @abstractmethod
    def activate(self, deadline: Deadline):
        pass

    @abstractmethod
    def devtools(self) -> DevtoolsSession:
        pass


class BrowserInstance(ABC):
    @abstractmethod
    def open_tab(self, deadline: Deadline) -> Tab:
        pass

    @abstractmethod
    def close(self):
        pass


class BrowserLauncher(ABC):
    def __init__(self, executable: Optional[str] = None):
        self.executable = executable

    def set_executable(self, executable: Optional[str]):
        self.executable = executable
        return self

    @abstractmethod
    def launch(self, deadline: Deadline, *args: str) -> BrowserInstance:
        pass
