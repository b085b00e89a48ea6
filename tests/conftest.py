"""Shared fixtures: a fake WebDriver that resolves locators from a lookup table."""

from __future__ import annotations

import logging
import sys
from unittest.mock import MagicMock

import pytest
from selenium.common.exceptions import NoSuchElementException

from careers_automation.automation.common import browser as browser_module
from careers_automation.automation.common.browser import AutomationSession
from careers_automation.automation.common.logging import LOGGER_NAME
from careers_automation.automation.config import Settings


def make_element(text: str = "",
                 attributes: dict | None = None,
                 children: dict | None = None,
                 rect: dict | None = None,
                 enabled: bool = True) -> MagicMock:
    """A WebElement stand-in; children maps (by, value) to an element or a list of elements."""
    element = MagicMock(name=f"element<{text}>")
    element.text = text
    element.rect = rect or {"x": 0, "y": 0, "width": 0, "height": 0}
    element.is_enabled.return_value = enabled
    attributes = attributes or {}
    element.get_dom_attribute.side_effect = lambda name: attributes.get(name)
    children = children or {}

    def find_element(by, value):
        found = children.get((by, value))
        if found is None or isinstance(found, list):
            raise NoSuchElementException(f"no child {by}={value}")
        return found

    def find_elements(by, value):
        found = children.get((by, value), [])
        return found if isinstance(found, list) else [found]

    element.find_element.side_effect = find_element
    element.find_elements.side_effect = find_elements
    return element


class FakeDriver:
    """
    Minimal WebDriver: pages maps a URL to a {(by, value): element} table.

    Navigating switches the active table; back() returns to the previous URL.
    Locators not found in the active page fall back to the shared table.
    """

    def __init__(self, pages: dict | None = None, shared: dict | None = None, chrome_offset: int = 80) -> None:
        self.pages = pages or {}
        self.shared = shared or {}
        self.chrome_offset = chrome_offset
        self.history: list[str] = []
        self.visited: list[str] = []
        self.session_id = "fake-session"
        self.quit_calls = 0
        self.quit_error: Exception | None = None

    @property
    def current_url(self) -> str | None:
        return self.history[-1] if self.history else None

    def get(self, url: str) -> None:
        self.history.append(url)
        self.visited.append(url)

    def back(self) -> None:
        if len(self.history) > 1:
            self.history.pop()

    def _lookup(self, by, value):
        page = self.pages.get(self.current_url, {})
        if (by, value) in page:
            return page[(by, value)]
        return self.shared.get((by, value))

    def find_element(self, by, value):
        found = self._lookup(by, value)
        if found is None:
            raise NoSuchElementException(f"Unable to locate element: {by}={value}")
        return found

    def find_elements(self, by, value):
        found = self._lookup(by, value)
        if found is None:
            return []
        return found if isinstance(found, list) else [found]

    def execute_script(self, script, *args):
        return self.chrome_offset

    def quit(self) -> None:
        self.quit_calls += 1
        if self.quit_error is not None:
            raise self.quit_error
        self.session_id = None


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(output_file_path=str(tmp_path / "output" / "results.txt"),
                    log_file_path=str(tmp_path / "logs" / "automation.log"),
                    click_strategy="native")


@pytest.fixture
def test_logger() -> logging.Logger:
    return logging.getLogger("tests.careers_automation")


@pytest.fixture
def action_chains(monkeypatch) -> MagicMock:
    """Replaces ActionChains so hovering does not need a real browser."""
    chains = MagicMock(name="ActionChains")
    monkeypatch.setattr(browser_module, "ActionChains", chains)
    return chains


@pytest.fixture
def make_session(settings, test_logger, action_chains):
    def _make(driver: FakeDriver, **overrides) -> AutomationSession:
        return AutomationSession(driver, settings.with_overrides(**overrides), test_logger)
    return _make


@pytest.fixture
def fake_pyautogui(monkeypatch) -> MagicMock:
    module = MagicMock(name="pyautogui")
    monkeypatch.setitem(sys.modules, "pyautogui", module)
    return module


@pytest.fixture(autouse=True)
def _reset_automation_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
