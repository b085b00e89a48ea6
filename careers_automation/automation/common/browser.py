import logging
from typing import List

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from ..config import Settings, USER_AGENT, WINDOW_SIZE
from .base import ClickError
from .pointer import click_at_element


def build_chrome_options(settings: Settings) -> Options:
    """Chrome options for an automation run."""
    chrome_options = Options()
    if settings.headless:
        chrome_options.add_argument("--headless=new")
        chrome_options.add_argument("--disable-gpu")
    chrome_options.add_argument(f"--window-size={WINDOW_SIZE}")
    chrome_options.add_argument("--no-sandbox")
    chrome_options.add_argument("--disable-dev-shm-usage")
    chrome_options.add_argument(f"user-agent={USER_AGENT}")
    return chrome_options


def initialize_webdriver(settings: Settings, logger: logging.Logger) -> WebDriver:
    """Starts Chrome and maximizes its window so page coordinates map onto the display."""
    logger.info("Initializing Chrome driver...")
    driver = webdriver.Chrome(options=build_chrome_options(settings))
    driver.maximize_window()
    return driver


class AutomationSession:
    """
    Session handle passed to every task.

    Owns the WebDriver for the whole run together with the logger and the
    settings, so tasks never reach for module level state. The orchestrator
    creates exactly one session and is responsible for closing it.
    """

    def __init__(self, driver: WebDriver, settings: Settings, logger: logging.Logger) -> None:
        self.driver = driver
        self.settings = settings
        self.logger = logger
        self._closed = False

    @property
    def is_active(self) -> bool:
        return not self._closed and getattr(self.driver, "session_id", None) is not None

    def navigate(self, url: str) -> None:
        self.logger.info(f"Navigating to {url}...")
        self.driver.get(url)

    def back(self) -> None:
        self.driver.back()

    def find_element(self, by: str, value: str) -> WebElement:
        return self.driver.find_element(by, value)

    def find_elements(self, by: str, value: str) -> List[WebElement]:
        return self.driver.find_elements(by, value)

    def execute_script(self, script: str, *args):
        return self.driver.execute_script(script, *args)

    def hover(self, element: WebElement) -> None:
        """Moves the WebDriver pointer onto element, which opens hover menus."""
        ActionChains(self.driver).move_to_element(element).perform()

    def click(self, element: WebElement) -> None:
        """
        Clicks element with the configured strategy.

        The "synthetic" strategy issues a real OS pointer event at the
        element's centre. A refused pointer event is logged and swallowed;
        the task carries on and fails later if the click mattered.
        """
        if self.settings.click_strategy == "native":
            element.click()
            self.logger.info("Element clicked through WebDriver")
            return

        try:
            point = click_at_element(self.driver, element)
            self.logger.info(f"Mouse clicked at x: {point.x}, y: {point.y}")
        except ClickError as e:
            self.logger.error(f"Failed to perform mouse movement/clicking: {e}")

    def close(self) -> None:
        """Quits the driver. Closing an already closed session does nothing."""
        if self._closed:
            return
        self.driver.quit()
        self._closed = True
        self.logger.info("Driver closed")

    def force_close(self) -> None:
        """Cleanup path: closes the driver if a task left it open, never raises."""
        if not self.is_active:
            return
        try:
            self.close()
        except WebDriverException as e:
            self._closed = True
            self.logger.error(f"Error closing driver: {e}", exc_info=True)
