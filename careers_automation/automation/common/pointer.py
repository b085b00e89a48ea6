"""
Synthetic pointer clicks.

Selenium reports an element's position relative to the page viewport. To
click it with a real OS-level pointer event the position is translated into
screen coordinates: the browser's own toolbar (the difference between the
window's outer and inner height) is added to the vertical coordinate and the
click lands in the middle of the element. The window is assumed to be
maximized with its origin at the top-left of the display.
"""

from dataclasses import dataclass
from typing import NamedTuple

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from ..config import CHROME_OFFSET_SCRIPT
from .base import ClickError


class ScreenPoint(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class ElementGeometry:
    """An element's bounding box in page coordinates."""
    origin_x: int
    origin_y: int
    width: int
    height: int

    @classmethod
    def from_rect(cls, rect: dict) -> "ElementGeometry":
        """Builds a geometry from Selenium's WebElement.rect, truncating fractional pixels."""
        return cls(origin_x=int(rect["x"]),
                   origin_y=int(rect["y"]),
                   width=int(rect["width"]),
                   height=int(rect["height"]))


def compute_click_point(geometry: ElementGeometry, chrome_offset: int) -> ScreenPoint:
    """
    Returns the absolute screen point at the centre of an element.

    Raises:
        ValueError: If any coordinate, dimension or the offset is negative.
    """
    values = (geometry.origin_x, geometry.origin_y, geometry.width, geometry.height, chrome_offset)
    if any(value < 0 for value in values):
        raise ValueError(f"Click geometry must be non-negative, got {geometry} with chrome offset {chrome_offset}")

    x = geometry.origin_x + geometry.width // 2
    y = geometry.origin_y + chrome_offset + geometry.height // 2
    return ScreenPoint(x, y)


def read_chrome_offset(driver: WebDriver) -> int:
    """Height of the browser UI above the page (toolbar, tabs and title bar)."""
    offset = driver.execute_script(CHROME_OFFSET_SCRIPT)
    return int(offset) if offset is not None else 0


def geometry_of(element: WebElement) -> ElementGeometry:
    return ElementGeometry.from_rect(element.rect)


def issue_click(point: ScreenPoint) -> None:
    """
    Moves the system pointer to point and presses then releases the primary button.

    Raises:
        ClickError: If the host does not allow programmatic input (no display,
            missing permission, PyAutoGUI fail-safe triggered).
    """
    try:
        # PyAutoGUI connects to the display on import, so a headless host fails here
        import pyautogui

        pyautogui.moveTo(point.x, point.y)
        pyautogui.mouseDown(button="primary")
        pyautogui.mouseUp(button="primary")
    except Exception as e:
        raise ClickError(f"Failed to perform mouse click at x: {point.x}, y: {point.y}: {e}") from e


def click_at_element(driver: WebDriver, element: WebElement) -> ScreenPoint:
    """Clicks the middle of element with an OS-level pointer event and returns where it clicked."""
    point = compute_click_point(geometry_of(element), read_chrome_offset(driver))
    issue_click(point)
    return point
