from typing import List

from selenium.webdriver.common.by import By

from careers_automation.automation.common.base import Task
from careers_automation.automation.common.utils import is_country_link
from careers_automation.automation.config import (
    COUNTRY_LINK_MARKER,
    LOCATIONS_WRAP_CLASS,
    NAV_MENU_LOCATIONS_ID,
)


class LocationsTask(Task):
    """
    Lists the countries under the "Locations" header menu.

    The menu is only rendered while hovered. Its children are a mix of
    country entries and other links, entries are kept when their link
    points at a country page.
    """

    number = 2
    title = "Find locations"
    message = "Found {count} Playtech locations:"

    def run(self, session) -> List[str]:
        nav_menu_locations = session.find_element(By.ID, NAV_MENU_LOCATIONS_ID)
        session.hover(nav_menu_locations)

        locations_wrap = session.find_element(By.CLASS_NAME, LOCATIONS_WRAP_CLASS)
        countries = []
        for location in locations_wrap.find_elements(By.XPATH, "./*"):
            link = location.find_element(By.XPATH, "./a").get_dom_attribute("href")
            if is_country_link(link, COUNTRY_LINK_MARKER):
                countries.append(location.text)

        session.logger.info(f"Found {len(countries)} locations")
        return countries
