from typing import List

from selenium.webdriver.common.by import By

from careers_automation.automation.common.base import Task
from careers_automation.automation.config import (
    CASINO_DESCRIPTION_XPATH,
    NAV_MENU_LIFE_AT_ID,
    WHO_WE_ARE_XPATH,
)


class CasinoDescriptionTask(Task):
    """Reads the Casino product suite description from the "Who we are" page."""

    number = 3
    title = "Find Casino description"
    message = "Casino unit description:"

    def run(self, session) -> List[str]:
        nav_menu_life_at = session.find_element(By.ID, NAV_MENU_LIFE_AT_ID)
        session.hover(nav_menu_life_at)

        who_we_are = session.find_element(By.XPATH, WHO_WE_ARE_XPATH)
        session.click(who_we_are)

        # The description is the element right after the "Casino" heading
        description = session.find_element(By.XPATH, CASINO_DESCRIPTION_XPATH).text
        return [description]
