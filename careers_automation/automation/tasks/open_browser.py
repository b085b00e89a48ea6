from typing import List

from selenium.webdriver.common.by import By

from careers_automation.automation.common.base import Task
from careers_automation.automation.config import COOKIE_ALLOW_ALL_ID


class OpenBrowserTask(Task):
    """Opens the careers site and accepts the cookie banner."""

    number = 1
    title = "Open web browser"
    message = "Opened web browser at URL:"

    def run(self, session) -> List[str]:
        url = session.settings.target_url
        session.navigate(url)
        allow_all_cookies = session.find_element(By.ID, COOKIE_ALLOW_ALL_ID)
        session.click(allow_all_cookies)
        return [url]
