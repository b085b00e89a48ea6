from typing import List

from careers_automation.automation.common.base import Task


class CloseBrowserTask(Task):
    number = 5
    title = "Close web browser"
    message = "Browser closed"

    def run(self, session) -> List[str]:
        session.close()
        return []
