from typing import List

from selenium.webdriver.common.by import By
from tqdm import tqdm

from careers_automation.automation.common.base import Task
from careers_automation.automation.common.utils import mentions_all_cities
from careers_automation.automation.config import (
    ALL_JOBS_BUTTON_CLASS,
    JOB_APPLY_BUTTON_ID,
    JOB_LOCATION_ADDRESS_ATTRIBUTE,
    JOB_LOCATION_FILTER,
    JOB_LOCATION_TAG,
    JOBS_WRAP_CLASS,
    REQUIRED_JOB_CITIES,
)


def is_open_in_all_cities(session, link: str) -> bool:
    """
    Visits a job posting and checks that it is
      1) offered from every required city, and
      2) still open, i.e. its apply button is enabled.

    Navigates back to the listing afterwards.
    """
    session.navigate(link)
    try:
        address = session.find_element(By.TAG_NAME, JOB_LOCATION_TAG).get_dom_attribute(JOB_LOCATION_ADDRESS_ATTRIBUTE)
        apply_button = session.find_element(By.ID, JOB_APPLY_BUTTON_ID)
        return mentions_all_cities(address, REQUIRED_JOB_CITIES) and apply_button.is_enabled()
    finally:
        session.back()


class EstonianJobsTask(Task):
    """Collects links to open Estonian positions offered from both Tartu and Tallinn."""

    number = 4
    title = "Find jobs"
    message = "Available positions in Estonia from both Tartu and Tallinn:"

    def run(self, session) -> List[str]:
        all_jobs_button = session.find_element(By.CLASS_NAME, ALL_JOBS_BUTTON_CLASS)
        session.click(all_jobs_button)

        jobs_wrap = session.find_element(By.CLASS_NAME, JOBS_WRAP_CLASS)
        job_elements = jobs_wrap.find_elements(By.XPATH, f"./*[@data-location=\"{JOB_LOCATION_FILTER}\"]")

        # Read every href up front, the listing elements go stale once we leave the page
        candidate_links = [job.get_dom_attribute("href") for job in job_elements]
        candidate_links = [link for link in candidate_links if link]
        session.logger.info(f"Checking {len(candidate_links)} positions located in {JOB_LOCATION_FILTER}")

        links = []
        for link in tqdm(candidate_links,
                         desc="Checking job postings",
                         unit="job",
                         disable=not session.settings.show_loading_bar):
            if is_open_in_all_cities(session, link):
                links.append(link)
        return links
