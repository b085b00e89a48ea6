# config.py
import os
from dataclasses import dataclass, replace

from careers_automation.environment import LOG_DIR

TARGET_URL = "https://www.playtechpeople.com"

# Selectors (bound to the markup of the careers site, verify them when a task starts failing)
COOKIE_ALLOW_ALL_ID = "CybotCookiebotDialogBodyLevelButtonLevelOptinAllowAll"
NAV_MENU_LOCATIONS_ID = "menu-item-82" # "Locations" in the header menu
NAV_MENU_LIFE_AT_ID = "menu-item-49" # "Life at Playtech" in the header menu
LOCATIONS_WRAP_CLASS = "header-locations__wrap"
WHO_WE_ARE_XPATH = "//a[text()=\"Who we are\"]"
CASINO_DESCRIPTION_XPATH = "//*[text()=\"Casino\"]/following-sibling::*[1]"
ALL_JOBS_BUTTON_CLASS = "yellow-button"
JOBS_WRAP_CLASS = "jobs-wrap"
JOB_LOCATION_TAG = "spl-job-location"
JOB_LOCATION_ADDRESS_ATTRIBUTE = "formattedaddress"
JOB_APPLY_BUTTON_ID = "st-apply"

# Filters
COUNTRY_LINK_MARKER = "country" # Location links that point at a country page
JOB_LOCATION_FILTER = "estonia"
REQUIRED_JOB_CITIES = ("Tartu", "Tallinn")

# Chrome
WINDOW_SIZE = "1920,1080"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
CHROME_OFFSET_SCRIPT = "return window.outerHeight - window.innerHeight;"

# Output
OUTPUT_MODES = ("console", "file")
CLICK_STRATEGIES = ("synthetic", "native")
DEFAULT_OUTPUT_FILE_PATH = "output/main_test_results.txt"
DEFAULT_LOG_FILE_PATH = os.path.join(LOG_DIR, "automation.log")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one automation run."""
    target_url: str = TARGET_URL
    output_mode: str = "file"
    output_file_path: str = DEFAULT_OUTPUT_FILE_PATH
    click_strategy: str = "synthetic"
    headless: bool = False
    log_file_path: str = DEFAULT_LOG_FILE_PATH
    log_level: str = "INFO"
    show_loading_bar: bool = False

    def __post_init__(self) -> None:
        # A headless browser has no window on the display to click into
        if self.headless and self.click_strategy == "synthetic":
            object.__setattr__(self, "click_strategy", "native")

    def with_overrides(self, **overrides) -> "Settings":
        """Returns a copy with every override that is not None applied."""
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


def _env_flag(value: str | None, default: bool = False) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_choice(name: str, choices: tuple, default: str) -> str:
    value = os.getenv(name)
    if not value:
        return default
    value = value.strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got '{value}'")
    return value


def load_settings() -> Settings:
    """
    Builds Settings from environment variables (a .env file is loaded by
    careers_automation.environment), falling back to the defaults above.

    Raises:
        ValueError: If OUTPUT_MODE or CLICK_STRATEGY names an unknown value.
    """
    return Settings(
        target_url=os.getenv("TARGET_URL") or TARGET_URL,
        output_mode=_env_choice("OUTPUT_MODE", OUTPUT_MODES, "file"),
        output_file_path=os.getenv("OUTPUT_FILE_PATH") or DEFAULT_OUTPUT_FILE_PATH,
        click_strategy=_env_choice("CLICK_STRATEGY", CLICK_STRATEGIES, "synthetic"),
        headless=_env_flag(os.getenv("HEADLESS")),
        log_file_path=os.getenv("LOG_FILE_PATH") or DEFAULT_LOG_FILE_PATH,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        show_loading_bar=_env_flag(os.getenv("SHOW_LOADING_BAR")),
    )
