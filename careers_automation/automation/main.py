# main.py
from typing import Callable, List, Optional, Sequence

from selenium.webdriver.remote.webdriver import WebDriver

from .common.base import OutputSink, Task, TaskResult
from .common.browser import AutomationSession, initialize_webdriver
from .common.logging import setup_automation_logger
from .common.output import create_sink
from .config import Settings, load_settings
from .pipeline import DEFAULT_TASKS, run_tasks


def run_automation(settings: Optional[Settings] = None,
                   tasks: Sequence[Task] = DEFAULT_TASKS,
                   driver_factory: Callable[..., WebDriver] = initialize_webdriver,
                   sink: Optional[OutputSink] = None) -> List[TaskResult]:
    """
    Runs the careers site tasks from start to finish.

    Sets up logging and the output sink, starts the browser, runs every task
    and always tears the driver down, even when a task closed it already or
    something unexpected escaped the pipeline.

    Args:
        settings: Run settings, read from the environment when None
        tasks: Tasks to run, in order
        driver_factory: Called with (settings, logger) to start the WebDriver
        sink: Output sink, built from settings.output_mode when None

    Returns:
        One TaskResult per task
    """
    settings = settings or load_settings()
    logger = setup_automation_logger(settings.log_file_path, settings.log_level)

    if sink is None:
        sink = create_sink(settings.output_mode, settings.output_file_path, logger)
    sink.prepare()

    driver = driver_factory(settings, logger)
    session = AutomationSession(driver, settings, logger)
    logger.info("Starting driver... performing tasks...")

    try:
        results = run_tasks(session, sink, tasks, show_loading_bar=settings.show_loading_bar)
    except Exception:
        logger.error("Error occurred when performing tasks, see logs for more information", exc_info=True)
        raise
    finally:
        session.force_close()

    if sink.location():
        logger.info(f"Results of tasks can be found in {sink.location()}")
    return results
