"""
Task pipeline.

Runs the numbered tasks in order against one AutomationSession. Each task is
wrapped in a TaskResult: a task that cannot find an element fails on its
own, the failure is reported through the sink, and the following tasks still
run. The caller gets every result back and decides what a partial run means.
"""

from typing import List, Sequence

from selenium.common.exceptions import WebDriverException
from tqdm import tqdm

from .common.base import OutputSink, Task, TaskResult
from .common.browser import AutomationSession
from .tasks.casino import CasinoDescriptionTask
from .tasks.close_browser import CloseBrowserTask
from .tasks.jobs import EstonianJobsTask
from .tasks.locations import LocationsTask
from .tasks.open_browser import OpenBrowserTask

DEFAULT_TASKS: Sequence[Task] = (
    OpenBrowserTask(),
    LocationsTask(),
    CasinoDescriptionTask(),
    EstonianJobsTask(),
    CloseBrowserTask(),
)


def run_task(session: AutomationSession, task: Task) -> TaskResult:
    """Runs a single task and converts its outcome into a TaskResult."""
    result = TaskResult(number=task.number, title=task.title, message=task.message)
    try:
        result.values = list(task.run(session))
    except (WebDriverException, ValueError) as e:
        # WebDriverException messages carry the stacktrace from the driver, keep the first line
        text = getattr(e, "msg", None) or str(e)
        error = next(iter(text.strip().splitlines()), "") if text else ""
        result.error = f"{type(e).__name__}: {error}" if error else type(e).__name__
        session.logger.error(f"Task {task.number} ({task.title}) failed: {result.error}", exc_info=True)
    else:
        session.logger.info(f"Task {task.number} completed")
    return result


def run_tasks(session: AutomationSession,
              sink: OutputSink,
              tasks: Sequence[Task] = DEFAULT_TASKS,
              show_loading_bar: bool = False) -> List[TaskResult]:
    """
    Runs every task in order and exports each result as soon as it is known.

    Args:
        session: Session owning the WebDriver
        sink: Where results are written
        tasks: Tasks to run, in order
        show_loading_bar: Whether to show a tqdm progress bar over the tasks

    Returns:
        One TaskResult per task, in the order the tasks ran
    """
    session.logger.info("Performing tasks")
    results = []
    for task in tqdm(tasks, desc="Running tasks", unit="task", disable=not show_loading_bar):
        result = run_task(session, task)
        sink.export(result)
        results.append(result)

    succeeded = sum(1 for result in results if result.succeeded)
    if succeeded == len(results):
        session.logger.info("All tasks completed")
    else:
        failed = ", ".join(str(result.number) for result in results if not result.succeeded)
        session.logger.warning(f"{succeeded}/{len(results)} tasks succeeded, failed tasks: {failed}")
    return results
