"""
Abstract base classes and result types for the automation tasks.

This module defines the contracts shared by the task pipeline:
- Task: One numbered step run against the careers site
- OutputSink: Where task results are rendered (console or file)
- TaskResult: The success/failure outcome of a single task
- ClickError: Raised when the host refuses a synthetic pointer event
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .browser import AutomationSession


class ClickError(RuntimeError):
    """Raised when an OS-level pointer event cannot be issued."""


@dataclass
class TaskResult:
    """
    Outcome of one task.

    Attributes:
        number: Task number, used in the "<TASK N>" header
        title: Short human readable task name
        message: Message printed above the values, may contain "{count}"
        values: Extracted values, one per output line
        error: Failure description, None when the task succeeded
    """
    number: int
    title: str
    message: str
    values: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def header(self) -> str:
        return f"<TASK {self.number}>"

    def formatted_message(self) -> str:
        """Interpolates the result count into the message when it asks for one."""
        if "{count}" in self.message:
            return self.message.format(count=len(self.values))
        return self.message

    def lines(self) -> List[str]:
        """Renders the result as output lines, without separators."""
        lines = [self.header, self.formatted_message()]
        if self.succeeded:
            lines.extend(self.values)
        else:
            lines.append(f"ERROR: {self.error}")
        return lines


class Task(ABC):
    """
    Abstract base class for one step of the automation run.

    Subclasses set the class attributes and implement run(). Raising from
    run() marks the task as failed; the pipeline records the failure and
    moves on to the next task.
    """

    number: int = 0
    title: str = ""
    message: str = ""

    @abstractmethod
    def run(self, session: "AutomationSession") -> List[str]:
        """
        Perform the task against the session's browser.

        Args:
            session: The automation session owning the WebDriver

        Returns:
            The extracted values, in the order they should be reported

        Raises:
            selenium.common.exceptions.WebDriverException: When an element
                cannot be located or the browser stops responding
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(number={self.number})"


class OutputSink(ABC):
    """Abstract destination for task results."""

    def prepare(self) -> None:
        """Called once before the first task runs."""

    @abstractmethod
    def export(self, result: TaskResult) -> None:
        """
        Render a single task result.

        Implementations must not raise on I/O failure; they log the error
        and return so the remaining tasks still run.
        """
        pass

    def location(self) -> Optional[str]:
        """Where results end up, when that is a path worth reporting."""
        return None
