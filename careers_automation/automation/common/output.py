import logging
import os
from typing import Optional, TextIO

from .base import OutputSink, TaskResult

SEPARATOR = "-" * 52


class ConsoleSink(OutputSink):
    """Prints each result between separator lines."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def export(self, result: TaskResult) -> None:
        print(SEPARATOR, file=self.stream)
        for line in result.lines():
            print(line, file=self.stream)
        print(SEPARATOR, file=self.stream)


class FileSink(OutputSink):
    """
    Appends each result to a text file, followed by a blank line.

    prepare() creates the output directory, or removes the file left by a
    previous run since exports only ever append.
    """

    def __init__(self, output_file_path: str, logger: logging.Logger) -> None:
        self.output_file_path = output_file_path
        self.logger = logger

    def prepare(self) -> None:
        output_dir = os.path.dirname(self.output_file_path)
        if output_dir and not os.path.exists(output_dir):
            self.logger.info("Setting up output directory")
            try:
                os.makedirs(output_dir)
                self.logger.info(f"Created \"{output_dir}\" directory")
            except OSError as e:
                self.logger.error(f"Failed to create \"{output_dir}\" directory: {e}")
        elif os.path.exists(self.output_file_path):
            try:
                os.remove(self.output_file_path)
                self.logger.info(f"Deleted previous output file {self.output_file_path}")
            except OSError as e:
                self.logger.error(f"Failed to delete previous output file {self.output_file_path}: {e}")

    def export(self, result: TaskResult) -> None:
        try:
            with open(self.output_file_path, "a", encoding="utf-8") as output_file:
                for line in result.lines():
                    output_file.write(f"{line}\n")
                output_file.write("\n")
        except OSError as e:
            self.logger.error(f"Error writing results to file {self.output_file_path}: {e}", exc_info=True)

    def location(self) -> Optional[str]:
        return self.output_file_path


def create_sink(output_mode: str,
                output_file_path: str,
                logger: logging.Logger) -> OutputSink:
    """
    Creates the sink for an output mode.

    Args:
        output_mode: "console" or "file"
        output_file_path: Target file, used by the "file" mode only
        logger: Logger for I/O failures

    Raises:
        ValueError: If the output mode is not supported
    """
    if output_mode == "console":
        return ConsoleSink()
    if output_mode == "file":
        return FileSink(output_file_path, logger)
    raise ValueError(f"Unsupported output mode: {output_mode}")
