"""Result reporting to the GitHub Actions runner.

Outputs are appended to the file named by GITHUB_OUTPUT. Failures are
written as ``::error::`` workflow commands on stdout and turn the exit
code non-zero.
"""

import os
import sys
import uuid
from typing import TextIO

from shared.observability import get_logger

logger = get_logger(__name__)


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionReporter:
    """Reports outputs and failure status to the runner."""

    def __init__(self, output_path: str | None = None, stream: TextIO | None = None):
        self.output_path = output_path if output_path is not None else os.environ.get("GITHUB_OUTPUT")
        self.stream = stream or sys.stdout
        self._failed = False

    @property
    def exit_code(self) -> int:
        return 1 if self._failed else 0

    def set_output(self, name: str, value: object) -> None:
        """Set a step output."""
        text = str(value)

        if not self.output_path:
            logger.warning("GITHUB_OUTPUT is not set, output not recorded", output=name, value=text)
            return

        if "\n" in text:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            entry = f"{name}<<{delimiter}\n{text}\n{delimiter}\n"
        else:
            entry = f"{name}={text}\n"

        with open(self.output_path, "a", encoding="utf-8") as f:
            f.write(entry)

    def set_failed(self, message: str) -> None:
        """Mark the step as failed with an error annotation."""
        self._failed = True
        self.stream.write(f"::error::{escape_data(message)}\n")
        self.stream.flush()
