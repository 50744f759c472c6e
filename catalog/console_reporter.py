"""Console reporter for CLI commands."""

import sys
from typing import NoReturn

from tqdm import tqdm

from catalog.interfaces import IReporter


class ConsoleReporter(IReporter):
    """Command output on stdout; errors and the progress bar on stderr."""

    def __init__(self) -> None:
        self._progress_bar: tqdm[NoReturn] | None = None

    def on_message(self, *messages: str) -> None:
        for message in messages:
            print(message)

    def on_error(self, *messages: str) -> None:
        for message in messages:
            print(f"Error: {message}", file=sys.stderr)

    def start_progress(self, total: int) -> None:
        self._progress_bar = tqdm(total=total, unit="product", file=sys.stderr)

    def stop_progress(self) -> None:
        if self._progress_bar:
            self._progress_bar.close()
            self._progress_bar = None

    def on_progress(self, value: int) -> None:
        if self._progress_bar:
            self._progress_bar.update(value)
