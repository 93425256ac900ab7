from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display with tqdm (TTY only).

Shows journey progress while artifacts are written. In non-TTY environments
(CI, pipes, tests) no bar is created so output stays free of control
sequences.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Return True if stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class ProgressTracker:
    """Progress tracker using tqdm for journey writing.

    A no-op when stdout is not a TTY.
    """

    def __init__(self, total_journeys: int, *, description: str = "Writing journeys") -> None:
        """Initialize progress tracker.

        Args:
            total_journeys: Number of journeys that will be written
            description: Description for the progress bar
        """
        self.total_journeys = total_journeys
        self.description = description
        self.current_journey = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_journeys,
                desc=description,
                unit="journey",
                disable=False,
                leave=False,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start_journey(self, journey_id: str) -> None:
        self.current_journey += 1
        if self.enabled and self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({journey_id})")

    def finish_journey(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def close(self) -> None:
        """Close the progress bar."""
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
