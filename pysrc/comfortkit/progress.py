"""
Progress reporting for batch runs.

Batch calculations over long input sequences can show a tqdm bar in the
terminal. Progress is off unless the caller asks for it.

Usage:
    from comfortkit.progress import ProgressReporter

    progress = ProgressReporter(total=100, desc="Computing")
    try:
        for i in range(100):
            do_work(i)
            progress.update(1)
    finally:
        progress.close()
"""

from __future__ import annotations

import logging

from tqdm import tqdm

logger = logging.getLogger(__name__)


class ProgressReporter:
    """
    Progress reporter backed by a tqdm bar, or silent when disabled.

    Args:
        total: Total number of steps.
        desc: Description shown in the progress bar.
        disable: If True, count steps without drawing anything.
    """

    def __init__(self, total: int, desc: str = "", disable: bool = False):
        self.total = total
        self.desc = desc
        self.current = 0
        self.disable = disable
        self._closed = False
        self._bar = None

        if disable:
            return

        self._bar = tqdm(total=total, desc=desc)
        logger.debug(f"Progress bar started for {desc or 'batch'} ({total} items)")

    def update(self, n: int = 1) -> None:
        """Update progress by n steps."""
        if self._closed:
            return

        self.current += n
        if self._bar is not None:
            self._bar.update(n)

    def set_description(self, desc: str) -> None:
        """Update the progress description."""
        self.desc = desc
        if self._bar is not None:
            self._bar.set_description(desc)

    def close(self) -> None:
        """Close the progress bar."""
        if self._closed:
            return
        self._closed = True

        if self._bar is not None:
            self._bar.close()
