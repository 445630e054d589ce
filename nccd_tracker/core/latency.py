"""
Simulated analysis latency.
Extraction, linking and summary pause to imitate a remote document analysis
call. The delays are injected so tests can run with them switched off.
"""

import time
from typing import Callable, Optional

from . import config


class SimulatedLatency:
    """Delay settings for the simulated stages, in milliseconds."""

    def __init__(self,
                 enabled: bool = True,
                 extract_base_ms: int = 1500,
                 extract_per_file_ms: int = 500,
                 extract_max_ms: int = 4000,
                 link_ms: int = 2000,
                 summary_ms: int = 1500,
                 sleep: Callable[[float], None] = time.sleep):
        self.enabled = enabled
        self.extract_base_ms = extract_base_ms
        self.extract_per_file_ms = extract_per_file_ms
        self.extract_max_ms = extract_max_ms
        self.link_ms = link_ms
        self.summary_ms = summary_ms
        self._sleep = sleep

    @classmethod
    def from_config(cls) -> 'SimulatedLatency':
        return cls(
            enabled=config.latency_enabled(),
            extract_base_ms=config.EXTRACT_BASE_DELAY_MS,
            extract_per_file_ms=config.EXTRACT_PER_FILE_DELAY_MS,
            extract_max_ms=config.EXTRACT_MAX_DELAY_MS,
            link_ms=config.LINK_DELAY_MS,
            summary_ms=config.SUMMARY_DELAY_MS,
        )

    @classmethod
    def disabled(cls) -> 'SimulatedLatency':
        return cls(enabled=False)

    def extraction_delay_ms(self, file_count: Optional[int]) -> int:
        """Base delay, plus a per-file increment capped at the maximum when files were supplied."""
        if file_count is None:
            return self.extract_base_ms
        return min(self.extract_base_ms + file_count * self.extract_per_file_ms, self.extract_max_ms)

    def pause(self, milliseconds: int) -> None:
        if self.enabled and milliseconds > 0:
            self._sleep(milliseconds / 1000.0)

    def extraction(self, file_count: Optional[int]) -> None:
        self.pause(self.extraction_delay_ms(file_count))

    def linking(self) -> None:
        self.pause(self.link_ms)

    def summary(self) -> None:
        self.pause(self.summary_ms)
