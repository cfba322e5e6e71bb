import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("boggle")


class StageTimer:
    """Wall-clock timings (ms) for the stages of one solve."""

    def __init__(self, label: str = "solve"):
        self.label = label
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            # Recorded even when the stage raises
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)
            logger.info("%s stage=%s elapsed=%.1fms", self.label, name, self.timings[name])

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict[str, float]:
        return {**self.timings, "total": self.total_ms}
