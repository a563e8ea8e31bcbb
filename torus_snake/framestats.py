"""Frame-time benchmark, enabled with --benchmark."""
import logging

from .config import BENCHMARK_INTERVAL

logger = logging.getLogger(__name__)


class FrameStats:
    """Collect frame durations and log their average every `interval` seconds."""

    def __init__(self, interval=BENCHMARK_INTERVAL, start=0.0):
        self.interval = interval
        self.frame_times = []
        self.last_report = start

    def record(self, frame_seconds, now):
        """Add one frame; return the average frame time when a report was logged."""
        self.frame_times.append(frame_seconds)
        if now - self.last_report < self.interval:
            return None

        avg = sum(self.frame_times) / len(self.frame_times)
        fps = 1.0 / avg if avg > 0 else float("inf")
        logger.info(f"Average frame time: {avg:.6f} s ({fps:.1f} FPS)")
        self.frame_times.clear()
        self.last_report = now
        return avg
