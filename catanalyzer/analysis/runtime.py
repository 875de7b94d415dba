from __future__ import annotations

import threading
import time
from typing import Callable


class AnalysisCancelled(RuntimeError):
    """Raised when an analysis run is cancelled by the caller."""


ProgressCallback = Callable[[str, float], None]


def _clamp_fraction(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class AnalysisRuntime:
    """Cancellation + progress helper passed through the analysis stages."""

    def __init__(
        self,
        *,
        cancel_event: threading.Event | None = None,
        on_progress: ProgressCallback | None = None,
        min_progress_interval_s: float = 0.08,
        min_progress_delta: float = 0.005,
    ) -> None:
        self._cancel_event = cancel_event if cancel_event is not None else threading.Event()
        self._on_progress = on_progress
        self._min_progress_interval_s = max(0.0, float(min_progress_interval_s))
        self._min_progress_delta = max(0.0, float(min_progress_delta))
        self._last_progress_at = 0.0
        self._last_fraction = -1.0
        self._last_stage = ""

    def cancel(self) -> None:
        self._cancel_event.set()

    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.is_cancelled():
            raise AnalysisCancelled("Analysis cancelled.")

    def report_progress(self, stage: str, fraction: float, *, force: bool = False) -> None:
        self.raise_if_cancelled()

        if self._on_progress is None:
            return

        now = time.perf_counter()
        clamped = _clamp_fraction(fraction)
        stage_changed = stage != self._last_stage
        progressed_enough = abs(clamped - self._last_fraction) >= self._min_progress_delta
        waited_enough = (now - self._last_progress_at) >= self._min_progress_interval_s
        if not force and not stage_changed and not progressed_enough and not waited_enough:
            return

        self._on_progress(stage, clamped)
        self._last_stage = stage
        self._last_fraction = clamped
        self._last_progress_at = now
