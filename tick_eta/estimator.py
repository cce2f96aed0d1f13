"""Progress estimator that derives rate and ETA from completed units."""

from __future__ import annotations

import time
from typing import Callable, Optional, TypeVar, Union

from tick_eta.models import EtaSnapshot, Number
from tick_eta.progress import humanize_duration, safe_divide, to_precision
from tick_eta.template import render_template

T = TypeVar("T")

Clock = Callable[[], float]


class ETA:
    """Track completed units of work against a fixed total.

    The instance has a single owner: ``tick`` is not synchronized, so callers
    sharing one estimator between threads must serialize their ticks.
    Ill-defined arithmetic (no elapsed time, nothing done, a zero total) is
    propagated as ``inf``/``nan`` rather than raised.
    """

    def __init__(self, total: Number, clock: Clock = time.time):
        self._total = total
        self._done = 0
        self._clock = clock
        self._started_at = clock()
        self._last_text: Optional[str] = None

    @property
    def total(self) -> Number:
        return self._total

    @property
    def done(self) -> int:
        return self._done

    @property
    def started_at(self) -> float:
        return self._started_at

    @property
    def last_text(self) -> Optional[str]:
        return self._last_text

    def tick(self, text: Optional[str] = None) -> "ETA":
        """Record one completed unit, optionally replacing the annotation."""
        self._done += 1
        if text:
            self._last_text = text
        return self

    def snapshot(self) -> EtaSnapshot:
        """Compute the current progress metrics."""
        elapsed = self._clock() - self._started_at
        rate = safe_divide(self._done, elapsed)
        estimated = safe_divide(self._total, rate)
        eta = estimated - elapsed

        return EtaSnapshot(
            done=self._done,
            total=self._total,
            elapsed=elapsed,
            estimated=estimated,
            rate=to_precision(rate, 4),
            fraction=to_precision(safe_divide(self._done, self._total), 2),
            eta_seconds=to_precision(eta, 4),
            eta_humanized=humanize_duration(eta),
            text=self._last_text,
        )

    def render(self, template: str) -> str:
        """Render ``template`` with ``{{field}}`` placeholders filled in."""
        return render_template(template, self.snapshot())

    def apply(self, transform: Callable[[EtaSnapshot], T]) -> T:
        """Pass the current snapshot to ``transform`` and return its result."""
        return transform(self.snapshot())

    def format(self, layout: Union[str, Callable[[EtaSnapshot], T]]) -> Union[str, T]:
        """Render a template string or apply a transform, depending on ``layout``."""
        if isinstance(layout, str):
            return self.render(layout)
        return self.apply(layout)

    def __repr__(self) -> str:
        return f"ETA(done={self._done}, total={self._total})"


__all__ = ["ETA", "Clock"]
