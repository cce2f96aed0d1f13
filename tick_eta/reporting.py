"""Count-driven progress logging built on top of the estimator."""

from __future__ import annotations

import logging
from typing import Any, Optional

from tick_eta.estimator import ETA
from tick_eta.models import Number

DEFAULT_TEMPLATE = "{{done}}/{{total}} ({{fraction}}) {{rate}}/s ETA {{etaHumanized}} {{text}}"


def default_interval(total: Number) -> int:
    """Report roughly twenty times over a run."""
    try:
        return max(1, int(total) // 20)
    except (TypeError, ValueError, OverflowError):
        return 1


class ProgressReporter:
    """Tick an estimator and log a rendered line every ``every`` units."""

    def __init__(
        self,
        eta: ETA,
        template: str = DEFAULT_TEMPLATE,
        every: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO,
    ):
        self.eta = eta
        self.template = template
        self.every = every if every and every > 0 else default_interval(eta.total)
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    @classmethod
    def for_total(cls, total: Number, **kwargs: Any) -> "ProgressReporter":
        clock = kwargs.pop("clock", None)
        eta = ETA(total, clock=clock) if clock is not None else ETA(total)
        return cls(eta, **kwargs)

    def tick(self, text: Optional[str] = None) -> Optional[str]:
        """Record one unit; return the logged line when a report was due."""
        self.eta.tick(text)
        done = self.eta.done
        if done % self.every == 0 or done == self.eta.total:
            return self.report()
        return None

    def report(self) -> str:
        line = self.eta.render(self.template).rstrip()
        self.logger.log(self.level, line)
        return line


__all__ = ["DEFAULT_TEMPLATE", "ProgressReporter", "default_interval"]
