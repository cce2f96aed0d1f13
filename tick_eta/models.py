"""Data models used across the progress estimator."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Dict, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class EtaSnapshot:
    """Derived progress metrics captured at a single point in time."""

    done: int
    total: Number
    elapsed: float
    estimated: float
    rate: str
    fraction: str
    eta_seconds: str
    eta_humanized: str
    text: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the snapshot keyed by template field names."""
        return {name: getter(self) for name, getter in TEMPLATE_FIELDS.items()}


# Placeholder names understood by templates, bound to snapshot accessors.
TEMPLATE_FIELDS: Dict[str, Callable[[EtaSnapshot], Any]] = {
    "done": attrgetter("done"),
    "total": attrgetter("total"),
    "elapsed": attrgetter("elapsed"),
    "estimated": attrgetter("estimated"),
    "rate": attrgetter("rate"),
    "fraction": attrgetter("fraction"),
    "etaSeconds": attrgetter("eta_seconds"),
    "etaHumanized": attrgetter("eta_humanized"),
    "text": attrgetter("text"),
}


__all__ = ["EtaSnapshot", "Number", "TEMPLATE_FIELDS"]
