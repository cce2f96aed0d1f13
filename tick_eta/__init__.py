"""
Progress estimation with rate, ETA and ``{{field}}`` template rendering.
"""

from .config import ReporterSettings, load_settings
from .estimator import ETA
from .logging_setup import configure_logging
from .models import TEMPLATE_FIELDS, EtaSnapshot
from .progress import humanize_duration, to_precision
from .reporting import DEFAULT_TEMPLATE, ProgressReporter
from .template import render_template

__all__ = [
    "ETA",
    "EtaSnapshot",
    "TEMPLATE_FIELDS",
    "DEFAULT_TEMPLATE",
    "ProgressReporter",
    "ReporterSettings",
    "configure_logging",
    "humanize_duration",
    "load_settings",
    "render_template",
    "to_precision",
]
