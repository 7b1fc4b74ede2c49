"""Detection metrics: logging façade and in-process registry."""

from .core import record_detection_run
from .registry import MetricsClient

__all__ = ["MetricsClient", "record_detection_run"]
