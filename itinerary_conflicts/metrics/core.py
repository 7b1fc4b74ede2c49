"""Metrics façade for detection run tracking."""

import logging

logger = logging.getLogger(__name__)


def record_detection_run(
    activity_count: int,
    skipped_count: int,
    errors: int,
    warnings: int,
    infos: int,
) -> None:
    """Emit one structured log record summarising a detection run.

    Handlers and formatting belong to the host application; counters that
    need to be queried live on ``MetricsClient`` instead.

    Args:
        activity_count: Number of activities checked.
        skipped_count: Activities excluded because their times could not be placed.
        errors: Error-level conflicts found.
        warnings: Warning-level conflicts found.
        infos: Info-level conflicts kept in the result.
    """
    logger.info(
        "conflict_detection_run",
        extra={
            "activity_count": activity_count,
            "skipped_count": skipped_count,
            "errors": errors,
            "warnings": warnings,
            "infos": infos,
        },
    )
