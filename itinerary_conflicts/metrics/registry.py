"""In-process metrics registry for conflict detection."""

from collections import defaultdict


class MetricsClient:
    """
    Simple in-process metrics client for tracking detection runs.

    Stores metrics in memory for testing and internal monitoring.
    Can be replaced with Prometheus/OpenTelemetry in the future.
    """

    def __init__(self) -> None:
        # Conflict counts: type -> count
        self.conflict_counts: dict[str, int] = defaultdict(int)

        # Conflict counts: severity -> count
        self.severity_counts: dict[str, int] = defaultdict(int)

        # Activities excluded from time-based rules: reason -> count
        self.skipped_activities: dict[str, int] = defaultdict(int)

        # Detection runs: list of (activity_count, conflict_count)
        self.detection_runs: list[tuple[int, int]] = []

    def inc_conflict(self, conflict_type: str, severity: str) -> None:
        """Increment conflict counters for a type and severity."""
        self.conflict_counts[conflict_type] += 1
        self.severity_counts[severity] += 1

    def inc_skipped_activity(self, reason: str) -> None:
        """Increment counter for an activity skipped by the time-based rules."""
        self.skipped_activities[reason] += 1

    def observe_detection_run(self, activity_count: int, conflict_count: int) -> None:
        """Record the size of one detection run."""
        self.detection_runs.append((activity_count, conflict_count))

    def get_conflict_count(self, conflict_type: str | None = None) -> int:
        """Get conflict count, optionally filtered by type."""
        if conflict_type:
            return self.conflict_counts.get(conflict_type, 0)
        return sum(self.conflict_counts.values())

    def get_detection_stats(self) -> dict[str, float]:
        """Get detection run statistics."""
        if not self.detection_runs:
            return {"runs": 0, "avg_activities": 0.0, "avg_conflicts": 0.0}

        runs = len(self.detection_runs)
        return {
            "runs": runs,
            "avg_activities": sum(a for a, _ in self.detection_runs) / runs,
            "avg_conflicts": sum(c for _, c in self.detection_runs) / runs,
        }

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        self.conflict_counts.clear()
        self.severity_counts.clear()
        self.skipped_activities.clear()
        self.detection_runs.clear()
