"""Property-based tests for conflict detection."""

from hypothesis import given, settings
from hypothesis import strategies as st

from itinerary_conflicts import ConflictType, detect_time_conflicts
from itinerary_conflicts.models import Activity, ConflictDetectionOptions
from tests.unit.conflict_test_helpers import (
    create_test_activity,
    create_test_leg,
    minutes_to_hhmm,
)

OVERLAP_TYPES = {ConflictType.overlap, ConflictType.same_time}


@st.composite
def same_day_spans(draw) -> tuple[int, int]:
    """A (start, end) pair within one day with end after start."""
    start = draw(st.integers(min_value=0, max_value=23 * 60))
    length = draw(st.integers(min_value=1, max_value=24 * 60 - 1 - start))
    return start, start + length


@st.composite
def itineraries(draw) -> list[Activity]:
    """Same-day itineraries with optional legs and the odd malformed time."""
    spans = draw(st.lists(same_day_spans(), max_size=8))
    activities = []
    for index, (start, end) in enumerate(spans):
        leg = None
        if draw(st.booleans()):
            leg = create_test_leg(draw(st.integers(min_value=0, max_value=120)))
        start_time = minutes_to_hhmm(start)
        if draw(st.integers(min_value=0, max_value=9)) == 0:
            start_time = "not a time"
        activities.append(
            create_test_activity(f"a{index}", start_time, minutes_to_hhmm(end), leg=leg)
        )
    return activities


class TestDetectionProperties:
    """Invariants that hold for any same-day itinerary."""

    @given(itineraries())
    @settings(max_examples=75)
    def test_idempotent(self, activities):
        """Test that repeated runs produce identical output."""
        options = ConflictDetectionOptions()

        first = detect_time_conflicts(activities, options)
        second = detect_time_conflicts(activities, options)

        assert first.model_dump_json() == second.model_dump_json()

    @given(itineraries())
    @settings(max_examples=75)
    def test_summary_matches_conflicts(self, activities):
        """Test that flags and counts are derived from the conflict list."""
        result = detect_time_conflicts(activities)

        assert result.summary.total_conflicts == len(result.conflicts)
        assert (
            result.summary.errors + result.summary.warnings + result.summary.infos
            == len(result.conflicts)
        )
        assert result.has_errors == (result.summary.errors > 0)
        assert result.has_warnings == (result.summary.warnings > 0)

    @given(itineraries())
    @settings(max_examples=75)
    def test_index_covers_every_reference(self, activities):
        """Test that each conflict is indexed under all of its activity ids."""
        result = detect_time_conflicts(activities)

        for conflict in result.conflicts:
            for activity_id in conflict.activity_ids:
                assert conflict in result.conflicts_by_activity[activity_id]

    @given(same_day_spans(), same_day_spans())
    def test_overlap_symmetry(self, first, second):
        """Test that an overlapping pair is reported exactly once in either order."""
        x = create_test_activity("x", minutes_to_hhmm(first[0]), minutes_to_hhmm(first[1]))
        y = create_test_activity("y", minutes_to_hhmm(second[0]), minutes_to_hhmm(second[1]))
        overlapping = first[0] < second[1] and second[0] < first[1]

        for ordering in ([x, y], [y, x]):
            result = detect_time_conflicts(ordering)
            pair_conflicts = [
                c
                for c in result.conflicts
                if c.type in OVERLAP_TYPES and set(c.activity_ids) == {"x", "y"}
            ]
            assert len(pair_conflicts) == (1 if overlapping else 0)

    @given(
        st.integers(min_value=0, max_value=22 * 60),
        st.integers(min_value=1, max_value=60),
        st.integers(min_value=0, max_value=60),
        st.integers(min_value=1, max_value=60),
    )
    def test_back_to_back_never_overlaps(self, start, first_length, gap, second_length):
        """Test that X.end <= Y.start never yields an overlap for the pair."""
        first_end = start + first_length
        second_start = first_end + gap
        second_end = min(second_start + second_length, 24 * 60 - 1)
        if second_end <= second_start:
            return

        activities = [
            create_test_activity("x", minutes_to_hhmm(start), minutes_to_hhmm(first_end)),
            create_test_activity(
                "y", minutes_to_hhmm(second_start), minutes_to_hhmm(second_end)
            ),
        ]

        result = detect_time_conflicts(activities)

        assert not [c for c in result.conflicts if c.type in OVERLAP_TYPES]
