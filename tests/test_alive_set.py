"""
Unit tests for death driven encounter segmentation.
"""

import pytest

from combatlog.parser import EventType
from combatlog.segmentation import (
    AliveSetSegmenter,
    EncounterSegmenter,
    get_segmenter,
    segment,
)

from tests.helpers import (
    ERLE,
    HANDLER,
    HISTERA,
    IRONHELM,
    RUNEMAGE,
    TELTA,
    buff,
    clean_pulls_trace,
    died,
    ev,
    heal,
    hit,
    two_pull_trace,
)


def spans_of(encounters):
    return [(enc.start_index, enc.end_index) for enc in encounters]


class TestAliveSetSegmenter:
    """Test segmentation by tracking living engaged units."""

    def setup_method(self):
        self.segmenter = AliveSetSegmenter()

    def test_two_pulls(self):
        """Test that both pulls of the trace become encounters."""
        assert spans_of(self.segmenter.segment(two_pull_trace())) == [(1, 7), (10, 13)]

    @pytest.mark.parametrize("trace", [two_pull_trace, clean_pulls_trace])
    def test_agrees_with_life_windows_on_clean_pulls(self, trace):
        """Test agreement with life window merging when hostiles die last."""
        events = trace()
        alive = self.segmenter.segment(events)
        merged = EncounterSegmenter().segment(events)
        assert alive == merged

    def test_closes_on_last_hostile_death(self):
        """Test the encounter closes when the last engaged hostile dies."""
        events = [
            hit(0, TELTA, IRONHELM),
            hit(1, ERLE, HANDLER),
            died(2, IRONHELM),
            hit(3, HANDLER, ERLE),
            died(4, HANDLER),
            buff(5, ERLE, TELTA),
        ]
        assert spans_of(self.segmenter.segment(events)) == [(0, 4)]

    def test_wipe_closes_encounter(self):
        """Test a group wipe closes the encounter."""
        events = [
            hit(0, IRONHELM, TELTA),
            hit(1, IRONHELM, ERLE),
            died(2, TELTA),
            died(3, ERLE),
            buff(4, IRONHELM, IRONHELM),
        ]
        assert spans_of(self.segmenter.segment(events)) == [(0, 3)]

    def test_untracked_death_is_ignored(self):
        """Test deaths of units outside the fight change nothing."""
        events = [
            hit(0, TELTA, IRONHELM),
            died(1, RUNEMAGE),
            died(2, HISTERA),
            hit(3, IRONHELM, TELTA),
            died(4, IRONHELM),
        ]
        assert spans_of(self.segmenter.segment(events)) == [(0, 4)]

    def test_death_before_any_pull_is_ignored(self):
        """Test deaths before the first pull are ignored."""
        events = [died(0, IRONHELM), hit(1, TELTA, HANDLER), died(2, HANDLER)]
        assert spans_of(self.segmenter.segment(events)) == [(1, 2)]

    def test_unit_can_rejoin_after_death(self):
        """Test a unit that died can be pulled again later."""
        events = [
            hit(0, TELTA, IRONHELM),
            died(1, IRONHELM),
            buff(2, ERLE, TELTA),
            hit(3, IRONHELM, TELTA),
            died(4, IRONHELM),
        ]
        assert spans_of(self.segmenter.segment(events)) == [(0, 1), (3, 4)]

    def test_open_encounter_ends_at_last_tracked_event(self):
        """Test an unfinished encounter ends at its last tracked event."""
        events = [
            hit(0, TELTA, IRONHELM),
            heal(1, ERLE, TELTA),
            hit(2, IRONHELM, TELTA),
            buff(3, ERLE, ERLE),
        ]
        assert spans_of(self.segmenter.segment(events)) == [(0, 2)]

    def test_healer_outside_the_fight_is_not_tracked(self):
        """Test a healer never engaged in combat is not tracked."""
        events = [
            hit(0, TELTA, IRONHELM),
            heal(1, ERLE, TELTA),
            died(2, ERLE),
            died(3, IRONHELM),
        ]
        encounters = self.segmenter.segment(events)
        assert spans_of(encounters) == [(0, 3)]
        assert ERLE in encounters[0].involved

    def test_environmental_damage_does_not_open(self):
        """Test environmental damage cannot open an encounter."""
        events = [ev(0, EventType.ENVIRONMENTAL_DAMAGE, None, TELTA, 350), died(1, TELTA)]
        assert self.segmenter.segment(events) == []

    def test_environmental_damage_does_not_extend_open_encounter(self):
        """Test environmental damage does not extend an unfinished encounter."""
        events = [
            hit(0, TELTA, IRONHELM),
            hit(1, IRONHELM, TELTA),
            buff(2, ERLE, ERLE),
            ev(3, EventType.ENVIRONMENTAL_DAMAGE, None, TELTA, 350),
        ]
        assert spans_of(self.segmenter.segment(events)) == [(0, 1)]

    def test_unit_destroyed_counts_as_death(self):
        """Test UNIT_DESTROYED is handled like UNIT_DIED."""
        events = [
            hit(0, TELTA, IRONHELM),
            ev(1, EventType.UNIT_DESTROYED, None, IRONHELM),
            buff(2, ERLE, TELTA),
        ]
        assert spans_of(self.segmenter.segment(events)) == [(0, 1)]

    def test_empty_stream(self):
        """Test an empty stream has no encounters."""
        assert self.segmenter.segment([]) == []

    def test_same_side_event_warns(self):
        """Test same side hostile events reach the warning sink."""
        received = []
        segmenter = AliveSetSegmenter(on_warning=received.append)
        segmenter.segment([hit(0, TELTA, IRONHELM), hit(1, TELTA, ERLE), died(2, IRONHELM)])
        assert [w.index for w in received] == [1]
        assert segmenter.warnings == received

    def test_late_hostile_event_diverges_from_life_windows(self):
        """Test a hostile seen after its death splits the two methods."""
        events = [
            hit(0, TELTA, IRONHELM),
            died(1, IRONHELM),
            buff(2, ERLE, TELTA),
            buff(3, IRONHELM, IRONHELM),
        ]
        assert spans_of(self.segmenter.segment(events)) == [(0, 1)]
        assert spans_of(segment(events)) == [(0, 3)]


class TestGetSegmenter:
    """Test segmenter selection by name."""

    def test_interval(self):
        """Test selecting life window merging."""
        segmenter = get_segmenter("interval")
        assert type(segmenter) is EncounterSegmenter

    def test_alive(self):
        """Test selecting alive set tracking."""
        assert isinstance(get_segmenter("alive"), AliveSetSegmenter)

    def test_sink_is_passed(self):
        """Test the warning sink reaches the segmenter."""
        sink = [].append
        assert get_segmenter("alive", on_warning=sink).on_warning is sink

    def test_unknown_method(self):
        """Test unknown method names are rejected."""
        with pytest.raises(ValueError, match="Unknown segmentation method"):
            get_segmenter("magic")
