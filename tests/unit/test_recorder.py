"""Tests for the decision recorder."""

from lyrics_link.core.models import CandidateDecision, Query
from lyrics_link.matching.recorder import DecisionRecorder
from lyrics_link.matching.variants import generate_variants

QUERY = Query(label="japanese_only", text="曲名 Artist")


class TestDecisionRecorder:
    """Tests for DecisionRecorder."""

    def test_disabled_builds_nothing(self) -> None:
        """Test a disabled recorder keeps nothing."""
        recorder = DecisionRecorder(enabled=False)
        recorder.record_title(generate_variants("Song"), "lenient")
        recorder.record_query(QUERY, [])

        assert recorder.build("no_match") is None
        assert recorder.steps == []

    def test_trace_contents(self) -> None:
        """Test the trace carries title facts and every step."""
        recorder = DecisionRecorder()
        recorder.record_title(generate_variants("曲名 (Covered by Someone)"), "lenient")
        decision = CandidateDecision(
            id=1, title="曲名", artist="Artist", url="https://genius.com/x", outcome="accept", used_query_label=QUERY.label
        )
        recorder.record_query(QUERY, [decision])

        trace = recorder.build("accepted", decision)

        assert trace.reason == "accepted"
        assert trace.strategy == "lenient"
        assert trace.cover_detected is True
        assert trace.base_title == "曲名"
        assert trace.forms == ["曲名"]
        assert trace.accepted == decision
        assert trace.penalized_used is False
        assert len(trace.steps) == 1
        assert trace.steps[0].examined == [decision]

    def test_error_is_recorded(self) -> None:
        """Test a failed query keeps its error."""
        recorder = DecisionRecorder()
        recorder.record_query(QUERY, [], error="Genius: API error: 503")

        trace = recorder.build("no_match")

        assert trace.steps[0].error == "Genius: API error: 503"
        assert trace.forms == []
