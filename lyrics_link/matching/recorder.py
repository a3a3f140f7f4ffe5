"""Structured trace of a match operation, for debugging decisions."""

from lyrics_link.core.models import CandidateDecision, MatchTrace, Query, QueryTrace
from lyrics_link.matching.variants import TitleVariants


class DecisionRecorder:
    """Collects every planned query and every examined candidate.

    A disabled recorder accepts the same calls and keeps nothing, so the
    resolver does not branch on whether a trace was requested.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._steps: list[QueryTrace] = []
        self._variants: TitleVariants | None = None
        self._strategy: str | None = None

    @property
    def steps(self) -> list[QueryTrace]:
        return list(self._steps)

    def record_title(self, variants: TitleVariants, strategy: str) -> None:
        if self.enabled:
            self._variants = variants
            self._strategy = strategy

    def record_query(self, query: Query, decisions: list[CandidateDecision], error: str | None = None) -> None:
        if self.enabled:
            self._steps.append(QueryTrace(query=query, examined=list(decisions), error=error))

    def build(
        self,
        reason: str,
        accepted: CandidateDecision | None = None,
    ) -> MatchTrace | None:
        """Produce the trace, or None when recording is disabled."""
        if not self.enabled:
            return None
        trace = MatchTrace(
            reason=reason,
            strategy=self._strategy,
            accepted=accepted,
            penalized_used=bool(accepted and accepted.penalized),
            steps=self._steps,
        )
        if self._variants is not None:
            parsed = self._variants.parsed
            trace.cover_detected = parsed.cover_detected
            trace.base_title = parsed.base_text
            trace.forms = self._variants.sorted_forms()
            trace.fragments = list(parsed.fragments)
        return trace
