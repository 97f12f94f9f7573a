"""Value records produced by the conversation analyzer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_SUMMARY_RE = re.compile(r"^Confidence Level: (\d+)/10$")


def format_summary(confidence_level: int) -> str:
    """Render a confidence level as ``Confidence Level: <n>/10``."""
    return f"Confidence Level: {confidence_level}/10"


def parse_summary(summary: str) -> int:
    """Read the confidence level back out of a feedback summary; ``ValueError`` if malformed."""
    m = _SUMMARY_RE.match(summary)
    if m is None:
        raise ValueError(f"Malformed feedback summary: {summary!r}")
    return int(m.group(1))


@dataclass(frozen=True)
class Recommendation:
    title: str
    description: str
    link: str = "#"

    def to_payload(self) -> dict[str, str]:
        return {"title": self.title, "description": self.description, "link": self.link}

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Recommendation:
        return cls(title=payload["title"], description=payload["description"], link=payload["link"])


@dataclass(frozen=True)
class ConversationScore:
    """Output of the conversation scorer.

    ``raw_confidence`` is the additive score before clamping; the
    low-confidence recommendation branch is decided on this value.
    ``confidence_level`` is the clamped value shown to the speaker.
    """

    raw_confidence: int
    confidence_level: int
    tips: str
    lecture_suggestions: tuple[Recommendation, ...]
    assignment_suggestions: tuple[Recommendation, ...]

    @property
    def feedback_summary(self) -> str:
        return format_summary(self.confidence_level)


@dataclass(frozen=True)
class AnalysisResult:
    """Complete feedback for one transcript.

    Serializes to the JSON shape consumed by front ends via ``to_payload``;
    ``from_payload`` reads that shape back.
    """

    confidence_level: int
    tips: str
    lecture_suggestions: tuple[Recommendation, ...]
    assignment_suggestions: tuple[Recommendation, ...]
    grammar_issues: tuple[str, ...]

    @property
    def feedback_summary(self) -> str:
        return format_summary(self.confidence_level)

    def to_payload(self) -> dict[str, object]:
        return {
            "feedbackSummary": self.feedback_summary,
            "tipsText": self.tips,
            "lectureSuggestions": [r.to_payload() for r in self.lecture_suggestions],
            "assignmentSuggestions": [r.to_payload() for r in self.assignment_suggestions],
            "grammarIssues": list(self.grammar_issues),
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> AnalysisResult:
        return cls(
            confidence_level=parse_summary(payload["feedbackSummary"]),
            tips=payload["tipsText"],
            lecture_suggestions=tuple(Recommendation.from_payload(r) for r in payload["lectureSuggestions"]),
            assignment_suggestions=tuple(Recommendation.from_payload(r) for r in payload["assignmentSuggestions"]),
            grammar_issues=tuple(payload["grammarIssues"]),
        )
