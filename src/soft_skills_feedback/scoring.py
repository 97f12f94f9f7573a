# Confidence scoring for transcribed speech.
#
# Starts from a baseline, subtracts a point per filler word present, adjusts for
# response length, then picks lecture and assignment recommendations.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from soft_skills_feedback.models import ConversationScore, Recommendation

FillerMatch = Literal["substring", "token"]

# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoringParameters:
    """Tunable thresholds and word lists used by the scorer."""

    baseline_confidence: int = 5
    filler_words: tuple[str, ...] = ("um", "uh", "like")
    # "substring" flags "like" inside "likely"; "token" needs word boundaries
    filler_match: FillerMatch = "substring"
    filler_penalty: int = -1

    short_text_word_count: int = 20
    short_text_penalty: int = -1
    long_text_word_count: int = 100
    long_text_bonus: int = 1

    low_confidence_threshold: int = 4
    confidence_min: int = 0
    confidence_max: int = 10


DEFAULT_PARAMETERS = ScoringParameters()

# ---------------------------------------------------------------------------
# Recommendation catalogue
# ---------------------------------------------------------------------------

FLUENCY_LECTURE = Recommendation(
    title="Improving Speech Fluency",
    description="Techniques to reduce filler words and improve speech flow.",
)
FLUENCY_ASSIGNMENT = Recommendation(
    title="Speech Practice Assignment",
    description="Record a 2-minute speech avoiding common filler words.",
)
CONFIDENCE_LECTURE = Recommendation(
    title="Building Confidence in Public Speaking",
    description="Strategies to build self-confidence while speaking.",
)
CONFIDENCE_ASSIGNMENT = Recommendation(
    title="Confidence Building Exercise",
    description="Practice speaking in front of a mirror daily.",
)
ADVANCED_LECTURE = Recommendation(
    title="Advanced Speaking Techniques",
    description="Mastering voice modulation and engaging the audience.",
)

DEFAULT_TIPS = "Great job! Your speaking is clear and concise."

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _word_count(text: str) -> int:
    # "".split(" ") == [""], so empty text counts as one word
    return len(text.split(" "))


def _contains_filler(text: str, word: str, mode: FillerMatch) -> bool:
    if mode == "token":
        return re.search(rf"\b{re.escape(word)}\b", text, re.IGNORECASE) is not None
    return word.lower() in text.lower()


def _filler_tip(word: str) -> str:
    return f'Try to avoid saying "{word}".'


def _clamp(value: int, params: ScoringParameters) -> int:
    return max(params.confidence_min, min(params.confidence_max, value))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_conversation(text: str, parameters: ScoringParameters | None = None) -> ConversationScore:
    """Score a transcript and pick recommendations.

    Args:
        text: The transcribed speech. Any string, including empty.
        parameters: Optional tuning overrides.

    Returns:
        A ``ConversationScore`` with the clamped confidence level, the joined
        tips and the lecture and assignment suggestions in the order rules fired.
    """
    params = parameters or DEFAULT_PARAMETERS
    confidence = params.baseline_confidence
    tips: list[str] = []
    lectures: list[Recommendation] = []
    assignments: list[Recommendation] = []

    for word in params.filler_words:
        if _contains_filler(text, word, params.filler_match):
            confidence += params.filler_penalty
            tips.append(_filler_tip(word))
            lectures.append(FLUENCY_LECTURE)
            assignments.append(FLUENCY_ASSIGNMENT)

    wc = _word_count(text)
    if wc < params.short_text_word_count:
        confidence += params.short_text_penalty
    elif wc > params.long_text_word_count:
        confidence += params.long_text_bonus

    if confidence < params.low_confidence_threshold:
        lectures.append(CONFIDENCE_LECTURE)
        assignments.append(CONFIDENCE_ASSIGNMENT)
    else:
        lectures.append(ADVANCED_LECTURE)

    return ConversationScore(
        raw_confidence=confidence,
        confidence_level=_clamp(confidence, params),
        tips=" ".join(tips) if tips else DEFAULT_TIPS,
        lecture_suggestions=tuple(lectures),
        assignment_suggestions=tuple(assignments),
    )
