# SPDX-License-Identifier: Apache-2.0
"""Speaking feedback for transcribed conversations.

Scores a transcript for speaking confidence (0-10), flags filler words and a
couple of heuristic grammar slips, and suggests lectures and assignments.
Deterministic, no LLM calls. Ships a ``conversation-feedback`` column type for
NeMo Data Designer.

Usage::

    from soft_skills_feedback import analyze

    result = analyze("um I think the the plan is fine")
    result.to_payload()["feedbackSummary"]  # 'Confidence Level: 3/10'
"""

from soft_skills_feedback.config import ConversationFeedbackColumnConfig
from soft_skills_feedback.core import analyze
from soft_skills_feedback.grammar import check_grammar
from soft_skills_feedback.models import AnalysisResult, ConversationScore, Recommendation
from soft_skills_feedback.scoring import ScoringParameters, analyze_conversation

__all__ = [
    "AnalysisResult",
    "ConversationFeedbackColumnConfig",
    "ConversationScore",
    "Recommendation",
    "ScoringParameters",
    "analyze",
    "analyze_conversation",
    "check_grammar",
]
