from __future__ import annotations

from soft_skills_feedback.grammar import check_grammar
from soft_skills_feedback.models import AnalysisResult
from soft_skills_feedback.scoring import ScoringParameters, analyze_conversation


def analyze(text: str, parameters: ScoringParameters | None = None) -> AnalysisResult:
    """Run the grammar checks and the conversation scorer over ``text``.

    Never raises for string input. Empty or whitespace-only text produces a
    well-formed result with no grammar issues.
    """
    score = analyze_conversation(text, parameters)
    return AnalysisResult(
        confidence_level=score.confidence_level,
        tips=score.tips,
        lecture_suggestions=score.lecture_suggestions,
        assignment_suggestions=score.assignment_suggestions,
        grammar_issues=tuple(check_grammar(text)),
    )
