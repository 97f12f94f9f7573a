from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from soft_skills_feedback.config import ConversationFeedbackColumnConfig
from soft_skills_feedback.core import analyze

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class ConversationFeedbackColumnGenerator(ColumnGeneratorFullColumn[ConversationFeedbackColumnConfig]):
    """Column generator that scores transcripts for speaking confidence and grammar slips."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f5e3 Analyzing column {self.config.name!r} for speaking feedback")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_confidence: {self.config.min_confidence}")

        params = self.config.parameters()
        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            analysis = analyze(text, params)
            output: dict = {
                "is_valid": analysis.confidence_level >= self.config.min_confidence,
                "confidence_level": analysis.confidence_level,
                "feedback_summary": analysis.feedback_summary,
                "tips": analysis.tips,
            }
            if self.config.include_recommendations:
                output["lecture_suggestions"] = [r.to_payload() for r in analysis.lecture_suggestions]
                output["assignment_suggestions"] = [r.to_payload() for r in analysis.assignment_suggestions]
            if self.config.include_grammar_issues:
                output["grammar_issues"] = list(analysis.grammar_issues)
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
