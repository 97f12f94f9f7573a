from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from soft_skills_feedback.scoring import DEFAULT_PARAMETERS, ScoringParameters


class ConversationFeedbackColumnConfig(SingleColumnConfig):
    """Score transcribed speech columns for confidence, fillers and grammar slips.

    Concatenates the target columns into one transcript per row and produces a
    0-10 confidence level, speaking tips, lecture and assignment suggestions, and
    heuristic grammar issues.

    Attributes:
        target_columns: Columns whose text content will be concatenated and analyzed.
        min_confidence: Minimum confidence level (0-10) for ``is_valid=True``. Defaults
            to 4, the level at which the confidence-building recommendations stop.
        include_recommendations: Include lecture and assignment suggestions in output.
        include_grammar_issues: Include heuristic grammar issue strings in output.
        filler_match: ``"substring"`` flags fillers anywhere in the text ("like" in
            "likely"); ``"token"`` only flags whole words.
    """

    target_columns: list[str]
    min_confidence: int = Field(default=4, ge=0, le=10, description="Minimum confidence level for is_valid=True")
    include_recommendations: bool = Field(default=True, description="Include lecture and assignment suggestions")
    include_grammar_issues: bool = Field(default=True, description="Include grammar issue strings in output")
    filler_match: Literal["substring", "token"] = Field(default="substring", description="Filler word matching mode")
    column_type: Literal["conversation-feedback"] = "conversation-feedback"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f5e3"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []

    def parameters(self) -> ScoringParameters:
        if self.filler_match == DEFAULT_PARAMETERS.filler_match:
            return DEFAULT_PARAMETERS
        return ScoringParameters(filler_match=self.filler_match)
