import json

import pytest

from soft_skills_feedback import AnalysisResult, analyze
from soft_skills_feedback.grammar import WAS_WERE_ISSUE
from soft_skills_feedback.scoring import ADVANCED_LECTURE, DEFAULT_TIPS


RAMBLING_TEXT = (
    "So um I think the the project went well overall and uh we were able to "
    "finish most of the tasks on time although I was were not sure about the last part"
)

LONG_CLEAN_TEXT = " ".join(
    "The quarterly review covered revenue targets hiring plans and the new office move".split() * 9
)


class TestAnalyze:
    def test_merges_scorer_and_grammar_output(self):
        result = analyze(RAMBLING_TEXT)
        assert result.feedback_summary == "Confidence Level: 3/10"
        assert result.tips == 'Try to avoid saying "um". Try to avoid saying "uh".'
        assert result.grammar_issues == ('Repeated word: "the".', WAS_WERE_ISSUE)
        assert [r.title for r in result.lecture_suggestions] == [
            "Improving Speech Fluency",
            "Improving Speech Fluency",
            "Building Confidence in Public Speaking",
        ]
        assert [r.title for r in result.assignment_suggestions] == [
            "Speech Practice Assignment",
            "Speech Practice Assignment",
            "Confidence Building Exercise",
        ]

    def test_long_clean_text(self):
        result = analyze(LONG_CLEAN_TEXT)
        assert result.confidence_level == 6
        assert result.tips == DEFAULT_TIPS
        assert result.grammar_issues == ()
        assert result.lecture_suggestions == (ADVANCED_LECTURE,)
        assert result.assignment_suggestions == ()

    @pytest.mark.parametrize("text", ["", "   ", "\t", "\t \t", "\n \n"])
    def test_degenerate_input(self, text):
        result = analyze(text)
        assert result.confidence_level == 4
        assert result.tips == DEFAULT_TIPS
        assert result.grammar_issues == ()
        assert result.assignment_suggestions == ()

    def test_is_deterministic(self):
        first = json.dumps(analyze(RAMBLING_TEXT).to_payload())
        second = json.dumps(analyze(RAMBLING_TEXT).to_payload())
        assert first == second


class TestPayload:
    def test_payload_shape(self):
        payload = analyze(RAMBLING_TEXT).to_payload()
        assert set(payload) == {
            "feedbackSummary",
            "tipsText",
            "lectureSuggestions",
            "assignmentSuggestions",
            "grammarIssues",
        }
        for rec in payload["lectureSuggestions"] + payload["assignmentSuggestions"]:
            assert set(rec) == {"title", "description", "link"}
            assert rec["link"] == "#"

    def test_json_round_trip(self):
        result = analyze(RAMBLING_TEXT)
        decoded = AnalysisResult.from_payload(json.loads(json.dumps(result.to_payload())))
        assert decoded == result

    def test_malformed_summary_rejected(self):
        payload = analyze("").to_payload()
        payload["feedbackSummary"] = "Confidence: high"
        with pytest.raises(ValueError):
            AnalysisResult.from_payload(payload)
