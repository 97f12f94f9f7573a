from soft_skills_feedback.grammar import WAS_WERE_ISSUE, check_grammar


class TestCheckGrammar:
    def test_clean_text_has_no_issues(self):
        assert check_grammar("The committee met on Tuesday and approved the budget.") == []

    def test_repeated_words_in_scan_order(self):
        assert check_grammar("the the cat cat cat") == [
            'Repeated word: "the".',
            'Repeated word: "cat".',
            'Repeated word: "cat".',
        ]

    def test_repetition_is_case_insensitive_and_keeps_left_spelling(self):
        assert check_grammar("The the end") == ['Repeated word: "The".']

    def test_punctuation_breaks_repetition(self):
        assert check_grammar("yes, yes") == []

    def test_was_were_phrase(self):
        issues = check_grammar("I was were confused")
        assert issues == [WAS_WERE_ISSUE]
        assert "was" in issues[0] and "were" in issues[0]

    def test_was_were_is_case_sensitive(self):
        assert check_grammar("I Was Were confused") == []

    def test_was_were_matches_inside_words(self):
        assert check_grammar("it was werewolves") == [WAS_WERE_ISSUE]

    def test_phrase_issue_comes_last(self):
        assert check_grammar("was were so so") == ['Repeated word: "so".', WAS_WERE_ISSUE]

    def test_empty_text(self):
        assert check_grammar("") == []

    def test_blank_tokens_are_not_repeated_words(self):
        assert check_grammar("   ") == []
        assert check_grammar("hello    world") == []
        assert check_grammar("\t \t") == []
        assert check_grammar("\n \n") == []
