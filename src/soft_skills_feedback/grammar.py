"""Heuristic grammar checks over a transcript.

Two lexical checks only: adjacent repeated words and the ``was were``
phrase. This is not a grammar parser.
"""

from __future__ import annotations

WAS_WERE_PHRASE = "was were"
WAS_WERE_ISSUE = 'Incorrect use of "was" and "were".'


def _repeated_word_issues(text: str) -> list[str]:
    words = text.split(" ")
    issues: list[str] = []
    for left, right in zip(words, words[1:]):
        # consecutive spaces or tabs and newlines yield blank tokens; those are not words
        if left.strip() and left.lower() == right.lower():
            issues.append(f'Repeated word: "{left}".')
    return issues


def check_grammar(text: str) -> list[str]:
    """Return grammar issue descriptions for ``text`` in detection order."""
    issues = _repeated_word_issues(text)
    if WAS_WERE_PHRASE in text:
        issues.append(WAS_WERE_ISSUE)
    return issues
