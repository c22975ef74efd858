"""Resolve a history question against the static knowledge table."""

from dataclasses import dataclass

from flashycardy.domain.history.knowledge_base import (
    KNOWLEDGE_BASE,
    SPECIAL_CASES,
    KnowledgeEntry,
    SpecialCase,
)
from flashycardy.domain.history.question_classifier import (
    QuestionIntent,
    classify_question,
    mentions_birth,
    mentions_death,
)
from flashycardy.exceptions import NoAnswerFoundError

NO_ANSWER_HINT = (
    "I couldn't find an answer for that question. Try asking 'Who was...?', "
    "'When was... born?', 'What did... do?', or 'Where was... born?'"
)

NO_ANSWER_SUGGESTIONS = [
    "Try questions about famous battles (e.g., Waterloo, Hastings)",
    "Ask about monarchs (e.g., Henry VIII, Elizabeth I)",
    "Questions about historical events (e.g., Great Fire of London)",
    "Prime Ministers (e.g., Churchill, Thatcher)",
]

BIRTH_DATE_MISSING = "Birth date not available"
DEATH_DATE_MISSING = "Death date not available"
BIRTHPLACE_MISSING = "Birthplace not available"
DATE_MISSING = "Date not available"
LOCATION_MISSING = "Location not available"
INFO_MISSING = "Information not available"


@dataclass(frozen=True)
class HistoryAnswer:
    """A resolved answer and how it was reached."""

    answer: str
    intent: QuestionIntent
    matched: str


def _first(entry: KnowledgeEntry, *names: str, default: str | None = None) -> str | None:
    for name in names:
        value = entry.fact(name)
        if value:
            return value
    return default


def render_answer(entry: KnowledgeEntry, intent: QuestionIntent, question: str) -> str:
    """Pick the fact for ``intent`` from ``entry``, walking its fallback chain."""
    match intent:
        case QuestionIntent.WHEN_BORN:
            answer = _first(entry, "when_born", default=BIRTH_DATE_MISSING)
        case QuestionIntent.WHEN_DIED:
            answer = _first(entry, "when_died", default=DEATH_DATE_MISSING)
        case QuestionIntent.WHERE_BORN:
            answer = _first(entry, "where_born", default=BIRTHPLACE_MISSING)
        case QuestionIntent.FAMOUS_FOR:
            answer = _first(entry, "famous_for", "what", "significance")
        case QuestionIntent.WHO:
            # Events have no "who"; the winner is the closest person to name
            answer = _first(entry, "who", "who_won", "what")
        case QuestionIntent.WHAT:
            answer = _first(entry, "what", "famous_for")
        case QuestionIntent.WHEN:
            if mentions_birth(question):
                answer = _first(entry, "when_born", default=BIRTH_DATE_MISSING)
            elif mentions_death(question):
                answer = _first(entry, "when_died", default=DEATH_DATE_MISSING)
            else:
                answer = _first(entry, "when", "when_born", default=DATE_MISSING)
        case QuestionIntent.WHERE:
            if mentions_birth(question):
                answer = _first(entry, "where_born", default=BIRTHPLACE_MISSING)
            else:
                answer = _first(entry, "where", "where_born", default=LOCATION_MISSING)
    return answer or _first(entry, "who", "what", "famous_for", default=INFO_MISSING) or ""


class HistoryAnswerResolver:
    """Answer British history questions from ``KNOWLEDGE_BASE``.

    Pure and deterministic: the same question always yields the same answer.
    Resolution order:

    1. Table entries in declaration order; the first whose key is a
       substring of the question, or whose alias rule fires, answers.
    2. Special-case keyword pairs, for who/when/where intents only.
    3. ``NoAnswerFoundError``.
    """

    def __init__(
        self,
        entries: tuple[KnowledgeEntry, ...] = KNOWLEDGE_BASE,
        special_cases: tuple[SpecialCase, ...] = SPECIAL_CASES,
    ) -> None:
        self.entries = entries
        self.special_cases = special_cases

    def find_entry(self, question: str) -> KnowledgeEntry | None:
        normalized = question.strip().lower()
        for entry in self.entries:
            if entry.matches(normalized):
                return entry
        return None

    def resolve(self, question: str) -> HistoryAnswer:
        """
        Resolve a question to a single fact string.

        Raises:
            NoAnswerFoundError: If no entry or special case can answer it
        """
        normalized = question.strip().lower()
        intent = classify_question(normalized)

        entry = self.find_entry(normalized)
        if entry is not None:
            return HistoryAnswer(
                answer=render_answer(entry, intent, normalized),
                intent=intent,
                matched=entry.key,
            )

        for case in self.special_cases:
            if case.matches(normalized) and intent.value in case.answers:
                return HistoryAnswer(
                    answer=case.answers[intent.value],
                    intent=intent,
                    matched=case.name,
                )

        raise NoAnswerFoundError(NO_ANSWER_HINT, suggestions=list(NO_ANSWER_SUGGESTIONS))
