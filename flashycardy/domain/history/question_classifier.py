"""Classify a free-text question into the fact it is asking for."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class QuestionIntent(StrEnum):
    """Which fact field a question is after."""

    WHEN_BORN = "when_born"
    WHEN_DIED = "when_died"
    WHERE_BORN = "where_born"
    FAMOUS_FOR = "famous_for"
    WHEN = "when"
    WHERE = "where"
    WHAT = "what"
    WHO = "who"


# Birth words match anywhere ("birthplace", "reborn"); death words need whole words
_BIRTH_WORDS = re.compile(r"born|birth")
_DEATH_WORDS = re.compile(r"\b(die|died|dies|death)\b")


def mentions_birth(question: str) -> bool:
    return _BIRTH_WORDS.search(question) is not None


def mentions_death(question: str) -> bool:
    return _DEATH_WORDS.search(question) is not None


def _asks(word: str) -> Callable[[str], bool]:
    # Leading question word, or the word followed by a common auxiliary anywhere
    phrases = (f"{word} was", f"{word} did") if word != "who" else ("who was", "who is")

    def check(question: str) -> bool:
        return question.startswith(f"{word} ") or any(p in question for p in phrases)

    return check


@dataclass(frozen=True)
class IntentRule:
    """A single classification rule; rules are tried in order."""

    intent: QuestionIntent
    test: Callable[[str], bool]


# Compound patterns come before bare question words so that
# "when was X born" resolves to WHEN_BORN rather than WHEN.
INTENT_RULES: Final[tuple[IntentRule, ...]] = (
    IntentRule(QuestionIntent.WHEN_BORN, lambda q: "when" in q and mentions_birth(q)),
    IntentRule(QuestionIntent.WHEN_DIED, lambda q: "when" in q and mentions_death(q)),
    IntentRule(QuestionIntent.WHERE_BORN, lambda q: "where" in q and mentions_birth(q)),
    IntentRule(QuestionIntent.FAMOUS_FOR, lambda q: "famous for" in q or "known for" in q),
    IntentRule(QuestionIntent.WHEN, _asks("when")),
    IntentRule(QuestionIntent.WHERE, _asks("where")),
    IntentRule(QuestionIntent.WHAT, _asks("what")),
    IntentRule(QuestionIntent.FAMOUS_FOR, _asks("why")),
    IntentRule(QuestionIntent.WHO, _asks("who")),
)


def classify_question(question: str) -> QuestionIntent:
    """Return the intent of the first matching rule, or WHO if none match."""
    normalized = question.strip().lower()
    for rule in INTENT_RULES:
        if rule.test(normalized):
            return rule.intent
    return QuestionIntent.WHO
