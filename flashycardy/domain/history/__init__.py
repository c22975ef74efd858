"""British history question answering over a static knowledge table."""

from flashycardy.domain.history.answer_resolver import HistoryAnswer, HistoryAnswerResolver
from flashycardy.domain.history.knowledge_base import KNOWLEDGE_BASE, KnowledgeEntry
from flashycardy.domain.history.question_classifier import QuestionIntent, classify_question

__all__ = [
    "KNOWLEDGE_BASE",
    "HistoryAnswer",
    "HistoryAnswerResolver",
    "KnowledgeEntry",
    "QuestionIntent",
    "classify_question",
]
