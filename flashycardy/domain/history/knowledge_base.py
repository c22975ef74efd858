"""Static British history knowledge table.

Entries are kept in a tuple because lookup is first-match-wins and the
order below is the tie-break between overlapping keys and aliases.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

AliasRule = Callable[[str], bool]


def any_of(*phrases: str) -> AliasRule:
    """Alias rule matching if any phrase occurs in the question."""
    return lambda question: any(phrase in question for phrase in phrases)


def all_of(*rules: AliasRule) -> AliasRule:
    """Alias rule matching only if every sub-rule matches."""
    return lambda question: all(rule(question) for rule in rules)


@dataclass(frozen=True)
class KnowledgeEntry:
    """One canonical person or event and the facts known about it."""

    key: str
    facts: Mapping[str, str | tuple[str, ...]]
    aliases: tuple[AliasRule, ...] = field(default=(), compare=False)

    def matches(self, question: str) -> bool:
        """Whether a lowercased question refers to this entry."""
        if self.key in question:
            return True
        return any(rule(question) for rule in self.aliases)

    @property
    def is_event(self) -> bool:
        return "who" not in self.facts

    def fact(self, name: str) -> str | None:
        value = self.facts.get(name)
        if isinstance(value, tuple):
            return ", ".join(value)
        return value


def _entry(key: str, *aliases: AliasRule, **facts: str | tuple[str, ...]) -> KnowledgeEntry:
    return KnowledgeEntry(key=key, facts=MappingProxyType(dict(facts)), aliases=aliases)


KNOWLEDGE_BASE: Final[tuple[KnowledgeEntry, ...]] = (
    # Historical figures
    _entry(
        "winston churchill",
        any_of("churchill"),
        who="Winston Churchill",
        what="British Prime Minister during World War II",
        when_born="30 November 1874",
        when_died="24 January 1965",
        where_born="Blenheim Palace, Oxfordshire",
        famous_for="Leading Britain during World War II",
        achievements=(
            "World War II leadership",
            "Nobel Prize in Literature",
            "Iron Curtain speech",
        ),
    ),
    _entry(
        "margaret thatcher",
        any_of("thatcher", "iron lady"),
        who="Margaret Thatcher",
        what="British Prime Minister (1979-1990)",
        when_born="13 October 1925",
        when_died="8 April 2013",
        where_born="Grantham, Lincolnshire",
        famous_for="First female British Prime Minister, known as the Iron Lady",
        achievements=("Falklands War victory", "Economic reforms", "Cold War diplomacy"),
    ),
    _entry(
        "elizabeth i",
        any_of("elizabeth", "virgin queen"),
        who="Elizabeth I",
        what="Queen of England (1558-1603)",
        when_born="7 September 1533",
        when_died="24 March 1603",
        where_born="Greenwich Palace",
        famous_for="The Virgin Queen, Elizabethan Golden Age",
        achievements=("Defeated Spanish Armada", "Elizabethan Renaissance", "Never married"),
    ),
    _entry(
        "henry viii",
        all_of(any_of("henry"), any_of("viii", "8th", "six wives")),
        who="Henry VIII",
        what="King of England (1509-1547)",
        when_born="28 June 1491",
        when_died="28 January 1547",
        where_born="Greenwich Palace",
        famous_for="Having six wives and breaking with Rome",
        achievements=("Founded Church of England", "Dissolved monasteries", "Six marriages"),
    ),
    _entry(
        "charles darwin",
        any_of("darwin", "evolution"),
        who="Charles Darwin",
        what="British naturalist and biologist",
        when_born="12 February 1809",
        when_died="19 April 1882",
        where_born="Shrewsbury, Shropshire",
        famous_for="Theory of evolution by natural selection",
        achievements=("On the Origin of Species", "Theory of Evolution", "Voyage of the Beagle"),
    ),
    _entry(
        "william shakespeare",
        any_of("shakespeare", "playwright"),
        who="William Shakespeare",
        what="English playwright and poet",
        when_born="26 April 1564",
        when_died="23 April 1616",
        where_born="Stratford-upon-Avon",
        famous_for="Greatest writer in the English language",
        achievements=("Hamlet", "Romeo and Juliet", "Macbeth", "39 plays, 154 sonnets"),
    ),
    _entry(
        "isaac newton",
        any_of("newton"),
        who="Isaac Newton",
        what="English mathematician and physicist",
        when_born="25 December 1642",
        when_died="20 March 1727",
        where_born="Woolsthorpe, Lincolnshire",
        famous_for="Laws of motion and universal gravitation",
        achievements=("Principia Mathematica", "Laws of Motion", "Calculus", "Optics"),
    ),
    _entry(
        "captain cook",
        all_of(any_of("cook"), any_of("captain", "explorer")),
        who="Captain James Cook",
        what="British explorer and navigator",
        when_born="7 November 1728",
        when_died="14 February 1779",
        where_born="Marton, Yorkshire",
        famous_for="Exploring the Pacific Ocean and mapping Australia",
        achievements=("Three Pacific voyages", "Mapped Australia", "Discovered Hawaii"),
    ),
    # Battles and events
    _entry(
        "battle of waterloo",
        what="Battle of Waterloo",
        when="18 June 1815",
        where="Waterloo, Belgium",
        who_won="Duke of Wellington",
        who_lost="Napoleon Bonaparte",
        significance="Final defeat of Napoleon",
    ),
    _entry(
        "battle of hastings",
        what="Battle of Hastings",
        when="14 October 1066",
        where="Hastings, East Sussex",
        who_won="William the Conqueror",
        who_lost="King Harold II",
        significance="Norman Conquest of England",
    ),
    _entry(
        "great fire of london",
        what="Great Fire of London",
        when="2-6 September 1666",
        where="City of London",
        started="Pudding Lane",
        cause="Bakery fire",
        result="Rebuilt by Christopher Wren",
    ),
    _entry(
        "spanish armada",
        what="Spanish Armada",
        when="1588",
        where="English Channel",
        who_won="England",
        commander="Francis Drake",
        significance="Established English naval supremacy",
    ),
)


@dataclass(frozen=True)
class SpecialCase:
    """Fallback answers for keyword pairs that no table entry caught."""

    name: str
    keywords: tuple[str, ...]
    answers: Mapping[str, str]

    def matches(self, question: str) -> bool:
        return all(keyword in question for keyword in self.keywords)


SPECIAL_CASES: Final[tuple[SpecialCase, ...]] = (
    SpecialCase(
        name="waterloo",
        keywords=("waterloo", "napoleon"),
        answers=MappingProxyType(
            {"who": "Duke of Wellington", "when": "18 June 1815", "where": "Waterloo, Belgium"}
        ),
    ),
    SpecialCase(
        name="hastings",
        keywords=("hastings",),
        answers=MappingProxyType(
            {
                "who": "William the Conqueror",
                "when": "14 October 1066",
                "where": "Hastings, East Sussex",
            }
        ),
    ),
)


def supported_figures() -> list[str]:
    """Display names of the people in the table, in lookup order."""
    return [str(entry.facts["who"]) for entry in KNOWLEDGE_BASE if not entry.is_event]


def supported_events() -> list[str]:
    """Display names of the events in the table, in lookup order."""
    return [str(entry.facts["what"]) for entry in KNOWLEDGE_BASE if entry.is_event]
