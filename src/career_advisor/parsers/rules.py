"""Ordered regex extraction rules with constant fallbacks."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _first_group(match: re.Match) -> str | None:
    value = match.group(1).strip()
    return value or None


@dataclass(frozen=True)
class ExtractionRule(Generic[T]):
    """A named pattern plus a function turning its match into a value.

    The extractor may return None to reject a match, in which case the next
    rule in the chain is tried.
    """

    name: str
    pattern: re.Pattern
    extract: Callable[[re.Match], T | None] = _first_group

    def apply(self, text: str) -> T | None:
        for match in self.pattern.finditer(text):
            value = self.extract(match)
            if value is not None:
                return value
        return None


def first_match(rules: Sequence[ExtractionRule[T]], text: str, default: T) -> T:
    """Return the value of the first rule that yields one, else the default."""
    for rule in rules:
        value = rule.apply(text)
        if value is not None:
            logger.debug("Rule %s matched: %r", rule.name, value)
            return value
    logger.debug("No rule matched, using default %r", default)
    return default


def find_occurrences(text_lower: str, needle: str) -> list[tuple[int, int]]:
    """All (start, end) spans of needle in text_lower, overlapping allowed."""
    spans = []
    if not needle:
        return spans
    start = text_lower.find(needle)
    while start != -1:
        spans.append((start, start + len(needle)))
        start = text_lower.find(needle, start + 1)
    return spans


def term_variants(term: str) -> set[str]:
    """Lower-cased spellings a dictionary term is searched under."""
    lower = term.lower()
    return {
        lower,
        re.sub(r"\s+", "", lower),
        re.sub(r"[.\-]", "", lower),
    }


def find_terms(text: str, terms: Sequence[str]) -> list[str]:
    """Dictionary terms contained in text, case-insensitively, in dictionary order.

    Plain substring containment: no stemming and no word boundaries, so short
    terms can fire inside longer words. A term is dropped only when every one
    of its occurrences sits inside an occurrence of a longer matched term
    (Java inside JavaScript).
    """
    text_lower = text.lower()
    spans: dict[str, list[tuple[int, int]]] = {}
    for term in dict.fromkeys(terms):
        found: set[tuple[int, int]] = set()
        for variant in term_variants(term):
            found.update(find_occurrences(text_lower, variant))
        if found:
            spans[term] = sorted(found)

    def covered(span: tuple[int, int], owner: str) -> bool:
        start, end = span
        for other, other_spans in spans.items():
            if other == owner:
                continue
            for o_start, o_end in other_spans:
                if o_start <= start and end <= o_end and (o_end - o_start) > (end - start):
                    return True
        return False

    return [
        term
        for term, term_spans in spans.items()
        if not all(covered(span, term) for span in term_spans)
    ]
