"""Keyword dictionaries: skills, vocabularies and lookup tables."""

from career_advisor.dictionaries.loader import (
    INDUSTRIES,
    KeywordDictionary,
    SalaryBand,
    default_dictionary,
    load_dictionary,
)

__all__ = [
    "INDUSTRIES",
    "KeywordDictionary",
    "SalaryBand",
    "default_dictionary",
    "load_dictionary",
]
