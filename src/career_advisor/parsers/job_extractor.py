"""Field extraction for job postings.

Every extractor is best-effort: a miss falls back to a configured default and
nothing here raises on odd input.
"""

from __future__ import annotations

import logging
import re

from career_advisor.config import AppConfig
from career_advisor.dictionaries import INDUSTRIES, KeywordDictionary, default_dictionary
from career_advisor.models.job import JobPosting, SalaryRange
from career_advisor.parsers.rules import ExtractionRule, find_terms, first_match

logger = logging.getLogger(__name__)

# A period counts only inside a word ("Monday.com"), so names end at a full stop.
_WORD = r"[A-Z][\w&']*(?:\.\w[\w&']*)*"
_NAME = _WORD + r"(?:[ \t]+(?:&[ \t]+)?" + _WORD + ")*"


def _clean_company(match: re.Match) -> str | None:
    value = match.group(1).strip()
    return value or None


COMPANY_RULES = [
    ExtractionRule(
        "company-keyword",
        re.compile(r"\b(?i:at|join|company|organization):?[ \t]+(" + _NAME + ")"),
        _clean_company,
    ),
    ExtractionRule(
        "company-is-hiring",
        re.compile(r"(" + _NAME + r")\.?[ \t]+is[ \t]+(?i:looking|seeking|hiring)"),
        _clean_company,
    ),
]

TITLE_RULES = [
    ExtractionRule(
        "title-label",
        re.compile(r"(?i)\b(?:position|role|job|title):[ \t]*([^\n\r]+)"),
    ),
    ExtractionRule(
        "title-first-line",
        re.compile(r"\A\s*([^\n\r]+?)[ \t]+(?:[-–—]|(?i:at|position)\b)"),
        lambda m: m.group(1).strip() if len(m.group(1)) <= 80 else None,
    ),
    ExtractionRule(
        "title-hiring",
        re.compile(
            r"(?i)\bhiring[ \t]+(?:an?[ \t]+)?([^\n\r,.!]+?)(?=[ \t]+(?:to|who|with|for)\b|[,.!\n\r]|$)"
        ),
    ),
]

LOCATION_RULES = [
    ExtractionRule(
        "location-label",
        re.compile(r"(?i)\blocation[ \t]*:[ \t]*([^\n\r]+)"),
    ),
    ExtractionRule(
        "location-based-in",
        re.compile(
            r"\b(?i:based|located|office)[ \t]+in[ \t]+"
            r"([A-Z][a-zA-Z]+(?:[ \t]+[A-Z][a-zA-Z]+)*(?:,[ \t]*[A-Z]{2})?)"
        ),
    ),
]

EXPERIENCE_PATTERN = re.compile(
    r"(\d+)[+-]?\s*(?:to\s*\d+\s*)?years?\s*(?:of\s*)?(?:experience|exp)",
    re.IGNORECASE,
)

SALARY_PATTERN = re.compile(
    r"(\$)?[ \t]?(\d[\d,]*)[ \t]*(k)?[ \t]*(?:-|–|to)[ \t]*(\$)?[ \t]?(\d[\d,]*)[ \t]*(k)?\b",
    re.IGNORECASE,
)

PREFERRED_MARKERS = re.compile(r"(?i)\b(?:preferred|nice[ -]to[ -]have|bonus|plus)\b")
BULLET_PATTERN = re.compile(r"^\s*(?:[•\-\*]|\d+[.)])\s+")


def _salary_from_match(match: re.Match) -> SalaryRange | None:
    low_dollar, low_raw, low_k, high_dollar, high_raw, high_k = match.groups()
    try:
        low = int(low_raw.replace(",", ""))
        high = int(high_raw.replace(",", ""))
    except ValueError:
        return None
    if low_k or (high_k and low < 1000):
        low *= 1000
    if high_k:
        high *= 1000
    has_marker = bool(low_dollar or high_dollar or low_k or high_k)
    if not has_marker and low < 10000:
        return None
    if low <= 0 or high < low:
        return None
    return SalaryRange(min=low, max=high, median=round((low + high) / 2))


def extract_company(text: str, default: str = "the company") -> str:
    return first_match(COMPANY_RULES, text, default)


def extract_job_title(text: str, default: str = "this position") -> str:
    return first_match(TITLE_RULES, text, default)


def extract_location(
    text: str,
    dictionary: KeywordDictionary | None = None,
    default: str = "Not specified",
) -> str:
    dictionary = dictionary or default_dictionary()
    found = first_match(LOCATION_RULES, text, None)
    if found is not None:
        return found
    text_lower = text.lower()
    for tier in dictionary.location_tiers:
        for city in tier.cities:
            if city in text_lower:
                return city.title()
    return default


def extract_experience_years(text: str) -> int | None:
    """Years from the first "N years of experience" phrase, or None."""
    match = EXPERIENCE_PATTERN.search(text)
    return int(match.group(1)) if match else None


def extract_salary_range(text: str) -> SalaryRange | None:
    rule = ExtractionRule("salary", SALARY_PATTERN, _salary_from_match)
    return first_match([rule], text, None)


def detect_industry(text: str, dictionary: KeywordDictionary | None = None) -> str:
    """Industry whose signal words appear most often; 'general' when none do."""
    dictionary = dictionary or default_dictionary()
    text_lower = text.lower()
    best, best_score = "general", 0
    for industry in INDUSTRIES:
        signals = dictionary.industry_signals.get(industry, [])
        score = sum(1 for word in signals if word.lower() in text_lower)
        if score > best_score:
            best, best_score = industry, score
    return best


def extract_skills(text: str, skills: list[str]) -> list[str]:
    return find_terms(text, skills)


def split_required_preferred(text: str, skills: list[str]) -> tuple[list[str], list[str]]:
    """Split found skills into required and preferred.

    A skill is preferred when it only shows up on lines carrying a preferred
    marker ("nice to have", "bonus", ...).
    """
    found = find_terms(text, skills)
    required_lines = [line for line in text.splitlines() if not PREFERRED_MARKERS.search(line)]
    in_required = set(find_terms("\n".join(required_lines), found))
    required = [s for s in found if s in in_required]
    preferred = [s for s in found if s not in in_required]
    return required, preferred


def extract_culture_keywords(text: str, dictionary: KeywordDictionary | None = None) -> list[str]:
    dictionary = dictionary or default_dictionary()
    text_lower = text.lower()
    return [word for word in dictionary.culture_keywords if word in text_lower]


def extract_responsibilities(text: str, limit: int = 8) -> list[str]:
    items = []
    for line in text.splitlines():
        if BULLET_PATTERN.match(line):
            item = BULLET_PATTERN.sub("", line).strip()
            if item:
                items.append(item)
    return items[:limit]


def extract_job_posting(
    text: str,
    dictionary: KeywordDictionary | None = None,
    config: AppConfig | None = None,
) -> JobPosting:
    """Extract every structured field from raw job-posting text."""
    dictionary = dictionary or default_dictionary()
    config = config or AppConfig()
    defaults = config.extraction

    industry = detect_industry(text, dictionary)
    required, preferred = split_required_preferred(text, dictionary.skills_for(industry))
    years = extract_experience_years(text)
    if years is None:
        years = defaults.default_required_experience

    posting = JobPosting(
        company=extract_company(text, defaults.default_company),
        job_title=extract_job_title(text, defaults.default_job_title),
        location=extract_location(text, dictionary, defaults.default_location),
        industry=industry,
        required_experience_years=years,
        salary_range=extract_salary_range(text),
        required_skills=required,
        preferred_skills=preferred,
        culture_keywords=extract_culture_keywords(text, dictionary),
        responsibilities=extract_responsibilities(text, config.limits.responsibilities),
        raw_text=text,
    )
    logger.debug(
        "Job posting: company=%s title=%s industry=%s skills=%d",
        posting.company,
        posting.job_title,
        posting.industry,
        len(posting.skills),
    )
    return posting
