"""Field extraction for resumes."""

from __future__ import annotations

import logging
import re

from career_advisor.config import AppConfig
from career_advisor.dictionaries import KeywordDictionary, default_dictionary
from career_advisor.models.resume import ResumeProfile, WritingQuality
from career_advisor.parsers.job_extractor import extract_experience_years
from career_advisor.parsers.rules import find_terms

logger = logging.getLogger(__name__)

YEAR_TOKEN = re.compile(r"\b(?:19|20)\d{2}\b")

ACHIEVEMENT_PATTERNS = [
    re.compile(
        r"\b(?:increased|improved|reduced|optimized|enhanced|delivered|achieved"
        r"|generated|saved|grew|built|led|managed)\b[^.!?]*[.!?]",
        re.IGNORECASE,
    ),
    re.compile(r"\d+%[^.!?]*[.!?]"),
    re.compile(r"\$[\d,]+[^.!?]*[.!?]"),
    re.compile(
        r"\d+\+?\s*(?:users|customers|clients|projects|team members)[^.!?]*[.!?]",
        re.IGNORECASE,
    ),
]
MATCHES_PER_PATTERN = 2

SENTENCE_SPLIT = re.compile(r"[.!?]+")


def estimate_experience_years(text: str) -> int:
    """Roughly two year mentions per position held."""
    return max(1, len(YEAR_TOKEN.findall(text)) // 2)


def extract_total_experience(text: str) -> tuple[int, str]:
    years = extract_experience_years(text)
    if years is not None:
        return years, "explicit"
    estimate = estimate_experience_years(text)
    logger.debug("No explicit experience statement, estimated %d years", estimate)
    return estimate, "estimated"


def extract_achievements(text: str, limit: int = 8) -> list[str]:
    achievements: list[str] = []
    for pattern in ACHIEVEMENT_PATTERNS:
        for match in pattern.findall(text)[:MATCHES_PER_PATTERN]:
            sentence = " ".join(match.split())
            if sentence and sentence not in achievements:
                achievements.append(sentence)
    return achievements[:limit]


def _lines_with(text: str, keywords: list[str], limit: int) -> list[str]:
    lines = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and any(k in stripped.lower() for k in keywords):
            lines.append(stripped)
    return lines[:limit]


def extract_education(text: str, dictionary: KeywordDictionary | None = None, limit: int = 3) -> list[str]:
    dictionary = dictionary or default_dictionary()
    return _lines_with(text, dictionary.education_keywords, limit)


def extract_certifications(
    text: str, dictionary: KeywordDictionary | None = None, limit: int = 5
) -> list[str]:
    dictionary = dictionary or default_dictionary()
    return _lines_with(text, dictionary.certification_keywords, limit)


def count_action_verbs(text: str, dictionary: KeywordDictionary | None = None) -> int:
    """Number of distinct action verbs from the vocabulary present in text."""
    dictionary = dictionary or default_dictionary()
    text_lower = text.lower()
    return sum(1 for verb in dictionary.action_verbs if verb.lower() in text_lower)


def analyze_writing_quality(text: str, dictionary: KeywordDictionary | None = None) -> WritingQuality:
    sentences = [s for s in SENTENCE_SPLIT.split(text) if s.strip()]
    if sentences:
        avg = sum(len(s.split()) for s in sentences) / len(sentences)
    else:
        avg = 0.0
    readability = min(100, max(0, round(100 - (avg - 15) * 2)))
    return WritingQuality(
        avg_sentence_length=round(avg, 2),
        action_verb_count=count_action_verbs(text, dictionary),
        readability_score=readability,
    )


def extract_resume_profile(
    text: str,
    dictionary: KeywordDictionary | None = None,
    config: AppConfig | None = None,
) -> ResumeProfile:
    """Extract experience, skills, achievements and writing metrics from a resume."""
    dictionary = dictionary or default_dictionary()
    config = config or AppConfig()
    limits = config.limits

    years, source = extract_total_experience(text)
    profile = ResumeProfile(
        total_experience_years=years,
        experience_source=source,
        skills=find_terms(text, dictionary.all_skills()),
        achievements=extract_achievements(text, limits.achievements),
        education=extract_education(text, dictionary, limits.education),
        certifications=extract_certifications(text, dictionary, limits.certifications),
        writing_quality=analyze_writing_quality(text, dictionary),
        raw_text=text,
    )
    logger.debug(
        "Resume profile: %d years (%s), %d skills, %d achievements",
        profile.total_experience_years,
        profile.experience_source,
        len(profile.skills),
        len(profile.achievements),
    )
    return profile
