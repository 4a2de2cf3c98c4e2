"""Compatibility scoring.

Four sub-scores, each an int in [0, 100], combined into a weighted overall
score. Rounding is half-up throughout so a 72.5 reads as 73.
"""

from __future__ import annotations

import logging
import math
import re
import string

from career_advisor.config import AppConfig, ATSConfig, ScoreWeights
from career_advisor.dictionaries import KeywordDictionary, default_dictionary
from career_advisor.models.scores import CompatibilityScores, SkillsAnalysis
from career_advisor.parsers.resume_extractor import count_action_verbs

logger = logging.getLogger(__name__)

QUANTIFIABLE_PATTERN = re.compile(
    r"\d+%|\d+\+|increased|improved|reduced|achieved|generated|\$[\d,]+",
    re.IGNORECASE,
)
BULLET_MARKERS = ("•", "-", "*")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def ats_score(
    resume_text: str,
    dictionary: KeywordDictionary | None = None,
    ats: ATSConfig | None = None,
) -> int:
    """Heuristic ATS friendliness: start at 100 and deduct per failed check."""
    dictionary = dictionary or default_dictionary()
    ats = ats or ATSConfig()
    text_lower = resume_text.lower()
    score = 100

    keyword_hits = sum(1 for k in dictionary.ats_keywords if k.lower() in text_lower)
    if keyword_hits < ats.min_keywords:
        score -= ats.keyword_penalty
    if len(resume_text) < ats.min_length:
        score -= ats.short_penalty
    if len(resume_text) > ats.max_length:
        score -= ats.long_penalty
    if not QUANTIFIABLE_PATTERN.search(resume_text):
        score -= ats.metrics_penalty
    if count_action_verbs(resume_text, dictionary) < ats.min_action_verbs:
        score -= ats.action_verb_penalty
    if not any(marker in resume_text for marker in BULLET_MARKERS):
        score -= ats.bullet_penalty

    return clamp_score(score)


def vocabulary_tokens(text: str, stop_words: list[str]) -> list[str]:
    """Distinct job-text tokens longer than three characters, minus stop words."""
    stop = {w.lower() for w in stop_words}
    tokens: dict[str, None] = {}
    for raw in text.lower().split():
        token = raw.strip(string.punctuation + "“”‘’•")
        if len(token) > 3 and token not in stop:
            tokens.setdefault(token, None)
    return list(tokens)


def keyword_density_score(
    resume_text: str,
    job_text: str,
    dictionary: KeywordDictionary | None = None,
) -> int:
    dictionary = dictionary or default_dictionary()
    tokens = vocabulary_tokens(job_text, dictionary.stop_words)
    if not tokens:
        return 0
    resume_lower = resume_text.lower()
    found = sum(1 for token in tokens if token in resume_lower)
    return clamp_score(100 * found / len(tokens))


def experience_alignment_score(candidate_years: int, required_years: int) -> int:
    if required_years <= 0:
        return 100
    return clamp_score(min(100, 100 * candidate_years / required_years))


def skills_match_score(skills: SkillsAnalysis) -> int:
    return clamp_score(skills.match_percentage)


def overall_score(
    ats: int,
    keyword_density: int,
    experience_alignment: int,
    skills_match: int,
    weights: ScoreWeights | None = None,
) -> int:
    weights = weights or ScoreWeights()
    total = (
        weights.ats * ats
        + weights.keyword_density * keyword_density
        + weights.experience_alignment * experience_alignment
        + weights.skills_match * skills_match
    )
    # Float products like 0.3 * 85 drift below the .5 boundary
    return clamp_score(round(total, 6))


def compute_scores(
    resume_text: str,
    job_text: str,
    candidate_years: int,
    required_years: int,
    skills: SkillsAnalysis,
    dictionary: KeywordDictionary | None = None,
    config: AppConfig | None = None,
) -> CompatibilityScores:
    dictionary = dictionary or default_dictionary()
    config = config or AppConfig()

    ats = ats_score(resume_text, dictionary, config.ats)
    density = keyword_density_score(resume_text, job_text, dictionary)
    experience = experience_alignment_score(candidate_years, required_years)
    skills_score = skills_match_score(skills)
    overall = overall_score(ats, density, experience, skills_score, config.scoring.weights)

    logger.debug(
        "Scores: ats=%d keyword=%d experience=%d skills=%d overall=%d",
        ats,
        density,
        experience,
        skills_score,
        overall,
    )
    return CompatibilityScores(
        ats=ats,
        keyword_density=density,
        experience_alignment=experience,
        skills_match=skills_score,
        overall=overall,
    )
