"""Resume-to-job skill matching."""

from __future__ import annotations

import re
from typing import Literal

from career_advisor.models.scores import SkillsAnalysis

MatchMode = Literal["substring", "token"]

_TOKEN_SPLIT = re.compile(r"[\s/,]+")


def _substring_match(resume_skill: str, job_skill: str) -> bool:
    a, b = resume_skill.lower(), job_skill.lower()
    return a == b or b in a or a in b


def _token_match(resume_skill: str, job_skill: str) -> bool:
    a = [t for t in _TOKEN_SPLIT.split(resume_skill.lower()) if t]
    b = [t for t in _TOKEN_SPLIT.split(job_skill.lower()) if t]
    return a == b


def skill_matches(resume_skill: str, job_skill: str, mode: MatchMode = "substring") -> bool:
    """Whether a resume skill satisfies a job skill.

    ``substring`` (the default) accepts equality or containment in either
    direction, so "Java" satisfies "JavaScript". ``token`` requires the
    lower-cased token sequences to be equal.
    """
    if mode == "token":
        return _token_match(resume_skill, job_skill)
    return _substring_match(resume_skill, job_skill)


def match_skills(
    resume_skills: list[str],
    job_skills: list[str],
    mode: MatchMode = "substring",
) -> SkillsAnalysis:
    job = list(dict.fromkeys(job_skills))
    matched = [
        skill for skill in job if any(skill_matches(r, skill, mode) for r in resume_skills)
    ]
    missing = [skill for skill in job if skill not in matched]
    percentage = 100.0 * len(matched) / len(job) if job else 100.0
    return SkillsAnalysis(
        resume_skills=list(resume_skills),
        job_skills=job,
        matched_skills=matched,
        missing_skills=missing,
        match_percentage=percentage,
    )
