"""Skills gap report and market commentary."""

from __future__ import annotations

from career_advisor.config import AppConfig
from career_advisor.dictionaries import KeywordDictionary, default_dictionary
from career_advisor.models.analysis import (
    Certification,
    LearningRecommendation,
    LearningResource,
    MarketAnalysis,
    SkillGap,
    SkillMatch,
    SkillsReport,
)
from career_advisor.models.job import JobPosting
from career_advisor.models.resume import ResumeProfile
from career_advisor.models.scores import SkillsAnalysis
from career_advisor.parsers.rules import find_occurrences, term_variants

STRONG_POSITION = (
    "You are positioned as a strong candidate with excellent technical alignment and "
    "experience that exceeds requirements. Your profile demonstrates clear value "
    "proposition for this role."
)
COMPETITIVE_POSITION = (
    "You are a competitive candidate with solid technical skills and relevant experience. "
    "Focus on highlighting your unique achievements to stand out."
)
DEVELOPING_POSITION = (
    "You have potential but may need to strengthen certain skills or gain more experience "
    "to be highly competitive. Consider the recommended action plan to improve your "
    "positioning."
)

LEARNING_COST = "Free - $50"
MAX_EVIDENCE = 2


def count_mentions(text: str, skill: str) -> int:
    text_lower = text.lower()
    spans: set[tuple[int, int]] = set()
    for variant in term_variants(skill):
        spans.update(find_occurrences(text_lower, variant))
    return len(spans)


def evidence_lines(text: str, skill: str) -> list[str]:
    variants = term_variants(skill)
    lines = [
        line.strip()
        for line in text.splitlines()
        if any(variant in line.lower() for variant in variants)
    ]
    return lines[:MAX_EVIDENCE] or [f"Experience with {skill}"]


def _skill_match(skill: str, job: JobPosting, resume: ResumeProfile, dictionary: KeywordDictionary) -> SkillMatch:
    mentions = max(1, count_mentions(resume.raw_text, skill))
    return SkillMatch(
        skill=skill,
        job_requirement="required" if skill in job.required_skills else "preferred",
        candidate_level="proficient" if skill in dictionary.skill_learning.common else "familiar",
        match_strength=90 + min(9, mentions - 1),
        evidence_from_resume=evidence_lines(resume.raw_text, skill),
    )


def _importance(skill: str, dictionary: KeywordDictionary) -> str:
    learning = dictionary.skill_learning
    if skill in learning.critical:
        return "critical"
    if skill in learning.important:
        return "important"
    return "beneficial"


def _skill_gap(skill: str, dictionary: KeywordDictionary) -> SkillGap:
    learning = dictionary.skill_learning
    return SkillGap(
        skill=skill,
        importance=_importance(skill, dictionary),
        time_to_acquire=learning.time_to_acquire.get(skill, learning.default_time),
        learning_resources=list(learning.resources.get(skill, learning.default_resources)),
        alternative_skills=list(learning.alternatives.get(skill, [])),
    )


def _learning_step(gap: SkillGap) -> LearningRecommendation:
    return LearningRecommendation(
        skill=gap.skill,
        current_level="beginner",
        target_level="proficient",
        resources=[
            LearningResource(
                type="course",
                name=f"{gap.skill} Fundamentals",
                provider=provider,
                duration=gap.time_to_acquire,
                cost=LEARNING_COST,
            )
            for provider in gap.learning_resources
        ],
        timeline=gap.time_to_acquire,
    )


def recommend_certifications(industry: str, dictionary: KeywordDictionary) -> list[Certification]:
    entries = dictionary.for_industry(dictionary.certifications, industry)
    return [Certification(**entry.model_dump()) for entry in entries]


def build_skills_report(
    job: JobPosting,
    resume: ResumeProfile,
    skills: SkillsAnalysis,
    dictionary: KeywordDictionary | None = None,
    config: AppConfig | None = None,
) -> SkillsReport:
    """Per-skill evidence for matches, learning plans for gaps."""
    dictionary = dictionary or default_dictionary()
    config = config or AppConfig()

    gaps = [_skill_gap(s, dictionary) for s in skills.missing_skills[: config.limits.skill_gaps]]
    return SkillsReport(
        matched_skills=[_skill_match(s, job, resume, dictionary) for s in skills.matched_skills],
        skill_gaps=gaps,
        recommended_certifications=recommend_certifications(job.industry, dictionary),
        learning_path=[_learning_step(gap) for gap in gaps[: config.limits.learning_path]],
    )


def competitive_positioning(skills: SkillsAnalysis, candidate_years: int, required_years: int) -> str:
    experience_ratio = 100 * candidate_years / max(1, required_years)
    if skills.match_percentage >= 80 and experience_ratio >= 100:
        return STRONG_POSITION
    if skills.match_percentage >= 60 and experience_ratio >= 80:
        return COMPETITIVE_POSITION
    return DEVELOPING_POSITION


def career_progression(job_title: str, dictionary: KeywordDictionary) -> list[str]:
    title = job_title.lower()
    matches = [name for name in dictionary.career_paths if name.lower() in title]
    if not matches:
        return list(dictionary.default_career_path)
    return list(dictionary.career_paths[max(matches, key=len)])


def analyze_market(
    job: JobPosting,
    resume: ResumeProfile,
    skills: SkillsAnalysis,
    dictionary: KeywordDictionary | None = None,
) -> MarketAnalysis:
    dictionary = dictionary or default_dictionary()
    return MarketAnalysis(
        industry_trends=dictionary.for_industry(dictionary.market_trends, job.industry),
        competitive_positioning=competitive_positioning(
            skills, resume.total_experience_years, job.required_experience_years
        ),
        career_progression=career_progression(job.job_title, dictionary),
        risk_factors=dictionary.for_industry(dictionary.risk_factors, job.industry),
    )
