"""Pydantic models for the generated advice and the aggregate analysis result."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from career_advisor.models.job import JobPosting, SalaryRange
from career_advisor.models.resume import ResumeProfile
from career_advisor.models.scores import CompatibilityScores, SkillsAnalysis

Priority = Literal["critical", "high", "medium", "low"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CoverLetter(_Frozen):
    content: str
    tone: Literal["professional", "enthusiastic", "technical"]
    word_count: int
    keyword_density: int  # 0-100


class ResumeStrength(_Frozen):
    category: Literal["experience", "skills", "achievements", "education", "leadership"]
    description: str
    impact: Literal["high", "medium", "low"]
    relevance_score: int


class ResumeWeakness(_Frozen):
    category: Literal["formatting", "content", "keywords", "achievements", "skills"]
    issue: str
    severity: Literal["critical", "moderate", "minor"]
    recommendation: str


class ResumeSuggestion(_Frozen):
    type: Literal["add", "modify", "remove", "restructure"]
    section: str
    current: str | None = None
    suggested: str
    reasoning: str
    priority: Literal["high", "medium", "low"]


class ResumeAnalysis(_Frozen):
    strengths: list[ResumeStrength]
    weaknesses: list[ResumeWeakness]
    suggestions: list[ResumeSuggestion]
    missing_keywords: list[str]
    ats_optimizations: list[str]
    quantifiable_achievements: int
    action_verb_usage: int


class InterviewQuestion(_Frozen):
    question: str
    type: Literal["behavioral", "technical", "situational", "cultural-fit"]
    difficulty: Literal["entry", "mid", "senior", "executive"]
    suggested_answer: str
    key_points: list[str]
    follow_up_questions: list[str]


class CompanyInsight(_Frozen):
    category: Literal["culture", "values", "recent-news", "growth", "challenges"]
    insight: str
    source: str
    relevance_to_role: int


class SalaryInsight(_Frozen):
    range: SalaryRange
    location_multiplier: float = 1.0
    factors: list[str]
    negotiation_points: list[str]
    market_comparison: str


class InterviewPreparation(_Frozen):
    questions: list[InterviewQuestion]
    company_research: list[CompanyInsight]
    salary_insights: SalaryInsight
    negotiation_tips: list[str]


class SkillMatch(_Frozen):
    skill: str
    job_requirement: Literal["required", "preferred", "nice-to-have"]
    candidate_level: Literal["expert", "proficient", "familiar", "beginner"]
    match_strength: int
    evidence_from_resume: list[str]


class SkillGap(_Frozen):
    skill: str
    importance: Literal["critical", "important", "beneficial"]
    time_to_acquire: str
    learning_resources: list[str]
    alternative_skills: list[str]


class Certification(_Frozen):
    name: str
    provider: str
    relevance_score: int
    time_to_complete: str
    cost: str
    industry_recognition: Literal["high", "medium", "low"]


class LearningResource(_Frozen):
    type: Literal["course", "book", "project", "certification"]
    name: str
    provider: str
    duration: str
    cost: str


class LearningRecommendation(_Frozen):
    skill: str
    current_level: str
    target_level: str
    resources: list[LearningResource]
    timeline: str


class SkillsReport(_Frozen):
    matched_skills: list[SkillMatch]
    skill_gaps: list[SkillGap]
    recommended_certifications: list[Certification]
    learning_path: list[LearningRecommendation]


class MarketAnalysis(_Frozen):
    industry_trends: list[str]
    competitive_positioning: str
    career_progression: list[str]
    risk_factors: list[str]


class ActionItem(_Frozen):
    task: str
    priority: Priority
    timeframe: str
    resources: list[str]
    success_metrics: list[str]


class ActionPlan(_Frozen):
    immediate: list[ActionItem]
    short_term: list[ActionItem]
    long_term: list[ActionItem]


class CareerAnalysisResult(_Frozen):
    """Read-only snapshot handed to presentation and export layers."""

    scores: CompatibilityScores
    cover_letter: CoverLetter
    resume_analysis: ResumeAnalysis
    interview_preparation: InterviewPreparation
    skills_analysis: SkillsReport
    market_analysis: MarketAnalysis
    action_plan: ActionPlan
    job_posting: JobPosting
    resume_profile: ResumeProfile
    skill_match: SkillsAnalysis

    @property
    def overall_score(self) -> int:
        return self.scores.overall

    @property
    def ats_compatibility_score(self) -> int:
        return self.scores.ats

    @property
    def keyword_density_score(self) -> int:
        return self.scores.keyword_density

    @property
    def experience_alignment_score(self) -> int:
        return self.scores.experience_alignment

    @property
    def skills_match_score(self) -> int:
        return self.scores.skills_match
