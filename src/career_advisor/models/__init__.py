"""Data models for the career analysis pipeline."""

from career_advisor.models.analysis import (
    ActionItem,
    ActionPlan,
    CareerAnalysisResult,
    Certification,
    CompanyInsight,
    CoverLetter,
    InterviewPreparation,
    InterviewQuestion,
    LearningRecommendation,
    LearningResource,
    MarketAnalysis,
    ResumeAnalysis,
    ResumeStrength,
    ResumeSuggestion,
    ResumeWeakness,
    SalaryInsight,
    SkillGap,
    SkillMatch,
    SkillsReport,
)
from career_advisor.models.job import JobPosting, SalaryRange
from career_advisor.models.resume import ResumeProfile, WritingQuality
from career_advisor.models.scores import CompatibilityScores, SkillsAnalysis

__all__ = [
    "ActionItem",
    "ActionPlan",
    "CareerAnalysisResult",
    "Certification",
    "CompanyInsight",
    "CompatibilityScores",
    "CoverLetter",
    "InterviewPreparation",
    "InterviewQuestion",
    "JobPosting",
    "LearningRecommendation",
    "LearningResource",
    "MarketAnalysis",
    "ResumeAnalysis",
    "ResumeProfile",
    "ResumeStrength",
    "ResumeSuggestion",
    "ResumeWeakness",
    "SalaryInsight",
    "SalaryRange",
    "SkillGap",
    "SkillMatch",
    "SkillsAnalysis",
    "SkillsReport",
    "WritingQuality",
]
