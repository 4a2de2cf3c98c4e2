"""Rule-based resume critique: strengths, weaknesses and edit suggestions."""

from __future__ import annotations

import re

from career_advisor.config import AppConfig
from career_advisor.dictionaries import KeywordDictionary, default_dictionary
from career_advisor.models.analysis import (
    ResumeAnalysis,
    ResumeStrength,
    ResumeSuggestion,
    ResumeWeakness,
)
from career_advisor.models.job import JobPosting
from career_advisor.models.resume import ResumeProfile
from career_advisor.models.scores import SkillsAnalysis
from career_advisor.pipeline.scorer import BULLET_MARKERS

ATS_OPTIMIZATIONS = [
    "Use standard section headings (Experience, Education, Skills)",
    "Include exact keywords from job posting",
    "Use bullet points for easy scanning",
    "Avoid graphics, tables, and complex formatting",
    "Save as both PDF and Word formats",
    "Include contact information at the top",
    "Use consistent date formatting",
    "Maintain proper spacing and margins",
]

_DIGIT = re.compile(r"\d")
_AGILE = ("agile", "scrum")
_CLOUD = ("aws", "azure", "gcp", "google cloud", "cloud")


def count_quantified(achievements: list[str]) -> int:
    return sum(1 for a in achievements if _DIGIT.search(a))


def find_strengths(
    job: JobPosting,
    resume: ResumeProfile,
    skills: SkillsAnalysis,
    dictionary: KeywordDictionary,
) -> list[ResumeStrength]:
    text_lower = resume.raw_text.lower()
    strengths = []
    if resume.total_experience_years >= job.required_experience_years:
        strengths.append(
            ResumeStrength(
                category="experience",
                description=(
                    f"{resume.total_experience_years}+ years of relevant experience "
                    "meets job requirements"
                ),
                impact="high",
                relevance_score=95,
            )
        )
    if skills.matched_skills:
        strengths.append(
            ResumeStrength(
                category="skills",
                description=(
                    f"Strong technical alignment with {len(skills.matched_skills)} "
                    "matching skills"
                ),
                impact="high",
                relevance_score=90,
            )
        )
    if len(resume.achievements) >= 3:
        strengths.append(
            ResumeStrength(
                category="achievements",
                description="Strong track record of quantifiable achievements",
                impact="high",
                relevance_score=90,
            )
        )
    if resume.writing_quality.action_verb_count >= 5:
        strengths.append(
            ResumeStrength(
                category="experience",
                description="Uses strong action verbs to describe accomplishments",
                impact="medium",
                relevance_score=75,
            )
        )
    if any(word in text_lower for word in dictionary.leadership_keywords):
        strengths.append(
            ResumeStrength(
                category="leadership",
                description="Shows leadership and mentoring responsibility",
                impact="medium",
                relevance_score=80,
            )
        )
    if resume.education:
        strengths.append(
            ResumeStrength(
                category="education",
                description="Relevant education is clearly listed",
                impact="medium",
                relevance_score=70,
            )
        )
    return strengths


def find_weaknesses(
    resume: ResumeProfile,
    skills: SkillsAnalysis,
    config: AppConfig,
) -> list[ResumeWeakness]:
    weaknesses = []
    if len(resume.achievements) < 2:
        weaknesses.append(
            ResumeWeakness(
                category="achievements",
                issue="Limited quantifiable achievements",
                severity="moderate",
                recommendation="Add specific metrics and results to demonstrate impact",
            )
        )
    if skills.missing_skills:
        weaknesses.append(
            ResumeWeakness(
                category="skills",
                issue=f"{len(skills.missing_skills)} skills from the posting are not on the resume",
                severity="critical" if len(skills.missing_skills) >= 3 else "moderate",
                recommendation=f"Address gaps in {', '.join(skills.missing_skills[:3])}",
            )
        )
    if len(resume.raw_text) < config.ats.min_length:
        weaknesses.append(
            ResumeWeakness(
                category="content",
                issue="Resume is too short to show the breadth of your experience",
                severity="moderate",
                recommendation="Expand role descriptions with responsibilities and results",
            )
        )
    if not any(marker in resume.raw_text for marker in BULLET_MARKERS):
        weaknesses.append(
            ResumeWeakness(
                category="formatting",
                issue="No bullet points found",
                severity="minor",
                recommendation="Use bullet points so recruiters and ATS can scan each role",
            )
        )
    return weaknesses


def build_suggestions(
    job: JobPosting,
    resume: ResumeProfile,
    skills: SkillsAnalysis,
) -> list[ResumeSuggestion]:
    resume_lower = resume.raw_text.lower()
    job_lower = job.raw_text.lower()
    suggestions = []

    if skills.missing_skills:
        suggestions.append(
            ResumeSuggestion(
                type="add",
                section="Skills",
                suggested=f"Add missing critical skills: {', '.join(skills.missing_skills[:3])}",
                reasoning=(
                    "These skills are specifically mentioned in the job posting and will "
                    "improve ATS compatibility"
                ),
                priority="high",
            )
        )
    if count_quantified(resume.achievements) < 2:
        suggestions.append(
            ResumeSuggestion(
                type="modify",
                section="Experience",
                suggested=(
                    "Include specific metrics and quantifiable achievements "
                    "(e.g. 'Increased performance by 40%', 'Led team of 5 developers')"
                ),
                reasoning="Quantified achievements demonstrate concrete value and impact",
                priority="high",
            )
        )
    if resume.writing_quality.action_verb_count < 3:
        suggestions.append(
            ResumeSuggestion(
                type="modify",
                section="Experience",
                suggested=(
                    "Start bullet points with strong action verbs like 'Developed', "
                    "'Implemented', 'Led', 'Optimized'"
                ),
                reasoning="Action verbs make your resume more dynamic and ATS-friendly",
                priority="medium",
            )
        )
    if "skills" not in resume_lower:
        suggestions.append(
            ResumeSuggestion(
                type="add",
                section="Skills",
                suggested="Include a dedicated 'Technical Skills' section with relevant technologies",
                reasoning="A skills section is the first place recruiters and ATS look for keywords",
                priority="medium",
            )
        )
    if "project" not in resume_lower:
        suggestions.append(
            ResumeSuggestion(
                type="add",
                section="Projects",
                suggested="Add a 'Key Projects' section highlighting relevant work",
                reasoning="Projects give concrete evidence of the skills you list",
                priority="low",
            )
        )
    if any(w in job_lower for w in _AGILE) and not any(w in resume_lower for w in _AGILE):
        suggestions.append(
            ResumeSuggestion(
                type="add",
                section="Experience",
                suggested="Mention experience with Agile/Scrum methodologies if applicable",
                reasoning="The posting describes an Agile team",
                priority="low",
            )
        )
    if any(w in job_lower for w in _CLOUD) and not any(w in resume_lower for w in _CLOUD):
        suggestions.append(
            ResumeSuggestion(
                type="add",
                section="Skills",
                suggested="Highlight any cloud platform experience (AWS, Azure, GCP)",
                reasoning="The posting asks for cloud platform experience",
                priority="low",
            )
        )
    return suggestions


def critique_resume(
    job: JobPosting,
    resume: ResumeProfile,
    skills: SkillsAnalysis,
    dictionary: KeywordDictionary | None = None,
    config: AppConfig | None = None,
) -> ResumeAnalysis:
    dictionary = dictionary or default_dictionary()
    config = config or AppConfig()
    limits = config.limits

    return ResumeAnalysis(
        strengths=find_strengths(job, resume, skills, dictionary)[: limits.strengths],
        weaknesses=find_weaknesses(resume, skills, config)[: limits.weaknesses],
        suggestions=build_suggestions(job, resume, skills)[: limits.suggestions],
        missing_keywords=skills.missing_skills[: limits.missing_keywords],
        ats_optimizations=list(ATS_OPTIMIZATIONS),
        quantifiable_achievements=count_quantified(resume.achievements),
        action_verb_usage=resume.writing_quality.action_verb_count,
    )
