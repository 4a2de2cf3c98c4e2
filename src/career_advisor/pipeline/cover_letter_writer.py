"""Cover letter generation from extracted fields."""

from __future__ import annotations

from career_advisor.models.analysis import CoverLetter
from career_advisor.models.job import JobPosting
from career_advisor.models.resume import ResumeProfile
from career_advisor.models.scores import SkillsAnalysis
from career_advisor.pipeline.scorer import clamp_score

OPENINGS = {
    "professional": (
        "Dear Hiring Manager,\n\n"
        "I am writing to express my strong interest in the {job_title} position at {company}. "
        "With my proven track record and relevant expertise, I am confident I would be a "
        "valuable addition to your team."
    ),
    "enthusiastic": (
        "Dear Hiring Team,\n\n"
        "I am thrilled to apply for the {job_title} role at {company}! Your company's "
        "innovative approach and dynamic culture align perfectly with my career aspirations "
        "and professional values."
    ),
    "technical": (
        "Dear Technical Hiring Manager,\n\n"
        "I am excited to submit my application for the {job_title} position at {company}. "
        "My technical background and hands-on experience make me well-suited to contribute "
        "to your engineering objectives."
    ),
}

BODY = (
    "My {years}+ years of experience in {skills} directly align with your requirements. "
    "In my previous roles, I have {achievement} This experience has equipped me with the "
    "depth and problem-solving abilities essential for success in this position.\n\n"
    "What particularly excites me about {company} is your commitment to {culture}. "
    "I am eager to contribute my expertise while continuing to grow within your team."
)

SECOND_ACHIEVEMENT = " I have also {achievement}"

CLOSING = (
    "Thank you for considering my application. I look forward to discussing how my "
    "background and enthusiasm can contribute to {company}'s continued success.\n\n"
    "Sincerely,\n[Your Name]"
)

DEFAULT_ACHIEVEMENT = "delivered successful projects."
DEFAULT_SKILLS = "the core areas of this role"
DEFAULT_CULTURE = "excellence"


def choose_tone(job: JobPosting) -> str:
    if job.industry == "technology":
        return "technical"
    if "startup" in job.culture_keywords or "dynamic" in job.culture_keywords:
        return "enthusiastic"
    return "professional"


def _as_clause(achievement: str) -> str:
    """Lower-case the first letter and make sure the sentence is terminated."""
    text = achievement.strip()
    if not text:
        return DEFAULT_ACHIEVEMENT
    text = text[0].lower() + text[1:]
    if text[-1] not in ".!?":
        text += "."
    return text


def letter_keyword_density(content: str, job_skills: list[str]) -> int:
    """Share of the posting's skills that the letter mentions; 100 when there are none."""
    if not job_skills:
        return 100
    content_lower = content.lower()
    found = sum(1 for skill in job_skills if skill.lower() in content_lower)
    return clamp_score(100 * found / len(job_skills))


def write_cover_letter(
    job: JobPosting,
    resume: ResumeProfile,
    skills: SkillsAnalysis,
) -> CoverLetter:
    tone = choose_tone(job)
    top_skills = skills.matched_skills[:3]
    achievements = resume.achievements

    body = BODY.format(
        years=resume.total_experience_years,
        skills=", ".join(top_skills) if top_skills else DEFAULT_SKILLS,
        achievement=_as_clause(achievements[0]) if achievements else DEFAULT_ACHIEVEMENT,
        company=job.company,
        culture=job.culture_keywords[0] if job.culture_keywords else DEFAULT_CULTURE,
    )
    if len(achievements) > 1:
        first_paragraph, rest = body.split("\n\n", 1)
        body = first_paragraph + SECOND_ACHIEVEMENT.format(
            achievement=_as_clause(achievements[1])
        ) + "\n\n" + rest

    content = "\n\n".join(
        [
            OPENINGS[tone].format(job_title=job.job_title, company=job.company),
            body,
            CLOSING.format(company=job.company),
        ]
    )
    return CoverLetter(
        content=content,
        tone=tone,
        word_count=len(content.split(" ")),
        keyword_density=letter_keyword_density(content, job.skills),
    )
