"""Interview preparation: templated questions with STAR answers, company
insights, salary estimate and negotiation tips."""

from __future__ import annotations

from career_advisor.config import AppConfig
from career_advisor.dictionaries import KeywordDictionary, SalaryBand, default_dictionary
from career_advisor.models.analysis import (
    CompanyInsight,
    InterviewPreparation,
    InterviewQuestion,
    SalaryInsight,
)
from career_advisor.models.job import JobPosting, SalaryRange
from career_advisor.models.resume import ResumeProfile
from career_advisor.pipeline.scorer import round_half_up

SALARY_FACTORS = [
    "Experience level",
    "Location",
    "Company size",
    "Industry demand",
    "Specialized skills",
]

NEGOTIATION_POINTS = [
    "Highlight unique skills and certifications",
    "Demonstrate quantifiable value from previous roles",
    "Research market rates for similar positions",
    "Consider total compensation package including benefits",
]

NEGOTIATION_TIPS = [
    "Research industry salary benchmarks before negotiating",
    "Highlight your unique value proposition and achievements",
    "Consider total compensation package, not just base salary",
    "Be prepared to discuss your impact in previous roles",
    "Practice your negotiation conversation beforehand",
    "Know your minimum acceptable offer before starting negotiations",
]


def star_answer(situation: str, task: str, action: str, result: str) -> str:
    return f"Situation: {situation} Task: {task} Action: {action} Result: {result}"


def difficulty_for(required_years: int) -> str:
    if required_years < 2:
        return "entry"
    if required_years < 5:
        return "mid"
    if required_years < 10:
        return "senior"
    return "executive"


class _ResumeCues:
    """Which themes the resume gives evidence for, used to tailor answers."""

    def __init__(self, resume_text: str, dictionary: KeywordDictionary):
        text = resume_text.lower()
        self.leadership = any(word in text for word in dictionary.leadership_keywords)
        self.teamwork = "team" in text or "collaborat" in text
        self.testing = "test" in text or "quality" in text
        self.hands_on = "develop" in text or "build" in text or "built" in text


def _challenge_question(cues: _ResumeCues, difficulty: str) -> InterviewQuestion:
    action = (
        "I broke the requirements into manageable tasks, flagged risks early and "
        + (
            "coordinated closely with team members so everyone owned a clear part of the work."
            if cues.teamwork
            else "kept stakeholders informed with regular progress updates."
        )
    )
    return InterviewQuestion(
        question="Tell me about a challenging project you worked on and how you overcame obstacles.",
        type="behavioral",
        difficulty=difficulty,
        suggested_answer=star_answer(
            "In my previous role we had to deliver a complex feature under a tight deadline.",
            "I was responsible for shipping it on time without lowering the quality bar.",
            action,
            "We delivered on schedule and the release met its quality targets.",
        ),
        key_points=["Problem-solving approach", "Learning agility", "Measurable results"],
        follow_up_questions=[
            "How do you stay current with technology?",
            "What resources do you use for learning?",
        ],
    )


def _teamwork_question(cues: _ResumeCues, difficulty: str) -> InterviewQuestion:
    action = (
        "Drawing on my experience leading teams, I adapted my communication style and wrote "
        "structured documentation that helped them excel."
        if cues.leadership
        else "I held a one-on-one conversation, learned they preferred written specifications "
        "and adjusted how I shared requirements."
    )
    return InterviewQuestion(
        question="Describe a time when you had to work with a difficult team member.",
        type="behavioral",
        difficulty=difficulty,
        suggested_answer=star_answer(
            "A colleague and I had very different working styles and communication preferences.",
            "We needed to collaborate closely to deliver a shared project.",
            action,
            "We worked together effectively and delivered the project successfully.",
        ),
        key_points=["Emotional intelligence", "Adaptability", "Communication skills"],
        follow_up_questions=["How do you handle conflict?", "What makes a good team member?"],
    )


def _code_quality_question(cues: _ResumeCues, difficulty: str) -> InterviewQuestion:
    testing = (
        "I wrote unit and integration tests as I have in my previous projects"
        if cues.testing
        else "I introduced unit and integration tests with coverage targets"
    )
    return InterviewQuestion(
        question="How do you ensure code quality and maintainability in your JavaScript/React projects?",
        type="technical",
        difficulty=difficulty,
        suggested_answer=star_answer(
            "A front-end codebase I worked on was growing quickly and regressions were slipping through.",
            "I needed to raise quality without slowing the team down.",
            f"{testing}, set up linting and code review standards and automated checks in CI/CD.",
            "Regressions dropped and new features became easier to review and refactor.",
        ),
        key_points=["Testing strategy", "Code review", "Automation"],
        follow_up_questions=[
            "How do you manage technical debt?",
            "What does a good code review look like to you?",
        ],
    )


def _database_question(cues: _ResumeCues, difficulty: str) -> InterviewQuestion:
    experience = (
        "In my projects I have worked with both SQL and NoSQL stores"
        if cues.hands_on
        else "I compared SQL and NoSQL options"
    )
    return InterviewQuestion(
        question="How do you approach database design and optimization?",
        type="technical",
        difficulty=difficulty,
        suggested_answer=star_answer(
            "An application I supported had slow queries as its data volume grew.",
            "I had to improve response times while keeping the schema maintainable.",
            f"{experience}, analysed query patterns, normalised where redundancy hurt and "
            "added targeted indexes.",
            "Query times improved and the design scaled with the data.",
        ),
        key_points=["Data modelling", "Indexing strategy", "Performance monitoring"],
        follow_up_questions=[
            "When would you denormalise a schema?",
            "How do you choose between SQL and NoSQL?",
        ],
    )


def _debugging_question(cues: _ResumeCues, difficulty: str) -> InterviewQuestion:
    fix = (
        "From my development experience I isolated recent changes, read the stack traces "
        "and shipped a targeted fix with tests."
        if cues.hands_on
        else "I isolated recent changes, read the stack traces and applied a targeted fix with tests."
    )
    return InterviewQuestion(
        question="Walk me through your approach to debugging a complex technical issue.",
        type="technical",
        difficulty=difficulty,
        suggested_answer=star_answer(
            "A production issue appeared only under specific user conditions.",
            "I needed to find the root cause quickly and prevent it from recurring.",
            f"I reproduced it consistently, gathered logs and environment details. {fix}",
            "The issue was resolved and the documented root cause prevented similar bugs.",
        ),
        key_points=["Systematic approach", "Root cause analysis", "Documentation"],
        follow_up_questions=[
            "What debugging tools do you rely on?",
            "How do you debug issues you cannot reproduce?",
        ],
    )


def _leadership_question(cues: _ResumeCues, difficulty: str) -> InterviewQuestion:
    return InterviewQuestion(
        question="How do you motivate and guide team members with different skill levels?",
        type="behavioral",
        difficulty=difficulty,
        suggested_answer=star_answer(
            "I led a team that mixed junior and senior members.",
            "I needed everyone to grow while the team kept delivering.",
            "I paired junior members with experienced colleagues, gave regular feedback and "
            "removed blockers so senior members could focus on high-impact work.",
            "The team hit its goals and junior members took on larger responsibilities.",
        ),
        key_points=["Coaching", "Feedback", "Leading by example"],
        follow_up_questions=[
            "How do you handle an underperforming team member?",
            "How do you delegate?",
        ],
    )


def _culture_question(job: JobPosting) -> InterviewQuestion:
    culture = ", ".join(job.culture_keywords[:2]) or "innovation and professional development"
    return InterviewQuestion(
        question=f"What interests you most about working at {job.company}?",
        type="cultural-fit",
        difficulty="entry",
        suggested_answer=star_answer(
            f"While researching {job.company} I looked at its products, values and this role.",
            "I wanted a team where I can contribute quickly and keep growing.",
            f"I matched my experience against the {job.job_title} responsibilities and the "
            f"company's focus on {culture}.",
            "I am confident the role fits my goals and that I can add value from the start.",
        ),
        key_points=["Company research", "Cultural alignment", "Growth mindset"],
        follow_up_questions=[
            "What do you know about our products?",
            "How do you see yourself fitting into our team?",
        ],
    )


def build_questions(
    job: JobPosting,
    resume: ResumeProfile,
    dictionary: KeywordDictionary,
) -> list[InterviewQuestion]:
    cues = _ResumeCues(resume.raw_text, dictionary)
    difficulty = difficulty_for(job.required_experience_years)
    job_lower = job.raw_text.lower()

    questions = [
        _challenge_question(cues, difficulty),
        _teamwork_question(cues, difficulty),
    ]
    if "javascript" in job_lower or "react" in job_lower:
        questions.append(_code_quality_question(cues, difficulty))
    if "database" in job_lower or "sql" in job_lower:
        questions.append(_database_question(cues, difficulty))
    questions.append(_debugging_question(cues, difficulty))
    if cues.leadership:
        questions.append(_leadership_question(cues, difficulty))
    questions.append(_culture_question(job))
    return questions


def research_company(job: JobPosting) -> list[CompanyInsight]:
    culture = ", ".join(job.culture_keywords) or "a collaborative"
    insights = [
        CompanyInsight(
            category="culture",
            insight=f"{job.company} values {culture} work environment",
            source="Job posting analysis",
            relevance_to_role=85,
        ),
        CompanyInsight(
            category="growth",
            insight=f"Company appears to be expanding its {job.industry} capabilities",
            source="Industry analysis",
            relevance_to_role=75,
        ),
    ]
    if job.responsibilities:
        insights.append(
            CompanyInsight(
                category="values",
                insight=f"The role centres on: {job.responsibilities[0]}",
                source="Job posting analysis",
                relevance_to_role=80,
            )
        )
    return insights


def find_salary_band(
    job_title: str, industry: str, dictionary: KeywordDictionary
) -> tuple[str | None, SalaryBand]:
    """Band whose title best matches the job title.

    The longest band title contained in the job title wins ("Senior Software
    Engineer" over "Software Engineer"). Failing that, the shortest band title
    that contains the job title is used, so "Engineer" maps to "Software
    Engineer".
    """
    if industry in dictionary.salary_bands:
        tables = [dictionary.salary_bands[industry]]
    else:
        tables = list(dictionary.salary_bands.values())
    title = job_title.lower().strip()
    if not title:
        return None, dictionary.default_salary_band
    bands = [(name, band) for table in tables for name, band in table.items()]

    inside = [(name, band) for name, band in bands if name.lower() in title]
    if inside:
        return max(inside, key=lambda item: len(item[0]))
    around = [(name, band) for name, band in bands if title in name.lower()]
    if around:
        return min(around, key=lambda item: len(item[0]))
    return None, dictionary.default_salary_band


def location_multiplier(location: str, dictionary: KeywordDictionary) -> float:
    location_lower = location.lower()
    for tier in dictionary.location_tiers:
        if any(city in location_lower for city in tier.cities):
            return tier.multiplier
    return 1.0


def _compare(posted: SalaryRange, market: SalaryRange) -> str:
    posted_mid = posted.median if posted.median is not None else (posted.min + posted.max) / 2
    market_mid = market.median if market.median is not None else (market.min + market.max) / 2
    if posted_mid > market_mid * 1.1:
        return f"Posted range is above the market median of ${market_mid:,.0f}"
    if posted_mid < market_mid * 0.9:
        return f"Posted range is below the market median of ${market_mid:,.0f}"
    return f"Posted range is in line with the market median of ${market_mid:,.0f}"


def estimate_salary(job: JobPosting, dictionary: KeywordDictionary | None = None) -> SalaryInsight:
    dictionary = dictionary or default_dictionary()
    band_title, band = find_salary_band(job.job_title, job.industry, dictionary)
    multiplier = location_multiplier(job.location, dictionary)
    market = SalaryRange(
        min=round_half_up(band.min * multiplier),
        max=round_half_up(band.max * multiplier),
        median=round_half_up(band.median * multiplier),
    )

    if job.salary_range is not None:
        posted = job.salary_range
        if posted.median is None:
            posted = SalaryRange(
                min=posted.min, max=posted.max, median=round_half_up((posted.min + posted.max) / 2)
            )
        return SalaryInsight(
            range=posted,
            location_multiplier=multiplier,
            factors=list(SALARY_FACTORS),
            negotiation_points=list(NEGOTIATION_POINTS),
            market_comparison=_compare(posted, market),
        )

    basis = f"{band_title} roles" if band_title else "similar roles"
    comparison = f"Estimated from {job.industry} market data for {basis}"
    if multiplier != 1.0:
        comparison += f", adjusted x{multiplier:g} for {job.location}"
    return SalaryInsight(
        range=market,
        location_multiplier=multiplier,
        factors=list(SALARY_FACTORS),
        negotiation_points=list(NEGOTIATION_POINTS),
        market_comparison=comparison,
    )


def negotiation_tips(job: JobPosting, resume: ResumeProfile) -> list[str]:
    tips = list(NEGOTIATION_TIPS)
    if job.salary_range is not None:
        tips.append("Anchor your ask against the posted range rather than your current salary")
    if resume.total_experience_years > job.required_experience_years > 0:
        tips.append("Use experience beyond the stated requirement to justify the upper end of the range")
    return tips


def prepare_interview(
    job: JobPosting,
    resume: ResumeProfile,
    dictionary: KeywordDictionary | None = None,
    config: AppConfig | None = None,
) -> InterviewPreparation:
    dictionary = dictionary or default_dictionary()
    config = config or AppConfig()
    return InterviewPreparation(
        questions=build_questions(job, resume, dictionary)[: config.limits.interview_questions],
        company_research=research_company(job),
        salary_insights=estimate_salary(job, dictionary),
        negotiation_tips=negotiation_tips(job, resume),
    )
