"""Three-phase action plan driven by skill gaps and scores."""

from __future__ import annotations

from career_advisor.models.analysis import ActionItem, ActionPlan
from career_advisor.models.scores import CompatibilityScores, SkillsAnalysis

ATS_TARGET = 85
KEYWORD_TARGET = 75


def _resume_item(skills: SkillsAnalysis, scores: CompatibilityScores) -> ActionItem:
    missing = skills.missing_skills
    if missing:
        task = (
            f"Add {len(missing)} missing keywords ({', '.join(missing[:3])}) to your resume "
            "and improve ATS compatibility"
        )
    else:
        task = "Polish resume wording and formatting for ATS compatibility"
    needs_work = scores.ats < ATS_TARGET or scores.keyword_density < KEYWORD_TARGET or missing
    return ActionItem(
        task=task,
        priority="critical" if needs_work else "high",
        timeframe="1-2 days",
        resources=["Resume template", "Keyword analysis tool", "ATS checker", "Professional review"],
        success_metrics=[
            f"ATS compatibility score > {ATS_TARGET}%",
            f"Keyword density > {KEYWORD_TARGET}%",
            "Professional formatting achieved",
        ],
    )


def _immediate(skills: SkillsAnalysis, scores: CompatibilityScores) -> list[ActionItem]:
    items = [
        _resume_item(skills, scores),
        ActionItem(
            task="Customize cover letter for the specific role and company culture",
            priority="critical",
            timeframe="1 day",
            resources=["Company research", "Cover letter template", "Industry insights"],
            success_metrics=[
                "Personalized content created",
                "Company-specific value proposition included",
            ],
        ),
    ]
    if scores.keyword_density < KEYWORD_TARGET:
        items.append(
            ActionItem(
                task="Mirror the job posting's wording in your summary and experience bullets",
                priority="high",
                timeframe="1 day",
                resources=["Job posting", "Keyword analysis tool"],
                success_metrics=[f"Keyword density > {KEYWORD_TARGET}%"],
            )
        )
    return items


def _short_term(skills: SkillsAnalysis) -> list[ActionItem]:
    items = []
    missing = skills.missing_skills
    if missing:
        items.append(
            ActionItem(
                task=f"Develop {len(missing)} missing skills through targeted learning and practice",
                priority="high",
                timeframe="2-8 weeks" if len(missing) <= 3 else "1-3 months",
                resources=["Online courses", "Practice projects", "Mentorship", "Professional communities"],
                success_metrics=[
                    "Skill proficiency demonstrated",
                    "Portfolio updated with new projects",
                ],
            )
        )
    items.append(
        ActionItem(
            task="Prepare interview strategy and practice with the STAR method",
            priority="high",
            timeframe="1-2 weeks",
            resources=["Interview guides", "Mock interview practice", "STAR method training", "Company research"],
            success_metrics=["5+ STAR stories prepared", "Confident delivery achieved"],
        )
    )
    return items


def _long_term(skills: SkillsAnalysis) -> list[ActionItem]:
    items = [
        ActionItem(
            task="Build a professional portfolio and online presence",
            priority="medium",
            timeframe="3-6 months",
            resources=["Portfolio platform", "Project ideas", "Professional network"],
            success_metrics=["5+ portfolio projects completed", "Professional online presence established"],
        ),
        ActionItem(
            task="Pursue relevant certifications and advanced skill development",
            priority="medium" if skills.missing_skills else "low",
            timeframe="6-12 months",
            resources=["Certification programs", "Advanced courses", "Industry conferences"],
            success_metrics=["Professional certifications obtained", "Advanced skills demonstrated"],
        ),
    ]
    if len(skills.missing_skills) > 3:
        items.insert(
            0,
            ActionItem(
                task="Close the remaining critical skill gaps with hands-on projects",
                priority="high",
                timeframe="3-6 months",
                resources=["Online courses", "Certification programs", "Open source contributions"],
                success_metrics=["Skill proficiency demonstrated", "Portfolio projects completed"],
            ),
        )
    return items


def plan_actions(skills: SkillsAnalysis, scores: CompatibilityScores) -> ActionPlan:
    return ActionPlan(
        immediate=_immediate(skills, scores),
        short_term=_short_term(skills),
        long_term=_long_term(skills),
    )
