"""Main analysis pipeline - runs extraction, matching, scoring and generators."""

from __future__ import annotations

import logging
from typing import Callable

from career_advisor.config import AppConfig
from career_advisor.dictionaries import KeywordDictionary, default_dictionary, load_dictionary
from career_advisor.models.analysis import CareerAnalysisResult
from career_advisor.parsers.job_extractor import extract_job_posting
from career_advisor.parsers.resume_extractor import extract_resume_profile
from career_advisor.pipeline.action_planner import plan_actions
from career_advisor.pipeline.cover_letter_writer import write_cover_letter
from career_advisor.pipeline.interview_coach import prepare_interview
from career_advisor.pipeline.market_analyst import analyze_market, build_skills_report
from career_advisor.pipeline.resume_critic import critique_resume
from career_advisor.pipeline.scorer import compute_scores
from career_advisor.pipeline.skills_matcher import match_skills

logger = logging.getLogger(__name__)

PhaseCallback = Callable[[str, str], None]


class CareerAnalyzer:
    """Turns a resume and a job posting into a CareerAnalysisResult.

    The analyzer holds only read-only configuration, so one instance can be
    reused for any number of analyses.
    """

    def __init__(
        self,
        dictionary: KeywordDictionary | None = None,
        config: AppConfig | None = None,
    ):
        self.config = config or AppConfig()
        if dictionary is None:
            path = self.config.extraction.dictionary_path
            dictionary = load_dictionary(path) if path else default_dictionary()
        self.dictionary = dictionary

    def analyze(
        self,
        resume_text: str,
        job_text: str,
        *,
        on_phase: PhaseCallback | None = None,
    ) -> CareerAnalysisResult:
        """Run the full analysis.

        Args:
            resume_text: Plain resume text.
            job_text: Plain job-posting text.
            on_phase: Optional callback(phase_name, detail) for progress.
        """

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        config = self.config
        dictionary = self.dictionary
        logger.info(
            "Starting analysis (resume %d chars, job posting %d chars)",
            len(resume_text),
            len(job_text),
        )

        _notify("extract", "Reading job posting and resume")
        job = extract_job_posting(job_text, dictionary, config)
        resume = extract_resume_profile(resume_text, dictionary, config)
        _notify("extract_done", f"{job.job_title} at {job.company} ({job.industry})")

        _notify("match", "Matching skills")
        skills = match_skills(resume.skills, job.skills, config.extraction.match_mode)

        _notify("score", "Scoring compatibility")
        scores = compute_scores(
            resume_text,
            job_text,
            resume.total_experience_years,
            job.required_experience_years,
            skills,
            dictionary,
            config,
        )

        _notify("generate", "Writing recommendations")
        result = CareerAnalysisResult(
            scores=scores,
            cover_letter=write_cover_letter(job, resume, skills),
            resume_analysis=critique_resume(job, resume, skills, dictionary, config),
            interview_preparation=prepare_interview(job, resume, dictionary, config),
            skills_analysis=build_skills_report(job, resume, skills, dictionary, config),
            market_analysis=analyze_market(job, resume, skills, dictionary),
            action_plan=plan_actions(skills, scores),
            job_posting=job,
            resume_profile=resume,
            skill_match=skills,
        )

        logger.info(
            "Analysis complete: overall %d, %d/%d skills matched",
            scores.overall,
            len(skills.matched_skills),
            len(skills.job_skills),
        )
        _notify("done", f"Overall score: {scores.overall}")
        return result


def analyze(resume_text: str, job_text: str) -> CareerAnalysisResult:
    """Analyze with the bundled dictionary and default configuration."""
    return CareerAnalyzer().analyze(resume_text, job_text)
