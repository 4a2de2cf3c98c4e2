"""Extracted sample inputs shared by the generator tests."""

import pytest

from career_advisor.models import JobPosting, ResumeProfile, WritingQuality
from career_advisor.parsers.job_extractor import extract_job_posting
from career_advisor.parsers.resume_extractor import extract_resume_profile
from career_advisor.pipeline.skills_matcher import match_skills


@pytest.fixture
def job(sample_jd_text, dictionary):
    return extract_job_posting(sample_jd_text, dictionary)


@pytest.fixture
def resume(sample_resume_text, dictionary):
    return extract_resume_profile(sample_resume_text, dictionary)


@pytest.fixture
def skills(job, resume):
    return match_skills(resume.skills, job.skills)


@pytest.fixture
def bare_job():
    return JobPosting(company="Zeta", job_title="Barista", location="Not specified")


@pytest.fixture
def bare_resume():
    return ResumeProfile(
        total_experience_years=1,
        experience_source="estimated",
        writing_quality=WritingQuality(
            avg_sentence_length=2, action_verb_count=0, readability_score=100
        ),
        raw_text="I code.",
    )
