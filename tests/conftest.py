"""Shared test fixtures."""

from __future__ import annotations

import pytest

from career_advisor.config import AppConfig
from career_advisor.dictionaries import KeywordDictionary, default_dictionary
from career_advisor.pipeline.orchestrator import CareerAnalyzer


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Software Engineer - Acme Corp

Acme Corp is hiring a Senior Software Engineer to build our web platform.
Location: Austin, TX
Salary: $120k - $150k

Requirements:
- 5+ years of experience in software development
- Strong JavaScript, React and Node.js skills
- Experience with PostgreSQL databases
- Docker and AWS knowledge

Nice to have: Kubernetes, GraphQL

We are a collaborative, fast-paced team.
"""


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
Senior Software Engineer

Summary
Software engineer with 6 years of experience building web applications.

Experience
Tech Solutions Inc, Austin (2019 - 2024)
- Led a team of 4 engineers delivering a React and JavaScript dashboard.
- Improved API response times by 40% using Node.js caching.
- Reduced infrastructure costs by $50,000 per year with AWS and Docker.
- Built features used by 10000 users.

Skills
JavaScript, React, Node.js, PostgreSQL, Docker, AWS

Education
Bachelor of Science in Computer Science, State University
"""


@pytest.fixture
def dictionary() -> KeywordDictionary:
    return default_dictionary()


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def tiny_dictionary() -> KeywordDictionary:
    """A substitute dictionary with a single made-up industry."""
    return KeywordDictionary(
        industries={"technology": {"languages": ["Elixir", "Erlang"]}},
        industry_signals={"technology": ["beam"]},
        action_verbs=["shipped"],
    )


@pytest.fixture
def analysis(sample_resume_text, sample_jd_text):
    return CareerAnalyzer().analyze(sample_resume_text, sample_jd_text)
