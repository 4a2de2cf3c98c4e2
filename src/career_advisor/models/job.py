"""Pydantic models for fields extracted from a job posting."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

Industry = Literal["technology", "finance", "marketing", "general"]


class SalaryRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    median: int | None = None


class JobPosting(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str
    job_title: str
    location: str
    industry: Industry = "general"
    required_experience_years: int = 0
    salary_range: SalaryRange | None = None
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    culture_keywords: list[str] = []
    responsibilities: list[str] = []
    raw_text: str = ""

    @property
    def skills(self) -> list[str]:
        """Required then preferred skills, without duplicates."""
        return list(dict.fromkeys(self.required_skills + self.preferred_skills))
