"""Pydantic models for matcher and scorer output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SkillsAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    resume_skills: list[str] = []
    job_skills: list[str] = []
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    match_percentage: float = Field(default=100.0, ge=0, le=100)


class CompatibilityScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    ats: int = Field(ge=0, le=100)
    keyword_density: int = Field(ge=0, le=100)
    experience_alignment: int = Field(ge=0, le=100)
    skills_match: int = Field(ge=0, le=100)
    overall: int = Field(ge=0, le=100)
