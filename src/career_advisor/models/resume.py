"""Pydantic models for fields extracted from a resume."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class WritingQuality(BaseModel):
    model_config = ConfigDict(frozen=True)

    avg_sentence_length: float
    action_verb_count: int
    readability_score: int  # 0-100


class ResumeProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_experience_years: int
    experience_source: Literal["explicit", "estimated"] = "explicit"
    skills: list[str] = []
    achievements: list[str] = []
    education: list[str] = []
    certifications: list[str] = []
    writing_quality: WritingQuality
    raw_text: str = ""
