from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

DICTIONARIES_DIR = Path(__file__).parent
DEFAULT_DICTIONARY = DICTIONARIES_DIR / "default.yaml"

INDUSTRIES = ("technology", "finance", "marketing")


class SalaryBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    median: int


class LocationTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    multiplier: float
    cities: list[str]


class CertificationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    provider: str
    relevance_score: int
    time_to_complete: str
    cost: str
    industry_recognition: str


class SkillLearning(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_time: str = "1-3 months"
    time_to_acquire: dict[str, str] = {}
    default_resources: list[str] = []
    resources: dict[str, list[str]] = {}
    alternatives: dict[str, list[str]] = {}
    critical: list[str] = []
    important: list[str] = []
    common: list[str] = []


class KeywordDictionary(BaseModel):
    """Static vocabularies and lookup tables consumed by the analysis pipeline."""

    model_config = ConfigDict(frozen=True)

    industries: dict[str, dict[str, list[str]]]
    industry_signals: dict[str, list[str]] = {}
    soft_skills: list[str] = []
    ats_keywords: list[str] = []
    action_verbs: list[str] = []
    culture_keywords: list[str] = []
    stop_words: list[str] = []
    education_keywords: list[str] = []
    certification_keywords: list[str] = []
    leadership_keywords: list[str] = []
    default_salary_band: SalaryBand = SalaryBand(min=60000, max=120000, median=80000)
    salary_bands: dict[str, dict[str, SalaryBand]] = {}
    location_tiers: list[LocationTier] = []
    market_trends: dict[str, list[str]] = {}
    risk_factors: dict[str, list[str]] = {}
    career_paths: dict[str, list[str]] = {}
    default_career_path: list[str] = []
    certifications: dict[str, list[CertificationEntry]] = {}
    skill_learning: SkillLearning = SkillLearning()

    def skills_for(self, industry: str) -> list[str]:
        """Flattened skill list for one industry, or every industry for 'general'."""
        if industry in self.industries:
            groups = [self.industries[industry]]
        else:
            groups = list(self.industries.values())
        seen: dict[str, None] = {}
        for categories in groups:
            for names in categories.values():
                for name in names:
                    seen.setdefault(name, None)
        return list(seen)

    def all_skills(self) -> list[str]:
        return self.skills_for("general")

    def for_industry(self, table: dict[str, list], industry: str) -> list:
        """Look up a per-industry list, falling back to 'general' then technology."""
        for key in (industry, "general", "technology"):
            if key in table:
                return list(table[key])
        return []


def load_dictionary(path: str | Path | None = None) -> KeywordDictionary:
    """Load a keyword dictionary from YAML (the bundled default when path is None)."""
    if path is None:
        return default_dictionary()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Dictionary not found: {p}")
    with open(p, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return KeywordDictionary(**data)


@lru_cache(maxsize=1)
def default_dictionary() -> KeywordDictionary:
    with open(DEFAULT_DICTIONARY, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return KeywordDictionary(**data)
