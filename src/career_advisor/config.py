"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "CAREER_ADVISOR_CONFIG"


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value!r}")


@dataclass(frozen=True)
class ScoreWeights:
    ats: float = 0.30
    keyword_density: float = 0.25
    experience_alignment: float = 0.25
    skills_match: float = 0.20

    def __post_init__(self) -> None:
        for name in ("ats", "keyword_density", "experience_alignment", "skills_match"):
            _check_range(f"weights.{name}", getattr(self, name), 0.0, 1.0)
        total = self.ats + self.keyword_density + self.experience_alignment + self.skills_match
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"weights must sum to 1.0, got {total:.3f}")


@dataclass(frozen=True)
class ScoringConfig:
    weights: ScoreWeights = field(default_factory=ScoreWeights)


@dataclass(frozen=True)
class ATSConfig:
    min_keywords: int = 5
    min_length: int = 500
    max_length: int = 3000
    min_action_verbs: int = 3
    keyword_penalty: int = 20
    short_penalty: int = 15
    long_penalty: int = 10
    metrics_penalty: int = 15
    action_verb_penalty: int = 10
    bullet_penalty: int = 10

    def __post_init__(self) -> None:
        for name in (
            "keyword_penalty",
            "short_penalty",
            "long_penalty",
            "metrics_penalty",
            "action_verb_penalty",
            "bullet_penalty",
        ):
            _check_range(name, getattr(self, name), 0, 100)
        if self.min_length >= self.max_length:
            raise ValueError("min_length must be smaller than max_length")


@dataclass(frozen=True)
class ExtractionConfig:
    default_company: str = "the company"
    default_job_title: str = "this position"
    default_location: str = "Not specified"
    default_required_experience: int = 0
    match_mode: str = "substring"  # "substring" or "token"
    dictionary_path: str | None = None

    def __post_init__(self) -> None:
        _check_range("default_required_experience", self.default_required_experience, 0, 50)
        if self.match_mode not in ("substring", "token"):
            raise ValueError(f"match_mode must be 'substring' or 'token', got {self.match_mode!r}")


@dataclass(frozen=True)
class LimitsConfig:
    achievements: int = 8
    responsibilities: int = 8
    education: int = 3
    certifications: int = 5
    strengths: int = 6
    weaknesses: int = 5
    suggestions: int = 6
    missing_keywords: int = 10
    interview_questions: int = 8
    skill_gaps: int = 8
    learning_path: int = 3

    def __post_init__(self) -> None:
        for name, value in self.__dict__.items():
            _check_range(f"limits.{name}", value, 1, 100)


@dataclass(frozen=True)
class ExportConfig:
    language: str = "en"
    output_dir: str = "./output"
    default_format: str = "text"

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class AppConfig:
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    ats: ATSConfig = field(default_factory=ATSConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        candidates = [Path(env_path)] if env_path else []
        # Look for config.yaml relative to the project root
        candidates += [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    scoring_raw = dict(raw.get("scoring", {}))
    weights = ScoreWeights(**scoring_raw.pop("weights", {}))

    return AppConfig(
        scoring=ScoringConfig(weights=weights, **scoring_raw),
        ats=ATSConfig(**raw.get("ats", {})),
        extraction=ExtractionConfig(**raw.get("extraction", {})),
        limits=LimitsConfig(**raw.get("limits", {})),
        export=ExportConfig(**raw.get("export", {})),
    )
