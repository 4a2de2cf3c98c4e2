"""Tests for the analysis orchestrator."""

import pytest

from career_advisor.config import AppConfig, ExtractionConfig, LimitsConfig
from career_advisor.models import CareerAnalysisResult
from career_advisor.pipeline.orchestrator import CareerAnalyzer, analyze


class TestCareerAnalyzer:
    def test_full_analysis(self, analysis):
        assert isinstance(analysis, CareerAnalysisResult)
        assert analysis.job_posting.company == "Acme Corp"
        assert analysis.skill_match.matched_skills == [
            "JavaScript",
            "React",
            "Node.js",
            "PostgreSQL",
            "AWS",
            "Docker",
        ]
        assert analysis.skill_match.missing_skills == ["Kubernetes", "GraphQL"]
        assert analysis.skills_match_score == 75
        assert analysis.experience_alignment_score == 100
        assert analysis.cover_letter.tone == "technical"

    def test_scores_in_range(self, analysis):
        for value in analysis.scores.model_dump().values():
            assert 0 <= value <= 100

    def test_list_caps(self, analysis):
        assert len(analysis.resume_analysis.strengths) <= 6
        assert len(analysis.resume_analysis.weaknesses) <= 5
        assert len(analysis.resume_analysis.suggestions) <= 6
        assert len(analysis.resume_analysis.missing_keywords) <= 10
        assert len(analysis.interview_preparation.questions) <= 8
        assert len(analysis.skills_analysis.skill_gaps) <= 8
        assert len(analysis.skills_analysis.learning_path) <= 3
        assert len(analysis.resume_profile.achievements) <= 8

    def test_idempotent(self, sample_resume_text, sample_jd_text):
        analyzer = CareerAnalyzer()
        first = analyzer.analyze(sample_resume_text, sample_jd_text)
        second = analyzer.analyze(sample_resume_text, sample_jd_text)
        assert first == second

    def test_module_level_analyze(self, sample_resume_text, sample_jd_text, analysis):
        assert analyze(sample_resume_text, sample_jd_text) == analysis

    def test_progress_callback(self, sample_resume_text, sample_jd_text):
        phases = []

        def on_phase(phase, detail):
            phases.append(phase)

        CareerAnalyzer().analyze(sample_resume_text, sample_jd_text, on_phase=on_phase)
        assert phases == ["extract", "extract_done", "match", "score", "generate", "done"]

    def test_logs_completion(self, sample_resume_text, sample_jd_text, caplog):
        with caplog.at_level("INFO", logger="career_advisor.pipeline.orchestrator"):
            CareerAnalyzer().analyze(sample_resume_text, sample_jd_text)
        assert "Analysis complete" in caplog.text


class TestScenarios:
    def test_full_skill_match(self):
        result = analyze(
            "I have 5 years of experience with JavaScript, React.",
            "We need 3+ years of experience.\nJavaScript, React required.",
        )
        assert result.job_posting.industry == "general"
        assert result.skill_match.matched_skills == ["JavaScript", "React"]
        assert result.skill_match.missing_skills == []
        assert result.experience_alignment_score == 100
        assert result.skills_match_score == 100

    def test_posting_without_skills(self):
        result = analyze(
            "Worked as a barista.",
            "We are looking for a friendly person to join our office.",
        )
        assert result.job_posting.company == "the company"
        assert result.skill_match.job_skills == []
        assert result.skills_match_score == 100
        assert result.cover_letter.keyword_density == 100
        assert "Dear Hiring Manager," in result.cover_letter.content

    def test_experience_shortfall(self):
        result = analyze(
            "2 years of experience with Python.",
            "Python developer with 4+ years of experience.",
        )
        assert result.experience_alignment_score == 50
        assert result.resume_profile.experience_source == "explicit"


class TestInjection:
    def test_custom_dictionary(self, tiny_dictionary):
        analyzer = CareerAnalyzer(dictionary=tiny_dictionary)
        result = analyzer.analyze(
            "Shipped Elixir services for five years.",
            "Beam engineer. Elixir and Erlang required.",
        )
        assert result.job_posting.industry == "technology"
        assert result.skill_match.matched_skills == ["Elixir"]
        assert result.skill_match.missing_skills == ["Erlang"]
        assert result.resume_profile.writing_quality.action_verb_count == 1

    def test_dictionary_path_from_config(self, tmp_path):
        path = tmp_path / "dictionary.yaml"
        path.write_text(
            "industries:\n  technology:\n    languages: [Elixir]\n", encoding="utf-8"
        )
        config = AppConfig(extraction=ExtractionConfig(dictionary_path=str(path)))
        analyzer = CareerAnalyzer(config=config)
        assert analyzer.dictionary.all_skills() == ["Elixir"]

    def test_missing_dictionary_path(self, tmp_path):
        config = AppConfig(extraction=ExtractionConfig(dictionary_path=str(tmp_path / "x.yaml")))
        with pytest.raises(FileNotFoundError):
            CareerAnalyzer(config=config)

    def test_token_mode_from_config(self):
        config = AppConfig(extraction=ExtractionConfig(match_mode="token"))
        result = CareerAnalyzer(config=config).analyze(
            "Java developer.", "Strong JavaScript skills required."
        )
        assert result.skill_match.matched_skills == []
        assert result.skill_match.missing_skills == ["JavaScript"]

    def test_limits_from_config(self, sample_resume_text, sample_jd_text):
        config = AppConfig(limits=LimitsConfig(interview_questions=2, achievements=1))
        result = CareerAnalyzer(config=config).analyze(sample_resume_text, sample_jd_text)
        assert len(result.interview_preparation.questions) == 2
        assert len(result.resume_profile.achievements) == 1
