"""Tests for config validation."""

import pytest

from career_advisor.config import LimitsConfig, ScoreWeights, load_config


class TestConfigValidation:
    def test_valid_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config.scoring.weights.keyword_density == 0.25

    def test_weights_must_sum_to_one(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("scoring:\n  weights:\n    ats: 0.5\n")
        with pytest.raises(ValueError, match="sum to 1.0"):
            load_config(yaml)

    def test_weight_out_of_range(self):
        with pytest.raises(ValueError, match="weights.ats"):
            ScoreWeights(ats=1.5, keyword_density=-0.2, experience_alignment=-0.2, skills_match=-0.1)

    def test_invalid_penalty(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("ats:\n  short_penalty: 150\n")
        with pytest.raises(ValueError, match="short_penalty"):
            load_config(yaml)

    def test_min_length_below_max_length(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("ats:\n  min_length: 4000\n")
        with pytest.raises(ValueError, match="min_length"):
            load_config(yaml)

    def test_invalid_match_mode(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("extraction:\n  match_mode: fuzzy\n")
        with pytest.raises(ValueError, match="match_mode"):
            load_config(yaml)

    def test_invalid_required_experience(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("extraction:\n  default_required_experience: 99\n")
        with pytest.raises(ValueError, match="default_required_experience"):
            load_config(yaml)

    def test_invalid_limit(self):
        with pytest.raises(ValueError, match="limits.achievements"):
            LimitsConfig(achievements=0)
