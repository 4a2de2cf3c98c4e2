"""Tests for the typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from career_advisor.cli import app

runner = CliRunner()


@pytest.fixture
def inputs(tmp_path, sample_resume_text, sample_jd_text):
    resume = tmp_path / "resume.txt"
    resume.write_text(sample_resume_text, encoding="utf-8")
    jd = tmp_path / "job.txt"
    jd.write_text(sample_jd_text, encoding="utf-8")
    return resume, jd


@pytest.fixture
def no_config(tmp_path):
    return str(tmp_path / "no-config.yaml")


class TestAnalyzeCommand:
    def test_text_report(self, inputs, tmp_path, no_config):
        resume, jd = inputs
        out = tmp_path / "report.txt"
        result = runner.invoke(
            app,
            ["analyze", "--resume", str(resume), "--jd", str(jd), "-o", str(out), "-c", no_config],
        )
        assert result.exit_code == 0, result.output
        assert "Report saved" in result.output
        assert "Matched:" in result.output
        assert out.read_text(encoding="utf-8").startswith("CAREER ANALYSIS REPORT")

    def test_json_report(self, inputs, tmp_path, no_config):
        resume, jd = inputs
        out = tmp_path / "report.json"
        result = runner.invoke(
            app,
            [
                "analyze",
                "--resume", str(resume),
                "--jd", str(jd),
                "-f", "json",
                "-o", str(out),
                "-c", no_config,
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["job_posting"]["company"] == "Acme Corp"

    def test_markdown_in_korean(self, inputs, tmp_path, no_config):
        resume, jd = inputs
        out = tmp_path / "report.md"
        result = runner.invoke(
            app,
            [
                "analyze",
                "--resume", str(resume),
                "--jd", str(jd),
                "-f", "markdown",
                "-l", "ko",
                "-o", str(out),
                "-c", no_config,
            ],
        )
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8").startswith("# 커리어 분석 보고서")

    def test_default_output_dir_from_config(self, inputs, tmp_path):
        resume, jd = inputs
        reports = tmp_path / "reports"
        config = tmp_path / "config.yaml"
        config.write_text(f"export:\n  output_dir: {reports}\n", encoding="utf-8")
        result = runner.invoke(
            app, ["analyze", "--resume", str(resume), "--jd", str(jd), "-c", str(config)]
        )
        assert result.exit_code == 0, result.output
        written = list(reports.glob("career-analysis-report-*.txt"))
        assert len(written) == 1

    def test_missing_resume(self, inputs, tmp_path, no_config):
        _, jd = inputs
        result = runner.invoke(
            app,
            ["analyze", "--resume", str(tmp_path / "nope.txt"), "--jd", str(jd), "-c", no_config],
        )
        assert result.exit_code == 1

    def test_empty_resume(self, inputs, tmp_path, no_config):
        _, jd = inputs
        empty = tmp_path / "empty.txt"
        empty.write_text("   \n", encoding="utf-8")
        result = runner.invoke(
            app, ["analyze", "--resume", str(empty), "--jd", str(jd), "-c", no_config]
        )
        assert result.exit_code == 1
        assert "Resume is empty" in result.output

    def test_empty_job_posting(self, inputs, tmp_path, no_config):
        resume, _ = inputs
        empty = tmp_path / "empty.txt"
        empty.write_text("", encoding="utf-8")
        result = runner.invoke(
            app, ["analyze", "--resume", str(resume), "--jd", str(empty), "-c", no_config]
        )
        assert result.exit_code == 1
        assert "Job posting is empty" in result.output

    def test_unknown_format(self, inputs, no_config):
        resume, jd = inputs
        result = runner.invoke(
            app,
            ["analyze", "--resume", str(resume), "--jd", str(jd), "-f", "docx", "-c", no_config],
        )
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_invalid_config(self, inputs, tmp_path):
        resume, jd = inputs
        config = tmp_path / "bad.yaml"
        config.write_text("scoring:\n  weights:\n    ats: 0.9\n", encoding="utf-8")
        result = runner.invoke(
            app, ["analyze", "--resume", str(resume), "--jd", str(jd), "-c", str(config)]
        )
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestIndustriesCommand:
    def test_lists_industries(self, no_config):
        result = runner.invoke(app, ["industries", "-c", no_config])
        assert result.exit_code == 0
        for name in ("technology", "finance", "marketing"):
            assert name in result.output
