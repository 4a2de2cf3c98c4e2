from __future__ import annotations

import datetime
import json
from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from career_advisor.export.labels import get_labels
from career_advisor.models.analysis import CareerAnalysisResult

TEMPLATES_DIR = Path(__file__).parent / "templates"
REPORT_STEM = "career-analysis-report"


def _text_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def _context(result: CareerAnalysisResult, language: str) -> dict:
    return {
        "result": result,
        "scores": result.scores,
        "job": result.job_posting,
        "salary": result.interview_preparation.salary_insights,
        "plan": result.action_plan,
        "t": get_labels(language),
    }


def render_markdown_report(result: CareerAnalysisResult, language: str = "en") -> str:
    template = _text_environment().get_template("report.md.j2")
    return template.render(**_context(result, language))


def render_text_report(result: CareerAnalysisResult, language: str = "en") -> str:
    """Plain-text report laid out like the classic export: banner, sections, dashes."""
    template = _text_environment().get_template("report.txt.j2")
    return template.render(**_context(result, language))


def render_html_report(result: CareerAnalysisResult, language: str = "en") -> str:
    """Markdown report converted to a standalone, styled HTML page."""
    md_text = render_markdown_report(result, language)
    html_body = markdown.markdown(md_text, extensions=["tables", "sane_lists"])
    css_path = TEMPLATES_DIR / "report.css"
    css = css_path.read_text(encoding="utf-8") if css_path.exists() else ""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
    )
    template = env.get_template("base.html")
    return template.render(
        title=get_labels(language)["title"],
        language=language,
        css=Markup(css),
        body=Markup(html_body),
    )


def render_json_report(result: CareerAnalysisResult) -> str:
    return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2)


def report_filename(suffix: str, today: datetime.date | None = None) -> str:
    """``career-analysis-report-YYYY-MM-DD.<suffix>``"""
    today = today or datetime.date.today()
    return f"{REPORT_STEM}-{today.isoformat()}.{suffix.lstrip('.')}"
