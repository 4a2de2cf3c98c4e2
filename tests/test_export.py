"""Tests for report rendering (text, markdown, HTML, JSON, PDF)."""

from __future__ import annotations

import datetime
import json
import sys

from career_advisor.export import (
    render_html_report,
    render_json_report,
    render_markdown_report,
    render_pdf,
    render_text_report,
    report_filename,
)
from career_advisor.export.labels import get_labels
from career_advisor.export.pdf_fallback import html_to_pdf_fpdf2, parse_html_blocks
from career_advisor.export.pdf_renderer import html_to_pdf

SAMPLE_HTML = "<!DOCTYPE html><html><head><title>Test</title></head><body><h1>Report</h1><p>Hello</p></body></html>"


class TestLabels:
    def test_english(self):
        assert get_labels("en")["title"] == "Career Analysis Report"

    def test_korean_with_region(self):
        assert get_labels("ko-KR")["title"] == "커리어 분석 보고서"

    def test_unknown_falls_back(self):
        assert get_labels("fr") == get_labels("en")
        assert get_labels(None) == get_labels("en")

    def test_same_keys(self):
        assert set(get_labels("ko")) == set(get_labels("en"))


class TestTextReport:
    def test_banner_and_sections(self, analysis):
        text = render_text_report(analysis)
        lines = text.splitlines()
        assert lines[0] == "CAREER ANALYSIS REPORT - COMPLETE ANALYSIS"
        assert lines[1] == "=" * 80
        assert "Position: Senior Software Engineer @ Acme Corp" in text
        assert f"Overall Match: {analysis.overall_score}%" in text
        assert analysis.cover_letter.content in text

    def test_korean(self, analysis):
        text = render_text_report(analysis, language="ko")
        assert text.startswith("커리어 분석 보고서")


class TestMarkdownReport:
    def test_structure(self, analysis):
        md = render_markdown_report(analysis)
        assert md.startswith("# Career Analysis Report")
        assert "## Executive Summary" in md
        assert f"| ATS Compatibility | {analysis.ats_compatibility_score}% |" in md
        assert "**Matched Skills:** JavaScript, React, Node.js, PostgreSQL, AWS, Docker" in md
        assert "**Skill Gaps:** Kubernetes, GraphQL" in md
        assert "$120,000 - $150,000" in md
        assert "Senior Software Engineer -> Tech Lead" in md

    def test_star_answers_quoted(self, analysis):
        md = render_markdown_report(analysis)
        assert "> Situation: " in md

    def test_action_plan_phases(self, analysis):
        md = render_markdown_report(analysis)
        assert md.index("### Immediate") < md.index("### Short Term") < md.index("### Long Term")


class TestHtmlReport:
    def test_standalone_page(self, analysis):
        page = render_html_report(analysis)
        assert page.startswith("<!DOCTYPE html>")
        assert '<html lang="en">' in page
        assert "<title>Career Analysis Report</title>" in page
        assert "<h1>Career Analysis Report</h1>" in page
        assert "</html>" in page

    def test_language_attribute(self, analysis):
        page = render_html_report(analysis, language="ko")
        assert '<html lang="ko">' in page
        assert "커리어 분석 보고서" in page


class TestJsonReport:
    def test_round_trip(self, analysis):
        data = json.loads(render_json_report(analysis))
        assert data["scores"]["overall"] == analysis.overall_score
        assert data["job_posting"]["company"] == "Acme Corp"
        assert data["cover_letter"]["tone"] == "technical"


class TestFilename:
    def test_dated_name(self):
        day = datetime.date(2024, 1, 2)
        assert report_filename("txt", today=day) == "career-analysis-report-2024-01-02.txt"
        assert report_filename(".pdf", today=day) == "career-analysis-report-2024-01-02.pdf"


class TestPdf:
    def test_fallback_when_weasyprint_missing(self, analysis, monkeypatch):
        monkeypatch.setitem(sys.modules, "weasyprint", None)
        result = render_pdf(analysis)
        assert isinstance(result, bytes)
        assert result[:4] == b"%PDF"

    def test_html_to_pdf_fallback_logs(self, monkeypatch, caplog):
        monkeypatch.setitem(sys.modules, "weasyprint", None)
        with caplog.at_level("WARNING"):
            result = html_to_pdf(SAMPLE_HTML)
        assert result[:4] == b"%PDF"
        assert "fpdf2 fallback" in caplog.text

    def test_fpdf2_renderer(self):
        result = html_to_pdf_fpdf2(SAMPLE_HTML)
        assert isinstance(result, bytes)
        assert result[:4] == b"%PDF"

    def test_fpdf2_handles_korean(self, analysis):
        result = html_to_pdf_fpdf2(render_html_report(analysis, language="ko"))
        assert result[:4] == b"%PDF"


class TestParseHtmlBlocks:
    def test_headings_and_paragraphs(self):
        blocks = parse_html_blocks("<h1>Title</h1><p>Hello <strong>world</strong></p>")
        assert blocks == [("h1", "Title"), ("text", "Hello world")]

    def test_bullets(self):
        blocks = parse_html_blocks("<ul><li>One</li><li>Two</li></ul>")
        assert blocks == [("bullet", "One"), ("bullet", "Two"), ("break", "")]

    def test_blockquote(self):
        assert parse_html_blocks("<blockquote><p>Answer</p></blockquote>") == [("quote", "Answer")]

    def test_table_rows(self):
        blocks = parse_html_blocks("<table><tr><td>ATS</td><td>80%</td></tr></table>")
        assert blocks == [("row", "ATS | 80%")]

    def test_rule_and_entities(self):
        blocks = parse_html_blocks("<p>R&amp;D</p><hr />")
        assert blocks == [("text", "R&D"), ("rule", "")]
