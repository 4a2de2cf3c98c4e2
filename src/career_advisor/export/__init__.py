"""Report exporters for career analysis results."""
from career_advisor.export.pdf_renderer import render_pdf
from career_advisor.export.report_renderer import (
    render_html_report,
    render_json_report,
    render_markdown_report,
    render_text_report,
    report_filename,
)

__all__ = [
    "render_html_report",
    "render_json_report",
    "render_markdown_report",
    "render_pdf",
    "render_text_report",
    "report_filename",
]
