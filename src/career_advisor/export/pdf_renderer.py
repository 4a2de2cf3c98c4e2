from __future__ import annotations

import logging

from career_advisor.export.report_renderer import render_html_report
from career_advisor.models.analysis import CareerAnalysisResult

logger = logging.getLogger(__name__)


def render_pdf(result: CareerAnalysisResult, language: str = "en") -> bytes:
    """Render the analysis report to PDF bytes."""
    return html_to_pdf(render_html_report(result, language))


def html_to_pdf(html: str) -> bytes:
    """Convert an HTML page to PDF bytes using WeasyPrint, with fpdf2 fallback."""
    try:
        from weasyprint import HTML

        return HTML(string=html).write_pdf()
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")
        from career_advisor.export.pdf_fallback import html_to_pdf_fpdf2

        return html_to_pdf_fpdf2(html)
