"""Fallback PDF renderer using fpdf2 (pure Python, no system deps)."""

from __future__ import annotations

import html
import logging
import re
from io import BytesIO
from pathlib import Path

from fpdf import FPDF
from fpdf.errors import FPDFException

logger = logging.getLogger(__name__)

# Unicode fonts with Hangul coverage, so Korean reports survive the fallback
_UNICODE_FONT_PATHS = [
    "/System/Library/Fonts/Supplemental/AppleGothic.ttf",
    "/usr/share/fonts/truetype/nanum/NanumGothic.ttf",
    "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "C:/Windows/Fonts/malgun.ttf",
]

_BLOCK_TAGS = r"h[1-3]|p|li|ul|ol|tr|blockquote|hr\s*/?|br\s*/?"
_KNOWN_TAGS = {"h1", "h2", "h3", "p", "li", "ul", "ol", "tr", "td", "th", "blockquote", "hr", "br"}

_HEADING_SIZES = {"h1": (18, 10), "h2": (13, 8), "h3": (11, 7)}


def _find_unicode_font() -> str | None:
    for path in _UNICODE_FONT_PATHS:
        if Path(path).exists():
            return path
    return None


def html_to_pdf_fpdf2(html_content: str) -> bytes:
    """Lay out the report's headings, paragraphs, lists and table rows as plain PDF text."""
    body_match = re.search(r"<body>(.*?)</body>", html_content, re.DOTALL)
    body = body_match.group(1) if body_match else html_content

    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=18)
    pdf.add_page()

    font_name = "Helvetica"
    font_path = _find_unicode_font()
    if font_path:
        try:
            pdf.add_font("ReportFont", "", font_path)
            font_name = "ReportFont"
        except (OSError, RuntimeError, FPDFException):
            logger.debug("Failed to load font %s", font_path)
    pdf.set_font(font_name, size=10)

    for kind, text in parse_html_blocks(body):
        safe = _safe_text(text, pdf)
        try:
            _write_block(pdf, kind, safe)
        except FPDFException:
            logger.debug("Skipped unrenderable %s block: %s", kind, safe[:30])

    buf = BytesIO()
    pdf.output(buf)
    return buf.getvalue()


def _write_block(pdf: FPDF, kind: str, text: str) -> None:
    if kind in _HEADING_SIZES:
        size, height = _HEADING_SIZES[kind]
        pdf.ln(2)
        pdf.set_font_size(size)
        pdf.multi_cell(0, height, text)
        if kind == "h1":
            pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
        pdf.ln(2)
        pdf.set_font_size(10)
    elif kind == "bullet":
        pdf.multi_cell(0, 6, f"  - {text}")
    elif kind == "quote":
        pdf.set_x(pdf.l_margin + 6)
        pdf.multi_cell(0, 6, text)
    elif kind == "row":
        pdf.multi_cell(0, 6, text)
    elif kind == "rule":
        pdf.ln(2)
        pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
        pdf.ln(2)
    elif kind == "break":
        pdf.ln(3)
    elif text.strip():
        pdf.multi_cell(0, 6, text)


def _safe_text(text: str, pdf: FPDF) -> str:
    """Core fonts only cover latin-1."""
    if pdf.is_ttf_font:
        return text
    return text.encode("latin-1", errors="replace").decode("latin-1")


def parse_html_blocks(body_html: str) -> list[tuple[str, str]]:
    """Split simple HTML into (kind, text) pairs.

    Kinds: h1-h3, text, bullet, quote, row, rule, break.
    """
    blocks: list[tuple[str, str]] = []
    current = "text"
    in_quote = False
    row_cells: list[str] | None = None

    for part in re.split(rf"(</?(?:{_BLOCK_TAGS})[^>]*>|</?t[dh][^>]*>)", body_html):
        part = part.strip()
        if not part:
            continue
        tag = re.match(r"<(/?)([a-z0-9]+)", part) if part.startswith("<") else None
        if tag is None or tag.group(2) not in _KNOWN_TAGS:
            text = _strip_html(part)
            if not text:
                continue
            if row_cells is not None:
                row_cells.append(text)
            else:
                blocks.append(("quote" if in_quote and current == "text" else current, text))
            continue

        closing, name = tag.group(1) == "/", tag.group(2)
        if name in ("h1", "h2", "h3"):
            current = "text" if closing else name
        elif name == "li":
            current = "text" if closing else "bullet"
        elif name == "blockquote":
            in_quote = not closing
        elif name == "tr":
            if closing and row_cells is not None:
                blocks.append(("row", " | ".join(row_cells)))
                row_cells = None
            elif not closing:
                row_cells = []
        elif name in ("ul", "ol") and closing:
            blocks.append(("break", ""))
        elif name == "hr":
            blocks.append(("rule", ""))
        elif name == "br":
            blocks.append(("break", ""))
        elif name == "p" and not closing:
            current = "text"
    return blocks


def _strip_html(text: str) -> str:
    """Remove HTML tags and decode entities."""
    text = re.sub(r"<[^>]+>", "", text)
    return html.unescape(text).strip()
