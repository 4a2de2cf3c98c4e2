"""Resume file loaders. Every format ends up as cleaned plain text."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt", ".md")

# Contact-line pictographs exported by word processors (phone, mail, pin, ...)
ICON_PATTERN = (
    r"[\U0001f4e7\U0001f4de\U0001f4cd\U0001f4bc\U0001f4c5\U0001f393"
    r"\U0001f517\U0001f310\U0001f4f1\u260e\u2709]\s*"
)


def parse_resume(file_path: str | Path) -> str:
    """Read a resume file (PDF, DOCX, TXT, MD) and return clean plain text."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported file format: {path.suffix} (expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )
    if suffix == ".pdf":
        raw = _parse_pdf(path)
    elif suffix == ".docx":
        raw = _parse_docx(path)
    else:
        raw = path.read_text(encoding="utf-8")
    text = clean_text(raw)
    logger.debug("Parsed resume %s (%d chars)", path.name, len(text))
    return text


def clean_text(text: str) -> str:
    """Normalise extracted resume text.

    Strips invisible unicode and contact icons, rewrites fancy bullets as
    ``- `` (the scorer looks for ``-``/``•``/``*`` markers), collapses runs of
    spaces and limits blank lines to one.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(ICON_PATTERN, "", text)

    text = re.sub(r"^(\s*)[●◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = []
    for line in text.splitlines():
        stripped = re.sub(r"[ \t]{2,}", " ", line.strip())
        lines.append(stripped)
    text = "\n".join(lines)

    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    with fitz.open(str(path)) as doc:
        return "\n".join(page.get_text() for page in doc)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
