import re
from pathlib import Path


def parse_jd(text: str) -> str:
    """Normalise pasted job-posting text without touching bullet markers."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[ \t]+", " ", text)
    lines = [line.strip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def load_jd_file(file_path: str | Path) -> str:
    """Load a job posting from a text or markdown file."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Job posting file not found: {path}")
    if path.suffix.lower() not in (".txt", ".md", ""):
        raise ValueError(f"Unsupported file format: {path.suffix}")
    return parse_jd(path.read_text(encoding="utf-8"))
