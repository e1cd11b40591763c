"""Getting plain text out of resumes and job postings."""
import io
import logging
import re
from pathlib import Path
from typing import Union

import requests
from bs4 import BeautifulSoup
from pdfminer.high_level import extract_text as pdfminer_extract_text
from pdfminer.psparser import PSException

from .exceptions import ExtractionError

logger = logging.getLogger(__name__)

PdfSource = Union[str, Path, bytes]

MAX_RESUME_BYTES = 5 * 1024 * 1024


def fetch_job_posting_from_url(url: str, timeout: float = 10) -> str:
    """Download HTML and return its visible text.

    Does not run JavaScript; works for static pages.
    """
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    soup = BeautifulSoup(resp.text, "html.parser")
    # drop scripts and styles
    for s in soup(["script", "style", "noscript"]):
        s.decompose()
    text = soup.get_text(separator="\n")
    # normalize whitespace
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n\s*\n+", "\n\n", text)
    return text.strip()


def extract_text_from_pdf(source: PdfSource) -> str:
    """Extract text from a PDF given as a path or raw bytes.

    Raises ExtractionError if the document cannot be parsed or has no text
    layer (e.g. a scanned image).
    """
    name = "<bytes>" if isinstance(source, bytes) else str(source)
    pdf_file = io.BytesIO(source) if isinstance(source, bytes) else source
    try:
        text = pdfminer_extract_text(pdf_file)
    except (PSException, OSError, ValueError) as e:
        raise ExtractionError(f"Failed to extract text from PDF {name}: {e}") from e
    if not text.strip():
        raise ExtractionError(f"No text found in PDF {name}")
    logger.info("extracted %d characters from %s", len(text), name)
    return text


def read_resume(path: Union[str, Path], max_bytes: int = MAX_RESUME_BYTES) -> str:
    """Read a resume file: PDFs go through pdfminer, anything else is UTF-8 text.

    Files larger than ``max_bytes`` are refused before any parsing.
    """
    path = Path(path)
    try:
        size = path.stat().st_size
    except OSError as e:
        raise ExtractionError(f"Failed to read {path}: {e}") from e
    if size > max_bytes:
        raise ExtractionError(f"{path.name} is too large ({size} bytes, limit {max_bytes})")
    if path.suffix.lower() == ".pdf":
        return extract_text_from_pdf(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ExtractionError(f"Failed to read {path}: {e}") from e
