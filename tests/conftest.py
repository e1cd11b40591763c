import pytest
from fpdf import FPDF
from fpdf.enums import XPos, YPos

JOB_TEXT = "Looking for a React developer with AWS and Docker experience"
RESUME_TEXT = "I am a React developer with 5 years building APIs. Increased throughput by 40%."
PROFILE_RESUME = "John Smith\njohn@example.com\n555-123-4567\nlinkedin.com/in/johnsmith"


def make_pdf(text: str = "") -> bytes:
    """Build a one-page PDF holding ``text`` (blank page if empty)."""
    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", size=12)
    for line in text.splitlines():
        pdf.multi_cell(0, 8, line, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    return bytes(pdf.output())


@pytest.fixture
def job_text() -> str:
    return JOB_TEXT


@pytest.fixture
def resume_text() -> str:
    return RESUME_TEXT


@pytest.fixture
def profile_resume() -> str:
    return PROFILE_RESUME


@pytest.fixture
def pdf_factory():
    return make_pdf
