"""Rendering analysis results for people: Markdown for the web app, PDF for printing."""
import logging
from typing import List, Optional

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from .models import NOT_FOUND, AnalysisResult, RankedResume

logger = logging.getLogger(__name__)

# light blue for titles, black for body
TITLE_COLOR = (173, 216, 230)
BODY_COLOR = (0, 0, 0)


def ranking_rows(ranked: List[RankedResume]) -> List[list]:
    """Table rows: rank, resume, match %, matched/total skills, missing keywords."""
    rows = []
    for item in ranked:
        r = item.result
        rows.append([
            item.rank,
            item.label,
            r.match_percentage,
            f"{len(r.matched_skills)}/{len(r.key_skills_match)}",
            ", ".join(r.missing_keywords) or "-",
        ])
    return rows


def _bullets(items: List[str], empty: str) -> List[str]:
    if not items:
        return [f"_{empty}_"]
    return [f"- {i}" for i in items]


def render_markdown(result: AnalysisResult, title: Optional[str] = None) -> str:
    lines: List[str] = []
    if title:
        lines += [f"## Analysis for: {title}", ""]
    lines += [f"**Match: {result.match_percentage}%**", ""]

    lines += ["### Key skills", ""]
    if result.key_skills_match:
        badges = [("✅ " if m.matched else "❌ ") + m.skill for m in result.key_skills_match]
        lines.append(" · ".join(badges))
    else:
        lines.append("_No known skills found in the job description._")

    lines += ["", "### Areas to improve", ""]
    lines += _bullets(result.improvements, "Nothing to improve.")
    lines += ["", "### Strengths", ""]
    lines += _bullets(result.strengths, "No specific strengths detected.")
    lines += ["", "### Missing keywords", ""]
    lines.append(", ".join(f"`{k}`" for k in result.missing_keywords) or "_None_")
    lines += ["", "### Improvement plan", ""]
    lines += [f"{i}. {step}" for i, step in enumerate(result.improvement_plan, 1)]

    p = result.profile_details
    lines += [
        "",
        "### Profile details",
        "",
        f"- Name: {p.name}",
        f"- Email: {p.email}",
        f"- Phone: {p.phone}",
        f"- LinkedIn: {p.linkedin_url}",
    ]
    return "\n".join(lines)


def _latin1(text: str) -> str:
    # core PDF fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


class _ReportPDF(FPDF):
    def heading(self, text: str, size: int = 14) -> None:
        self.set_font("Times", "B", size)
        self.set_text_color(*TITLE_COLOR)
        self.multi_cell(0, 8, _latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(*BODY_COLOR)
        self.set_font("Times", "", 11)

    def paragraph(self, text: str) -> None:
        self.multi_cell(0, 7, _latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def bullet(self, text: str) -> None:
        self.cell(6)
        self.multi_cell(0, 7, _latin1("- " + text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def build_pdf_report(ranked: List[RankedResume]) -> bytes:
    """Printable report: the ranking, then one section per resume."""
    pdf = _ReportPDF()
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()
    pdf.heading("Resume ranking", size=16)
    pdf.ln(2)
    if not ranked:
        pdf.paragraph("No resumes were analyzed.")
    for rank, label, pct, skills, _missing in ranking_rows(ranked):
        pdf.paragraph(f"{rank}. {label}: {pct}% match ({skills} skills)")

    for item in ranked:
        r = item.result
        pdf.ln(4)
        pdf.heading(f"{item.rank}. {item.label} ({r.match_percentage}%)")
        pdf.paragraph("Matched skills: " + (", ".join(r.matched_skills) or "none"))
        pdf.paragraph("Missing keywords: " + (", ".join(r.missing_keywords) or "none"))
        p = r.profile_details
        contact = [v for v in (p.name, p.email, p.phone, p.linkedin_url) if v != NOT_FOUND]
        pdf.paragraph("Contact: " + (" | ".join(contact) or NOT_FOUND))
        pdf.ln(2)
        pdf.heading("Suggestions", size=12)
        for s in r.suggestions:
            pdf.bullet(f"[{s.kind.value}] {s.text}")
        pdf.ln(2)
        pdf.heading("Improvement plan", size=12)
        for i, step in enumerate(r.improvement_plan, 1):
            pdf.bullet(f"{i}. {step}")

    data = bytes(pdf.output())
    logger.info("built PDF report for %d resume(s), %d bytes", len(ranked), len(data))
    return data
