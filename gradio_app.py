"""Gradio app to rank resumes against a job description.

Flow:
- User uploads one or more resumes (PDF or .txt) and pastes a job description or a URL.
- Analyze -> ranking table sorted by match percentage, best match selected.
- User picks any resume to see its skills, suggestions, plan and contact details.
- A printable PDF report of the whole ranking can be downloaded.
- With a Gemini API key, free-form commentary on the best match is shown too.
"""
import logging
import os
import tempfile

import gradio as gr

from careersync import analyzer, documents, report
from careersync.config import configure_logging, load_settings
from careersync.exceptions import CareerSyncError
from careersync.gemini import GeminiClient

logger = logging.getLogger("careersync.app")

RANKING_HEADERS = ["Rank", "Resume", "Match %", "Skills", "Missing keywords"]


def _read_uploaded_file(file) -> str:
    # gradio hands over either a path or a tempfile-like object
    path = getattr(file, "name", file)
    return documents.read_resume(path)


def _details(label, ranked) -> str:
    for item in ranked or []:
        if item.label == label:
            return report.render_markdown(item.result, title=item.label)
    return ""


def _write_report(ranked) -> str:
    fd, path = tempfile.mkstemp(prefix="careersync_report_", suffix=".pdf")
    with os.fdopen(fd, "wb") as f:
        f.write(report.build_pdf_report(ranked))
    return path


def analyze(files, job_text, job_url, api_key):
    settings = load_settings()
    if job_url and not job_text:
        try:
            job_text = documents.fetch_job_posting_from_url(job_url)
        except Exception as e:
            raise gr.Error(f"Could not download the job posting: {e}")
    if not files:
        raise gr.Error("Please upload at least one resume")
    if not job_text or not job_text.strip():
        raise gr.Error("Please enter the job description")

    resumes = []
    seen = set()
    for file in files:
        label = os.path.basename(getattr(file, "name", file))
        if label in seen:
            logger.warning("skipping duplicate upload %s", label)
            gr.Warning(f"Skipped {label}: another resume with the same file name was already uploaded")
            continue
        try:
            resumes.append((label, _read_uploaded_file(file)))
        except CareerSyncError as e:
            logger.warning("skipping %s: %s", label, e)
            gr.Warning(f"Skipped {label}: {e}")
            continue
        seen.add(label)
    if not resumes:
        raise gr.Error("None of the uploaded resumes could be read")

    ranked = analyzer.rank_resumes(resumes, job_text)
    best = analyzer.best_match(ranked)

    commentary = ""
    key = (api_key or "").strip() or settings.gemini_api_key
    if key:
        client = GeminiClient(api_key=key,
                              model=settings.gemini_model,
                              timeout=settings.gemini_timeout,
                              max_retries=settings.gemini_max_retries)
        resume_text = next(text for label, text in resumes if label == best.label)
        try:
            commentary = client.analyze(resume_text, job_text)
        except CareerSyncError as e:
            logger.warning("gemini analysis failed: %s", e)
            gr.Warning(f"Gemini analysis failed: {e}")

    labels = [item.label for item in ranked]
    return (
        report.ranking_rows(ranked),
        gr.update(choices=labels, value=best.label),
        _details(best.label, ranked),
        _write_report(ranked),
        commentary,
        ranked,
    )


def build_app() -> gr.Blocks:
    with gr.Blocks(title="CareerSync") as demo:
        gr.Markdown("# Optimize your resumes for the job\n"
                    "Upload resumes and a job description to rank them and get improvement suggestions.")
        ranked_state = gr.State([])
        with gr.Tab("Input"):
            with gr.Row():
                files = gr.File(label="Resumes", file_count="multiple", file_types=[".pdf", ".txt"])
                with gr.Column():
                    job_text = gr.Textbox(label="Job description", lines=12)
                    job_url = gr.Textbox(label="...or job posting URL")
            api_key = gr.Textbox(label="Gemini API key (optional)", type="password")
            run = gr.Button("Analyze & rank resumes", variant="primary")
        with gr.Tab("Results"):
            ranking = gr.Dataframe(headers=RANKING_HEADERS, label="Ranking", interactive=False)
            selected = gr.Dropdown(label="Show analysis for", choices=[])
            details = gr.Markdown()
            commentary = gr.Textbox(label="Gemini commentary (best match)", lines=10)
            report_file = gr.File(label="Printable report")

        run.click(analyze,
                  inputs=[files, job_text, job_url, api_key],
                  outputs=[ranking, selected, details, report_file, commentary, ranked_state])
        selected.change(_details, inputs=[selected, ranked_state], outputs=details)
    return demo


if __name__ == "__main__":
    configure_logging(load_settings().log_level)
    build_app().launch()
