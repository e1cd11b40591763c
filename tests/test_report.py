"""Tests for Markdown and PDF rendering of results."""

from careersync import report
from careersync.analyzer import analyze, rank_resumes


class TestRankingRows:

    def test_rows(self, resume_text, job_text):
        ranked = rank_resumes([("weak.txt", "Gardener"), ("strong.pdf", resume_text)], job_text)
        assert report.ranking_rows(ranked) == [
            [1, "strong.pdf", 40, "1/3", "AWS, Docker"],
            [2, "weak.txt", 35, "0/3", "React, AWS, Docker"],
        ]

    def test_no_missing_keywords(self, job_text):
        ranked = rank_resumes([("cv.txt", "React developer, AWS, Docker")], job_text)
        assert report.ranking_rows(ranked)[0][4] == "-"


class TestRenderMarkdown:

    def test_sections(self, resume_text, job_text):
        md = report.render_markdown(analyze(resume_text, job_text), title="cv.pdf")
        assert md.startswith("## Analysis for: cv.pdf")
        assert "**Match: 40%**" in md
        assert "✅ React" in md
        assert "❌ AWS" in md
        assert "`Docker`" in md
        assert "- Your React experience is valuable for this position" in md
        assert "1. Create or update a professional summary" in md

    def test_empty_job(self, profile_resume):
        md = report.render_markdown(analyze(profile_resume, ""))
        assert "No known skills found" in md
        assert "- Email: john@example.com" in md
        assert "_None_" in md


class TestBuildPdfReport:

    def test_pdf_bytes(self, resume_text, job_text):
        ranked = rank_resumes([("cv.pdf", resume_text)], job_text)
        data = report.build_pdf_report(ranked)
        assert isinstance(data, bytes)
        assert data.startswith(b"%PDF")

    def test_empty_ranking(self):
        assert report.build_pdf_report([]).startswith(b"%PDF")

    def test_non_latin_text(self, job_text):
        ranked = rank_resumes([("José – CV ✓.pdf", "Łukasz Nowak\nReact developer")], job_text)
        assert report.build_pdf_report(ranked).startswith(b"%PDF")
