"""
Tests for resume and job posting text extraction.

PDFs are generated on the fly with fpdf2; HTTP is mocked.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from careersync import documents
from careersync.exceptions import ExtractionError


class TestExtractTextFromPdf:

    def test_from_bytes(self, pdf_factory):
        text = documents.extract_text_from_pdf(pdf_factory("Jane Doe\njane@example.com"))
        assert "Jane Doe" in text
        assert "jane@example.com" in text

    def test_from_path(self, pdf_factory, tmp_path):
        path = tmp_path / "resume.pdf"
        path.write_bytes(pdf_factory("Python developer"))
        assert "Python developer" in documents.extract_text_from_pdf(path)
        assert "Python developer" in documents.extract_text_from_pdf(str(path))

    def test_not_a_pdf(self):
        with pytest.raises(ExtractionError):
            documents.extract_text_from_pdf(b"this is not a pdf")

    def test_no_text_layer(self, pdf_factory):
        with pytest.raises(ExtractionError, match="No text"):
            documents.extract_text_from_pdf(pdf_factory(""))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ExtractionError):
            documents.extract_text_from_pdf(tmp_path / "missing.pdf")


class TestReadResume:

    def test_text_file(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe\nData analyst", encoding="utf-8")
        assert documents.read_resume(path) == "Jane Doe\nData analyst"

    def test_pdf_file(self, pdf_factory, tmp_path):
        path = tmp_path / "resume.PDF"
        path.write_bytes(pdf_factory("Data analyst"))
        assert "Data analyst" in documents.read_resume(path)

    def test_missing_text_file(self, tmp_path):
        with pytest.raises(ExtractionError):
            documents.read_resume(tmp_path / "missing.txt")

    def test_oversized_file_refused(self, tmp_path):
        path = tmp_path / "huge.pdf"
        with open(path, "wb") as f:
            f.truncate(documents.MAX_RESUME_BYTES + 1)
        with pytest.raises(ExtractionError, match="too large"):
            documents.read_resume(path)

    def test_custom_limit(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("x" * 100, encoding="utf-8")
        assert documents.read_resume(path, max_bytes=100) == "x" * 100
        with pytest.raises(ExtractionError, match="too large"):
            documents.read_resume(path, max_bytes=99)


class TestFetchJobPosting:

    HTML = """
    <html><head><title>Job</title><style>body {color: red}</style></head>
    <body>
      <script>var tracking = 1;</script>
      <h1>Backend   Engineer</h1>
      <p>Requirements: Python, Docker</p>
    </body></html>
    """

    def test_visible_text_only(self):
        resp = MagicMock(text=self.HTML)
        with patch("careersync.documents.requests.get", return_value=resp) as get:
            text = documents.fetch_job_posting_from_url("https://example.com/job")

        get.assert_called_once_with("https://example.com/job", timeout=10)
        resp.raise_for_status.assert_called_once()
        assert "Backend Engineer" in text
        assert "Requirements: Python, Docker" in text
        assert "tracking" not in text
        assert "color" not in text

    def test_http_error_propagates(self):
        resp = MagicMock()
        resp.raise_for_status.side_effect = requests.HTTPError("404")
        with patch("careersync.documents.requests.get", return_value=resp):
            with pytest.raises(requests.HTTPError):
                documents.fetch_job_posting_from_url("https://example.com/missing")
