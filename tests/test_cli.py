"""End-to-end tests for the command line interface."""

import json

import pytest

import cli


@pytest.fixture
def files(tmp_path, job_text, resume_text, pdf_factory):
    job = tmp_path / "job.txt"
    job.write_text(job_text, encoding="utf-8")
    strong = tmp_path / "strong.pdf"
    strong.write_bytes(pdf_factory(resume_text))
    weak = tmp_path / "weak.txt"
    weak.write_text("Gardener", encoding="utf-8")
    return {"job": str(job), "strong": str(strong), "weak": str(weak), "dir": tmp_path}


@pytest.fixture(autouse=True)
def no_gemini_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)


def test_text_output(files, capsys):
    assert cli.main(["--job-file", files["job"], "--resume", files["weak"], files["strong"]]) == 0
    out = capsys.readouterr().out
    assert out.index(files["strong"]) < out.index(files["weak"])
    assert "[x] React" in out
    assert "[ ] AWS" in out
    assert "Improvement plan:" in out


def test_json_output(files, capsys):
    assert cli.main(["--job-file", files["job"], "--resume", files["weak"], files["strong"], "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [item["label"] for item in data] == [files["strong"], files["weak"]]
    assert data[0]["rank"] == 1
    assert data[0]["result"]["missingKeywords"] == ["AWS", "Docker"]


def test_pdf_report(files, capsys):
    out_path = files["dir"] / "report.pdf"
    assert cli.main(["--job-file", files["job"], "--resume", files["strong"], "--out-report", str(out_path)]) == 0
    assert out_path.read_bytes().startswith(b"%PDF")


def test_unreadable_resume(files, capsys):
    missing = str(files["dir"] / "missing.pdf")
    assert cli.main(["--job-file", files["job"], "--resume", missing]) == 1
    assert "error:" in capsys.readouterr().err


def test_gemini_requires_key(files, capsys):
    assert cli.main(["--job-file", files["job"], "--resume", files["strong"], "--gemini"]) == 1
    assert "GEMINI_API_KEY" in capsys.readouterr().err


def test_gemini_commentary(files, capsys, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    seen = {}

    def fake_analyze(self, resume_text, job_description_text):
        seen["resume"] = resume_text
        return "Solid React background."

    monkeypatch.setattr(cli.GeminiClient, "analyze", fake_analyze)
    assert cli.main(["--job-file", files["job"], "--resume", files["weak"], files["strong"], "--gemini"]) == 0
    assert "Solid React background." in capsys.readouterr().out
    assert "React developer" in seen["resume"]


def test_job_file_not_utf8(files, capsys):
    job = files["dir"] / "job_latin1.txt"
    job.write_bytes("Développeur React à Genève".encode("latin-1"))
    assert cli.main(["--job-file", str(job), "--resume", files["strong"]]) == 1
    assert "error:" in capsys.readouterr().err
