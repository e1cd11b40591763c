#!/usr/bin/env python3
"""CLI for CareerSync.

Examples:
  python cli.py --job-file job.txt --resume alice.pdf bob.pdf
  python cli.py --job-url https://company.example/careers/123 --resume cv.txt --json
  python cli.py --job-file job.txt --resume cv.pdf --out-report report.pdf --gemini

Output: prints the ranking and, for each resume, skills, suggestions and plan.
"""
import argparse
import json
import logging
import sys

import requests

from careersync import analyzer, documents, report
from careersync.config import configure_logging, load_settings
from careersync.exceptions import CareerSyncError
from careersync.gemini import GeminiClient

logger = logging.getLogger("careersync.cli")


def read_text_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def print_result(item) -> None:
    r = item.result
    print(f"\n=== {item.rank}. {item.label}: {r.match_percentage}% match ===\n")
    for m in r.key_skills_match:
        print(f"  [{'x' if m.matched else ' '}] {m.skill}")
    if not r.key_skills_match:
        print("  (no known skills in the job description)")
    print("\nImprovements:")
    for s in r.improvements:
        print(f"  - {s}")
    print("\nStrengths:")
    for s in r.strengths or ["(none detected)"]:
        print(f"  - {s}")
    print("\nImprovement plan:")
    for i, step in enumerate(r.improvement_plan, 1):
        print(f"  {i}. {step}")
    p = r.profile_details
    print(f"\nProfile: {p.name} | {p.email} | {p.phone} | {p.linkedin_url}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="CareerSync: match resumes against a job description")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--job-url", help="URL of the job posting")
    group.add_argument("--job-file", help="File with the job description text")
    parser.add_argument("--resume", nargs="+", required=True, help="Resume files (PDF or plain text)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON instead of text")
    parser.add_argument("--out-report", help="Write a printable PDF report to this file")
    parser.add_argument("--gemini", action="store_true", help="Also ask Gemini for commentary (needs GEMINI_API_KEY)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        if args.job_url:
            logger.info("downloading job posting from %s", args.job_url)
            job_text = documents.fetch_job_posting_from_url(args.job_url)
        else:
            job_text = read_text_file(args.job_file)

        resumes = [(path, documents.read_resume(path)) for path in args.resume]
        ranked = analyzer.rank_resumes(resumes, job_text)

        if args.json:
            print(json.dumps([item.model_dump(mode="json", by_alias=True) for item in ranked], indent=2))
        else:
            print("--- Ranking ---\n")
            for rank, label, pct, skills, missing in report.ranking_rows(ranked):
                print(f"{rank}. {label}  {pct}%  skills {skills}  missing: {missing}")
            for item in ranked:
                print_result(item)

        if args.out_report:
            with open(args.out_report, "wb") as f:
                f.write(report.build_pdf_report(ranked))
            print(f"\nReport saved to: {args.out_report}")

        if args.gemini:
            top = analyzer.best_match(ranked)
            client = GeminiClient.from_settings(settings)
            print(f"\n--- Gemini commentary for {top.label} ---\n")
            resume_text = next(text for label, text in resumes if label == top.label)
            print(client.analyze(resume_text, job_text))
    except (CareerSyncError, OSError, UnicodeDecodeError, requests.RequestException) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
