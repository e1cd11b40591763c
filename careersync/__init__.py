"""CareerSync: match resumes against a job description.

Small package with functions to:
- extract text from PDF resumes and job postings
- spot known skills and score how well a resume fits a job
- extract contact details from a resume
- suggest improvements and list strengths
- rank several resumes for the same job

The heuristics are simple and transparent; the optional Gemini backend
returns free-form commentary only.
"""

from . import analyzer
from .analyzer import analyze, extract_profile, extract_skills, rank_resumes, score
from .exceptions import (
    CareerSyncError,
    ConfigurationError,
    ExtractionError,
    InvalidInputError,
    ProviderError,
    TransientProviderError,
)
from .models import NOT_FOUND, AnalysisRequest, AnalysisResult, ProfileDetails, RankedResume, SkillMatch, Suggestion, SuggestionKind

__all__ = [
    "analyzer",
    "analyze",
    "extract_profile",
    "extract_skills",
    "rank_resumes",
    "score",
    "NOT_FOUND",
    "AnalysisRequest",
    "AnalysisResult",
    "ProfileDetails",
    "RankedResume",
    "SkillMatch",
    "Suggestion",
    "SuggestionKind",
    "CareerSyncError",
    "ConfigurationError",
    "ExtractionError",
    "InvalidInputError",
    "ProviderError",
    "TransientProviderError",
]
