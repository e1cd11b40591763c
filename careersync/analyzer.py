"""Heuristic matcher for resumes and job descriptions.

Heuristics:
- Skills are spotted with two fixed dictionaries (technical, then soft skills).
- The match percentage mixes word overlap (60), skill overlap (30) and a
  job-title bonus (10), clamped to [35, 95].
- Contact details come from simple regexes over the resume text.
- Suggestions and the improvement plan are derived from detected gaps only;
  nothing is invented about the candidate.
"""
import logging
import re
from typing import Iterable, List, Optional, Set, Tuple

from .exceptions import InvalidInputError
from .models import (
    NOT_FOUND,
    AnalysisRequest,
    AnalysisResult,
    ProfileDetails,
    RankedResume,
    SkillMatch,
    Suggestion,
    SuggestionKind,
)

logger = logging.getLogger(__name__)

TECH_SKILLS: Tuple[str, ...] = (
    "JavaScript",
    "TypeScript",
    "React",
    "Angular",
    "Vue.js",
    "Node.js",
    "Python",
    "Java",
    "C#",
    "C++",
    "Ruby",
    "PHP",
    "Swift",
    "Kotlin",
    "Golang",
    "Rust",
    "Scala",
    "HTML",
    "CSS",
    "Sass",
    "Tailwind",
    "Redux",
    "GraphQL",
    "REST",
    "API",
    "SQL",
    "MySQL",
    "PostgreSQL",
    "MongoDB",
    "Redis",
    "Elasticsearch",
    "Firebase",
    "AWS",
    "Azure",
    "GCP",
    "Docker",
    "Kubernetes",
    "Terraform",
    "Jenkins",
    "CI/CD",
    "Git",
    "Linux",
    "Django",
    "Flask",
    "Spring",
    "ASP.NET",
    "Laravel",
    "Ruby on Rails",
    "Webpack",
    "Jest",
    "Testing",
    "Machine Learning",
    "Data Analysis",
    "TensorFlow",
    "PyTorch",
    "Pandas",
    "Microservices",
    "DevOps",
    "Figma",
    "UI/UX",
)

SOFT_SKILLS: Tuple[str, ...] = (
    "Leadership",
    "Communication",
    "Teamwork",
    "Problem Solving",
    "Critical Thinking",
    "Time Management",
    "Collaboration",
    "Adaptability",
    "Creativity",
    "Agile",
    "Scrum",
    "Project Management",
    "Mentoring",
    "Negotiation",
    "Presentation",
    "Stakeholder Management",
    "Attention to Detail",
    "Customer Service",
    "Decision Making",
    "Conflict Resolution",
)

ALL_SKILLS: Tuple[str, ...] = TECH_SKILLS + SOFT_SKILLS

STOP_WORDS = frozenset(["and", "the", "to", "of", "a", "in", "for", "is", "on", "that", "with"])

JOB_TITLES: Tuple[str, ...] = (
    "developer",
    "engineer",
    "manager",
    "designer",
    "analyst",
    "consultant",
    "specialist",
    "coordinator",
    "director",
    "lead",
    "head",
    "architect",
    "administrator",
)

ACTION_VERBS: Tuple[str, ...] = (
    "achieved",
    "built",
    "created",
    "designed",
    "developed",
    "implemented",
    "increased",
    "launched",
    "managed",
    "reduced",
    "resolved",
    "supervised",
    "transformed",
)

SUMMARY_MARKERS: Tuple[str, ...] = ("summary", "objective", "professional profile", "career goal")

MIN_SCORE = 35
MAX_SCORE = 95
KEYWORD_WEIGHT = 60
SKILLS_WEIGHT = 30
DEFAULT_KEYWORD_SCORE = 50
DEFAULT_SKILLS_SCORE = 25
EXPERIENCE_BONUS = 10
EXPERIENCE_BASE = 5
LONG_RESUME_WORDS = 700
SHORT_RESUME_WORDS = 300
SUMMARY_WINDOW = 300

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
# area code optional; never cut a number out of a longer digit run
PHONE_RE = re.compile(
    r"(?<!\d)(?:\+?\d{1,3}[-.\s]?)?(?:(?:\(\d{3}\)|\d{3})[-.\s]?)?\d{3}[-.\s]?\d{4}(?!\d)"
)
LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9_-]+", re.I)
NAME_BLOCKLIST_RE = re.compile(r"\b(resume|cv|curriculum)\b", re.I)
METRICS_RE = re.compile(
    r"\d+(?:\.\d+)?\s?%"
    r"|\$\s?\d[\d,]*(?:\.\d+)?"
    r"|\b(?:increased|decreased|reduced|improved|saved|generated|delivered)\b"
    r"|\b\d[\d,]*\+?\s+(?:users|customers|clients|employees|projects|products)\b",
    re.I,
)
ACTION_VERBS_RE = re.compile(r"\b(?:" + "|".join(ACTION_VERBS) + r")\b", re.I)
JOB_TITLES_RE = re.compile(r"\b(?:" + "|".join(JOB_TITLES) + r")\b", re.I)
OPENING_SENTENCE_RE = re.compile(r"\s*[^.!?\n]{20,150}[.!?](?:\s|$)")


def _require_text(value: object, field: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{field} must be a string, got {type(value).__name__}")
    return value


def _skill_variants(skill: str) -> Set[str]:
    lower = skill.lower()
    variants = {lower, lower.replace(".", "")}
    if lower.endswith(".js"):
        variants.add(lower[: -len(".js")])
    return variants


def has_skill(text: str, skill: str) -> bool:
    """True if ``skill`` (or its ``.js``/period-less variant) occurs in ``text``."""
    lower = text.lower()
    return any(v in lower for v in _skill_variants(skill))


def extract_skills(text: str) -> List[str]:
    """Return dictionary skills present in ``text``, in dictionary order."""
    text = _require_text(text, "text")
    return [skill for skill in ALL_SKILLS if has_skill(text, skill)]


def tokenize(text: str) -> List[str]:
    return [t for t in re.split(r"\W+", text.lower()) if t]


def _job_words(job_description_text: str) -> Set[str]:
    return {t for t in tokenize(job_description_text) if len(t) > 2 and t not in STOP_WORDS}


def find_relevant_titles(resume_text: str, job_description_text: str) -> List[str]:
    """Job-title words from the job description that also appear in the resume."""
    resume_lower = resume_text.lower()
    titles = []
    for match in JOB_TITLES_RE.finditer(job_description_text):
        title = match.group(0).lower()
        if title not in titles and title in resume_lower:
            titles.append(title)
    return titles


def score(resume_text: str, job_description_text: str) -> int:
    """Heuristic match percentage, always within [MIN_SCORE, MAX_SCORE].

    Keyword overlap is only a proxy for fit, so the extremes are never
    reported.
    """
    resume_text = _require_text(resume_text, "resume_text")
    job_description_text = _require_text(job_description_text, "job_description_text")

    job_words = _job_words(job_description_text)
    resume_words = set(tokenize(resume_text))
    if job_words:
        keyword_score = len(job_words & resume_words) / len(job_words) * KEYWORD_WEIGHT
    else:
        keyword_score = DEFAULT_KEYWORD_SCORE

    job_skills = extract_skills(job_description_text)
    if job_skills:
        found = sum(1 for skill in job_skills if has_skill(resume_text, skill))
        skills_score = found / len(job_skills) * SKILLS_WEIGHT
    else:
        skills_score = DEFAULT_SKILLS_SCORE

    if find_relevant_titles(resume_text, job_description_text):
        experience_score = EXPERIENCE_BONUS
    else:
        experience_score = EXPERIENCE_BASE

    total = round(keyword_score + skills_score + experience_score)
    logger.debug(
        "score keywords=%.1f skills=%.1f experience=%d total=%d",
        keyword_score, skills_score, experience_score, total,
    )
    return max(MIN_SCORE, min(MAX_SCORE, total))


def _first_match(pattern: "re.Pattern[str]", text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else NOT_FOUND


def _guess_name(text: str) -> str:
    # only the first non-blank line is considered
    candidate = next((line.strip() for line in text.splitlines() if line.strip()), "")
    if not candidate or len(candidate) >= 50 or ":" in candidate:
        return NOT_FOUND
    if NAME_BLOCKLIST_RE.search(candidate):
        return NOT_FOUND
    return candidate


def extract_profile(resume_text: str) -> ProfileDetails:
    """Best-effort contact details; misses become ``NOT_FOUND``."""
    resume_text = _require_text(resume_text, "resume_text")
    return ProfileDetails(
        name=_guess_name(resume_text),
        email=_first_match(EMAIL_RE, resume_text),
        phone=_first_match(PHONE_RE, resume_text),
        linkedin_url=_first_match(LINKEDIN_RE, resume_text),
    )


def has_metrics(text: str) -> bool:
    return METRICS_RE.search(text) is not None


def has_action_verbs(text: str) -> bool:
    return ACTION_VERBS_RE.search(text) is not None


def has_summary(text: str) -> bool:
    head = text[:SUMMARY_WINDOW]
    lower = head.lower()
    if any(marker in lower for marker in SUMMARY_MARKERS):
        return True
    return OPENING_SENTENCE_RE.match(head) is not None


def _quoted_list(items: List[str]) -> str:
    quoted = [f"'{i}'" for i in items]
    if len(quoted) == 1:
        return quoted[0]
    if len(quoted) == 2:
        return f"{quoted[0]} and {quoted[1]}"
    return ", ".join(quoted[:-1]) + f", and {quoted[-1]}"


def _improvement(text: str) -> Suggestion:
    return Suggestion(text=text, kind=SuggestionKind.IMPROVEMENT)


def _strength(text: str) -> Suggestion:
    return Suggestion(text=text, kind=SuggestionKind.STRENGTH)


def improvement_suggestions(resume_text: str, job_description_text: str, missing_skills: List[str]) -> List[Suggestion]:
    """Advice on what to change, in a fixed order.

    The ATS and tailoring suggestions are always present.
    """
    suggestions: List[Suggestion] = []
    if missing_skills:
        suggestions.append(_improvement(
            f"Include keywords like {_quoted_list(list(missing_skills))} "
            "which are mentioned in the job description"
        ))
    if not has_metrics(resume_text):
        suggestions.append(_improvement(
            "Add specific metrics and outcomes to your experience, such as "
            "percentages, revenue or the number of users you served"
        ))

    word_count = len(resume_text.split())
    if word_count > LONG_RESUME_WORDS:
        suggestions.append(_improvement(
            "Your resume is long; condense it to the experience most relevant to this role"
        ))
    elif word_count < SHORT_RESUME_WORDS:
        suggestions.append(_improvement(
            "Your resume is short; expand on your responsibilities and achievements"
        ))

    if not has_action_verbs(resume_text):
        suggestions.append(_improvement(
            "Start your bullet points with strong action verbs such as "
            "'achieved', 'implemented' or 'launched'"
        ))
    if not has_summary(resume_text):
        suggestions.append(_improvement(
            "Add a professional summary at the top of your resume targeted to this position"
        ))

    suggestions.append(_improvement(
        "Use an ATS-friendly format: standard section headings, no tables or "
        "graphics, and a text-based PDF"
    ))
    suggestions.append(_improvement(
        "Tailor your summary to this role by echoing the language of the job description"
    ))
    return suggestions


def strength_suggestions(resume_text: str, job_description_text: str, matched_skills: List[str]) -> List[Suggestion]:
    suggestions: List[Suggestion] = []
    if len(matched_skills) >= 2:
        suggestions.append(_strength(
            f"Your background in {matched_skills[0]} and {matched_skills[1]} "
            "aligns well with the job requirements"
        ))
    if matched_skills:
        # first in dictionary order, so the output is reproducible
        suggestions.append(_strength(f"Your {matched_skills[0]} experience is valuable for this position"))
    if len(matched_skills) >= 3:
        top = ", ".join(matched_skills[:2]) + f" and {matched_skills[2]}"
        suggestions.append(_strength(f"Your combination of {top} shows a well-rounded profile"))
    if find_relevant_titles(resume_text, job_description_text):
        suggestions.append(_strength("Your previous experience appears relevant to this role"))
    return suggestions


def improvement_plan(resume_text: str, job_description_text: str, missing_skills: List[str], profile: ProfileDetails) -> List[str]:
    """Ordered checklist of concrete resume edits."""
    plan = [
        "Create or update a professional summary that targets this specific role",
        "Open the summary with the job title and your most relevant years of experience",
    ]
    if missing_skills:
        plan.append("Add these missing keywords where they truthfully apply: " + ", ".join(missing_skills))
    if not has_metrics(resume_text):
        plan.append("Quantify your achievements with numbers, percentages or amounts")
    plan.append("Reorganize your experience so the most relevant roles and projects come first")
    if missing_skills:
        plan.append("Consider a certification or course in " + " or ".join(missing_skills[:2]))
    plan.append("Format the resume for ATS parsing with standard headings and a simple layout")
    if profile.email == NOT_FOUND or profile.phone == NOT_FOUND:
        plan.append("Make sure your email address and phone number are clearly visible at the top")
    if profile.linkedin_url == NOT_FOUND:
        plan.append("Add your LinkedIn profile URL to your contact details")
    return plan


def analyze(resume_text: str, job_description_text: str) -> AnalysisResult:
    """Analyze one resume against one job description.

    Raises InvalidInputError when either text is missing; empty strings are
    valid and yield a low score with default components.
    """
    resume_text = _require_text(resume_text, "resume_text")
    job_description_text = _require_text(job_description_text, "job_description_text")

    job_skills = extract_skills(job_description_text)
    key_skills = [SkillMatch(skill=s, matched=has_skill(resume_text, s)) for s in job_skills]
    matched = [m.skill for m in key_skills if m.matched]
    missing = [m.skill for m in key_skills if not m.matched]

    profile = extract_profile(resume_text)
    suggestions = (
        improvement_suggestions(resume_text, job_description_text, missing)
        + strength_suggestions(resume_text, job_description_text, matched)
    )
    result = AnalysisResult(
        match_percentage=score(resume_text, job_description_text),
        key_skills_match=key_skills,
        suggestions=suggestions,
        missing_keywords=missing,
        improvement_plan=improvement_plan(resume_text, job_description_text, missing, profile),
        profile_details=profile,
    )
    logger.debug("analysis done: %d%% match, %d/%d skills", result.match_percentage, len(matched), len(key_skills))
    return result


def analyze_request(request: AnalysisRequest) -> AnalysisResult:
    return analyze(request.resume_text, request.job_description_text)


def rank_resumes(resumes: Iterable[Tuple[str, str]], job_description_text: str) -> List[RankedResume]:
    """Analyze each ``(label, text)`` pair and rank by match percentage.

    Labels already seen are skipped. Ties keep input order.
    """
    job_description_text = _require_text(job_description_text, "job_description_text")
    seen: Set[str] = set()
    results: List[Tuple[str, AnalysisResult]] = []
    for label, text in resumes:
        if label in seen:
            logger.warning("skipping duplicate resume %s", label)
            continue
        seen.add(label)
        results.append((label, analyze(text, job_description_text)))

    results.sort(key=lambda item: -item[1].match_percentage)
    ranked = [RankedResume(label=label, rank=i, result=r) for i, (label, r) in enumerate(results, 1)]
    logger.info("ranked %d resume(s)", len(ranked))
    return ranked


def best_match(ranked: List[RankedResume]) -> Optional[RankedResume]:
    return ranked[0] if ranked else None
