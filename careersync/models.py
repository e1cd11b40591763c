"""Result types returned by the matching engine.

Every model is frozen: a result is built once per analysis and only read
afterwards. Field names are snake_case in Python and camelCase when dumped
with ``by_alias=True``, which is what the presentation layer consumes.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NOT_FOUND = "Not found"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SuggestionKind(str, Enum):
    IMPROVEMENT = "improvement"
    STRENGTH = "strength"


class AnalysisRequest(_Frozen):
    resume_text: str
    job_description_text: str


class SkillMatch(_Frozen):
    skill: str
    matched: bool


class Suggestion(_Frozen):
    text: str
    kind: SuggestionKind


class ProfileDetails(_Frozen):
    name: str = NOT_FOUND
    email: str = NOT_FOUND
    phone: str = NOT_FOUND
    linkedin_url: str = NOT_FOUND


class AnalysisResult(_Frozen):
    match_percentage: int = Field(ge=0, le=100)
    key_skills_match: List[SkillMatch]
    suggestions: List[Suggestion]
    missing_keywords: List[str]
    improvement_plan: List[str]
    profile_details: ProfileDetails

    @property
    def matched_skills(self) -> List[str]:
        return [m.skill for m in self.key_skills_match if m.matched]

    @property
    def improvements(self) -> List[str]:
        return [s.text for s in self.suggestions if s.kind is SuggestionKind.IMPROVEMENT]

    @property
    def strengths(self) -> List[str]:
        return [s.text for s in self.suggestions if s.kind is SuggestionKind.STRENGTH]


class RankedResume(_Frozen):
    """One row of a multi-resume ranking (rank 1 is the best match)."""

    label: str
    rank: int = Field(ge=1)
    result: AnalysisResult
