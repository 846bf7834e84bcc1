"""
Matching Pydantic schemas
"""
from typing import List
from pydantic import BaseModel, Field

from resumekit.resumes.schemas import CanonicalResume


class JDMatchRequest(BaseModel):
    """Resume plus the job it is being tailored for"""
    resume: CanonicalResume
    job_description: str = ""
    target_role: str = ""


class SemanticMatch(BaseModel):
    jd_term: str
    resume_term: str


class JDMatchResponse(BaseModel):
    """Keyword coverage of a job description by a resume"""
    match_score: int = 0
    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    semantic_matches: List[SemanticMatch] = Field(default_factory=list)
    role_alignment: int = 0
    suggestions: List[str] = Field(default_factory=list)
