"""
Resume Pydantic schemas
"""
from enum import Enum
from typing import Annotated, Optional, List, Literal, Union
from pydantic import BaseModel, Field

PROFILE_MAX_CHARS = 600
PRESENT = "Present"


class ProfileLevel(str, Enum):
    """Seniority tier derived from tenure and role titles"""
    FRESHER = "fresher"
    INTERN = "intern"
    PROFESSIONAL = "professional"
    SENIOR = "senior"


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class ResumeHeader(BaseModel):
    """Contact block; empty string means not found"""
    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""


class ExperienceEntry(BaseModel):
    id: str
    role: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""  # date string or "Present"
    bullets: List[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    id: str
    degree: str = ""
    institution: str = ""
    year: str = ""


class SkillGroup(BaseModel):
    category: str
    items: List[str] = Field(default_factory=list)


class ProjectEntry(BaseModel):
    id: str
    name: str = ""
    description: str = ""
    tech: List[str] = Field(default_factory=list)


class ResumeMeta(BaseModel):
    """Derived facts, recomputed from experience on every mutation"""
    experience_years: float = 0.0
    profile_level: ProfileLevel = ProfileLevel.FRESHER
    profile_reason: str = ""


class CanonicalResume(BaseModel):
    """The single structured record the whole pipeline operates on"""
    header: ResumeHeader = Field(default_factory=ResumeHeader)
    profile: str = ""
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[SkillGroup] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    photo: Optional[str] = None
    meta: ResumeMeta = Field(default_factory=ResumeMeta)


class FixOption(BaseModel):
    """A one-click remedy; an empty value means the user must type one"""
    label: str
    value: str = ""


class ValidationIssue(BaseModel):
    id: str
    severity: Severity
    section: str
    context: str
    field: str  # dot-path into CanonicalResume, e.g. experience.2.start_date
    message: str
    fix_options: List[FixOption] = Field(default_factory=list)


class ExtractionResult(BaseModel):
    """Record produced by an extractor plus what it managed to find"""
    resume: CanonicalResume
    confidence: int = 0
    extracted_fields: List[str] = Field(default_factory=list)
    missing_fields: List[str] = Field(default_factory=list)
    source: str = "rules"


# ---- Page layout ----

class HeaderSection(BaseModel):
    kind: Literal["header"] = "header"
    height: int
    header: ResumeHeader


class ProfileSection(BaseModel):
    kind: Literal["profile"] = "profile"
    height: int
    text: str


class SectionTitle(BaseModel):
    kind: Literal["section_title"] = "section_title"
    height: int
    title: str


class SkillSection(BaseModel):
    kind: Literal["skill"] = "skill"
    height: int
    group: SkillGroup


class ExperienceSection(BaseModel):
    kind: Literal["experience"] = "experience"
    height: int
    entry: ExperienceEntry


class EducationSection(BaseModel):
    kind: Literal["education"] = "education"
    height: int
    entry: EducationEntry


class ProjectSection(BaseModel):
    kind: Literal["project"] = "project"
    height: int
    entry: ProjectEntry


PageSection = Annotated[
    Union[
        HeaderSection,
        ProfileSection,
        SectionTitle,
        SkillSection,
        ExperienceSection,
        EducationSection,
        ProjectSection,
    ],
    Field(discriminator="kind"),
]


class Page(BaseModel):
    sections: List[PageSection] = Field(default_factory=list)
    used_height: int = 0


# ---- API payloads ----

class ParseTextRequest(BaseModel):
    text: str


class ResumeStateRequest(BaseModel):
    resume: CanonicalResume


class ApplyFixRequest(BaseModel):
    resume: CanonicalResume
    issue_id: str
    value: str


class ResumeSessionResponse(BaseModel):
    """Everything the presentation layer re-renders after a change"""
    resume: CanonicalResume
    issues: List[ValidationIssue]
    pages: List[Page]
    has_errors: bool
    extraction: Optional[ExtractionResult] = None


class UpdateFieldRequest(BaseModel):
    resume: CanonicalResume
    field: str
    value: str


class PaginateResponse(BaseModel):
    pages: List[Page]


# ---- Quality gates ----

class QualityGate(BaseModel):
    name: str
    passed: bool
    message: str
    severity: Severity


class QualityReport(BaseModel):
    """Export readiness: gate results plus the sections still worth adding"""
    gates: List[QualityGate]
    missing_sections: List[str] = Field(default_factory=list)
    passed: bool


class QualityCheckRequest(BaseModel):
    resume: CanonicalResume
    job_description: str = ""
