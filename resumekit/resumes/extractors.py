"""
Rule-based field extractors

Each function maps text (or the lines of one located section) to a single
field of the canonical record. None of them raise on malformed input: a field
that cannot be found comes back as "" or [].
"""
import re
from typing import Dict, Iterable, List, Optional, Tuple

from resumekit.resumes.patterns import (
    BULLET_MIN_LINE,
    BULLET_MIN_TEXT,
    BULLET_PREFIX,
    DATE_RANGE,
    DEGREE,
    DEGREE_NAME,
    EMAIL,
    GITHUB,
    INSTITUTION,
    LEADING_DIGIT_OR_BULLET,
    LINKEDIN,
    NAME_EXCLUDE_WORDS,
    NAME_MAX_CHARS,
    NAME_SCAN_LINES,
    NON_ALPHA,
    PHONE_PATTERNS,
    PROJECT_NAME_MAX,
    PROJECT_TECH,
    ROLE_COMPANY_SEPARATORS,
    ROLE_EDGE_CHARS,
    ROLE_KEYWORD_START,
    ROLE_MAX_CHARS,
    SKILL_CATEGORIES,
    YEAR,
)
from resumekit.resumes.schemas import (
    PROFILE_MAX_CHARS,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    SkillGroup,
)
from resumekit.resumes.tenure import normalize_end_label

_WHITESPACE = re.compile(r"\s+")


def _collapse(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def _unique(values: Iterable[str]) -> List[str]:
    """Case-insensitive de-duplication, first spelling wins, lower-cased"""
    seen = []
    for value in values:
        value = _collapse(value).lower()
        if value and value not in seen:
            seen.append(value)
    return seen


# ---- Contact ----

def extract_name(lines: List[str]) -> str:
    """First plausible 2-4 word name among the opening lines, title-cased"""
    candidates = [line for line in lines if line.strip()][:NAME_SCAN_LINES]
    for line in candidates:
        cleaned = _collapse(NON_ALPHA.sub("", line))
        if not 4 <= len(cleaned) < NAME_MAX_CHARS:
            continue
        lowered = cleaned.lower()
        if any(word in lowered for word in NAME_EXCLUDE_WORDS):
            continue
        words = cleaned.split(" ")
        if 2 <= len(words) <= 4:
            return " ".join(word.capitalize() for word in words)
    return ""


def extract_email(text: str) -> str:
    match = EMAIL.search(text)
    return match.group(0).lower() if match else ""


def extract_phone(text: str) -> str:
    """First hit of the ordered phone pattern list"""
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text)
        if match:
            return _collapse(match.group(0))
    return ""


def extract_linkedin(text: str) -> str:
    match = LINKEDIN.search(text)
    return f"linkedin.com/in/{match.group(1)}" if match else ""


def extract_github(text: str) -> str:
    match = GITHUB.search(text)
    return f"github.com/{match.group(1)}" if match else ""


# ---- Profile & skills ----

def extract_profile(section_lines: List[str]) -> str:
    return _collapse(" ".join(section_lines))[:PROFILE_MAX_CHARS].strip()


def extract_skills(section_lines: List[str], text: str) -> List[SkillGroup]:
    """
    Scan the skills section plus the whole document against the three skill
    vocabularies. Categories with no hits are omitted.
    """
    haystack = " ".join(section_lines) + "\n" + text
    groups = []
    for category, pattern in SKILL_CATEGORIES:
        items = _unique(match.group(0) for match in pattern.finditer(haystack))
        if items:
            groups.append(SkillGroup(category=category, items=items))
    return groups


# ---- Experience ----

def find_date_range(line: str) -> Optional[Tuple[str, str, Tuple[int, int]]]:
    """(start, end, span) of the first date range in a line; end normalised to Present"""
    match = DATE_RANGE.search(line)
    if not match:
        return None
    return match.group(1).strip(), normalize_end_label(match.group(2)), match.span()


def split_role_company(text: str) -> Tuple[str, str]:
    """Split "Role at Company" style lines on the first separator that occurs"""
    for separator in ROLE_COMPANY_SEPARATORS:
        if separator in text:
            role, company = text.split(separator, 1)
            return role.strip(ROLE_EDGE_CHARS)[:ROLE_MAX_CHARS], company.strip(ROLE_EDGE_CHARS)
    return text.strip(ROLE_EDGE_CHARS)[:ROLE_MAX_CHARS], ""


def _new_experience(role: str, company: str, start: str, end: str) -> Dict:
    return {"role": role, "company": company, "start_date": start, "end_date": end, "bullets": []}


def extract_experience(section_lines: List[str]) -> List[ExperienceEntry]:
    """
    Segment the experience section into entries.

    A line opens a new entry when it contains a date range or starts with a
    role keyword. A line holding nothing but a date range fills in the dates
    of the open entry instead, for layouts that put dates on their own line.
    """
    entries: List[ExperienceEntry] = []
    current: Optional[Dict] = None

    def flush():
        if current is not None and current["role"]:
            entries.append(ExperienceEntry(id=f"exp_{len(entries)}", **current))

    for raw in section_lines:
        line = raw.strip()
        if not line:
            continue

        date_range = find_date_range(line)
        if date_range or ROLE_KEYWORD_START.match(line):
            start, end = "", ""
            remainder = line
            if date_range:
                start, end, (lo, hi) = date_range
                remainder = _collapse(f"{line[:lo]} {line[hi:]}").strip(ROLE_EDGE_CHARS)

            if date_range and not remainder and current is not None and not current["start_date"]:
                current["start_date"], current["end_date"] = start, end
                continue

            flush()
            role, company = split_role_company(remainder) if remainder else ("", "")
            current = _new_experience(role, company, start, end)
            continue

        if current is not None and len(line) > BULLET_MIN_LINE:
            bullet = BULLET_PREFIX.sub("", line).strip()
            if len(bullet) > BULLET_MIN_TEXT:
                current["bullets"].append(bullet)

    flush()
    return entries


# ---- Education ----

def extract_education(section_lines: List[str]) -> List[EducationEntry]:
    """One entry per line that mentions a degree; the last 4-digit year wins"""
    entries = []
    for raw in section_lines:
        line = raw.strip()
        if not DEGREE.search(line):
            continue
        degree = DEGREE_NAME.search(line)
        institution = INSTITUTION.search(line)
        years = YEAR.findall(line)
        entries.append(EducationEntry(
            id=f"edu_{len(entries)}",
            degree=_collapse(degree.group(0)).strip(ROLE_EDGE_CHARS) if degree else "",
            institution=_collapse(institution.group(0)).strip(ROLE_EDGE_CHARS) if institution else "",
            year=years[-1] if years else "",
        ))
    return entries


# ---- Projects ----

def _is_project_title(line: str) -> bool:
    return (
        len(line) < PROJECT_NAME_MAX
        and "." not in line
        and not LEADING_DIGIT_OR_BULLET.match(line)
    )


def extract_projects(section_lines: List[str]) -> List[ProjectEntry]:
    """Short title lines open a project; everything else is its description"""
    projects: List[ProjectEntry] = []
    current: Optional[Dict] = None

    def flush():
        if current is not None and current["name"]:
            projects.append(ProjectEntry(
                id=f"proj_{len(projects)}",
                name=current["name"],
                description=" ".join(current["description"]),
                tech=_unique(current["tech"]),
            ))

    for raw in section_lines:
        line = raw.strip()
        if not line:
            continue
        if _is_project_title(line):
            flush()
            current = {"name": line, "description": [], "tech": []}
        elif current is not None:
            current["description"].append(BULLET_PREFIX.sub("", line).strip())
            current["tech"].extend(match.group(0) for match in PROJECT_TECH.finditer(line))

    flush()
    return projects
