"""
Pattern tables shared by every extraction, tenure and validation code path.

All keyword lists and regexes live here so the rule engine, the remote-result
normaliser, the validator and the JD matcher agree on what a date range, a
part-time role or a skill looks like.
"""
import re
from typing import Dict, Iterable, List, NamedTuple


def keyword_alternation(words: Iterable[str]) -> str:
    """
    Build an alternation that only matches whole tokens.

    Plain ``\\b`` breaks on tokens ending in symbols (``c++``, ``c#``), so the
    edges are checked with look-arounds instead.
    """
    body = "|".join(words)
    return rf"(?<![\w+#])(?:{body})(?![\w+#])"


# ---- Section locator ----

SHORT_LINE_MAX = 50


class SectionRule(NamedTuple):
    start_keywords: List[str]
    end_keywords: List[str]
    max_span: int


SECTIONS: Dict[str, SectionRule] = {
    "profile": SectionRule(
        ["professional summary", "summary", "profile", "objective", "about me"],
        ["experience", "work experience", "employment", "skills", "education"],
        10,
    ),
    "skills": SectionRule(
        ["technical skills", "skills", "technologies", "competencies", "expertise"],
        ["experience", "employment", "education", "projects"],
        20,
    ),
    "experience": SectionRule(
        ["work experience", "professional experience", "experience", "employment", "work history", "career"],
        ["education", "academic", "skills", "projects", "certifications"],
        50,
    ),
    "education": SectionRule(
        ["education", "academic background", "academic", "qualification"],
        ["skills", "projects", "experience", "certifications", "achievements"],
        15,
    ),
    "projects": SectionRule(
        ["personal projects", "key projects", "projects", "portfolio", "project experience"],
        ["education", "skills", "achievements", "certifications", "awards"],
        30,
    ),
}


# ---- Contact fields ----

NAME_SCAN_LINES = 10
NAME_MAX_CHARS = 60
NAME_EXCLUDE_WORDS = [
    "summary", "profile", "experience", "education", "skills", "objective",
    "resume", "curriculum", "vitae", "contact", "phone", "email",
]
NON_ALPHA = re.compile(r"[^a-zA-Z\s]")

EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
EMAIL_STRICT = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Tried in order, first hit wins
PHONE_PATTERNS = [
    re.compile(r"(?<![\d+])\+\d{1,3}[-\s]?\d{10}(?!\d)"),  # country code + 10 digits
    re.compile(r"(?<![\d+])[6-9]\d{9}(?!\d)"),  # Indian mobile
    re.compile(r"\+?1?[-.\s]?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),  # NANP
    re.compile(r"\+?\d{1,3}[-.\s]?\(?\d{2,4}\)?[-.\s]?\d{3,4}[-.\s]?\d{4}"),  # International
    re.compile(r"\(\d{3}\)\s*\d{3}[-.\s]?\d{4}"),  # (123) 456-7890
]
PHONE_SEPARATORS = re.compile(r"[\s\-().+]")
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

LINKEDIN = re.compile(r"linkedin\.com/(?:in|pub)/([a-zA-Z0-9_-]+)", re.IGNORECASE)
GITHUB = re.compile(r"github\.com/([a-zA-Z0-9_-]+)", re.IGNORECASE)


# ---- Skills ----

LANGUAGE_SKILLS = [
    "python", "java", "javascript", "typescript", r"c\+\+", "c#", "golang", "rust",
    "ruby", "php", "swift", "kotlin", "scala", "sql", "html", "css", "perl",
    "matlab", "bash",
]
FRAMEWORK_SKILLS = [
    "react", "angular", "vue", r"node(?:\.?js)?", "express", "django", "flask",
    "spring", "laravel", "rails", r"next\.?js", "nuxt", "svelte", "fastapi",
    r"asp\.net", r"\.net",
]
TOOL_SKILLS = [
    "docker", "kubernetes", "aws", "azure", "gcp", "git", "github", "gitlab",
    "jenkins", "mongodb", "postgresql", "mysql", "redis", "terraform", "ansible",
    "linux", "windows", "jira", "figma", "photoshop",
]

# Category order is the emission order
SKILL_CATEGORIES = [
    ("Languages", re.compile(keyword_alternation(LANGUAGE_SKILLS), re.IGNORECASE)),
    ("Frameworks", re.compile(keyword_alternation(FRAMEWORK_SKILLS), re.IGNORECASE)),
    ("Tools", re.compile(keyword_alternation(TOOL_SKILLS), re.IGNORECASE)),
]

PROJECT_TECH = re.compile(
    keyword_alternation([
        "react", "node", "python", "java", "mongodb", "postgresql", "mysql", "aws",
        "docker", "typescript", "javascript", "angular", "vue", "django", "flask",
        "spring", "kubernetes", "redis", "graphql",
    ]),
    re.IGNORECASE,
)


# ---- Dates ----

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}
PRESENT_WORDS = ["present", "current", "now", "ongoing"]

_MONTH_NAME = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?"
_DATE_TOKEN = rf"\d{{1,2}}/\d{{4}}|{_MONTH_NAME}\s+\d{{4}}|\d{{4}}"
_PRESENT_TOKEN = "|".join(PRESENT_WORDS)

DATE_RANGE = re.compile(
    rf"\b({_DATE_TOKEN})\s*(?:[-–—]+|\bto\b)\s*({_DATE_TOKEN}|{_PRESENT_TOKEN})\b",
    re.IGNORECASE,
)
NUMERIC_MONTH_YEAR = re.compile(r"(\d{1,2})/(\d{4})")
NAMED_MONTH_YEAR = re.compile(r"([a-zA-Z]+)\.?\s+(\d{4})")
BARE_YEAR = re.compile(r"(\d{4})")
YEAR = re.compile(r"\b(?:19|20)\d{2}\b")


# ---- Experience ----

ROLE_KEYWORD_START = re.compile(
    r"^(?:software|senior|junior|lead|manager|developer|engineer|analyst|designer|"
    r"intern|associate|director|consultant|specialist|coordinator|assistant|"
    r"executive|officer)\b",
    re.IGNORECASE,
)
ROLE_COMPANY_SEPARATORS = [" at ", " @ ", " - ", " | ", " , "]
ROLE_EDGE_CHARS = " -–—|,@()"
BULLET_PREFIX = re.compile(r"^[-•*●◦▪▫·–]\s*")
BULLET_MIN_LINE = 15
BULLET_MIN_TEXT = 10
ROLE_MAX_CHARS = 100

PART_TIME = re.compile(
    r"\b(?:part[-\s]?time|intern|internship|contract\w*|freelance\w*|temporary|"
    r"seasonal|student|trainee|apprentice\w*)\b",
    re.IGNORECASE,
)


# ---- Education ----

DEGREE = re.compile(
    r"\b(?:bachelor\w*|master\w*|b\.?tech|m\.?tech|b\.e|m\.e|(?-i:BE|ME)|b\.?sc|m\.?sc|mba|bba|"
    r"ph\.?d|doctorate|diploma|associate|degree)\b",
    re.IGNORECASE,
)
DEGREE_NAME = re.compile(
    r"\b(?:bachelor|master|doctorate|diploma)[^,|()]*"
    r"|\b(?:b\.?tech|m\.?tech|b\.?sc|m\.?sc|b\.e|m\.e|(?-i:BE|ME))\b[^,|()]*"
    r"|\b(?:mba|bba|ph\.?d)\b",
    re.IGNORECASE,
)
INSTITUTION = re.compile(
    r"(?:[A-Z][\w.&'-]*\s+)*(?i:university|college|institute|school|academy)\b[^,|()\d]*"
)


# ---- Projects ----

PROJECT_NAME_MAX = 60
LEADING_DIGIT_OR_BULLET = re.compile(r"^(?:\d|[-•*●◦▪▫·–])")


# ---- Seniority ----

SENIOR_TITLE = re.compile(r"\b(?:director|vp|head|principal)\b", re.IGNORECASE)
PROFESSIONAL_TITLE = re.compile(r"\b(?:senior|lead|manager)\b", re.IGNORECASE)
INTERN_TITLE = re.compile(r"\b(?:intern|internship|trainee)\b", re.IGNORECASE)

# Self-descriptions in the profile summary
FRESHER_CLAIM = re.compile(r"\b(?:fresher|entry)\b", re.IGNORECASE)
SENIOR_CLAIM = re.compile(r"\b(?:senior|lead)\b", re.IGNORECASE)


# ---- Quality gates ----

GRAMMAR_SLIP = re.compile(r"\s{2,}|[a-z]\.[A-Z]")
ATS_UNSAFE_CHAR = re.compile(r"[^\w\s.,;:!?@()\-'\"]")
FILLER_WORD = re.compile(r"\b(?:very|really|just|basically|actually|honestly|literally)\b", re.IGNORECASE)


# ---- Job description matching ----

JD_SKILLS = re.compile(
    keyword_alternation([
        "python", "java", "javascript", "typescript", "react", "angular", "vue",
        r"node(?:\.?js)?", "mongodb", "sql", "postgresql", "aws", "azure", "gcp",
        "docker", "kubernetes", "git", "agile", "scrum", "ci/cd", "rest", "restful",
        "api", "microservices", r"machine\s+learning", r"data\s+science",
        "tensorflow", "pytorch", "html", "css", "devops", "linux", "graphql",
        "redis", "elasticsearch", "cloud", "database", "frontend", "backend",
        "testing",
    ]),
    re.IGNORECASE,
)

# JD term -> resume terms that count as covering it
SEMANTIC_EQUIVALENTS: Dict[str, List[str]] = {
    "restful": ["rest", "api", "fastapi", "express", "flask", "endpoints"],
    "ci/cd": ["jenkins", "github actions", "gitlab", "devops", "deployment", "pipeline"],
    "cloud": ["aws", "azure", "gcp", "ec2", "s3", "lambda", "serverless"],
    "database": ["sql", "mongodb", "postgresql", "mysql", "redis", "dynamodb"],
    "frontend": ["react", "angular", "vue", "javascript", "typescript", "html", "css"],
    "backend": ["node", "python", "java", "express", "django", "spring", "api"],
    "agile": ["scrum", "sprint", "jira", "kanban", "standup"],
    "testing": ["unit test", "jest", "pytest", "mocha", "selenium", "qa"],
}
