"""
Pytest configuration and fixtures
"""
from datetime import date

import pytest

from resumekit.resumes.parser import build_record
from resumekit.resumes.schemas import CanonicalResume, ExperienceEntry, ResumeHeader, SkillGroup

SAMPLE_RESUME = """JANE DOE
jane.doe@example.com | +1 (555) 123-4567
linkedin.com/in/janedoe | github.com/janedoe

Professional Summary
Backend engineer with six years building Python services and data pipelines.

Technical Skills
Python, Java, SQL, Django, FastAPI, React, Docker, Kubernetes, AWS, PostgreSQL

Work Experience
Senior Software Engineer at Acme Corp  Jan 2021 - Present
- Led migration of billing services to Kubernetes clusters
- Mentored four engineers on API design and testing
Software Engineer | Globex  06/2018 - 12/2020
- Built REST APIs in Django serving two million requests per day

Education
Bachelor of Technology in Computer Science, Stanford University, 2018

Projects
Resume Builder
Built a resume editor with React and Django that exports PDFs.
"""


@pytest.fixture
def now():
    """Fixed clock for tenure and overlap calculations"""
    return date(2024, 1, 1)


@pytest.fixture
def sample_text():
    return SAMPLE_RESUME


@pytest.fixture
def sample_record():
    return build_record(SAMPLE_RESUME)


@pytest.fixture
def make_entry():
    """Factory for experience entries with sensible defaults"""
    counter = {"n": 0}

    def _make(role="Software Engineer", company="Acme", start="", end="", bullets=None):
        entry = ExperienceEntry(
            id=f"exp_{counter['n']}",
            role=role,
            company=company,
            start_date=start,
            end_date=end,
            bullets=["Shipped features used by thousands of customers"] if bullets is None else bullets,
        )
        counter["n"] += 1
        return entry

    return _make


@pytest.fixture
def complete_record():
    """A record that passes every validation check"""
    return CanonicalResume(
        header=ResumeHeader(
            name="Jane Doe",
            email="jane.doe@example.com",
            phone="+1 555 123 4567",
            linkedin="linkedin.com/in/janedoe",
        ),
        profile="Backend engineer.",
        skills=[SkillGroup(category="Languages", items=["python"])],
    )
