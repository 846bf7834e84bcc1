import pytest

from resumekit.resumes.parser import ResumeParser, build_record
from resumekit.resumes.schemas import ProfileLevel


def test_sample_resume_header(sample_record):
    header = sample_record.header
    assert header.name == "Jane Doe"
    assert header.email == "jane.doe@example.com"
    assert header.phone == "+1 (555) 123-4567"
    assert header.linkedin == "linkedin.com/in/janedoe"
    assert header.github == "github.com/janedoe"


def test_sample_resume_sections(sample_record):
    assert sample_record.profile.startswith("Backend engineer with six years")

    skills = {group.category: group.items for group in sample_record.skills}
    assert skills["Languages"] == ["python", "java", "sql"]
    assert skills["Frameworks"] == ["django", "fastapi", "react"]
    assert "kubernetes" in skills["Tools"]

    assert [e.id for e in sample_record.experience] == ["exp_0", "exp_1"]
    first, second = sample_record.experience
    assert (first.role, first.company) == ("Senior Software Engineer", "Acme Corp")
    assert (first.start_date, first.end_date) == ("Jan 2021", "Present")
    assert len(first.bullets) == 2
    assert (second.role, second.company) == ("Software Engineer", "Globex")
    assert (second.start_date, second.end_date) == ("06/2018", "12/2020")

    assert len(sample_record.education) == 1
    assert sample_record.education[0].institution == "Stanford University"
    assert sample_record.education[0].year == "2018"

    assert [p.name for p in sample_record.projects] == ["Resume Builder"]
    assert sample_record.projects[0].tech == ["react", "django"]


def test_meta_left_at_defaults(sample_record):
    assert sample_record.meta.experience_years == 0.0
    assert sample_record.meta.profile_level == ProfileLevel.FRESHER


def test_parse_is_idempotent(sample_text):
    assert build_record(sample_text) == build_record(sample_text)


@pytest.mark.parametrize("text", [
    "",
    "\n\n\n",
    "%%%% ~~~ ////",
    "a" * 10000,
    "Experience\n2020 - 2021",
    "Education\nBachelor\nProjects\n- \n1.",
    None,
])
def test_parse_never_raises(text):
    record = ResumeParser().parse(text)
    assert record.header.name == ""
    assert record.experience == []


def test_split_lines_drops_blanks():
    assert ResumeParser.split_lines("  a  \n\n b\r\n") == ["a", "b"]
