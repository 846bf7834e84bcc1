import pytest

from resumekit.resumes.schemas import ProfileLevel
from resumekit.resumes.seniority_analyzer import SeniorityClassifier, compute_meta


@pytest.mark.parametrize("years, roles, expected", [
    (8, [], ProfileLevel.SENIOR),
    (7, ["Engineer"], ProfileLevel.SENIOR),
    (2, ["Head of Engineering"], ProfileLevel.SENIOR),
    (1, ["VP Product"], ProfileLevel.SENIOR),
    (3, [], ProfileLevel.PROFESSIONAL),
    (1, ["Senior Backend Intern"], ProfileLevel.PROFESSIONAL),
    (0.5, ["Engineering Manager"], ProfileLevel.PROFESSIONAL),
    (0.5, ["Research Intern"], ProfileLevel.INTERN),
    (0.5, ["Graduate Trainee"], ProfileLevel.INTERN),
    (0, [], ProfileLevel.FRESHER),
    (1.5, ["Software Engineer"], ProfileLevel.FRESHER),
])
def test_classify(years, roles, expected):
    level, reason = SeniorityClassifier().classify(years, roles)
    assert level == expected
    assert reason


def test_reason_mentions_years():
    _, reason = SeniorityClassifier().classify(9.5, [])
    assert "9.5" in reason


def test_compute_meta_from_sample(sample_record, now):
    record = compute_meta(sample_record, now=now)
    assert record.meta.experience_years == 5.5
    assert record.meta.profile_level == ProfileLevel.PROFESSIONAL
    assert sample_record.meta.experience_years == 0.0


def test_compute_meta_discounts_internships(make_entry, now, complete_record):
    record = complete_record.model_copy(update={"experience": [
        make_entry(role="Software Intern", start="01/2016", end="01/2024"),
    ]})
    meta = compute_meta(record, now=now).meta
    assert meta.experience_years == 4.0
    assert meta.profile_level == ProfileLevel.PROFESSIONAL
