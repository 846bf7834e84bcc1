from resumekit.resumes.quality_gates import QualityGateRunner, quality_gate_runner
from resumekit.resumes.schemas import (
    CanonicalResume,
    ExperienceEntry,
    ProfileLevel,
    ResumeMeta,
    Severity,
)
from resumekit.resumes.service import ResumeService


def _gates(report):
    return {gate.name: gate for gate in report.gates}


def test_sample_passes_every_gate(sample_record, now):
    report = ResumeService().quality(sample_record, now=now)

    assert report.passed is True
    assert [gate.name for gate in report.gates] == [
        "Grammar Check", "ATS Readability", "Section Completeness", "Page Balance", "Concise Writing",
    ]
    assert all(gate.passed and gate.severity == Severity.INFO for gate in report.gates)
    assert report.missing_sections == []


def test_missing_required_sections_block_export():
    report = quality_gate_runner.run(CanonicalResume())

    completeness = _gates(report)["Section Completeness"]
    assert completeness.severity == Severity.ERROR
    assert completeness.message == "Missing: name, email, skills"
    assert _gates(report)["Page Balance"].message == "Resume is too short"
    assert report.passed is False


def test_overlong_resume_warns():
    record = CanonicalResume(experience=[ExperienceEntry(id="exp_0", bullets=["a" * 5001])])
    gate = _gates(quality_gate_runner.run(record))["Page Balance"]
    assert gate.passed is False
    assert gate.message == "Resume might be too long"


def test_writing_gates_warn_without_blocking(complete_record):
    record = complete_record.model_copy(update={
        "profile": "Really very just basically fast ★ shipped.Next release",
    })
    report = quality_gate_runner.run(record)
    gates = _gates(report)

    for name in ("Grammar Check", "ATS Readability", "Concise Writing"):
        assert gates[name].passed is False
        assert gates[name].severity == Severity.WARNING
    assert report.passed is True


def test_jd_coverage_only_with_job_description(sample_record):
    assert "JD Coverage" not in _gates(quality_gate_runner.run(sample_record))

    covered = _gates(quality_gate_runner.run(sample_record, "Python and GraphQL"))["JD Coverage"]
    assert covered.passed is True
    assert covered.severity == Severity.INFO
    assert covered.message == "50% keyword match with job description"

    uncovered = _gates(quality_gate_runner.run(sample_record, "GraphQL, Redis, TensorFlow"))["JD Coverage"]
    assert uncovered.passed is False
    assert uncovered.severity == Severity.WARNING


class TestMissingSections:
    def test_early_career_needs_education_and_projects(self, complete_record):
        assert QualityGateRunner().missing_sections(complete_record) == [
            "Education is essential for freshers",
            "Add projects to showcase your skills",
        ]

    def test_experienced_needs_work_history_and_summary(self, complete_record):
        record = complete_record.model_copy(update={
            "profile": "",
            "meta": ResumeMeta(profile_level=ProfileLevel.PROFESSIONAL),
        })
        assert QualityGateRunner().missing_sections(record) == [
            "Work experience is essential",
            "Add a professional summary",
        ]

    def test_contact_and_skills_hints(self):
        assert QualityGateRunner().missing_sections(CanonicalResume())[:4] == [
            "Name is required",
            "Email is required",
            "Phone number is recommended",
            "Add your skills",
        ]
