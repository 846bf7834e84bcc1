"""
Resume Validator - checks a canonical resume record for completeness and consistency

Issues are data, not exceptions: every call re-derives the full list from the
current record, so fixing a field simply means validating again.
"""
from datetime import date
from typing import Any, List, Optional
import structlog

from resumekit.core.exceptions import ValidationError
from resumekit.resumes.patterns import (
    EMAIL_STRICT,
    FRESHER_CLAIM,
    INTERN_TITLE,
    PHONE_MAX_DIGITS,
    PHONE_MIN_DIGITS,
    PHONE_SEPARATORS,
    SENIOR_CLAIM,
)
from resumekit.resumes.schemas import (
    CanonicalResume,
    ExperienceEntry,
    FixOption,
    Severity,
    ValidationIssue,
)
from resumekit.resumes.seniority_analyzer import compute_meta
from resumekit.resumes.tenure import compute_years, is_part_time, is_present, parse_date, resolve_end

logger = structlog.get_logger()

SET_DATE = FixOption(label="Set Date")
MARK_PRESENT = FixOption(label="Mark as Present", value="Present")


def _context(entry: ExperienceEntry) -> str:
    return f"{entry.role or 'Role'} at {entry.company or 'Company'}"


class ResumeValidator:
    """Ordered rule checks over a CanonicalResume"""

    MIN_NAME_LENGTH = 2
    INTERN_MAX_YEARS = 10
    FRESHER_CLAIM_MAX_YEARS = 2
    SENIOR_CLAIM_MIN_YEARS = 5

    # Top-level fields a fix may write into
    EDITABLE_ROOTS = ("header", "profile", "experience", "education", "skills", "projects")
    # Entry ids back issue ids and must stay unique
    LOCKED_LEAVES = ("id",)

    def validate(self, record: CanonicalResume, now: Optional[date] = None) -> List[ValidationIssue]:
        """
        Run every check in order and return the issues found.

        Order is contact, experience entries, overlaps, skills, profile
        consistency, profile claims, social links.
        """
        now = now or date.today()
        issues: List[ValidationIssue] = []
        issues.extend(self._check_contact(record))
        issues.extend(self._check_experience(record))
        issues.extend(self._check_overlaps(record, now))
        issues.extend(self._check_skills(record))
        issues.extend(self._check_profile_consistency(record, now))
        issues.extend(self._check_profile_claims(record, now))
        issues.extend(self._check_social(record))

        logger.info(
            "resume_validation_complete",
            issues=len(issues),
            errors=sum(1 for issue in issues if issue.severity == Severity.ERROR),
        )
        return issues

    def _check_contact(self, record: CanonicalResume) -> List[ValidationIssue]:
        header = record.header
        issues = []

        name = header.name.strip()
        if not name:
            issues.append(ValidationIssue(
                id="name", severity=Severity.ERROR, section="Contact", context="Name",
                field="header.name", message="Name is required",
            ))
        elif len(name) < self.MIN_NAME_LENGTH:
            issues.append(ValidationIssue(
                id="name_short", severity=Severity.ERROR, section="Contact", context="Name",
                field="header.name", message="Name is too short",
            ))

        email = header.email.strip()
        if not email:
            issues.append(ValidationIssue(
                id="email", severity=Severity.ERROR, section="Contact", context="Email",
                field="header.email", message="Email is required",
            ))
        elif not EMAIL_STRICT.match(email):
            issues.append(ValidationIssue(
                id="email_format", severity=Severity.ERROR, section="Contact", context="Email",
                field="header.email", message="Invalid email format",
            ))

        phone = header.phone.strip()
        if not phone:
            issues.append(ValidationIssue(
                id="phone", severity=Severity.WARNING, section="Contact", context="Phone",
                field="header.phone", message="Phone recommended for contact",
            ))
        else:
            digits = PHONE_SEPARATORS.sub("", phone)
            if not digits.isdigit() or not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
                issues.append(ValidationIssue(
                    id="phone_format", severity=Severity.ERROR, section="Contact", context="Phone",
                    field="header.phone",
                    message=f"Phone must have {PHONE_MIN_DIGITS}-{PHONE_MAX_DIGITS} digits",
                ))

        return issues

    def _check_experience(self, record: CanonicalResume) -> List[ValidationIssue]:
        issues = []
        for i, entry in enumerate(record.experience):
            ctx = _context(entry)
            start, end = entry.start_date.strip(), entry.end_date.strip()

            if not start:
                issues.append(ValidationIssue(
                    id=f"{entry.id}_start", severity=Severity.ERROR, section="Experience", context=ctx,
                    field=f"experience.{i}.start_date", message="Missing start date",
                    fix_options=[SET_DATE],
                ))
            if not end:
                issues.append(ValidationIssue(
                    id=f"{entry.id}_end", severity=Severity.ERROR, section="Experience", context=ctx,
                    field=f"experience.{i}.end_date", message="Missing end date",
                    fix_options=[SET_DATE, MARK_PRESENT],
                ))
            if start and end and not is_present(end):
                start_on, end_on = parse_date(start), parse_date(end)
                if start_on and end_on and end_on < start_on:
                    issues.append(ValidationIssue(
                        id=f"{entry.id}_range", severity=Severity.ERROR, section="Experience", context=ctx,
                        field=f"experience.{i}.end_date",
                        message=f"End date ({end}) is before start date ({start})",
                        fix_options=[SET_DATE, MARK_PRESENT],
                    ))

            if not any(bullet.strip() for bullet in entry.bullets) and not is_part_time(entry):
                issues.append(ValidationIssue(
                    id=f"{entry.id}_bullets", severity=Severity.WARNING, section="Experience", context=ctx,
                    field=f"experience.{i}.bullets", message="Add achievements or responsibilities",
                ))
        return issues

    def _check_overlaps(self, record: CanonicalResume, now: date) -> List[ValidationIssue]:
        """Adjacent entries, ordered by start date, whose date ranges intersect"""
        dated = []
        for i, entry in enumerate(record.experience):
            start_on = parse_date(entry.start_date)
            if start_on:
                dated.append((start_on, i, entry))
        dated.sort(key=lambda item: (item[0], item[1]))

        issues = []
        for (_, _, prev), (next_start, j, nxt) in zip(dated, dated[1:]):
            prev_end = resolve_end(prev.end_date, now)
            if prev_end is None or prev_end <= next_start:
                continue

            prev_part_time, next_part_time = is_part_time(prev), is_part_time(nxt)
            if prev_part_time and next_part_time:
                continue
            if prev_part_time or next_part_time:
                message = f"Overlapping dates: {prev.role} and {nxt.role} (part-time roles can overlap)"
            else:
                message = (
                    f"Dates overlap: {prev.role} ({prev.start_date} - {prev.end_date}) "
                    f"and {nxt.role} ({nxt.start_date} - {nxt.end_date})"
                )
            issues.append(ValidationIssue(
                id=f"overlap_{prev.id}_{nxt.id}", severity=Severity.WARNING, section="Experience",
                context=f"{prev.role or 'Role'} & {nxt.role or 'Role'}",
                field=f"experience.{j}.start_date", message=message,
                fix_options=[SET_DATE],
            ))
        return issues

    def _check_skills(self, record: CanonicalResume) -> List[ValidationIssue]:
        if any(group.items for group in record.skills):
            return []
        return [ValidationIssue(
            id="skills", severity=Severity.WARNING, section="Skills", context="Skills",
            field="skills", message="Add skills to improve ATS visibility",
        )]

    def _check_profile_consistency(self, record: CanonicalResume, now: date) -> List[ValidationIssue]:
        """Intern or trainee roles next to a decade of tenure"""
        if not any(INTERN_TITLE.search(entry.role) for entry in record.experience):
            return []

        discounted = compute_years(record.experience, now=now)
        if discounted > self.INTERN_MAX_YEARS:
            return [ValidationIssue(
                id="profile_mismatch", severity=Severity.ERROR, section="Profile", context="Experience level",
                field="experience", message="Inconsistency: 10+ years of experience but has intern roles",
            )]

        raw = compute_years(record.experience, now=now, discount_part_time=False)
        if raw > self.INTERN_MAX_YEARS:
            return [ValidationIssue(
                id="profile_mismatch", severity=Severity.WARNING, section="Profile", context="Experience level",
                field="experience", message="Intern roles with a high experience count, verify the dates",
            )]
        return []

    def _check_profile_claims(self, record: CanonicalResume, now: date) -> List[ValidationIssue]:
        """Profile summary describing a level the tenure does not support"""
        profile = record.profile
        if not profile.strip():
            return []

        years = compute_years(record.experience, now=now)
        issues = []
        if FRESHER_CLAIM.search(profile) and years > self.FRESHER_CLAIM_MAX_YEARS:
            issues.append(ValidationIssue(
                id="profile_fresher_claim", severity=Severity.WARNING, section="Profile", context="Summary",
                field="profile", message='Profile says "fresher" but you have significant experience',
            ))
        if SENIOR_CLAIM.search(profile) and years < self.SENIOR_CLAIM_MIN_YEARS:
            issues.append(ValidationIssue(
                id="profile_senior_claim", severity=Severity.WARNING, section="Profile", context="Summary",
                field="profile", message='Profile says "senior" but experience seems limited',
            ))
        return issues

    def _check_social(self, record: CanonicalResume) -> List[ValidationIssue]:
        if record.header.linkedin.strip() or record.header.github.strip():
            return []
        return [ValidationIssue(
            id="social", severity=Severity.WARNING, section="Contact", context="Social links",
            field="header.linkedin", message="Add a LinkedIn or GitHub profile",
        )]

    def apply_fix(
        self,
        record: CanonicalResume,
        issue: ValidationIssue,
        value: str,
        now: Optional[date] = None,
    ) -> CanonicalResume:
        """Write ``value`` to the issue's field and recompute meta"""
        return self.set_field(record, issue.field, value, now=now)

    def set_field(
        self,
        record: CanonicalResume,
        path: str,
        value: str,
        now: Optional[date] = None,
    ) -> CanonicalResume:
        """
        Set one string leaf addressed by a dot path (``experience.2.start_date``).

        Raises:
            ValidationError: the path does not resolve to an editable string field
        """
        parts = path.split(".") if path else []
        if not parts or parts[0] not in self.EDITABLE_ROOTS or parts[-1] in self.LOCKED_LEAVES:
            raise ValidationError(f"Field is not editable: {path}", details={"field": path})

        data = record.model_dump()
        node: Any = data
        for part in parts[:-1]:
            node = self._step(node, part, path)

        leaf = parts[-1]
        if isinstance(node, list):
            if not leaf.isdigit() or int(leaf) >= len(node):
                raise ValidationError(f"Field not found: {path}", details={"field": path})
            leaf = int(leaf)
        elif not isinstance(node, dict) or leaf not in node:
            raise ValidationError(f"Field not found: {path}", details={"field": path})

        if not isinstance(node[leaf], str):
            raise ValidationError(f"Field is not a text field: {path}", details={"field": path})

        node[leaf] = value
        updated = CanonicalResume.model_validate(data)
        logger.info("resume_field_updated", field=path)
        return compute_meta(updated, now=now)

    @staticmethod
    def _step(node: Any, part: str, path: str) -> Any:
        if isinstance(node, list) and part.isdigit() and int(part) < len(node):
            return node[int(part)]
        if isinstance(node, dict) and part in node and node[part] is not None:
            return node[part]
        raise ValidationError(f"Field not found: {path}", details={"field": path})


# Global instance
resume_validator = ResumeValidator()


def validate_resume(record: CanonicalResume, now: Optional[date] = None) -> List[ValidationIssue]:
    return resume_validator.validate(record, now=now)


def apply_fix(
    record: CanonicalResume,
    issue: ValidationIssue,
    value: str,
    now: Optional[date] = None,
) -> CanonicalResume:
    return resume_validator.apply_fix(record, issue, value, now=now)
