from resumekit.resumes.section_locator import SectionLocator, locate_section


def test_locates_lines_between_headers():
    lines = ["Jane Doe", "Skills", "Python, Docker", "Go", "Experience", "Engineer at Acme"]
    assert locate_section(lines, ["skills"], ["experience"], 20) == ["Python, Docker", "Go"]


def test_missing_header_returns_empty():
    lines = ["Jane Doe", "Python, Docker"]
    assert locate_section(lines, ["skills"], ["experience"], 20) == []


def test_keyword_in_long_line_is_ignored():
    lines = [
        "I have broad experience across backend systems and cloud infrastructure",
        "Experience",
        "Engineer at Acme",
        "Education",
    ]
    assert locate_section(lines, ["experience"], ["education"], 50) == ["Engineer at Acme"]


def test_long_line_does_not_end_section():
    lines = [
        "Experience",
        "Engineer at Acme",
        "Taught internal education sessions on distributed systems to new hires",
        "Education",
    ]
    result = locate_section(lines, ["experience"], ["education"], 50)
    assert result == lines[1:3]


def test_max_span_caps_section():
    lines = ["Skills"] + [f"skill line {i}" for i in range(30)]
    result = locate_section(lines, ["skills"], ["experience"], 20)
    assert len(result) == 20
    assert result[0] == "skill line 0"


def test_header_match_is_case_insensitive():
    lines = ["WORK EXPERIENCE", "Engineer at Acme", "EDUCATION", "BSc"]
    assert SectionLocator().locate_named(lines, "experience") == ["Engineer at Acme"]


def test_section_at_end_of_document():
    lines = ["Projects", "Resume Builder"]
    assert SectionLocator().locate_named(lines, "projects") == ["Resume Builder"]
