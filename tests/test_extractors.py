from resumekit.resumes import extractors


class TestContact:
    def test_name_is_title_cased(self):
        assert extractors.extract_name(["JANE DOE", "jane@example.com"]) == "Jane Doe"

    def test_name_skips_section_words(self):
        lines = ["Curriculum Vitae", "john smith", "Software Engineer"]
        assert extractors.extract_name(lines) == "John Smith"

    def test_name_skips_single_words_and_contact_lines(self):
        lines = ["Resume", "john.smith@example.com", "+1 555 123 4567", "Mary Ann Lee"]
        assert extractors.extract_name(lines) == "Mary Ann Lee"

    def test_name_keeps_middle_initial(self):
        assert extractors.extract_name(["John A Smith"]) == "John A Smith"
        assert extractors.extract_name(["J R R Tolkien Jr"]) == ""

    def test_name_missing(self):
        assert extractors.extract_name(["", "x", "12345"]) == ""

    def test_email_lower_cased(self):
        assert extractors.extract_email("Contact: John.Smith@Example.COM today") == "john.smith@example.com"

    def test_email_missing(self):
        assert extractors.extract_email("no address here") == ""

    def test_phone_indian_mobile(self):
        assert extractors.extract_phone("Call +91 9876543210 anytime") == "+91 9876543210"

    def test_phone_bare_indian_mobile(self):
        assert extractors.extract_phone("Mobile: 9876543210") == "9876543210"

    def test_phone_keeps_other_country_codes(self):
        assert extractors.extract_phone("Tel +1 9175551234") == "+1 9175551234"

    def test_phone_mobile_not_cut_from_longer_number(self):
        assert extractors.extract_phone("Ref 19876543210") == "19876543210"

    def test_phone_nanp(self):
        assert extractors.extract_phone("Phone: (555) 123-4567") == "(555) 123-4567"

    def test_phone_missing(self):
        assert extractors.extract_phone("no digits") == ""

    def test_linkedin_rebuilt(self):
        text = "https://www.linkedin.com/in/john-smith-123/"
        assert extractors.extract_linkedin(text) == "linkedin.com/in/john-smith-123"

    def test_github_rebuilt(self):
        assert extractors.extract_github("see https://GitHub.com/jsmith") == "github.com/jsmith"


class TestSkills:
    def test_symbol_skills_and_word_edges(self):
        groups = extractors.extract_skills(["C++, C#, JavaScript"], "")
        assert groups[0].category == "Languages"
        assert groups[0].items == ["c++", "c#", "javascript"]

    def test_categories_in_fixed_order_and_deduplicated(self):
        groups = extractors.extract_skills(["Docker, React, Python"], "python and PYTHON and docker")
        assert [g.category for g in groups] == ["Languages", "Frameworks", "Tools"]
        assert groups[0].items == ["python"]
        assert groups[2].items == ["docker"]

    def test_substrings_are_not_skills(self):
        groups = extractors.extract_skills([], "PostgreSQL on GitHub")
        tools = {g.category: g.items for g in groups}["Tools"]
        assert "postgresql" in tools
        assert "github" in tools
        assert "git" not in tools
        assert "Languages" not in [g.category for g in groups]

    def test_no_skills(self):
        assert extractors.extract_skills([], "nothing relevant") == []


class TestExperience:
    def test_role_company_and_dates(self):
        entries = extractors.extract_experience([
            "Senior Software Engineer at Acme Corp  Jan 2021 - Present",
            "- Led migration of billing services to Kubernetes",
        ])
        assert len(entries) == 1
        entry = entries[0]
        assert entry.id == "exp_0"
        assert entry.role == "Senior Software Engineer"
        assert entry.company == "Acme Corp"
        assert entry.start_date == "Jan 2021"
        assert entry.end_date == "Present"
        assert entry.bullets == ["Led migration of billing services to Kubernetes"]

    def test_present_synonyms_normalised(self):
        entries = extractors.extract_experience(["Engineer @ Hooli  2019 - Current"])
        assert entries[0].role == "Engineer"
        assert entries[0].company == "Hooli"
        assert entries[0].start_date == "2019"
        assert entries[0].end_date == "Present"

    def test_date_only_line_fills_open_entry(self):
        entries = extractors.extract_experience([
            "Junior Analyst at Initech",
            "03/2019 - 05/2021",
            "Built dashboards for the finance team",
        ])
        assert len(entries) == 1
        assert entries[0].start_date == "03/2019"
        assert entries[0].end_date == "05/2021"
        assert entries[0].bullets == ["Built dashboards for the finance team"]

    def test_short_lines_are_not_bullets(self):
        entries = extractors.extract_experience(["Developer | Initrode  2015 - 2017", "- ok", "Python, SQL"])
        assert entries[0].bullets == []

    def test_entries_without_role_are_dropped(self):
        assert extractors.extract_experience(["2018 - 2020", "Did a number of useful things there"]) == []

    def test_ids_follow_document_order(self):
        entries = extractors.extract_experience([
            "Engineer at A  2020 - 2021",
            "Engineer at B  2021 - 2022",
            "Engineer at C  2022 - Present",
        ])
        assert [e.id for e in entries] == ["exp_0", "exp_1", "exp_2"]
        assert [e.company for e in entries] == ["A", "B", "C"]


class TestEducation:
    def test_degree_institution_year(self):
        entries = extractors.extract_education([
            "Bachelor of Technology in Computer Science, Stanford University, 2018",
        ])
        assert entries[0].id == "edu_0"
        assert entries[0].degree == "Bachelor of Technology in Computer Science"
        assert entries[0].institution == "Stanford University"
        assert entries[0].year == "2018"

    def test_last_year_wins(self):
        entries = extractors.extract_education(["M.Sc Physics, Oxford University 2015 - 2017"])
        assert entries[0].degree == "M.Sc Physics"
        assert entries[0].institution == "Oxford University"
        assert entries[0].year == "2017"

    def test_lines_without_degree_are_skipped(self):
        assert extractors.extract_education(["Dean's list", "GPA 3.9"]) == []

    def test_be_and_me_in_prose_are_not_degrees(self):
        lines = ["Coursework helped me ship an ATS in 2019", "Awards will be listed on request"]
        assert extractors.extract_education(lines) == []

    def test_short_engineering_degrees(self):
        entries = extractors.extract_education([
            "B.E. Mechanical Engineering, Anna University, 2016",
            "BE in Computer Science, Pune University, 2014",
        ])
        assert [e.degree for e in entries] == ["B.E. Mechanical Engineering", "BE in Computer Science"]
        assert [e.institution for e in entries] == ["Anna University", "Pune University"]


class TestProjects:
    def test_title_and_description(self):
        projects = extractors.extract_projects([
            "Resume Builder",
            "Built a resume editor with React and Django.",
            "Deployed on AWS with Docker and react hooks.",
            "Chat App",
            "Realtime chat in Node with Redis pub/sub.",
        ])
        assert [p.name for p in projects] == ["Resume Builder", "Chat App"]
        assert projects[0].id == "proj_0"
        assert projects[0].tech == ["react", "django", "aws", "docker"]
        assert projects[1].tech == ["node", "redis"]
        assert projects[0].description.startswith("Built a resume editor")

    def test_bullets_do_not_open_projects(self):
        projects = extractors.extract_projects(["Tracker", "- Short bullet", "1 More"])
        assert len(projects) == 1
        assert projects[0].description == "Short bullet 1 More"


def test_profile_truncated():
    assert len(extractors.extract_profile(["word " * 300])) <= 600
