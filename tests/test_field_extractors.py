import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.extractors import (  # noqa: E402
    extract_achievements,
    extract_contact,
    extract_education,
    extract_projects,
    extract_skills,
    extract_summary,
)
from resume_ats.extractors.education import has_degree  # noqa: E402
from resume_ats.schemas import Contact, ProjectEntry  # noqa: E402


class ContactExtractorTests(unittest.TestCase):
    def test_all_fields_from_header_block(self):
        text = (
            "Jane Doe\n"
            "jane.doe@example.com | (555) 123-4567\n"
            "linkedin.com/in/janedoe | github.com/janedoe"
        )
        contact = extract_contact(text)
        self.assertEqual(
            contact,
            Contact(
                email="jane.doe@example.com",
                phone="(555) 123-4567",
                linkedin="linkedin.com/in/janedoe",
                github="github.com/janedoe",
            ),
        )

    def test_section_match_wins_over_document(self):
        contact = extract_contact("jane@work.io", fallback_text="jane@home.io")
        self.assertEqual(contact.email, "jane@work.io")

    def test_missing_fields_fall_back_to_document(self):
        contact = extract_contact(
            "Phone: 555-123-4567",
            fallback_text="jane@example.com\nPhone: 555-123-4567",
        )
        self.assertEqual(contact.email, "jane@example.com")
        self.assertEqual(contact.phone, "555-123-4567")

    def test_indian_mobile_number(self):
        self.assertEqual(extract_contact("Mobile +91 9876543210").phone, "+91 9876543210")

    def test_profile_links_are_case_insensitive(self):
        contact = extract_contact("LinkedIn.com/in/jane-doe GitHub.com/jane-doe")
        self.assertEqual(contact.linkedin, "LinkedIn.com/in/jane-doe")
        self.assertEqual(contact.github, "GitHub.com/jane-doe")

    def test_nothing_found_is_empty_contact(self):
        contact = extract_contact(None)
        self.assertEqual(contact.model_dump(exclude_none=True), {})


class SkillsExtractorTests(unittest.TestCase):
    def test_splits_on_all_delimiters(self):
        skills = extract_skills("Python, Java • Go · Rust - C++ | SQL")
        self.assertEqual(skills, ["Python", "Java", "Go", "Rust", "C++", "SQL"])

    def test_dedupe_is_case_sensitive_and_keeps_order(self):
        self.assertEqual(extract_skills("Python, python\nPython, SQL"), ["Python", "python", "SQL"])

    def test_long_lines_and_tokens_are_skipped(self):
        long_line = ", ".join(["Alpha"] * 20)
        long_token = "A" * 51
        skills = extract_skills(f"{long_line}\n{long_token}, Go")
        self.assertEqual(skills, ["Go"])

    def test_ordinal_tokens_are_dropped(self):
        self.assertEqual(extract_skills("1., Python, 2., Java"), ["Python", "Java"])

    def test_capped_at_thirty_in_encounter_order(self):
        section = "\n".join(f"Skill{i}" for i in range(45))
        skills = extract_skills(section)
        self.assertEqual(len(skills), 30)
        self.assertEqual(skills[0], "Skill0")
        self.assertEqual(skills[-1], "Skill29")

    def test_absent_section(self):
        self.assertEqual(extract_skills(None), [])


class EducationExtractorTests(unittest.TestCase):
    def test_institution_merges_with_following_degree_line(self):
        education = extract_education("Stanford University\nMaster of Science in Computer Science, 2018")
        self.assertEqual(education, ["Stanford University, Master of Science in Computer Science, 2018"])

    def test_institution_merges_with_following_date_line(self):
        education = extract_education("Delhi Public School\n2012 - 2014")
        self.assertEqual(education, ["Delhi Public School, 2012 - 2014"])

    def test_consecutive_institutions_stay_separate(self):
        education = extract_education("Imperial College\nHarvard University")
        self.assertEqual(education, ["Imperial College", "Harvard University"])

    def test_non_qualifying_lines_are_dropped(self):
        education = extract_education("B.Tech in Information Technology\nDean's list honours")
        self.assertEqual(education, ["B.Tech in Information Technology"])

    def test_dedupe_and_cap(self):
        lines = ["Bachelor of Arts", "Bachelor of Arts"] + [f"Diploma in Design {i}" for i in range(6)]
        education = extract_education("\n".join(lines))
        self.assertEqual(len(education), 5)
        self.assertEqual(education[0], "Bachelor of Arts")
        self.assertEqual(education[1], "Diploma in Design 0")

    def test_absent_section_is_empty(self):
        self.assertEqual(extract_education(None), [])
        self.assertEqual(extract_education(""), [])

    def test_degree_abbreviations_need_a_word_start(self):
        self.assertTrue(has_degree("B.Sc Physics"))
        self.assertTrue(has_degree("MBA, Finance"))
        self.assertFalse(has_degree("Built web.app tooling"))


class ProjectsExtractorTests(unittest.TestCase):
    def test_titles_collect_following_description_lines(self):
        section = (
            "Payment Gateway Simulator\n"
            "• Simulates card network flows for tests\n"
            "Ledger Service\n"
            "    indented continuation line here"
        )
        self.assertEqual(
            extract_projects(section),
            [
                ProjectEntry(
                    title="Payment Gateway Simulator",
                    description=["Simulates card network flows for tests"],
                ),
                ProjectEntry(title="Ledger Service", description=["indented continuation line here"]),
            ],
        )

    def test_short_lines_are_ignored(self):
        projects = extract_projects("Ledger Service\nAPI")
        self.assertEqual(projects, [ProjectEntry(title="Ledger Service", description=[])])

    def test_lines_before_first_title_are_dropped(self):
        projects = extract_projects("    orphan description without a title\nLedger Service")
        self.assertEqual([project.title for project in projects], ["Ledger Service"])

    def test_capped_at_five(self):
        section = "\n".join(f"Project number {i}" for i in range(8))
        projects = extract_projects(section)
        self.assertEqual(len(projects), 5)
        self.assertEqual(projects[-1].title, "Project number 4")


class AchievementsExtractorTests(unittest.TestCase):
    def test_length_window(self):
        section = "\n".join(["Short", "Won the national coding contest in 2022", "x" * 150])
        self.assertEqual(extract_achievements(section), ["Won the national coding contest in 2022"])

    def test_capped_at_ten(self):
        section = "\n".join(f"Achievement number {i} for excellence" for i in range(14))
        achievements = extract_achievements(section)
        self.assertEqual(len(achievements), 10)
        self.assertEqual(achievements[-1], "Achievement number 9 for excellence")


class SummaryExtractorTests(unittest.TestCase):
    def test_first_three_short_lines_are_joined(self):
        section = "Backend engineer.\n" + "y" * 200 + "\nPython services.\nCloud work.\nIgnored line."
        self.assertEqual(extract_summary(section), "Backend engineer. Python services. Cloud work.")

    def test_truncated_to_five_hundred_chars(self):
        section = "\n".join(["z" * 199] * 3)
        self.assertEqual(len(extract_summary(section)), 500)

    def test_absent_section_is_empty_not_full_text(self):
        self.assertEqual(extract_summary(None), "")


if __name__ == "__main__":
    unittest.main()
