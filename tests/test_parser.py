import logging
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats import parse_resume, score_resume  # noqa: E402
from resume_ats.schemas import ParsedResume, ProjectEntry  # noqa: E402

SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | (555) 123-4567
linkedin.com/in/janedoe | github.com/janedoe
SUMMARY
Backend engineer building reliable payment systems.
Focused on Python services and cloud infrastructure.
SKILLS
Python, Java, SQL
Docker | Kubernetes | AWS
EXPERIENCE
Acme Payments
Senior Software Engineer    Jan 2021 - Present
Bengaluru, India
• Led migration of billing services to microservices
• Mentoring two junior engineers
Globex Corp
Software Engineer    Jun 2018 - Dec 2020
• Built REST API endpoints with Django
EDUCATION
Stanford University
Master of Science in Computer Science, 2018
PROJECTS
Payment Gateway Simulator
• Simulates card network authorisation flows for integration tests
ACHIEVEMENTS
Winner of the 2019 internal hackathon for fraud detection
"""


class ParseResumeTests(unittest.TestCase):
    def test_full_resume(self):
        parsed = parse_resume(SAMPLE_RESUME)

        self.assertEqual(parsed.raw_text, SAMPLE_RESUME)
        self.assertEqual(parsed.contact.email, "jane.doe@example.com")
        self.assertEqual(parsed.contact.phone, "(555) 123-4567")
        self.assertEqual(parsed.contact.linkedin, "linkedin.com/in/janedoe")
        self.assertEqual(parsed.contact.github, "github.com/janedoe")
        self.assertEqual(
            parsed.summary,
            "Backend engineer building reliable payment systems. "
            "Focused on Python services and cloud infrastructure.",
        )
        self.assertEqual(parsed.skills, ["Python", "Java", "SQL", "Docker", "Kubernetes", "AWS"])

        self.assertEqual(
            [(entry.title, entry.company, entry.period) for entry in parsed.experience],
            [
                ("Senior Software Engineer", "Acme Payments", "Jan 2021 - Present"),
                ("Software Engineer", "Globex Corp", "Jun 2018 - Dec 2020"),
            ],
        )
        self.assertEqual(parsed.experience[0].location, "Bengaluru, India")
        self.assertEqual(parsed.experience[1].description, ["Built REST API endpoints with Django"])

        self.assertEqual(parsed.education, ["Stanford University, Master of Science in Computer Science, 2018"])
        self.assertEqual(
            parsed.projects,
            [
                ProjectEntry(
                    title="Payment Gateway Simulator",
                    description=["Simulates card network authorisation flows for integration tests"],
                )
            ],
        )
        self.assertEqual(parsed.achievements, ["Winner of the 2019 internal hackathon for fraud detection"])

    def test_full_resume_score(self):
        result = score_resume(parse_resume(SAMPLE_RESUME))
        self.assertEqual(result.score_breakdown.skills, 33)
        self.assertEqual(result.score_breakdown.experience, 23)
        self.assertEqual(result.score_breakdown.education, 15)
        self.assertEqual(result.score_breakdown.keywords, 5)
        self.assertEqual(result.keywords_found, ["java", "python", "django", "sql", "aws"])
        # 33 * 0.4 + 22.5 * 0.3 + 15 * 0.2 + 4.7 * 0.1 = 23.42
        self.assertEqual(result.ats_score, 23)

    def test_parse_and_score_are_repeatable(self):
        first = parse_resume(SAMPLE_RESUME)
        second = parse_resume(SAMPLE_RESUME)
        self.assertEqual(first, second)
        self.assertEqual(score_resume(first), score_resume(second))

    def test_empty_input(self):
        parsed = parse_resume("")
        self.assertEqual(parsed, ParsedResume())
        self.assertEqual(parsed.to_record()["contact"], {})
        self.assertEqual(score_resume(parsed).ats_score, 0)

    def test_text_without_headers_is_all_empty(self):
        parsed = parse_resume("Just some words\nwithout any structure at all")
        self.assertEqual(parsed.skills, [])
        self.assertEqual(parsed.experience, [])
        self.assertEqual(parsed.education, [])
        self.assertEqual(parsed.projects, [])
        self.assertEqual(parsed.achievements, [])
        self.assertEqual(parsed.summary, "")

    def test_degree_words_outside_an_education_section_are_ignored(self):
        parsed = parse_resume("Jane Doe\nCertified Scrum Master with 5 years\nBachelor of Science, 2020")
        self.assertEqual(parsed.education, [])
        result = score_resume(parsed)
        self.assertEqual(result.score_breakdown.education, 0)
        self.assertEqual(result.ats_score, 0)

    def test_caps_hold_for_oversized_input(self):
        blocks = [
            "SKILLS",
            *[f"Skill{i}" for i in range(100)],
            "EXPERIENCE",
            *[f"Engineer {i}    2001 - 2002\n• Did thing {i}" for i in range(20)],
            "EDUCATION",
            *[f"Bachelor of Science {i}" for i in range(10)],
            "PROJECTS",
            *[f"Project number {i}" for i in range(10)],
            "ACHIEVEMENTS",
            *[f"Achievement number {i} for excellence" for i in range(20)],
        ]
        parsed = parse_resume("\n".join(blocks))
        self.assertEqual(len(parsed.skills), 30)
        self.assertEqual(len(parsed.experience), 15)
        self.assertEqual(len(parsed.education), 5)
        self.assertEqual(len(parsed.projects), 5)
        self.assertEqual(len(parsed.achievements), 10)

    def test_injected_logger_receives_events(self):
        log = logging.getLogger("tests.parser")
        with self.assertLogs(log, level="INFO") as captured:
            parse_resume("SKILLS\nPython", logger=log)
        self.assertTrue(any("resume_parse_completed" in line for line in captured.output))

    def test_missing_text_is_a_caller_error(self):
        with self.assertRaises(TypeError):
            parse_resume(None)


if __name__ == "__main__":
    unittest.main()
