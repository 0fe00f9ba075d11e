import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_matcher.normalize.normalize_jd import (  # noqa: E402
    extract_company,
    extract_job_title,
    parse_job_description,
)
from resume_matcher.normalize.sections import extract_experience  # noqa: E402


class ExperienceSectionTests(unittest.TestCase):
    def test_captures_lines_between_header_and_next_section(self):
        resume = (
            "Jane Doe\n"
            "PROFESSIONAL EXPERIENCE\n"
            "\n"
            "  - Built dashboards  \n"
            "Acme Corp\n"
            "EDUCATION\n"
            "BSc Computer Science\n"
        )
        self.assertEqual(extract_experience(resume), ["- Built dashboards", "Acme Corp"])

    def test_without_header_returns_empty(self):
        self.assertEqual(extract_experience("Jane Doe\nSkills: Python"), [])
        self.assertEqual(extract_experience(""), [])

    def test_second_header_is_skipped_and_block_continues(self):
        resume = "Experience\nLine A\nEmployment history\nLine B\nSkills\nPython"
        self.assertEqual(extract_experience(resume), ["Line A", "Line B"])

    def test_only_first_block_is_captured(self):
        resume = "Work History\nRole one\nProjects\nSide project\nExperience\nRole two"
        self.assertEqual(extract_experience(resume), ["Role one"])


class JobDescriptionParserTests(unittest.TestCase):
    def test_dash_headline_splits_title_and_company(self):
        job = parse_job_description("Senior Engineer - Acme Corp\nWe use Python every day.")
        self.assertEqual(job.title, "Senior Engineer")
        self.assertEqual(job.company, "Acme Corp")
        self.assertEqual(job.keywords, ["Python"])

    def test_pipe_and_at_headlines(self):
        self.assertEqual(extract_job_title("Backend Developer | Globex"), "Backend Developer")
        self.assertEqual(extract_company("Backend Developer | Globex"), "Globex")
        self.assertEqual(extract_job_title("Senior Developer AT Initech"), "Senior Developer")
        self.assertEqual(extract_company("Senior Developer at Initech"), "Initech")

    def test_unpatterned_headline_keeps_title_and_defaults_company(self):
        self.assertEqual(extract_job_title("Staff Engineer\nRemote"), "Staff Engineer")
        self.assertEqual(extract_company("Staff Engineer\nRemote"), "Tech Company")

    def test_headline_is_first_non_empty_line(self):
        job = parse_job_description("\n\n  Senior Engineer - Acme Corp  \nDetails")
        self.assertEqual(job.title, "Senior Engineer")
        self.assertEqual(job.company, "Acme Corp")

    def test_empty_input_falls_back_to_defaults(self):
        job = parse_job_description("")
        self.assertEqual(job.title, "Software Engineer")
        self.assertEqual(job.company, "Tech Company")
        self.assertEqual(job.content, "")
        self.assertEqual(job.keywords, [])
        self.assertEqual(job.requirements, [])

    def test_requirements_collect_bullets_after_trigger(self):
        content = (
            "Senior Engineer - Acme\n"
            "About us\n"
            "- ignored bullet\n"
            "Requirements:\n"
            "- Python expertise\n"
            "• Docker knowledge\n"
            "plain line\n"
            "- 3 years of experience\n"
            "- 5+ years shipping software\n"
        )
        job = parse_job_description(content)
        self.assertEqual(
            job.requirements,
            ["Python expertise", "Docker knowledge", "5+ years shipping software"],
        )
        self.assertEqual(job.content, content)

    def test_requirements_are_capped(self):
        bullets = "\n".join(f"- item {index}" for index in range(12))
        job = parse_job_description(f"Engineer - Acme\nQualifications\n{bullets}")
        self.assertEqual(len(job.requirements), 8)
        self.assertEqual(job.requirements[0], "item 0")
        self.assertEqual(job.requirements[-1], "item 7")


if __name__ == "__main__":
    unittest.main()
