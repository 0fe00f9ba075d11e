import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_matcher.features.bullet_enhancer import (  # noqa: E402
    BULLET_ENHANCEMENTS,
    GENERIC_ENHANCEMENT,
    enhance_bullet_point,
)
from resume_matcher.features.suggestions import generate_suggestions  # noqa: E402
from resume_matcher.normalize.normalize_jd import parse_job_description  # noqa: E402

RESUME_TEXT = (
    "Jane Doe\n"
    "jane@example.com | 555-123-4567\n"
    "WORK EXPERIENCE\n"
    "- Developed an internal reporting tool for finance teams\n"
    "- Reduced build times by 40% across services\n"
    "- Collaborated with designers on the onboarding flow\n"
    "- Answered customer questions in the support queue\n"
    "EDUCATION\n"
    "BSc Computer Science\n"
    "SKILLS\n"
    "Python, SQL\n"
)

JOB_TEXT = (
    "Senior Engineer - Acme Corp\n"
    "Requirements:\n"
    "- Python and SQL\n"
    "- Docker and Kubernetes\n"
    "- AWS\n"
)

DEVELOPED_SUFFIX = BULLET_ENHANCEMENTS[0][1]
COLLABORATED_SUFFIX = BULLET_ENHANCEMENTS[4][1]


class BulletEnhancerTests(unittest.TestCase):
    def test_first_matching_verb_family_wins(self):
        self.assertEqual(
            enhance_bullet_point("Developed a reporting tool"),
            "Developed a reporting tool" + DEVELOPED_SUFFIX,
        )
        self.assertTrue(enhance_bullet_point("Led the platform team").endswith(BULLET_ENHANCEMENTS[1][1]))
        self.assertTrue(enhance_bullet_point("optimized SQL queries").endswith(BULLET_ENHANCEMENTS[2][1]))
        self.assertTrue(enhance_bullet_point("Deployed services to production").endswith(BULLET_ENHANCEMENTS[3][1]))
        self.assertTrue(enhance_bullet_point("Worked on billing").endswith(COLLABORATED_SUFFIX))

    def test_declared_order_breaks_ties(self):
        text = "Built and launched a mobile app"
        self.assertEqual(enhance_bullet_point(text), text + DEVELOPED_SUFFIX)

    def test_unmatched_bullet_gets_generic_clause(self):
        text = "Answered customer questions"
        self.assertEqual(enhance_bullet_point(text), text + GENERIC_ENHANCEMENT)


class SuggestionGeneratorTests(unittest.TestCase):
    def setUp(self):
        self.job = parse_job_description(JOB_TEXT)

    def _generate(self, resume_text, missing, matching=()):
        return generate_suggestions(resume_text, self.job, list(missing), list(matching))

    def test_well_structured_resume_gets_keyword_and_quantify_suggestions(self):
        suggestions = self._generate(RESUME_TEXT, ["AWS", "Docker", "Kubernetes"], ["Python", "SQL"])
        self.assertEqual(
            [item.id for item in suggestions],
            ["missing-0", "missing-1", "missing-2", "quantify-0", "quantify-2"],
        )

        keyword = suggestions[0]
        self.assertEqual(keyword.type, "keyword")
        self.assertEqual(keyword.priority, "high")
        self.assertEqual(keyword.section, "skills")
        self.assertIn('"AWS"', keyword.title)
        self.assertIsNone(keyword.original)
        self.assertIsNone(keyword.improved)

    def test_quantify_suggestion_carries_verbatim_original(self):
        suggestions = self._generate(RESUME_TEXT, [])
        quantify = [item for item in suggestions if item.type == "content"]
        self.assertEqual(len(quantify), 2)

        developed = quantify[0]
        self.assertEqual(developed.priority, "high")
        self.assertEqual(developed.section, "experience")
        self.assertEqual(developed.original, "Developed an internal reporting tool for finance teams")
        self.assertIn(developed.original, RESUME_TEXT)
        self.assertTrue(developed.improved.startswith(developed.original))
        self.assertTrue(developed.improved.endswith(DEVELOPED_SUFFIX))

        self.assertTrue(quantify[1].improved.endswith(COLLABORATED_SUFFIX))

    def test_single_developed_bullet_yields_one_content_suggestion(self):
        resume = (
            "Experience\n"
            "- Developed a reporting tool for the finance team\n"
            "Education\n"
        )
        content = [item for item in self._generate(resume, []) if item.type == "content"]
        self.assertEqual(len(content), 1)
        self.assertEqual(content[0].original, "Developed a reporting tool for the finance team")
        self.assertEqual(
            content[0].improved,
            "Developed a reporting tool for the finance team" + DEVELOPED_SUFFIX,
        )

    def test_short_numeric_or_unbulleted_lines_are_not_quantified(self):
        resume = (
            "Experience\n"
            "- Fixed bugs quickly\n"
            "- Shipped 12 features for the payments product\n"
            "Owned the onboarding flow for enterprise customers\n"
        )
        self.assertEqual([item for item in self._generate(resume, []) if item.type == "content"], [])

    def test_quantify_only_looks_at_first_three_experience_lines(self):
        resume = (
            "Experience\n"
            "Acme Corp\n"
            "Staff Engineer\n"
            "2019 - 2023\n"
            "- Developed an internal reporting tool for finance teams\n"
        )
        self.assertEqual([item for item in self._generate(resume, []) if item.type == "content"], [])

    def test_structure_ats_and_contact_checks(self):
        resume = "Jane Doe\njane@example.com 555.123.4567\nSkills: Python"
        suggestions = self._generate(resume, [])
        self.assertEqual([item.id for item in suggestions], ["ats-headers", "formatting-structure"])

        ats, structure = suggestions
        self.assertEqual((ats.type, ats.priority), ("ats", "medium"))
        self.assertEqual((structure.type, structure.priority), ("formatting", "medium"))
        self.assertEqual(
            structure.description,
            "Add missing standard sections: experience, education. This improves readability and ATS parsing.",
        )

    def test_missing_phone_triggers_contact_suggestion(self):
        resume = "Jane Doe\njane@example.com\nProfessional Experience\nSkills\nEducation"
        suggestions = self._generate(resume, [])
        self.assertEqual([item.id for item in suggestions], ["contact-info"])
        self.assertEqual(suggestions[0].type, "formatting")
        self.assertEqual(suggestions[0].priority, "high")

    def test_list_is_capped_with_earlier_categories_first(self):
        resume = (
            "Employment\n"
            "- Built a scheduling service for clinics\n"
            "- Created onboarding guides for new hires\n"
            "- Managed vendor relationships for the office\n"
        )
        missing = ["Python", "AWS", "Docker", "Kubernetes", "Terraform"]
        suggestions = self._generate(resume, missing)
        self.assertEqual(len(suggestions), 8)
        self.assertEqual(
            [item.id for item in suggestions],
            [
                "missing-0",
                "missing-1",
                "missing-2",
                "missing-3",
                "quantify-0",
                "quantify-1",
                "quantify-2",
                "ats-headers",
            ],
        )

    def test_ids_are_stable_across_runs(self):
        first = self._generate(RESUME_TEXT, ["AWS", "Docker"])
        second = self._generate(RESUME_TEXT, ["AWS", "Docker"])
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
