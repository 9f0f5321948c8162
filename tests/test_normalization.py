import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.normalize.utils import (  # noqa: E402
    find_date_range,
    is_bullet_line,
    iter_content_lines,
    normalize_line,
    split_lines,
    strip_bullet_prefix,
)


class DateRangeTests(unittest.TestCase):
    def test_supported_period_shapes(self):
        cases = {
            "Engineer January-February, 2025": "January-February, 2025",
            "Engineer Jan 2021 - Present": "Jan 2021 - Present",
            "Engineer Sept. 2019 to Mar 2020": "Sept. 2019 to Mar 2020",
            "Engineer 06/2018 – 12/2020": "06/2018 – 12/2020",
            "Engineer 2016 — 2020": "2016 — 2020",
            "Engineer 2022 - current": "2022 - current",
            "Engineer | Present": "Present",
        }
        for line, period in cases.items():
            with self.subTest(line=line):
                match = find_date_range(line)
                self.assertIsNotNone(match)
                self.assertEqual(match.group(0), period)

    def test_lines_without_periods(self):
        for line in ("Built the present-day billing stack", "Grew revenue 2020 by 40%", "May the best win"):
            with self.subTest(line=line):
                self.assertIsNone(find_date_range(line))


class LineHelperTests(unittest.TestCase):
    def test_bullets(self):
        for line in ("• Built APIs", "- Built APIs", "* Built APIs", "  ▪ Built APIs", "– Built APIs"):
            with self.subTest(line=line):
                self.assertTrue(is_bullet_line(line))
                self.assertEqual(strip_bullet_prefix(line), "Built APIs")
        self.assertFalse(is_bullet_line("Built APIs"))

    def test_line_splitting_and_trimming(self):
        self.assertEqual(split_lines("a\r\nb\rc"), ["a", "b", "c"])
        self.assertEqual(list(iter_content_lines("  a \n\n   \n b")), ["a", "b"])
        self.assertEqual(normalize_line("  Senior   Engineer \t"), "Senior Engineer")


if __name__ == "__main__":
    unittest.main()
