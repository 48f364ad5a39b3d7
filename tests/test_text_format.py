# tests/test_text_format.py
"""
Bullet formatter tests.

Run with: python -m pytest tests/test_text_format.py -v
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.text_format import to_bullets, normalize_text


class TestToBullets(unittest.TestCase):

    def test_empty_and_non_text(self):
        self.assertEqual(to_bullets(""), "")
        self.assertEqual(to_bullets(None), "")
        self.assertEqual(to_bullets(42), "")
        self.assertEqual(to_bullets(["Do X."]), "")

    def test_sentences_become_bullets(self):
        self.assertEqual(to_bullets("Do X. Do Y. Do Z."), "• Do X.\n• Do Y.\n• Do Z.")

    def test_keeps_terminal_punctuation(self):
        self.assertEqual(
            to_bullets("Start today! Are you ready? Go."),
            "• Start today!\n• Are you ready?\n• Go.",
        )

    def test_dash_list_unchanged(self):
        text = "- Learn Python\n- Build a project"
        self.assertEqual(to_bullets(text), text)

    def test_numbered_and_bullet_lists_unchanged(self):
        numbered = "1. Pick a skill\n2) Practice daily"
        self.assertEqual(to_bullets(numbered), numbered)
        bulleted = "• One\n• Two"
        self.assertEqual(to_bullets(bulleted), bulleted)

    def test_list_detected_on_later_line(self):
        text = "Here is your plan:\n- Learn SQL. Then Excel.\n- Apply"
        self.assertEqual(to_bullets(text), text)

    def test_caps_at_eight_bullets(self):
        text = " ".join(f"Step {i} done." for i in range(12))
        result = to_bullets(text).split("\n")
        self.assertEqual(len(result), 8)
        self.assertEqual(result[0], "• Step 0 done.")
        self.assertEqual(result[-1], "• Step 7 done.")

    def test_text_without_punctuation_is_one_bullet(self):
        self.assertEqual(to_bullets("keep going"), "• keep going")

    def test_whitespace_only(self):
        self.assertEqual(to_bullets("  \t \r\n "), "")

    def test_tabs_and_line_endings_normalized(self):
        self.assertEqual(normalize_text("  a\t\tb\r\nc\rd  "), "a b\nc\nd")
        self.assertEqual(to_bullets("First.\r\nSecond."), "• First.\n• Second.")

    def test_decimal_point_needs_whitespace_to_split(self):
        self.assertEqual(to_bullets("Study 2.5 hours. Rest."), "• Study 2.5 hours.\n• Rest.")


if __name__ == "__main__":
    unittest.main()
