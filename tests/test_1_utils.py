import unittest
from slk581.utils import sanitize_name, normalize_sex


class TestSanitizeName(unittest.TestCase):
    """Test the sanitize_name function, especially character removal."""

    def test_uppercase(self):
        """Test that names are upper-cased."""
        self.assertEqual(sanitize_name("Smith"), "SMITH")
        self.assertEqual(sanitize_name("smith"), "SMITH")
        self.assertEqual(sanitize_name("SmItH"), "SMITH")

    def test_spaces_and_apostrophes(self):
        """Test that spaces, hyphens and apostrophes are removed."""
        self.assertEqual(sanitize_name("O'Connor"), "OCONNOR")
        self.assertEqual(sanitize_name("Van Der Berg"), "VANDERBERG")
        self.assertEqual(sanitize_name("O-B"), "OB")
        self.assertEqual(sanitize_name("O'Ber"), "OBER")
        self.assertEqual(sanitize_name("O Bare"), "OBARE")

    def test_accents_are_dropped(self):
        """Test that accented letters are dropped, not transliterated."""
        self.assertEqual(sanitize_name("José"), "JOS")
        self.assertEqual(sanitize_name("Müller"), "MLLER")
        self.assertEqual(sanitize_name("Niccolò"), "NICCOL")

    def test_numbers_and_special_chars(self):
        """Test that numbers and other characters are removed."""
        self.assertEqual(sanitize_name("Smith2"), "SMITH")
        self.assertEqual(sanitize_name("Jean-Claude"), "JEANCLAUDE")
        self.assertEqual(sanitize_name("123"), "")

    def test_empty(self):
        """Test edge cases with empty strings."""
        self.assertEqual(sanitize_name(""), "")
        self.assertEqual(sanitize_name("   "), "")


class TestNormalizeSex(unittest.TestCase):
    """Test the normalize_sex function."""

    def test_case_folding(self):
        self.assertEqual(normalize_sex("MaLe"), "male")
        self.assertEqual(normalize_sex("F"), "f")

    def test_whitespace_is_kept(self):
        self.assertEqual(normalize_sex(" M "), " m ")

    def test_empty(self):
        self.assertEqual(normalize_sex(""), "")


if __name__ == '__main__':
    unittest.main()
