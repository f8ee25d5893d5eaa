"""
Tests for the SLK581 command line entrypoint
"""

import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from slk581.main import main, build_parser


class TestMain(unittest.TestCase):
    """Test cases for main()."""

    def _run(self, argv):
        out = io.StringIO()
        with patch('slk581.main.setup_logging'), redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_encodes_record(self):
        """Test that the key is printed on stdout."""
        code, out = self._run(['--family-name', 'Doe', '--given-name', 'John',
                               '--dob', '2000-12-19', '--sex', 'm'])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "OE2OH191220001")

    def test_omitted_options_are_unknown(self):
        """Test that omitted names and sex use placeholders."""
        code, out = self._run(['--dob', '2000-12-19'])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "99999191220003")

    def test_encoding_error(self):
        """Test that encoding errors are logged and exit with status 1."""
        with self.assertLogs(level='ERROR') as logs:
            code, out = self._run(['--dob', '2000-12-19', '--sex', 'test'])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Unsupported sex: 'test'", logs.output[0])

    def test_missing_dob(self):
        """Test that a missing date of birth is reported."""
        with self.assertLogs(level='ERROR') as logs:
            code, _ = self._run([])
        self.assertEqual(code, 1)
        self.assertIn("Unknown date of birth.", logs.output[0])

    def test_parser_defaults(self):
        """Test parser defaults."""
        args = build_parser().parse_args([])
        self.assertIsNone(args.family_name)
        self.assertIsNone(args.given_name)
        self.assertIsNone(args.dob)
        self.assertIsNone(args.sex)
        self.assertFalse(args.verbose)


if __name__ == "__main__":
    unittest.main()
