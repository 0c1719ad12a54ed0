"""
Tests for the status-summary command-line driver.
"""

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from status_summary.cli import build_parser, main
from status_summary.models import ExtractionResult
from status_summary.writer import read_table

GOOD = """<item>
  <itemCode>4411</itemCode>
  <itemCode>VALVE-2</itemCode>
  <StatusHistoryRow><status>Draft</status></StatusHistoryRow>
  <StatusHistoryRow><status>Active</status></StatusHistoryRow>
</item>
"""


class TestMain(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.input_dir = self.root / "records"
        self.input_dir.mkdir()
        self.output = self.root / "summary.csv"

    def tearDown(self):
        self._tmp.cleanup()

    def run_main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_mixed_directory(self):
        (self.input_dir / "broken.xml").write_text("<item><status>", encoding="utf-8")
        (self.input_dir / "valve.xml").write_text(GOOD, encoding="utf-8")
        (self.input_dir / "ignored.txt").write_text("<item/>", encoding="utf-8")

        code, out, err = self.run_main("-i", str(self.input_dir), "-o", str(self.output))

        self.assertEqual(code, 0)
        self.assertEqual(read_table(self.output), [ExtractionResult("VALVE-2", "valve.xml", "Active")])
        self.assertIn("Error processing file", err)
        self.assertIn("broken.xml", err)
        self.assertNotIn("ignored.txt", err + out)
        self.assertIn(f"Successfully processed 1 files. Results saved to {self.output}", out)

    def test_verbose(self):
        (self.input_dir / "valve.xml").write_text(GOOD, encoding="utf-8")

        code, out, _ = self.run_main(
            "--input-dir", str(self.input_dir), "--output-file", str(self.output), "--verbose"
        )

        self.assertEqual(code, 0)
        self.assertIn("Processing file:", out)
        self.assertIn("  Item Code: VALVE-2", out)
        self.assertIn("  Status: Active", out)
        self.assertIn("Extracted 1 of 1 XML files (0 failed)", out)

    def test_empty_directory_writes_header(self):
        code, out, _ = self.run_main("-i", str(self.input_dir), "-o", str(self.output))

        self.assertEqual(code, 0)
        self.assertEqual(self.output.read_bytes(), b"itemCode,filename,status\r\n")
        self.assertIn("Successfully processed 0 files", out)

    def test_missing_input_directory(self):
        missing = self.root / "nope"
        code, out, err = self.run_main("-i", str(missing), "-o", str(self.output))

        self.assertEqual(code, 1)
        self.assertIn("doesn't exist or is not a directory", err)
        self.assertFalse(self.output.exists())
        self.assertEqual(out, "")

    def test_unreadable_input_directory(self):
        with mock.patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
            code, out, err = self.run_main("-i", str(self.input_dir), "-o", str(self.output))

        self.assertEqual(code, 1)
        self.assertIn("Error: Failed to read input directory", err)
        self.assertFalse(self.output.exists())
        self.assertEqual(out, "")

    def test_unwritable_output(self):
        (self.input_dir / "valve.xml").write_text(GOOD, encoding="utf-8")
        target = self.root / "missing" / "summary.csv"

        code, out, err = self.run_main("-i", str(self.input_dir), "-o", str(target))

        self.assertEqual(code, 1)
        self.assertIn("Error: Failed to write", err)
        self.assertNotIn("Successfully processed", out)

    def test_default_output_file(self):
        parser = build_parser()
        parsed = parser.parse_args(["-i", "records"])
        self.assertEqual(parsed.output_file, "status_output.csv")
        self.assertFalse(parsed.verbose)


if __name__ == "__main__":
    unittest.main()
