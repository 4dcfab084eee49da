"""Unit tests for the wikiroute command line interface."""

import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from wikiroute.cli import __version__, app


class TestClassifyCommand(unittest.TestCase):
    """Test the classify command."""

    def setUp(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_json_output(self):
        """Test that --json prints one object per URL."""
        result = self.runner.invoke(app, [
            "classify",
            "--json",
            "https://en.wikipedia.org/wiki/Cat",
            "https://en.wikipedia.org/w/index.php?title=Cat&diff=prev&oldid=50",
        ])

        self.assertEqual(result.exit_code, 0, result.output)
        lines = [json.loads(line) for line in result.output.strip().splitlines()]
        self.assertEqual(lines[0], {
            "input": "https://en.wikipedia.org/wiki/Cat",
            "kind": "article",
            "url": "https://en.wikipedia.org/wiki/Cat",
        })
        self.assertEqual(lines[1]["kind"], "article_diff_compare")
        self.assertIsNone(lines[1]["from_rev_id"])
        self.assertEqual(lines[1]["to_rev_id"], 50)

    def test_table_output(self):
        """Test that the default output is a table of destinations."""
        result = self.runner.invoke(app, ["classify", "https://example.com/"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("external_link", result.output)

    def test_config_file(self):
        """Test that the configuration file is applied."""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "router.yaml"
            config_path.write_text("feature_flags:\n  native_talk_pages: true\n", encoding="utf-8")

            result = self.runner.invoke(app, [
                "classify",
                "--json",
                "--config",
                str(config_path),
                "https://en.wikipedia.org/wiki/Talk:Cat",
            ])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output)["kind"], "talk")

    def test_missing_config_file(self):
        """Test that configuration errors exit with code 1."""
        result = self.runner.invoke(app, [
            "classify",
            "--config",
            "/nonexistent/router.yaml",
            "https://example.com/",
        ])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.output)


class TestOpensInBrowserCommand(unittest.TestCase):
    """Test the opens-in-browser command."""

    def setUp(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_browser_url(self):
        """Test a URL that opens in a browser."""
        result = self.runner.invoke(app, ["opens-in-browser", "https://example.com/"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), "true")

    def test_native_url(self):
        """Test a URL that opens natively."""
        result = self.runner.invoke(app, ["opens-in-browser", "https://en.wikipedia.org/wiki/Cat"])
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(result.output.strip(), "false")


class TestVersionCommand(unittest.TestCase):
    """Test the version command."""

    def test_version(self):
        """Test that the version is printed."""
        result = CliRunner().invoke(app, ["version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)


if __name__ == "__main__":
    unittest.main()
