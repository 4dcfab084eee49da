"""Unit tests for the router configuration loader.

Tests cover:
- Defaults: no file returns built-in configuration
- Errors: missing file, invalid YAML, wrong section shapes
- Overrides: domains, feature flags, default language, project capabilities
- The shipped example configuration
"""

import tempfile
import unittest
from pathlib import Path

from wikiroute.core.config import load_router_config
from wikiroute.core.constants import IN_APP_WEB_VIEW_DOMAINS, ProjectFamily
from wikiroute.core.exceptions import ConfigError, InvalidProjectConfigError
from wikiroute.core.models import RouterConfig

EXAMPLE_CONFIG = Path(__file__).parent.parent.parent / "configs" / "router.example.yaml"


class TestLoadRouterConfig(unittest.TestCase):
    """Test load_router_config."""

    def setUp(self):
        """Create temporary directory for each test."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.temp_dir.name) / "router.yaml"

    def tearDown(self):
        """Clean up temporary directory."""
        self.temp_dir.cleanup()

    def write(self, text: str) -> Path:
        self.config_path.write_text(text, encoding="utf-8")
        return self.config_path

    def test_no_file_returns_defaults(self):
        """Test that omitting the path gives the built-in configuration."""
        config = load_router_config()
        self.assertEqual(config, RouterConfig())
        self.assertEqual(config.in_app_domains, IN_APP_WEB_VIEW_DOMAINS)
        self.assertFalse(config.native_talk_pages)
        self.assertEqual(config.default_language, "en")

    def test_missing_file_raises(self):
        """Test that a missing file raises ConfigError."""
        with self.assertRaises(ConfigError):
            load_router_config(Path(self.temp_dir.name) / "missing.yaml")

    def test_invalid_yaml_raises(self):
        """Test that malformed YAML raises ConfigError."""
        with self.assertRaises(ConfigError):
            load_router_config(self.write("feature_flags: [unclosed"))

    def test_empty_file_returns_defaults(self):
        """Test that an empty file gives the built-in configuration."""
        self.assertEqual(load_router_config(self.write("")), RouterConfig())

    def test_top_level_must_be_mapping(self):
        """Test that a list document is rejected."""
        with self.assertRaises(ConfigError):
            load_router_config(self.write("- a\n- b\n"))

    def test_overrides(self):
        """Test that every section is read."""
        path = self.write(
            "default_language: DE\n"
            "in_app_web_view:\n"
            "  domains: [Example.org, wikipedia.org]\n"
            "feature_flags:\n"
            "  native_talk_pages: true\n"
            "projects:\n"
            "  wiktionary:\n"
            "    supports_native_diff_pages: true\n"
            "  wikipedia:\n"
            "    main_namespace_goes_to_native_article_view: false\n"
        )
        config = load_router_config(str(path))

        self.assertEqual(config.default_language, "de")
        self.assertEqual(config.in_app_domains, ("example.org", "wikipedia.org"))
        self.assertTrue(config.native_talk_pages)

        wiktionary = config.project_capabilities[ProjectFamily.WIKTIONARY]
        self.assertTrue(wiktionary["supports_native_diff_pages"])
        self.assertFalse(wiktionary["supports_native_user_talk_pages"])

        wikipedia = config.project_capabilities[ProjectFamily.WIKIPEDIA]
        self.assertFalse(wikipedia["main_namespace_goes_to_native_article_view"])
        self.assertTrue(wikipedia["supports_native_diff_pages"])

    def test_invalid_domains(self):
        """Test that domains must be a list of strings."""
        with self.assertRaises(ConfigError):
            load_router_config(self.write("in_app_web_view:\n  domains: wikipedia.org\n"))
        with self.assertRaises(ConfigError):
            load_router_config(self.write("in_app_web_view:\n  domains: [1]\n"))

    def test_feature_flag_must_be_boolean(self):
        """Test that feature flags reject non-boolean values."""
        with self.assertRaises(ConfigError):
            load_router_config(self.write("feature_flags:\n  native_talk_pages: maybe\n"))

    def test_unknown_project_family(self):
        """Test that unknown families raise InvalidProjectConfigError."""
        with self.assertRaises(InvalidProjectConfigError) as ctx:
            load_router_config(self.write("projects:\n  wikifoo: {}\n"))
        self.assertIn("wikifoo", str(ctx.exception))

    def test_unknown_capability(self):
        """Test that unknown capability names are rejected."""
        with self.assertRaises(InvalidProjectConfigError):
            load_router_config(self.write("projects:\n  wikipedia:\n    supports_everything: true\n"))

    def test_capability_must_be_boolean(self):
        """Test that capability values must be booleans."""
        with self.assertRaises(InvalidProjectConfigError):
            load_router_config(
                self.write("projects:\n  wikipedia:\n    supports_native_diff_pages: 1\n")
            )

    def test_invalid_project_config_is_config_error(self):
        """Test the exception hierarchy."""
        self.assertTrue(issubclass(InvalidProjectConfigError, ConfigError))

    def test_example_config_loads(self):
        """Test that the shipped example configuration is valid."""
        config = load_router_config(EXAMPLE_CONFIG)
        self.assertIn("wikipedia.org", config.in_app_domains)
        self.assertFalse(
            config.project_capabilities[ProjectFamily.WIKTIONARY]["supports_native_diff_pages"]
        )


if __name__ == "__main__":
    unittest.main()
