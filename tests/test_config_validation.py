"""Tests for configuration loading and validation."""

import pytest
from pathlib import Path
import tempfile
import yaml

from localization_extractor.utils.config import (
    CONFIG_FILE_NAME,
    DEFAULT_PATTERNS,
    Config,
    ConfigValidationError,
    ConfigValidationWarning,
    create_default_config,
)
from localization_extractor.utils.validators import compile_pattern, is_language_directory


class TestConfigValidation:
    """Test cases for Config.validate() method."""

    def test_valid_default_config(self):
        """Default config should pass validation."""
        errors, warnings = Config().validate()
        assert len(errors) == 0

    def test_invalid_framework(self):
        """Invalid framework should cause error."""
        config = Config()
        config.project.framework = "flutter"
        errors, warnings = config.validate()
        assert len(errors) == 1
        assert "Invalid framework" in errors[0]

    def test_empty_catalog_file_name(self):
        config = Config()
        config.catalog.file_name = ""
        errors, warnings = config.validate()
        assert any("file_name cannot be empty" in e for e in errors)

    def test_invalid_language_directory(self):
        """Language directories must carry the .lproj suffix."""
        config = Config()
        config.languages.directories = ["en.lproj", "fr", ".lproj"]
        errors, warnings = config.validate()
        assert len(errors) == 2
        assert all("Invalid language directory" in e for e in errors)

    def test_invalid_pattern(self):
        """A pattern that fails to compile is an error."""
        config = Config()
        config.patterns.regex = [DEFAULT_PATTERNS[0], "(unclosed"]
        errors, warnings = config.validate()
        assert len(errors) == 1
        assert "(unclosed" in errors[0]

    def test_pattern_with_many_groups_warning(self):
        config = Config()
        config.patterns.regex = [r'"(a)(b)(c)"']
        errors, warnings = config.validate()
        assert len(errors) == 0
        assert any("3 groups" in str(w) for w in warnings)

    def test_no_languages_warning(self):
        config = Config()
        config.languages.directories = []
        errors, warnings = config.validate()
        assert any("No language directories" in str(w) for w in warnings)

        config.languages.auto_detect = True
        errors, warnings = config.validate()
        assert not any("No language directories" in str(w) for w in warnings)

    def test_missing_paths_warning(self):
        config = Config()
        config.paths.source = "/definitely/not/here"
        errors, warnings = config.validate()
        assert len(errors) == 0
        assert any("Source path does not exist" in str(w) for w in warnings)

    def test_invalid_report_format_warning(self):
        """Invalid report format should produce warning."""
        config = Config()
        config.reports.formats = ['json', 'html']
        errors, warnings = config.validate()
        assert any("Unknown report format" in str(w) for w in warnings)

    def test_warnings_are_warning_objects(self):
        config = Config()
        config.paths.localization = "/definitely/not/here"
        errors, warnings = config.validate()
        assert all(isinstance(w, ConfigValidationWarning) for w in warnings)

    def test_raise_on_error(self):
        config = Config()
        config.catalog.file_name = ""
        with pytest.raises(ConfigValidationError) as exc_info:
            config.validate(raise_on_error=True)
        assert exc_info.value.errors == ["catalog.file_name cannot be empty"]


class TestConfigFile:
    """Test cases for loading and saving .localization.yml."""

    def test_missing_file_gives_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        config = Config.from_file()
        assert config.catalog.file_name == "Localizable.strings"
        assert config.languages.directories == ["Base.lproj", "en.lproj", "fr.lproj", "ar.lproj"]

    def test_load_partial_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / CONFIG_FILE_NAME
            config_path.write_text(yaml.dump({
                'paths': {'source': './App', 'localization': './App/Resources'},
                'languages': {'directories': ['en.lproj', 'de.lproj']},
                'patterns': {'regex': [r'L10n\.([a-z.]+)']},
            }))

            config = Config.from_file(config_path)

            assert config.paths.source == './App'
            assert config.languages.directories == ['en.lproj', 'de.lproj']
            assert config.patterns.regex == [r'L10n\.([a-z.]+)']
            # untouched sections keep their defaults
            assert config.catalog.include_comments is True
            assert 'Pods' in config.paths.exclude

    def test_empty_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / CONFIG_FILE_NAME
            config_path.write_text('')
            assert Config.from_file(config_path) == Config()

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / CONFIG_FILE_NAME
            config = create_default_config()
            config.catalog.backup = True
            config.patterns.regex = DEFAULT_PATTERNS
            config.save(config_path)

            loaded = Config.from_file(config_path)

            assert loaded == config
            assert loaded.patterns.regex == DEFAULT_PATTERNS

    def test_to_dict_sections(self):
        data = Config().to_dict()
        assert list(data) == ['project', 'paths', 'languages', 'catalog', 'patterns', 'reports']


class TestValidators:
    """Test cases for validator helpers."""

    @pytest.mark.parametrize('name', ['en.lproj', 'pt-BR.lproj', 'Base.lproj', 'zh-Hans.lproj'])
    def test_language_directory(self, name):
        assert is_language_directory(name)

    @pytest.mark.parametrize('name', ['', '.lproj', 'en', 'en.lproj.bak', 'values-fr'])
    def test_not_language_directory(self, name):
        assert not is_language_directory(name)

    def test_compile_pattern(self):
        compiled, error = compile_pattern(r'"([^"]+)"')
        assert compiled is not None and error is None

        compiled, error = compile_pattern('([')
        assert compiled is None and error

        assert compile_pattern('') == (None, "empty pattern")
