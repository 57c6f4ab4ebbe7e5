"""Tests for CLI commands."""

import json
import sys
from argparse import Namespace
from unittest.mock import patch

import pytest
import yaml

from localization_extractor.cli import (
    cmd_detect,
    cmd_extract,
    cmd_init,
    cmd_patterns,
    load_and_validate_config,
    main,
    resolve_patterns,
)
from localization_extractor.frameworks.swift import SwiftAdapter
from localization_extractor.utils.config import Config, ConfigValidationError, DEFAULT_PATTERNS
from localization_extractor.utils.logging import reset_logger


def extract_args(**overrides):
    """Namespace with every extract option at its default."""
    values = dict(
        source=None,
        localization=None,
        lang=None,
        detect=False,
        file_name=None,
        pattern=None,
        example=None,
        no_comments=False,
        dry_run=False,
        backup=False,
        json=None,
        markdown=None,
        verbose=False,
        quiet=True,
        no_threads=False,
    )
    values.update(overrides)
    return Namespace(**values)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """A project directory used as the working directory."""
    monkeypatch.chdir(tmp_path)
    source = tmp_path / 'App'
    source.mkdir()
    (source / 'HomeView.swift').write_text(
        'Text("hello".localized)\nText(NSLocalizedString("welcome", comment: "Banner"))\n',
        encoding='utf-8',
    )
    loc = tmp_path / 'Resources'
    (loc / 'en.lproj').mkdir(parents=True)
    (loc / 'fr.lproj').mkdir()
    (loc / 'en.lproj' / 'Localizable.strings').write_text('"hello" = "Hello";\n', encoding='utf-8')
    yield tmp_path
    reset_logger()


class TestCmdInit:
    """Test cases for cmd_init command."""

    def test_init_creates_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = cmd_init(Namespace(force=False))

        assert result == 0
        config_path = tmp_path / '.localization.yml'
        assert config_path.exists()
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        assert config_data['project']['framework'] == 'swift'
        assert config_data['catalog']['file_name'] == 'Localizable.strings'

    def test_init_fails_without_force_if_exists(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / '.localization.yml').write_text('existing: config')

        assert cmd_init(Namespace(force=False)) == 1
        assert (tmp_path / '.localization.yml').read_text() == 'existing: config'

    def test_init_overwrites_with_force(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / '.localization.yml').write_text('old: config')

        assert cmd_init(Namespace(force=True)) == 0
        with open(tmp_path / '.localization.yml', 'r') as f:
            config_data = yaml.safe_load(f)
        assert 'old' not in config_data


class TestLoadAndValidateConfig:
    """Test cases for load_and_validate_config."""

    def test_invalid_config_raises(self, tmp_path, monkeypatch, capfd):
        monkeypatch.chdir(tmp_path)
        (tmp_path / '.localization.yml').write_text(yaml.dump({'project': {'framework': 'react'}}))

        with pytest.raises(ConfigValidationError):
            load_and_validate_config()
        assert 'Invalid framework' in capfd.readouterr().out

    def test_skip_validation(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / '.localization.yml').write_text(yaml.dump({'project': {'framework': 'react'}}))

        assert load_and_validate_config(validate=False).project.framework == 'react'


class TestResolvePatterns:
    """Test cases for resolve_patterns."""

    def test_cli_pattern_wins(self):
        config = Config()
        config.patterns.regex = ['from-config']
        args = extract_args(pattern=['from-cli'], example='"k".localized')

        assert resolve_patterns(config, SwiftAdapter(), args) == ['from-cli']

    def test_cli_example(self):
        patterns = resolve_patterns(Config(), SwiftAdapter(), extract_args(example='L10n.home.title'))

        assert patterns == [r'L10n\.([a-zA-Z0-9_.]+)']

    def test_config_regex(self):
        config = Config()
        config.patterns.regex = ['a(b)']

        assert resolve_patterns(config, SwiftAdapter(), extract_args()) == ['a(b)']

    def test_config_example(self):
        config = Config()
        config.patterns.example = '"key".localized'

        patterns = resolve_patterns(config, SwiftAdapter(), extract_args())
        assert len(patterns) == 1

    def test_unrecognized_example_uses_defaults(self):
        config = Config()
        config.patterns.example = 'print("nothing")'

        assert resolve_patterns(config, SwiftAdapter(), extract_args()) == DEFAULT_PATTERNS

    def test_no_example_uses_defaults(self):
        config = Config()
        config.patterns.example = ''

        assert resolve_patterns(config, SwiftAdapter()) == DEFAULT_PATTERNS


class TestCmdExtract:
    """Test cases for cmd_extract command."""

    def test_extract_writes_catalogs(self, workspace):
        args = extract_args(
            source='App',
            localization='Resources',
            lang=['en.lproj', 'fr.lproj'],
            pattern=DEFAULT_PATTERNS,
        )

        assert cmd_extract(args) == 0

        en = (workspace / 'Resources' / 'en.lproj' / 'Localizable.strings').read_text(encoding='utf-8')
        fr = (workspace / 'Resources' / 'fr.lproj' / 'Localizable.strings').read_text(encoding='utf-8')
        assert '"hello" = "Hello";' in en
        assert '"welcome" = "welcome";' in fr
        # comments are on by default
        assert '/* welcome */' in fr

    def test_extract_no_comments(self, workspace):
        args = extract_args(source='App', localization='Resources', lang=['fr.lproj'], no_comments=True)

        assert cmd_extract(args) == 0
        fr = (workspace / 'Resources' / 'fr.lproj' / 'Localizable.strings').read_text(encoding='utf-8')
        assert '/* welcome */' not in fr
        assert '/* Banner */' not in fr

    def test_extract_detect_languages(self, workspace, capfd):
        args = extract_args(source='App', localization='Resources', detect=True, dry_run=True)

        assert cmd_extract(args) == 0
        assert 'en.lproj, fr.lproj' in capfd.readouterr().out

    def test_extract_dry_run(self, workspace):
        args = extract_args(source='App', localization='Resources', lang=['fr.lproj'], dry_run=True)

        assert cmd_extract(args) == 0
        assert not (workspace / 'Resources' / 'fr.lproj' / 'Localizable.strings').exists()

    def test_extract_uses_config_file(self, workspace):
        config = Config()
        config.paths.source = 'App'
        config.paths.localization = 'Resources'
        config.languages.directories = ['fr.lproj']
        config.catalog.file_name = 'Main.strings'
        config.catalog.include_comments = False
        config.save()

        assert cmd_extract(extract_args()) == 0
        assert (workspace / 'Resources' / 'fr.lproj' / 'Main.strings').exists()

    def test_extract_json_and_markdown(self, workspace):
        json_path = workspace / 'out' / 'report.json'
        md_path = workspace / 'out' / 'report.md'
        args = extract_args(
            source='App',
            localization='Resources',
            lang=['en.lproj'],
            json=str(json_path),
            markdown=str(md_path),
        )

        assert cmd_extract(args) == 0

        data = json.loads(json_path.read_text(encoding='utf-8'))
        assert data['summary']['languages'] == 1
        assert data['languages'][0]['new'] == ['welcome']
        assert '| en.lproj | 1 |' in md_path.read_text(encoding='utf-8')

    def test_extract_invalid_config(self, workspace):
        (workspace / '.localization.yml').write_text(yaml.dump({'patterns': {'regex': ['(unclosed']}}))

        assert cmd_extract(extract_args(source='App', localization='Resources')) == 1

    def test_extract_missing_source(self, workspace):
        """An empty source path aborts the run."""
        (workspace / '.localization.yml').write_text(yaml.dump({'paths': {'source': ''}}))

        assert cmd_extract(extract_args(localization='Resources', lang=['en.lproj'])) == 1

    def test_extract_write_failure(self, workspace):
        (workspace / 'Resources' / 'de.lproj').write_text('', encoding='utf-8')
        args = extract_args(source='App', localization='Resources', lang=['de.lproj', 'en.lproj'])

        assert cmd_extract(args) == 1
        assert (workspace / 'Resources' / 'en.lproj' / 'Localizable.strings').exists()

    def test_extract_console_report(self, workspace, capfd):
        args = extract_args(source='App', localization='Resources', lang=['en.lproj'], verbose=True)

        cmd_extract(args)

        out = capfd.readouterr().out
        assert 'LOCALIZATION EXTRACTION REPORT' in out
        assert 'en.lproj' in out


class TestCmdDetect:
    """Test cases for cmd_detect command."""

    def test_detect_lists_directories(self, workspace, capfd):
        (workspace / 'Resources' / 'notes').mkdir()

        assert cmd_detect(Namespace(localization='Resources')) == 0

        out = capfd.readouterr().out
        assert 'en.lproj' in out
        assert 'fr.lproj' in out
        assert 'notes' not in out

    def test_detect_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert cmd_detect(Namespace(localization=str(tmp_path))) == 1


class TestCmdPatterns:
    """Test cases for cmd_patterns command."""

    def test_prints_generated_patterns(self, capfd):
        assert cmd_patterns(Namespace(example='"hello".localized(comment: "Hello comment")')) == 0

        out = capfd.readouterr().out
        assert 'localized' in out

    def test_unrecognized_example(self, capfd):
        assert cmd_patterns(Namespace(example='print("x")')) == 1

        out = capfd.readouterr().out
        assert 'Could not auto-detect' in out
        assert DEFAULT_PATTERNS[1] in out


class TestMain:
    """Test cases for main entry point."""

    def test_no_command_prints_help(self, capfd):
        with patch.object(sys, 'argv', ['localization-extractor']):
            assert main() == 0
        assert 'usage' in capfd.readouterr().out.lower()

    def test_patterns_command(self):
        with patch.object(sys, 'argv', ['localization-extractor', 'patterns', 'NSLocalizedString("k")']):
            assert main() == 0

    def test_version(self, capfd):
        with patch.object(sys, 'argv', ['localization-extractor', '--version']):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0
        assert 'localization-extractor' in capfd.readouterr().out

    def test_extract_command_dispatch(self, workspace):
        argv = ['localization-extractor', 'extract', '--source', 'App', '--localization', 'Resources',
                '--lang', 'fr.lproj', '--dry-run', '--quiet', '--no-threads']
        with patch.object(sys, 'argv', argv):
            assert main() == 0
