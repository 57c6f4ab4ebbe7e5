"""Configuration management for localization extractor."""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from .validators import LANGUAGE_DIR_SUFFIX, compile_pattern, is_language_directory

CONFIG_FILE_NAME = '.localization.yml'

# Used when no pattern is configured and none can be generated from the example
DEFAULT_PATTERNS = [
    r'"([^"]+)"\s*\n*\s*\.localized',
    r'NSLocalizedString\(\s*"([^"]+)',
]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class ProjectConfig:
    """Project configuration."""
    name: str = "Unnamed Project"
    framework: str = "swift"


@dataclass
class PathsConfig:
    """Paths configuration."""
    source: str = "."
    localization: str = "./Resources/Localization"
    exclude: List[str] = field(default_factory=lambda: [
        'build', '.build', 'DerivedData', 'Pods',
        'Carthage', 'vendor', 'node_modules'
    ])


@dataclass
class LanguagesConfig:
    """Language directories configuration."""
    directories: List[str] = field(default_factory=lambda: [
        "Base.lproj", "en.lproj", "fr.lproj", "ar.lproj"
    ])
    auto_detect: bool = False


@dataclass
class CatalogConfig:
    """Catalog file configuration."""
    file_name: str = "Localizable.strings"
    include_comments: bool = True
    backup: bool = False


@dataclass
class PatternsConfig:
    """Extraction pattern configuration."""
    regex: List[str] = field(default_factory=list)
    example: str = ""


@dataclass
class ReportsConfig:
    """Reports configuration."""
    formats: List[str] = field(default_factory=lambda: ["console"])
    output: str = "./localization_reports/"


@dataclass
class Config:
    """Main configuration class."""
    project: ProjectConfig = field(default_factory=ProjectConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    languages: LanguagesConfig = field(default_factory=LanguagesConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    patterns: PatternsConfig = field(default_factory=PatternsConfig)
    reports: ReportsConfig = field(default_factory=ReportsConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            project=ProjectConfig(**data.get('project', {})),
            paths=PathsConfig(**data.get('paths', {})),
            languages=LanguagesConfig(**data.get('languages', {})),
            catalog=CatalogConfig(**data.get('catalog', {})),
            patterns=PatternsConfig(**data.get('patterns', {})),
            reports=ReportsConfig(**data.get('reports', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'project': {
                'name': self.project.name,
                'framework': self.project.framework,
            },
            'paths': {
                'source': self.paths.source,
                'localization': self.paths.localization,
                'exclude': self.paths.exclude,
            },
            'languages': {
                'directories': self.languages.directories,
                'auto_detect': self.languages.auto_detect,
            },
            'catalog': {
                'file_name': self.catalog.file_name,
                'include_comments': self.catalog.include_comments,
                'backup': self.catalog.backup,
            },
            'patterns': {
                'regex': self.patterns.regex,
                'example': self.patterns.example,
            },
            'reports': {
                'formats': self.reports.formats,
                'output': self.reports.output,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self, raise_on_error: bool = False) -> tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []

        valid_frameworks = ['swift']
        if self.project.framework not in valid_frameworks:
            errors.append(
                f"Invalid framework '{self.project.framework}'. "
                f"Valid options: {', '.join(valid_frameworks)}"
            )

        if not Path(self.paths.source).exists():
            warnings.append(ConfigValidationWarning(
                f"Source path does not exist: {self.paths.source}"
            ))

        if not Path(self.paths.localization).exists():
            warnings.append(ConfigValidationWarning(
                f"Localization path does not exist (it will be created): {self.paths.localization}"
            ))

        if not self.catalog.file_name:
            errors.append("catalog.file_name cannot be empty")

        for directory in self.languages.directories:
            if not is_language_directory(directory):
                errors.append(
                    f"Invalid language directory: '{directory}'. "
                    f"Expected a name ending in '{LANGUAGE_DIR_SUFFIX}' (e.g., 'en{LANGUAGE_DIR_SUFFIX}')"
                )

        if not self.languages.directories and not self.languages.auto_detect:
            warnings.append(ConfigValidationWarning(
                "No language directories configured; catalogs will not be written"
            ))

        for pattern in self.patterns.regex:
            compiled, error = compile_pattern(pattern)
            if compiled is None:
                errors.append(f"Invalid pattern '{pattern}': {error}")
            elif compiled.groups > 2:
                warnings.append(ConfigValidationWarning(
                    f"Pattern has {compiled.groups} groups; only the first two are used: {pattern}"
                ))

        valid_formats = ['console', 'json', 'markdown']
        for fmt in self.reports.formats:
            if fmt not in valid_formats:
                warnings.append(ConfigValidationWarning(
                    f"Unknown report format: '{fmt}'. Valid options: {', '.join(valid_formats)}"
                ))

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings


def create_default_config(framework: str = 'swift') -> Config:
    """Create default configuration for a framework."""
    config = Config()
    config.project.framework = framework
    return config
