"""Generate extraction patterns from a localization usage example."""

from dataclasses import dataclass
from typing import Callable, List

from ..utils.logging import get_logger

logger = get_logger().get_logger('pattern_generator')

# Quoted literal body: anything but an unescaped quote
_LITERAL = r'((?:[^"\\]|\\.)+)'
# Comment body; may be empty, in which case the key doubles as the comment
_COMMENT = r'((?:[^"\\]|\\.)*)'


@dataclass(frozen=True)
class PatternTemplate:
    """A canned pattern and the rule deciding whether an example uses it."""
    name: str
    pattern: str
    applies: Callable[[str], bool]


class PatternGenerator:
    """
    Turns one usage snippet into the regex patterns that match its call shape.

    Detection is substring based, not a parse. An example can match more
    than one template (NSLocalizedString also matches the generic
    ``*LocalizedString`` template); every matching template is returned,
    in template order.
    """

    TEMPLATES = [
        # "key".localized(comment: "comment")
        PatternTemplate(
            name='localized_comment_label',
            pattern=rf'"{_LITERAL}"\s*\.localized\s*\(\s*comment:\s*"{_COMMENT}"\)',
            applies=lambda ex: '.localized(comment:' in ex,
        ),
        # "key".localized("comment")
        PatternTemplate(
            name='localized_comment',
            pattern=rf'"{_LITERAL}"\s*\.localized\s*\(\s*"{_COMMENT}"\)',
            applies=lambda ex: '.localized(' in ex and '"' in ex and 'comment:' not in ex,
        ),
        # "key".localized
        PatternTemplate(
            name='localized',
            pattern=rf'"{_LITERAL}"\s*\.localized',
            applies=lambda ex: '.localized' in ex and '(' not in ex,
        ),
        # XLocalizedString("key", defaultValue: "Key", comment: "c"); only the key is required
        PatternTemplate(
            name='any_localized_string',
            pattern=(
                rf'[A-Za-z_][\w]*LocalizedString\(\s*"{_LITERAL}"'
                r'(?:\s*,\s*defaultValue:\s*"(?:[^"\\]|\\.)*")?'
                rf'(?:\s*,\s*comment:\s*"{_COMMENT}")?\s*\)'
            ),
            applies=lambda ex: 'LocalizedString(' in ex,
        ),
        # NSLocalizedString("key")
        PatternTemplate(
            name='ns_localized_string',
            pattern=rf'NSLocalizedString\(\s*"{_LITERAL}"\s*\)',
            applies=lambda ex: 'NSLocalizedString' in ex and 'comment:' not in ex,
        ),
        # NSLocalizedString("key", comment: "comment")
        PatternTemplate(
            name='ns_localized_string_comment',
            pattern=rf'NSLocalizedString\(\s*"{_LITERAL}"\s*,\s*comment:\s*"{_COMMENT}"\s*\)',
            applies=lambda ex: 'NSLocalizedString' in ex and 'comment:' in ex,
        ),
        # SwiftGen-style L10n.section.key
        PatternTemplate(
            name='l10n_path',
            pattern=r'L10n\.([a-zA-Z0-9_.]+)',
            applies=lambda ex: 'L10n.' in ex,
        ),
    ]

    @classmethod
    def generate_patterns(cls, example: str) -> List[str]:
        """
        Generate the patterns matching a usage example.

        Args:
            example: A sample of how localization is used in the codebase

        Returns:
            List of regex patterns; empty when no template applies, in which
            case the caller falls back to its default patterns
        """
        normalized = example.strip()
        patterns = [t.pattern for t in cls.TEMPLATES if normalized and t.applies(normalized)]

        if not patterns:
            logger.warning(f"Could not auto-detect localization format from example: {example!r}")

        return patterns

    @classmethod
    def generate_or_default(cls, example: str, defaults: List[str]) -> List[str]:
        """Generated patterns, or ``defaults`` when the example matched nothing."""
        return cls.generate_patterns(example) or list(defaults)
