"""Reconcile extracted keys against an existing catalog."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .extractor import ExtractedComment


@dataclass
class ChangeSummary:
    """Key changes for one language directory. All lists are sorted."""
    language: str = ''
    new: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    changed: List[str] = field(default_factory=list)
    duplicate_format_excluded: List[str] = field(default_factory=list)

    @property
    def total_changes(self) -> int:
        return len(self.new) + len(self.missing) + len(self.changed)

    @property
    def has_changes(self) -> bool:
        return self.total_changes > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'language': self.language,
            'new': self.new,
            'missing': self.missing,
            'changed': self.changed,
            'duplicate_format_excluded': self.duplicate_format_excluded,
        }


def _comment_text(comment: Union[ExtractedComment, str, None]) -> Optional[str]:
    """Untagged comment text (the origin file is not part of the comparison)."""
    if isinstance(comment, ExtractedComment):
        return comment.text
    return comment


def analyze(
    extracted: Iterable[str],
    existing_values: Mapping[str, str],
    extracted_comments: Optional[Mapping[str, Union[ExtractedComment, str]]] = None,
    existing_comments: Optional[Mapping[str, str]] = None,
    duplicate_format_keys: Optional[Iterable[str]] = None,
    language: str = '',
) -> ChangeSummary:
    """
    Classify keys as new, missing or changed.

    - new: extracted, not in the catalog
    - missing: in the catalog, not extracted
    - changed: in both, and either the stored value (trimmed) is no longer
      the key itself (trimmed), or comment tracking is on and the stored
      comment differs from the extracted one

    Keys defined in a format-variant catalog are reported only as
    ``duplicate_format_excluded``, keeping the four lists disjoint.

    Args:
        extracted: Keys found in source code
        existing_values: Current catalog key -> value
        extracted_comments: Key -> comment from source; enables comment tracking
        existing_comments: Current catalog key -> comment
        duplicate_format_keys: Keys defined in format-variant catalogs
        language: Language directory the summary belongs to

    Returns:
        ChangeSummary with sorted key lists
    """
    excluded = set(duplicate_format_keys or ())
    extracted_set = set(extracted) - excluded
    existing_set = set(existing_values) - excluded
    stored_comments = existing_comments or {}

    changed = []
    for key in extracted_set & existing_set:
        if existing_values[key].strip() != key.strip():
            changed.append(key)
        elif extracted_comments is not None:
            # the writer falls back to the key when no comment was tracked
            expected = (_comment_text(extracted_comments.get(key)) or key).strip()
            if stored_comments.get(key) != expected:
                changed.append(key)

    return ChangeSummary(
        language=language,
        new=sorted(extracted_set - existing_set),
        missing=sorted(existing_set - extracted_set),
        changed=sorted(changed),
        duplicate_format_excluded=sorted(excluded),
    )
