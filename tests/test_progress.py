"""Tests for progress indicators."""

import io

from localization_extractor.utils.progress import ProgressBar


class TestProgressBar:
    """Test cases for ProgressBar class."""

    def test_basic_iteration(self):
        """Should iterate over all items."""
        items = ['A.swift', 'B.swift', 'C.swift']
        assert list(ProgressBar(items, disable=True)) == items

    def test_total_from_iterable(self):
        """Should get total from iterable length."""
        assert ProgressBar([1, 2, 3, 4, 5], disable=True).total == 5

    def test_explicit_total(self):
        """Should use explicit total."""
        assert ProgressBar(iter([1, 2, 3]), total=10, disable=True).total == 10

    def test_generator_without_total(self):
        """Generators have no length; total stays unknown."""
        bar = ProgressBar((i for i in range(3)), disable=True)

        assert bar.total is None
        assert list(bar) == [0, 1, 2]

    def test_disabled_no_output(self):
        stream = io.StringIO()
        list(ProgressBar(range(10), desc="Extracting", disable=True, file=stream))

        assert stream.getvalue() == ''

    def test_enabled_writes_to_file(self):
        """An enabled bar renders through tqdm to the given stream."""
        stream = io.StringIO()
        items = list(ProgressBar(range(4), desc="Extracting", unit="files", file=stream))

        assert items == [0, 1, 2, 3]
        assert 'Extracting' in stream.getvalue()
        assert '4/4' in stream.getvalue()

    def test_empty_iterable(self):
        assert list(ProgressBar([], disable=True)) == []
