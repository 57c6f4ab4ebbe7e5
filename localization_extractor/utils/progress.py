"""Progress bars for long extraction passes."""

import sys
from typing import Iterable, Iterator, Optional, TypeVar

from tqdm import tqdm

T = TypeVar('T')


class ProgressBar:
    """
    tqdm bar over the files of one extraction pass.

    The bar is silent when disabled (library and test use) and writes to
    stderr otherwise, so it never mixes with report output on stdout.

    Usage:
        for path in ProgressBar(files, desc="Extracting", unit="files"):
            extract(path)
    """

    def __init__(
        self,
        iterable: Iterable[T],
        desc: Optional[str] = None,
        total: Optional[int] = None,
        disable: bool = False,
        unit: str = 'files',
        leave: bool = True,
        file: Optional[object] = None,
    ):
        """
        Args:
            iterable: Items to iterate over (may be a lazy map over a thread pool)
            desc: Bar label
            total: Item count; taken from len() when available
            disable: Iterate without drawing anything
            unit: Unit label
            leave: Keep the finished bar on screen
            file: Output stream (default: sys.stderr)
        """
        if total is None and hasattr(iterable, '__len__'):
            total = len(iterable)  # type: ignore
        self.total = total

        self._bar = tqdm(
            iterable,
            desc=desc,
            total=total,
            unit=unit,
            leave=leave,
            disable=disable,
            file=file or sys.stderr,
        )

    def __iter__(self) -> Iterator[T]:
        try:
            yield from self._bar
        finally:
            self._bar.close()
