"""Row collections and their deterministic ordering."""
import logging
from typing import Tuple

from seriesrows.series import Row

logger = logging.getLogger(__name__)


def row_sort_key(row: Row) -> Tuple[str, int]:
    """Sort key: name first, then tag set fingerprint."""
    return row.name, row.tags_hash()


def compare_rows(a: Row, b: Row) -> int:
    """Three-way comparison of two rows, consistent with Rows.less."""
    ka, kb = row_sort_key(a), row_sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


class Rows(list):
    """
    A collection of rows.

    Besides being a list, Rows exposes the len/less/swap primitives needed to
    drive any in-place comparison sort.
    """

    def len(self) -> int:
        """Number of rows."""
        return len(self)

    def less(self, i: int, j: int) -> bool:
        """True if row i sorts before row j."""
        a, b = self[i], self[j]
        # Sort by name first.
        if a.name != b.name:
            return a.name < b.name

        # Tags have no meaningful order, so fall back to the fingerprint.
        # This only exists to give a reproducible order.
        return a.tags_hash() < b.tags_hash()

    def swap(self, i: int, j: int) -> None:
        """Exchange rows i and j."""
        self[i], self[j] = self[j], self[i]

    def sort_series(self, stable: bool = True, metrics=None) -> "Rows":
        """Sort in place by (name, fingerprint). Returns self."""
        sort_rows(self, stable=stable, metrics=metrics)
        return self


def _sift_down(rows: Rows, lo: int, hi: int) -> None:
    root = lo
    while True:
        child = 2 * root + 1
        if child >= hi:
            return
        if child + 1 < hi and rows.less(child, child + 1):
            child += 1
        if not rows.less(root, child):
            return
        rows.swap(root, child)
        root = child


def heap_sort(rows: Rows) -> None:
    """
    In-place heapsort using only len, less and swap.

    Not stable: rows of the same series may come out in any order.
    """
    n = rows.len()
    for i in range((n - 1) // 2, -1, -1):
        _sift_down(rows, i, n)
    for i in range(n - 1, -1, -1):
        rows.swap(0, i)
        _sift_down(rows, 0, i)


def sort_rows(rows: Rows, stable: bool = True, metrics=None) -> None:
    """
    Sort rows in place by name, then by tag set fingerprint.

    The stable path keeps the input order of rows from the same series
    (e.g. partial fragments). The unstable path is heap_sort.
    """
    algorithm = "stable" if stable else "heap"
    logger.debug(f"Sorting {len(rows)} rows ({algorithm})")

    if stable:
        rows.sort(key=row_sort_key)
    else:
        heap_sort(rows)

    if metrics is not None:
        metrics.record_sort(algorithm, len(rows))

