"""In-memory series rows with deterministic identity and ordering."""
from seriesrows.fnv import InlineFNV64a
from seriesrows.rows import Rows, compare_rows, heap_sort, row_sort_key, sort_rows
from seriesrows.series import Row, same_series, tags_hash

__all__ = [
    "InlineFNV64a",
    "Row",
    "Rows",
    "compare_rows",
    "heap_sort",
    "row_sort_key",
    "same_series",
    "sort_rows",
    "tags_hash",
]
