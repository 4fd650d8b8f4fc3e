"""Data structures for series rows returned by a query."""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from seriesrows.fnv import InlineFNV64a

Scalar = Union[None, bool, int, float, str]

FIELDS = ("name", "tags", "columns", "values", "partial")


def tags_keys(tags: Optional[Mapping[str, str]]) -> List[str]:
    """Return the tag keys in ascending order."""
    if not tags:
        return []
    return sorted(tags)


def tags_hash(tags: Optional[Mapping[str, str]]) -> int:
    """
    Fingerprint a tag set.

    Keys are visited in sorted order and each key is written followed by
    its value, so the result does not depend on mapping order. Key and value
    are written without a separator: distinct tag sets such as
    {"ab": ""} and {"a": "b"} collide.

    Strings are encoded as UTF-8; lone surrogates are passed through
    rather than rejected.
    """
    h = InlineFNV64a()
    for k in tags_keys(tags):
        h.write(k.encode("utf-8", "surrogatepass"))
        h.write(tags[k].encode("utf-8", "surrogatepass"))
    return h.sum64()


@dataclass
class Row:
    """A single series result: name, tag set, columns and value tuples."""
    name: str = ""
    tags: Optional[Dict[str, str]] = None
    columns: Optional[List[str]] = None
    values: Optional[List[List[Scalar]]] = None
    partial: bool = False

    def tags_keys(self) -> List[str]:
        """Sorted list of tag keys."""
        return tags_keys(self.tags)

    def tags_hash(self) -> int:
        """64-bit fingerprint of the tag set."""
        return tags_hash(self.tags)

    def same_series(self, other: "Row") -> bool:
        """
        True if other holds values for the same series as this row.

        Equality is probabilistic: two different tag sets with colliding
        fingerprints are reported as the same series.
        """
        return self.name == other.name and self.tags_hash() == other.tags_hash()

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping of the row, omitting empty fields."""
        out: Dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.tags:
            out["tags"] = dict(self.tags)
        if self.columns:
            out["columns"] = list(self.columns)
        if self.values:
            out["values"] = [list(v) for v in self.values]
        if self.partial:
            out["partial"] = True
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Row":
        """Build a row from a mapping produced by to_dict()."""
        if not isinstance(data, Mapping):
            raise ValueError(f"Row data must be a mapping, got {type(data).__name__}")

        unknown = set(data) - set(FIELDS)
        if unknown:
            raise ValueError(f"Unknown row fields: {', '.join(sorted(unknown))}")

        name = data.get("name", "")
        if not isinstance(name, str):
            raise ValueError(f"Row name must be a string, got {type(name).__name__}")

        partial = data.get("partial", False)
        if not isinstance(partial, bool):
            raise ValueError(f"Row partial must be a bool, got {type(partial).__name__}")

        tags = data.get("tags")
        columns = data.get("columns")
        values = data.get("values")
        return cls(
            name=name,
            tags=dict(tags) if tags is not None else None,
            columns=list(columns) if columns is not None else None,
            values=[list(v) for v in values] if values is not None else None,
            partial=partial,
        )


def same_series(a: Row, b: Row, metrics=None) -> bool:
    """Series identity test, optionally counted in self-metrics."""
    result = a.same_series(b)
    if metrics is not None:
        metrics.record_same_series(result)
    return result
