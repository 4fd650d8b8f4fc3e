"""Inline 64-bit FNV-1a streaming hash."""

OFFSET64 = 14695981039346656037
PRIME64 = 1099511628211
MASK64 = 0xFFFFFFFFFFFFFFFF


class InlineFNV64a:
    """
    FNV-1a accumulator that hashes bytes as they are written.

    Writes are concatenated: writing b"ab" then b"c" yields the same sum
    as writing b"abc".
    """

    __slots__ = ("_sum",)

    def __init__(self):
        self._sum = OFFSET64

    def write(self, data: bytes) -> int:
        """Feed bytes into the hash. Returns the number of bytes written."""
        h = self._sum
        for b in data:
            h ^= b
            h = (h * PRIME64) & MASK64
        self._sum = h
        return len(data)

    def sum64(self) -> int:
        """Return the current 64-bit sum."""
        return self._sum


def fnv64a(data: bytes) -> int:
    """Hash a single byte string."""
    h = InlineFNV64a()
    h.write(data)
    return h.sum64()
