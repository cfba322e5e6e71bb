from __future__ import annotations

from typing import Any, Iterator


class TSTNode:
    __slots__ = ("char", "lo", "mid", "hi", "value")

    def __init__(self, char: str):
        self.char = char
        self.lo: TSTNode | None = None
        self.mid: TSTNode | None = None
        self.hi: TSTNode | None = None
        self.value: Any = None


def _check_key(key: str | None, op: str):
    if key is None:
        raise ValueError(f"{op}() called with None")
    if len(key) == 0:
        raise ValueError(f"{op}() key must have length >= 1")


class TernarySearchTrie:
    """String symbol table backed by a ternary search trie.

    Each node holds one character; ``lo``/``hi`` route by character order and
    ``mid`` continues the same key one position deeper. A node with a value
    marks the end of a stored key.
    """

    def __init__(self):
        self.root: TSTNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def insert(self, key: str, value: Any = True):
        _check_key(key, "insert")
        if value is None:
            raise ValueError("insert() value must not be None")

        if self.root is None:
            self.root = TSTNode(key[0])
        node = self.root
        d = 0
        last = len(key) - 1
        while True:
            ch = key[d]
            if ch < node.char:
                if node.lo is None:
                    node.lo = TSTNode(ch)
                node = node.lo
            elif ch > node.char:
                if node.hi is None:
                    node.hi = TSTNode(ch)
                node = node.hi
            elif d < last:
                d += 1
                if node.mid is None:
                    node.mid = TSTNode(key[d])
                node = node.mid
            else:
                if node.value is None:
                    self._size += 1
                node.value = value
                return

    def get(self, key: str) -> Any:
        _check_key(key, "get")
        node = self._find(key)
        return None if node is None else node.value

    def contains(self, key: str) -> bool:
        _check_key(key, "contains")
        return self.get(key) is not None

    def has_prefix(self, prefix: str) -> bool:
        """True if at least one stored key starts with ``prefix``."""
        _check_key(prefix, "has_prefix")
        return self._find(prefix) is not None

    def longest_prefix_of(self, query: str) -> str | None:
        """Longest stored key that is a prefix of ``query``, or None."""
        if query is None:
            raise ValueError("longest_prefix_of() called with None")
        length = 0
        node = self.root
        i = 0
        while node is not None and i < len(query):
            ch = query[i]
            if ch < node.char:
                node = node.lo
            elif ch > node.char:
                node = node.hi
            else:
                i += 1
                if node.value is not None:
                    length = i
                node = node.mid
        return query[:length] if length else None

    def keys(self) -> list[str]:
        out: list[str] = []
        self._collect(self.root, [], out)
        return out

    def keys_with_prefix(self, prefix: str) -> list[str]:
        if prefix is None:
            raise ValueError("keys_with_prefix() called with None")
        if not prefix:
            return self.keys()
        node = self._find(prefix)
        if node is None:
            return []
        out: list[str] = []
        if node.value is not None:
            out.append(prefix)
        self._collect(node.mid, list(prefix), out)
        return out

    def keys_that_match(self, pattern: str) -> list[str]:
        """Keys of the same length as ``pattern``; ``.`` matches any character."""
        if pattern is None:
            raise ValueError("keys_that_match() called with None")
        out: list[str] = []
        if pattern:
            self._match(self.root, [], 0, pattern, out)
        return out

    def _find(self, key: str) -> TSTNode | None:
        # Node holding the last character of key, or None if we fall off.
        node = self.root
        d = 0
        last = len(key) - 1
        while node is not None:
            ch = key[d]
            if ch < node.char:
                node = node.lo
            elif ch > node.char:
                node = node.hi
            elif d < last:
                d += 1
                node = node.mid
            else:
                return node
        return None

    def _collect(self, node: TSTNode | None, prefix: list[str], out: list[str]):
        if node is None:
            return
        self._collect(node.lo, prefix, out)
        prefix.append(node.char)
        if node.value is not None:
            out.append("".join(prefix))
        self._collect(node.mid, prefix, out)
        prefix.pop()
        self._collect(node.hi, prefix, out)

    def _match(self, node: TSTNode | None, prefix: list[str], i: int, pattern: str, out: list[str]):
        if node is None:
            return
        ch = pattern[i]
        if ch == "." or ch < node.char:
            self._match(node.lo, prefix, i, pattern, out)
        if ch == "." or ch == node.char:
            if i == len(pattern) - 1:
                if node.value is not None:
                    out.append("".join(prefix) + node.char)
            else:
                prefix.append(node.char)
                self._match(node.mid, prefix, i + 1, pattern, out)
                prefix.pop()
        if ch == "." or ch > node.char:
            self._match(node.hi, prefix, i, pattern, out)
