"""Character-keyed prefix trie for ancestor discovery.

Terminal markers can be cleared without removing nodes, so the tree only
ever grows while membership is consumed by ``take_descendants``.
"""

from collections.abc import Callable

from perch.errors import InvalidInputError


class _TrieNode:
    """A node in the prefix trie."""

    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        # Next character -> node
        self.children: dict[str, _TrieNode] = {}
        # True while the string ending here is inserted and unclaimed
        self.terminal = False


class PrefixTrie:
    """Prefix trie over route identifiers.

    Usage::

        trie = PrefixTrie()
        trie.insert("app.projects")
        trie.take_descendants("app", lambda value: value[3] == ".")
        # -> ["app.projects"], and "app.projects" is no longer a member
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, value: str) -> None:
        """Insert *value*, marking its final node terminal."""
        if not value:
            msg = "Cannot insert an empty string into PrefixTrie"
            raise InvalidInputError(msg)

        node = self._root
        for char in value:
            child = node.children.get(char)
            if child is None:
                child = _TrieNode()
                node.children[char] = child
            node = child
        node.terminal = True

    def take_descendants(self, prefix: str, accept: Callable[[str], bool]) -> list[str]:
        """Remove and return every member under *prefix* that *accept* allows.

        Visits the whole subtree below *prefix*, not just the nearest
        members, so a grandchild whose parent was never inserted is
        returned alongside direct children.  Returns ``[]`` without
        allocating when *prefix* is not in the trie.
        """
        node = self._find(prefix)
        if node is None:
            return []

        taken: list[str] = []
        stack: list[tuple[_TrieNode, str]] = [(node, prefix)]
        while stack:
            current, value = stack.pop()
            if current.terminal and accept(value):
                current.terminal = False
                taken.append(value)
            # Reversed so children pop in insertion order
            for char, child in reversed(current.children.items()):
                stack.append((child, value + char))
        return taken

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str) or not value:
            return False
        node = self._find(value)
        return node is not None and node.terminal

    def _find(self, prefix: str) -> _TrieNode | None:
        node = self._root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node
