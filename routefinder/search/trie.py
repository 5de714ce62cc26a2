"""Contains the `Trie`, a prefix search index over location names.

Keys are normalized names: every character but ASCII letters and the space is
removed, and the rest is lower-cased. The children of a trie node are therefore
keyed by one of 27 symbols only.

Every node on the insertion path of a name collects that name, so looking up a
node answers "which names start with this prefix?". The node at the end of the
path additionally keeps the location records of all names that normalize to
exactly its key.
"""

import re
from typing import Dict, Iterable, List, Optional, Set
from .records import LocationRecord

NOT_INDEXABLE = re.compile(r"[^a-zA-Z ]")


def normalize(text: str) -> str:
    "Strips everything but ASCII letters and spaces and lower-cases the rest"
    return NOT_INDEXABLE.sub("", text).lower()


class TrieNode:
    "A single node of the trie"

    __slots__ = ["children", "names", "locations"]

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        #: Original names of every location indexed through this node
        self.names: Set[str] = set()
        #: Locations whose normalized name equals the key of this node
        self.locations: List[LocationRecord] = []


class Trie:
    """Prefix search index mapping normalized names to display names and locations

    Lookups never raise for unknown keys; absence is an empty result."""

    def __init__(self):
        self.root = TrieNode()

    def index(self, name: str, location: LocationRecord):
        """Inserts `name` and stores `location` under its normalized key

        Indexing the same name twice keeps both location records."""
        node = self.root
        node.names.add(name)
        for char in normalize(name):
            node = node.children.setdefault(char, TrieNode())
            node.names.add(name)
        node.locations.append(location)

    def _find(self, key: str) -> Optional[TrieNode]:
        node = self.root
        for char in normalize(key):
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def prefix_lookup(self, prefix: str) -> Set[str]:
        "Returns the names of all locations whose normalized name starts with `prefix`"
        node = self._find(prefix)
        if node is None:
            return set()
        return set(node.names)

    def exact_lookup(self, name: str) -> List[LocationRecord]:
        "Returns all locations whose normalized name equals the normalized `name`"
        node = self._find(name)
        if node is None:
            return []
        return list(node.locations)

    def contains(self, name: str) -> bool:
        "Tells whether at least one location is indexed under exactly this name"
        return bool(self.exact_lookup(name))

    def keys(self) -> Iterable[str]:
        "Returns every indexed display name"
        return self.prefix_lookup("")
