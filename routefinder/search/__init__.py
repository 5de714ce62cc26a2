"""
This module provides the prefix search index for named locations.
"""

from .records import LocationRecord
from .trie import Trie, normalize
