#!/usr/bin/env python3
"""
Road graph router package.
"""

from .maps import Graph, shortest_path
from .search import Trie, LocationRecord, normalize
from .routing import (
    route,
    directions,
    nearby,
    search_prefix,
    search_locations,
    Maneuver,
    Turn,
    parse_maneuver,
    Config,
    load_config,
    save_config,
    DEFAULT_CONFIG,
)
from .observer import RouteObserver, SimpleObserver

from ._version import (
    __title__,
    __description__,
    __url__,
    __version__,
    __author__,
    __author_email__,
    __license__,
)
