"Contains a simple RouteObserver implementation"
from typing import Sequence, NamedTuple, Optional
from .abstract import RouteObserver
from ..routing.maneuver import Maneuver


class AttemptedRoute(NamedTuple):
    """An attempted route between two vertices"""
    start: int
    end: int
    success: bool
    path: Optional[Sequence[int]]


class SimpleObserver(RouteObserver):
    """A simple observer that collects the information and can be
    queried after the routing requests are finished"""

    def __init__(self):
        self.attempted_routes = []
        self.directions = []

    def on_route_success(self, start: int, end: int, path: Sequence[int]):
        self.attempted_routes.append(AttemptedRoute(start, end, True, path))

    def on_route_fail(self, start: int, end: int):
        self.attempted_routes.append(AttemptedRoute(start, end, False, None))

    def on_directions(self, path: Sequence[int], maneuvers: Sequence[Maneuver]):
        self.directions.append(list(maneuvers))
