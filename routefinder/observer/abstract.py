"Contains the abstract observer class for the router"
from abc import abstractmethod
from typing import Sequence

from ..routing.maneuver import Maneuver


class RouteObserver:
    "Abstract class representing an observer to route requests"

    @abstractmethod
    def on_route_success(self, start: int, end: int, path: Sequence[int]):
        "Called after the router found a path between the snapped start and end vertices"

    @abstractmethod
    def on_route_fail(self, start: int, end: int):
        "Called after the router failed to find a path between the snapped vertices"

    def on_directions(self, path: Sequence[int], maneuvers: Sequence[Maneuver]):
        "Called after a path was translated into directions"
